from abc import ABC, abstractmethod
import sys
import numpy as np

from ..exceptions import IntegrationError, IntervalError, MaxCountExceededError
from ..utils import ResultDict, evaluate_points, handle_bound

# effectively unbounded number of function evaluations
MAX_EVAL = sys.maxsize
# number of points passed to a function in one vectorized call
EVAL_CHUNK_SIZE = 2 ** 16

DEFAULT_RELATIVE_ACCURACY = 1e-6
DEFAULT_ABSOLUTE_ACCURACY = 1e-15
DEFAULT_MIN_ITERATIONS = 3


class IntegrationRun:
    """
    Bookkeeping of a single integration call:
    the function, the interval and the number of evaluations.

    A new instance is created for each call, so an Integrator
    itself holds no state between calls.
    """

    def __init__(self, function, lower_x: float, upper_x: float,
                 max_eval: int):
        self.function = function
        self.lower_x = lower_x
        self.upper_x = upper_x
        self.width = upper_x - lower_x
        self.max_eval = max_eval
        self.n_evals = 0

    def _count(self, n: int) -> None:
        if self.n_evals + n > self.max_eval:
            raise MaxCountExceededError('evaluations', self.max_eval)
        self.n_evals += n

    def value(self, x: float) -> float:
        """evaluate the function at a single point"""
        self._count(1)
        return float(evaluate_points(self.function, np.array([x]))[0])

    def sum_points(self, start: float, spacing: float, n: int) -> float:
        """
        Sum of f(start + k * spacing) for k = 0, ..., n - 1,
        evaluated in chunks of at most EVAL_CHUNK_SIZE points
        """
        total = 0.0
        for offset in range(0, n, EVAL_CHUNK_SIZE):
            m = min(EVAL_CHUNK_SIZE, n - offset)
            self._count(m)
            xs = start + spacing * np.arange(offset, offset + m, dtype=float)
            total += float(np.sum(evaluate_points(self.function, xs)))
        return total


class Integrator(ABC):
    """
    Abstract base class for iterative univariate integrators.

    Each integrator refines an estimate stage by stage until
    two successive estimates s_prev, s agree, i.e.

        |s - s_prev| <= relative_accuracy * (|s| + |s_prev|) / 2
        or |s - s_prev| <= absolute_accuracy

    after at least min_iterations stages.

    Parameters
    ----------
    relative_accuracy : float, optional
        Default is 1e-6
    absolute_accuracy : float, optional
        Default is 1e-15
    min_iterations : int, optional
        minimal number of stages before convergence is checked.
        Default is 3
    max_iterations : int, optional
        maximal number of stages, defaults to (and cannot exceed)
        the cap of the rule, MAX_ITERATIONS
    """
    MAX_ITERATIONS = 64

    def __init__(self, relative_accuracy: float = DEFAULT_RELATIVE_ACCURACY,
                 absolute_accuracy: float = DEFAULT_ABSOLUTE_ACCURACY,
                 min_iterations: int = DEFAULT_MIN_ITERATIONS,
                 max_iterations: int = None):
        if max_iterations is None:
            max_iterations = self.MAX_ITERATIONS

        if relative_accuracy < 0 or absolute_accuracy < 0:
            raise ValueError('accuracies must be non-negative, got '
                             f'relative_accuracy={relative_accuracy}, '
                             f'absolute_accuracy={absolute_accuracy}')
        if min_iterations < 1:
            raise ValueError('min_iterations must be at least 1, '
                             f'got {min_iterations}')
        if max_iterations <= min_iterations:
            raise ValueError(f'max_iterations ({max_iterations}) must be '
                             f'larger than min_iterations ({min_iterations})')
        if max_iterations > self.MAX_ITERATIONS:
            raise ValueError(f'max_iterations of {type(self).__name__} '
                             f'cannot exceed {self.MAX_ITERATIONS}, '
                             f'got {max_iterations}')

        self.relative_accuracy = relative_accuracy
        self.absolute_accuracy = absolute_accuracy
        self.min_iterations = min_iterations
        self.max_iterations = max_iterations

    def __call__(self, function, lower_x: float, upper_x: float,
                 max_eval: int = MAX_EVAL, return_N: bool = False,
                 verbose: bool = False) -> ResultDict:
        """
        Integrate function over [lower_x, upper_x].

        Parameters
        ----------
        function : UnivariateFunction
            the function to be integrated, only read
        lower_x, upper_x : float
            the integration bounds, must be finite
            and satisfy lower_x <= upper_x
        max_eval : int, optional
            maximal number of function evaluations.
            Default is MAX_EVAL (effectively unbounded)
        return_N : bool, optional
            If True, return the number of evaluations used.
        verbose : bool, optional
            If True, print the estimate of each stage.

        Return
        -------
        dict
            with the following keys:
            - 'estimate' (float) : estimated integral value
            - 'n_iterations' (int) : number of stages used
            - 'n_evals' (int) : number of function evaluations,
              if return_N is True

        Raises
        ------
        IntervalError
            if a bound or the width is not finite, or lower_x > upper_x
        MaxCountExceededError
            if max_iterations or max_eval is exceeded
        IntegrationError
            if a stage estimate is not finite
        """
        lower_x, upper_x = self._verify_interval(lower_x, upper_x)
        run = IntegrationRun(function, lower_x, upper_x, max_eval)

        if lower_x == upper_x:
            estimate, n_iterations = 0.0, 0
        else:
            estimate, n_iterations = self._integrate(run, verbose)

        ret = ResultDict(float(estimate), n_iterations=n_iterations)
        if return_N:
            ret['n_evals'] = run.n_evals
        return ret

    @staticmethod
    def _verify_interval(lower_x, upper_x):
        # a missing bound becomes nan and is rejected below
        lower_x = handle_bound(lower_x, np.nan)
        upper_x = handle_bound(upper_x, np.nan)
        if not (np.isfinite(lower_x) and np.isfinite(upper_x)):
            raise IntervalError('integration bounds must be finite, '
                                f'got [{lower_x}, {upper_x}]')
        if lower_x > upper_x:
            raise IntervalError(f'lower_x ({lower_x}) must not exceed '
                                f'upper_x ({upper_x})')
        if not np.isfinite(upper_x - lower_x):
            raise IntervalError('width of the integration interval '
                                f'[{lower_x}, {upper_x}] overflows')
        return lower_x, upper_x

    @abstractmethod
    def _integrate(self, run: IntegrationRun, verbose: bool):
        """
        Refine the estimate until convergence

        Return
        ------
        tuple
            (estimate, number of stages)
        """
        pass

    def _check_stage(self, estimate: float, stage: int,
                     verbose: bool) -> None:
        if verbose:
            print(f'{type(self).__name__} stage {stage}: {estimate}')
        if not np.isfinite(estimate):
            raise IntegrationError(f'stage {stage} of {type(self).__name__} '
                                   f'produced a non-finite estimate {estimate}')

    def _has_converged(self, previous: float, current: float) -> bool:
        delta = abs(current - previous)
        r_limit = self.relative_accuracy * (abs(previous) + abs(current)) * 0.5
        return delta <= r_limit or delta <= self.absolute_accuracy

    def _max_iterations_exceeded(self):
        return MaxCountExceededError('iterations', self.max_iterations)

    def __str__(self):
        if hasattr(self, 'name'):
            return f"Integrator--{self.name}"
        else:
            return type(self).__name__
