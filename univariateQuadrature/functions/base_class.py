from abc import ABC, abstractmethod
import numpy as np

from .domain import check_x
from ..utils import handle_bound


class UnivariateFunction(ABC):
    '''
    base class for functions from a real number to a real number,
    optionally restricted to the interval [lower_x(), upper_x()]

    Attributes
    ----------
    vectorized : bool
        if True, evaluate also accepts a one dimensional
        numpy.ndarray and returns an array of the same shape,
        so integrators can evaluate a whole stage at once

    Methods
    -------
    evaluate(x)
        the value of the function at x
        MUST be implemented by subclasses
    formula()
        the analytical expression as a string, e.g. 'f(x)=a*x^2+c'
        MUST be implemented by subclasses
    lower_x(), upper_x()
        the domain bounds, unrestricted by default

    Notes
    -----
    lower_x() and upper_x() must not change during the lifetime
    of an instance. Integration with omitted bounds reads them
    once per call and assumes they are fixed.
    '''
    vectorized = False

    @abstractmethod
    def evaluate(self, x):
        """
        must be defined, the value of the function at x

        Implementations are encouraged to call
        ``check_x(self, x)`` before computing the value.

        Argument
        --------
        x : float
            (or numpy.ndarray of shape (N,) if vectorized)

        Return
        ------
        float
            (or numpy.ndarray of shape (N,) if vectorized)
        """
        pass

    def lower_x(self) -> float:
        return -np.inf

    def upper_x(self) -> float:
        return np.inf

    @abstractmethod
    def formula(self) -> str:
        """
        must be defined, the string form of the analytical
        expression, only used for display
        """
        pass

    def __call__(self, x):
        return self.evaluate(x)

    def __str__(self) -> str:
        return self.formula()


class AnalyticFunction(UnivariateFunction):
    '''
    base class for functions with a known antiderivative,
    mostly used to check integrators against exact answers

    Methods
    -------
    antiderivative(x)
        a primitive of the function
        MUST be implemented by subclasses
    exact_integral(lower_x, upper_x)
        the exact definite integral
    '''
    vectorized = True

    def __init__(self, lower_x=None, upper_x=None):
        """
        Arguments
        ---------
        lower_x, upper_x : int or float, optional
            the domain bounds, default to -inf and inf
        """
        self._lower_x = handle_bound(lower_x, -np.inf)
        self._upper_x = handle_bound(upper_x, np.inf)
        if self._lower_x > self._upper_x:
            raise ValueError(f'lower_x ({self._lower_x}) must not exceed '
                             f'upper_x ({self._upper_x})')

    def lower_x(self) -> float:
        return self._lower_x

    def upper_x(self) -> float:
        return self._upper_x

    def evaluate(self, x):
        check_x(self, x)
        result = self._value(np.asarray(x, dtype=float))
        if np.ndim(result) == 0:
            return float(result)
        return result

    @abstractmethod
    def _value(self, x: np.ndarray) -> np.ndarray:
        pass

    @abstractmethod
    def antiderivative(self, x):
        pass

    def exact_integral(self, lower_x=None, upper_x=None) -> float:
        """
        Exact value of the integral over [lower_x, upper_x],
        omitted bounds default to the declared domain
        """
        lower_x = handle_bound(lower_x, self.lower_x())
        upper_x = handle_bound(upper_x, self.upper_x())
        return float(self.antiderivative(upper_x) -
                     self.antiderivative(lower_x))

    def __repr__(self) -> str:
        return (f'{type(self).__name__}({self.formula()}, '
                f'lower_x={self._lower_x}, upper_x={self._upper_x})')
