import time
import warnings
from traceback import print_exc
from typing import Dict, List, Optional, Union

import numpy as np

from .exceptions import IntegrationError, QuadratureWarning
from .integration import IntegrationRule, integrate, resolve_bounds


def compare_integrators(function,
                        rules: Optional[List[Union[IntegrationRule, str]]] = None,
                        lower_x: Optional[float] = None,
                        upper_x: Optional[float] = None,
                        answer: Optional[float] = None,
                        verbose: int = 1,
                        n_repeat: int = 1) -> Dict[str, dict]:
    """
    Compare different integration rules on a given function.

    It will print for each rule:
    - Estimated integral value
    - The signed relative error  (estimate - answer) / answer
        (unless answer is 0,
        in which case signed absolute error will be used)
    - Number of function evaluations
    - Time taken in seconds

    Parameters
    ----------
    function : UnivariateFunction
        the function to be integrated
    rules : List[IntegrationRule or str], optional
        the rules to compare. Default is all of IntegrationRule
    lower_x, upper_x : float, optional
        the integration bounds, default to the declared domain
    answer : float, optional
        the true value of the integral. If None,
        function.exact_integral is used when available
    verbose : int, optional
        If 0, print no message;
        if 1, print the summaries and failures.
        Default is 1.
    n_repeat : int, optional
        Number of times to repeat the integration and average the results.
        Default is 1.

    Return
    ------
    dict
        rule name -> dict with keys 'estimate', 'n_evals', 'time'
        and 'error' (None if no answer is known)
    """
    if rules is None:
        rules = list(IntegrationRule)
    rules = [IntegrationRule(rule) for rule in rules]
    lower_x, upper_x = resolve_bounds(function, lower_x, upper_x)

    if answer is None and hasattr(function, 'exact_integral'):
        answer = function.exact_integral(lower_x, upper_x)
    if answer is None:
        warnings.warn('no answer available, errors will not be reported',
                      QuadratureWarning)

    summaries = {}
    for rule in rules:
        estimates = []
        n_evals_list = []
        times = []

        for _ in range(n_repeat):
            start_time = time.time()
            try:
                result = integrate(function, lower_x, upper_x,
                                   rule=rule, return_N=True)
            except IntegrationError as e:
                if verbose >= 1:
                    print(f'Error during integration with {rule.value}: {e}')
                    print_exc()
                continue
            end_time = time.time()

            estimates.append(result['estimate'])
            n_evals_list.append(result['n_evals'])
            times.append(end_time - start_time)

        if len(estimates) == 0:
            continue

        avg_estimate = float(np.mean(estimates))
        avg_n_evals = float(np.mean(n_evals_list))
        avg_time = float(np.mean(times))

        if answer is None:
            error, error_name = None, None
        elif answer != 0:
            error = 100 * (avg_estimate - answer) / answer
            error_name = 'Signed Relative error'
        else:
            error = avg_estimate - answer
            error_name = 'Signed Absolute error'

        summaries[rule.value] = {'estimate': avg_estimate,
                                 'n_evals': avg_n_evals,
                                 'time': avg_time,
                                 'error': error}

        if verbose >= 1:
            print(f'-------- {rule.value} --------')
            print(f'Integral of {str(function)} over [{lower_x}, {upper_x}]')
            if answer is not None:
                print(f'True answer: {answer}')
            print(f'Estimated value: {avg_estimate:.8f} '
                  f'± {np.std(estimates):.2e}')
            if error_name == 'Signed Relative error':
                print(f'{error_name}: {error:.2e} %')
            elif error_name is not None:
                print(f'{error_name}: {error:.2e}')
            print(f'Number of evaluations: {avg_n_evals:.0f}')
            print(f'Time taken: {avg_time:.4f} s')
            print('----------------------------------')

    if len(summaries) == 0:
        raise IntegrationError('no integration rule succeeded')

    return summaries
