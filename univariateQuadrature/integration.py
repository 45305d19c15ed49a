"""
Integration of univariate functions over explicit bounds
or over their own declared domain.

Every call constructs a fresh integrator, so calls are
independent of each other. Errors raised by the integrators
(IntervalError, MaxCountExceededError, IntegrationError)
are not caught here.
"""
from enum import Enum
from typing import Union

from .integrators import (
    Integrator,
    MidpointIntegrator,
    RombergIntegrator,
    SimpsonIntegrator,
    TrapezoidIntegrator,
    MAX_EVAL,
)
from .utils import ResultDict


class IntegrationRule(Enum):
    MIDPOINT = "midpoint"
    ROMBERG = "romberg"
    SIMPSON = "simpson"
    TRAPEZOID = "trapezoid"

    def integrator(self) -> Integrator:
        """a new integrator instance implementing this rule"""
        return _INTEGRATORS[self]()


_INTEGRATORS = {
    IntegrationRule.MIDPOINT: MidpointIntegrator,
    IntegrationRule.ROMBERG: RombergIntegrator,
    IntegrationRule.SIMPSON: SimpsonIntegrator,
    IntegrationRule.TRAPEZOID: TrapezoidIntegrator,
}


def resolve_bounds(function, lower_x=None, upper_x=None):
    """
    Fill in omitted integration bounds with the
    declared domain bounds of function
    """
    if lower_x is None:
        lower_x = function.lower_x()
    if upper_x is None:
        upper_x = function.upper_x()
    return lower_x, upper_x


def integrate(function, lower_x=None, upper_x=None,
              rule: Union[IntegrationRule, str] = IntegrationRule.SIMPSON,
              max_eval: int = MAX_EVAL,
              return_N: bool = False) -> Union[float, ResultDict]:
    """
    Numerical integral of function over [lower_x, upper_x]

    Parameters
    ----------
    function : UnivariateFunction
        any object providing evaluate, lower_x and upper_x
    lower_x, upper_x : float, optional
        the integration bounds, omitted bounds default to
        function.lower_x() and function.upper_x().
        Unrestricted functions need explicit finite bounds.
    rule : IntegrationRule or str, optional
        'midpoint', 'romberg', 'simpson' or 'trapezoid'.
        Default is IntegrationRule.SIMPSON
    max_eval : int, optional
        maximal number of function evaluations.
        Default is MAX_EVAL (effectively unbounded)
    return_N : bool, optional
        If True, return the whole result of the integrator
        (estimate, n_iterations, n_evals) instead of a float.

    Return
    ------
    float or ResultDict
    """
    rule = IntegrationRule(rule)
    lower_x, upper_x = resolve_bounds(function, lower_x, upper_x)
    integrator = rule.integrator()
    result = integrator(function, lower_x, upper_x,
                        max_eval=max_eval, return_N=return_N)
    if return_N:
        return result
    return result['estimate']


def integrate_midpoint(function, lower_x=None, upper_x=None) -> float:
    return integrate(function, lower_x, upper_x, rule=IntegrationRule.MIDPOINT)


def integrate_romberg(function, lower_x=None, upper_x=None) -> float:
    return integrate(function, lower_x, upper_x, rule=IntegrationRule.ROMBERG)


def integrate_simpson(function, lower_x=None, upper_x=None) -> float:
    return integrate(function, lower_x, upper_x, rule=IntegrationRule.SIMPSON)


def integrate_trapezoid(function, lower_x=None, upper_x=None) -> float:
    return integrate(function, lower_x, upper_x,
                     rule=IntegrationRule.TRAPEZOID)
