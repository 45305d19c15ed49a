import numpy as np

from ..exceptions import DomainError


def check_x(function, x) -> None:
    """
    Check that x lies in the declared domain
    [function.lower_x(), function.upper_x()]

    Parameters
    ----------
    function : UnivariateFunction
        any object providing lower_x() and upper_x()
    x : float or array-like
        the argument(s) to be checked

    Raises
    ------
    DomainError
        if x (or any entry of x) is below lower_x(), above upper_x()
        or NaN. The error reports the first offending value.
    """
    lower = float(function.lower_x())
    upper = float(function.upper_x())
    xs = np.atleast_1d(np.asarray(x, dtype=float))

    # written as a negation so that NaN counts as outside
    outside = ~((xs >= lower) & (xs <= upper))
    if np.any(outside):
        raise DomainError(lower, upper, float(xs[outside][0]))


def in_domain(function, x) -> bool:
    """Same test as check_x, returning a bool instead of raising"""
    try:
        check_x(function, x)
    except DomainError:
        return False
    return True
