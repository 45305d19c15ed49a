from typing import Callable, Optional

from .base_class import UnivariateFunction
from .domain import check_x
from ..utils import handle_bound


class FunctionAdapter(UnivariateFunction):
    """
    Wrap a plain python callable so that it
    can be checked and integrated like any UnivariateFunction

    Parameters
    ----------
    f : callable
        takes x and returns f(x)
    lower_x, upper_x : float, optional
        the domain bounds, unrestricted by default
    formula : str, optional
        the analytical expression, defaults to the name of f
    vectorized : bool, optional
        whether f accepts and returns numpy arrays.
        Default is False

    Example
    -------
    >>> import math
    >>> f = FunctionAdapter(math.log, lower_x=1e-12, formula='f(x)=ln(x)')
    >>> f(1.0)
    0.0
    """

    def __init__(self, f: Callable, lower_x=None, upper_x=None,
                 formula: Optional[str] = None, vectorized: bool = False):
        if not callable(f):
            raise TypeError(f'f must be callable, got {type(f).__name__}')
        self.f = f
        self._lower_x = handle_bound(lower_x, -float('inf'))
        self._upper_x = handle_bound(upper_x, float('inf'))
        self._formula = formula
        self.vectorized = vectorized

    def evaluate(self, x):
        check_x(self, x)
        return self.f(x)

    def lower_x(self) -> float:
        return self._lower_x

    def upper_x(self) -> float:
        return self._upper_x

    def formula(self) -> str:
        if self._formula is not None:
            return self._formula
        return f'f(x)={getattr(self.f, "__name__", repr(self.f))}(x)'
