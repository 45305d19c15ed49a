from . import functions, integrators
from .exceptions import (
    QuadratureWarning,
    DomainError,
    IntegrationError,
    IntervalError,
    MaxCountExceededError,
)
from .functions import UnivariateFunction, FunctionAdapter, check_x
from .integration import (
    IntegrationRule,
    integrate,
    integrate_midpoint,
    integrate_romberg,
    integrate_simpson,
    integrate_trapezoid,
)
from .compare_integrators import compare_integrators
from .utils import ResultDict
