from .domain import check_x, in_domain
from .base_class import UnivariateFunction, AnalyticFunction
from .callable_function import FunctionAdapter
from .simple_functions import (
    Constant,
    Polynomial,
    Quadratic,
    Exponential,
    Sine,
    SquareRoot,
    GaussianDensity,
)

__all__ = [
    "check_x",
    "in_domain",
    "UnivariateFunction",
    "AnalyticFunction",
    "FunctionAdapter",
    "Constant",
    "Polynomial",
    "Quadratic",
    "Exponential",
    "Sine",
    "SquareRoot",
    "GaussianDensity",
]
