"""Exceptions for domain checking and quadrature integration."""


class QuadratureWarning(UserWarning):
    """Warning for quadrature issues (e.g., unknown reference answer)."""

    pass


class DomainError(ValueError):
    """
    Raised when an argument lies outside the declared domain
    [lower_x, upper_x] of a univariate function.

    Attributes
    ----------
    lower_x, upper_x : float
        the declared domain bounds
    x : float
        the offending value
    """

    def __init__(self, lower_x: float, upper_x: float, x: float):
        self.lower_x = lower_x
        self.upper_x = upper_x
        self.x = x
        super().__init__(
            f"Expected the parameter {lower_x} <= x <= {upper_x}, "
            f"but got x={x}"
        )


class IntegrationError(Exception):
    """Error when integration fails to produce a converged result."""

    pass


class IntervalError(IntegrationError, ValueError):
    """Error when the integration interval is degenerate or invalid."""

    pass


class MaxCountExceededError(IntegrationError):
    """Error when an iteration or evaluation ceiling is exceeded."""

    def __init__(self, name: str, max_count: int):
        self.name = name
        self.max_count = max_count
        super().__init__(f"maximal count ({max_count}) of {name} exceeded")
