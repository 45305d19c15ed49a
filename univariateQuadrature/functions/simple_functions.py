from typing import Sequence
import numpy as np
from numpy.polynomial import Polynomial as _NumpyPolynomial
from scipy import stats

from .base_class import AnalyticFunction


class Constant(AnalyticFunction):
    def __init__(self, c: float = 1.0, lower_x=None, upper_x=None):
        """
        f(x) = c

        Parameters
        ----------
        c : float
            the constant value
        lower_x, upper_x : float, optional
            the domain bounds, unrestricted by default
        """
        super().__init__(lower_x, upper_x)
        self.c = float(c)

    def _value(self, x):
        return np.full_like(x, self.c)

    def antiderivative(self, x):
        return self.c * np.asarray(x, dtype=float)

    def formula(self) -> str:
        return f'f(x)={self.c}'


class Polynomial(AnalyticFunction):
    def __init__(self, coefficients: Sequence[float],
                 lower_x=None, upper_x=None):
        """
        f(x) = a_0 + a_1 * x + ... + a_n * x^n

        Parameters
        ----------
        coefficients : sequence of float
            [a_0, a_1, ..., a_n], in order of increasing degree
        lower_x, upper_x : float, optional
            the domain bounds, unrestricted by default
        """
        super().__init__(lower_x, upper_x)
        coefficients = np.asarray(coefficients, dtype=float)
        if coefficients.ndim != 1 or coefficients.shape[0] == 0:
            raise ValueError('coefficients must be a non-empty '
                             'one dimensional sequence, '
                             f'got shape {coefficients.shape}')
        self.coefficients = coefficients
        self._poly = _NumpyPolynomial(coefficients)
        self._primitive = self._poly.integ()

    def _value(self, x):
        return self._poly(x)

    def antiderivative(self, x):
        return self._primitive(np.asarray(x, dtype=float))

    def formula(self) -> str:
        formula = 'f(x)='
        for power, a in enumerate(self.coefficients):
            if a < 0:
                formula += '-'
            elif power > 0:
                formula += '+'

            if power == 0:
                formula += f'{abs(a)}'
            elif power == 1:
                formula += f'{abs(a)}*x'
            else:
                formula += f'{abs(a)}*x^{power}'
        return formula


class Quadratic(Polynomial):
    def __init__(self, a: float = 1.0, c: float = 0.0,
                 lower_x=None, upper_x=None):
        """
        f(x) = a * x^2 + c
        """
        super().__init__([c, 0.0, a], lower_x, upper_x)
        self.a = float(a)
        self.c = float(c)

    def formula(self) -> str:
        sign = '-' if self.c < 0 else '+'
        return f'f(x)={self.a}*x^2{sign}{abs(self.c)}'


class Exponential(AnalyticFunction):
    def __init__(self, a: float = 1.0, b: float = 1.0,
                 lower_x=None, upper_x=None):
        """
        f(x) = a * exp(b * x), b must be non zero
        """
        super().__init__(lower_x, upper_x)
        if b == 0:
            raise ValueError('b must be non zero, use Constant instead')
        self.a = float(a)
        self.b = float(b)

    def _value(self, x):
        return self.a * np.exp(self.b * x)

    def antiderivative(self, x):
        return self.a / self.b * np.exp(self.b * np.asarray(x, dtype=float))

    def formula(self) -> str:
        return f'f(x)={self.a}*exp({self.b}*x)'


class Sine(AnalyticFunction):
    def __init__(self, a: float = 1.0, w: float = 1.0, phi: float = 0.0,
                 lower_x=None, upper_x=None):
        """
        f(x) = a * sin(w * x + phi), w must be non zero
        """
        super().__init__(lower_x, upper_x)
        if w == 0:
            raise ValueError('w must be non zero, use Constant instead')
        self.a = float(a)
        self.w = float(w)
        self.phi = float(phi)

    def _value(self, x):
        return self.a * np.sin(self.w * x + self.phi)

    def antiderivative(self, x):
        x = np.asarray(x, dtype=float)
        return -self.a / self.w * np.cos(self.w * x + self.phi)

    def formula(self) -> str:
        return f'f(x)={self.a}*sin({self.w}*x+{self.phi})'


class SquareRoot(AnalyticFunction):
    def __init__(self, a: float = 1.0, lower_x=0.0, upper_x=None):
        """
        f(x) = a * sqrt(x), only defined for x >= 0

        The derivative is unbounded at 0, so integrators converge
        noticeably slower on intervals touching 0.
        """
        super().__init__(lower_x, upper_x)
        if lower_x is None or self._lower_x < 0:
            raise ValueError(f'lower_x must be at least 0, got {lower_x}')
        self.a = float(a)

    def _value(self, x):
        return self.a * np.sqrt(x)

    def antiderivative(self, x):
        return 2.0 * self.a / 3.0 * np.asarray(x, dtype=float) ** 1.5

    def formula(self) -> str:
        return f'f(x)={self.a}*sqrt(x)'


class GaussianDensity(AnalyticFunction):
    def __init__(self, mu: float = 0.0, sigma: float = 1.0,
                 lower_x=None, upper_x=None):
        """
        Density of the normal distribution N(mu, sigma^2)

        Parameters
        ----------
        mu : float
            the mean
        sigma : float
            the standard deviation, must be positive
        """
        super().__init__(lower_x, upper_x)
        if sigma <= 0:
            raise ValueError(f'sigma must be positive, got {sigma}')
        self.mu = float(mu)
        self.sigma = float(sigma)
        self._d = stats.norm(loc=self.mu, scale=self.sigma)

    def _value(self, x):
        return self._d.pdf(x)

    def antiderivative(self, x):
        return self._d.cdf(x)

    def formula(self) -> str:
        return (f'f(x)=exp(-(x-{self.mu})^2/(2*{self.sigma}^2))'
                f'/({self.sigma}*sqrt(2*pi))')
