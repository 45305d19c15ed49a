import math
import pytest
import numpy as np

import univariateQuadrature as uq
from univariateQuadrature.functions import (
    check_x, in_domain, FunctionAdapter, Constant, Polynomial,
    Quadratic, Exponential, Sine, SquareRoot, GaussianDensity,
)


def test_contract_is_abstract():
    with pytest.raises(TypeError):
        uq.UnivariateFunction()


def test_default_domain_is_unrestricted(identity):
    assert identity.lower_x() == -np.inf
    assert identity.upper_x() == np.inf
    assert identity(3.0) == 3.0
    assert str(identity) == 'f(x)=x'


@pytest.mark.parametrize("x", [-1e300, -1.0, 0.0, 1.0, 1e300])
def test_unrestricted_never_fails(identity, x):
    check_x(identity, x)
    assert in_domain(identity, x)


@pytest.mark.parametrize("x", [0.0, 1e-12, 5.0, 10.0])
def test_check_x_inside(restricted_quadratic, x):
    check_x(restricted_quadratic, x)
    restricted_quadratic.evaluate(x)


@pytest.mark.parametrize("x", [-0.1, -1e300, 10.000001, 11.0])
def test_check_x_outside(restricted_quadratic, x):
    with pytest.raises(uq.DomainError) as excinfo:
        check_x(restricted_quadratic, x)

    message = str(excinfo.value)
    assert str(0.0) in message
    assert str(10.0) in message
    assert str(x) in message
    assert excinfo.value.lower_x == 0.0
    assert excinfo.value.upper_x == 10.0
    assert excinfo.value.x == x
    # a domain violation is an invalid argument
    assert isinstance(excinfo.value, ValueError)
    assert not in_domain(restricted_quadratic, x)


def test_evaluate_checks_domain(restricted_quadratic):
    with pytest.raises(uq.DomainError):
        restricted_quadratic.evaluate(-1.0)


def test_check_x_array(restricted_quadratic):
    check_x(restricted_quadratic, np.linspace(0, 10, 11))

    with pytest.raises(uq.DomainError) as excinfo:
        check_x(restricted_quadratic, [1.0, 2.0, 11.0, -1.0])
    assert excinfo.value.x == 11.0


def test_check_x_nan(identity):
    with pytest.raises(uq.DomainError):
        check_x(identity, float('nan'))


def test_inverted_domain_always_fails():
    f = FunctionAdapter(lambda x: x, lower_x=1.0, upper_x=0.0)
    for x in [-1.0, 0.0, 0.5, 1.0, 2.0]:
        with pytest.raises(uq.DomainError):
            check_x(f, x)


def test_function_adapter():
    f = FunctionAdapter(math.sqrt, lower_x=0.0)
    assert f.lower_x() == 0.0
    assert f.upper_x() == np.inf
    assert f(4.0) == 2.0
    assert f.formula() == 'f(x)=sqrt(x)'
    assert not f.vectorized
    with pytest.raises(uq.DomainError):
        f(-4.0)

    g = FunctionAdapter(np.exp, formula='f(x)=e^x', vectorized=True)
    assert g.vectorized
    assert str(g) == 'f(x)=e^x'
    assert g(np.zeros(3)).shape == (3,)

    with pytest.raises(TypeError):
        FunctionAdapter(1.0)


def test_formulas():
    assert Polynomial([1, 2, 3]).formula() == 'f(x)=1.0+2.0*x+3.0*x^2'
    assert Quadratic(2, 1).formula() == 'f(x)=2.0*x^2+1.0'
    assert Polynomial([1, -2, 3]).formula() == 'f(x)=1.0-2.0*x+3.0*x^2'
    assert Polynomial([-1, 2]).formula() == 'f(x)=-1.0+2.0*x'
    assert Polynomial([0, 0, -1]).formula() == 'f(x)=0.0+0.0*x-1.0*x^2'
    assert Quadratic(2, -1).formula() == 'f(x)=2.0*x^2-1.0'
    assert Constant(2).formula() == 'f(x)=2.0'
    assert Exponential(1, 2).formula() == 'f(x)=1.0*exp(2.0*x)'
    assert Sine().formula() == 'f(x)=1.0*sin(1.0*x+0.0)'
    assert SquareRoot(3).formula() == 'f(x)=3.0*sqrt(x)'
    assert 'sqrt(2*pi)' in GaussianDensity().formula()


def test_evaluate_output_types():
    f = Quadratic(1.0, 0.0)
    assert f(2.0) == 4.0
    assert isinstance(f(2.0), float)
    assert isinstance(Constant(2.0)(1.0), float)

    xs = np.array([0.0, 1.0, 2.0])
    assert np.allclose(f(xs), [0.0, 1.0, 4.0])
    assert np.allclose(Constant(2.0)(xs), [2.0, 2.0, 2.0])


@pytest.mark.parametrize("function, expected", [
    (Constant(2.0, 0, 10), 20.0),
    (Polynomial([1, 0, 3], 0, 2), 10.0),
    (Exponential(1.0, 1.0, 0, 1), math.e - 1),
    (Sine(1.0, 1.0, 0.0, 0, math.pi), 2.0),
    (SquareRoot(1.0, 0, 1), 2.0 / 3.0),
    (GaussianDensity(0.0, 1.0), 1.0),
])
def test_exact_integral(function, expected):
    assert np.isclose(function.exact_integral(), expected)


def test_invalid_parameters():
    with pytest.raises(ValueError):
        Constant(1.0, lower_x=1.0, upper_x=0.0)
    with pytest.raises(ValueError):
        Constant(1.0, lower_x='a')
    with pytest.raises(ValueError):
        Polynomial([])
    with pytest.raises(ValueError):
        Exponential(1.0, 0.0)
    with pytest.raises(ValueError):
        Sine(1.0, 0.0)
    with pytest.raises(ValueError):
        SquareRoot(1.0, lower_x=-1.0)
    with pytest.raises(ValueError):
        SquareRoot(1.0, lower_x='a')
    with pytest.raises(ValueError):
        Constant(1.0, lower_x=True)
    with pytest.raises(ValueError):
        GaussianDensity(0.0, 0.0)
