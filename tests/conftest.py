import pytest
import univariateQuadrature as uq


class Identity(uq.UnivariateFunction):
    """f(x) = x, unrestricted and evaluated point by point"""

    def evaluate(self, x):
        return x

    def formula(self):
        return 'f(x)=x'


@pytest.fixture
def identity():
    return Identity()


@pytest.fixture
def restricted_constant():
    """f(x) = 2 declared on [0, 10]"""
    return uq.functions.Constant(2.0, lower_x=0.0, upper_x=10.0)


@pytest.fixture
def restricted_quadratic():
    """f(x) = x^2 + 1 declared on [0, 10]"""
    return uq.functions.Quadratic(a=1.0, c=1.0, lower_x=0.0, upper_x=10.0)


@pytest.fixture(params=['identity', 'restricted_constant'])
def function(request, identity, restricted_constant):
    """
    "Meta" fixture to parametrize over a point by point
    and a vectorized function
    """
    switch = {
        'identity': identity,
        'restricted_constant': restricted_constant,
    }
    return switch[request.param]
