import math
import numpy as np
import univariateQuadrature as uq
from univariateQuadrature.functions import FunctionAdapter, GaussianDensity, SquareRoot

# smooth integrand, Romberg needs by far the fewest evaluations
uq.compare_integrators(GaussianDensity(0.0, 1.0), lower_x=-2.0, upper_x=2.0)

# derivative unbounded at 0, every rule converges slowly
uq.compare_integrators(SquareRoot(1.0, lower_x=0.0, upper_x=1.0))

# a plain callable with a declared domain
f = FunctionAdapter(math.log, lower_x=1.0, upper_x=math.e, formula='f(x)=ln(x)')
print(f'{f} on [{f.lower_x()}, {f.upper_x()}]:', uq.integrate_romberg(f))

try:
    f(0.5)
except uq.DomainError as e:
    print(e)

# vectorized callables are evaluated a whole stage at a time
g = FunctionAdapter(lambda x: np.exp(-x ** 2), formula='f(x)=exp(-x^2)',
                    vectorized=True)
result = uq.integrate(g, -5.0, 5.0, rule='simpson', return_N=True)
print(f"{g}: {result['estimate']} ({result['n_evals']} evaluations), "
      f"sqrt(pi) = {math.sqrt(math.pi)}")
