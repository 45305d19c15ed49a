from .base_class import Integrator
from .trapezoid_integrator import trapezoid_stage


class SimpsonIntegrator(Integrator):
    """
    Simpson's rule, built from successive trapezoid stages as
    s_n = (4 * t_n - t_(n-1)) / 3.

    With min_iterations=1 a single Simpson step on three points
    is returned without any convergence check.
    """
    MAX_ITERATIONS = 64

    def _integrate(self, run, verbose):
        old_t = trapezoid_stage(run, 0)
        if self.min_iterations == 1:
            t = trapezoid_stage(run, 1, old_t)
            s = (4 * t - old_t) / 3.0
            self._check_stage(s, 1, verbose)
            return s, 1

        old_s = 0.0
        for i in range(1, self.max_iterations + 1):
            t = trapezoid_stage(run, i, old_t)
            s = (4 * t - old_t) / 3.0
            self._check_stage(s, i, verbose)
            if i >= self.min_iterations and self._has_converged(old_s, s):
                return s, i
            old_s = s
            old_t = t
        raise self._max_iterations_exceeded()
