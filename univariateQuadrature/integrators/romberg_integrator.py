from .base_class import Integrator
from .trapezoid_integrator import trapezoid_stage


class RombergIntegrator(Integrator):
    """
    Romberg integration: Richardson extrapolation of the
    trapezoid stages, keeping one row of the Romberg table.

    Converges very fast for smooth functions, the last entry
    of row n has error of order 4^(-n(n+1)).
    """
    MAX_ITERATIONS = 32

    def _integrate(self, run, verbose):
        current_row = [trapezoid_stage(run, 0)]
        old_s = current_row[0]
        self._check_stage(old_s, 0, verbose)

        for i in range(1, self.max_iterations + 1):
            previous_row = current_row
            current_row = [trapezoid_stage(run, i, previous_row[0])]
            for j in range(1, i + 1):
                r = 4 ** j - 1
                t = current_row[j - 1]
                current_row.append(t + (t - previous_row[j - 1]) / r)

            s = current_row[i]
            self._check_stage(s, i, verbose)
            if i >= self.min_iterations and self._has_converged(old_s, s):
                return s, i
            old_s = s
        raise self._max_iterations_exceeded()
