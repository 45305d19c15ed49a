from .base_class import Integrator, IntegrationRun


def trapezoid_stage(run: IntegrationRun, n: int, previous: float = None) -> float:
    """
    Trapezoid estimate with 2^n sub-intervals.

    Stage 0 uses the two end points only, stage n >= 1 adds the
    2^(n-1) midpoints of the sub-intervals of stage n - 1 and
    reuses the previous estimate.

    Parameters
    ----------
    run : IntegrationRun
        the current integration call
    n : int
        the stage
    previous : float
        estimate of stage n - 1, ignored for n = 0
    """
    if n == 0:
        return 0.5 * run.width * (run.value(run.lower_x) +
                                  run.value(run.upper_x))

    n_new = 2 ** (n - 1)
    spacing = run.width / n_new
    total = run.sum_points(run.lower_x + 0.5 * spacing, spacing, n_new)
    return 0.5 * (previous + total * spacing)


class TrapezoidIntegrator(Integrator):
    """
    Trapezoid rule, halving the step at each stage.

    Exact for linear functions; the error of stage n
    decreases as 4^(-n) for smooth functions.
    """
    MAX_ITERATIONS = 64

    def _integrate(self, run, verbose):
        old_t = trapezoid_stage(run, 0)
        self._check_stage(old_t, 0, verbose)
        for i in range(1, self.max_iterations + 1):
            t = trapezoid_stage(run, i, old_t)
            self._check_stage(t, i, verbose)
            if i >= self.min_iterations and self._has_converged(old_t, t):
                return t, i
            old_t = t
        raise self._max_iterations_exceeded()
