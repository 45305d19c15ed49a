from .base_class import Integrator, IntegrationRun


def midpoint_stage(run: IntegrationRun, n: int, previous: float = None) -> float:
    """
    Midpoint estimate with 3^n sub-intervals.

    Tripling the number of sub-intervals keeps the midpoints of
    stage n - 1 as midpoints of stage n, so only the 2 * 3^(n-1)
    new midpoints are evaluated.
    """
    if n == 0:
        return run.width * run.value(run.lower_x + 0.5 * run.width)

    n_old = 3 ** (n - 1)
    step = run.width / (3 * n_old)
    # each old sub-interval [a, a + 3 * step] gets new
    # midpoints at a + step / 2 and a + 5 * step / 2
    total = run.sum_points(run.lower_x + 0.5 * step, 3 * step, n_old)
    total += run.sum_points(run.lower_x + 2.5 * step, 3 * step, n_old)
    return previous / 3.0 + step * total


class MidpointIntegrator(Integrator):
    """
    Midpoint rule, dividing the step by three at each stage.

    Never evaluates the end points, which makes it usable for
    functions that are not defined at the bounds themselves.
    """
    MAX_ITERATIONS = 39

    def _integrate(self, run, verbose):
        old_t = midpoint_stage(run, 0)
        self._check_stage(old_t, 0, verbose)
        for i in range(1, self.max_iterations + 1):
            t = midpoint_stage(run, i, old_t)
            self._check_stage(t, i, verbose)
            if i >= self.min_iterations and self._has_converged(old_t, t):
                return t, i
            old_t = t
        raise self._max_iterations_exceeded()
