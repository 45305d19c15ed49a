from .base_class import Integrator, IntegrationRun, MAX_EVAL
from .midpoint_integrator import MidpointIntegrator
from .romberg_integrator import RombergIntegrator
from .simpson_integrator import SimpsonIntegrator
from .trapezoid_integrator import TrapezoidIntegrator

__all__ = [
    "Integrator",
    "IntegrationRun",
    "MAX_EVAL",
    "MidpointIntegrator",
    "RombergIntegrator",
    "SimpsonIntegrator",
    "TrapezoidIntegrator",
]
