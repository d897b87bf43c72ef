from .simulation import (
    INTEGRATOR_IDS,
    Integrator,
    Simulation,
    SymplecticEulerIntegrator,
    ThreadedSymplecticEulerIntegrator,
    integrator_from_id,
)

__all__ = [
    "INTEGRATOR_IDS",
    "Integrator",
    "Simulation",
    "SymplecticEulerIntegrator",
    "ThreadedSymplecticEulerIntegrator",
    "integrator_from_id",
]
