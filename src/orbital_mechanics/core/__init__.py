from .config import DEFAULT_CONSTANTS, GravityConstants, SimulationSettings
from .model import (
    Body,
    BodyState,
    MassPointLike,
    MovingMassPointLike,
    Vector2,
)
from .physics import (
    body_quad,
    center_of_mass,
    gravitational_acceleration,
    is_finite_state,
    kinetic_energy,
    linear_momentum,
    orthographic_projection,
    total_mass,
    translation_matrix,
)
from .sim import (
    Integrator,
    Simulation,
    SymplecticEulerIntegrator,
    ThreadedSymplecticEulerIntegrator,
    integrator_from_id,
)

__all__ = [
    "DEFAULT_CONSTANTS",
    "GravityConstants",
    "SimulationSettings",
    "Body",
    "BodyState",
    "MassPointLike",
    "MovingMassPointLike",
    "Vector2",
    "body_quad",
    "center_of_mass",
    "gravitational_acceleration",
    "is_finite_state",
    "kinetic_energy",
    "linear_momentum",
    "orthographic_projection",
    "total_mass",
    "translation_matrix",
    "Integrator",
    "Simulation",
    "SymplecticEulerIntegrator",
    "ThreadedSymplecticEulerIntegrator",
    "integrator_from_id",
]
