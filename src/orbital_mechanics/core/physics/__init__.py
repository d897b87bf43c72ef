from .gravity import gravitational_acceleration, pair_acceleration
from .diagnostics import (
    center_of_mass,
    is_finite_state,
    kinetic_energy,
    linear_momentum,
    total_mass,
)
from .transforms import QUAD_VERTICES, body_quad, orthographic_projection, translation_matrix

__all__ = [
    "QUAD_VERTICES",
    "body_quad",
    "center_of_mass",
    "gravitational_acceleration",
    "is_finite_state",
    "kinetic_energy",
    "linear_momentum",
    "orthographic_projection",
    "pair_acceleration",
    "total_mass",
    "translation_matrix",
]
