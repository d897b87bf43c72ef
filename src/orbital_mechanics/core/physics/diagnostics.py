from __future__ import annotations

from typing import Iterable

import numpy as np

from ..model.state import MassPointLike, MovingMassPointLike
from ..model.vector import PRECISION, Vector2


def total_mass(bodies: Iterable[MassPointLike]) -> float:
    masses = [float(body.mass) for body in bodies]
    return float(np.sum(masses))


def center_of_mass(bodies: Iterable[MassPointLike]) -> Vector2:
    bodies_list = list(bodies)
    if not bodies_list:
        raise ValueError("No bodies provided")
    masses = np.array([float(body.mass) for body in bodies_list], dtype=PRECISION)
    positions = np.stack([body.position.as_array() for body in bodies_list])
    return Vector2.from_iterable(np.sum(positions * masses[:, None], axis=0) / np.sum(masses))


def linear_momentum(bodies: Iterable[MovingMassPointLike]) -> Vector2:
    momentum = np.zeros(2, dtype=PRECISION)
    for body in bodies:
        momentum += PRECISION(float(body.mass)) * body.velocity.as_array()
    return Vector2.from_iterable(momentum)


def kinetic_energy(bodies: Iterable[MovingMassPointLike]) -> float:
    energy = PRECISION(0)
    for body in bodies:
        speed = body.velocity.length()
        energy += PRECISION(0.5) * PRECISION(float(body.mass)) * speed * speed
    return float(energy)


def is_finite_state(bodies: Iterable[MovingMassPointLike]) -> bool:
    for body in bodies:
        values = np.concatenate([body.position.as_array(), body.velocity.as_array()])
        if not np.all(np.isfinite(values)):
            return False
    return True
