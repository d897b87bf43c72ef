from __future__ import annotations

from typing import Iterable

from ..config import GravityConstants
from ..model.state import MassPointLike
from ..model.vector import Vector2


def pair_acceleration(position: Vector2, other: MassPointLike, constants: GravityConstants) -> Vector2:
    distance = other.position - position
    dist = distance.length()
    if dist < constants.accuracy_threshold:
        return Vector2.zero()
    magnitude = constants.G * float(other.mass) / (dist * dist)
    return Vector2.fill(magnitude) * distance.normalize()


def gravitational_acceleration(
    position: Vector2, others: Iterable[MassPointLike], constants: GravityConstants
) -> Vector2:
    """Net Newtonian acceleration at ``position`` due to ``others``.

    Each contribution is ``G m / d**2`` along the unit vector towards the
    other body. Pairs below the accuracy threshold are skipped outright.
    """
    acceleration = Vector2.zero()
    for other in others:
        acceleration = acceleration + pair_acceleration(position, other, constants)
    return acceleration
