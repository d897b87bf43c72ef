from __future__ import annotations

from typing import Iterable

import numpy as np

from ..config import DEFAULT_CONSTANTS, GravityConstants
from ..physics.gravity import gravitational_acceleration
from .state import BodyState, MassPointLike
from .vector import MASS_PRECISION, Vector2


def _to_vector(value: Vector2 | Iterable[float]) -> Vector2:
    if isinstance(value, Vector2):
        return value
    return Vector2.from_iterable(value)


class Body:
    """A point mass that integrates itself against the other bodies it is given."""

    def __init__(
        self,
        mass: float,
        position: Vector2 | Iterable[float],
        velocity: Vector2 | Iterable[float] | None = None,
        *,
        body_id: str = "",
    ) -> None:
        with np.errstate(over="ignore"):
            stored_mass = MASS_PRECISION(mass)
        if not (np.isfinite(stored_mass) and stored_mass > 0):
            raise ValueError("Mass must be positive and representable in single precision")
        self.body_id = body_id
        self._mass = stored_mass
        self._position = _to_vector(position)
        self._velocity = Vector2.zero() if velocity is None else _to_vector(velocity)

    @classmethod
    def from_state(cls, state: BodyState) -> "Body":
        return cls(state.mass, state.position, state.velocity, body_id=state.body_id)

    @property
    def mass(self) -> np.float32:
        return self._mass

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def velocity(self) -> Vector2:
        return self._velocity

    def state(self) -> BodyState:
        return BodyState(
            body_id=self.body_id,
            mass=self._mass,
            position=self._position,
            velocity=self._velocity,
        )

    def step(
        self,
        others: Iterable[MassPointLike],
        dt: float,
        constants: GravityConstants = DEFAULT_CONSTANTS,
    ) -> None:
        """Advance one tick under the pull of ``others``.

        ``others`` must not contain this body. Pairs closer than
        ``constants.accuracy_threshold`` contribute nothing.
        """
        acceleration = gravitational_acceleration(self._position, others, constants)
        self.advance(acceleration, dt)

    def advance(self, acceleration: Vector2, dt: float) -> None:
        # Semi-implicit Euler: the position update sees the new velocity.
        step = Vector2.fill(dt)
        self._velocity = self._velocity + acceleration * step
        self._position = self._position + self._velocity * step

    def __repr__(self) -> str:
        return (
            f"Body(body_id={self.body_id!r}, mass={float(self._mass)!r}, "
            f"position=({float(self._position.i)!r}, {float(self._position.j)!r}), "
            f"velocity=({float(self._velocity.i)!r}, {float(self._velocity.j)!r}))"
        )
