from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np

from .vector import Vector2


class MassPointLike(Protocol):
    mass: np.float32
    position: Vector2


class MovingMassPointLike(MassPointLike, Protocol):
    velocity: Vector2


@dataclass(frozen=True)
class BodyState:
    body_id: str
    mass: np.float32
    position: Vector2
    velocity: Vector2
