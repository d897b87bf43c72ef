from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np

# Kinematic quantities are kept in extended precision; masses are not.
PRECISION = np.longdouble
MASS_PRECISION = np.float32


@dataclass(frozen=True)
class Vector2:
    """Two-component value type with strictly componentwise arithmetic.

    Scalars are broadcast with :meth:`fill` before multiplying or dividing.
    Dividing by a zero component produces non-finite values rather than
    raising, so :meth:`normalize` on a zero vector is the caller's problem.
    """

    i: np.longdouble = PRECISION(0)
    j: np.longdouble = PRECISION(0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "i", PRECISION(self.i))
        object.__setattr__(self, "j", PRECISION(self.j))

    @classmethod
    def fill(cls, value: float) -> "Vector2":
        return cls(value, value)

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector2":
        items = list(values)
        if len(items) != 2:
            raise ValueError("Vector2 needs exactly two components")
        return cls(items[0], items[1])

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.i + other.i, self.j + other.j)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.i - other.i, self.j - other.j)

    def __mul__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.i * other.i, self.j * other.j)

    def __truediv__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.i / other.i, self.j / other.j)

    def __iter__(self) -> Iterator[np.longdouble]:
        yield self.i
        yield self.j

    def length(self) -> np.longdouble:
        return np.sqrt(self.i * self.i + self.j * self.j)

    def normalize(self) -> "Vector2":
        return self / Vector2.fill(self.length())

    def as_array(self) -> np.ndarray:
        return np.array([self.i, self.j], dtype=PRECISION)
