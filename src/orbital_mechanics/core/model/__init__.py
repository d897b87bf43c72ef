from .vector import MASS_PRECISION, PRECISION, Vector2
from .state import BodyState, MassPointLike, MovingMassPointLike
from .body import Body

__all__ = [
    "Body",
    "BodyState",
    "MASS_PRECISION",
    "MassPointLike",
    "MovingMassPointLike",
    "PRECISION",
    "Vector2",
]
