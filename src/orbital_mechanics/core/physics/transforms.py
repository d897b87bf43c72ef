from __future__ import annotations

import numpy as np

from ..model.vector import Vector2

# Unit square centred on the origin, one vertex per row (x, y, z).
QUAD_VERTICES = np.array(
    [
        [0.5, 0.5, 0.0],
        [0.5, -0.5, 0.0],
        [-0.5, -0.5, 0.0],
        [-0.5, 0.5, 0.0],
    ],
    dtype=np.float32,
)


def translation_matrix(position: Vector2, scale: float = 1.0) -> np.ndarray:
    """World matrix for a body: translate to ``position``, then scale uniformly.

    Returned in row-major (mathematical) layout; transpose before handing it
    to a column-major graphics API.
    """
    out = np.identity(4, dtype=np.float32)
    out[0, 3] = np.float32(position.i)
    out[1, 3] = np.float32(position.j)
    scaling = np.diag(np.array([scale, scale, scale, 1.0], dtype=np.float32))
    return out @ scaling


def orthographic_projection(
    width: float, height: float, near: float = -1.0, far: float = 1.0
) -> np.ndarray:
    left, right, bottom, top = 0.0, float(width), 0.0, float(height)
    out = np.identity(4, dtype=np.float32)
    out[0, 0] = 2.0 / (right - left)
    out[1, 1] = 2.0 / (top - bottom)
    out[2, 2] = -2.0 / (far - near)
    out[0, 3] = -(right + left) / (right - left)
    out[1, 3] = -(top + bottom) / (top - bottom)
    out[2, 3] = -(far + near) / (far - near)
    return out


def body_quad(position: Vector2, scale: float = 1.0) -> np.ndarray:
    """Quad corners in world space as an ``(4, 2)`` array."""
    homogeneous = np.hstack([QUAD_VERTICES, np.ones((QUAD_VERTICES.shape[0], 1), dtype=np.float32)])
    world = homogeneous @ translation_matrix(position, scale).T
    return world[:, :2]
