import numpy as np

from orbital_mechanics.core.model import Vector2
from orbital_mechanics.core.physics import QUAD_VERTICES, body_quad, orthographic_projection, translation_matrix


def test_translation_then_scale() -> None:
    matrix = translation_matrix(Vector2(510.0, 599.5), 10.0)
    corner = matrix @ np.array([0.5, 0.5, 0.0, 1.0], dtype=np.float32)
    np.testing.assert_allclose(corner, [515.0, 604.5, 0.0, 1.0])


def test_translation_without_scale() -> None:
    matrix = translation_matrix(Vector2(3.0, -4.0))
    expected = np.identity(4, dtype=np.float32)
    expected[0, 3] = 3.0
    expected[1, 3] = -4.0
    np.testing.assert_array_equal(matrix, expected)


def test_orthographic_projection_maps_window_to_clip_space() -> None:
    projection = orthographic_projection(1000.0, 1000.0)
    lower_left = projection @ np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float32)
    upper_right = projection @ np.array([1000.0, 1000.0, 0.0, 1.0], dtype=np.float32)
    centre = projection @ np.array([500.0, 500.0, 0.0, 1.0], dtype=np.float32)
    np.testing.assert_allclose(lower_left[:2], [-1.0, -1.0])
    np.testing.assert_allclose(upper_right[:2], [1.0, 1.0])
    np.testing.assert_allclose(centre[:2], [0.0, 0.0], atol=1e-6)


def test_body_quad_corners() -> None:
    corners = body_quad(Vector2(100.0, 200.0), 4.0)
    assert corners.shape == (QUAD_VERTICES.shape[0], 2)
    np.testing.assert_allclose(corners, [[102.0, 202.0], [102.0, 198.0], [98.0, 198.0], [98.0, 202.0]])
