import math

import numpy as np
import pytest

from meshcook.camera import OrbitCamera


def _apply(matrix, point):
    return matrix @ np.append(np.asarray(point, dtype=float), 1.0)


def test_default_position():
    cam = OrbitCamera()
    np.testing.assert_allclose(cam.position, [0, 0, 10])
    np.testing.assert_allclose(cam.center, [0, 0, 0])


def test_view_matrix_maps_eye_to_origin():
    cam = OrbitCamera(-10, 5, -10)
    np.testing.assert_allclose(_apply(cam.view_matrix(), cam.position), [0, 0, 0, 1], atol=1e-9)


def test_view_matrix_puts_center_on_negative_z():
    cam = OrbitCamera(3, 4, 5)
    dist = np.linalg.norm(cam.position - cam.center)
    mapped = _apply(cam.view_matrix(), cam.center)
    np.testing.assert_allclose(mapped, [0, 0, -dist, 1], atol=1e-9)


def test_view_matrix_rotation_is_orthonormal():
    cam = OrbitCamera(2, 7, -3)
    rot = cam.view_matrix()[:3, :3]
    np.testing.assert_allclose(rot @ rot.T, np.identity(3), atol=1e-9)


def test_set_pos_does_not_refresh_view():
    cam = OrbitCamera()
    before = cam.view_matrix()
    cam.set_pos(5, 5, 5)
    np.testing.assert_allclose(cam.view_matrix(), before)
    np.testing.assert_allclose(cam.position, [5, 5, 5])


def test_move_pos_adds_offset():
    cam = OrbitCamera(1, 2, 3)
    cam.move_pos(1, -2, 0.5)
    np.testing.assert_allclose(cam.position, [2, 0, 3.5])


def test_change_and_set_center_refresh_view():
    cam = OrbitCamera()
    cam.change_center(1, 0, 0)
    cam.change_center(0, 2, 0)
    np.testing.assert_allclose(cam.center, [1, 2, 0])
    np.testing.assert_allclose(_apply(cam.view_matrix(), cam.position), [0, 0, 0, 1], atol=1e-9)
    cam.set_center(0, 0, 1)
    np.testing.assert_allclose(cam.center, [0, 0, 1])
    np.testing.assert_allclose(cam.forward(), [0, 0, -1], atol=1e-12)


def test_rotate_preserves_distance_from_origin():
    cam = OrbitCamera(3, 4, 5)
    before = np.linalg.norm(cam.position)
    cam.rotate_around_center(0.7, (0, 1, 0))
    assert np.linalg.norm(cam.position) == pytest.approx(before)
    assert cam.position[1] == pytest.approx(4)


def test_rotate_half_turn_about_y():
    cam = OrbitCamera()
    cam.rotate_around_center(math.pi, (0, 2, 0))
    np.testing.assert_allclose(cam.position, [0, 0, -10], atol=1e-9)


def test_rotate_inverse_restores_position():
    cam = OrbitCamera(1, 2, 3)
    cam.rotate_around_center(0.4, (1, 1, 0))
    cam.rotate_around_center(-0.4, (1, 1, 0))
    np.testing.assert_allclose(cam.position, [1, 2, 3], atol=1e-9)


def test_rotate_zero_axis_raises():
    cam = OrbitCamera()
    with pytest.raises(ValueError):
        cam.rotate_around_center(0.5, (0, 0, 0))


def test_change_radius_moves_along_center_direction():
    cam = OrbitCamera()
    cam.change_radius(2.0)
    np.testing.assert_allclose(cam.position, [0, 0, 12])
    cam.change_radius(-4.0)
    np.testing.assert_allclose(cam.position, [0, 0, 8])


def test_basis_vectors_are_orthogonal():
    cam = OrbitCamera(-10, 5, -10)
    f, r, u = cam.forward(), cam.right(), cam.up()
    assert np.linalg.norm(f) == pytest.approx(1)
    assert np.linalg.norm(u) == pytest.approx(1)
    assert np.dot(f, r) == pytest.approx(0, abs=1e-12)
    assert np.dot(f, u) == pytest.approx(0, abs=1e-12)
    assert np.dot(r, u) == pytest.approx(0, abs=1e-12)


def test_default_basis():
    cam = OrbitCamera()
    np.testing.assert_allclose(cam.forward(), [0, 0, -1], atol=1e-12)
    np.testing.assert_allclose(cam.right(), [1, 0, 0], atol=1e-12)
    np.testing.assert_allclose(cam.up(), [0, -1, 0], atol=1e-12)