import math

import numpy as np
import pytest

from meshcook.deform import ocean_surface, ocean_surface_position, sine_wave, transform
from meshcook.shapes import Mesh, cube, grid


def _points(mesh):
    return np.vstack(mesh.points)


def test_transform_identity_keeps_points():
    mesh = cube(1.0)
    out = transform(mesh)
    assert np.allclose(_points(out), _points(mesh))


def test_transform_translation_only():
    mesh = cube(1.0)
    out = transform(mesh, translate=(1.0, 2.0, 3.0))
    assert np.allclose(_points(out) - _points(mesh), [1.0, 2.0, 3.0])


def test_transform_rotation_about_z_quarter_turn():
    mesh = Mesh()
    mesh.add_point((1.0, 0.0, 0.0))
    out = transform(mesh, rotate=(0.0, 0.0, math.pi / 2))
    assert np.allclose(out.points[0], [0.0, 1.0, 0.0])


def test_transform_rotation_preserves_lengths_and_faces():
    mesh = cube(2.0)
    out = transform(mesh, rotate=(0.3, -1.1, 2.4))
    assert np.allclose(
        np.linalg.norm(_points(out), axis=1), np.linalg.norm(_points(mesh), axis=1)
    )
    assert out.faces == mesh.faces


def test_transform_leaves_input_untouched():
    mesh = cube(1.0)
    before = _points(mesh).copy()
    transform(mesh, translate=(5, 5, 5), rotate=(1, 1, 1))
    assert np.array_equal(_points(mesh), before)


def test_transform_rejects_bad_translate():
    with pytest.raises(ValueError):
        transform(cube(1.0), translate=(1.0, 2.0))


def test_transform_empty_mesh():
    out = transform(Mesh(), translate=(1, 1, 1))
    assert out.points == []


def test_sine_wave_linear_at_zero_x_unchanged():
    mesh = Mesh()
    mesh.add_point((0.0, 4.0, 7.0))
    out = sine_wave(mesh, frequency=3.0)
    assert np.allclose(out.points[0], [0.0, 4.0, 7.0])


def test_sine_wave_linear_peak():
    mesh = Mesh()
    mesh.add_point((math.pi / 2, 0.0, 0.0))
    out = sine_wave(mesh, frequency=1.0)
    assert out.points[0][1] == pytest.approx(1.0)


def test_sine_wave_only_moves_y():
    mesh = grid((10, 10), 5, 5)
    for radial in (False, True):
        out = sine_wave(mesh, frequency=0.7, radial=radial, center=(1, 0, 2))
        diff = _points(out) - _points(mesh)
        assert np.allclose(diff[:, [0, 2]], 0.0)
        assert np.all(np.abs(diff[:, 1]) <= 1.0 + 1e-12)


def test_sine_wave_radial_center_point_unchanged():
    mesh = Mesh()
    mesh.add_point((1.0, 2.0, 3.0))
    out = sine_wave(mesh, frequency=5.0, radial=True, center=(1.0, 2.0, 3.0))
    assert np.allclose(out.points[0], [1.0, 2.0, 3.0])


def test_sine_wave_radial_is_symmetric_about_center():
    mesh = Mesh()
    mesh.add_point((3.0, 0.0, 0.0))
    mesh.add_point((-3.0, 0.0, 0.0))
    out = sine_wave(mesh, frequency=0.4, radial=True)
    assert out.points[0][1] == pytest.approx(out.points[1][1])


def test_ocean_surface_matches_position_function():
    mesh = grid((4, 4), 3, 3)
    out = ocean_surface(mesh)
    for before, after in zip(mesh.points, out.points):
        assert np.allclose(after, ocean_surface_position(before))
    assert out.faces == mesh.faces


def test_ocean_surface_displacement_is_bounded():
    for pos in [(0, 0, 0), (12.5, 3, -7), (-100, 0, 42)]:
        moved = ocean_surface_position(pos)
        assert np.all(np.isfinite(moved))
        assert np.linalg.norm(moved - np.asarray(pos, dtype=float)) < 5.0


def test_ocean_surface_height_does_not_depend_on_input_y():
    low = ocean_surface_position((1.5, 0.0, 2.5))
    high = ocean_surface_position((1.5, 10.0, 2.5))
    assert np.allclose(high - low, [0.0, 10.0, 0.0])


def test_ocean_surface_position_rejects_bad_shape():
    with pytest.raises(ValueError):
        ocean_surface_position((1.0, 2.0))