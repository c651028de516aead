import numpy as np
import pytest

from meshcook.camera import OrbitCamera
from meshcook.navigation import MouseButton, ViewportNavigator


def _distance(camera):
    return float(np.linalg.norm(camera.position - camera.center))


@pytest.fixture
def nav():
    return ViewportNavigator(OrbitCamera(0.0, 0.0, 10.0))


def test_wheel_forward_steps_toward_center(nav):
    nav.wheel(120)
    assert _distance(nav.camera) == pytest.approx(9.3)


def test_wheel_backward_steps_away(nav):
    nav.wheel(-1)
    assert _distance(nav.camera) == pytest.approx(10.7)


def test_wheel_zero_does_nothing(nav):
    nav.wheel(0)
    assert np.allclose(nav.camera.position, [0.0, 0.0, 10.0])


def test_left_drag_orbits_keeping_distance(nav):
    nav.press(MouseButton.LEFT, 0, 0)
    nav.move(40, 25)
    assert _distance(nav.camera) == pytest.approx(10.0)
    assert not np.allclose(nav.camera.position, [0.0, 0.0, 10.0])


def test_horizontal_left_drag_keeps_height(nav):
    nav.press(MouseButton.LEFT, 10, 10)
    nav.move(60, 10)
    assert nav.camera.position[1] == pytest.approx(0.0)
    assert _distance(nav.camera) == pytest.approx(10.0)


def test_release_stops_dragging(nav):
    nav.press(MouseButton.LEFT, 0, 0)
    nav.release(MouseButton.LEFT)
    nav.move(100, 100)
    assert np.allclose(nav.camera.position, [0.0, 0.0, 10.0])
    assert nav.is_down(MouseButton.LEFT) is False


def test_middle_drag_pans_center_and_position_together(nav):
    before_forward = nav.camera.forward()
    nav.press(MouseButton.MIDDLE, 0, 0)
    nav.move(30, -20)
    offset = nav.camera.position - nav.camera.center
    assert np.allclose(offset, [0.0, 0.0, 10.0])
    assert np.allclose(nav.camera.forward(), before_forward)
    assert not np.allclose(nav.camera.center, [0.0, 0.0, 0.0])


def test_right_drag_dollies(nav):
    nav.press(MouseButton.RIGHT, 0, 0)
    nav.move(100, 0)
    assert _distance(nav.camera) == pytest.approx(9.0)


def test_right_drag_in_steps_matches_single_move():
    stepped = ViewportNavigator(OrbitCamera(0.0, 0.0, 10.0))
    stepped.press(MouseButton.RIGHT, 0, 0)
    stepped.move(20, 50)
    stepped.move(40, 80)
    direct = ViewportNavigator(OrbitCamera(0.0, 0.0, 10.0))
    direct.press(MouseButton.RIGHT, 0, 0)
    direct.move(40, 80)
    assert np.allclose(stepped.camera.position, direct.camera.position)


def test_other_button_is_ignored(nav):
    nav.press(MouseButton.OTHER, 0, 0)
    nav.move(50, 50)
    assert nav.is_down(MouseButton.OTHER) is False
    assert np.allclose(nav.camera.position, [0.0, 0.0, 10.0])