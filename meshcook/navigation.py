"""Mouse navigation of an orbit camera: orbit, pan and dolly."""

from __future__ import annotations

import enum

import numpy as np

from meshcook.camera import OrbitCamera

WHEEL_STEP = 0.7
ROTATE_SPEED = 0.01
PAN_SPEED = 0.01
ZOOM_SPEED = 0.01


class MouseButton(enum.Enum):
    """Buttons the navigator reacts to; ``OTHER`` is accepted and ignored."""

    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    OTHER = "other"


_TRACKED = (MouseButton.LEFT, MouseButton.MIDDLE, MouseButton.RIGHT)


class ViewportNavigator:
    """Turns wheel and mouse-drag input into camera movement.

    Left drag orbits, middle drag pans, right drag dollies; the wheel steps
    the camera toward or away from its centre.
    """

    def __init__(self, camera: OrbitCamera) -> None:
        self.camera = camera
        self._anchors: dict[MouseButton, np.ndarray] = {}

    def is_down(self, button: MouseButton) -> bool:
        """Whether ``button`` is currently held."""
        return button in self._anchors

    def wheel(self, delta: float) -> None:
        """Step toward the centre for a positive ``delta``, away for a negative one."""
        self.camera.change_radius(-float(np.sign(delta)) * WHEEL_STEP)

    def press(self, button: MouseButton, x: float, y: float) -> None:
        if button in _TRACKED:
            self._anchors[button] = np.array([x, y], dtype=float)

    def release(self, button: MouseButton) -> None:
        self._anchors.pop(button, None)

    def move(self, x: float, y: float) -> None:
        """Apply the drag of every held button from its last position to (x, y)."""
        position = np.array([x, y], dtype=float)
        camera = self.camera

        if MouseButton.LEFT in self._anchors:
            dx, dy = (position - self._anchors[MouseButton.LEFT]) * -ROTATE_SPEED
            camera.rotate_around_center(dx, (0.0, 1.0, 0.0))
            tilt_axis = camera.right() * np.array([1.0, 0.0, 1.0])
            if np.linalg.norm(tilt_axis) > 0.0:
                camera.rotate_around_center(dy, tilt_axis)
            self._anchors[MouseButton.LEFT] = position

        if MouseButton.MIDDLE in self._anchors:
            dx, dy = (position - self._anchors[MouseButton.MIDDLE]) * PAN_SPEED
            shift = camera.up() * -dy + camera.right() * -dx
            camera.change_center(*shift)
            camera.move_pos(*shift)
            self._anchors[MouseButton.MIDDLE] = position

        if MouseButton.RIGHT in self._anchors:
            dx, dy = (position - self._anchors[MouseButton.RIGHT]) * ZOOM_SPEED
            camera.change_radius(-dx + dy)
            self._anchors[MouseButton.RIGHT] = position