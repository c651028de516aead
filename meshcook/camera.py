"""Orbit camera producing a look-at view matrix."""

from __future__ import annotations

from typing import Iterable

import numpy as np


def _normalize(vec: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vec))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vec / length


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


def _rotate(vec: np.ndarray, angle: float, axis: np.ndarray) -> np.ndarray:
    k = _normalize(axis)
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    return vec * cos_a + np.cross(k, vec) * sin_a + k * np.dot(k, vec) * (1.0 - cos_a)


class OrbitCamera:
    """A camera at ``position`` looking at ``center`` with +Y as world up.

    The view matrix is refreshed by the centre, rotation and radius
    operations; ``set_pos`` and ``move_pos`` only move the position.
    Matrices act on column vectors: ``view_matrix() @ (x, y, z, 1)``.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 10.0) -> None:
        self.position = np.zeros(3)
        self.center = np.zeros(3)
        self.world_up = np.array([0.0, 1.0, 0.0])
        self.set_pos(x, y, z)
        self._view = np.identity(4)
        self._refresh()

    def _refresh(self) -> None:
        self._view = _look_at(self.position, self.center, self.world_up)

    def set_pos(self, x: float, y: float, z: float) -> None:
        self.position = np.array([x, y, z], dtype=float)

    def move_pos(self, x: float, y: float, z: float) -> None:
        self.position = self.position + np.array([x, y, z], dtype=float)

    def change_center(self, x: float, y: float, z: float) -> None:
        self.center = self.center + np.array([x, y, z], dtype=float)
        self._refresh()

    def set_center(self, x: float, y: float, z: float) -> None:
        self.center = np.array([x, y, z], dtype=float)
        self._refresh()

    def rotate_around_center(self, angle: float, axis: Iterable[float]) -> None:
        """Rotate the position by ``angle`` radians about ``axis`` through the origin."""
        axis_vec = np.asarray(tuple(axis), dtype=float)
        self.position = _rotate(self.position, float(angle), axis_vec)
        self._refresh()

    def change_radius(self, delta: float) -> None:
        """Move the position away from the centre by ``delta`` (toward it if negative)."""
        direction = _normalize(self.position - self.center)
        self.position = self.position + direction * float(delta)
        self._refresh()

    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    def forward(self) -> np.ndarray:
        return _normalize(self.center - self.position)

    def right(self) -> np.ndarray:
        return np.cross(self.forward(), self.world_up)

    def up(self) -> np.ndarray:
        return _normalize(np.cross(self.forward(), self.right()))