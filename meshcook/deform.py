"""Deformers that move the points of an existing mesh."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

from meshcook.shapes import Mesh

_SMALL_WAVE_DIRECTIONS = 20
_SMALL_WAVES_PER_DIRECTION = 30
_BIG_WAVE_DIRECTIONS = 5
_BIG_WAVES_PER_DIRECTION = 3


def _triple(values: Iterable[float], name: str) -> np.ndarray:
    vec = np.asarray(tuple(values), dtype=float)
    if vec.shape != (3,):
        raise ValueError(f"{name} needs three components, got {tuple(vec.shape)}")
    return vec


def _axis_rotation(angle: float, axis: int) -> np.ndarray:
    c = math.cos(angle)
    s = math.sin(angle)
    if axis == 0:
        return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])
    if axis == 1:
        return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def _map_points(mesh: Mesh, new_points: np.ndarray) -> Mesh:
    result = mesh.copy()
    result.points = [np.array(p, dtype=float) for p in new_points]
    return result


def transform(
    mesh: Mesh,
    translate: Sequence[float] = (0.0, 0.0, 0.0),
    rotate: Sequence[float] = (0.0, 0.0, 0.0),
) -> Mesh:
    """Rotate every point (radians, X then Y then Z composed) and then translate.

    Returns a new mesh; the input is left untouched.
    """
    t = _triple(translate, "translate")
    rx, ry, rz = _triple(rotate, "rotate")
    rotation = _axis_rotation(rx, 0) @ _axis_rotation(ry, 1) @ _axis_rotation(rz, 2)
    if not mesh.points:
        return mesh.copy()
    points = np.vstack(mesh.points)
    return _map_points(mesh, points @ rotation.T + t)


def sine_wave(
    mesh: Mesh,
    frequency: float = 1.0,
    radial: bool = False,
    center: Sequence[float] = (0.0, 0.0, 0.0),
) -> Mesh:
    """Lift each point by a sine of its X coordinate, or of its distance to ``center``."""
    frequency = float(frequency)
    if not mesh.points:
        return mesh.copy()
    points = np.vstack(mesh.points)
    if radial:
        origin = _triple(center, "center")
        phase = np.linalg.norm(points - origin, axis=1) * frequency
    else:
        phase = points[:, 0] * frequency
    lifted = points.copy()
    lifted[:, 1] += np.sin(phase)
    return _map_points(mesh, lifted)


def ocean_surface_position(position: Iterable[float]) -> np.ndarray:
    """Displace one position by a fixed sum of directional waves."""
    px, py, pz = _triple(position, "position")
    time = 0.0

    height = 0.0
    shift_x = 0.0
    shift_z = 0.0

    for i in range(_SMALL_WAVE_DIRECTIONS):
        angle = i / _SMALL_WAVE_DIRECTIONS * 2.0 * math.pi
        dir_x = math.cos(angle)
        dir_z = math.sin(angle)
        offset = i * 20.0 * 0.1 + 20.8
        along = px * dir_x + pz * dir_z
        for j in range(_SMALL_WAVES_PER_DIRECTION):
            wave_length = 2.0 / (j + 1.0)
            amplitude = 0.005 / (j + 1.0)
            offset += (j + 826.0) * 0.001
            theta = 2.0 * math.pi / wave_length * along + time + offset
            sway = amplitude * math.sin(theta)
            height -= amplitude * math.cos(theta)
            shift_x += sway * dir_x
            shift_z += sway * dir_z

    for i in range(_BIG_WAVE_DIRECTIONS):
        angle = (0.5 + i * 0.1) * 2.0 * math.pi
        dir_x = math.cos(angle)
        dir_z = math.sin(angle)
        offset = 6072.0 * 0.01 * 20.0
        along = px * dir_x + pz * dir_z
        for j in range(_BIG_WAVES_PER_DIRECTION):
            wave_length = 30.0 / (j + 1.0)
            amplitude = 0.2 / (j + 1.0)
            offset += (j + 826.0) * 0.005
            theta = 2.0 * math.pi / wave_length * along + time + offset
            sway = amplitude * math.sin(theta)
            height -= amplitude * math.cos(theta)
            shift_x += sway * dir_x
            shift_z += sway * dir_z

    return np.array([px + shift_x, py + height, pz + shift_z])


def ocean_surface(mesh: Mesh) -> Mesh:
    """Apply :func:`ocean_surface_position` to every point of a copy of ``mesh``."""
    result = mesh.copy()
    result.points = [ocean_surface_position(p) for p in mesh.points]
    return result