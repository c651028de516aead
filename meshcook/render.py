"""Draw-ready buffers built from a mesh: vertices, index lists, grid lines, point sprites."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from meshcook.shapes import Mesh

_POINT_SCALE_PER_UNIT = 0.005

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class RenderVertex:
    """One face corner as uploaded for drawing: position plus its face normal."""

    position: Vec3
    normal: Vec3


@dataclass(frozen=True)
class PointSprite:
    """A camera-facing billboard for a loose point; ``scale`` grows with distance."""

    position: Vec3
    scale: float


def _as_tuple(vec: Iterable[float]) -> Vec3:
    x, y, z = (float(v) for v in vec)
    return (x, y, z)


def _face_normal(positions: list[np.ndarray]) -> np.ndarray:
    if len(positions) < 3:
        return np.zeros(3)
    first, second, third = positions[:3]
    normal = np.cross(second - first, third - first)
    length = float(np.linalg.norm(normal))
    if length > 0.0:
        normal = normal / length
    return normal


def vertex_buffer(mesh: Mesh) -> list[RenderVertex]:
    """One vertex per face corner, in face order, each carrying its face's normal.

    The normal comes from the first three corners; faces with fewer corners,
    or degenerate ones, get a zero normal.
    """
    vertices: list[RenderVertex] = []
    for indices, _closed in mesh.faces:
        positions = [np.asarray(mesh.points[p], dtype=float) for p in indices]
        normal = _as_tuple(_face_normal(positions))
        vertices.extend(RenderVertex(_as_tuple(p), normal) for p in positions)
    return vertices


def index_buffers(mesh: Mesh) -> tuple[list[int], list[int]]:
    """Triangle and line index lists into :func:`vertex_buffer`'s vertices.

    Open faces with two or more corners become line segments between
    consecutive corners; closed faces with three or more corners become a
    triangle fan around their first corner. Anything else draws nothing.
    """
    triangles: list[int] = []
    lines: list[int] = []
    start = 0
    for indices, closed in mesh.faces:
        count = len(indices)
        if not closed and count >= 2:
            for i in range(count - 1):
                lines.extend((start + i, start + i + 1))
        elif count >= 3:
            for i in range(1, count - 1):
                triangles.extend((start, start + i, start + i + 1))
        start += count
    return triangles, lines


def grid_lines(length: float = 50.0, lines: int = 40) -> np.ndarray:
    """Endpoints of the ground grid in the XZ plane, two rows per segment.

    Each of ``lines`` steps adds a segment along Z and one along X, spaced two
    units apart and centred on the origin, reaching ``length`` each way.
    """
    if lines < 0:
        raise ValueError("line count cannot be negative")
    half = (lines - 1) * 0.5
    length = float(length)
    endpoints: list[tuple[float, float, float]] = []
    for i in range(lines):
        offset = (i - half) * 2.0
        endpoints.append((offset, 0.0, -length))
        endpoints.append((offset, 0.0, length))
        endpoints.append((-length, 0.0, offset))
        endpoints.append((length, 0.0, offset))
    return np.array(endpoints, dtype=float).reshape(-1, 3)


def point_sprites(mesh: Mesh, camera_position: Iterable[float]) -> list[PointSprite]:
    """Sprites for the points no face uses, sized by distance to the camera."""
    camera = np.asarray(tuple(camera_position), dtype=float)
    if camera.shape != (3,):
        raise ValueError("camera position needs three components")
    sprites: list[PointSprite] = []
    for index in mesh.solo_points():
        position = np.asarray(mesh.points[index], dtype=float)
        distance = float(np.linalg.norm(position - camera))
        sprites.append(PointSprite(_as_tuple(position), distance * _POINT_SCALE_PER_UNIT))
    return sprites