"""Polygon mesh container and the built-in shape generators."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

_HOUSE_POINTS = (
    (-1, -1, -1),
    (1, -1, -1),
    (1, -1, 1),
    (-1, -1, 1),
    (-1, 1, -1),
    (1, 1, -1),
    (1, 1, 1),
    (-1, 1, 1),
    (0, 2, -1),
    (0, 2, 1),
)

_HOUSE_FACES = (
    (7, 9, 6, 2, 3),
    (4, 8, 5, 1, 0),
    (4, 7, 3, 0),
    (5, 6, 2, 1),
    (0, 1, 2, 3),
    (9, 7, 4),
    (8, 9, 4),
    (9, 6, 5),
    (8, 5, 9),
)

_CUBE_POINTS = (
    (-1, -1, 1),
    (1, -1, 1),
    (1, 1, 1),
    (-1, 1, 1),
    (-1, -1, -1),
    (1, -1, -1),
    (1, 1, -1),
    (-1, 1, -1),
)

_CUBE_FACES = (
    (0, 1, 2, 3),
    (7, 6, 5, 4),
    (0, 3, 7, 4),
    (5, 6, 2, 1),
    (3, 2, 6, 7),
    (4, 5, 1, 0),
)


def _vector(position: Iterable[float]) -> np.ndarray:
    vec = np.asarray(tuple(position), dtype=float)
    if vec.shape != (3,):
        raise ValueError(f"expected a 3D position, got {tuple(vec.shape)}")
    return vec


@dataclass
class Mesh:
    """Points plus faces; each face is a tuple of point indices and a closed flag.

    A closed face is a polygon, an open one is a polyline.
    """

    points: list[np.ndarray] = field(default_factory=list)
    faces: list[tuple[tuple[int, ...], bool]] = field(default_factory=list)

    def add_point(self, position: Iterable[float]) -> int:
        """Append a point and return its index."""
        self.points.append(_vector(position))
        return len(self.points) - 1

    def add_face(self, points: Sequence[int], closed: bool = True) -> int:
        """Append a face over existing points and return its index."""
        indices = tuple(int(p) for p in points)
        count = len(self.points)
        bad = [p for p in indices if not 0 <= p < count]
        if bad:
            raise IndexError(f"face refers to missing points {bad}")
        self.faces.append((indices, bool(closed)))
        return len(self.faces) - 1

    def copy(self) -> Mesh:
        """Return an independent copy."""
        return Mesh(
            points=[p.copy() for p in self.points],
            faces=list(self.faces),
        )

    def vertex_count(self) -> int:
        """Total number of face corners over all faces."""
        return sum(len(indices) for indices, _ in self.faces)

    def solo_points(self) -> list[int]:
        """Indices of points no face refers to, in ascending order."""
        used = {p for indices, _ in self.faces for p in indices}
        return [i for i in range(len(self.points)) if i not in used]

    def _scale(self, factor: float) -> None:
        self.points = [p * factor for p in self.points]


def _append_shape(
    mesh: Mesh,
    points: Sequence[Sequence[float]],
    faces: Sequence[Sequence[int]],
) -> None:
    start = len(mesh.points)
    for position in points:
        mesh.add_point(position)
    for face in faces:
        mesh.add_face([start + i for i in face])


def house(size: float = 1.0) -> Mesh:
    """A closed house shape: a box with a gabled roof, scaled by ``size``."""
    mesh = Mesh()
    _append_shape(mesh, _HOUSE_POINTS, _HOUSE_FACES)
    mesh._scale(float(size))
    return mesh


def cube(size: float = 1.0, base: Mesh | None = None) -> Mesh:
    """Append a cube to a copy of ``base`` and scale every point by ``size``."""
    mesh = base.copy() if base is not None else Mesh()
    _append_shape(mesh, _CUBE_POINTS, _CUBE_FACES)
    mesh._scale(float(size))
    return mesh


def grid(
    size: Sequence[float] = (10.0, 10.0),
    rows: int = 10,
    columns: int = 10,
) -> Mesh:
    """A flat grid in the XZ plane centred on the origin.

    ``size`` is (width, height). With a single row or column the grid is a
    polyline; with no rows or columns it is empty.
    """
    mesh = Mesh()
    width, height = (float(v) for v in size)
    rows = int(rows)
    columns = int(columns)
    if columns <= 0 or rows <= 0:
        return mesh

    offset_x = width / 2.0
    offset_z = height / 2.0
    column_divisor = float(max(columns - 1, 1))
    row_divisor = float(max(rows - 1, 1))

    for i in range(columns):
        for j in range(rows):
            x = i / column_divisor * width - offset_x
            z = j / row_divisor * height - offset_z
            mesh.add_point((x, 0.0, z))

    if columns > 1 and rows > 1:
        for i in range(math.floor((columns - 1) * rows - 1)):
            end_offset = 1 if (i + 1) % rows == 0 else 0
            start = i + end_offset
            mesh.add_face((start, start + rows, start + rows + 1, start + 1))
    else:
        for i in range(max(columns, rows) - 1):
            mesh.add_face((i, i + 1), closed=False)

    return mesh