"""Reading Wavefront OBJ points, faces and polylines into a mesh."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

import numpy as np

from meshcook.shapes import Mesh

_WHITESPACE = re.compile(r"[ \t\n\r\f\v]")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class ObjImportError(Exception):
    """Raised when an OBJ path or its contents cannot be used."""


def _leading_float(token: str) -> float:
    match = _FLOAT_PREFIX.match(token)
    if match is None:
        raise ObjImportError(f"not a number: {token!r}")
    return float(match.group().strip())


def _leading_int(token: str) -> int:
    match = _INT_PREFIX.match(token)
    if match is None:
        raise ObjImportError(f"not an index: {token!r}")
    return int(match.group())


def parse_obj(lines: Iterable[str]) -> Mesh:
    """Build a mesh from OBJ lines.

    Lines starting with ``v`` and holding exactly four single-space separated
    fields add a point; lines starting with ``f`` add a closed face and ``l``
    an open polyline, each needing at least two indices. Indices are 1-based
    and only their leading integer counts, so ``3/1/2`` names point 3.
    """
    mesh = Mesh()
    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line:
            continue
        kind = line[0]
        if kind == "v":
            fields = _WHITESPACE.split(line)
            if len(fields) != 4:
                continue
            mesh.add_point([_leading_float(f) for f in fields[1:]])
        elif kind in ("f", "l"):
            fields = _WHITESPACE.split(line)
            if len(fields) < 3:
                continue
            indices = [_leading_int(f) - 1 for f in fields[1:]]
            try:
                mesh.add_face(indices, closed=kind == "f")
            except IndexError as exc:
                raise ObjImportError(str(exc)) from exc
    return mesh


def import_obj(path: str | Path, size: float = 1.0) -> Mesh:
    """Read an ``.obj`` file and scale every point by ``size``."""
    text_path = str(path).strip()
    if len(text_path) < 4:
        raise ObjImportError("file path too small")
    extension = text_path[-4:]
    if extension != ".obj":
        raise ObjImportError("File path not accepted: " + extension)
    try:
        with open(text_path, encoding="utf-8", newline="") as handle:
            mesh = parse_obj(handle)
    except OSError as exc:
        raise ObjImportError(f"Failed to open file {text_path}") from exc
    scale = float(size)
    mesh.points = [np.asarray(p, dtype=float) * scale for p in mesh.points]
    return mesh