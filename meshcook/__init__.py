"""Procedural mesh shapes and deformers, OBJ import, parameters, orbit camera navigation and render buffers."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "deform",
    "navigation",
    "objimport",
    "parameters",
    "registry",
    "render",
    "shapes",
]