"""Rounded Polygons – regular polygons with filleted corners."""

from __future__ import annotations

from .modeling import (
    ArcTo,
    Close,
    LineTo,
    MoveTo,
    Path2D,
    build_rounded_polygon_path,
    polygon_vertices,
    rotate,
    round_polygon,
    scale,
)
from .view import RoundedPolygonView

__all__ = [
    "__version__",
    "ArcTo",
    "Close",
    "LineTo",
    "MoveTo",
    "Path2D",
    "RoundedPolygonView",
    "build_rounded_polygon_path",
    "polygon_vertices",
    "rotate",
    "round_polygon",
    "scale",
]

__version__ = "0.1.0"
