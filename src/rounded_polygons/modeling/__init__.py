"""Modeling utilities: path segments, rounded polygons and path transforms."""

from __future__ import annotations

from .drawing2d import ArcTo, Close, LineTo, MoveTo, Path2D, Segment2D
from .polygon import (
    build_rounded_polygon_path,
    clamp_corner_radius,
    corner_fillet,
    polygon_vertices,
    round_polygon,
)
from .transform import rotate, scale

__all__ = [
    "ArcTo",
    "Close",
    "LineTo",
    "MoveTo",
    "Path2D",
    "Segment2D",
    "build_rounded_polygon_path",
    "clamp_corner_radius",
    "corner_fillet",
    "polygon_vertices",
    "round_polygon",
    "rotate",
    "scale",
]
