"""Regular polygons with circular-arc fillets in place of their corners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .drawing2d import ArcTo, Close, LineTo, MoveTo, Path2D, Segment2D, _to_vec2


def polygon_vertices(
    sides: int,
    radius: float,
    center: Sequence[float] = (0.0, 0.0),
) -> np.ndarray:
    """Return the ``(sides, 2)`` vertices of a regular polygon inscribed in a circle.

    Vertex 0 sits at angle 0 (on the +x axis from ``center``) and the angle grows
    with the index. Fewer than three sides gives an empty array.
    """
    sides = int(sides)
    if sides < 3:
        return np.zeros((0, 2), dtype=float)
    center_vec = _to_vec2(center, "center")
    step = 2.0 * np.pi / sides
    angles = np.arange(sides, dtype=float) * step
    points = np.column_stack([np.cos(angles), np.sin(angles)]) * float(radius)
    return points + center_vec


def clamp_corner_radius(vertices: np.ndarray, corner_radius: float) -> float:
    """Clamp to ``[0, |v1 - v0| / 2]``; only the first edge bounds the radius."""
    radius = float(corner_radius)
    if radius < 0:
        return 0.0
    max_radius = float(np.linalg.norm(vertices[1] - vertices[0])) / 2.0
    if radius > max_radius:
        return max_radius
    return radius


@dataclass(frozen=True)
class CornerFillet:
    start: np.ndarray
    end: np.ndarray
    center: np.ndarray
    radius: float
    start_angle_rad: float
    end_angle_rad: float

    def to_arc(self) -> ArcTo:
        return ArcTo(
            center=self.center,
            radius=self.radius,
            start_angle_rad=self.start_angle_rad,
            end_angle_rad=self.end_angle_rad,
            clockwise=True,
        )


def corner_fillet(
    prev: np.ndarray,
    curr: np.ndarray,
    nxt: np.ndarray,
    corner_radius: float,
) -> CornerFillet:
    """Fillet geometry replacing the corner at ``curr``.

    The fillet radius is ``corner_radius / theta * pi / 4`` where ``theta`` is
    half the turning angle at the vertex, so only a right-angled corner keeps
    ``corner_radius`` unchanged.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        c2p = prev - curr
        c2n = nxt - curr
        c2p = c2p / np.linalg.norm(c2p)
        c2n = c2n / np.linalg.norm(c2n)

        omega = np.arccos(np.dot(c2n, c2p))
        theta = np.pi / 2.0 - omega / 2.0

        radius = np.float64(corner_radius) / theta * (np.pi / 4.0)
        tangent = radius * np.tan(theta)

        start = curr + tangent * c2p
        end = curr + tangent * c2n
        # perpendicular to the incoming edge, towards the polygon interior
        center = start + radius * np.array([c2p[1], -c2p[0]])

        start_angle = np.arctan2(c2p[0], -c2p[1])
        end_angle = start_angle + 2.0 * theta

    return CornerFillet(
        start=start,
        end=end,
        center=center,
        radius=float(radius),
        start_angle_rad=float(start_angle),
        end_angle_rad=float(end_angle),
    )


def round_polygon(vertices: np.ndarray | Sequence[Sequence[float]], corner_radius: float) -> Path2D:
    """Build the closed outline of ``vertices`` with every corner filleted.

    The path starts at the outgoing tangent point of vertex 0, then visits
    vertices 1..n-1 and finally vertex 0 again, each time drawing the shortened
    edge followed by the corner arc.
    """
    pts = np.asarray(vertices, dtype=float).reshape(-1, 2)
    n = pts.shape[0]
    if n < 3:
        return Path2D()

    radius = clamp_corner_radius(pts, corner_radius)
    fillets = [corner_fillet(pts[i - 1], pts[i], pts[(i + 1) % n], radius) for i in range(n)]

    segments: list[Segment2D] = [MoveTo(fillets[0].end)]
    for fillet in fillets[1:] + fillets[:1]:
        segments.append(LineTo(fillet.start))
        segments.append(fillet.to_arc())
    segments.append(Close())
    return Path2D(segments=segments)


def build_rounded_polygon_path(
    width: float,
    height: float,
    sides: int,
    corner_radius: float,
) -> Path2D:
    """Rounded regular polygon inscribed in a ``width`` x ``height`` drawing rect."""
    width = float(width)
    height = float(height)
    vertices = polygon_vertices(
        sides,
        radius=min(width, height) / 2.0,
        center=(width / 2.0, height / 2.0),
    )
    return round_polygon(vertices, corner_radius)


__all__ = [
    "CornerFillet",
    "build_rounded_polygon_path",
    "clamp_corner_radius",
    "corner_fillet",
    "polygon_vertices",
    "round_polygon",
]
