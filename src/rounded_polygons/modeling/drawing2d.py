from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from ._color import ColorInfo, _resolve

_HALF_PI = np.pi / 2.0
_TWO_PI = 2.0 * np.pi


def _to_vec2(value: Sequence[float], label: str = "point") -> np.ndarray:
    try:
        arr = np.asarray(value, dtype=float).reshape(2)
    except Exception as exc:
        raise ValueError(f"{label} must be a 2D coordinate.") from exc
    return arr


@dataclass(frozen=True)
class MoveTo:
    point: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", _to_vec2(self.point, "point"))


@dataclass(frozen=True)
class LineTo:
    point: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", _to_vec2(self.point, "point"))


@dataclass(frozen=True)
class ArcTo:
    """Circular arc in screen coordinates (y axis pointing down).

    Angles are radians. ``clockwise`` arcs run from ``start_angle_rad`` towards
    increasing angles, counter-clockwise arcs towards decreasing ones. Radius and
    angles are not validated: degenerate or non-finite values are carried as-is.
    """

    center: np.ndarray
    radius: float
    start_angle_rad: float
    end_angle_rad: float
    clockwise: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", _to_vec2(self.center, "center"))
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "start_angle_rad", float(self.start_angle_rad))
        object.__setattr__(self, "end_angle_rad", float(self.end_angle_rad))
        object.__setattr__(self, "clockwise", bool(self.clockwise))

    def point_at(self, angle_rad: float) -> np.ndarray:
        return self.center + self.radius * np.array([np.cos(angle_rad), np.sin(angle_rad)])

    @property
    def start_point(self) -> np.ndarray:
        return self.point_at(self.start_angle_rad)

    @property
    def end_point(self) -> np.ndarray:
        return self.point_at(self.end_angle_rad)

    def sweep(self) -> float:
        """Signed angle travelled from start to end, wrapped the way the arc runs."""
        start = self.start_angle_rad
        end = self.end_angle_rad
        if self.clockwise:
            if end < start:
                end += _TWO_PI
        else:
            if end > start:
                end -= _TWO_PI
        return end - start

    def sample(self, segments_per_circle: int) -> np.ndarray:
        if segments_per_circle < 3:
            raise ValueError("segments_per_circle must be >= 3.")
        span = self.sweep()
        if np.isfinite(span):
            steps = max(int(np.ceil(segments_per_circle * (abs(span) / _TWO_PI))), 2)
        else:
            steps = 2
        angles = self.start_angle_rad + np.linspace(0.0, span, steps, endpoint=True)
        x = self.center[0] + self.radius * np.cos(angles)
        y = self.center[1] + self.radius * np.sin(angles)
        return np.column_stack([x, y])

    def extrema(self) -> np.ndarray:
        """Endpoints plus every axis-aligned extreme point the arc passes through."""
        span = self.sweep()
        lo = min(self.start_angle_rad, self.start_angle_rad + span)
        hi = max(self.start_angle_rad, self.start_angle_rad + span)
        points = [self.start_point, self.end_point]
        if np.isfinite(lo) and np.isfinite(hi):
            first = int(np.ceil(lo / _HALF_PI))
            last = int(np.floor(hi / _HALF_PI))
            for k in range(first, min(last, first + 3) + 1):
                points.append(self.point_at(k * _HALF_PI))
        return np.vstack(points)


@dataclass(frozen=True)
class Close:
    pass


Segment2D = MoveTo | LineTo | ArcTo | Close


@dataclass
class Path2D:
    """A single contour made of move/line/arc segments, ready to be filled."""

    segments: List[Segment2D] = field(default_factory=list)
    color: ColorInfo | None = None
    fill_rule: str = "evenodd"

    @property
    def closed(self) -> bool:
        return bool(self.segments) and isinstance(self.segments[-1], Close)

    def close(self) -> "Path2D":
        if self.segments and not self.closed:
            self.segments.append(Close())
        return self

    def copy(self) -> "Path2D":
        return Path2D(
            segments=list(self.segments),
            color=self.color,
            fill_rule=self.fill_rule,
        )

    def bounds(self) -> tuple[float, float, float, float] | None:
        """Return ``(xmin, ymin, xmax, ymax)`` of the drawn geometry, or None when empty."""
        chunks = []
        for segment in self.segments:
            if isinstance(segment, (MoveTo, LineTo)):
                chunks.append(segment.point[np.newaxis, :])
            elif isinstance(segment, ArcTo):
                chunks.append(segment.extrema())
        if not chunks:
            return None
        pts = np.vstack(chunks)
        xmin, ymin = pts.min(axis=0)
        xmax, ymax = pts.max(axis=0)
        return float(xmin), float(ymin), float(xmax), float(ymax)

    def center(self) -> np.ndarray | None:
        box = self.bounds()
        if box is None:
            return None
        xmin, ymin, xmax, ymax = box
        return np.array([(xmin + xmax) / 2.0, (ymin + ymax) / 2.0])

    def sample(self, segments_per_circle: int = 64) -> np.ndarray:
        """Flatten the outline into a polyline; closed paths repeat their first point."""
        if not self.segments:
            return np.zeros((0, 2), dtype=float)
        points = []
        for segment in self.segments:
            if isinstance(segment, (MoveTo, LineTo)):
                points.append(segment.point[np.newaxis, :])
            elif isinstance(segment, ArcTo):
                points.append(segment.sample(segments_per_circle))
        if not points:
            return np.zeros((0, 2), dtype=float)
        pts = np.vstack(points)
        if self.closed and pts.shape[0] > 0 and not np.allclose(pts[0], pts[-1], equal_nan=True):
            pts = np.vstack([pts, pts[0]])
        return pts

    def with_color(self, color: Sequence[float] | str | ColorInfo | None) -> "Path2D":
        if color is None:
            self.color = None
            return self
        self.color = _resolve(color)
        return self


__all__ = [
    "ArcTo",
    "Close",
    "LineTo",
    "MoveTo",
    "Path2D",
    "Segment2D",
]
