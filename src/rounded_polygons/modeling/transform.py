from __future__ import annotations

import numpy as np

from .drawing2d import ArcTo, LineTo, MoveTo, Path2D, Segment2D

_TWO_PI = 2.0 * np.pi


def _wrap(angle: float) -> float:
    """Wrap an angle into [-pi, pi)."""
    return (angle + np.pi) % _TWO_PI - np.pi


def _map_arc(arc: ArcTo, matrix: np.ndarray, pivot: np.ndarray) -> ArcTo:
    center = matrix @ (arc.center - pivot) + pivot
    det = float(np.linalg.det(matrix))

    start_dir = matrix @ np.array([np.cos(arc.start_angle_rad), np.sin(arc.start_angle_rad)])
    end_dir = matrix @ np.array([np.cos(arc.end_angle_rad), np.sin(arc.end_angle_rad)])

    start = arc.start_angle_rad + _wrap(np.arctan2(start_dir[1], start_dir[0]) - arc.start_angle_rad)
    sweep = arc.sweep()
    mirrored = det < 0
    if mirrored:
        sweep = -sweep
    raw = np.arctan2(end_dir[1], end_dir[0]) - start
    new_sweep = sweep + _wrap(raw - sweep)

    # anisotropic maps stretch the two ends differently; split the difference
    stretch = (float(np.linalg.norm(start_dir)) + float(np.linalg.norm(end_dir))) / 2.0

    return ArcTo(
        center=center,
        radius=arc.radius * stretch,
        start_angle_rad=start,
        end_angle_rad=start + new_sweep,
        clockwise=arc.clockwise != mirrored,
    )


def _apply_about_center(path: Path2D, matrix: np.ndarray) -> Path2D:
    """Apply ``matrix`` to every segment, pivoting about the path's bounding-box center."""
    pivot = path.center()
    result = path.copy()
    if pivot is None:
        return result

    segments: list[Segment2D] = []
    with np.errstate(invalid="ignore", over="ignore"):
        for segment in path.segments:
            if isinstance(segment, MoveTo):
                segments.append(MoveTo(matrix @ (segment.point - pivot) + pivot))
            elif isinstance(segment, LineTo):
                segments.append(LineTo(matrix @ (segment.point - pivot) + pivot))
            elif isinstance(segment, ArcTo):
                segments.append(_map_arc(segment, matrix, pivot))
            else:
                segments.append(segment)
    result.segments = segments
    return result


def rotate(path: Path2D, angle_deg: float) -> Path2D:
    """Return a copy of the path rotated about its bounding-box center.

    The center comes from the tight geometric bounds (arc extrema included, no
    curve control points), so outlines without rotational symmetry about that
    box, such as odd-sided polygons, pivot slightly differently than they would
    about a control-point box.
    """
    angle = np.deg2rad(float(angle_deg))
    c, s = np.cos(angle), np.sin(angle)
    matrix = np.array([[c, -s], [s, c]])
    return _apply_about_center(path, matrix)


def scale(path: Path2D, scale_x: float, scale_y: float) -> Path2D:
    """Return a copy of the path scaled about its bounding-box center.

    Arcs stay circular: centers and start angles follow the scale and the
    radius is the mean of the scaled start and end radii. Under unequal
    ``scale_x`` and ``scale_y`` neither arc end lands exactly on its scaled
    point; both miss by the same distance.
    """
    matrix = np.diag([float(scale_x), float(scale_y)])
    return _apply_about_center(path, matrix)


__all__ = ["rotate", "scale"]
