from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np

from rounded_polygons.modeling._color import ColorInfo, _resolve, to_hex
from rounded_polygons.modeling.drawing2d import ArcTo, Close, LineTo, MoveTo, Path2D

_TWO_PI = 2.0 * np.pi


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def _pt(point: np.ndarray, precision: int) -> str:
    return f"{_fmt(point[0], precision)} {_fmt(point[1], precision)}"


def _arc_commands(arc: ArcTo, precision: int) -> list[str]:
    r = _fmt(abs(arc.radius), precision)
    sweep_flag = 1 if arc.clockwise else 0
    span = arc.sweep()
    # SVG cannot draw a full circle with one elliptical-arc command.
    pieces = 2 if abs(span) >= _TWO_PI - 1e-9 else 1
    commands = []
    for k in range(1, pieces + 1):
        end = arc.point_at(arc.start_angle_rad + span * k / pieces)
        large = 1 if abs(span) / pieces > np.pi else 0
        commands.append(f"A {r} {r} 0 {large} {sweep_flag} {_pt(end, precision)}")
    return commands


def path_to_svg_data(path: Path2D, precision: int = 4) -> str:
    """Return SVG path data (``M``/``L``/``A``/``Z``) describing the path."""
    commands: list[str] = []
    current: np.ndarray | None = None
    for segment in path.segments:
        if isinstance(segment, MoveTo):
            commands.append(f"M {_pt(segment.point, precision)}")
            current = segment.point
        elif isinstance(segment, LineTo):
            commands.append(f"L {_pt(segment.point, precision)}")
            current = segment.point
        elif isinstance(segment, ArcTo):
            start = segment.start_point
            if current is None:
                commands.append(f"M {_pt(start, precision)}")
            elif not np.allclose(current, start):
                commands.append(f"L {_pt(start, precision)}")
            commands.extend(_arc_commands(segment, precision))
            current = segment.end_point
        elif isinstance(segment, Close):
            commands.append("Z")
    return " ".join(commands)


def write_svg(
    path: Path2D,
    destination: Path,
    size: Sequence[float],
    color: Sequence[float] | str | ColorInfo | None = None,
    precision: int = 4,
) -> None:
    """Write a standalone SVG document filling ``path``."""
    destination = Path(destination)
    box = path.bounds()
    if box is not None and not np.all(np.isfinite(box)):
        raise ValueError("Path contains non-finite coordinates.")

    fill = color if color is not None else (path.color if path.color is not None else "red")
    _, alpha = _resolve(fill)
    width, height = (float(v) for v in size)
    fill_rule = "evenodd" if path.fill_rule == "evenodd" else "nonzero"

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{_fmt(width, precision)}" '
            f'height="{_fmt(height, precision)}" viewBox="0 0 {_fmt(width, precision)} {_fmt(height, precision)}">'
        ),
        (
            f'  <path d="{path_to_svg_data(path, precision)}" fill="{to_hex(fill)}" '
            f'fill-opacity="{_fmt(alpha, 4)}" fill-rule="{fill_rule}"/>'
        ),
        "</svg>",
    ]
    destination.write_text("\n".join(lines) + "\n")
