from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
import pyvista as pv

ColorInfo = Tuple[Tuple[float, float, float], float]


def _normalize_color(color: Sequence[float] | str) -> ColorInfo:
    if isinstance(color, str):
        try:
            col = pv.Color(color)
        except ValueError as exc:
            raise ValueError(f"Unknown color {color!r}.") from exc
        rgba = tuple(float(c) for c in col.float_rgba)
        return rgba[:3], rgba[3]

    arr = np.asarray(color, dtype=float).flatten()
    if arr.size not in (3, 4):
        raise ValueError("Color must be RGB or RGBA.")
    if arr.max() > 1.0:
        arr = arr / 255.0
    rgb = tuple(float(c) for c in arr[:3])
    alpha = float(arr[3]) if arr.size == 4 else 1.0
    return rgb, alpha


def _resolve(color: Sequence[float] | str | ColorInfo) -> ColorInfo:
    # Already-normalized ((r, g, b), a) pairs pass straight through.
    if (
        isinstance(color, tuple)
        and len(color) == 2
        and isinstance(color[0], tuple)
        and len(color[0]) == 3
    ):
        return color
    return _normalize_color(color)


def to_rgba8(color: Sequence[float] | str | ColorInfo) -> tuple[int, int, int, int]:
    rgb, alpha = _resolve(color)
    r, g, b = (int(round(min(max(c, 0.0), 1.0) * 255)) for c in rgb)
    return r, g, b, int(round(min(max(alpha, 0.0), 1.0) * 255))


def to_hex(color: Sequence[float] | str | ColorInfo) -> str:
    r, g, b, _ = to_rgba8(color)
    return f"#{r:02x}{g:02x}{b:02x}"
