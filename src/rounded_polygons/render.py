from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from rounded_polygons.modeling._color import ColorInfo, to_rgba8
from rounded_polygons.modeling.drawing2d import Path2D

ColorLike = Sequence[float] | str | ColorInfo
DEFAULT_FILL = "red"


class RenderBackendError(RuntimeError):
    """Raised when a path cannot be filled by a render backend."""


def _outline(path: Path2D, segments_per_circle: int) -> np.ndarray:
    pts = path.sample(segments_per_circle=segments_per_circle)
    if pts.size and not np.all(np.isfinite(pts)):
        raise RenderBackendError("Path contains non-finite coordinates and cannot be filled.")
    return pts


def rasterize(
    path: Path2D,
    size: Sequence[int],
    color: ColorLike | None = None,
    background: ColorLike = (0.0, 0.0, 0.0, 0.0),
    segments_per_circle: int = 64,
) -> Image.Image:
    """Fill the path into a new RGBA image of ``size`` pixels.

    Path coordinates are pixel coordinates with the y axis pointing down. The
    fill color defaults to the path color, then to red.
    """
    width, height = (int(v) for v in size)
    if width <= 0 or height <= 0:
        raise RenderBackendError("Image size must be positive.")

    fill = color if color is not None else (path.color if path.color is not None else DEFAULT_FILL)
    image = Image.new("RGBA", (width, height), to_rgba8(background))
    pts = _outline(path, segments_per_circle)
    if pts.shape[0] < 3:
        return image

    draw = ImageDraw.Draw(image)
    draw.polygon([(float(x), float(y)) for x, y in pts], fill=to_rgba8(fill))
    return image


def to_polydata(
    path: Path2D,
    z: float = 0.0,
    segments_per_circle: int = 64,
    flip_y: bool = False,
):
    """Return a pyvista PolyData holding the outline as a single polygon face."""
    import pyvista as pv

    pts = _outline(path, segments_per_circle)
    if pts.shape[0] > 1 and np.allclose(pts[0], pts[-1]):
        pts = pts[:-1]
    if pts.shape[0] < 3:
        raise RenderBackendError("Path has too few points to form a polygon.")
    if flip_y:
        pts = pts * np.array([1.0, -1.0])
    pts3 = np.column_stack([pts, np.full((pts.shape[0], 1), float(z))])
    faces = np.hstack(([pts.shape[0]], np.arange(pts.shape[0])))
    return pv.PolyData(pts3, faces)


class PathPreviewer:
    """Show a filled path in a PyVista window or save an off-screen screenshot."""

    def __init__(self, segments_per_circle: int = 64) -> None:
        self.segments_per_circle = segments_per_circle
        self._pv = None

    def _ensure_backend(self):
        if self._pv is None:
            import pyvista as pv

            pv.set_plot_theme("document")
            self._pv = pv
        return self._pv

    def show(self, path: Path2D, screenshot_path: Path | None = None) -> None:
        pv = self._ensure_backend()
        mesh = to_polydata(path, segments_per_circle=self.segments_per_circle, flip_y=True)
        if path.color is not None:
            rgb, opacity = path.color
        else:
            rgb, opacity = DEFAULT_FILL, 1.0

        plotter = pv.Plotter(off_screen=screenshot_path is not None, window_size=(800, 800))
        plotter.add_mesh(mesh, color=rgb, opacity=opacity)
        plotter.view_xy()

        if screenshot_path is not None:
            screenshot_path.parent.mkdir(parents=True, exist_ok=True)
            plotter.show(title="Rounded Polygon Preview", auto_close=True, screenshot=str(screenshot_path))
            plotter.close()
            return

        plotter.show(title="Rounded Polygon Preview")
        plotter.close()


__all__ = ["PathPreviewer", "RenderBackendError", "rasterize", "to_polydata"]
