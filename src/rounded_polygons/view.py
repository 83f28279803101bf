from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from PIL import Image

from rounded_polygons.modeling import Path2D, build_rounded_polygon_path, rotate, scale
from rounded_polygons.render import rasterize


@dataclass
class RoundedPolygonView:
    """Drawing state for a filled rounded polygon.

    Every draw rebuilds the outline from the current fields: build the polygon
    inside the drawing rect, rotate it, scale it, close it and fill it.
    """

    sides: int = 6
    corner_radius: float = 0.0
    rotation: float = 0.0
    scale: tuple[float, float] = (1.0, 1.0)
    color: Sequence[float] | str = "red"

    INTRINSIC_SIZE = (60, 60)

    def path(self, width: float, height: float) -> Path2D:
        outline = build_rounded_polygon_path(width, height, self.sides, self.corner_radius)
        outline = rotate(outline, self.rotation)
        scale_x, scale_y = self.scale
        outline = scale(outline, scale_x, scale_y)
        return outline.close().with_color(self.color)

    def draw(
        self,
        width: int | None = None,
        height: int | None = None,
        segments_per_circle: int = 64,
        background: Sequence[float] | str = (0.0, 0.0, 0.0, 0.0),
    ) -> Image.Image:
        width = width if width is not None else self.INTRINSIC_SIZE[0]
        height = height if height is not None else self.INTRINSIC_SIZE[1]
        return rasterize(
            self.path(width, height),
            (width, height),
            background=background,
            segments_per_circle=segments_per_circle,
        )
