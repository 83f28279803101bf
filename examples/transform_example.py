"""Build, rotate and scale a rounded triangle by hand, then export it as SVG."""

from __future__ import annotations

from pathlib import Path

from rounded_polygons.io import write_svg
from rounded_polygons.modeling import build_rounded_polygon_path, rotate, scale


def build():
    path = build_rounded_polygon_path(200.0, 200.0, sides=3, corner_radius=20.0)
    path = rotate(path, -90.0)
    path = scale(path, 1.2, 1.2)
    return path.close().with_color("orange")


if __name__ == "__main__":
    write_svg(build(), Path(__file__).with_name("triangle.svg"), size=(200, 200))
