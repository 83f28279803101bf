"""Render a rounded hexagon to hello_hexagon.png.

Run with:
  python examples/hello_hexagon.py
"""

from __future__ import annotations

from pathlib import Path

from rounded_polygons import RoundedPolygonView


def build() -> RoundedPolygonView:
    """A slightly turned, squashed hexagon with soft corners."""

    return RoundedPolygonView(sides=6, corner_radius=12.0, rotation=15.0, scale=(1.0, 0.8), color="#8b5cf6")


if __name__ == "__main__":
    image = build().draw(256, 256)
    image.save(Path(__file__).with_name("hello_hexagon.png"))
