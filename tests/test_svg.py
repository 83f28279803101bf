from __future__ import annotations

import numpy as np
import pytest

from rounded_polygons.io import path_to_svg_data, write_svg
from rounded_polygons.modeling import ArcTo, MoveTo, Path2D, build_rounded_polygon_path, scale


def _commands(data: str) -> list[str]:
    return [token for token in data.split() if token.isalpha()]


@pytest.mark.parametrize("sides", [3, 6])
def test_svg_data_layout(sides):
    path = build_rounded_polygon_path(100.0, 100.0, sides=sides, corner_radius=4.0)
    data = path_to_svg_data(path)
    commands = _commands(data)
    assert commands[0] == "M"
    assert commands[-1] == "Z"
    assert commands.count("A") == sides
    assert commands.count("L") == sides


def test_svg_data_square_values():
    path = build_rounded_polygon_path(100.0, 100.0, sides=4, corner_radius=0.0)
    data = path_to_svg_data(path, precision=3)
    assert data.startswith("M 100 50 L 50 100 A 0 0 0 0 1 50 100")


def test_svg_sweep_flag_follows_direction():
    path = build_rounded_polygon_path(100.0, 100.0, sides=4, corner_radius=5.0)
    mirrored = scale(path, -1.0, 1.0)
    assert " 0 0 1 " in path_to_svg_data(path)
    assert " 0 0 0 " in path_to_svg_data(mirrored)


def test_svg_full_circle_is_split():
    arc = ArcTo(center=(0, 0), radius=2.0, start_angle_rad=0.0, end_angle_rad=2 * np.pi)
    path = Path2D(segments=[MoveTo(arc.start_point), arc])
    commands = _commands(path_to_svg_data(path))
    assert commands == ["M", "A", "A"]


def test_svg_arc_gap_is_joined_with_line():
    arc = ArcTo(center=(0, 0), radius=1.0, start_angle_rad=0.0, end_angle_rad=np.pi / 2)
    path = Path2D(segments=[MoveTo((5.0, 5.0)), arc])
    assert path_to_svg_data(path) == "M 5 5 L 1 0 A 1 1 0 0 1 0 1"


def test_write_svg_document(tmp_path):
    path = build_rounded_polygon_path(64.0, 32.0, sides=5, corner_radius=3.0).with_color("red")
    out = tmp_path / "shape.svg"
    write_svg(path, out, size=(64, 32))
    text = out.read_text()
    assert text.startswith("<?xml")
    assert 'viewBox="0 0 64 32"' in text
    assert 'fill="#ff0000"' in text
    assert 'fill-rule="evenodd"' in text


def test_write_svg_rejects_non_finite(tmp_path):
    path = build_rounded_polygon_path(64.0, 64.0, sides=5, corner_radius=float("nan"))
    with pytest.raises(ValueError):
        write_svg(path, tmp_path / "bad.svg", size=(64, 64))
