from __future__ import annotations

import pytest
from PIL import Image
from typer.testing import CliRunner

from rounded_polygons.cli import _next_available_path, app

runner = CliRunner()


def test_render_writes_png(tmp_path):
    out = tmp_path / "hex.png"
    result = runner.invoke(
        app,
        ["render", "--sides", "6", "--corner-radius", "4", "--width", "48", "--height", "40", "-o", str(out)],
    )
    assert result.exit_code == 0, result.output
    with Image.open(out) as image:
        assert image.size == (48, 40)
        assert image.convert("RGBA").getpixel((24, 20)) == (255, 0, 0, 255)


def test_render_does_not_overwrite(tmp_path):
    out = tmp_path / "shape.png"
    out.write_bytes(b"")
    result = runner.invoke(app, ["render", "--width", "16", "--height", "16", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "shape (1).png").exists()
    assert out.read_bytes() == b""


def test_render_overwrite(tmp_path):
    out = tmp_path / "shape.png"
    out.write_bytes(b"")
    result = runner.invoke(app, ["render", "--width", "16", "--height", "16", "-o", str(out), "--overwrite"])
    assert result.exit_code == 0, result.output
    assert out.stat().st_size > 0
    assert not (tmp_path / "shape (1).png").exists()


def test_render_rejects_bad_color(tmp_path):
    result = runner.invoke(app, ["render", "--color", "1,2", "-o", str(tmp_path / "x.png")])
    assert result.exit_code != 0


def test_svg_command(tmp_path):
    out = tmp_path / "tri.svg"
    result = runner.invoke(
        app,
        ["svg", "-n", "3", "-r", "2", "--rotation", "30", "--scale-x", "1.5", "--color", "#00ff00", "-o", str(out)],
    )
    assert result.exit_code == 0, result.output
    text = out.read_text()
    assert 'fill="#00ff00"' in text
    assert text.count(" A ") == 3


def test_describe_lists_segments():
    result = runner.invoke(app, ["describe", "--sides", "4", "--corner-radius", "3"])
    assert result.exit_code == 0, result.output
    assert result.output.count("arc") >= 4
    assert "Bounds" in result.output


def test_describe_degenerate():
    result = runner.invoke(app, ["describe", "--sides", "2"])
    assert result.exit_code == 0, result.output
    assert "empty" in result.output


def test_next_available_path(tmp_path):
    target = tmp_path / "a.png"
    assert _next_available_path(target) == target
    target.write_bytes(b"")
    (tmp_path / "a (1).png").write_bytes(b"")
    assert _next_available_path(target) == tmp_path / "a (2).png"


@pytest.mark.preview
def test_preview_screenshot(tmp_path):
    out = tmp_path / "shot.png"
    result = runner.invoke(app, ["preview", "-n", "5", "-r", "3", "--screenshot", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()


def test_preview_degenerate_is_bad_parameter(tmp_path):
    result = runner.invoke(app, ["preview", "-n", "2", "--screenshot", str(tmp_path / "shot.png")])
    assert result.exit_code != 0
    assert not (tmp_path / "shot.png").exists()


def test_unknown_color_is_bad_parameter(tmp_path):
    out = tmp_path / "x.svg"
    result = runner.invoke(app, ["svg", "--color", "not-a-color", "-o", str(out)])
    assert result.exit_code != 0
    assert not out.exists()
