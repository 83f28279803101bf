from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from rounded_polygons.modeling._color import ColorInfo, _normalize_color

CONFIG_DIR = Path.home() / ".rounded_polygons"
CONFIG_FILE = CONFIG_DIR / "rounded_polygons.cfg"
DEFAULT_CONFIG = {
    "_comment": "color: name, hex or RGB(A) list. image_size: [width, height] in pixels.",
    "color": "red",
    "background": [0, 0, 0, 0],
    "image_size": [256, 256],
    "segments_per_circle": 64,
}


@dataclass(frozen=True)
class RenderSettings:
    """Resolved render defaults from rounded_polygons.cfg."""

    color: ColorInfo
    background: ColorInfo
    image_size: tuple[int, int]
    segments_per_circle: int


def ensure_user_config() -> None:
    """Ensure ~/.rounded_polygons/rounded_polygons.cfg exists with sane defaults."""

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if CONFIG_FILE.exists():
        return

    try:
        CONFIG_FILE.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        data = json.loads(CONFIG_FILE.read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(data, dict):
        return DEFAULT_CONFIG.copy()
    return data


def _color_or_default(value: Any, key: str) -> ColorInfo:
    try:
        return _normalize_color(value)
    except (TypeError, ValueError):
        return _normalize_color(DEFAULT_CONFIG[key])


def _image_size(value: Any) -> tuple[int, int]:
    try:
        width, height = (int(v) for v in value)
    except (TypeError, ValueError):
        width, height = DEFAULT_CONFIG["image_size"]
    if width <= 0 or height <= 0:
        width, height = DEFAULT_CONFIG["image_size"]
    return width, height


def _segments_per_circle(value: Any) -> int:
    try:
        segments = int(value)
    except (TypeError, ValueError):
        return DEFAULT_CONFIG["segments_per_circle"]
    return segments if segments >= 3 else DEFAULT_CONFIG["segments_per_circle"]


def get_render_settings() -> RenderSettings:
    """Return the configured fill color, background, image size and arc resolution."""

    raw_config = _load_user_config()
    return RenderSettings(
        color=_color_or_default(raw_config.get("color", DEFAULT_CONFIG["color"]), "color"),
        background=_color_or_default(raw_config.get("background", DEFAULT_CONFIG["background"]), "background"),
        image_size=_image_size(raw_config.get("image_size", DEFAULT_CONFIG["image_size"])),
        segments_per_circle=_segments_per_circle(
            raw_config.get("segments_per_circle", DEFAULT_CONFIG["segments_per_circle"])
        ),
    )
