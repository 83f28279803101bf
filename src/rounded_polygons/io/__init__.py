from __future__ import annotations

from .svg import path_to_svg_data, write_svg

__all__ = ["path_to_svg_data", "write_svg"]
