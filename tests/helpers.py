from __future__ import annotations

import numpy as np

from rounded_polygons.modeling import ArcTo, Close, LineTo, MoveTo, Path2D


def assert_paths_close(actual: Path2D, expected: Path2D, atol: float = 1e-9) -> None:
    """Compare two paths segment by segment, arcs by their drawn geometry."""
    assert len(actual.segments) == len(expected.segments)
    for got, want in zip(actual.segments, expected.segments):
        assert type(got) is type(want)
        if isinstance(want, (MoveTo, LineTo)):
            assert np.allclose(got.point, want.point, atol=atol)
        elif isinstance(want, ArcTo):
            assert got.clockwise == want.clockwise
            assert np.allclose(got.center, want.center, atol=atol)
            assert np.isclose(got.radius, want.radius, atol=atol)
            assert np.allclose(got.start_point, want.start_point, atol=atol)
            assert np.allclose(got.end_point, want.end_point, atol=atol)
            assert np.isclose(got.sweep(), want.sweep(), atol=atol)
        else:
            assert isinstance(got, Close)


def segment_kinds(path: Path2D) -> list[str]:
    return [type(segment).__name__ for segment in path.segments]
