from __future__ import annotations

import pathlib
from dataclasses import dataclass

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from rounded_polygons._config import RenderSettings, get_render_settings
from rounded_polygons.io import write_svg
from rounded_polygons.modeling import ArcTo, Close, LineTo, MoveTo, Path2D
from rounded_polygons.modeling._color import _resolve as _resolve_color
from rounded_polygons.render import PathPreviewer, RenderBackendError, rasterize
from rounded_polygons.view import RoundedPolygonView

console = Console()
app = typer.Typer(help="Draw regular polygons with rounded corners.")

SidesOption = typer.Option(6, "--sides", "-n", help="Number of polygon sides (fewer than 3 draws nothing).")
CornerRadiusOption = typer.Option(0.0, "--corner-radius", "-r", help="Requested corner radius in pixels.")
RotationOption = typer.Option(0.0, "--rotation", help="Rotation in degrees about the outline center.")
ScaleXOption = typer.Option(1.0, "--scale-x", help="Horizontal scale about the outline center.")
ScaleYOption = typer.Option(1.0, "--scale-y", help="Vertical scale about the outline center.")
ColorOption = typer.Option(None, "--color", help="Fill color (name or hex). Defaults to the configured color.")
WidthOption = typer.Option(None, "--width", min=1, help="Drawing width in pixels.")
HeightOption = typer.Option(None, "--height", min=1, help="Drawing height in pixels.")


@dataclass(frozen=True)
class ShapeOptions:
    view: RoundedPolygonView
    width: int
    height: int


def _shape_options(
    settings: RenderSettings,
    sides: int,
    corner_radius: float,
    rotation: float,
    scale_x: float,
    scale_y: float,
    color: str | None,
    width: int | None,
    height: int | None,
) -> ShapeOptions:
    try:
        fill = settings.color if color is None else color
        view = RoundedPolygonView(
            sides=sides,
            corner_radius=corner_radius,
            rotation=rotation,
            scale=(scale_x, scale_y),
            color=fill,
        )
        _resolve_color(fill)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    default_width, default_height = settings.image_size
    return ShapeOptions(
        view=view,
        width=width if width is not None else default_width,
        height=height if height is not None else default_height,
    )


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _resolve_output(output: pathlib.Path, overwrite: bool) -> pathlib.Path:
    final_output = output
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        if final_output != output:
            console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")
    final_output.parent.mkdir(parents=True, exist_ok=True)
    return final_output


def _describe_segment(segment: object) -> tuple[str, str]:
    if isinstance(segment, MoveTo):
        return "move", f"({segment.point[0]:.3f}, {segment.point[1]:.3f})"
    if isinstance(segment, LineTo):
        return "line", f"({segment.point[0]:.3f}, {segment.point[1]:.3f})"
    if isinstance(segment, ArcTo):
        direction = "cw" if segment.clockwise else "ccw"
        return (
            "arc",
            f"center ({segment.center[0]:.3f}, {segment.center[1]:.3f}) r={segment.radius:.3f} "
            f"{segment.start_angle_rad:.4f} -> {segment.end_angle_rad:.4f} rad {direction}",
        )
    if isinstance(segment, Close):
        return "close", ""
    return type(segment).__name__, ""


def _segment_table(path: Path2D) -> Table:
    table = Table(title="Path segments")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Geometry")
    for index, segment in enumerate(path.segments):
        kind, detail = _describe_segment(segment)
        table.add_row(str(index), kind, detail)
    return table


@app.command()
def render(
    sides: int = SidesOption,
    corner_radius: float = CornerRadiusOption,
    rotation: float = RotationOption,
    scale_x: float = ScaleXOption,
    scale_y: float = ScaleYOption,
    color: str | None = ColorOption,
    width: int | None = WidthOption,
    height: int | None = HeightOption,
    output: pathlib.Path = typer.Option(
        pathlib.Path("polygon.png"),
        "--output",
        "-o",
        help="Path to the PNG file that will be produced.",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing image."),
) -> None:
    """
    Fill the rounded polygon into a transparent PNG image.
    """

    settings = get_render_settings()
    opts = _shape_options(settings, sides, corner_radius, rotation, scale_x, scale_y, color, width, height)
    final_output = _resolve_output(output, overwrite)

    try:
        image = rasterize(
            opts.view.path(opts.width, opts.height),
            (opts.width, opts.height),
            background=settings.background,
            segments_per_circle=settings.segments_per_circle,
        )
    except RenderBackendError as exc:
        raise typer.BadParameter(str(exc)) from exc

    image.save(final_output, format="PNG")
    console.print(
        Panel(
            f"Wrote {opts.width}x{opts.height} PNG to [green]{final_output}[/green].",
            title="Render complete",
            border_style="green",
        )
    )


@app.command()
def svg(
    sides: int = SidesOption,
    corner_radius: float = CornerRadiusOption,
    rotation: float = RotationOption,
    scale_x: float = ScaleXOption,
    scale_y: float = ScaleYOption,
    color: str | None = ColorOption,
    width: int | None = WidthOption,
    height: int | None = HeightOption,
    output: pathlib.Path = typer.Option(
        pathlib.Path("polygon.svg"),
        "--output",
        "-o",
        help="Path to the SVG file that will be produced.",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing SVG."),
) -> None:
    """
    Export the rounded polygon outline as an SVG document.
    """

    settings = get_render_settings()
    opts = _shape_options(settings, sides, corner_radius, rotation, scale_x, scale_y, color, width, height)
    final_output = _resolve_output(output, overwrite)

    try:
        write_svg(opts.view.path(opts.width, opts.height), final_output, (opts.width, opts.height))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    console.print(
        Panel(
            f"Wrote SVG to [green]{final_output}[/green].",
            title="Export complete",
            border_style="green",
        )
    )


@app.command()
def describe(
    sides: int = SidesOption,
    corner_radius: float = CornerRadiusOption,
    rotation: float = RotationOption,
    scale_x: float = ScaleXOption,
    scale_y: float = ScaleYOption,
    width: int | None = WidthOption,
    height: int | None = HeightOption,
) -> None:
    """
    Print the segments of the rounded polygon outline.
    """

    settings = get_render_settings()
    opts = _shape_options(settings, sides, corner_radius, rotation, scale_x, scale_y, None, width, height)
    path = opts.view.path(opts.width, opts.height)

    console.rule("Rounded Polygon")
    if not path.segments:
        console.print(f"[yellow]{sides} sides do not form a polygon; the path is empty.[/yellow]")
        return
    console.print(_segment_table(path))
    xmin, ymin, xmax, ymax = path.bounds()
    console.print(f"[magenta]Bounds: ({xmin:.3f}, {ymin:.3f}) - ({xmax:.3f}, {ymax:.3f})[/magenta]")


@app.command()
def preview(
    sides: int = SidesOption,
    corner_radius: float = CornerRadiusOption,
    rotation: float = RotationOption,
    scale_x: float = ScaleXOption,
    scale_y: float = ScaleYOption,
    color: str | None = ColorOption,
    width: int | None = WidthOption,
    height: int | None = HeightOption,
    screenshot: pathlib.Path | None = typer.Option(
        None, "--screenshot", help="Optional path to save a screenshot of the preview."
    ),
) -> None:
    """
    Open an interactive PyVista window showing the filled outline.
    """

    settings = get_render_settings()
    opts = _shape_options(settings, sides, corner_radius, rotation, scale_x, scale_y, color, width, height)

    console.rule("Rounded Polygon Preview")
    previewer = PathPreviewer(segments_per_circle=settings.segments_per_circle)
    try:
        previewer.show(opts.view.path(opts.width, opts.height), screenshot_path=screenshot)
    except RenderBackendError as exc:
        raise typer.BadParameter(str(exc)) from exc


def main() -> None:
    app()


if __name__ == "__main__":
    main()
