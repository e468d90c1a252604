"""CLI for measuring SVG paths.

Usage:
    python -m pathmeasure.cli length "M 0 0 L 100 0"
    python -m pathmeasure.cli point "M 0 0 L 100 0" 0.5
    python -m pathmeasure.cli nearest "M 0 0 L 100 0" 40 25
    python -m pathmeasure.cli sample "M 0 0 Q 50 100 100 0" --count 5
    python -m pathmeasure.cli segments "M 0 0 L 150 0 L 150 150"
"""

import json
import logging
import math
from typing import Any

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from pathmeasure.errors import SVGPathError
from pathmeasure.logging_config import setup_cli_logging
from pathmeasure.path import MeasuredPath
from pathmeasure.types import PRESETS, get_preset

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pathmeasure",
    help="Arc-length queries on SVG paths",
    add_completion=False,
)
console = Console()

PRECISION_HELP = f"Precision preset: {', '.join(PRESETS)}"


@app.callback()
def main() -> None:
    """Arc-length queries on SVG paths."""
    setup_cli_logging()


def _load_path(d: str, precision: str) -> MeasuredPath:
    """Build a path from SVG data, exiting with an error message on bad input."""
    settings = get_preset(precision)
    if settings is None:
        console.print(f"[red]Unknown precision '{precision}'. {PRECISION_HELP}[/red]")
        raise typer.Exit(1)
    try:
        return MeasuredPath.from_svg(d, settings=settings)
    except SVGPathError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e


def _print_json(data: dict[str, Any]) -> None:
    console.print(json.dumps(data), soft_wrap=True, markup=False, highlight=False)


@app.command("length")
def length_command(
    d: str = typer.Argument(..., help="SVG path data"),
    precision: str = typer.Option("balanced", "--precision", "-p", help=PRECISION_HELP),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Print the total length of a path."""
    path = _load_path(d, precision)
    length = path.length()
    if json_output:
        _print_json({"length": length})
    else:
        console.print(f"[green]Length:[/green] {length:.4f}")


@app.command("point")
def point_command(
    d: str = typer.Argument(..., help="SVG path data"),
    t: float = typer.Argument(..., help="Fraction of length (0-1)"),
    precision: str = typer.Option("balanced", "--precision", "-p", help=PRECISION_HELP),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Print point, slope and tangent angle at a fraction of the path's length."""
    path = _load_path(d, precision)
    point = path.point_at_fraction(t)
    slope = path.slope_at_fraction(t)
    angle = path.tangent_angle_at_fraction(t)

    if json_output:
        _print_json(
            {
                "t": t,
                "point": point.model_dump(),
                # JSON has no inf/nan
                "slope": slope if math.isfinite(slope) else None,
                "tangent_angle": angle,
            }
        )
        return

    console.print(f"[green]Point:[/green] ({point.x:.4f}, {point.y:.4f})")
    console.print(f"[green]Slope:[/green] {slope:.4f}")
    console.print(
        f"[green]Tangent angle:[/green] {angle:.4f} rad ({math.degrees(angle):.2f} deg)"
    )


@app.command("nearest")
def nearest_command(
    d: str = typer.Argument(..., help="SVG path data"),
    x: float = typer.Argument(..., help="Target x"),
    y: float = typer.Argument(..., help="Target y"),
    precision: str = typer.Option("balanced", "--precision", "-p", help=PRECISION_HELP),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Print the closest path point to (x, y) and its distance."""
    path = _load_path(d, precision)
    point = path.perpendicular_point((x, y))
    dist = path.perpendicular_distance((x, y))

    if json_output:
        _print_json({"point": point.model_dump(), "distance": dist})
    else:
        console.print(f"[green]Closest point:[/green] ({point.x:.4f}, {point.y:.4f})")
        console.print(f"[green]Distance:[/green] {dist:.4f}")


@app.command("sample")
def sample_command(
    d: str = typer.Argument(..., help="SVG path data"),
    count: int = typer.Option(11, "--count", "-c", help="Number of points"),
    precision: str = typer.Option("balanced", "--precision", "-p", help=PRECISION_HELP),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Print points evenly spaced along the path."""
    if count < 1:
        console.print("[red]Count must be at least 1[/red]")
        raise typer.Exit(1)

    path = _load_path(d, precision)
    points = path.sample(count)

    if json_output:
        _print_json({"points": [p.model_dump() for p in points]})
        return

    table = Table(title="Samples", box=box.SIMPLE)
    table.add_column("t", style="dim")
    table.add_column("x", style="cyan")
    table.add_column("y", style="cyan")

    for i, p in enumerate(points):
        t = i / (count - 1) if count > 1 else 0.0
        table.add_row(f"{t:.3f}", f"{p.x:.4f}", f"{p.y:.4f}")

    console.print(table)


@app.command("segments")
def segments_command(
    d: str = typer.Argument(..., help="SVG path data"),
    precision: str = typer.Option("balanced", "--precision", "-p", help=PRECISION_HELP),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Print the segments a path decomposes into, with lengths and length ranges."""
    path = _load_path(d, precision)
    # A point query builds the length ranges
    path.point_at_fraction(0.0)
    segments = path.segments

    if json_output:
        _print_json(
            {
                "segments": [
                    {
                        "kind": s.kind.value,
                        "start": s.start.model_dump(),
                        "end": s.end.model_dump(),
                        "length": s.length,
                        "length_range": list(s.length_range) if s.length_range else None,
                    }
                    for s in segments
                ]
            }
        )
        return

    if not segments:
        console.print("[yellow]Path has no segments[/yellow]")
        return

    table = Table(title="Segments", box=box.ROUNDED)
    table.add_column("#", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Start", style="green")
    table.add_column("End", style="green")
    table.add_column("Length", style="yellow")
    table.add_column("Range", style="magenta")

    for i, s in enumerate(segments):
        lo, hi = s.length_range or (0.0, 0.0)
        table.add_row(
            str(i + 1),
            s.kind.value,
            f"({s.start.x:g}, {s.start.y:g})",
            f"({s.end.x:g}, {s.end.y:g})",
            f"{s.length:.3f}",
            f"{lo:.3f}-{hi:.3f}",
        )

    console.print(table)
    logger.debug(f"Listed {len(segments)} segments")


if __name__ == "__main__":
    app()
