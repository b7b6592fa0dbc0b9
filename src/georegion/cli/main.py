"""georegion CLI.

Command-line interface for planar distance, circle buffering, containment
and UTM zone lookup. Coordinates are given as longitude then latitude;
negative values may be passed directly or after a ``--`` separator.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from enum import Enum
from typing import Annotated, TypeVar

import typer
from pydantic import ValidationError

from georegion import __version__
from georegion.exceptions import GeoRegionError
from georegion.model import GeoPoint
from georegion.projection import central_meridian, utm_zone
from georegion.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="georegion",
    help="georegion: zone-aware projection and polygon algebra for WGS84",
    add_completion=False,
)

_COORDS = {"ignore_unknown_options": True}

T = TypeVar("T")


class OutputFormat(str, Enum):
    """Geometry text encoding."""

    wkt = "wkt"
    geojson = "geojson"


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"georegion {__version__}")


@app.command(context_settings=_COORDS)
def zone(
    lng: Annotated[float, typer.Argument(help="Longitude (degrees)")],
    lat: Annotated[float, typer.Argument(help="Latitude (degrees)")],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the UTM zone used for a coordinate."""
    number = utm_zone(lng, lat)
    meridian = central_meridian(number)
    if json_output:
        typer.echo(json.dumps({"zone": number, "central_meridian": meridian}))
    else:
        typer.echo(f"zone {number} (central meridian {meridian:g})")


@app.command(context_settings=_COORDS)
def distance(
    lng1: Annotated[float, typer.Argument(help="First longitude")],
    lat1: Annotated[float, typer.Argument(help="First latitude")],
    lng2: Annotated[float, typer.Argument(help="Second longitude")],
    lat2: Annotated[float, typer.Argument(help="Second latitude")],
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Increase verbosity")
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Planar distance in meters, measured in the first point's zone."""
    _configure_logging(verbose)
    meters = _run(
        lambda: GeoPoint(lng=lng1, lat=lat1).distance(GeoPoint(lng=lng2, lat=lat2)),
        json_output,
    )
    if json_output:
        typer.echo(json.dumps({"distance_m": meters}))
    else:
        typer.echo(f"{meters:.3f}")


@app.command(context_settings=_COORDS)
def buffer(
    lng: Annotated[float, typer.Argument(help="Center longitude")],
    lat: Annotated[float, typer.Argument(help="Center latitude")],
    radius: Annotated[float, typer.Argument(help="Radius in meters")],
    segments: Annotated[
        int | None, typer.Option("--segments", "-s", help="Polygon vertices")
    ] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output encoding")
    ] = OutputFormat.wkt,
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Increase verbosity")
    ] = 0,
) -> None:
    """Buffer a point into a polygon and print it."""
    _configure_logging(verbose)
    region = _run(
        lambda: GeoPoint(lng=lng, lat=lat).buffer(radius).as_region(segments),
        json_output=False,
    )
    if output_format is OutputFormat.geojson:
        typer.echo(region.geojson())
    else:
        typer.echo(region.wkt())


@app.command(context_settings=_COORDS)
def contains(
    lng: Annotated[float, typer.Argument(help="Circle center longitude")],
    lat: Annotated[float, typer.Argument(help="Circle center latitude")],
    radius: Annotated[float, typer.Argument(help="Radius in meters")],
    point_lng: Annotated[float, typer.Argument(help="Query longitude")],
    point_lat: Annotated[float, typer.Argument(help="Query latitude")],
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Increase verbosity")
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Test a point against a buffered circle (polygonal approximation)."""
    _configure_logging(verbose)
    inside = _run(
        lambda: GeoPoint(lng=lng, lat=lat)
        .buffer(radius)
        .contains_coord(GeoPoint(lng=point_lng, lat=point_lat)),
        json_output,
    )
    if json_output:
        typer.echo(json.dumps({"contains": inside}))
    else:
        typer.echo("true" if inside else "false")


# =============================================================================
# Helpers
# =============================================================================


def _run(operation: Callable[[], T], json_output: bool) -> T:
    """Run a geometry call, turning domain errors into exit code 1."""
    logger = get_logger(__name__)
    try:
        return operation()
    except (GeoRegionError, ValidationError) as e:
        logger.debug("Command failed", error=str(e))
        if json_output:
            typer.echo(json.dumps({"error": str(e)}))
        else:
            typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)


if __name__ == "__main__":  # pragma: no cover
    app()
