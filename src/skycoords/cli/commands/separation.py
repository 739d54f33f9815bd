"""
Separation Command

Angular distance between two positions, possibly in different frames.
"""

import typer

from skycoords.api.coordinates import separation
from skycoords.api.core.enums import FrameKind, OutputFormat
from skycoords.api.core.exceptions import SkyCoordsError
from skycoords.api.core.utils import angle_from_radians
from skycoords.cli.utils.output import console, format_angle, print_error, print_json, position_to_dict
from skycoords.cli.utils.parsing import build_frame, build_position
from skycoords.cli.utils.state import get_units


def show_separation(
    lon1: str = typer.Argument(..., help="Longitude of the first position"),
    lat1: str = typer.Argument(..., help="Latitude of the first position"),
    lon2: str = typer.Argument(..., help="Longitude of the second position"),
    lat2: str = typer.Argument(..., help="Latitude of the second position"),
    frame1: FrameKind = typer.Option(FrameKind.ICRS, "--frame1", help="Frame of the first position"),
    frame2: FrameKind = typer.Option(FrameKind.ICRS, "--frame2", help="Frame of the second position"),
    equinox1: float | None = typer.Option(None, "--equinox1", help="FK5 equinox of the first position"),
    equinox2: float | None = typer.Option(None, "--equinox2", help="FK5 equinox of the second position"),
    format_output: OutputFormat = typer.Option(OutputFormat.PRETTY, "--format", "-f", help="Output format"),
) -> None:
    """
    Angular separation between two positions.

    The second position is converted into the frame of the first when they differ.

    Example:
        skycoords separation 0 0 180 0
        skycoords separation --frame2 galactic -- 10.68 41.27 121.17 -21.57
    """
    units = get_units()
    try:
        c1 = build_position(build_frame(frame1, equinox1), lon1, lat1, units)
        c2 = build_position(build_frame(frame2, equinox2), lon2, lat2, units)
        distance = separation(c1, c2)
    except SkyCoordsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if format_output == OutputFormat.JSON:
        print_json(
            {
                "first": position_to_dict(c1, units),
                "second": position_to_dict(c2, units),
                "separation": angle_from_radians(distance, units),
                "units": units.value,
            }
        )
    else:
        console.print(f"[bold]Separation:[/bold] [green]{format_angle(distance, units)}[/green]")
