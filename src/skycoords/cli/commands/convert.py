"""
Convert Commands

Commands for converting positions between reference frames.
"""

import typer

from skycoords.api.coordinates import convert, rotation_matrix
from skycoords.api.core.enums import FrameKind, OutputFormat
from skycoords.api.core.exceptions import SkyCoordsError
from skycoords.cli.utils.groups import SortedCommandsGroup
from skycoords.cli.utils.output import print_error, print_json, print_matrix, print_position_table, position_to_dict
from skycoords.cli.utils.parsing import build_frame, build_position
from skycoords.cli.utils.state import get_units


app = typer.Typer(help="Frame conversion commands", cls=SortedCommandsGroup)


@app.command("position", rich_help_panel="Conversion")
def convert_position(
    lon: str = typer.Argument(..., help="Longitude (ra or l), number or sexagesimal"),
    lat: str = typer.Argument(..., help="Latitude (dec or b), number or sexagesimal"),
    source: FrameKind = typer.Option(FrameKind.ICRS, "--from", help="Frame of the input position"),
    target: FrameKind = typer.Option(FrameKind.GALACTIC, "--to", help="Frame to convert into"),
    from_equinox: float | None = typer.Option(None, "--from-equinox", help="FK5 equinox of the input (Julian year)"),
    to_equinox: float | None = typer.Option(None, "--to-equinox", help="FK5 equinox of the output (Julian year)"),
    format_output: OutputFormat = typer.Option(OutputFormat.PRETTY, "--format", "-f", help="Output format"),
) -> None:
    """
    Convert a position from one frame to another.

    Put "--" before the positional angles when one of them is negative.

    Example:
        skycoords convert position --from icrs --to galactic -- 266.405 -28.936
        skycoords convert position 12h30m00s +12d00m00s --from fk5 --from-equinox 1950 --to icrs
    """
    units = get_units()
    try:
        position = build_position(build_frame(source, from_equinox), lon, lat, units)
        result = convert(build_frame(target, to_equinox), position)
    except SkyCoordsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if format_output == OutputFormat.JSON:
        print_json({"input": position_to_dict(position, units), "output": position_to_dict(result, units)})
    else:
        print_position_table(position, units, title="Input")
        print_position_table(result, units, title="Output")


@app.command("matrix", rich_help_panel="Conversion")
def show_matrix(
    source: FrameKind = typer.Option(FrameKind.ICRS, "--from", help="Source frame"),
    target: FrameKind = typer.Option(FrameKind.GALACTIC, "--to", help="Target frame"),
    from_equinox: float | None = typer.Option(None, "--from-equinox", help="FK5 equinox of the source"),
    to_equinox: float | None = typer.Option(None, "--to-equinox", help="FK5 equinox of the target"),
    format_output: OutputFormat = typer.Option(OutputFormat.PRETTY, "--format", "-f", help="Output format"),
) -> None:
    """
    Show the rotation matrix between two frames.

    Example:
        skycoords convert matrix --from fk5 --from-equinox 1950 --to fk5 --to-equinox 2025
    """
    source_frame = build_frame(source, from_equinox)
    target_frame = build_frame(target, to_equinox)
    try:
        matrix = rotation_matrix(target_frame, source_frame)
    except SkyCoordsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if format_output == OutputFormat.JSON:
        print_json({"source": str(source_frame), "target": str(target_frame), "matrix": matrix.tolist()})
    else:
        print_matrix(matrix, title=f"{source_frame} -> {target_frame}")
