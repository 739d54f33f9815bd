"""
Frames Command

Lists the supported reference frames and the conversions defined between them.
"""

import typer
from rich.table import Table

from skycoords.api.coordinates import Frame, supported_frame_pairs
from skycoords.api.core.enums import FrameKind, OutputFormat
from skycoords.cli.utils.output import console, print_json


_DESCRIPTIONS: dict[FrameKind, str] = {
    FrameKind.ICRS: "International Celestial Reference System (ra, dec)",
    FrameKind.GALACTIC: "Galactic longitude and latitude (l, b)",
    FrameKind.FK5: "Mean equator and equinox of an epoch (ra, dec), default J2000",
}


def list_frames(
    format_output: OutputFormat = typer.Option(OutputFormat.PRETTY, "--format", "-f", help="Output format"),
) -> None:
    """
    List supported frames and conversions.

    Example:
        skycoords frames
        skycoords frames --format json
    """
    pairs = supported_frame_pairs()

    if format_output == OutputFormat.JSON:
        print_json(
            {
                "frames": {kind.value: _DESCRIPTIONS[kind] for kind in FrameKind},
                "conversions": [{"from": source.value, "to": target.value} for target, source in pairs],
            }
        )
        return

    frames_table = Table(title="Frames", show_header=True, header_style="bold magenta")
    frames_table.add_column("Name", style="cyan")
    frames_table.add_column("Position Type", style="green")
    frames_table.add_column("Description")
    for kind in FrameKind:
        frames_table.add_row(kind.value, Frame(kind).position_class.__name__, _DESCRIPTIONS[kind])
    console.print(frames_table)

    pairs_table = Table(title="Conversions", show_header=True, header_style="bold magenta")
    pairs_table.add_column("From", style="cyan")
    pairs_table.add_column("To", style="green")
    for target, source in pairs:
        pairs_table.add_row(source.value, target.value)
    console.print(pairs_table)
