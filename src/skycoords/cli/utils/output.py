"""
CLI Output Utilities

Rich console formatting utilities for CLI output.
"""

import json
from typing import Any

import numpy as np
import numpy.typing as npt
from rich.console import Console
from rich.table import Table

from skycoords.api.coordinates import SkyPosition
from skycoords.api.core.enums import AngleUnit
from skycoords.api.core.utils import angle_from_radians


console = Console()


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_json(data: dict[str, Any]) -> None:
    """Print data as JSON."""
    console.print_json(json.dumps(data))


def format_angle(radians: float, units: AngleUnit) -> str:
    """
    Format an angle in the selected units.

    Args:
        radians: Angle in radians
        units: Display units

    Returns:
        Formatted string (e.g., "45.123456°" or "0.787543 rad")
    """
    value = angle_from_radians(radians, units)
    if units == AngleUnit.DEGREES:
        return f"{value:.6f}°"
    return f"{value:.9f} rad"


def position_to_dict(position: SkyPosition, units: AngleUnit) -> dict[str, Any]:
    """Serialisable representation of a position."""
    return {
        "frame": str(position.frame),
        "lon": angle_from_radians(position.lon, units),
        "lat": angle_from_radians(position.lat, units),
        "units": units.value,
        "dtype": position.dtype.name,
    }


def print_position_table(position: SkyPosition, units: AngleUnit, title: str = "Position") -> None:
    """
    Print a position in a formatted table.

    Args:
        position: Position to print
        units: Display units for the decimal values
        title: Table title
    """
    table = Table(title=f"{title} ({position.frame})", show_header=True, header_style="bold magenta")
    table.add_column("Coordinate", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Sexagesimal", style="white")

    lon_name, lat_name = position.names
    lon_text, lat_text = position.sexagesimal()
    table.add_row(lon_name, format_angle(position.lon, units), lon_text)
    table.add_row(lat_name, format_angle(position.lat, units), lat_text)

    console.print(table)


def print_matrix(matrix: npt.NDArray[np.float64], title: str) -> None:
    """Print a 3x3 rotation matrix."""
    table = Table(title=title, show_header=False)
    for _ in range(3):
        table.add_column(justify="right", style="green")
    for row in matrix:
        table.add_row(*(f"{value:+.15f}" for value in row))
    console.print(table)
