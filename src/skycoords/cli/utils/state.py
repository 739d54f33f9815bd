"""
CLI State

Global options shared by every command.
"""

from skycoords.api.core.enums import AngleUnit


# Populated by the main callback
state: dict[str, AngleUnit | bool] = {
    "units": AngleUnit.DEGREES,
    "verbose": False,
}


def get_units() -> AngleUnit:
    """Angle unit selected with --units (or SKYCOORDS_UNITS)."""
    units = state["units"]
    return units if isinstance(units, AngleUnit) else AngleUnit.DEGREES
