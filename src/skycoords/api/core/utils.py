"""
Utility functions for reading and writing angles.

Sexagesimal parsing and formatting is delegated to Astropy's ``Angle`` so that
every textual form it understands ("12h30m00s", "12:30:00", "-45d30m", ...)
is accepted.
"""

from __future__ import annotations

import logging

from astropy import units as u
from astropy.coordinates import Angle

from skycoords.api.core.enums import AngleUnit
from skycoords.api.core.exceptions import InvalidCoordinateError


logger = logging.getLogger(__name__)


__all__ = [
    "angle_from_radians",
    "angle_to_radians",
    "format_dms",
    "format_hms",
    "parse_angle",
]


def parse_angle(text: str, hours: bool = False) -> float:
    """
    Parse a sexagesimal or decimal angle string into radians.

    Args:
        text: Angle text. Bare numbers and colon-separated values are read in
            the default unit; explicit unit markers ("h", "d", "m", "s") win.
        hours: Read the default unit as hour angle instead of degrees

    Returns:
        Angle in radians

    Raises:
        InvalidCoordinateError: If the text cannot be parsed

    Example:
        >>> round(parse_angle("12h00m00s", hours=True), 6)
        3.141593
    """
    unit = u.hourangle if hours else u.deg
    stripped = text.strip()
    if not stripped:
        raise InvalidCoordinateError("Empty angle string")
    try:
        angle = Angle(stripped, unit=unit)
    except (ValueError, u.UnitsError) as e:
        raise InvalidCoordinateError(f"Cannot parse angle {text!r}: {e}") from e
    logger.debug(f"Parsed {text!r} as {angle.radian} rad")
    return float(angle.radian)


def angle_to_radians(value: float, unit: AngleUnit) -> float:
    """
    Convert a numeric angle in the given unit to radians.

    Args:
        value: Angle value
        unit: Unit of ``value``

    Returns:
        Angle in radians
    """
    if unit == AngleUnit.RADIANS:
        return float(value)
    return float(Angle(value, unit=u.deg).radian)


def angle_from_radians(value: float, unit: AngleUnit) -> float:
    """
    Convert an angle in radians to the given unit.

    Args:
        value: Angle in radians
        unit: Target unit

    Returns:
        Angle expressed in ``unit``
    """
    if unit == AngleUnit.RADIANS:
        return float(value)
    return float(Angle(value, unit=u.rad).degree)


def format_hms(radians: float, precision: int = 2) -> str:
    """
    Format an angle in radians as an hour angle string.

    Args:
        radians: Angle in radians
        precision: Decimal places for seconds

    Returns:
        Formatted string (e.g., "12h30m00.00s")
    """
    return str(Angle(radians, unit=u.rad).to_string(unit=u.hourangle, sep="hms", precision=precision, pad=True))


def format_dms(radians: float, precision: int = 1) -> str:
    """
    Format an angle in radians as a signed degree string.

    Args:
        radians: Angle in radians
        precision: Decimal places for arcseconds

    Returns:
        Formatted string (e.g., "+45d12m34.5s")
    """
    return str(
        Angle(radians, unit=u.rad).to_string(
            unit=u.deg, sep="dms", precision=precision, alwayssign=True, pad=True
        )
    )
