"""
Common Enums

Enumerations used throughout the skycoords API.
"""

from enum import StrEnum


__all__ = [
    "AngleUnit",
    "FrameKind",
    "OutputFormat",
]


class FrameKind(StrEnum):
    """Celestial reference frames that positions can be expressed in."""

    ICRS = "icrs"  # International Celestial Reference System
    GALACTIC = "galactic"  # Galactic longitude/latitude
    FK5 = "fk5"  # Mean equator and equinox at a given epoch


class AngleUnit(StrEnum):
    """Units used when reading or printing angles."""

    RADIANS = "radians"
    DEGREES = "degrees"


class OutputFormat(StrEnum):
    """Output formats for CLI commands."""

    PRETTY = "pretty"
    JSON = "json"
