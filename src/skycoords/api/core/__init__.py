"""Core subpackage for shared constants, enums, utilities, and exceptions."""

from skycoords.api.core.enums import AngleUnit, FrameKind, OutputFormat
from skycoords.api.core.exceptions import (
    InvalidCoordinateError,
    MixedFrameError,
    SkyCoordsError,
    UnsupportedFrameError,
    UnsupportedFramePairError,
)
from skycoords.api.core.utils import (
    angle_from_radians,
    angle_to_radians,
    format_dms,
    format_hms,
    parse_angle,
)


__all__ = [
    "AngleUnit",
    "FrameKind",
    "InvalidCoordinateError",
    "MixedFrameError",
    "OutputFormat",
    "SkyCoordsError",
    "UnsupportedFrameError",
    "UnsupportedFramePairError",
    "angle_from_radians",
    "angle_to_radians",
    "format_dms",
    "format_hms",
    "parse_angle",
]
