"""
skycoords - Celestial Frame Conversions

Convert sky positions between the ICRS, Galactic and FK5 reference frames and
measure angular separations.

Example:
    >>> from skycoords import FK5, ICRS, Galactic, convert, separation
    >>> pos = ICRS("12h30m49.4s", "+12d23m28s")
    >>> gal = convert(Galactic, pos)
    >>> fk5 = FK5.from_position(pos, equinox=1975.0)
    >>> separation(pos, fk5)  # doctest: +SKIP
    0.0
"""

# Frame conversions
from skycoords.api.coordinates import (
    FK5,
    ICRS,
    Frame,
    Galactic,
    SkyPosition,
    convert,
    convert_many,
    precess_from_j2000,
    rotation_matrix,
    separation,
)

# Enums
from skycoords.api.core.enums import FrameKind

# Exceptions
from skycoords.api.core.exceptions import (
    InvalidCoordinateError,
    MixedFrameError,
    SkyCoordsError,
    UnsupportedFrameError,
    UnsupportedFramePairError,
)


__version__ = "0.1.0"

__all__ = [
    "FK5",
    "ICRS",
    "Frame",
    "FrameKind",
    "Galactic",
    "InvalidCoordinateError",
    "MixedFrameError",
    "SkyCoordsError",
    "SkyPosition",
    "UnsupportedFrameError",
    "UnsupportedFramePairError",
    "convert",
    "convert_many",
    "precess_from_j2000",
    "rotation_matrix",
    "separation",
]
