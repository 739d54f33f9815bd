"""
CLI Input Parsing

Turns command-line angle arguments into sky positions.
"""

from skycoords.api.coordinates import Frame, SkyPosition
from skycoords.api.core.enums import AngleUnit, FrameKind
from skycoords.api.core.utils import angle_to_radians, parse_angle


def _as_number(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def _to_radians(text: str, units: AngleUnit, hours: bool = False) -> float:
    value = _as_number(text)
    if value is not None:
        return angle_to_radians(value, units)
    return parse_angle(text, hours=hours)


def build_frame(kind: FrameKind, equinox: float | None) -> Frame:
    """
    Build a frame from CLI options.

    The equinox only applies to FK5 and is ignored for other frames.
    """
    if kind == FrameKind.FK5:
        return Frame.fk5() if equinox is None else Frame.fk5(equinox)
    return Frame(kind)


def build_position(frame: Frame, lon: str, lat: str, units: AngleUnit) -> SkyPosition:
    """
    Build a position from two command-line arguments.

    Each argument is read on its own: plain numbers are in ``units``, anything
    else is sexagesimal text (hour angle for right ascension, degrees otherwise).

    Raises:
        InvalidCoordinateError: If the text cannot be parsed
    """
    return frame(_to_radians(lon, units, hours=frame.lon_in_hours), _to_radians(lat, units))
