"""
Sky position value types.

Positions are immutable values holding two angles in radians. The longitude-like
angle is wrapped into [0, 2pi) on construction; the latitude-like angle is stored
as given. Both angles share one numpy floating type.

A ``Frame`` identifies the frame a position lives in (kind plus, for FK5, the
equinox) and is what conversions dispatch on.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, cast

import numpy as np

from skycoords.api.core.constants import J2000_EQUINOX
from skycoords.api.core.enums import FrameKind
from skycoords.api.core.exceptions import InvalidCoordinateError, UnsupportedFrameError
from skycoords.api.core.utils import format_dms, format_hms, parse_angle


if TYPE_CHECKING:
    import numpy.typing as npt


__all__ = [
    "FK5",
    "ICRS",
    "Frame",
    "Galactic",
    "SkyPosition",
    "as_frame",
]

_TWO_PI = 2.0 * math.pi


def _coerce_angles(lon: Any, lat: Any, hours: bool) -> tuple[np.floating[Any], np.floating[Any]]:
    """Parse or promote a (lon, lat) pair to a common numpy float type."""
    lon_is_text = isinstance(lon, str)
    lat_is_text = isinstance(lat, str)
    if lon_is_text != lat_is_text:
        raise InvalidCoordinateError("Angles must both be numbers or both be strings")
    if lon_is_text:
        lon = parse_angle(lon, hours=hours)
        lat = parse_angle(lat)

    dtype = np.result_type(lon, lat)
    if not np.issubdtype(dtype, np.floating):
        dtype = np.dtype(np.float64)
    scalar = dtype.type
    # Non-finite longitudes become NaN rather than raising
    with np.errstate(invalid="ignore"):
        lon = scalar(np.mod(scalar(lon), scalar(_TWO_PI)))
    # Tiny negative longitudes round up to the modulus itself
    if lon >= scalar(_TWO_PI):
        lon = scalar(0.0)
    return lon, scalar(lat)


@dataclass(frozen=True)
class Frame:
    """
    Identity of a celestial reference frame.

    Attributes:
        kind: Frame family
        equinox: Julian-year equinox for FK5 (defaults to J2000), None otherwise
    """

    kind: FrameKind
    equinox: float | None = None

    def __post_init__(self) -> None:
        kind = FrameKind(self.kind)
        object.__setattr__(self, "kind", kind)
        if kind == FrameKind.FK5:
            equinox = J2000_EQUINOX if self.equinox is None else float(self.equinox)
            object.__setattr__(self, "equinox", equinox)
        elif self.equinox is not None:
            raise ValueError(f"{kind} frame does not take an equinox")

    @classmethod
    def icrs(cls) -> Frame:
        return cls(FrameKind.ICRS)

    @classmethod
    def galactic(cls) -> Frame:
        return cls(FrameKind.GALACTIC)

    @classmethod
    def fk5(cls, equinox: float = J2000_EQUINOX) -> Frame:
        return cls(FrameKind.FK5, equinox)

    @property
    def position_class(self) -> type[SkyPosition]:
        """Position type that represents coordinates in this frame."""
        return _POSITION_CLASSES[self.kind]

    @property
    def lon_in_hours(self) -> bool:
        """Whether textual longitudes in this frame are hour angles."""
        return self.position_class._lon_in_hours

    def __call__(self, lon: Any, lat: Any) -> SkyPosition:
        """
        Build a position in this frame.

        ``Frame.fk5(1975.0)(ra, dec)`` is equivalent to ``FK5(ra, dec, equinox=1975.0)``.
        """
        if self.kind == FrameKind.FK5:
            return FK5(lon, lat, equinox=self.equinox)
        return self.position_class(lon, lat)

    def __str__(self) -> str:
        if self.kind == FrameKind.FK5:
            return f"FK5(J{self.equinox})"
        return _POSITION_CLASSES[self.kind].__name__


class SkyPosition:
    """
    Base class for positions on the celestial sphere.

    Subclasses are frozen dataclasses whose first two fields are the
    longitude-like and latitude-like angles in radians.
    """

    kind: ClassVar[FrameKind]
    _lon_field: ClassVar[str]
    _lat_field: ClassVar[str]
    _lon_in_hours: ClassVar[bool]

    def __post_init__(self) -> None:
        lon, lat = _coerce_angles(
            getattr(self, self._lon_field),
            getattr(self, self._lat_field),
            hours=self._lon_in_hours,
        )
        object.__setattr__(self, self._lon_field, lon)
        object.__setattr__(self, self._lat_field, lat)

    @property
    def lon(self) -> Any:
        """Longitude-like angle in radians, in [0, 2pi)."""
        return getattr(self, self._lon_field)

    @property
    def lat(self) -> Any:
        """Latitude-like angle in radians."""
        return getattr(self, self._lat_field)

    @property
    def dtype(self) -> np.dtype[Any]:
        """Floating point type shared by both angles."""
        return np.dtype(type(self.lon))

    @property
    def frame(self) -> Frame:
        return Frame(self.kind)

    @classmethod
    def from_position(cls, position: SkyPosition, dtype: npt.DTypeLike | None = None) -> SkyPosition:
        """
        Convert another position into this class's frame.

        Args:
            position: Position in any supported frame
            dtype: Float type of the result (defaults to the input's)

        Returns:
            New position of this class
        """
        from .conversion import convert

        return convert(cls, position, dtype=dtype)

    @property
    def names(self) -> tuple[str, str]:
        """Field names of the two angles, e.g. ("ra", "dec")."""
        return self._lon_field, self._lat_field

    def sexagesimal(self) -> tuple[str, str]:
        """Both angles as sexagesimal text (hour angle for right ascension)."""
        lon = format_hms(self.lon) if self._lon_in_hours else format_dms(self.lon)
        return lon, format_dms(self.lat)

    def __str__(self) -> str:
        lon_name, lat_name = self.names
        lon, lat = self.sexagesimal()
        return f"{self.frame}({lon_name}={lon}, {lat_name}={lat})"


@dataclass(frozen=True)
class ICRS(SkyPosition):
    """
    International Celestial Reference System position.

    Numbers are read as radians. Strings are read as an hour angle for ``ra``
    and degrees for ``dec``.

    Attributes:
        ra: Right ascension in radians [0, 2pi)
        dec: Declination in radians [-pi/2, pi/2]
    """

    kind: ClassVar[FrameKind] = FrameKind.ICRS
    _lon_field: ClassVar[str] = "ra"
    _lat_field: ClassVar[str] = "dec"
    _lon_in_hours: ClassVar[bool] = True

    ra: Any
    dec: Any


@dataclass(frozen=True)
class Galactic(SkyPosition):
    """
    Galactic position, with (0, 0) near the galactic center.

    Numbers are read as radians; strings are read as degrees.

    Attributes:
        l: Galactic longitude in radians [0, 2pi)
        b: Galactic latitude in radians [-pi/2, pi/2]
    """

    kind: ClassVar[FrameKind] = FrameKind.GALACTIC
    _lon_field: ClassVar[str] = "l"
    _lat_field: ClassVar[str] = "b"
    _lon_in_hours: ClassVar[bool] = False

    l: Any  # noqa: E741
    b: Any


@dataclass(frozen=True)
class FK5(SkyPosition):
    """
    Equatorial position referred to the mean equator and equinox of an epoch.

    The equinox is part of the position's identity: positions at different
    equinoxes never compare equal and must be converted explicitly.

    Attributes:
        ra: Right ascension in radians [0, 2pi)
        dec: Declination in radians [-pi/2, pi/2]
        equinox: Julian-year equinox (default J2000)
    """

    kind: ClassVar[FrameKind] = FrameKind.FK5
    _lon_field: ClassVar[str] = "ra"
    _lat_field: ClassVar[str] = "dec"
    _lon_in_hours: ClassVar[bool] = True

    ra: Any
    dec: Any
    equinox: float = field(default=J2000_EQUINOX)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "equinox", float(self.equinox))

    @property
    def frame(self) -> Frame:
        return Frame(FrameKind.FK5, self.equinox)

    @classmethod
    def from_position(
        cls,
        position: SkyPosition,
        dtype: npt.DTypeLike | None = None,
        equinox: float = J2000_EQUINOX,
    ) -> FK5:
        """
        Convert another position into FK5 at the given equinox.

        Args:
            position: Position in any supported frame
            dtype: Float type of the result (defaults to the input's)
            equinox: Target equinox as a Julian year

        Returns:
            New FK5 position
        """
        from .conversion import convert

        return cast(FK5, convert(Frame.fk5(equinox), position, dtype=dtype))


_POSITION_CLASSES: dict[FrameKind, type[SkyPosition]] = {
    FrameKind.ICRS: ICRS,
    FrameKind.GALACTIC: Galactic,
    FrameKind.FK5: FK5,
}


def as_frame(target: Any) -> Frame:
    """
    Interpret ``target`` as a frame.

    Accepts a ``Frame``, a position instance (its frame), a position class
    (``FK5`` meaning FK5 J2000), a ``FrameKind`` or its string value.

    Raises:
        UnsupportedFrameError: If ``target`` does not name a frame
    """
    if isinstance(target, Frame):
        return target
    if isinstance(target, SkyPosition):
        return target.frame
    if isinstance(target, type) and issubclass(target, SkyPosition) and hasattr(target, "kind"):
        return Frame(target.kind)
    if isinstance(target, str):
        try:
            return Frame(FrameKind(target.lower()))
        except ValueError as e:
            raise UnsupportedFrameError(f"Unknown frame: {target!r}") from e
    raise UnsupportedFrameError(f"Not a frame: {target!r}")
