"""Angular separation between sky positions."""

from __future__ import annotations

import math
from typing import Any

import deal
import numpy as np

from .conversion import convert
from .frames import SkyPosition


__all__ = [
    "angular_separation",
    "separation",
]


def angular_separation(lon1: Any, lat1: Any, lon2: Any, lat2: Any) -> Any:
    """
    Great-circle distance between two (longitude, latitude) pairs.

    Uses the Vincenty formula, which stays accurate for coincident and
    antipodal points where the spherical law of cosines breaks down.
    Works element-wise on numpy arrays.

    Args:
        lon1: First longitude in radians
        lat1: First latitude in radians
        lon2: Second longitude in radians
        lat2: Second latitude in radians

    Returns:
        Separation in radians, in [0, pi]
    """
    dlon = lon2 - lon1
    sin_dlon, cos_dlon = np.sin(dlon), np.cos(dlon)
    sin_lat1, cos_lat1 = np.sin(lat1), np.cos(lat1)
    sin_lat2, cos_lat2 = np.sin(lat2), np.cos(lat2)
    return np.arctan2(
        np.hypot(cos_lat2 * sin_dlon, cos_lat1 * sin_lat2 - sin_lat1 * cos_lat2 * cos_dlon),
        sin_lat1 * sin_lat2 + cos_lat1 * cos_lat2 * cos_dlon,
    )


@deal.post(lambda result: math.isnan(result) or 0.0 <= result <= math.pi, message="Separation must lie in [0, pi]")
def separation(c1: SkyPosition, c2: SkyPosition) -> float:
    """
    Angular separation between two sky positions, in radians.

    If the positions are in different frames (including FK5 at different
    equinoxes), ``c2`` is converted into the frame of ``c1`` first.

    Args:
        c1: First position
        c2: Second position

    Returns:
        Separation in radians, in [0, pi]

    Example:
        >>> separation(ICRS(0.0, 0.0), ICRS(math.pi, 0.0))  # doctest: +SKIP
        3.141592653589793
    """
    if c2.frame != c1.frame:
        c2 = convert(c1.frame, c2)
    result = float(angular_separation(c1.lon, c1.lat, c2.lon, c2.lat))
    # float32 pi rounds above math.pi
    return min(result, math.pi)
