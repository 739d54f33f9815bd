"""
Geometry primitives for frame rotations.

Axis rotation matrices and conversions between spherical (longitude, latitude)
angles and Cartesian unit vectors. All functions are pure and accept numpy
scalars or arrays.

The rotation matrices rotate the coordinate frame, not the vector: applying
``rotation_z(a)`` to a vector at longitude ``lon`` gives the same vector
expressed at longitude ``lon - a``.
"""

from __future__ import annotations

from typing import Any

import deal
import numpy as np
import numpy.typing as npt


__all__ = [
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "to_cartesian",
    "to_spherical",
]


def rotation_x(angle: float) -> npt.NDArray[np.float64]:
    """Frame rotation matrix about the x axis."""
    s, c = np.sin(angle), np.cos(angle)
    return np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, c, s],
            [0.0, -s, c],
        ]
    )


def rotation_y(angle: float) -> npt.NDArray[np.float64]:
    """Frame rotation matrix about the y axis."""
    s, c = np.sin(angle), np.cos(angle)
    return np.array(
        [
            [c, 0.0, -s],
            [0.0, 1.0, 0.0],
            [s, 0.0, c],
        ]
    )


def rotation_z(angle: float) -> npt.NDArray[np.float64]:
    """Frame rotation matrix about the z axis."""
    s, c = np.sin(angle), np.cos(angle)
    return np.array(
        [
            [c, s, 0.0],
            [-s, c, 0.0],
            [0.0, 0.0, 1.0],
        ]
    )


def to_cartesian(lon: Any, lat: Any) -> npt.NDArray[np.floating[Any]]:
    """
    Convert spherical angles to Cartesian unit vectors.

    Args:
        lon: Longitude-like angle(s) in radians
        lat: Latitude-like angle(s) in radians

    Returns:
        Array with a trailing axis of length 3 holding (x, y, z). The float
        precision of the inputs is kept.
    """
    lon = np.asarray(lon)
    lat = np.asarray(lat)
    sin_lon, cos_lon = np.sin(lon), np.cos(lon)
    sin_lat, cos_lat = np.sin(lat), np.cos(lat)
    return np.stack([cos_lat * cos_lon, cos_lat * sin_lon, sin_lat], axis=-1)


@deal.pre(lambda v: np.shape(v)[-1] == 3, message="Vectors must have a trailing axis of length 3")
def to_spherical(v: Any) -> tuple[Any, Any]:
    """
    Convert Cartesian vectors to spherical angles.

    The vectors need not be unit length; the latitude is computed against the
    projected length in the xy plane.

    Args:
        v: Vector(s) with a trailing axis of length 3

    Returns:
        Tuple of (longitude, latitude) in radians. Longitude is in (-pi, pi].
    """
    v = np.asarray(v)
    x, y, z = v[..., 0], v[..., 1], v[..., 2]
    return np.arctan2(y, x), np.arctan2(z, np.hypot(x, y))
