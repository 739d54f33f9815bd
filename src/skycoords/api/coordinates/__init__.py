"""
Celestial frame conversions.

Positions in ICRS, Galactic and FK5 frames, the rotation matrices linking
them, frame conversion and angular separation.
"""

from skycoords.api.coordinates.conversion import convert, convert_many
from skycoords.api.coordinates.frames import FK5, ICRS, Frame, Galactic, SkyPosition, as_frame
from skycoords.api.coordinates.geometry import (
    rotation_x,
    rotation_y,
    rotation_z,
    to_cartesian,
    to_spherical,
)
from skycoords.api.coordinates.matrices import (
    FK5J2000_TO_GAL,
    FK5J2000_TO_ICRS,
    GAL_TO_FK5J2000,
    GAL_TO_ICRS,
    ICRS_TO_FK5J2000,
    ICRS_TO_GAL,
    precess_from_j2000,
)
from skycoords.api.coordinates.rotation import rotation_matrix, supported_frame_pairs
from skycoords.api.coordinates.separation import angular_separation, separation


__all__ = [
    "FK5",
    "FK5J2000_TO_GAL",
    "FK5J2000_TO_ICRS",
    "GAL_TO_FK5J2000",
    "GAL_TO_ICRS",
    "ICRS",
    "ICRS_TO_FK5J2000",
    "ICRS_TO_GAL",
    "Frame",
    "Galactic",
    "SkyPosition",
    "angular_separation",
    "as_frame",
    "convert",
    "convert_many",
    "precess_from_j2000",
    "rotation_matrix",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "separation",
    "supported_frame_pairs",
    "to_cartesian",
    "to_spherical",
]
