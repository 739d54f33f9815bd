"""
Frame rotation matrices.

Fixed rotations between ICRS, FK5 J2000 and Galactic are built once at import
and frozen. Precession from J2000 to another equinox depends on the equinox and
is memoised per value.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache

import deal
import numpy as np
import numpy.typing as npt

from skycoords.api.core.constants import (
    ARCSEC_PER_DEGREE,
    FRAME_BIAS_DA0_MAS,
    FRAME_BIAS_ETA0_MAS,
    FRAME_BIAS_XI0_MAS,
    J2000_EQUINOX,
    LON0_FK5J2000_DEG,
    MAS_PER_DEGREE,
    NGP_FK5J2000_DEC_DEG,
    NGP_FK5J2000_RA_DEG,
    PRECESSION_THETA_ARCSEC,
    PRECESSION_Z_ARCSEC,
    PRECESSION_ZETA_ARCSEC,
    YEARS_PER_JULIAN_CENTURY,
)

from .geometry import rotation_x, rotation_y, rotation_z


logger = logging.getLogger(__name__)


__all__ = [
    "FK5J2000_TO_GAL",
    "FK5J2000_TO_ICRS",
    "GAL_TO_FK5J2000",
    "GAL_TO_ICRS",
    "ICRS_TO_FK5J2000",
    "ICRS_TO_GAL",
    "precess_from_j2000",
]


def _frozen(matrix: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    matrix = np.ascontiguousarray(matrix, dtype=np.float64)
    matrix.setflags(write=False)
    return matrix


# ICRS -> FK5 J2000 frame bias
_eta0 = math.radians(FRAME_BIAS_ETA0_MAS / MAS_PER_DEGREE)
_xi0 = math.radians(FRAME_BIAS_XI0_MAS / MAS_PER_DEGREE)
_da0 = math.radians(FRAME_BIAS_DA0_MAS / MAS_PER_DEGREE)

ICRS_TO_FK5J2000 = _frozen(rotation_x(-_eta0) @ rotation_y(_xi0) @ rotation_z(_da0))
FK5J2000_TO_ICRS = _frozen(ICRS_TO_FK5J2000.T)

# FK5 J2000 -> Galactic
_ngp_ra = math.radians(NGP_FK5J2000_RA_DEG)
_ngp_dec = math.radians(NGP_FK5J2000_DEC_DEG)
_lon0 = math.radians(LON0_FK5J2000_DEG)

FK5J2000_TO_GAL = _frozen(rotation_z(math.pi - _lon0) @ rotation_y(math.pi / 2.0 - _ngp_dec) @ rotation_z(_ngp_ra))
GAL_TO_FK5J2000 = _frozen(FK5J2000_TO_GAL.T)

# Galactic <-> ICRS chains through FK5 J2000
GAL_TO_ICRS = _frozen(FK5J2000_TO_ICRS @ GAL_TO_FK5J2000)
ICRS_TO_GAL = _frozen(GAL_TO_ICRS.T)


def _polynomial(coefficients: tuple[float, ...], t: float) -> float:
    result = 0.0
    tn = 1.0
    for coefficient in coefficients:
        result += coefficient * tn
        tn *= t
    return result


@deal.pre(lambda equinox: math.isfinite(equinox), message="Equinox must be finite")
@lru_cache(maxsize=64)
def precess_from_j2000(equinox: float) -> npt.NDArray[np.float64]:
    """
    Precession matrix from FK5 J2000 to FK5 at the given equinox.

    Uses the precession angles of Capitaine et al. 2003 as expressed in USNO
    Circular 179, which match the IAU 2006 model.

    Args:
        equinox: Target equinox as a Julian year (e.g. 1975.0)

    Returns:
        Read-only 3x3 matrix rotating FK5 J2000 vectors into FK5(equinox)
    """
    logger.debug(f"Computing precession matrix J2000 -> J{equinox}")
    t = (equinox - J2000_EQUINOX) / YEARS_PER_JULIAN_CENTURY
    zeta = math.radians(_polynomial(PRECESSION_ZETA_ARCSEC, t) / ARCSEC_PER_DEGREE)
    z = math.radians(_polynomial(PRECESSION_Z_ARCSEC, t) / ARCSEC_PER_DEGREE)
    theta = math.radians(_polynomial(PRECESSION_THETA_ARCSEC, t) / ARCSEC_PER_DEGREE)
    return _frozen(rotation_z(-z) @ rotation_y(theta) @ rotation_z(-zeta))
