"""
Astronomical Constants

Published angles and coefficients used to build the frame rotation matrices.
"""

from typing import Final


__all__ = [
    "ARCSEC_PER_DEGREE",
    "DEGREES_PER_HOUR_ANGLE",
    "FRAME_BIAS_DA0_MAS",
    "FRAME_BIAS_ETA0_MAS",
    "FRAME_BIAS_XI0_MAS",
    "J2000_EQUINOX",
    "MAS_PER_DEGREE",
    "NGP_FK5J2000_DEC_DEG",
    "NGP_FK5J2000_RA_DEG",
    "LON0_FK5J2000_DEG",
    "PRECESSION_THETA_ARCSEC",
    "PRECESSION_ZETA_ARCSEC",
    "PRECESSION_Z_ARCSEC",
    "YEARS_PER_JULIAN_CENTURY",
]


# Conversion factors
ARCSEC_PER_DEGREE: Final[float] = 3600.0
"""Arcseconds per degree."""

MAS_PER_DEGREE: Final[float] = 3_600_000.0
"""Milliarcseconds per degree."""

DEGREES_PER_HOUR_ANGLE: Final[float] = 15.0
"""Degrees of sky rotation per hour of Right Ascension."""

YEARS_PER_JULIAN_CENTURY: Final[float] = 100.0
"""Julian years per Julian century."""

J2000_EQUINOX: Final[float] = 2000.0
"""Reference equinox of the FK5 J2000 frame, in Julian years."""

# ICRS -> FK5 J2000 frame bias (USNO Circular 179, section 3.5), milliarcseconds
FRAME_BIAS_ETA0_MAS: Final[float] = -19.9
FRAME_BIAS_XI0_MAS: Final[float] = 9.1
FRAME_BIAS_DA0_MAS: Final[float] = -22.9

# North galactic pole and zero point of galactic longitude in FK5 J2000.
# These are not officially defined; the values give the best self-consistency
# between FK5 -> Galactic and FK5 -> FK4 -> Galactic.
NGP_FK5J2000_RA_DEG: Final[float] = 192.8594812065348
NGP_FK5J2000_DEC_DEG: Final[float] = 27.12825118085622
LON0_FK5J2000_DEG: Final[float] = 122.9319185680026

# Precession angle polynomials in Julian centuries since J2000, arcseconds
# (Capitaine et al. 2003 as given in USNO Circular 179; matches IAU 2006).
PRECESSION_ZETA_ARCSEC: Final[tuple[float, ...]] = (
    2.650545,
    2306.083227,
    0.2988499,
    0.01801828,
    -0.000005971,
    -0.0000003173,
)
PRECESSION_Z_ARCSEC: Final[tuple[float, ...]] = (
    -2.650545,
    2306.077181,
    1.0927348,
    0.01826837,
    -0.000028596,
    -0.0000002904,
)
PRECESSION_THETA_ARCSEC: Final[tuple[float, ...]] = (
    0.0,
    2004.191903,
    -0.4294934,
    -0.04182264,
    -0.000007089,
    -0.0000001274,
)
