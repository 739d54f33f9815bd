"""
Rotation matrix resolver.

Maps a (target, source) frame pair to the 3x3 matrix that rotates unit vectors
expressed in the source frame into the target frame. Resolution depends only on
the frames, never on coordinate values.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Any

import numpy as np
import numpy.typing as npt

from skycoords.api.core.enums import FrameKind
from skycoords.api.core.exceptions import UnsupportedFramePairError

from .frames import Frame, as_frame
from .matrices import (
    FK5J2000_TO_GAL,
    FK5J2000_TO_ICRS,
    GAL_TO_FK5J2000,
    GAL_TO_ICRS,
    ICRS_TO_FK5J2000,
    ICRS_TO_GAL,
    precess_from_j2000,
)


logger = logging.getLogger(__name__)


__all__ = [
    "rotation_matrix",
    "supported_frame_pairs",
]

Matrix = npt.NDArray[np.float64]

_IDENTITY: Matrix = np.eye(3)
_IDENTITY.setflags(write=False)


def _icrs_to_gal(target: Frame, source: Frame) -> Matrix:
    return ICRS_TO_GAL


def _gal_to_icrs(target: Frame, source: Frame) -> Matrix:
    return GAL_TO_ICRS


def _icrs_to_fk5(target: Frame, source: Frame) -> Matrix:
    return precess_from_j2000(target.equinox) @ ICRS_TO_FK5J2000


def _gal_to_fk5(target: Frame, source: Frame) -> Matrix:
    return precess_from_j2000(target.equinox) @ GAL_TO_FK5J2000


def _fk5_to_icrs(target: Frame, source: Frame) -> Matrix:
    return FK5J2000_TO_ICRS @ precess_from_j2000(source.equinox).T


def _fk5_to_gal(target: Frame, source: Frame) -> Matrix:
    return FK5J2000_TO_GAL @ precess_from_j2000(source.equinox).T


def _fk5_to_fk5(target: Frame, source: Frame) -> Matrix:
    return precess_from_j2000(target.equinox) @ precess_from_j2000(source.equinox).T


# Keyed by (target kind, source kind)
_RESOLVERS: dict[tuple[FrameKind, FrameKind], Callable[[Frame, Frame], Matrix]] = {
    (FrameKind.GALACTIC, FrameKind.ICRS): _icrs_to_gal,
    (FrameKind.ICRS, FrameKind.GALACTIC): _gal_to_icrs,
    (FrameKind.FK5, FrameKind.ICRS): _icrs_to_fk5,
    (FrameKind.FK5, FrameKind.GALACTIC): _gal_to_fk5,
    (FrameKind.ICRS, FrameKind.FK5): _fk5_to_icrs,
    (FrameKind.GALACTIC, FrameKind.FK5): _fk5_to_gal,
    (FrameKind.FK5, FrameKind.FK5): _fk5_to_fk5,
}


@lru_cache(maxsize=128)
def _resolve(target: Frame, source: Frame) -> Matrix:
    if target == source:
        return _IDENTITY
    resolver = _RESOLVERS.get((target.kind, source.kind))
    if resolver is None:
        raise UnsupportedFramePairError(target, source)
    logger.debug(f"Resolving rotation {source} -> {target}")
    matrix = np.array(resolver(target, source), dtype=np.float64)
    matrix.setflags(write=False)
    return matrix


def rotation_matrix(target: Any, source: Any) -> Matrix:
    """
    Rotation matrix taking unit vectors from ``source`` to ``target``.

    Args:
        target: Frame-like target (Frame, position class or instance)
        source: Frame-like source

    Returns:
        Read-only 3x3 float64 matrix. Identical frames give the identity.

    Raises:
        UnsupportedFramePairError: If no rotation is defined for the pair
        UnsupportedFrameError: If either argument is not frame-like

    Example:
        >>> m = rotation_matrix(Frame.galactic(), Frame.icrs())
        >>> m.shape
        (3, 3)
    """
    return _resolve(as_frame(target), as_frame(source))


def supported_frame_pairs() -> list[tuple[FrameKind, FrameKind]]:
    """List the (target, source) frame kinds with a defined rotation."""
    return list(_RESOLVERS)
