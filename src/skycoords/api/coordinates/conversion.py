"""
Frame conversion engine.

A conversion resolves the rotation matrix for the (target, source) pair, turns
the position into a Cartesian unit vector, rotates it and reads the angles back
in the target frame.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np
import numpy.typing as npt

from skycoords.api.core.exceptions import MixedFrameError

from .frames import SkyPosition, as_frame
from .geometry import to_cartesian, to_spherical
from .rotation import rotation_matrix


logger = logging.getLogger(__name__)


__all__ = [
    "convert",
    "convert_many",
]


def convert(target: Any, position: SkyPosition, dtype: npt.DTypeLike | None = None) -> SkyPosition:
    """
    Convert a position into another frame.

    Args:
        target: Frame-like target (Frame, position class, instance or kind name)
        position: Position to convert
        dtype: Float type of the result (defaults to the input's)

    Returns:
        New position in the target frame. When the position is already in the
        target frame at the requested precision it is returned unchanged.

    Raises:
        UnsupportedFramePairError: If no rotation is defined for the pair
        UnsupportedFrameError: If ``target`` is not frame-like
    """
    frame = as_frame(target)
    dtype = position.dtype if dtype is None else np.dtype(dtype)

    if frame == position.frame:
        if dtype == position.dtype:
            return position
        return frame(dtype.type(position.lon), dtype.type(position.lat))

    matrix = rotation_matrix(frame, position.frame).astype(dtype)
    vector = matrix @ to_cartesian(position.lon, position.lat)
    lon, lat = to_spherical(vector)
    return frame(dtype.type(lon), dtype.type(lat))


def convert_many(
    target: Any, positions: Sequence[SkyPosition], dtype: npt.DTypeLike | None = None
) -> list[SkyPosition]:
    """
    Convert a sequence of positions sharing one source frame.

    The rotation matrix is resolved once and applied to every element.

    Args:
        target: Frame-like target
        positions: Positions, all in the same frame
        dtype: Float type of the results (defaults to the inputs' shared type)

    Returns:
        Converted positions, in input order

    Raises:
        MixedFrameError: If the positions are not all in the same frame, or
            have different float types and no dtype is given
    """
    frame = as_frame(target)
    if not positions:
        return []

    source = positions[0].frame
    for position in positions[1:]:
        if position.frame != source:
            raise MixedFrameError(f"Batch contains {position.frame} and {source} positions")

    if dtype is None:
        dtype = positions[0].dtype
        for position in positions[1:]:
            if position.dtype != dtype:
                raise MixedFrameError(f"Batch mixes {position.dtype} and {dtype} positions; pass dtype to choose one")
    else:
        dtype = np.dtype(dtype)

    if frame == source:
        return [convert(frame, p, dtype=dtype) for p in positions]

    logger.debug(f"Converting {len(positions)} positions {source} -> {frame}")
    lons = np.array([p.lon for p in positions], dtype=dtype)
    lats = np.array([p.lat for p in positions], dtype=dtype)

    matrix = rotation_matrix(frame, source).astype(dtype)
    vectors = to_cartesian(lons, lats) @ matrix.T
    new_lons, new_lats = to_spherical(vectors)
    return [frame(lon, lat) for lon, lat in zip(new_lons, new_lats, strict=True)]
