"""
Custom exception classes for skycoords.

This module defines specific exceptions for the errors that can occur while
building sky positions and converting them between frames.
"""

from __future__ import annotations

from typing import Any


__all__ = [
    "InvalidCoordinateError",
    "MixedFrameError",
    "SkyCoordsError",
    "UnsupportedFrameError",
    "UnsupportedFramePairError",
]


class SkyCoordsError(Exception):
    """
    Base exception for all skycoords errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all coordinate-related errors.
    """

    pass


class UnsupportedFramePairError(SkyCoordsError):
    """
    Raised when no rotation is defined between two frames.

    The conversion table covers ICRS, Galactic and FK5 at any equinox.
    Any other pairing is rejected immediately.
    """

    def __init__(self, target: Any, source: Any) -> None:
        self.target = target
        self.source = source
        super().__init__(f"Unsupported frame pair: {source} -> {target}")


class UnsupportedFrameError(SkyCoordsError, TypeError):
    """
    Raised when an object cannot be interpreted as a frame.

    Frame targets may be a Frame, a position class or a position instance.
    """

    pass


class InvalidCoordinateError(SkyCoordsError, ValueError):
    """
    Raised when textual coordinates cannot be parsed.

    This occurs when:
    - A sexagesimal string is malformed
    - A string is mixed with a number for the same position
    """

    pass


class MixedFrameError(SkyCoordsError, ValueError):
    """
    Raised when a batch conversion receives positions from several frames.

    Batch conversion resolves a single rotation for the whole sequence, so
    every element must share the source frame.
    """

    pass
