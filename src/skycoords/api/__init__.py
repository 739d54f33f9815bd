"""
skycoords API - Library Layer

This package contains the coordinate logic of skycoords, separated from CLI
presentation concerns.

- core: constants, enums, exceptions and angle helpers
- coordinates: frames, rotation matrices, conversion and separation
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__ = [
    # Package is organized into subpackages - import directly from them:
    # from skycoords.api.core import ...
    # from skycoords.api.coordinates import ...
]
