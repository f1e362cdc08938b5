"""
Domain models and value objects.

Contains the serialisable fixed-point value and precision settings.
"""

from bigfixed.core.domain.fixed_point_value import FixedPointValue
from bigfixed.core.domain.settings import (
    DEFAULT_GUARD_BITS,
    DEFAULT_PRECISION_SETTINGS,
    PrecisionSettings,
)

__all__ = [
    # Settings
    "DEFAULT_GUARD_BITS",
    "DEFAULT_PRECISION_SETTINGS",
    "PrecisionSettings",
    # Values
    "FixedPointValue",
]
