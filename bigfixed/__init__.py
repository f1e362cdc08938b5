"""
bigfixed — arbitrary-precision fixed-point arithmetic.

A real number is stored as an arbitrary-precision integer scaled by a
configurable number of fractional bits (Q).
"""

from bigfixed.core.contracts import validate_fixed_point_value
from bigfixed.core.domain import FixedPointValue, PrecisionSettings
from bigfixed.core.math import (
    BigFixed,
    BigFixedDivisionByZero,
    bisect_sqrt,
    scale_for_decimal_digits,
    sqrt_decimal_string,
)

__version__ = "0.1.0"

__all__ = [
    "BigFixed",
    "BigFixedDivisionByZero",
    "FixedPointValue",
    "PrecisionSettings",
    "bisect_sqrt",
    "scale_for_decimal_digits",
    "sqrt_decimal_string",
    "validate_fixed_point_value",
]
