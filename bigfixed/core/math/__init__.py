"""
Core math modules для bigfixed

Число с фиксированной точкой произвольной точности и его клиенты.
"""

# BigFixed
from bigfixed.core.math.fixed_point import (
    DEFAULT_DECIMAL_DIGITS,
    BigFixed,
    Operand,
    scale_for_decimal_digits,
)

# Integer primitives
from bigfixed.core.math.integer_primitives import (
    DECIMAL_CHUNK_DIGITS,
    BigFixedDivisionByZero,
    has_arithmetic_right_shift,
    int_to_decimal_str,
    is_native_int,
    shift_signed,
    trunc_div,
)

# Bisection square root
from bigfixed.core.math.sqrt_bisection import (
    bisect_sqrt,
    sqrt_decimal_string,
)

__all__ = [
    # BigFixed — Constants
    "DEFAULT_DECIMAL_DIGITS",
    # BigFixed — Types
    "BigFixed",
    "Operand",
    # BigFixed — Functions
    "scale_for_decimal_digits",
    # Integer primitives — Constants
    "DECIMAL_CHUNK_DIGITS",
    # Integer primitives — Exceptions
    "BigFixedDivisionByZero",
    # Integer primitives — Functions
    "has_arithmetic_right_shift",
    "int_to_decimal_str",
    "is_native_int",
    "shift_signed",
    "trunc_div",
    # Bisection square root
    "bisect_sqrt",
    "sqrt_decimal_string",
]
