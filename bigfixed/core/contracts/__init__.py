"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных BigFixed.
"""

from .validators import (
    ContractValidator,
    FixedPointValueValidator,
    SchemaLoader,
    validate_fixed_point_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FixedPointValueValidator",
    # Functions
    "validate_fixed_point_value",
]
