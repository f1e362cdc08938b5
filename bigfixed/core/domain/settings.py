"""
PrecisionSettings — настройки точности вычислений

Immutable Pydantic модель: сколько десятичных знаков требуется и сколько
защитных бит добавить к scale сверх минимально необходимого.
"""

from typing import Final

from pydantic import BaseModel, Field

from bigfixed.core.math.fixed_point import DEFAULT_DECIMAL_DIGITS, scale_for_decimal_digits

# Защитные биты сверх минимального scale для decimal_digits
DEFAULT_GUARD_BITS: Final[int] = 16


class PrecisionSettings(BaseModel):
    """
    Точность вычислений.

    Immutable модель (frozen=True): изменение точности создаёт новый экземпляр.
    """

    decimal_digits: int = Field(
        DEFAULT_DECIMAL_DIGITS, ge=0, description="Знаков после десятичной точки"
    )
    guard_bits: int = Field(
        DEFAULT_GUARD_BITS, ge=0, description="Дробные биты сверх минимума для decimal_digits"
    )

    model_config = {"frozen": True, "strict": True}

    def scale(self) -> int:
        """
        scale (Q), достаточный для decimal_digits знаков плюс guard_bits.

        Returns:
            Количество дробных бит
        """
        return scale_for_decimal_digits(self.decimal_digits, self.guard_bits)


DEFAULT_PRECISION_SETTINGS: Final[PrecisionSettings] = PrecisionSettings()
