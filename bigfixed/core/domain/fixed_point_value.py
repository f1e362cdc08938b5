"""
FixedPointValue — сериализуемое представление BigFixed

Immutable Pydantic модель для передачи BigFixed через JSON.
magnitude сериализуется десятичной строкой: значения выходят далеко за
пределы точного JSON number (2**53).

Соответствует схеме contracts/schema/fixed_point_value.json.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_serializer, field_validator

from bigfixed.core.math.fixed_point import BigFixed
from bigfixed.core.math.integer_primitives import int_to_decimal_str


class FixedPointValue(BaseModel):
    """
    Пара (magnitude, scale) вне BigFixed.

    Равенство моделей совпадает с равенством BigFixed: одно логическое
    значение при разных scale даёт разные FixedPointValue.
    """

    magnitude: int = Field(..., description="Масштабированное значение (value * 2**scale)")
    scale: int = Field(..., ge=0, description="Количество дробных бит (Q)")

    model_config = {"frozen": True}

    @field_validator("magnitude", mode="before")
    @classmethod
    def parse_magnitude(cls, v: Any) -> Any:
        """
        Разбор magnitude из десятичной строки.

        Строка разбирается вручную: int(str) ограничен лимитом цифр
        интерпретатора. Формат: необязательный '-' и цифры.
        """
        if isinstance(v, bool):
            raise ValueError("magnitude must be an integer, got bool")
        if not isinstance(v, str):
            return v

        digits = v[1:] if v.startswith("-") else v
        if not digits or not digits.isascii() or not digits.isdigit():
            raise ValueError(f"magnitude must be a decimal integer string, got {v!r}")

        return _parse_decimal(v)

    @field_serializer("magnitude")
    def serialize_magnitude(self, v: int) -> str:
        return int_to_decimal_str(v)

    @classmethod
    def from_big_fixed(cls, value: BigFixed) -> "FixedPointValue":
        """Снимок представления BigFixed."""
        return cls(magnitude=value.magnitude, scale=value.scale)

    def to_big_fixed(self) -> BigFixed:
        """
        Новый BigFixed с теми же magnitude и scale.

        Returns:
            BigFixed, равный (==) исходному экземпляру
        """
        return BigFixed.from_raw(self.magnitude, self.scale)

    def to_contract(self) -> Dict[str, Any]:
        """
        dict для JSON контракта fixed_point_value.

        Returns:
            {"magnitude": "<decimal string>", "scale": <int>}
        """
        return self.model_dump(mode="json")


# Длина блока при разборе десятичной строки; ниже лимита int(str)
_PARSE_CHUNK_DIGITS = 512


def _parse_decimal(text: str) -> int:
    negative = text.startswith("-")
    digits = text[1:] if negative else text

    result = 0
    for start in range(0, len(digits), _PARSE_CHUNK_DIGITS):
        chunk = digits[start : start + _PARSE_CHUNK_DIGITS]
        result = result * 10 ** len(chunk) + int(chunk)

    return -result if negative else result
