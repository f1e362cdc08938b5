"""
Integer Primitives — адаптер над int произвольной точности

Python int уже даёт бесконечную точность и two's-complement семантику
для битовых операций. Модуль закрывает оставшиеся расхождения:
- `//` округляет вниз, а деление BigFixed должно усекать к нулю
- `<<` не принимает отрицательный сдвиг
- `str(int)` ограничен sys.get_int_max_str_digits() (4300 по умолчанию)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. shift_signed с отрицательным сдвигом — арифметический сдвиг (floor)
2. trunc_div усекает к нулю, делитель 0 → BigFixedDivisionByZero
3. int_to_decimal_str работает для любой длины числа
"""

from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Длина десятичного блока при конверсии больших чисел в строку.
# Должна быть меньше sys.get_int_max_str_digits() (минимум 640).
DECIMAL_CHUNK_DIGITS: Final[int] = 512

_DECIMAL_CHUNK: Final[int] = 10**DECIMAL_CHUNK_DIGITS


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigFixedDivisionByZero(ZeroDivisionError):
    """
    Деление на BigFixed (или int) с нулевой magnitude.

    Наследует ZeroDivisionError, поэтому `except ZeroDivisionError`
    в клиентском коде продолжает работать.
    """
    pass


# =============================================================================
# ПРОВЕРКА ТИПОВ
# =============================================================================


def is_native_int(value: object) -> bool:
    """
    True для int, но не для bool.

    bool — подкласс int, но как операнд арифметики BigFixed не допускается.
    """
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# СДВИГИ
# =============================================================================


def shift_signed(value: int, count: int) -> int:
    """
    Сдвиг на знаковое количество бит.

    Args:
        value: Сдвигаемое число
        count: >= 0 — сдвиг влево, < 0 — арифметический сдвиг вправо

    Returns:
        value * 2**count, для count < 0 округлено к -inf

    Examples:
        >>> shift_signed(5, 2)
        20
        >>> shift_signed(-5, -1)
        -3
    """
    if count >= 0:
        return value << count
    return value >> -count


def has_arithmetic_right_shift() -> bool:
    """
    Самопроверка: `>>` на отрицательных числах округляет к -inf.

    От этого зависит корректность rescale, сравнений и форматирования
    отрицательных значений.
    """
    return (-1 >> 1) == -1 and (-5 >> 1) == -3 and (-(1 << 200) - 1) >> 200 == -2


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Args:
        numerator: Делимое
        denominator: Делитель

    Returns:
        Частное, округлённое к нулю (-7 / 2 → -3)

    Raises:
        BigFixedDivisionByZero: если denominator == 0
    """
    if denominator == 0:
        raise BigFixedDivisionByZero("division by zero-magnitude operand")

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


# =============================================================================
# ДЕСЯТИЧНАЯ СТРОКА
# =============================================================================


def int_to_decimal_str(value: int) -> str:
    """
    Десятичная запись int любой длины.

    Число режется на блоки по DECIMAL_CHUNK_DIGITS цифр, каждый блок
    конвертируется через str() в пределах лимита интерпретатора.

    Args:
        value: Любое целое

    Returns:
        Строка вида "-123..." без ведущих нулей
    """
    if value < 0:
        return "-" + int_to_decimal_str(-value)

    if value < _DECIMAL_CHUNK:
        return str(value)

    chunks: list[str] = []
    while value >= _DECIMAL_CHUNK:
        value, low = divmod(value, _DECIMAL_CHUNK)
        chunks.append(str(low).zfill(DECIMAL_CHUNK_DIGITS))
    chunks.append(str(value))

    return "".join(reversed(chunks))
