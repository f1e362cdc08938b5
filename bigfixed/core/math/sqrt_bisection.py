"""
Bisection Square Root — квадратный корень методом бисекции на BigFixed

Клиент BigFixed: корень сужается между двумя границами lo/hi, пока разрыв
не станет равен одной resolution. Используются только операции BigFixed:
сложение, сдвиг >> 1 как деление пополам и сравнение с квадратом при
удвоенном scale.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. lo**2 <= value < hi**2 на каждой итерации (квадрат считается точно, без
   усечения до scale)
2. Итог — нижняя граница lo: корень усекается, а не округляется
3. Число итераций ограничено scale + bit_length(целой части value)
"""

import logging

from bigfixed.core.domain.settings import DEFAULT_PRECISION_SETTINGS, PrecisionSettings
from bigfixed.core.math.fixed_point import BigFixed, Operand
from bigfixed.core.math.integer_primitives import is_native_int

logger = logging.getLogger(__name__)


def bisect_sqrt(value: Operand, scale: int) -> BigFixed:
    """
    Квадратный корень с точностью до resolution при заданном scale.

    Args:
        value: Неотрицательное подкоренное (int или BigFixed)
        scale: Количество дробных бит результата

    Returns:
        lo: BigFixed при scale, для которого lo**2 <= value < (lo + resolution)**2

    Raises:
        ValueError: если value < 0
        TypeError: если value не int и не BigFixed

    Examples:
        >>> bisect_sqrt(4, 8).to_decimal_string(2)
        '2.00'
    """
    if isinstance(value, BigFixed):
        target = value.rescaled(scale)
    elif is_native_int(value):
        target = BigFixed(value, scale)
    else:
        raise TypeError(f"value must be int or BigFixed, got {type(value).__name__}")

    if target < 0:
        raise ValueError(f"cannot take square root of negative value {target}")

    one = BigFixed(1, scale)
    if target < one:
        lo, hi = target, one
    else:
        lo, hi = one, target.copy()

    resolution = lo.resolution()
    iterations = 0

    while hi - lo > resolution:
        mid = (lo + hi) >> 1
        # Точный квадрат при 2 * scale: mid * mid отбросил бы младшие биты
        square = BigFixed.from_raw(mid.magnitude * mid.magnitude, 2 * scale)
        if square <= target:
            lo = mid
        else:
            hi = mid
        iterations += 1

    logger.debug("bisect_sqrt: scale=%d iterations=%d", scale, iterations)
    return lo


def sqrt_decimal_string(
    value: Operand,
    settings: PrecisionSettings | None = None,
) -> str:
    """
    Десятичная запись квадратного корня.

    scale выбирается по settings.decimal_digits с запасом guard_bits, чтобы
    усечение до decimal_digits знаков совпадало с усечением точного корня.

    Args:
        value: Неотрицательное подкоренное
        settings: Точность (default: DEFAULT_PRECISION_SETTINGS)

    Returns:
        Корень с ровно settings.decimal_digits знаками после точки

    Examples:
        >>> sqrt_decimal_string(2, PrecisionSettings(decimal_digits=10))
        '1.4142135623'
    """
    settings = settings or DEFAULT_PRECISION_SETTINGS
    scale = settings.scale()
    logger.debug(
        "sqrt_decimal_string: decimal_digits=%d guard_bits=%d scale=%d",
        settings.decimal_digits,
        settings.guard_bits,
        scale,
    )
    return bisect_sqrt(value, scale).to_decimal_string(settings.decimal_digits)
