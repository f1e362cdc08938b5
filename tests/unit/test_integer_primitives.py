"""
Тесты для модуля Integer Primitives

Проверяет:
1. Распознавание int операндов (bool исключён)
2. Знаковый сдвиг и арифметический сдвиг вправо
3. Деление с усечением к нулю и ошибку деления на ноль
4. Десятичную запись чисел сверх лимита str(int)
"""

import pytest

from bigfixed.core.math.integer_primitives import (
    DECIMAL_CHUNK_DIGITS,
    BigFixedDivisionByZero,
    has_arithmetic_right_shift,
    int_to_decimal_str,
    is_native_int,
    shift_signed,
    trunc_div,
)


class TestIsNativeInt:
    """Тесты для is_native_int"""

    def test_ints_accepted(self) -> None:
        assert is_native_int(0)
        assert is_native_int(-5)
        assert is_native_int(10**100)

    def test_bool_rejected(self) -> None:
        """bool — подкласс int, но не операнд"""
        assert not is_native_int(True)
        assert not is_native_int(False)

    def test_other_types_rejected(self) -> None:
        assert not is_native_int(5.0)
        assert not is_native_int("5")
        assert not is_native_int(None)


class TestShiftSigned:
    """Тесты для shift_signed"""

    def test_left_shift(self) -> None:
        assert shift_signed(5, 2) == 20
        assert shift_signed(-5, 2) == -20

    def test_zero_shift(self) -> None:
        assert shift_signed(12345, 0) == 12345

    def test_right_shift_positive(self) -> None:
        assert shift_signed(5, -1) == 2

    def test_right_shift_negative_floors(self) -> None:
        """Отрицательные значения округляются к -inf, а не к нулю"""
        assert shift_signed(-5, -1) == -3
        assert shift_signed(-1, -100) == -1

    def test_right_shift_is_arithmetic(self) -> None:
        assert has_arithmetic_right_shift()


class TestTruncDiv:
    """Тесты для trunc_div"""

    def test_truncates_toward_zero(self) -> None:
        assert trunc_div(7, 2) == 3
        assert trunc_div(-7, 2) == -3
        assert trunc_div(7, -2) == -3
        assert trunc_div(-7, -2) == 3
        assert trunc_div(0, 5) == 0
        assert trunc_div(6, 3) == 2

    def test_differs_from_floor_division(self) -> None:
        assert trunc_div(-7, 2) != -7 // 2

    def test_zero_denominator_raises(self) -> None:
        with pytest.raises(BigFixedDivisionByZero):
            trunc_div(1, 0)

    def test_zero_denominator_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            trunc_div(0, 0)


class TestIntToDecimalStr:
    """Тесты для int_to_decimal_str"""

    def test_small_values(self) -> None:
        assert int_to_decimal_str(0) == "0"
        assert int_to_decimal_str(42) == "42"
        assert int_to_decimal_str(-42) == "-42"

    def test_chunk_boundary(self) -> None:
        assert int_to_decimal_str(10**DECIMAL_CHUNK_DIGITS) == "1" + "0" * DECIMAL_CHUNK_DIGITS
        assert int_to_decimal_str(10**DECIMAL_CHUNK_DIGITS - 1) == "9" * DECIMAL_CHUNK_DIGITS

    def test_inner_zero_chunks_padded(self) -> None:
        assert int_to_decimal_str(10**1200 + 7) == "1" + "0" * 1199 + "7"

    def test_beyond_interpreter_digit_limit(self) -> None:
        """Числа длиннее 4300 цифр конвертируются без ValueError"""
        assert int_to_decimal_str(10**6000) == "1" + "0" * 6000

    def test_large_negative(self) -> None:
        assert int_to_decimal_str(-(10**1500) + 1) == "-" + "9" * 1500
