"""
BigFixed — число с фиксированной точкой произвольной точности

Значение хранится как int произвольной точности (magnitude), масштабированный
на 2**scale, где scale (Q) — количество дробных бит:

    magnitude == round_to_integer(logical_value * 2**scale)

Модуль обеспечивает:
- Конструирование из int и преобразование точности (rescale)
- Арифметику + - * / с BigFixed и int (в обоих порядках операндов)
- Битовые операции << >> | & ^ над сырым представлением
- Сравнение, точное равенство и hash
- Форматирование в десятичную строку с усечением

ПРАВИЛО ВЫРАВНИВАНИЯ ОПЕРАНДОВ:
Правый операнд приводится к scale левого операнда, результат имеет scale
левого операнда. Правило асимметрично: a + b и b + a при разных scale дают
результаты с разной точностью.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rescale вниз усекает младшие биты (floor, к -inf), а не округляет
2. Деление усекает частное к нулю; нулевой делитель → BigFixedDivisionByZero
3. Равенство представленческое: (magnitude, scale) должны совпадать.
   Одно и то же значение при разных scale НЕ равно себе, пока операнды
   не приведены к общему scale
4. << >> | & ^ ~ работают с битами magnitude и не трогают scale;
   при разных scale результат не сохраняет логическое значение
5. Единственная операция, которая может завершиться ошибкой — деление
"""

from typing import Final, Union

from bigfixed.core.math.integer_primitives import (
    int_to_decimal_str,
    is_native_int,
    shift_signed,
    trunc_div,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество десятичных знаков для str(BigFixed)
DEFAULT_DECIMAL_DIGITS: Final[int] = 20


Operand = Union["BigFixed", int]


# =============================================================================
# ВАЛИДАЦИЯ АРГУМЕНТОВ
# =============================================================================


def _check_int(value: object, name: str) -> None:
    if not is_native_int(value):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")


def _check_non_negative(value: object, name: str) -> None:
    _check_int(value, name)
    if value < 0:  # type: ignore[operator]
        raise ValueError(f"{name} must be non-negative, got {value}")


def _require(result: object, operation: str, other: object) -> "BigFixed":
    # Именованные методы не возвращают NotImplemented, а сразу падают
    if result is NotImplemented:
        raise TypeError(
            f"unsupported operand type for BigFixed.{operation}: {type(other).__name__}"
        )
    return result  # type: ignore[return-value]


# =============================================================================
# BIGFIXED
# =============================================================================


class BigFixed:
    """
    Число с фиксированной точкой: magnitude / 2**scale.

    Value type: in-place операторы (+=, *= и т.д.) и rescale() меняют только
    сам экземпляр, бинарные операторы возвращают новый экземпляр.

    == сравнивает представление и с int всегда даёт False, хотя < <= > >=
    с int сравнивают по значению: BigFixed(1, 10) <= 1 and BigFixed(1, 10) >= 1,
    но BigFixed(1, 10) != 1.

    Args:
        value: Целая часть (int произвольной точности)
        scale: Количество дробных бит (>= 0)

    Raises:
        TypeError: если value или scale не int (bool не допускается)
        ValueError: если scale < 0

    Examples:
        >>> (BigFixed(1, 10) / BigFixed(4, 10)).to_decimal_string(2)
        '0.25'
        >>> BigFixed(0, 1).resolution().to_decimal_string(1)
        '0.5'
    """

    __slots__ = ("_magnitude", "_scale")

    def __init__(self, value: int, scale: int) -> None:
        _check_int(value, "value")
        _check_non_negative(scale, "scale")
        self._magnitude: int = value << scale
        self._scale: int = scale

    @classmethod
    def from_raw(cls, magnitude: int, scale: int) -> "BigFixed":
        """
        Создание из уже масштабированного magnitude (без сдвига).

        Args:
            magnitude: Значение * 2**scale
            scale: Количество дробных бит (>= 0)

        Returns:
            BigFixed с заданными magnitude и scale
        """
        _check_int(magnitude, "magnitude")
        _check_non_negative(scale, "scale")
        instance = cls.__new__(cls)
        instance._magnitude = magnitude
        instance._scale = scale
        return instance

    # -------------------------------------------------------------------------
    # Доступ к представлению
    # -------------------------------------------------------------------------

    @property
    def magnitude(self) -> int:
        """Масштабированное значение (value * 2**scale)."""
        return self._magnitude

    @property
    def scale(self) -> int:
        """Количество дробных бит (Q)."""
        return self._scale

    def fractional_bits(self) -> int:
        return self._scale

    def copy(self) -> "BigFixed":
        return BigFixed.from_raw(self._magnitude, self._scale)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "BigFixed":
        return self.copy()

    # -------------------------------------------------------------------------
    # Точность
    # -------------------------------------------------------------------------

    def rescale(self, new_scale: int) -> "BigFixed":
        """
        Изменение точности на месте.

        Увеличение scale без потерь. Уменьшение scale отбрасывает младшие
        дробные биты арифметическим сдвигом (floor к -inf, а не к нулю):
        -0.75 при scale=2 → scale=1 даёт -1.0, а не -0.5.

        Args:
            new_scale: Новое количество дробных бит (>= 0)

        Returns:
            self (для цепочек вызовов)
        """
        _check_non_negative(new_scale, "new_scale")
        if new_scale == self._scale:
            return self

        self._magnitude = shift_signed(self._magnitude, new_scale - self._scale)
        self._scale = new_scale
        return self

    def rescaled(self, new_scale: int) -> "BigFixed":
        """Копия с другим scale; исходный экземпляр не меняется."""
        return self.copy().rescale(new_scale)

    def resolution(self) -> "BigFixed":
        """
        Наименьшее положительное значение при текущем scale.

        Returns:
            BigFixed с magnitude=1 и тем же scale (логически 2**-scale)
        """
        return BigFixed.from_raw(1, self._scale)

    def _aligned(self, other: "BigFixed") -> int:
        # magnitude правого операнда в scale левого; other не меняется
        return shift_signed(other._magnitude, self._scale - other._scale)

    # -------------------------------------------------------------------------
    # In-place арифметика
    # -------------------------------------------------------------------------

    def __iadd__(self, other: Operand) -> "BigFixed":
        if isinstance(other, BigFixed):
            self._magnitude += self._aligned(other)
        elif is_native_int(other):
            self._magnitude += other << self._scale
        else:
            return NotImplemented
        return self

    def __isub__(self, other: Operand) -> "BigFixed":
        if isinstance(other, BigFixed):
            self._magnitude -= self._aligned(other)
        elif is_native_int(other):
            self._magnitude -= other << self._scale
        else:
            return NotImplemented
        return self

    def __imul__(self, other: Operand) -> "BigFixed":
        # Произведение двух масштабированных значений несёт лишний 2**scale
        if isinstance(other, BigFixed):
            self._magnitude = (self._magnitude * self._aligned(other)) >> self._scale
        elif is_native_int(other):
            self._magnitude *= other
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other: Operand) -> "BigFixed":
        """
        Деление на месте с усечением частного к нулю.

        Для BigFixed делимое предварительно сдвигается на scale, чтобы
        частное сохранило scale дробных бит. Делитель-int делит magnitude
        напрямую.

        Raises:
            BigFixedDivisionByZero: если magnitude делителя (после
                выравнивания) равен нулю
        """
        if isinstance(other, BigFixed):
            self._magnitude = trunc_div(self._magnitude << self._scale, self._aligned(other))
        elif is_native_int(other):
            self._magnitude = trunc_div(self._magnitude, other)
        else:
            return NotImplemented
        return self

    # -------------------------------------------------------------------------
    # In-place битовые операции (над представлением)
    # -------------------------------------------------------------------------

    def __ilshift__(self, count: int) -> "BigFixed":
        if not is_native_int(count):
            return NotImplemented
        self._magnitude = shift_signed(self._magnitude, count)
        return self

    def __irshift__(self, count: int) -> "BigFixed":
        if not is_native_int(count):
            return NotImplemented
        self._magnitude = shift_signed(self._magnitude, -count)
        return self

    def __ior__(self, other: Operand) -> "BigFixed":
        if isinstance(other, BigFixed):
            self._magnitude |= other._magnitude
        elif is_native_int(other):
            self._magnitude |= other
        else:
            return NotImplemented
        return self

    def __iand__(self, other: Operand) -> "BigFixed":
        if isinstance(other, BigFixed):
            self._magnitude &= other._magnitude
        elif is_native_int(other):
            self._magnitude &= other
        else:
            return NotImplemented
        return self

    def __ixor__(self, other: Operand) -> "BigFixed":
        if isinstance(other, BigFixed):
            self._magnitude ^= other._magnitude
        elif is_native_int(other):
            self._magnitude ^= other
        else:
            return NotImplemented
        return self

    # -------------------------------------------------------------------------
    # Бинарные операторы: копия + in-place оператор
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> "BigFixed":
        return self.copy().__iadd__(other)

    def __sub__(self, other: Operand) -> "BigFixed":
        return self.copy().__isub__(other)

    def __mul__(self, other: Operand) -> "BigFixed":
        return self.copy().__imul__(other)

    def __truediv__(self, other: Operand) -> "BigFixed":
        return self.copy().__itruediv__(other)

    def __lshift__(self, count: int) -> "BigFixed":
        return self.copy().__ilshift__(count)

    def __rshift__(self, count: int) -> "BigFixed":
        return self.copy().__irshift__(count)

    def __or__(self, other: Operand) -> "BigFixed":
        return self.copy().__ior__(other)

    def __and__(self, other: Operand) -> "BigFixed":
        return self.copy().__iand__(other)

    def __xor__(self, other: Operand) -> "BigFixed":
        return self.copy().__ixor__(other)

    # -------------------------------------------------------------------------
    # Отражённые операторы (int слева)
    # -------------------------------------------------------------------------

    # Коммутативные операции сводятся к форме с BigFixed слева
    def __radd__(self, other: int) -> "BigFixed":
        return self.__add__(other)

    def __rmul__(self, other: int) -> "BigFixed":
        return self.__mul__(other)

    def __ror__(self, other: int) -> "BigFixed":
        return self.__or__(other)

    def __rand__(self, other: int) -> "BigFixed":
        return self.__and__(other)

    def __rxor__(self, other: int) -> "BigFixed":
        return self.__xor__(other)

    # Некоммутативные: int поднимается до BigFixed с тем же scale
    def __rsub__(self, other: int) -> "BigFixed":
        if not is_native_int(other):
            return NotImplemented
        return BigFixed(other, self._scale).__isub__(self)

    def __rtruediv__(self, other: int) -> "BigFixed":
        if not is_native_int(other):
            return NotImplemented
        return BigFixed(other, self._scale).__itruediv__(self)

    # -------------------------------------------------------------------------
    # Именованные операции (без мутации, TypeError вместо NotImplemented)
    # -------------------------------------------------------------------------

    def add(self, other: Operand) -> "BigFixed":
        return _require(self.__add__(other), "add", other)

    def sub(self, other: Operand) -> "BigFixed":
        return _require(self.__sub__(other), "sub", other)

    def mul(self, other: Operand) -> "BigFixed":
        return _require(self.__mul__(other), "mul", other)

    def div(self, other: Operand) -> "BigFixed":
        """
        Деление (a / b).

        Raises:
            BigFixedDivisionByZero: при нулевом делителе
            TypeError: если other не BigFixed и не int
        """
        return _require(self.__truediv__(other), "div", other)

    def shift_left(self, count: int) -> "BigFixed":
        return _require(self.__lshift__(count), "shift_left", count)

    def shift_right(self, count: int) -> "BigFixed":
        return _require(self.__rshift__(count), "shift_right", count)

    def bit_or(self, other: Operand) -> "BigFixed":
        return _require(self.__or__(other), "bit_or", other)

    def bit_and(self, other: Operand) -> "BigFixed":
        return _require(self.__and__(other), "bit_and", other)

    def bit_xor(self, other: Operand) -> "BigFixed":
        return _require(self.__xor__(other), "bit_xor", other)

    # -------------------------------------------------------------------------
    # Унарные операторы
    # -------------------------------------------------------------------------

    def __pos__(self) -> "BigFixed":
        return self.copy()

    def __neg__(self) -> "BigFixed":
        return BigFixed.from_raw(-self._magnitude, self._scale)

    def __invert__(self) -> "BigFixed":
        # ~x == -x - resolution: дополнение битов, а не смена знака
        return BigFixed.from_raw(~self._magnitude, self._scale)

    def __abs__(self) -> "BigFixed":
        return BigFixed.from_raw(abs(self._magnitude), self._scale)

    def __bool__(self) -> bool:
        return self._magnitude != 0

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: Operand) -> int:
        """
        Трёхстороннее сравнение по значению.

        BigFixed справа приводится к scale левого операнда (копией),
        int справа сравнивается как int << scale.

        Args:
            other: BigFixed или int

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other

        Raises:
            TypeError: если other не BigFixed и не int
        """
        if isinstance(other, BigFixed):
            right = self._aligned(other)
        elif is_native_int(other):
            right = other << self._scale
        else:
            raise TypeError(f"cannot compare BigFixed with {type(other).__name__}")

        return (self._magnitude > right) - (self._magnitude < right)

    def _compare_or_none(self, other: object) -> int | None:
        if isinstance(other, BigFixed) or is_native_int(other):
            return self.compare(other)  # type: ignore[arg-type]
        return None

    def __lt__(self, other: Operand) -> bool:
        result = self._compare_or_none(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: Operand) -> bool:
        result = self._compare_or_none(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: Operand) -> bool:
        result = self._compare_or_none(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: Operand) -> bool:
        result = self._compare_or_none(other)
        return NotImplemented if result is None else result >= 0

    def __eq__(self, other: object) -> bool:
        """
        Точное равенство представлений: magnitude и scale.

        BigFixed(5, 10) != BigFixed(5, 5), хотя логически оба равны 5.
        Для сравнения по значению используйте compare() или приведите
        оба операнда к общему scale. Сравнение с int не поддерживается.
        """
        if not isinstance(other, BigFixed):
            return NotImplemented
        return self._magnitude == other._magnitude and self._scale == other._scale

    def __hash__(self) -> int:
        return hash((self._magnitude, self._scale))

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def to_decimal_string(self, decimal_digits: int) -> str:
        """
        Десятичная запись с ровно decimal_digits знаками после точки.

        Лишние знаки отбрасываются (floor), а не округляются. При
        decimal_digits=0 возвращается целая часть с точкой: "5.".

        Args:
            decimal_digits: Количество знаков после точки (>= 0)

        Returns:
            Строка вида "-12.3400"

        Examples:
            >>> BigFixed(100, 3).resolution().to_decimal_string(3)
            '0.125'
            >>> BigFixed(-1, 2).to_decimal_string(2)
            '-1.00'
        """
        _check_non_negative(decimal_digits, "decimal_digits")

        scaled = (self._magnitude * 10**decimal_digits) >> self._scale
        digits = int_to_decimal_str(scaled)

        sign = ""
        if digits.startswith("-"):
            sign, digits = "-", digits[1:]

        if len(digits) <= decimal_digits:
            return f"{sign}0.{digits.zfill(decimal_digits)}"

        split = len(digits) - decimal_digits
        return f"{sign}{digits[:split]}.{digits[split:]}"

    def __str__(self) -> str:
        return self.to_decimal_string(DEFAULT_DECIMAL_DIGITS)

    def __repr__(self) -> str:
        return (
            f"BigFixed.from_raw({int_to_decimal_str(self._magnitude)}, {self._scale})"
        )


# =============================================================================
# ТОЧНОСТЬ ДЛЯ ДЕСЯТИЧНЫХ ЗНАКОВ
# =============================================================================


def scale_for_decimal_digits(decimal_digits: int, guard_bits: int = 0) -> int:
    """
    Минимальный scale, при котором resolution не превышает 10**-decimal_digits.

    Args:
        decimal_digits: Требуемое количество десятичных знаков (>= 0)
        guard_bits: Дополнительные биты сверх минимума (>= 0)

    Returns:
        Q такое, что 2**Q >= 10**decimal_digits, плюс guard_bits

    Examples:
        >>> scale_for_decimal_digits(3)
        10
        >>> scale_for_decimal_digits(3, guard_bits=4)
        14
    """
    _check_non_negative(decimal_digits, "decimal_digits")
    _check_non_negative(guard_bits, "guard_bits")
    return (10**decimal_digits - 1).bit_length() + guard_bits
