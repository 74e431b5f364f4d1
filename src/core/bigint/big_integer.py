"""
BigInteger — Целое число произвольной точности

Значение хранится как модуль (список групп base-10000, младшая первой)
и отдельный флаг знака. Все составные операторы (+=, -=, *=, /=, %=,
<<=, >>=) изменяют экземпляр на месте; бинарные операторы копируют
левый операнд и применяют составной оператор к копии.

Пример:
    >>> b = BigInteger("999999999999")
    >>> b += BigInteger("1111111111")
    >>> str(b)
    '1001111111110'
    >>> b.reverse()
    >>> str(b / 10000)
    '-100111111'

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляр всегда нормализован, ноль всегда неотрицательный
2. Ошибка операции не изменяет получателя (результат фиксируется
   только после успешного вычисления)
3. Каждый экземпляр владеет своим списком групп; copy() — глубокая копия,
   take() передаёт хранилище и обнуляет источник
4. Деление усекает к нулю; (a / b) * b + (a % b) == a
"""

import sys
from typing import Optional, TextIO, Union

from src.core.bigint import additive, multiplicative
from src.core.bigint.comparison import Ordering, compare_signed
from src.core.bigint.conversion import INT64, ConversionResult, IntegerType, narrow
from src.core.bigint.errors import InvalidValueError, ParseError
from src.core.bigint.parsing import format_literal, parse_literal
from src.core.bigint.power import raise_to_power
from src.core.bigint.representation import (
    MAX_DIGITS,
    digit_count,
    is_zero_magnitude,
    magnitude_from_int,
    magnitude_to_int,
    zero_magnitude,
)
from src.core.bigint.shifting import ShiftDirection, shift_magnitude

Operand = Union["BigInteger", int, str]


class BigInteger:
    """
    Знаковое целое произвольной точности.

    Конструируется из int (кроме bool), из десятичного литерала
    (в том числе в научной записи) или копированием другого BigInteger.
    Изменяемый тип: не хешируется.
    """

    __slots__ = ("_groups", "_negative")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Operand):
        """
        Args:
            value: int, десятичный литерал или BigInteger

        Raises:
            TypeError: Если value — bool или неподдерживаемый тип
            ParseError: Если строка не является корректным литералом
        """
        self._groups, self._negative = self._init_parts(value)

    @staticmethod
    def _init_parts(value: Operand) -> tuple[list[int], bool]:
        if isinstance(value, BigInteger):
            return list(value._groups), value._negative
        if isinstance(value, bool):
            raise TypeError("BigInteger can not be constructed from bool")
        if isinstance(value, int):
            return magnitude_from_int(abs(value)), value < 0
        if isinstance(value, str):
            return parse_literal(value)
        raise TypeError(
            f"BigInteger can not be constructed from {type(value).__name__}"
        )

    @classmethod
    def _from_parts(cls, groups: list[int], negative: bool) -> "BigInteger":
        result = cls.__new__(cls)
        result._groups = groups
        result._negative = negative
        return result

    @classmethod
    def _coerce(cls, value: object) -> Optional["BigInteger"]:
        """Операнд как BigInteger или None, если тип не поддерживается."""
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, (int, str)) and not isinstance(value, bool):
            return cls(value)
        return None

    def _commit(self, parts: tuple[list[int], bool]) -> "BigInteger":
        self._groups, self._negative = parts
        return self

    # =========================================================================
    # ВЛАДЕНИЕ: КОПИРОВАНИЕ / ПЕРЕМЕЩЕНИЕ / ПРИСВАИВАНИЕ
    # =========================================================================

    def copy(self) -> "BigInteger":
        """Независимая глубокая копия."""
        return self._from_parts(list(self._groups), self._negative)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "BigInteger":
        return self.copy()

    def take(self) -> "BigInteger":
        """
        Перемещение: новое значение получает хранилище этого,
        а этот экземпляр становится нулём.
        """
        moved = self._from_parts(self._groups, self._negative)
        self._groups = zero_magnitude()
        self._negative = False
        return moved

    def assign(self, value: Operand) -> "BigInteger":
        """
        Повторная инициализация на месте из int, литерала или BigInteger.

        При ошибке разбора значение не изменяется.
        """
        return self._commit(self._init_parts(value))

    def swap(self, other: "BigInteger") -> None:
        """Обмен хранилищами двух значений."""
        self._groups, other._groups = other._groups, self._groups
        self._negative, other._negative = other._negative, self._negative

    # =========================================================================
    # ЗАПРОСЫ
    # =========================================================================

    def is_zero(self) -> bool:
        return is_zero_magnitude(self._groups)

    def is_negative(self) -> bool:
        return self._negative

    def is_positive(self) -> bool:
        return not self._negative and not self.is_zero()

    def is_odd(self) -> bool:
        return self._groups[0] & 1 == 1

    def is_even(self) -> bool:
        return self._groups[0] & 1 == 0

    def digits(self) -> int:
        """Количество десятичных цифр модуля."""
        return digit_count(self._groups)

    @staticmethod
    def max_digits() -> int:
        """Максимальное представимое количество десятичных цифр."""
        return MAX_DIGITS

    def compare(self, other: Operand) -> Ordering:
        """
        Сравнение с другим значением.

        Returns:
            Ordering.LESS / EQUAL / GREATER (совместимо с -1/0/+1)
        """
        rhs = self._require(other)
        return compare_signed(self._groups, self._negative, rhs._groups, rhs._negative)

    def opposite(self) -> "BigInteger":
        """Противоположное значение (self не изменяется)."""
        result = self.copy()
        result.reverse()
        return result

    def absolute(self) -> "BigInteger":
        """Модуль (self не изменяется)."""
        return self._from_parts(list(self._groups), False)

    def power(self, n: Operand) -> "BigInteger":
        """
        n-я степень (self не изменяется).

        Raises:
            InvalidValueError: Если self == 0 и n <= 0
            DigitOverflowError: Если результат непредставим
        """
        exponent = self._require(n)
        parts = raise_to_power(self._groups, self._negative, int(exponent))
        return self._from_parts(*parts)

    # =========================================================================
    # КОНВЕРСИЯ И ВЫВОД
    # =========================================================================

    def to_string(self) -> str:
        """Каноническая десятичная запись, "-" только для отрицательных."""
        return format_literal(self._groups, self._negative)

    def to_integer(self, target: IntegerType = INT64) -> ConversionResult:
        """
        Сужение в native integer тип.

        Выход за диапазон не является ошибкой:

            >>> BigInteger(2 ** 63).to_integer()
            ConversionResult(value=0, ok=False)
        """
        return narrow(int(self), target)

    def print(self, separator: str = "", file: Optional[TextIO] = None) -> None:
        """
        Вывод канонической записи и необязательного разделителя.

            b.print(" ")   # "123 "
        """
        stream = file if file is not None else sys.stdout
        stream.write(self.to_string() + separator)

    def write(self, stream: TextIO) -> TextIO:
        """Запись канонического текста в поток."""
        stream.write(self.to_string())
        return stream

    @classmethod
    def read(cls, stream: TextIO) -> "BigInteger":
        """
        Чтение одного токена (до пробельного символа) из текстового потока.

        Raises:
            ParseError: Если токен пуст или некорректен
        """
        char = stream.read(1)
        while char and char.isspace():
            char = stream.read(1)

        token: list[str] = []
        while char and not char.isspace():
            token.append(char)
            char = stream.read(1)

        if not token:
            raise ParseError("", 0, "integer literal", "end of input")
        return cls("".join(token))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __int__(self) -> int:
        value = magnitude_to_int(self._groups)
        return -value if self._negative else value

    def __bool__(self) -> bool:
        return not self.is_zero()

    # =========================================================================
    # МОДИФИКАТОРЫ
    # =========================================================================

    def reverse(self) -> None:
        """Смена знака на месте (для нуля — без изменений)."""
        if not self.is_zero():
            self._negative = not self._negative

    def shift10(self, n: int, direction: ShiftDirection) -> "BigInteger":
        """
        Десятичный сдвиг модуля на месте (умножение/деление на 10^n).

        Знак сохраняется; сдвиг вправо до нуля даёт неотрицательный ноль.
        """
        groups = shift_magnitude(self._groups, n, direction)
        return self._commit((groups, self._negative and not is_zero_magnitude(groups)))

    def increment(self) -> "BigInteger":
        """Префиксный инкремент (++x)."""
        return self._commit(additive.increment_signed(self._groups, self._negative))

    def decrement(self) -> "BigInteger":
        """Префиксный декремент (--x)."""
        return self._commit(additive.decrement_signed(self._groups, self._negative))

    def post_increment(self) -> "BigInteger":
        """Постфиксный инкремент (x++): возвращает прежнее значение."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInteger":
        """Постфиксный декремент (x--): возвращает прежнее значение."""
        previous = self.copy()
        self.decrement()
        return previous

    # =========================================================================
    # СОСТАВНЫЕ ОПЕРАТОРЫ (на месте)
    # =========================================================================

    def _require(self, other: object) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")
        return rhs

    def __iadd__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._commit(
            additive.add_signed(self._groups, self._negative, rhs._groups, rhs._negative)
        )

    def __isub__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._commit(
            additive.subtract_signed(self._groups, self._negative, rhs._groups, rhs._negative)
        )

    def __imul__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._commit(
            multiplicative.multiply_signed(
                self._groups, self._negative, rhs._groups, rhs._negative
            )
        )

    def __itruediv__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._commit(
            multiplicative.divide_signed(
                self._groups, self._negative, rhs._groups, rhs._negative
            )
        )

    __ifloordiv__ = __itruediv__

    def __imod__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._commit(
            multiplicative.modulo_signed(
                self._groups, self._negative, rhs._groups, rhs._negative
            )
        )

    def _power_of_two(self, n: "BigInteger") -> "BigInteger":
        if n.is_negative():
            raise InvalidValueError(
                condition=f"shift {n} < 0",
                message="Shift amount must be non-negative",
            )
        return BigInteger(2).power(n)

    def __ilshift__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        factor = self._power_of_two(rhs)
        return self.__imul__(factor)

    def __irshift__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        factor = self._power_of_two(rhs)
        return self.__itruediv__(factor)

    # =========================================================================
    # БИНАРНЫЕ ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, other: Operand) -> "BigInteger":
        return self.copy().__iadd__(other)

    def __sub__(self, other: Operand) -> "BigInteger":
        return self.copy().__isub__(other)

    def __mul__(self, other: Operand) -> "BigInteger":
        return self.copy().__imul__(other)

    def __truediv__(self, other: Operand) -> "BigInteger":
        return self.copy().__itruediv__(other)

    __floordiv__ = __truediv__

    def __mod__(self, other: Operand) -> "BigInteger":
        return self.copy().__imod__(other)

    def __divmod__(self, other: Operand) -> tuple["BigInteger", "BigInteger"]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        quotient = self / rhs
        return quotient, self - quotient * rhs

    def __lshift__(self, other: Operand) -> "BigInteger":
        return self.copy().__ilshift__(other)

    def __rshift__(self, other: Operand) -> "BigInteger":
        return self.copy().__irshift__(other)

    # Отражённые операторы: int слева
    def __radd__(self, other: int) -> "BigInteger":
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs + self

    def __rsub__(self, other: int) -> "BigInteger":
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs - self

    def __rmul__(self, other: int) -> "BigInteger":
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs * self

    def __rtruediv__(self, other: int) -> "BigInteger":
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs / self

    __rfloordiv__ = __rtruediv__

    def __rmod__(self, other: int) -> "BigInteger":
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs % self

    # Унарные
    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __neg__(self) -> "BigInteger":
        return self.opposite()

    def __abs__(self) -> "BigInteger":
        return self.absolute()

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        # Некорректный литерал не равен ни одному значению
        try:
            rhs = self._coerce(other)
        except ParseError:
            return NotImplemented
        if rhs is None:
            return NotImplemented
        return self._groups == rhs._groups and self._negative == rhs._negative

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) == Ordering.LESS

    def __gt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) == Ordering.GREATER

    def __le__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) != Ordering.GREATER

    def __ge__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) != Ordering.LESS
