"""
Parser / Formatter — Десятичная строка ⇄ представление

Грамматика целого числа:
    literal    := sign? ( "0" | integer | scientific )
    sign       := "+" | "-"
    integer    := [1-9] [0-9]*
    scientific := [1-9] ( "." [0-9]+ )? ( "e" | "E" ) "+"? [1-9] [0-9]*

Научная запись d.ddd e N допускается только если результат целый:
N >= числа дробных цифр мантиссы. Мантисса упаковывается в группы,
затем сдвигается влево на N - (число дробных цифр).

Любое отклонение → ParseError с позицией первого неверного символа.
Частично построенное значение при ошибке не возвращается.
"""

from enum import Enum
from typing import Final, Optional

from src.core.bigint.errors import DigitOverflowError, ParseError
from src.core.bigint.representation import (
    MAX_DIGITS,
    magnitude_to_digits,
    pack_digits,
    with_sign,
    zero_magnitude,
)
from src.core.bigint.shifting import shift_left

_DIGITS: Final[frozenset[str]] = frozenset("0123456789")
_NONZERO_DIGITS: Final[frozenset[str]] = frozenset("123456789")
_SIGNS: Final[frozenset[str]] = frozenset("+-")
_EXPONENT_MARKERS: Final[frozenset[str]] = frozenset("eE")


class NumberType(str, Enum):
    """Форма записи литерала"""

    ZERO = "zero"
    INTEGER = "integer"
    SCIENTIFIC = "scientific"


# =============================================================================
# ПРОВЕРКА ГРАММАТИКИ
# =============================================================================


class _Cursor:
    """Позиция разбора в строке с диагностикой ошибок."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_digits(self) -> None:
        while self.peek() in _DIGITS:
            self.pos += 1

    def fail(self, expected: str) -> ParseError:
        char = self.peek()
        actual = "end of input" if char is None else repr(char)
        return ParseError(self.text, self.pos, expected, actual)


def classify_literal(text: str) -> NumberType:
    """
    Проверка строки на соответствие грамматике.

    Args:
        text: Кандидат в литерал

    Returns:
        NumberType найденной формы записи

    Raises:
        ParseError: Если строка не соответствует грамматике

    Examples:
        >>> classify_literal("-0")
        <NumberType.ZERO: 'zero'>
        >>> classify_literal("1.5e3")
        <NumberType.SCIENTIFIC: 'scientific'>
    """
    cursor = _Cursor(text)
    if cursor.peek() in _SIGNS:
        cursor.pos += 1

    if cursor.peek() == "0":
        cursor.pos += 1
        if not cursor.at_end():
            raise cursor.fail("end of input after '0'")
        return NumberType.ZERO

    if cursor.peek() not in _NONZERO_DIGITS:
        raise cursor.fail("non-zero digit")
    cursor.pos += 1

    if cursor.peek() not in (".", "e", "E"):
        cursor.skip_digits()
        if not cursor.at_end():
            raise cursor.fail("digit or end of input")
        return NumberType.INTEGER

    # Научная запись: мантисса с одной ненулевой цифрой целой части
    if cursor.peek() == ".":
        cursor.pos += 1
        if cursor.peek() not in _DIGITS:
            raise cursor.fail("fractional digit")
        cursor.skip_digits()
        if cursor.peek() not in _EXPONENT_MARKERS:
            raise cursor.fail("exponent marker 'e'")

    cursor.pos += 1
    if cursor.peek() == "+":
        cursor.pos += 1
    if cursor.peek() not in _NONZERO_DIGITS:
        raise cursor.fail("positive exponent")
    cursor.skip_digits()
    if not cursor.at_end():
        raise cursor.fail("digit or end of input")
    return NumberType.SCIENTIFIC


# =============================================================================
# РАЗБОР
# =============================================================================


def _parse_scientific(text: str, body: str) -> list[int]:
    """Модуль для научной записи (body — без знака)."""
    marker = max(body.find("e"), body.find("E"))
    mantissa = body[:marker]
    exponent_text = body[marker + 1:].lstrip("+")
    exponent_pos = len(text) - len(exponent_text)

    # Показатель длиннее MAX_DIGITS заведомо переполняет
    if len(exponent_text) > len(str(MAX_DIGITS)):
        raise DigitOverflowError(
            condition=f"exponent {exponent_text[:12]}... > {MAX_DIGITS}",
            message="Overflow: exponent of scientific notation is too large",
        )
    exponent = int(exponent_text)

    integer_part, _, fraction = mantissa.partition(".")
    if exponent < len(fraction):
        raise ParseError(
            text,
            exponent_pos,
            f"exponent >= {len(fraction)} (fractional digit count)",
            exponent_text,
        )

    return shift_left(pack_digits(integer_part + fraction), exponent - len(fraction))


def parse_literal(text: str) -> tuple[list[int], bool]:
    """
    Разбор десятичного литерала.

    Args:
        text: Строка вида "123", "-42", "+0", "1.25e3"

    Returns:
        (groups, negative)

    Raises:
        ParseError: Если строка не соответствует грамматике
        DigitOverflowError: Если научная запись превышает MAX_DIGITS

    Examples:
        >>> parse_literal("-123456789")
        ([6789, 2345, 1], True)
        >>> parse_literal("1.25e3")
        ([1250], False)
    """
    if not isinstance(text, str):
        raise TypeError(f"literal must be str, got {type(text).__name__}")

    kind = classify_literal(text)
    if kind == NumberType.ZERO:
        return zero_magnitude(), False

    negative = text[0] == "-"
    body = text[1:] if text[0] in _SIGNS else text

    if kind == NumberType.INTEGER:
        groups = pack_digits(body)
    else:
        groups = _parse_scientific(text, body)

    return with_sign(groups, negative)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_literal(groups: list[int], negative: bool) -> str:
    """
    Каноническая десятичная запись: "-" только для отрицательных.

    Examples:
        >>> format_literal([6789, 5, 1], True)
        '-100056789'
    """
    digits = magnitude_to_digits(groups)
    return f"-{digits}" if negative else digits
