"""
Decimal Shift — Сдвиг модуля по основанию 10

Сдвиг на число цифр, кратное ширине группы (4), выполняется вставкой или
удалением целых групп. Любой другой сдвиг идёт через строковое
представление: форматирование → добавление/отсечение цифр → упаковка.
Оба пути дают одинаковый результат для одной и той же пары (значение, сдвиг).
"""

import logging
from enum import Enum

from src.core.bigint.errors import InvalidValueError
from src.core.bigint.representation import (
    GROUP_WIDTH,
    check_digit_limit,
    digit_count,
    is_zero_magnitude,
    magnitude_to_digits,
    pack_digits,
    zero_magnitude,
)

logger = logging.getLogger(__name__)


class ShiftDirection(str, Enum):
    """Направление десятичного сдвига"""

    LEFT = "left"
    RIGHT = "right"


def _validate_amount(n: int) -> None:
    if n < 0:
        raise InvalidValueError(
            condition=f"shift {n} < 0",
            message="Shift amount must be non-negative",
        )


def shift_left(groups: list[int], n: int) -> list[int]:
    """
    Умножение модуля на 10^n.

    Args:
        groups: Модуль
        n: Число десятичных разрядов (>= 0)

    Returns:
        Новый список групп

    Raises:
        InvalidValueError: Если n < 0
        DigitOverflowError: Если результат превысит MAX_DIGITS
    """
    _validate_amount(n)
    if is_zero_magnitude(groups) or n == 0:
        return list(groups)

    check_digit_limit(digit_count(groups) + n)

    if n % GROUP_WIDTH == 0:
        return [0] * (n // GROUP_WIDTH) + list(groups)

    logger.debug("shift_left: %d digits via string path", n)
    return pack_digits(magnitude_to_digits(groups) + "0" * n)


def shift_right(groups: list[int], n: int) -> list[int]:
    """
    Целочисленное деление модуля на 10^n (усечение).

    Сдвиг на число цифр >= длины числа даёт ноль.

    Raises:
        InvalidValueError: Если n < 0
    """
    _validate_amount(n)
    if is_zero_magnitude(groups) or n == 0:
        return list(groups)

    if n >= digit_count(groups):
        return zero_magnitude()

    if n % GROUP_WIDTH == 0:
        return list(groups[n // GROUP_WIDTH:])

    logger.debug("shift_right: %d digits via string path", n)
    return pack_digits(magnitude_to_digits(groups)[:-n])


def shift_magnitude(groups: list[int], n: int, direction: ShiftDirection) -> list[int]:
    """Десятичный сдвиг в заданном направлении."""
    if direction == ShiftDirection.LEFT:
        return shift_left(groups, n)
    return shift_right(groups, n)
