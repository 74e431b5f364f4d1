"""
Power Engine — Возведение в степень возведением в квадрат

Быстрые тождества (проверяются по порядку):
    0^n = 0          (n > 0; при n <= 0 — InvalidValueError)
    x^0 = 1          (x != 0)
    1^n = 1
    (-1)^n = 1 если n чётное, иначе -1
    x^n = 0          (|x| > 1, n < 0 — усечение 1 / x^|n|)
    x^1 = x
    (10^k)^n = 10^(k*n)  — один десятичный сдвиг

Общий случай: x^n = x^(n/2) * x^(n/2) [* x если n нечётное],
стоимость логарифмическая по n.

Показатель степени в путях со сдвигом и в общем случае должен помещаться
в UINT32, иначе DigitOverflowError.
"""

import logging

from src.core.bigint.conversion import UINT32
from src.core.bigint.errors import DigitOverflowError, InvalidValueError
from src.core.bigint.multiplicative import multiply_magnitude
from src.core.bigint.representation import (
    MAX_DIGITS,
    check_digit_limit,
    digit_count,
    is_zero_magnitude,
    power_of_ten_exponent,
    with_sign,
    zero_magnitude,
)
from src.core.bigint.shifting import shift_left

logger = logging.getLogger(__name__)


def _native_exponent(exponent: int) -> int:
    """Показатель, проверенный на представимость в UINT32."""
    if not UINT32.contains(exponent):
        raise DigitOverflowError(
            condition=f"exponent {exponent} not in {UINT32.name}",
            message="Overflow: exponent is too large",
        )
    return exponent


def power_by_squaring(base: list[int], exponent: int) -> list[int]:
    """
    Модуль base^exponent рекурсивным возведением в квадрат.

    Args:
        base: Модуль основания
        exponent: Неотрицательный показатель
    """
    if exponent == 0:
        return [1]
    if exponent == 1:
        return list(base)

    half = power_by_squaring(base, exponent // 2)
    result = multiply_magnitude(half, half)
    if exponent % 2 == 1:
        result = multiply_magnitude(result, base)
    return result


def raise_to_power(
    base: list[int],
    base_negative: bool,
    exponent: int,
) -> tuple[list[int], bool]:
    """
    Знаковое возведение в степень.

    Args:
        base: Модуль основания
        base_negative: Знак основания
        exponent: Показатель (любой знак)

    Returns:
        (groups, negative)

    Raises:
        InvalidValueError: Если основание 0 и exponent <= 0
        DigitOverflowError: Если показатель не помещается в UINT32
            или результат превысит MAX_DIGITS
    """
    if is_zero_magnitude(base):
        if exponent <= 0:
            raise InvalidValueError(
                condition=f"base == 0 and exponent {exponent} <= 0",
                message="Invalid value: zero base requires a positive exponent",
            )
        return zero_magnitude(), False

    odd = exponent % 2 == 1
    if exponent == 0:
        return [1], False

    if base == [1]:
        return [1], base_negative and odd

    if exponent < 0:
        return zero_magnitude(), False

    if exponent == 1:
        return list(base), base_negative

    negative = base_negative and odd
    power_of_ten = power_of_ten_exponent(base)
    if power_of_ten >= 0:
        shift = power_of_ten * _native_exponent(exponent)
        check_digit_limit(shift + 1)
        logger.debug("power: power-of-ten fast path, shift %d", shift)
        return with_sign(shift_left([1], shift), negative)

    n = _native_exponent(exponent)
    if (digit_count(base) - 1) * n >= MAX_DIGITS:
        raise DigitOverflowError(
            condition=f"({digit_count(base)} - 1) * {n} >= {MAX_DIGITS}",
            message="Overflow: power result exceeds maximum digit count",
        )
    return with_sign(power_by_squaring(base, n), negative)
