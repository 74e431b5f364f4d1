"""
Multiplicative Engine — Умножение и деление модулей

- Умножение: школьный двойной цикл по группам, результат заранее
  размером len(a) + len(b) групп, перенос через add_and_carry
- Деление: длинное деление, каждая группа частного ищется
  бинарным поиском в [1, 9999] (O(log 9999) умножений на группу)
- Степень десяти в множителе/делителе заменяется десятичным сдвигом
- Остаток определяется только тождеством a - (a / b) * b

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение числа цифр проверяется ДО начала умножения
2. Деление на ноль → DivideByZeroError до любых вычислений
3. Знак результата * и / — XOR знаков операндов; ноль неотрицательный
4. Деление усекает к нулю: 7 / 2 = 3, -7 / 2 = -3
"""

import logging

from src.core.bigint.additive import add_and_carry, propagate_carry, subtract_signed
from src.core.bigint.comparison import Ordering, compare_magnitude
from src.core.bigint.errors import DivideByZeroError
from src.core.bigint.representation import (
    GROUP_BASE,
    check_digit_limit,
    digit_count,
    high_groups,
    is_zero_magnitude,
    normalize,
    power_of_ten_exponent,
    with_sign,
    zero_magnitude,
)
from src.core.bigint.shifting import shift_left, shift_right

logger = logging.getLogger(__name__)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def schoolbook_multiply(a: list[int], b: list[int]) -> list[int]:
    """
    Произведение модулей школьным алгоритмом.

    Args:
        a: Множимое
        b: Множитель

    Returns:
        Новый нормализованный модуль

    Raises:
        DigitOverflowError: Если digits(a) + digits(b) - 1 > MAX_DIGITS
    """
    # Произведение n-значного на m-значное имеет не менее n + m - 1 цифр
    check_digit_limit(digit_count(a) + digit_count(b) - 1)

    result = [0] * (len(a) + len(b))
    for j, multiplier in enumerate(b):
        if multiplier == 0:
            continue
        carry = 0
        for i, group in enumerate(a):
            product = multiplier * group + carry
            carry = product // GROUP_BASE
            if add_and_carry(result, j + i, product % GROUP_BASE):
                carry += 1
        propagate_carry(result, j + len(a), carry)

    return normalize(result)


def multiply_magnitude(a: list[int], b: list[int]) -> list[int]:
    """
    Произведение модулей с быстрым путём для степени десяти.

    Если |b| = 10^k, результат — сдвиг a влево на k разрядов.
    """
    if is_zero_magnitude(a) or is_zero_magnitude(b):
        return zero_magnitude()

    exponent = power_of_ten_exponent(b)
    if exponent >= 0:
        logger.debug("multiply: power-of-ten fast path (10^%d)", exponent)
        return shift_left(a, exponent)

    return schoolbook_multiply(a, b)


def multiply_signed(
    a: list[int],
    a_negative: bool,
    b: list[int],
    b_negative: bool,
) -> tuple[list[int], bool]:
    """Знаковое умножение: знак — XOR знаков операндов."""
    return with_sign(multiply_magnitude(a, b), a_negative != b_negative)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def search_quotient_digit(dividend: list[int], divisor: list[int]) -> int:
    """
    Наибольшая группа частного q в [1, 9999] с divisor * q <= dividend.

    Бинарный поиск по замкнутому диапазону.

    Args:
        dividend: Срез делимого (divisor <= dividend < divisor * 10000)
        divisor: Делитель

    Returns:
        Группа частного q
    """
    low = 1
    high = GROUP_BASE - 1
    while low < high:
        half = (low + high + 1) // 2
        if compare_magnitude(schoolbook_multiply(divisor, [half]), dividend) == Ordering.GREATER:
            high = half - 1
        else:
            low = half
    return low


def long_divide(dividend: list[int], divisor: list[int]) -> list[int]:
    """
    Длинное деление модулей (частное, усечённое).

    На каждом шаге берутся старшие группы остатка в количестве, равном
    числу групп делителя (или на одну больше, если срез меньше делителя),
    находится группа частного q, и из остатка вычитается divisor * q,
    сдвинутый на соответствующую позицию. Повторяется, пока число групп
    остатка не меньше числа групп делителя.

    Args:
        dividend: Делимое (> divisor)
        divisor: Делитель (ненулевой, не степень десяти)

    Returns:
        Частное
    """
    width = len(divisor)
    remainder = list(dividend)
    quotient = [0] * len(dividend)

    while len(remainder) >= width:
        size = len(remainder)
        order = compare_magnitude(high_groups(remainder, width), divisor)
        if order == Ordering.LESS:
            if size == width:
                break
            borrow = 1
        else:
            borrow = 0

        position = size - width - borrow
        window = high_groups(remainder, width + borrow)
        digit = search_quotient_digit(window, divisor)
        quotient[position] = digit

        multiple = [0] * position + schoolbook_multiply(divisor, [digit])
        remainder, _ = subtract_signed(remainder, False, normalize(multiple), False)

    return normalize(quotient)


def divide_magnitude(dividend: list[int], divisor: list[int]) -> list[int]:
    """
    Частное модулей с быстрыми путями.

    Raises:
        DivideByZeroError: Если divisor == 0
    """
    if is_zero_magnitude(divisor):
        raise DivideByZeroError(
            condition="divisor == 0",
            message="The divisor can not be zero",
        )

    order = compare_magnitude(dividend, divisor)
    if is_zero_magnitude(dividend) or order == Ordering.LESS:
        return zero_magnitude()
    if order == Ordering.EQUAL:
        return [1]

    exponent = power_of_ten_exponent(divisor)
    if exponent >= 0:
        logger.debug("divide: power-of-ten fast path (10^%d)", exponent)
        return shift_right(dividend, exponent)

    logger.debug(
        "divide: long division %d groups by %d groups", len(dividend), len(divisor)
    )
    return long_divide(dividend, divisor)


def divide_signed(
    a: list[int],
    a_negative: bool,
    b: list[int],
    b_negative: bool,
) -> tuple[list[int], bool]:
    """Знаковое деление с усечением к нулю; знак — XOR знаков."""
    return with_sign(divide_magnitude(a, b), a_negative != b_negative)


def modulo_signed(
    a: list[int],
    a_negative: bool,
    b: list[int],
    b_negative: bool,
) -> tuple[list[int], bool]:
    """
    Остаток a % b = a - (a / b) * b.

    Гарантируется только тождество (a / b) * b + (a % b) == a;
    знак остатка совпадает со знаком делимого.

    Raises:
        DivideByZeroError: Если b == 0
    """
    if is_zero_magnitude(b):
        raise DivideByZeroError(
            condition="modulus == 0",
            message="The modulus can not be zero",
        )

    quotient, quotient_negative = divide_signed(a, a_negative, b, b_negative)
    product, product_negative = multiply_signed(quotient, quotient_negative, b, b_negative)
    return subtract_signed(a, a_negative, product, product_negative)
