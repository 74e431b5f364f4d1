"""
Additive Engine — Сложение и вычитание модулей

Примитивы без знака (carry/borrow по группам base-10000) и знаковая
диспетчеризация для +, -, ++, --.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая группа результата в [0, 9999] после распространения переноса
2. sub_magnitude требует larger >= smaller (проверяется вызывающим через compare)
3. Знаковые операции не изменяют аргументы — результат всегда новый список
4. Результат нормализован, ноль неотрицательный

СВЕДЕНИЕ ЗНАКОВ:
    x + y       = x + y
    x + (-y)    = x - y
    (-x) + y    = -(x - y)
    (-x) + (-y) = -(x + y)
"""

from src.core.bigint.comparison import Ordering, compare_magnitude
from src.core.bigint.representation import (
    GROUP_BASE,
    is_zero_magnitude,
    normalize,
    push_group,
    with_sign,
    zero_magnitude,
)

# =============================================================================
# ПРИМИТИВЫ ПЕРЕНОСА
# =============================================================================


def add_and_carry(groups: list[int], n: int, value: int) -> bool:
    """
    Прибавление value к группе n (на месте).

    Если n == len(groups), группа добавляется как новая старшая.

    Args:
        groups: Список групп
        n: Индекс группы
        value: Слагаемое [0, 9999]

    Returns:
        True если возник перенос в группу n + 1
    """
    if n == len(groups):
        push_group(groups, value)
        return False

    total = groups[n] + value
    groups[n] = total % GROUP_BASE
    return total >= GROUP_BASE


def propagate_carry(groups: list[int], n: int, value: int) -> None:
    """
    Прибавление произвольного неотрицательного value начиная с группы n,
    с распространением переноса в старшие группы.
    """
    while value:
        carry = value // GROUP_BASE
        if add_and_carry(groups, n, value % GROUP_BASE):
            carry += 1
        value = carry
        n += 1


# =============================================================================
# МОДУЛЬНЫЕ ПРИМИТИВЫ
# =============================================================================


def add_magnitude(a: list[int], b: list[int]) -> list[int]:
    """
    Сумма модулей.

    Более короткий операнд дополняется неявными нулевыми группами,
    остаточный перенос становится новой старшей группой.

    Examples:
        >>> add_magnitude([9999], [1])
        [0, 1]
    """
    result: list[int] = []
    carry = 0
    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        push_group(result, total % GROUP_BASE)
        carry = total // GROUP_BASE

    if carry:
        push_group(result, carry)
    return normalize(result)


def sub_magnitude(larger: list[int], smaller: list[int]) -> list[int]:
    """
    Разность модулей larger - smaller.

    Args:
        larger: Уменьшаемое (модуль >= smaller)
        smaller: Вычитаемое

    Raises:
        ValueError: Если larger < smaller (нарушен контракт вызывающего)

    Examples:
        >>> sub_magnitude([0, 1], [1])
        [9999]
    """
    if len(smaller) > len(larger):
        raise ValueError("sub_magnitude requires larger >= smaller")

    result: list[int] = []
    borrow = 0
    for i, group in enumerate(larger):
        diff = group - borrow
        if i < len(smaller):
            diff -= smaller[i]
        if diff < 0:
            diff += GROUP_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    if borrow:
        raise ValueError("sub_magnitude requires larger >= smaller")
    return normalize(result)


def difference(a: list[int], b: list[int]) -> tuple[list[int], bool]:
    """
    Разность a - b для модулей со знаком результата.

    Если |a| < |b|, аргументы меняются местами и знак результата
    становится отрицательным.

    Returns:
        (groups, negative)
    """
    order = compare_magnitude(a, b)
    if order == Ordering.EQUAL:
        return zero_magnitude(), False
    if order == Ordering.LESS:
        return sub_magnitude(b, a), True
    return sub_magnitude(a, b), False


# =============================================================================
# ЗНАКОВАЯ ДИСПЕТЧЕРИЗАЦИЯ
# =============================================================================


def add_signed(
    a: list[int],
    a_negative: bool,
    b: list[int],
    b_negative: bool,
) -> tuple[list[int], bool]:
    """
    Знаковое сложение a + b.

    Каждый из четырёх случаев знаков сводится к одному
    сложению или вычитанию модулей.

    Returns:
        (groups, negative) — новый нормализованный результат
    """
    if not a_negative and not b_negative:
        return with_sign(add_magnitude(a, b), False)

    if not a_negative and b_negative:
        # x + (-y) = x - y
        groups, negative = difference(a, b)
        return with_sign(groups, negative)

    if a_negative and not b_negative:
        # (-x) + y = -(x - y)
        groups, negative = difference(a, b)
        return with_sign(groups, not negative)

    # (-x) + (-y) = -(x + y)
    return with_sign(add_magnitude(a, b), True)


def subtract_signed(
    a: list[int],
    a_negative: bool,
    b: list[int],
    b_negative: bool,
) -> tuple[list[int], bool]:
    """
    Знаковое вычитание a - b.

        x - y       = x - y
        x - (-y)    = x + y
        (-x) - y    = -(x + y)
        (-x) - (-y) = -(x - y)
    """
    if not a_negative and not b_negative:
        groups, negative = difference(a, b)
        return with_sign(groups, negative)

    if not a_negative and b_negative:
        return with_sign(add_magnitude(a, b), False)

    if a_negative and not b_negative:
        return with_sign(add_magnitude(a, b), True)

    groups, negative = difference(a, b)
    return with_sign(groups, not negative)


# =============================================================================
# ИНКРЕМЕНТ / ДЕКРЕМЕНТ
# =============================================================================


def increment_magnitude(groups: list[int]) -> None:
    """Модуль + 1 (на месте), перенос распространяется по одной группе."""
    g = 0
    while add_and_carry(groups, g, 1):
        g += 1


def decrement_magnitude(groups: list[int]) -> None:
    """
    Модуль - 1 (на месте), заём распространяется по одной группе.

    Raises:
        ValueError: Если модуль равен нулю
    """
    if is_zero_magnitude(groups):
        raise ValueError("cannot decrement zero magnitude")

    g = 0
    while groups[g] == 0:
        groups[g] = GROUP_BASE - 1
        g += 1
    groups[g] -= 1
    normalize(groups)


def increment_signed(groups: list[int], negative: bool) -> tuple[list[int], bool]:
    """
    Знаковый инкремент.

    Для отрицательного: -x + 1 = -(x - 1).
    """
    result = list(groups)
    if not negative:
        increment_magnitude(result)
        return with_sign(result, False)

    result, flipped = decrement_signed(result, False)
    return with_sign(result, not flipped)


def decrement_signed(groups: list[int], negative: bool) -> tuple[list[int], bool]:
    """
    Знаковый декремент.

    0 - 1 = -1; для отрицательного: -x - 1 = -(x + 1).
    """
    result = list(groups)
    if is_zero_magnitude(result):
        return [1], True

    if not negative:
        decrement_magnitude(result)
        return with_sign(result, False)

    result, flipped = increment_signed(result, False)
    return with_sign(result, not flipped)
