"""
Comparator — Сравнение с учётом знака и модуля

Сравнение модулей идёт от старшей группы к младшей: сначала по числу групп
(больше групп ⇒ больше модуль, при нормализованном входе), затем по группам.
Для двух отрицательных чисел результат сравнения модулей инвертируется.
"""

from enum import IntEnum


class Ordering(IntEnum):
    """Результат сравнения (совместим с -1/0/+1)."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare_magnitude(a: list[int], b: list[int]) -> Ordering:
    """
    Сравнение двух нормализованных модулей.

    Args:
        a: Группы первого модуля
        b: Группы второго модуля

    Returns:
        Ordering.LESS / EQUAL / GREATER

    Examples:
        >>> compare_magnitude([1, 1], [9999])
        <Ordering.GREATER: 1>
        >>> compare_magnitude([5], [5])
        <Ordering.EQUAL: 0>
    """
    if len(a) != len(b):
        return Ordering.GREATER if len(a) > len(b) else Ordering.LESS

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return Ordering.GREATER if a[i] > b[i] else Ordering.LESS

    return Ordering.EQUAL


def compare_signed(
    a: list[int],
    a_negative: bool,
    b: list[int],
    b_negative: bool,
) -> Ordering:
    """
    Сравнение знаковых значений.

    Разные знаки решают сразу (отрицательное < неотрицательного).
    """
    if a_negative != b_negative:
        return Ordering.LESS if a_negative else Ordering.GREATER

    if a_negative:
        return compare_magnitude(b, a)
    return compare_magnitude(a, b)
