"""
Representation — Группы base-10000 и нормализация

Модуль определяет внутреннее представление модуля (magnitude) BigInteger:
список групп по 4 десятичные цифры, младшая группа первой (little-endian).
Знак хранится отдельно (bool) и здесь не участвует.

Пример: 123456789 → [6789, 2345, 1]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Список групп никогда не пуст; ноль — ровно одна группа [0]
2. Старшая группа ненулевая (кроме нуля) — normalize после каждой мутации
3. Каждая группа в диапазоне [0, 9999]
4. Число групп <= MAX_GROUPS, число цифр <= MAX_DIGITS (иначе DigitOverflowError)
5. Ноль всегда неотрицательный (with_sign)
"""

from typing import Final

from src.core.bigint.errors import DigitOverflowError

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления групп
GROUP_BASE: Final[int] = 10000

# Десятичных цифр в одной группе
GROUP_WIDTH: Final[int] = 4

# Максимальное число групп в одном числе
MAX_GROUPS: Final[int] = 0x3FFFFFFE

# Максимальное число десятичных цифр (≈ 4.29e9)
MAX_DIGITS: Final[int] = 0xFFFFFFFC


# =============================================================================
# БАЗОВЫЕ ОПЕРАЦИИ НАД ГРУППАМИ
# =============================================================================


def zero_magnitude() -> list[int]:
    """Новое представление нуля."""
    return [0]


def is_zero_magnitude(groups: list[int]) -> bool:
    return len(groups) == 1 and groups[0] == 0


def push_group(groups: list[int], value: int) -> None:
    """
    Добавление старшей группы.

    Args:
        groups: Список групп (изменяется на месте)
        value: Значение группы [0, 9999]

    Raises:
        DigitOverflowError: Если число групп превысит MAX_GROUPS
    """
    if len(groups) >= MAX_GROUPS:
        raise DigitOverflowError(
            condition=f"group count {len(groups)} >= {MAX_GROUPS}",
            message="Overflow: too many groups",
        )
    groups.append(value)


def normalize(groups: list[int]) -> list[int]:
    """
    Удаление лишних старших нулевых групп (на месте).

    Returns:
        Тот же список (для цепочек вызовов)
    """
    while len(groups) > 1 and groups[-1] == 0:
        groups.pop()
    return groups


def with_sign(groups: list[int], negative: bool) -> tuple[list[int], bool]:
    """
    Пара (groups, negative) с гарантией, что ноль неотрицательный.

    Все signed-операции возвращают результат через эту функцию.
    """
    normalize(groups)
    return groups, negative and not is_zero_magnitude(groups)


def digit_count(groups: list[int]) -> int:
    """
    Количество десятичных цифр модуля.

    Examples:
        >>> digit_count([0])
        1
        >>> digit_count([6789, 2345, 1])
        9
    """
    return (len(groups) - 1) * GROUP_WIDTH + len(str(groups[-1]))


def check_digit_limit(digits: int) -> None:
    """
    Проверка, что результат с `digits` цифрами представим.

    Raises:
        DigitOverflowError: Если digits > MAX_DIGITS
    """
    if digits > MAX_DIGITS:
        raise DigitOverflowError(
            condition=f"digits {digits} > {MAX_DIGITS}",
            message="Overflow: result exceeds maximum digit count",
        )


# =============================================================================
# КОНВЕРСИЯ NATIVE INT ⇄ ГРУППЫ
# =============================================================================


def magnitude_from_int(n: int) -> list[int]:
    """
    Разбиение неотрицательного int на группы base-10000.

    Args:
        n: Неотрицательное целое

    Raises:
        ValueError: Если n < 0
    """
    if n < 0:
        raise ValueError(f"magnitude must be non-negative, got {n}")

    if n == 0:
        return zero_magnitude()

    groups: list[int] = []
    while n:
        n, group = divmod(n, GROUP_BASE)
        push_group(groups, group)
    return groups


def magnitude_to_int(groups: list[int]) -> int:
    """Сборка модуля в native int (от старшей группы к младшей)."""
    n = 0
    for group in reversed(groups):
        n = n * GROUP_BASE + group
    return n


# =============================================================================
# КОНВЕРСИЯ ДЕСЯТИЧНАЯ СТРОКА ⇄ ГРУППЫ
# =============================================================================


def pack_digits(digits: str) -> list[int]:
    """
    Упаковка строки десятичных цифр в группы, начиная с младшего конца.

    Строка не проверяется на грамматику (это делает parsing),
    ведущие нули допускаются и удаляются нормализацией.

    Examples:
        >>> pack_digits("123456789")
        [6789, 2345, 1]
        >>> pack_digits("0000")
        [0]
    """
    groups: list[int] = []
    end = len(digits)
    while end > 0:
        start = max(end - GROUP_WIDTH, 0)
        push_group(groups, int(digits[start:end]))
        end = start

    if not groups:
        return zero_magnitude()
    return normalize(groups)


def magnitude_to_digits(groups: list[int]) -> str:
    """
    Форматирование модуля: старшая группа без дополнения,
    каждая следующая — ровно 4 цифры.

    Examples:
        >>> magnitude_to_digits([6789, 5, 1])
        '100056789'
    """
    parts = [str(groups[-1])]
    parts.extend(f"{group:04d}" for group in reversed(groups[:-1]))
    return "".join(parts)


# =============================================================================
# ЗАПРОСЫ
# =============================================================================


def power_of_ten_exponent(groups: list[int]) -> int:
    """
    Показатель степени десяти, если модуль ровно 10^k.

    Returns:
        k если groups == 10^k, иначе -1

    Examples:
        >>> power_of_ten_exponent([0, 10])
        5
        >>> power_of_ten_exponent([1])
        0
        >>> power_of_ten_exponent([2])
        -1
    """
    top = groups[-1]
    if top not in (1, 10, 100, 1000):
        return -1
    if any(groups[:-1]):
        return -1
    return (len(groups) - 1) * GROUP_WIDTH + len(str(top)) - 1


def high_groups(groups: list[int], count: int) -> list[int]:
    """
    Старшие `count` групп как самостоятельный модуль.

    Examples:
        >>> high_groups(pack_digits("123456789999"), 1)
        [1234]
        >>> high_groups(pack_digits("123456789999"), 2)
        [5678, 1234]
    """
    return normalize(list(groups[len(groups) - count:]))
