"""
BigInteger Errors — Таксономия исключений арифметического ядра

Все ошибки ядра наследуются от BigIntegerError и одновременно от
соответствующего встроенного исключения Python, чтобы вызывающий код мог
перехватывать их как по конкретному типу, так и по стандартной категории.

КАТЕГОРИИ:
- ParseError          — строка не соответствует грамматике целого числа
- DivideByZeroError   — делитель или модуль равен нулю
- DigitOverflowError  — число цифр/групп превышает допустимый максимум
- InvalidValueError   — ноль в неположительной степени, отрицательный сдвиг

ConversionOverflow (сужение в native integer) НЕ является исключением:
to_integer возвращает ConversionResult с флагом ok=False.
"""


class BigIntegerError(Exception):
    """
    Базовая ошибка арифметического ядра.

    Операция, завершившаяся этой ошибкой, не изменяет операнды.

    Attributes:
        condition: Нарушенное условие (текстом), например "divisor == 0"
        message: Человекочитаемое описание
    """

    def __init__(self, condition: str, message: str):
        self.condition = condition
        self.message = message
        super().__init__(f"{message} [{condition}]")


class ParseError(BigIntegerError, ValueError):
    """
    Строка не является корректной записью целого числа.

    Attributes:
        text: Исходная строка
        position: Индекс (с нуля) символа, на котором разбор остановился
        expected: Что ожидалось в этой позиции
        actual: Что было найдено (или "end of input")
    """

    def __init__(self, text: str, position: int, expected: str, actual: str):
        self.text = text
        self.position = position
        self.expected = expected
        self.actual = actual
        super().__init__(
            condition=f"position {position}",
            message=(
                f"Invalid integer literal {text!r}: expected {expected}, "
                f"got {actual} at position {position}"
            ),
        )


class DivideByZeroError(BigIntegerError, ZeroDivisionError):
    """Деление или взятие остатка по нулевому операнду."""


class DigitOverflowError(BigIntegerError, OverflowError):
    """
    Результат превышает максимальное представимое число цифр.

    Возникает при умножении, сдвиге влево и возведении в степень
    до начала вычислений (никакого молчаливого усечения).
    """


class InvalidValueError(BigIntegerError, ValueError):
    """Недопустимое значение аргумента (0 в степени n <= 0, отрицательный сдвиг)."""
