"""
Conversion — Сужение BigInteger в native integer типы

Python int неограничен, поэтому целевой native тип задаётся явно моделью
IntegerType (разрядность + знаковость). Выход за диапазон типа — ожидаемая,
частая ситуация: она возвращается как ConversionResult(ok=False),
а не исключением.
"""

from typing import Final, NamedTuple

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# ЦЕЛЕВЫЕ ТИПЫ
# =============================================================================

# Допустимые разрядности native integer
SUPPORTED_BITS: Final[tuple[int, ...]] = (8, 16, 32, 64)


class IntegerType(BaseModel):
    """
    Описание целевого native integer типа.

    Immutable модель (frozen=True): типы — константы модуля.
    """

    name: str = Field(..., min_length=1, description="Имя типа (например, 'int32')")
    bits: int = Field(..., description="Разрядность (8/16/32/64)")
    signed: bool = Field(..., description="Знаковый тип (two's complement)")

    model_config = {"frozen": True}

    @field_validator("bits")
    @classmethod
    def validate_bits(cls, v: int) -> int:
        """Разрядность должна быть одной из SUPPORTED_BITS."""
        if v not in SUPPORTED_BITS:
            raise ValueError(f"bits must be one of {SUPPORTED_BITS}, got {v}")
        return v

    @property
    def min_value(self) -> int:
        """Минимальное представимое значение."""
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Проверка, что value представимо в этом типе."""
        return self.min_value <= value <= self.max_value


INT8: Final[IntegerType] = IntegerType(name="int8", bits=8, signed=True)
INT16: Final[IntegerType] = IntegerType(name="int16", bits=16, signed=True)
INT32: Final[IntegerType] = IntegerType(name="int32", bits=32, signed=True)
INT64: Final[IntegerType] = IntegerType(name="int64", bits=64, signed=True)
UINT8: Final[IntegerType] = IntegerType(name="uint8", bits=8, signed=False)
UINT16: Final[IntegerType] = IntegerType(name="uint16", bits=16, signed=False)
UINT32: Final[IntegerType] = IntegerType(name="uint32", bits=32, signed=False)
UINT64: Final[IntegerType] = IntegerType(name="uint64", bits=64, signed=False)


# =============================================================================
# РЕЗУЛЬТАТ КОНВЕРСИИ
# =============================================================================


class ConversionResult(NamedTuple):
    """
    Результат сужающей конверсии.

    При выходе за диапазон: value == 0, ok == False.
    """

    value: int
    ok: bool


def narrow(value: int, target: IntegerType) -> ConversionResult:
    """
    Сужение int в целевой тип.

    Examples:
        >>> narrow(127, INT8)
        ConversionResult(value=127, ok=True)
        >>> narrow(128, INT8)
        ConversionResult(value=0, ok=False)
    """
    if not target.contains(value):
        return ConversionResult(value=0, ok=False)
    return ConversionResult(value=value, ok=True)
