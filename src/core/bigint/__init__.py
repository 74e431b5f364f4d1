"""
BigInteger — арифметическое ядро произвольной точности

Знаковые целые в представлении base-10000 с точными +, -, *, /, %,
степенью, десятичными и битовыми сдвигами, сравнением и разбором/выводом
десятичного текста.
"""

# Errors
from src.core.bigint.errors import (
    BigIntegerError,
    DigitOverflowError,
    DivideByZeroError,
    InvalidValueError,
    ParseError,
)

# Representation constants
from src.core.bigint.representation import (
    GROUP_BASE,
    GROUP_WIDTH,
    MAX_DIGITS,
    MAX_GROUPS,
)

# Comparator
from src.core.bigint.comparison import Ordering

# Parser / Formatter
from src.core.bigint.parsing import NumberType, classify_literal

# Shift
from src.core.bigint.shifting import ShiftDirection

# Conversion
from src.core.bigint.conversion import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    ConversionResult,
    IntegerType,
)

# Value type
from src.core.bigint.big_integer import BigInteger

__all__ = [
    # Errors
    "BigIntegerError",
    "DigitOverflowError",
    "DivideByZeroError",
    "InvalidValueError",
    "ParseError",
    # Representation — Constants
    "GROUP_BASE",
    "GROUP_WIDTH",
    "MAX_DIGITS",
    "MAX_GROUPS",
    # Comparator
    "Ordering",
    # Parser
    "NumberType",
    "classify_literal",
    # Shift
    "ShiftDirection",
    # Conversion — Types
    "IntegerType",
    "ConversionResult",
    # Conversion — Targets
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    # Value type
    "BigInteger",
]
