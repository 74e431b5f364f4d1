"""
Тесты для BigInteger — значение и операторы

Проверяет:
1. Конструирование из int, строки, BigInteger; запрет bool
2. Запросы: знак, чётность, число цифр
3. Операторы +, -, *, /, %, <<, >>, составные и унарные
4. Сравнения и структурное равенство
5. Владение: copy / take / swap / assign
6. Конверсию to_integer и ввод/вывод через потоки
7. Инварианты и сценарии из описания ядра

Python int используется как эталон.
"""

import copy
import io

import pytest

from src.core.bigint import multiplicative, representation
from src.core.bigint import (
    INT32,
    INT64,
    UINT8,
    BigInteger,
    ConversionResult,
    DigitOverflowError,
    DivideByZeroError,
    InvalidValueError,
    Ordering,
    ParseError,
    ShiftDirection,
)

SAMPLES = [
    0,
    1,
    -1,
    2,
    -3,
    10,
    9999,
    -10000,
    123456789,
    -987654321,
    10**18,
    -(10**25) + 7,
    2**100 - 1,
]


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestConstruction:
    """Тесты конструкторов"""

    @pytest.mark.parametrize("n", SAMPLES + [-(2**63), 2**64 - 1])
    def test_from_int(self, n: int) -> None:
        assert str(BigInteger(n)) == str(n)
        assert int(BigInteger(n)) == n

    def test_from_string(self) -> None:
        assert str(BigInteger("-1234567890123")) == "-1234567890123"
        assert str(BigInteger("+42")) == "42"
        assert str(BigInteger("1.5e3")) == "1500"

    def test_negative_zero_is_zero(self) -> None:
        zero = BigInteger("-0")
        assert zero.is_zero()
        assert not zero.is_negative()
        assert str(zero) == "0"

    def test_copy_constructor_is_independent(self) -> None:
        a = BigInteger(5)
        b = BigInteger(a)
        b += 1
        assert a == 5
        assert b == 6

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="bool"):
            BigInteger(True)

    def test_unsupported_type_rejected(self) -> None:
        with pytest.raises(TypeError):
            BigInteger(1.5)  # type: ignore[arg-type]

    def test_invalid_literal(self) -> None:
        with pytest.raises(ParseError):
            BigInteger("12x")


# =============================================================================
# ЗАПРОСЫ
# =============================================================================


class TestQueries:
    """Тесты is_* / digits / opposite / absolute"""

    def test_sign_queries(self) -> None:
        assert BigInteger(5).is_positive()
        assert BigInteger(-5).is_negative()
        assert not BigInteger(0).is_positive()
        assert not BigInteger(0).is_negative()
        assert BigInteger(0).is_zero()

    def test_parity(self) -> None:
        assert BigInteger(10001).is_odd()
        assert BigInteger(-10002).is_even()
        assert BigInteger(0).is_even()

    def test_digits(self) -> None:
        assert BigInteger(0).digits() == 1
        assert BigInteger(-12345).digits() == 5
        assert BigInteger.max_digits() == 4_294_967_292

    def test_opposite_and_absolute_do_not_mutate(self) -> None:
        a = BigInteger(-7)
        assert a.opposite() == 7
        assert a.absolute() == 7
        assert a == -7
        assert BigInteger(0).opposite() == 0

    def test_bool(self) -> None:
        assert not BigInteger(0)
        assert BigInteger(-1)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Тесты арифметических операторов"""

    def test_add_sub_mul_match_int(self) -> None:
        for a in SAMPLES:
            for b in SAMPLES:
                assert int(BigInteger(a) + BigInteger(b)) == a + b
                assert int(BigInteger(a) - BigInteger(b)) == a - b
                assert int(BigInteger(a) * BigInteger(b)) == a * b

    def test_division_identity(self) -> None:
        """(a / b) * b + (a % b) == a"""
        for a in SAMPLES:
            for b in SAMPLES:
                if b == 0:
                    continue
                x, y = BigInteger(a), BigInteger(b)
                assert (x / y) * y + (x % y) == x

    def test_division_truncates(self) -> None:
        assert BigInteger(-7) / 2 == -3
        assert BigInteger(-7) % 2 == -1
        assert BigInteger(7) // -2 == -3

    def test_divmod(self) -> None:
        quotient, remainder = divmod(BigInteger(100), BigInteger(7))
        assert quotient == 14
        assert remainder == 2

    @pytest.mark.parametrize("a, b", [(-100, 7), (100, -7), (-100, -7), (3, 10**20)])
    def test_divmod_signs(self, a: int, b: int) -> None:
        """Частное усечено, остаток со знаком делимого"""
        quotient, remainder = divmod(BigInteger(a), BigInteger(b))
        assert quotient == BigInteger(a) / b
        assert remainder == BigInteger(a) % b
        assert quotient * b + remainder == a

    def test_divmod_divides_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """divmod выполняет длинное деление один раз"""
        calls = []
        original = multiplicative.long_divide

        def counting_long_divide(dividend: list[int], divisor: list[int]) -> list[int]:
            calls.append(len(dividend))
            return original(dividend, divisor)

        monkeypatch.setattr(multiplicative, "long_divide", counting_long_divide)
        a = 10**30 + 12345
        quotient, remainder = divmod(BigInteger(a), BigInteger(12345678))
        assert int(quotient) == a // 12345678
        assert int(remainder) == a % 12345678
        assert len(calls) == 1

    def test_divmod_by_zero(self) -> None:
        with pytest.raises(DivideByZeroError):
            divmod(BigInteger(5), 0)

    def test_multiply_digit_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Переполнение числа цифр проверяется до умножения, операнды не меняются"""
        monkeypatch.setattr(representation, "MAX_DIGITS", 10)
        a = BigInteger(1234567)
        with pytest.raises(DigitOverflowError):
            a * BigInteger(7654321)
        with pytest.raises(DigitOverflowError):
            a *= 7654321
        assert a == 1234567

    def test_cancellation(self) -> None:
        for a in SAMPLES:
            x = BigInteger(a)
            assert (x + (-x)).is_zero()
            assert (x - x) == 0

    def test_int_operands(self) -> None:
        assert BigInteger(5) + 3 == 8
        assert 3 + BigInteger(5) == 8
        assert 10 - BigInteger(3) == 7
        assert 6 * BigInteger(7) == 42
        assert 100 / BigInteger(7) == 14
        assert 100 % BigInteger(7) == 2

    def test_string_operand(self) -> None:
        assert BigInteger(1) + "1e20" == 10**20 + 1

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            BigInteger(1) + 1.5  # type: ignore[operator]

    def test_unary(self) -> None:
        a = BigInteger(-9)
        assert -a == 9
        assert +a == -9
        assert abs(a) == 9
        assert +a is not a


class TestCompoundOperators:
    """Тесты составных операторов (изменение на месте)"""

    def test_in_place_mutation(self) -> None:
        a = BigInteger(10)
        alias = a
        a += 5
        a *= 3
        a -= 1
        a /= 4
        a %= 7
        assert alias is a
        assert a == ((10 + 5) * 3 - 1) // 4 % 7

    def test_shift_operators(self) -> None:
        a = BigInteger(3)
        a <<= 10
        assert a == 3 * 2**10
        a >>= 4
        assert a == 3 * 2**6

    def test_failed_division_leaves_value(self) -> None:
        """Ошибка не изменяет получателя"""
        a = BigInteger(12345)
        with pytest.raises(DivideByZeroError):
            a /= 0
        assert a == 12345
        with pytest.raises(DivideByZeroError):
            a %= BigInteger(0)
        assert a == 12345


class TestIncrementDecrement:
    """Тесты ++ / --"""

    def test_pre_increment(self) -> None:
        a = BigInteger(9999)
        assert a.increment() is a
        assert a == 10000

    def test_post_increment(self) -> None:
        a = BigInteger(-1)
        previous = a.post_increment()
        assert previous == -1
        assert a == 0
        assert not a.is_negative()

    def test_decrement_through_zero(self) -> None:
        a = BigInteger(1)
        a.decrement()
        a.decrement()
        assert a == -1
        assert a.post_decrement() == -1
        assert a == -2

    def test_negative_increment_borrows(self) -> None:
        a = BigInteger(-10000)
        a.increment()
        assert a == -9999


class TestShifts:
    """Тесты << / >> и десятичного сдвига"""

    @pytest.mark.parametrize("a", [1, -3, 12345, -(10**20)])
    @pytest.mark.parametrize("n", [0, 1, 7, 33, 64])
    def test_bit_shift_via_power_of_two(self, a: int, n: int) -> None:
        x = BigInteger(a)
        two_n = BigInteger(2).power(n)
        assert x << n == x * two_n
        assert x >> n == x / two_n

    def test_negative_shift_rejected(self) -> None:
        with pytest.raises(InvalidValueError):
            BigInteger(1) << -1
        with pytest.raises(InvalidValueError):
            BigInteger(1) >> BigInteger(-1)

    def test_shift10_paths_agree(self) -> None:
        """Групповой и строковый пути дают одинаковый результат"""
        fast = BigInteger(-123456789).shift10(8, ShiftDirection.LEFT)
        slow = BigInteger(-123456789).shift10(3, ShiftDirection.LEFT)
        slow.shift10(5, ShiftDirection.LEFT)
        assert fast == slow
        assert fast == -123456789 * 10**8

    def test_shift10_right_to_zero_unsigned(self) -> None:
        a = BigInteger(-123).shift10(5, ShiftDirection.RIGHT)
        assert a.is_zero()
        assert not a.is_negative()

    def test_shift10_zero_noop(self) -> None:
        assert BigInteger(0).shift10(9, ShiftDirection.LEFT) == 0


class TestPower:
    """Тесты power"""

    def test_identities(self) -> None:
        for a in SAMPLES:
            if a == 0:
                continue
            x = BigInteger(a)
            assert x.power(0) == 1
            assert x.power(1) == x

    def test_matches_repeated_multiplication(self) -> None:
        for a in [2, -3, 10, -100, 9999, 12345]:
            x = BigInteger(a)
            product = BigInteger(1)
            for n in range(0, 10):
                assert x.power(n) == product
                product *= x

    def test_does_not_mutate(self) -> None:
        x = BigInteger(3)
        x.power(5)
        assert x == 3

    def test_overflow(self) -> None:
        with pytest.raises(DigitOverflowError):
            BigInteger(10).power(BigInteger("5e9"))


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestComparison:
    """Тесты compare и операторов сравнения"""

    def test_compare_matches_int(self) -> None:
        for a in SAMPLES:
            for b in SAMPLES:
                x, y = BigInteger(a), BigInteger(b)
                expected = (a > b) - (a < b)
                assert x.compare(y) == expected
                assert (x == y) == (x.compare(y) == Ordering.EQUAL)
                assert (x != y) == (a != b)
                assert (x < y) == (a < b)
                assert (x > y) == (a > b)
                assert (x <= y) == (a <= b)
                assert (x >= y) == (a >= b)

    def test_antisymmetry_and_transitivity(self) -> None:
        values = sorted(SAMPLES)
        big = [BigInteger(v) for v in values]
        for i in range(len(big) - 1):
            assert big[i].compare(big[i + 1]) == Ordering.LESS
            assert big[i + 1].compare(big[i]) == Ordering.GREATER
        assert big[0] < big[-1]

    def test_sorting(self) -> None:
        big = sorted(BigInteger(v) for v in SAMPLES)
        assert [int(b) for b in big] == sorted(SAMPLES)

    def test_compare_with_int(self) -> None:
        assert BigInteger(10**30) > 10**29
        assert BigInteger(-1) < 0

    def test_not_hashable(self) -> None:
        with pytest.raises(TypeError):
            hash(BigInteger(1))

    def test_eq_with_other_type(self) -> None:
        assert BigInteger(1) != 1.0
        assert not (BigInteger(1) == None)  # noqa: E711

    def test_eq_with_invalid_literal(self) -> None:
        """Некорректная строка не равна значению и не вызывает ParseError"""
        assert not (BigInteger(1) == "abc")
        assert BigInteger(1) != "abc"
        assert BigInteger(1) in ["abc", 1]
        assert BigInteger(-5) == "-5"

    def test_arithmetic_with_invalid_literal(self) -> None:
        with pytest.raises(ParseError):
            BigInteger(1) + "abc"


# =============================================================================
# ВЛАДЕНИЕ
# =============================================================================


class TestOwnership:
    """Тесты copy / take / swap / assign"""

    def test_copy_is_deep(self) -> None:
        a = BigInteger(10**20)
        for b in (a.copy(), copy.copy(a), copy.deepcopy(a)):
            b += 1
            assert a == 10**20

    def test_take_resets_source(self) -> None:
        a = BigInteger(-12345678901)
        b = a.take()
        assert b == -12345678901
        assert a.is_zero()
        a += 5
        assert a == 5
        assert b == -12345678901

    def test_swap(self) -> None:
        a = BigInteger(1)
        b = BigInteger(-2)
        a.swap(b)
        assert a == -2
        assert b == 1

    def test_assign(self) -> None:
        a = BigInteger(1)
        a.assign("123456789012345")
        assert a == 123456789012345
        a.assign(-7)
        assert a == -7

    def test_failed_assign_keeps_value(self) -> None:
        a = BigInteger(1)
        with pytest.raises(ParseError):
            a.assign("1.25e1")
        assert a == 1

    def test_reverse(self) -> None:
        a = BigInteger(5)
        a.reverse()
        assert a == -5
        zero = BigInteger(0)
        zero.reverse()
        assert not zero.is_negative()


# =============================================================================
# КОНВЕРСИЯ И ВВОД/ВЫВОД
# =============================================================================


class TestConversion:
    """Тесты to_integer / to_string"""

    def test_to_integer_in_range(self) -> None:
        assert BigInteger(2147483647).to_integer(INT32) == ConversionResult(2147483647, True)
        assert BigInteger(-(2**63)).to_integer() == ConversionResult(-(2**63), True)

    def test_to_integer_out_of_range(self) -> None:
        """Сужение за пределы типа — не ошибка, а флаг"""
        assert BigInteger(2147483648).to_integer(INT32) == ConversionResult(0, False)
        assert BigInteger(-1).to_integer(UINT8) == ConversionResult(0, False)
        assert BigInteger(2**63).to_integer(INT64).ok is False

    def test_to_string_round_trip(self) -> None:
        for a in SAMPLES:
            text = BigInteger(a).to_string()
            assert BigInteger(text).to_string() == text

    def test_repr(self) -> None:
        assert repr(BigInteger(-12)) == "BigInteger('-12')"


class TestStreams:
    """Тесты print / write / read"""

    def test_print_with_separator(self) -> None:
        out = io.StringIO()
        b = BigInteger("123")
        for _ in range(3):
            b.print(" ", file=out)
        assert out.getvalue() == "123 123 123 "

    def test_print_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        BigInteger(-100020003).print("\n")
        assert capsys.readouterr().out == "-100020003\n"

    def test_write(self) -> None:
        out = io.StringIO()
        BigInteger(10**8).write(out)
        assert out.getvalue() == "100000000"

    def test_read_tokens(self) -> None:
        stream = io.StringIO("  999999999999\n-42 1e3")
        assert BigInteger.read(stream) == 999999999999
        assert BigInteger.read(stream) == -42
        assert BigInteger.read(stream) == 1000

    def test_read_empty(self) -> None:
        with pytest.raises(ParseError):
            BigInteger.read(io.StringIO("   "))

    def test_read_invalid(self) -> None:
        with pytest.raises(ParseError):
            BigInteger.read(io.StringIO("12abc 5"))


# =============================================================================
# СЦЕНАРИИ
# =============================================================================


class TestScenarios:
    """Конкретные сценарии"""

    def test_addition(self) -> None:
        assert (BigInteger("123") + BigInteger("456")).to_string() == "579"

    def test_large_multiplication(self) -> None:
        result = BigInteger("1000000000000000000") * BigInteger("2")
        assert result.to_string() == "2000000000000000000"

    def test_division_and_modulus(self) -> None:
        assert (BigInteger("7") / BigInteger("2")).to_string() == "3"
        assert (BigInteger("7") % BigInteger("2")).to_string() == "1"

    def test_negative_power(self) -> None:
        assert BigInteger("-5").power(BigInteger("3")).to_string() == "-125"

    def test_power_of_ten_division(self) -> None:
        assert (BigInteger("1000") / BigInteger("10")).to_string() == "100"

    def test_failures(self) -> None:
        with pytest.raises(DivideByZeroError):
            BigInteger("0") / BigInteger("0")
        with pytest.raises(InvalidValueError):
            BigInteger("0").power(BigInteger("-1"))

    def test_readme_example(self) -> None:
        b = BigInteger(0)
        b.assign("999999999999")
        b += BigInteger("1111111111")
        assert str(b) == "1001111111110"
        if b.is_positive():
            b.reverse()
        assert str(b / 10000) == "-100111111"
