"""
Тесты для модуля Integer Parsing

Проверяет:
1. Строгий разбор base-10 / base-16
2. Отказ от "удобств" int(): знаки, пробелы, подчёркивания
3. Нестрогий разбор (None вместо исключения)
4. Рендеринг hex и деление с фиксированной точностью
"""

import decimal

import pytest

from src.core.math.integer_parsing import (
    AmountParseError,
    divide_by_power_of_ten,
    parse_decimal_int,
    parse_hex_int,
    strip_hex_prefix,
    to_decimal_string,
    to_hex,
    try_parse_int,
)


class TestStripHexPrefix:
    """Тесты для strip_hex_prefix"""

    def test_strips_lowercase_prefix(self) -> None:
        assert strip_hex_prefix("0xff") == "ff"

    def test_without_prefix_unchanged(self) -> None:
        assert strip_hex_prefix("ff") == "ff"

    def test_only_prefix(self) -> None:
        assert strip_hex_prefix("0x") == ""

    def test_uppercase_prefix_kept(self) -> None:
        """'0X' не является префиксом"""
        assert strip_hex_prefix("0Xff") == "0Xff"


class TestStrictParsing:
    """Тесты для parse_decimal_int / parse_hex_int"""

    def test_decimal(self) -> None:
        assert parse_decimal_int("1234567890123456789012345") == 1234567890123456789012345

    def test_hex(self) -> None:
        assert parse_hex_int("DeadBeef") == 0xDEADBEEF

    @pytest.mark.parametrize("text", ["", "-1", "+1", " 1", "1 ", "1_0", "0x1", "١٢"])
    def test_decimal_rejects(self, text: str) -> None:
        with pytest.raises(AmountParseError):
            parse_decimal_int(text)

    @pytest.mark.parametrize("text", ["", "-a", "g", "0x1", "a_b"])
    def test_hex_rejects(self, text: str) -> None:
        with pytest.raises(AmountParseError):
            parse_hex_int(text)

    def test_error_is_value_error(self) -> None:
        """AmountParseError — подкласс ValueError"""
        with pytest.raises(ValueError) as exc_info:
            parse_decimal_int("x")
        assert exc_info.value.text == "x"
        assert exc_info.value.base == 10


class TestTryParseInt:
    """Тесты для try_parse_int"""

    def test_valid(self) -> None:
        assert try_parse_int("10", 10) == 10
        assert try_parse_int("10", 16) == 16

    def test_invalid_returns_none(self) -> None:
        assert try_parse_int("zz", 16) is None
        assert try_parse_int("", 10) is None

    def test_unsupported_base(self) -> None:
        with pytest.raises(ValueError):
            try_parse_int("10", 8)


class TestRendering:
    """Тесты для to_hex / divide_by_power_of_ten"""

    def test_to_hex(self) -> None:
        assert to_hex(0) == "0x0"
        assert to_hex(255) == "0xff"
        assert to_hex(2**64) == "0x10000000000000000"

    def test_to_hex_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_hex(-1)

    def test_divide_exact(self) -> None:
        assert divide_by_power_of_ten(15, 1, 7) == "1.5"
        assert divide_by_power_of_ten(0, 18, 7) == "0"

    def test_divide_half_even(self) -> None:
        """Округление банковское: 0.12345665 → 0.1234566, 0.12345675 → 0.1234568"""
        assert divide_by_power_of_ten(12345665, 8, 7) == "0.1234566"
        assert divide_by_power_of_ten(12345675, 8, 7) == "0.1234568"

    def test_global_context_untouched(self) -> None:
        """Глобальный decimal-контекст не меняется"""
        before = decimal.getcontext().prec
        divide_by_power_of_ten(1, 18, 3)
        assert decimal.getcontext().prec == before


class TestIntStrLimit:
    """Тесты для чисел длиннее лимита int↔str интерпретатора (4300 цифр)"""

    def test_try_parse_long_decimal_is_none(self) -> None:
        assert try_parse_int("9" * 5000, 10) is None

    def test_try_parse_long_hex(self) -> None:
        """Для base-16 лимита нет"""
        assert try_parse_int("f" * 5000, 16) == 16**5000 - 1

    def test_parse_long_decimal_raises(self) -> None:
        with pytest.raises(AmountParseError, match="too many digits"):
            parse_decimal_int("9" * 5000)

    def test_to_decimal_string(self) -> None:
        assert to_decimal_string(0) == "0"
        assert to_decimal_string(21000) == "21000"

    def test_to_decimal_string_past_limit(self) -> None:
        value = 10**5000
        assert to_decimal_string(value) == "1" + "0" * 5000
