"""
Integer Parsing — Strict Big-Integer Primitives

Модуль обеспечивает строгий разбор текстовых представлений целых чисел
произвольной точности (wei, gwei, hex-wei):
- Строгий разбор base-10 / base-16 без "удобств" встроенного int()
- Нестрогий (tolerant) разбор, возвращающий None вместо исключения
- Рендеринг в hex с префиксом 0x
- Деление на 10^decimals в decimal-контексте фиксированной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. float никогда не используется, только int и decimal.Decimal
2. Знаки, пробелы и подчёркивания в числе считаются ошибкой формата
3. Hex всегда lowercase, с префиксом 0x, без ведущих нулей ("0x0" для нуля)
4. Decimal-результаты рендерятся без экспоненты
"""

import re
from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import Final, Optional

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

HEX_PREFIX: Final[str] = "0x"

# Только ASCII-цифры: int() принимает "+1", " 1", "1_0" и юникодные цифры
_DECIMAL_DIGITS: Final[re.Pattern] = re.compile(r"[0-9]+")
_HEX_DIGITS: Final[re.Pattern] = re.compile(r"[0-9a-fA-F]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AmountParseError(ValueError):
    """
    Текст не является корректной записью неотрицательного целого числа.

    Поднимается strict-конвертерами. Tolerant-конвертеры не поднимают его,
    а возвращают нулевое значение по умолчанию.
    """

    def __init__(self, text: str, base: int, reason: str = "") -> None:
        self.text = text
        self.base = base
        message = f"Cannot parse {text!r} as a base-{base} integer"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# =============================================================================
# PREFIX
# =============================================================================


def strip_hex_prefix(value: str) -> str:
    """
    Удаление префикса "0x" (только lowercase, как его выдают RPC-ноды).

    Examples:
        >>> strip_hex_prefix("0x1f")
        '1f'
        >>> strip_hex_prefix("1f")
        '1f'
        >>> strip_hex_prefix("0x")
        ''
    """
    if value.startswith(HEX_PREFIX):
        return value[len(HEX_PREFIX):]
    return value


# =============================================================================
# STRICT PARSING
# =============================================================================


def parse_decimal_int(digits: str) -> int:
    """
    Строгий разбор base-10 целого.

    Args:
        digits: Строка из ASCII-цифр 0-9

    Returns:
        Целое произвольной точности

    Raises:
        AmountParseError: Если строка пустая, содержит что-то кроме цифр
            или длиннее лимита int↔str интерпретатора (sys.get_int_max_str_digits)
    """
    if not _DECIMAL_DIGITS.fullmatch(digits):
        raise AmountParseError(digits, 10)
    try:
        return int(digits, 10)
    except ValueError:
        raise AmountParseError(digits, 10, "too many digits") from None


def parse_hex_int(digits: str) -> int:
    """
    Строгий разбор base-16 целого (без префикса).

    Args:
        digits: Строка из hex-цифр, регистр не важен

    Returns:
        Целое произвольной точности

    Raises:
        AmountParseError: Если строка пустая или содержит не-hex символы
    """
    if not _HEX_DIGITS.fullmatch(digits):
        raise AmountParseError(digits, 16)
    return int(digits, 16)


# =============================================================================
# TOLERANT PARSING
# =============================================================================


def try_parse_int(digits: str, base: int) -> Optional[int]:
    """
    Нестрогий разбор: None вместо исключения.

    Используется tolerant-конвертерами, которые явно различают
    "значение" и "нулевой default" через ResultKind.

    Args:
        digits: Строка цифр
        base: 10 или 16

    Returns:
        Целое или None, если строка не является числом в этой системе
        или превышает лимит int↔str интерпретатора
    """
    if base == 10:
        pattern = _DECIMAL_DIGITS
    elif base == 16:
        pattern = _HEX_DIGITS
    else:
        raise ValueError(f"Unsupported base: {base}")

    if not pattern.fullmatch(digits):
        return None
    try:
        return int(digits, base)
    except ValueError:
        return None


# =============================================================================
# RENDERING
# =============================================================================


def to_hex(value: int) -> str:
    """
    Рендеринг неотрицательного целого в hex.

    Examples:
        >>> to_hex(0)
        '0x0'
        >>> to_hex(255)
        '0xff'
    """
    if value < 0:
        raise ValueError(f"Amount cannot be negative: {value}")
    return HEX_PREFIX + format(value, "x")


def to_decimal_string(value: int) -> str:
    """
    Рендеринг целого в base-10 без лимита int↔str.

    str(int) поднимает ValueError для чисел длиннее 4300 цифр;
    Decimal(int) конвертирует без промежуточной строки.

    Examples:
        >>> to_decimal_string(21000)
        '21000'
    """
    return format(Decimal(value), "f")


def divide_by_power_of_ten(value: int, exponent: int, precision: int) -> str:
    """
    value / 10^exponent в decimal-контексте с precision значащими цифрами.

    Округление ROUND_HALF_EVEN (как у 32-битного decimal-контекста при
    precision=7). Используется локальный Context, глобальный decimal-контекст
    потока не затрагивается.

    Args:
        value: Делимое (целое, wei)
        exponent: Степень десяти делителя (decimals токена)
        precision: Количество значащих цифр результата

    Returns:
        Результат в plain-нотации (без экспоненты)

    Examples:
        >>> divide_by_power_of_ten(1500000000000000000, 18, 7)
        '1.5'
        >>> divide_by_power_of_ten(1, 18, 7)
        '0.000000000000000001'
    """
    context = Context(prec=precision, rounding=ROUND_HALF_EVEN)
    result = context.divide(Decimal(value), Decimal(10**exponent))
    return format(result, "f")
