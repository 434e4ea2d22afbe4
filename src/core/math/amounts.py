"""
AmountConverter — Конверсия текстовых представлений суммы токена

Единственный допустимый способ преобразований между:
- hex-wei ("0x...")
- decimal-wei ("1500000000000000000")
- decimal-token ("1.5")
- decimal-gwei ("2.5")

Все вычисления выполняются на int/Decimal произвольной точности.
Текстовые формы являются проекциями целого количества wei, а не формой хранения.

ДВЕ ПОЛИТИКИ ОШИБОК:
1. Strict: некорректный текст → AmountParseError
   (decimal_from_hex_wei, wei_from_decimal_token, decimal_from_decimal_wei,
   hex_wei_from_decimal_token, hex_from_decimal, multiply_hex)
2. Tolerant: некорректный текст → нулевой default ("0" / "0x0"),
   помеченный ResultKind.ZERO_DEFAULT
   (gwei_from_hex_wei, hex_wei_from_decimal_gwei)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, NamedTuple, Optional

from src.core.math.integer_parsing import (
    HEX_PREFIX,
    AmountParseError,
    divide_by_power_of_ten,
    parse_decimal_int,
    parse_hex_int,
    strip_hex_prefix,
    to_decimal_string,
    to_hex,
    try_parse_int,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество десятичных знаков эталонного актива (ETH)
WEI_DECIMALS: Final[int] = 18

# Количество значащих цифр при делении wei → token
DISPLAY_PRECISION: Final[int] = 7

# 10^18 в виде строки: усекается справа на число дробных цифр ввода
WEI_MULTIPLIER: Final[str] = "1" + "0" * WEI_DECIMALS

ZERO_DECIMAL: Final[str] = "0"
ZERO_HEX: Final[str] = HEX_PREFIX + "0"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация конвертера.

    - decimals: количество десятичных знаков токена (18 для ETH, 6 для USDC)
    - precision: значащие цифры при делении на 10^decimals
    """

    decimals: int = WEI_DECIMALS
    precision: int = DISPLAY_PRECISION

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ValueError(f"decimals cannot be negative, got {self.decimals}")
        if self.precision < 1:
            raise ValueError(f"precision must be at least 1, got {self.precision}")

    @property
    def multiplier(self) -> str:
        return "1" + "0" * self.decimals


# =============================================================================
# RESULT KINDS (tolerant-конвертеры)
# =============================================================================


class ResultKind(str, Enum):
    """Вид результата tolerant-конверсии."""

    VALUE = "VALUE"
    ZERO_DEFAULT = "ZERO_DEFAULT"


class ConversionResult(NamedTuple):
    """Результат tolerant-конверсии.

    value всегда пригоден для отображения; kind говорит, получен ли он
    из ввода или подставлен вместо нечитаемого текста.
    """

    value: str
    kind: ResultKind

    @property
    def is_default(self) -> bool:
        return self.kind is ResultKind.ZERO_DEFAULT


# =============================================================================
# CONVERTER
# =============================================================================


class AmountConverter:
    """
    Конвертер текстовых представлений суммы токена.

    Stateless: экземпляр хранит только неизменяемый ConverterConfig,
    безопасен для одновременного использования из нескольких потоков.
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()

    # -------------------------------------------------------------------------
    # hex-wei →
    # -------------------------------------------------------------------------

    def decimal_from_hex_wei(self, hex_wei: str) -> str:
        """
        hex-wei → decimal-token.

        Args:
            hex_wei: "0x0", "0x" или "0x" + hex-цифры (префикс необязателен)

        Returns:
            Сумма в токенах, precision значащих цифр, plain-нотация

        Raises:
            AmountParseError: Если после префикса не hex-цифры

        Examples:
            >>> AmountConverter().decimal_from_hex_wei("0xde0b6b3a7640000")
            '1'
        """
        if hex_wei == ZERO_HEX:
            return ZERO_DECIMAL
        digits = strip_hex_prefix(hex_wei)
        if not digits:
            return ZERO_DECIMAL

        wei = parse_hex_int(digits)
        return divide_by_power_of_ten(wei, self.config.decimals, self.config.precision)

    def gwei_from_hex_wei_result(self, hex_wei: str) -> ConversionResult:
        """
        hex-wei → "gwei" с явным видом результата.

        Значение НЕ делится на 10^9: hex-число рендерится в base-10 как есть.
        Вызывающий код передаёт сюда gas price, уже выраженный в gwei-единицах.
        """
        if hex_wei == ZERO_HEX:
            return ConversionResult(ZERO_DECIMAL, ResultKind.VALUE)
        digits = strip_hex_prefix(hex_wei)
        if not digits:
            return ConversionResult(ZERO_DECIMAL, ResultKind.VALUE)

        value = try_parse_int(digits, 16)
        if value is None:
            logger.debug(f"Unreadable hex amount {hex_wei!r}, using {ZERO_DECIMAL!r}")
            return ConversionResult(ZERO_DECIMAL, ResultKind.ZERO_DEFAULT)
        return ConversionResult(to_decimal_string(value), ResultKind.VALUE)

    def gwei_from_hex_wei(self, hex_wei: str) -> str:
        """hex-wei → "gwei"; некорректный ввод → "0"."""
        return self.gwei_from_hex_wei_result(hex_wei).value

    # -------------------------------------------------------------------------
    # decimal-token →
    # -------------------------------------------------------------------------

    def _scaled_token_amount(self, token_amount: str) -> int:
        """
        decimal-token → целое количество минимальных единиц.

        Множитель 10^decimals усекается справа на число дробных цифр,
        точка удаляется, затем два целых перемножаются:
        "1.5" → 15 * 10^17.

        Raises:
            AmountParseError: Больше одной точки, дробных цифр больше, чем
                decimals, или не-цифры
        """
        number = token_amount
        multiplier = self.config.multiplier

        if number.count(".") > 1:
            raise AmountParseError(token_amount, 10, "more than one decimal point")

        dot_position = number.find(".")
        if dot_position != -1:
            fraction_digits = len(number) - dot_position - 1
            if fraction_digits > self.config.decimals:
                raise AmountParseError(
                    token_amount,
                    10,
                    f"{fraction_digits} fractional digits exceed "
                    f"{self.config.decimals} decimals",
                )
            multiplier = multiplier[: len(multiplier) - fraction_digits]
            number = number.replace(".", "")

        return parse_decimal_int(number) * int(multiplier)

    def wei_from_decimal_token(self, token_amount: str) -> str:
        """
        decimal-token → decimal-wei.

        Examples:
            >>> AmountConverter().wei_from_decimal_token("1.5")
            '1500000000000000000'
        """
        if not token_amount:
            return ZERO_DECIMAL
        return to_decimal_string(self._scaled_token_amount(token_amount))

    def hex_wei_from_decimal_token(self, token_amount: str) -> str:
        """
        decimal-token → hex-wei.

        Examples:
            >>> AmountConverter().hex_wei_from_decimal_token("1")
            '0xde0b6b3a7640000'
        """
        if not token_amount:
            return ZERO_HEX
        return to_hex(self._scaled_token_amount(token_amount))

    # -------------------------------------------------------------------------
    # decimal-wei →
    # -------------------------------------------------------------------------

    def decimal_from_decimal_wei(self, decimal_wei: Optional[str]) -> str:
        """
        decimal-wei → decimal-token.

        Args:
            decimal_wei: Целое в base-10, None или ""

        Returns:
            Сумма в токенах, precision значащих цифр, plain-нотация

        Raises:
            AmountParseError: Если ввод не является base-10 целым
        """
        if not decimal_wei:
            return ZERO_DECIMAL
        wei = parse_decimal_int(decimal_wei)
        return divide_by_power_of_ten(wei, self.config.decimals, self.config.precision)

    # -------------------------------------------------------------------------
    # decimal-gwei →
    # -------------------------------------------------------------------------

    def hex_wei_from_decimal_gwei_result(self, gwei_amount: str) -> ConversionResult:
        """
        decimal-gwei → hex с явным видом результата.

        Дробная часть отбрасывается (не округляется): "2.999" → "0x2".
        """
        if not gwei_amount:
            return ConversionResult(ZERO_HEX, ResultKind.VALUE)

        integer_part = gwei_amount.split(".", 1)[0]
        value = try_parse_int(integer_part, 10)
        if value is None:
            logger.debug(f"Unreadable gwei amount {gwei_amount!r}, using {ZERO_HEX!r}")
            return ConversionResult(ZERO_HEX, ResultKind.ZERO_DEFAULT)
        return ConversionResult(to_hex(value), ResultKind.VALUE)

    def hex_wei_from_decimal_gwei(self, gwei_amount: str) -> str:
        """decimal-gwei → hex; некорректный ввод → "0x0"."""
        return self.hex_wei_from_decimal_gwei_result(gwei_amount).value

    # -------------------------------------------------------------------------
    # Raw hex arithmetic
    # -------------------------------------------------------------------------

    def hex_from_decimal(self, number: str) -> str:
        """base-10 целое → hex; "" → "0x0"."""
        if not number:
            return ZERO_HEX
        return to_hex(parse_decimal_int(number))

    def multiply_hex(self, a: str, b: str) -> str:
        """
        Произведение двух hex-чисел (например, gas limit × gas price).

        Examples:
            >>> AmountConverter().multiply_hex("0x2", "0x3")
            '0x6'
        """
        left = parse_hex_int(strip_hex_prefix(a))
        right = parse_hex_int(strip_hex_prefix(b))
        return to_hex(left * right)


# =============================================================================
# MODULE-LEVEL API (ETH, 18 decimals)
# =============================================================================

_DEFAULT_CONVERTER = AmountConverter()


def decimal_from_hex_wei(hex_wei: str) -> str:
    return _DEFAULT_CONVERTER.decimal_from_hex_wei(hex_wei)


def gwei_from_hex_wei(hex_wei: str) -> str:
    return _DEFAULT_CONVERTER.gwei_from_hex_wei(hex_wei)


def gwei_from_hex_wei_result(hex_wei: str) -> ConversionResult:
    return _DEFAULT_CONVERTER.gwei_from_hex_wei_result(hex_wei)


def wei_from_decimal_token(token_amount: str) -> str:
    return _DEFAULT_CONVERTER.wei_from_decimal_token(token_amount)


def decimal_from_decimal_wei(decimal_wei: Optional[str]) -> str:
    return _DEFAULT_CONVERTER.decimal_from_decimal_wei(decimal_wei)


def hex_wei_from_decimal_token(token_amount: str) -> str:
    return _DEFAULT_CONVERTER.hex_wei_from_decimal_token(token_amount)


def hex_wei_from_decimal_gwei(gwei_amount: str) -> str:
    return _DEFAULT_CONVERTER.hex_wei_from_decimal_gwei(gwei_amount)


def hex_wei_from_decimal_gwei_result(gwei_amount: str) -> ConversionResult:
    return _DEFAULT_CONVERTER.hex_wei_from_decimal_gwei_result(gwei_amount)


def hex_from_decimal(number: str) -> str:
    return _DEFAULT_CONVERTER.hex_from_decimal(number)


def multiply_hex(a: str, b: str) -> str:
    return _DEFAULT_CONVERTER.multiply_hex(a, b)
