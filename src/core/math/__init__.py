"""
Core math modules

Конверсии сумм токенов на целых произвольной точности.
"""

# Integer Parsing
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

# Amounts
from src.core.math.amounts import (
    DISPLAY_PRECISION,
    WEI_DECIMALS,
    WEI_MULTIPLIER,
    ZERO_DECIMAL,
    ZERO_HEX,
    AmountConverter,
    ConversionResult,
    ConverterConfig,
    ResultKind,
    decimal_from_decimal_wei,
    decimal_from_hex_wei,
    gwei_from_hex_wei,
    gwei_from_hex_wei_result,
    hex_from_decimal,
    hex_wei_from_decimal_gwei,
    hex_wei_from_decimal_gwei_result,
    hex_wei_from_decimal_token,
    multiply_hex,
    wei_from_decimal_token,
)

__all__ = [
    # Integer Parsing — Constants
    "HEX_PREFIX",
    # Integer Parsing — Exceptions
    "AmountParseError",
    # Integer Parsing — Functions
    "divide_by_power_of_ten",
    "parse_decimal_int",
    "parse_hex_int",
    "strip_hex_prefix",
    "to_decimal_string",
    "to_hex",
    "try_parse_int",
    # Amounts — Constants
    "DISPLAY_PRECISION",
    "WEI_DECIMALS",
    "WEI_MULTIPLIER",
    "ZERO_DECIMAL",
    "ZERO_HEX",
    # Amounts — Types
    "AmountConverter",
    "ConversionResult",
    "ConverterConfig",
    "ResultKind",
    # Amounts — Functions
    "decimal_from_decimal_wei",
    "decimal_from_hex_wei",
    "gwei_from_hex_wei",
    "gwei_from_hex_wei_result",
    "hex_from_decimal",
    "hex_wei_from_decimal_gwei",
    "hex_wei_from_decimal_gwei_result",
    "hex_wei_from_decimal_token",
    "multiply_hex",
    "wei_from_decimal_token",
]
