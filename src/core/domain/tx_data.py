"""
TxData — Модель неподписанной Ethereum-транзакции

Immutable Pydantic модель с hex-полями (как их ожидает keyring) и
разбор hex-строки calldata в байты.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.integer_parsing import (
    HEX_PREFIX,
    AmountParseError,
    strip_hex_prefix,
    try_parse_int,
)


# =============================================================================
# CALLDATA
# =============================================================================


def hex_str_to_number_array(value: str) -> bytes:
    """
    Hex-строка calldata → байты.

    Args:
        value: "0x" + чётное число hex-цифр (префикс необязателен)

    Returns:
        Байты; b"" для пустой строки

    Raises:
        AmountParseError: Нечётная длина или не-hex символы

    Examples:
        >>> hex_str_to_number_array("0xa9059cbb")
        b'\\xa9\\x05\\x9c\\xbb'
        >>> hex_str_to_number_array("0x")
        b''
    """
    digits = strip_hex_prefix(value)
    if not digits:
        return b""
    if len(digits) % 2 != 0:
        raise AmountParseError(value, 16, "odd number of hex digits")
    # bytes.fromhex пропускает пробелы, поэтому сначала проверяем символы
    if try_parse_int(digits, 16) is None:
        raise AmountParseError(value, 16)
    return bytes.fromhex(digits)


# =============================================================================
# MODEL
# =============================================================================


class TxData(BaseModel):
    """
    Данные транзакции для подписи.

    Числовые поля: hex-строки с префиксом 0x ("" для полей, которые
    заполнит контроллер: nonce, gas).
    """

    nonce: str = Field("", description="Nonce (hex) или '' для автоподстановки")
    gas_price: str = Field("", description="Gas price в wei (hex)")
    gas_limit: str = Field("", description="Gas limit (hex)")
    to: str = Field(..., description="Адрес получателя")
    value: str = Field("0x0", description="Сумма в wei (hex)")
    data: bytes = Field(b"", description="Calldata")

    model_config = {"frozen": True}

    @field_validator("nonce", "gas_price", "gas_limit", "value")
    @classmethod
    def validate_hex_quantity(cls, v: str) -> str:
        """Пустая строка или 0x-hex."""
        if v and not v.startswith(HEX_PREFIX):
            raise ValueError(f"Hex quantity must start with {HEX_PREFIX!r}: {v!r}")
        return v


def get_tx_data(
    nonce: str,
    gas_price: str,
    gas_limit: str,
    to: str,
    value: str,
    data: bytes,
) -> TxData:
    """Сборка TxData из позиционных полей (порядок как у keyring API)."""
    return TxData(
        nonce=nonce,
        gas_price=gas_price,
        gas_limit=gas_limit,
        to=to,
        value=value,
        data=data,
    )
