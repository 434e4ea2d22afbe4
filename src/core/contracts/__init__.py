"""
JSON Validation Module

Модуль для проверки JSON-текстов внешних сервисов кошелька.
"""

from .validators import (
    INSUFFICIENT_ASSET_LIQUIDITY,
    ContractValidator,
    SchemaLoader,
    SwapErrorValidator,
    is_json_valid,
    is_swap_liquidity_error_reason,
    validate_swap_error,
)

__all__ = [
    # Constants
    "INSUFFICIENT_ASSET_LIQUIDITY",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SwapErrorValidator",
    # Functions
    "is_json_valid",
    "is_swap_liquidity_error_reason",
    "validate_swap_error",
]
