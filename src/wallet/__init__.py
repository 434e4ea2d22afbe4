"""Wallet — вспомогательные функции экрана кошелька.

- Буфер обмена (копирование адресов и фраз)
- Recovery phrase, маскирование адреса, проверка пароля
- Варианты допустимого проскальзывания swap
"""

from .accounts import (
    PASSWORD_PATTERN,
    get_recovery_phrase_as_list,
    get_recovery_phrase_from_list,
    is_password_valid,
    strip_account_address,
)
from .clipboard import get_text_from_clipboard, save_text_to_clipboard
from .swap import SLIPPAGE_TOLERANCE_OPTIONS, get_slippage_tolerance_list

__all__ = [
    "PASSWORD_PATTERN",
    "get_recovery_phrase_as_list",
    "get_recovery_phrase_from_list",
    "is_password_valid",
    "strip_account_address",
    "get_text_from_clipboard",
    "save_text_to_clipboard",
    "SLIPPAGE_TOLERANCE_OPTIONS",
    "get_slippage_tolerance_list",
]
