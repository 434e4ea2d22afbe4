"""
Accounts — текстовые утилиты аккаунтов

- Разбиение и сборка recovery phrase
- Маскирование адреса для отображения
- Проверка сложности пароля кошелька
"""

import re
from typing import Final

# =============================================================================
# PASSWORD
# =============================================================================

PASSWORD_PATTERN: Final[re.Pattern] = re.compile(
    "^"
    "(?=.*[0-9])"  # хотя бы 1 цифра
    "(?=.*[a-zA-Z])"  # хотя бы 1 буква
    "(?=.*[$&+,:;=?@#|'<>.^*()%!-])"  # хотя бы 1 спецсимвол
    r"(?=\S+$)"  # без пробелов
    ".{7,}"  # минимум 7 символов
    "$"
)


def is_password_valid(password: str) -> bool:
    """
    Проверка пароля кошелька.

    Examples:
        >>> is_password_valid("abc123!x")
        True
        >>> is_password_valid("abcdefgh")
        False
    """
    return PASSWORD_PATTERN.fullmatch(password) is not None


# =============================================================================
# RECOVERY PHRASE
# =============================================================================


def get_recovery_phrase_as_list(recovery_phrase: str) -> list[str]:
    """
    Recovery phrase → список слов.

    Разбиение по одиночному пробелу; пустые элементы в конце отбрасываются,
    пустые элементы в середине и в начале сохраняются.

    Examples:
        >>> get_recovery_phrase_as_list("apple banana cherry ")
        ['apple', 'banana', 'cherry']
    """
    if " " not in recovery_phrase:
        return [recovery_phrase]

    words = recovery_phrase.split(" ")
    while words and words[-1] == "":
        words.pop()
    return words


def get_recovery_phrase_from_list(recovery_phrases: list[str]) -> str:
    """Список слов → recovery phrase через пробел, без краевых пробелов."""
    return " ".join(recovery_phrases).strip()


# =============================================================================
# ADDRESS
# =============================================================================


def strip_account_address(address: str) -> str:
    """
    Маскирование адреса: первые 6 символов, "***", последние 5.

    Returns:
        Маскированный адрес; "" для адреса длиной 6 символов и меньше

    Examples:
        >>> strip_account_address("0x1234567890abcdef")
        '0x1234***bcdef'
    """
    if len(address) <= 6:
        return ""
    return address[:6] + "***" + address[-5:]
