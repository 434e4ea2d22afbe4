"""
Тесты для вспомогательных функций кошелька

Проверяет:
1. Буфер обмена (pyperclip подменяется через monkeypatch)
2. Recovery phrase: разбиение и сборка
3. Маскирование адреса
4. Проверку сложности пароля
5. Варианты проскальзывания swap
"""

import logging

import pyperclip
import pytest

from src.wallet import (
    SLIPPAGE_TOLERANCE_OPTIONS,
    get_recovery_phrase_as_list,
    get_recovery_phrase_from_list,
    get_slippage_tolerance_list,
    get_text_from_clipboard,
    is_password_valid,
    save_text_to_clipboard,
    strip_account_address,
)


# =============================================================================
# CLIPBOARD
# =============================================================================


@pytest.fixture
def fake_clipboard(monkeypatch):
    """In-memory буфер обмена вместо системного."""
    storage = {"text": ""}
    monkeypatch.setattr(pyperclip, "copy", lambda text: storage.__setitem__("text", text))
    monkeypatch.setattr(pyperclip, "paste", lambda: storage["text"])
    return storage


class TestClipboard:
    """Тесты буфера обмена"""

    def test_copy_then_paste(self, fake_clipboard) -> None:
        save_text_to_clipboard("0x3535353535353535353535353535353535353535")
        assert fake_clipboard["text"] == "0x3535353535353535353535353535353535353535"
        assert get_text_from_clipboard() == "0x3535353535353535353535353535353535353535"

    def test_copy_logged(self, fake_clipboard, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="src.wallet.clipboard"):
            save_text_to_clipboard("abc")
        assert "Text has been copied" in caplog.text

    def test_empty_clipboard(self, fake_clipboard) -> None:
        assert get_text_from_clipboard() == ""

    def test_unavailable_clipboard_returns_empty(self, monkeypatch) -> None:
        def no_clipboard():
            raise pyperclip.PyperclipException("no clipboard mechanism")

        monkeypatch.setattr(pyperclip, "paste", no_clipboard)
        assert get_text_from_clipboard() == ""

    def test_unavailable_clipboard_on_copy_raises(self, monkeypatch) -> None:
        def no_clipboard(text):
            raise pyperclip.PyperclipException("no clipboard mechanism")

        monkeypatch.setattr(pyperclip, "copy", no_clipboard)
        with pytest.raises(pyperclip.PyperclipException):
            save_text_to_clipboard("abc")

    def test_non_text_content(self, monkeypatch) -> None:
        monkeypatch.setattr(pyperclip, "paste", lambda: None)
        assert get_text_from_clipboard() == ""


# =============================================================================
# RECOVERY PHRASE
# =============================================================================


class TestRecoveryPhrase:
    """Тесты recovery phrase"""

    def test_split(self) -> None:
        assert get_recovery_phrase_as_list("apple banana cherry") == ["apple", "banana", "cherry"]

    def test_trailing_spaces_dropped(self) -> None:
        assert get_recovery_phrase_as_list("apple banana  ") == ["apple", "banana"]

    def test_inner_empty_items_kept(self) -> None:
        assert get_recovery_phrase_as_list("apple  banana") == ["apple", "", "banana"]

    def test_single_word(self) -> None:
        assert get_recovery_phrase_as_list("apple") == ["apple"]
        assert get_recovery_phrase_as_list("") == [""]

    def test_join(self) -> None:
        assert get_recovery_phrase_from_list(["apple", "banana", "cherry"]) == "apple banana cherry"

    def test_join_trims(self) -> None:
        assert get_recovery_phrase_from_list(["", "apple", ""]) == "apple"
        assert get_recovery_phrase_from_list([]) == ""

    def test_roundtrip(self) -> None:
        phrase = "abandon ability able about above absent absorb abstract absurd abuse access accident"
        assert get_recovery_phrase_from_list(get_recovery_phrase_as_list(phrase)) == phrase


# =============================================================================
# ADDRESS
# =============================================================================


class TestStripAccountAddress:
    """Тесты маскирования адреса"""

    def test_full_address(self) -> None:
        address = "0x3535353535353535353535353535353535351234"
        assert strip_account_address(address) == "0x3535***51234"

    def test_short_address(self) -> None:
        assert strip_account_address("0x1234") == ""
        assert strip_account_address("") == ""

    def test_seven_characters(self) -> None:
        """Первые 6 и последние 5 символов могут перекрываться"""
        assert strip_account_address("0x12345") == "0x1234***12345"


# =============================================================================
# PASSWORD
# =============================================================================


class TestPassword:
    """Тесты проверки пароля"""

    @pytest.mark.parametrize("password", ["abc123!x", "Passw0rd#", "a1-bcdef", "x9(yyyyy"])
    def test_valid(self, password: str) -> None:
        assert is_password_valid(password) is True

    @pytest.mark.parametrize(
        "password",
        [
            "abc12!",  # 6 символов
            "abcdefg!",  # без цифры
            "1234567!",  # без буквы
            "abc12345",  # без спецсимвола
            "abc 123!",  # пробел
            "abc123!x\n",  # перевод строки
        ],
    )
    def test_invalid(self, password: str) -> None:
        assert is_password_valid(password) is False


# =============================================================================
# SWAP
# =============================================================================


class TestSlippageTolerance:
    """Тесты вариантов проскальзывания"""

    def test_options(self) -> None:
        assert get_slippage_tolerance_list() == ["0.5%", "1%", "1.5%", "3%", "6%"]

    def test_returns_copy(self) -> None:
        options = get_slippage_tolerance_list()
        options.append("50%")
        assert len(SLIPPAGE_TOLERANCE_OPTIONS) == 5
