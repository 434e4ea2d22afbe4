"""Буфер обмена: копирование и вставка текста через pyperclip."""

import logging

import pyperclip

logger = logging.getLogger(__name__)


def save_text_to_clipboard(text_to_copy: str) -> None:
    """
    Копирование текста в системный буфер обмена.

    Raises:
        pyperclip.PyperclipException: Если в системе нет механизма буфера обмена
    """
    pyperclip.copy(text_to_copy)
    logger.info("Text has been copied")


def get_text_from_clipboard() -> str:
    """
    Текст из системного буфера обмена.

    Returns:
        Содержимое буфера; "" если буфер пуст, содержит не текст
        или недоступен
    """
    try:
        paste_data = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        logger.warning(f"Clipboard is not available: {e}")
        return ""

    if not isinstance(paste_data, str):
        return ""
    return paste_data
