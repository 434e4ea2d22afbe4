"""Swap — варианты допустимого проскальзывания."""

from typing import Final

# Порядок соответствует порядку в выпадающем списке
SLIPPAGE_TOLERANCE_OPTIONS: Final[tuple[str, ...]] = ("0.5%", "1%", "1.5%", "3%", "6%")


def get_slippage_tolerance_list() -> list[str]:
    return list(SLIPPAGE_TOLERANCE_OPTIONS)
