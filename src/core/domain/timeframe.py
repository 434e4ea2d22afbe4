"""
AssetPriceTimeframe — Интервалы графика цены актива

Значения совпадают с числовыми кодами, которые принимает
AssetRatioController при запросе истории цены.
"""

from enum import IntEnum
from typing import Final


class AssetPriceTimeframe(IntEnum):
    """Интервал истории цены."""

    LIVE = 0
    ONE_DAY = 1
    ONE_WEEK = 2
    ONE_MONTH = 3
    THREE_MONTHS = 4
    ONE_YEAR = 5
    ALL = 6


DEFAULT_TIMEFRAME: Final[AssetPriceTimeframe] = AssetPriceTimeframe.LIVE

# Подписи кнопок селектора интервала (lowercase)
_LABELS: Final[dict[str, AssetPriceTimeframe]] = {
    "live": AssetPriceTimeframe.LIVE,
    "1d": AssetPriceTimeframe.ONE_DAY,
    "1w": AssetPriceTimeframe.ONE_WEEK,
    "1m": AssetPriceTimeframe.ONE_MONTH,
    "3m": AssetPriceTimeframe.THREE_MONTHS,
    "1y": AssetPriceTimeframe.ONE_YEAR,
    "all": AssetPriceTimeframe.ALL,
}


def timeframe_from_label(label: str) -> AssetPriceTimeframe:
    """
    Подпись селектора → интервал.

    Args:
        label: "Live", "1D", "1W", "1M", "3M", "1Y" или "All" (регистр не важен)

    Raises:
        ValueError: Если подпись неизвестна
    """
    try:
        return _LABELS[label.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown timeframe label: {label!r}") from None
