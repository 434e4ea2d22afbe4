"""
Networks — Справочник Ethereum-сетей кошелька

Immutable Pydantic модель сети и поиск подписей по chain id.
Неизвестный chain id (или имя) всегда сводится к Mainnet.
"""

from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# CHAIN IDS
# =============================================================================

MAINNET_CHAIN_ID: Final[str] = "0x1"
RINKEBY_CHAIN_ID: Final[str] = "0x4"
ROPSTEN_CHAIN_ID: Final[str] = "0x3"
GOERLI_CHAIN_ID: Final[str] = "0x5"
KOVAN_CHAIN_ID: Final[str] = "0x2a"
LOCALHOST_CHAIN_ID: Final[str] = "0x539"


# =============================================================================
# MODEL
# =============================================================================


class NetworkInfo(BaseModel):
    """Сеть: chain id, полное имя и короткая подпись."""

    chain_id: str = Field(..., min_length=1, description="Chain id в hex (например, '0x1')")
    name: str = Field(..., min_length=1, description="Полное имя сети")
    abbr: str = Field(..., min_length=1, description="Короткая подпись сети")

    model_config = {"frozen": True}


# Порядок соответствует порядку в селекторе сети
KNOWN_NETWORKS: Final[tuple[NetworkInfo, ...]] = (
    NetworkInfo(chain_id=MAINNET_CHAIN_ID, name="Ethereum Mainnet", abbr="Mainnet"),
    NetworkInfo(chain_id=RINKEBY_CHAIN_ID, name="Rinkeby Test Network", abbr="Rinkeby"),
    NetworkInfo(chain_id=ROPSTEN_CHAIN_ID, name="Ropsten Test Network", abbr="Ropsten"),
    NetworkInfo(chain_id=GOERLI_CHAIN_ID, name="Goerli Test Network", abbr="Goerli"),
    NetworkInfo(chain_id=KOVAN_CHAIN_ID, name="Kovan Test Network", abbr="Kovan"),
    NetworkInfo(chain_id=LOCALHOST_CHAIN_ID, name="Localhost", abbr="Localhost"),
)

_BY_CHAIN_ID: Final[dict[str, NetworkInfo]] = {n.chain_id: n for n in KNOWN_NETWORKS}
_BY_NAME: Final[dict[str, NetworkInfo]] = {n.name: n for n in KNOWN_NETWORKS}

MAINNET: Final[NetworkInfo] = _BY_CHAIN_ID[MAINNET_CHAIN_ID]


# =============================================================================
# LOOKUP
# =============================================================================


def get_networks_list() -> list[str]:
    """Полные имена сетей в порядке селектора."""
    return [network.name for network in KNOWN_NETWORKS]


def get_networks_abbrev_list() -> list[str]:
    """Короткие подписи сетей в порядке селектора."""
    return [network.abbr for network in KNOWN_NETWORKS]


def get_network(chain_id: str) -> NetworkInfo:
    """
    Сеть по chain id.

    Args:
        chain_id: Chain id в hex

    Returns:
        NetworkInfo; для неизвестного chain id возвращается Mainnet
    """
    return _BY_CHAIN_ID.get(chain_id, MAINNET)


def get_network_text(chain_id: str) -> str:
    return get_network(chain_id).name


def get_network_short_text(chain_id: str) -> str:
    return get_network(chain_id).abbr


def get_network_const(network_name: str) -> str:
    """
    Chain id по полному имени сети (обратный поиск для селектора).

    Examples:
        >>> get_network_const("Goerli Test Network")
        '0x5'
        >>> get_network_const("Unknown")
        '0x1'
    """
    return _BY_NAME.get(network_name, MAINNET).chain_id
