"""
Domain models and value objects.

Contains wallet entities like NetworkInfo, TxData, AssetPriceTimeframe.
"""

from src.core.domain.networks import (
    GOERLI_CHAIN_ID,
    KNOWN_NETWORKS,
    KOVAN_CHAIN_ID,
    LOCALHOST_CHAIN_ID,
    MAINNET,
    MAINNET_CHAIN_ID,
    RINKEBY_CHAIN_ID,
    ROPSTEN_CHAIN_ID,
    NetworkInfo,
    get_network,
    get_network_const,
    get_network_short_text,
    get_network_text,
    get_networks_abbrev_list,
    get_networks_list,
)
from src.core.domain.timeframe import (
    DEFAULT_TIMEFRAME,
    AssetPriceTimeframe,
    timeframe_from_label,
)
from src.core.domain.tx_data import TxData, get_tx_data, hex_str_to_number_array

__all__ = [
    # Networks
    "MAINNET_CHAIN_ID",
    "RINKEBY_CHAIN_ID",
    "ROPSTEN_CHAIN_ID",
    "GOERLI_CHAIN_ID",
    "KOVAN_CHAIN_ID",
    "LOCALHOST_CHAIN_ID",
    "KNOWN_NETWORKS",
    "MAINNET",
    "NetworkInfo",
    "get_network",
    "get_network_const",
    "get_network_short_text",
    "get_network_text",
    "get_networks_abbrev_list",
    "get_networks_list",
    # Timeframe
    "AssetPriceTimeframe",
    "DEFAULT_TIMEFRAME",
    "timeframe_from_label",
    # Transaction data
    "TxData",
    "get_tx_data",
    "hex_str_to_number_array",
]
