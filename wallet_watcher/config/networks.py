"""Network table for the chains the watcher polls."""

import os
from dataclasses import dataclass, replace
from typing import List


@dataclass(frozen=True)
class Network:
    """A chain queried for the native-coin balance."""

    name: str
    rpc_url: str
    emoji: str
    rpc_env: str
    symbol: str = "ETH"


# Polled in this order, and reported in this order
NETWORKS: List[Network] = [
    Network(name="Base", rpc_url="https://mainnet.base.org", emoji="🔵", rpc_env="BASE_RPC_URL"),
    Network(name="Arbitrum", rpc_url="https://arb1.arbitrum.io/rpc", emoji="🔷", rpc_env="ARBITRUM_RPC_URL"),
    Network(name="Ethereum", rpc_url="https://eth.llamarpc.com", emoji="⟠", rpc_env="ETHEREUM_RPC_URL"),
]


def get_rpc_url(network: Network) -> str:
    """Get RPC URL for a network, honouring its environment override."""
    return os.getenv(network.rpc_env) or network.rpc_url


def get_networks() -> List[Network]:
    """Get the network table with environment overrides applied."""
    return [replace(network, rpc_url=get_rpc_url(network)) for network in NETWORKS]
