"""Fetch native-coin balances for a wallet across the watched networks."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Set

from wallet_watcher.blockchain.web3_client import Web3Client
from wallet_watcher.config.networks import Network
from wallet_watcher.utils.formatting import format_ether

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalanceReading:
    """Balance of the wallet on one network at one poll."""

    network: str
    emoji: str
    wei: int
    error: Optional[str] = None
    symbol: str = "ETH"

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def ether(self) -> str:
        return format_ether(self.wei)


class BalanceFetcher:
    """Reads the wallet balance from every network, one after the other."""

    def __init__(
        self,
        networks: List[Network],
        client_factory: Callable[..., Web3Client] = Web3Client,
        timeout: float = 10.0,
    ):
        """Initialize the fetcher.

        Args:
            networks: Networks to query, in report order
            client_factory: Builds a client from an RPC URL and timeout
            timeout: RPC request timeout in seconds
        """
        self.networks = list(networks)
        self.client_factory = client_factory
        self.timeout = timeout
        self._clients: Dict[str, Web3Client] = {}
        self._failed: Set[str] = set()

    def _get_client(self, network: Network) -> Web3Client:
        client = self._clients.get(network.name)
        if client is None:
            client = self.client_factory(network.rpc_url, timeout=self.timeout)
            self._clients[network.name] = client
        elif network.name in self._failed:
            client.reconnect()
        self._failed.discard(network.name)
        return client

    def fetch(self, address: str) -> Dict[str, BalanceReading]:
        """Fetch the current balance on every network.

        A failing network is recorded with a zero balance and its error
        message; it does not affect the other networks.

        Args:
            address: Wallet address to query

        Returns:
            Readings keyed by network name, in network order
        """
        balances: Dict[str, BalanceReading] = {}
        for network in self.networks:
            try:
                wei = self._get_client(network).get_balance(address)
                balances[network.name] = BalanceReading(network.name, network.emoji, wei, symbol=network.symbol)
                logger.debug(f"Fetched balance on {network.name}: {wei} wei")
            except Exception as e:
                logger.warning(f"⚠️ Failed to fetch balance on {network.name}: {e}")
                # Reconnect on the next poll
                self._failed.add(network.name)
                balances[network.name] = BalanceReading(
                    network.name, network.emoji, 0, error=str(e), symbol=network.symbol
                )
        return balances
