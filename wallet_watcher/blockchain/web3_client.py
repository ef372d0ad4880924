"""Web3 client for connecting to EVM networks."""

import logging
from typing import Optional
from web3 import Web3

logger = logging.getLogger(__name__)


class Web3Client:
    """Web3 client for a single EVM network."""

    def __init__(self, rpc_url: str, timeout: float = 10.0):
        """Initialize Web3 client.

        Args:
            rpc_url: HTTP(S) RPC URL for the network
            timeout: Request timeout in seconds

        Raises:
            ValueError: If the RPC URL is missing or not an HTTP(S) endpoint
        """
        if not rpc_url:
            raise ValueError("RPC URL must be provided")
        if not rpc_url.startswith(("http://", "https://")):
            raise ValueError(f"RPC URL must be an HTTP(S) endpoint, got: {rpc_url}")

        self.rpc_url = rpc_url
        self.timeout = timeout
        self.w3: Optional[Web3] = None

    def _connect(self):
        """Build the HTTP provider for the network."""
        provider = Web3.HTTPProvider(self.rpc_url, request_kwargs={"timeout": self.timeout})
        self.w3 = Web3(provider)
        logger.debug(f"🔗 Provider ready for {self.rpc_url}")

    def get_web3(self) -> Web3:
        """Get the Web3 instance, connecting on first use.

        Returns:
            Web3 instance
        """
        if self.w3 is None:
            self._connect()
        return self.w3

    def get_balance(self, address: str) -> int:
        """Get the native-coin balance of an address at the latest block.

        Args:
            address: Wallet address, checksummed or not

        Returns:
            Balance in wei
        """
        w3 = self.get_web3()
        return int(w3.eth.get_balance(Web3.to_checksum_address(address)))

    def reconnect(self):
        """Reconnect to the network."""
        logger.info(f"🔄 Reconnecting to {self.rpc_url}...")
        self.w3 = None
        self._connect()
