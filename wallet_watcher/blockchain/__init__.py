"""Blockchain interaction modules."""

from wallet_watcher.blockchain.web3_client import Web3Client
from wallet_watcher.blockchain.balances import BalanceFetcher, BalanceReading

__all__ = ["Web3Client", "BalanceFetcher", "BalanceReading"]
