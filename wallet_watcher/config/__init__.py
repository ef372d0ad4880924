"""Configuration for networks and runtime settings."""

from wallet_watcher.config.networks import NETWORKS, Network, get_networks, get_rpc_url
from wallet_watcher.config.settings import WatcherConfig

__all__ = ["NETWORKS", "Network", "get_networks", "get_rpc_url", "WatcherConfig"]
