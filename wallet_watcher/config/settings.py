"""Runtime configuration settings."""

import logging
import os
from typing import Optional

from wallet_watcher.config.networks import NETWORKS


class WatcherConfig:
    """Configuration for polling, RPC access and notifications."""

    # Default values
    DEFAULT_INTERVAL = 30
    DEFAULT_RPC_TIMEOUT = 10.0
    DEFAULT_WEBHOOK_TIMEOUT = 10.0
    DEFAULT_LOG_LEVEL = "INFO"

    @staticmethod
    def get_webhook_url() -> Optional[str]:
        """Get the webhook URL from environment.

        Returns:
            Webhook URL, or None if notifications are not configured
        """
        return os.getenv("WEBHOOK_URL") or None

    @staticmethod
    def get_interval() -> int:
        """Get the polling interval in seconds.

        Returns:
            Polling interval (default: 30 seconds)
        """
        try:
            interval = int(os.getenv("WATCH_INTERVAL", str(WatcherConfig.DEFAULT_INTERVAL)))
        except ValueError:
            return WatcherConfig.DEFAULT_INTERVAL
        if interval <= 0:
            return WatcherConfig.DEFAULT_INTERVAL
        return interval

    @staticmethod
    def _get_timeout(name: str, default: float) -> float:
        try:
            timeout = float(os.getenv(name, str(default)))
        except ValueError:
            return default
        return timeout if timeout > 0 else default

    @staticmethod
    def get_rpc_timeout() -> float:
        """Get the RPC request timeout in seconds."""
        return WatcherConfig._get_timeout("RPC_TIMEOUT", WatcherConfig.DEFAULT_RPC_TIMEOUT)

    @staticmethod
    def get_webhook_timeout() -> float:
        """Get the webhook request timeout in seconds."""
        return WatcherConfig._get_timeout("WEBHOOK_TIMEOUT", WatcherConfig.DEFAULT_WEBHOOK_TIMEOUT)

    @staticmethod
    def get_log_level() -> int:
        """Get the logging level.

        Returns:
            A logging level constant; unknown names fall back to INFO
        """
        name = os.getenv("LOG_LEVEL", WatcherConfig.DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    @staticmethod
    def print_config_requirements():
        """Print the supported environment variables."""
        print("\n📋 Optional Environment Variables:")
        print("=" * 50)
        for network in NETWORKS:
            print(f"{network.rpc_env:<24} - {network.name} RPC URL (default: {network.rpc_url})")
        print("WEBHOOK_URL              - Webhook for incoming-funds notifications")
        print(f"WATCH_INTERVAL           - Polling interval in seconds (default: {WatcherConfig.DEFAULT_INTERVAL})")
        print(f"RPC_TIMEOUT              - RPC request timeout in seconds (default: {WatcherConfig.DEFAULT_RPC_TIMEOUT})")
        print(f"WEBHOOK_TIMEOUT          - Webhook request timeout in seconds (default: {WatcherConfig.DEFAULT_WEBHOOK_TIMEOUT})")
        print(f"LOG_LEVEL                - Logging level (default: {WatcherConfig.DEFAULT_LOG_LEVEL})")
        print("\n💡 Put these in a .env file in the working directory to set them permanently.")
        print()


if __name__ == "__main__":
    WatcherConfig.print_config_requirements()
