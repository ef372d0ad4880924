"""Command line entry point for the wallet watcher."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv
from web3 import Web3

from wallet_watcher import __version__
from wallet_watcher.blockchain.balances import BalanceFetcher
from wallet_watcher.config.networks import get_networks
from wallet_watcher.config.settings import WatcherConfig
from wallet_watcher.monitor.watcher import BalanceWatcher
from wallet_watcher.notifications.webhook import WebhookNotifier
from wallet_watcher.utils.formatting import TITLE, format_banner

logger = logging.getLogger(__name__)

USAGE = """
{title}

Usage:
  wallet-watcher <address> [options]

Options:
  --watch, -w        Continuous monitoring mode
  --webhook <url>    Send notifications to webhook
  --interval <sec>   Polling interval (default: {interval})

Examples:
  wallet-watcher 0x123...abc
  wallet-watcher 0x123...abc --watch
  wallet-watcher 0x123...abc --watch --webhook https://discord.com/api/webhooks/...
"""


def wallet_address(value: str) -> str:
    if not Web3.is_address(value):
        raise argparse.ArgumentTypeError(f"not a valid wallet address: {value}")
    return Web3.to_checksum_address(value)


def positive_seconds(value: str) -> int:
    try:
        seconds = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number of seconds: {value}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"interval must be positive: {value}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wallet-watcher",
        description="Multi-chain wallet monitor with webhook notifications",
    )
    parser.add_argument("address", nargs="?", type=wallet_address, help="Wallet address to watch")
    parser.add_argument("-w", "--watch", action="store_true", help="Continuous monitoring mode")
    parser.add_argument(
        "--webhook",
        default=WatcherConfig.get_webhook_url(),
        help="Send notifications to webhook (default: $WEBHOOK_URL)",
    )
    parser.add_argument(
        "--interval",
        type=positive_seconds,
        default=WatcherConfig.get_interval(),
        help="Polling interval in seconds (default: $WATCH_INTERVAL or 30)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging():
    logging.basicConfig(
        level=WatcherConfig.get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    configure_logging()

    args = build_parser().parse_args(argv)
    if not args.address:
        print(USAGE.format(title=TITLE, interval=args.interval))
        return 0

    fetcher = BalanceFetcher(get_networks(), timeout=WatcherConfig.get_rpc_timeout())
    notifier = WebhookNotifier(args.webhook, timeout=WatcherConfig.get_webhook_timeout())
    watcher = BalanceWatcher(args.address, fetcher, notifier=notifier, interval=args.interval)

    print(format_banner(args.address, args.watch, args.webhook))
    try:
        asyncio.run(watcher.run(watch=args.watch))
    except KeyboardInterrupt:
        print("\n👋 Stopped watching.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
