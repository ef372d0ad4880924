"""Poll loop that reports balances and notifies on incoming funds."""

import asyncio
import logging
from typing import Callable, List, Optional

from wallet_watcher.blockchain.balances import BalanceFetcher
from wallet_watcher.monitor.changes import (
    BalanceChange,
    Snapshot,
    diff_balances,
    incoming,
    merge_snapshot,
)
from wallet_watcher.notifications.webhook import WebhookNotifier
from wallet_watcher.utils.formatting import (
    format_balance_line,
    format_incoming_message,
    format_time,
)

logger = logging.getLogger(__name__)


class BalanceWatcher:
    """Watches one wallet across the configured networks."""

    def __init__(
        self,
        address: str,
        fetcher: BalanceFetcher,
        notifier: Optional[WebhookNotifier] = None,
        interval: float = 30.0,
        out: Callable[[str], None] = print,
    ):
        """Initialize the watcher.

        Args:
            address: Wallet address to watch
            fetcher: Reads balances from the networks
            notifier: Webhook notifier for incoming funds, if any
            interval: Seconds between checks in watch mode
            out: Sink for the balance report
        """
        self.address = address
        self.fetcher = fetcher
        self.notifier = notifier
        self.interval = interval
        self.out = out
        self.previous: Optional[Snapshot] = None
        self.is_watching = False

    def check(self) -> List[BalanceChange]:
        """Run one poll: fetch, report, remember the snapshot and notify.

        The snapshot is stored before notifying, so a failed notification
        is not repeated on the next poll.

        Returns:
            Balance changes since the previous poll
        """
        balances = self.fetcher.fetch(self.address)
        changes = diff_balances(self.previous, balances)
        by_network = {change.network: change for change in changes}

        self.out(f"\n[{format_time()}]")
        for name, reading in balances.items():
            self.out(format_balance_line(reading, by_network.get(name)))

        self.previous = merge_snapshot(self.previous, balances)

        received = incoming(changes)
        if received:
            logger.info(f"💰 Incoming funds on {', '.join(c.network for c in received)}")
            if self.notifier is not None:
                self.notifier.send(format_incoming_message(received, self.address))
        return changes

    async def run(self, watch: bool = False):
        """Run one check, then keep polling in watch mode.

        Args:
            watch: Repeat every interval until stopped
        """
        self._guarded_check()
        if not watch:
            return

        self.out(f"\nPolling every {self.interval:g}s... (Ctrl+C to stop)")
        self.is_watching = True
        while self.is_watching:
            await asyncio.sleep(self.interval)
            if not self.is_watching:
                break
            self._guarded_check()

    def _guarded_check(self) -> List[BalanceChange]:
        try:
            return self.check()
        except Exception as e:
            logger.error(f"❌ Error in balance check: {e}")
            return []

    def stop(self):
        """Stop watching after the current check."""
        if self.is_watching:
            logger.info("🛑 Stopping balance watcher...")
            self.is_watching = False
        else:
            logger.info("ℹ️ Balance watcher is not currently running")
