"""Balance diffing and the poll loop."""

from wallet_watcher.monitor.changes import BalanceChange, diff_balances, merge_snapshot
from wallet_watcher.monitor.watcher import BalanceWatcher

__all__ = ["BalanceChange", "diff_balances", "merge_snapshot", "BalanceWatcher"]
