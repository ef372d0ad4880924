"""Balance differences between two polls."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from wallet_watcher.blockchain.balances import BalanceReading

Snapshot = Dict[str, BalanceReading]


@dataclass(frozen=True)
class BalanceChange:
    """A balance that moved on one network since the previous poll."""

    network: str
    previous_wei: int
    current_wei: int
    symbol: str = "ETH"

    @property
    def delta(self) -> int:
        return self.current_wei - self.previous_wei

    @property
    def is_incoming(self) -> bool:
        return self.delta > 0

    @property
    def is_outgoing(self) -> bool:
        return self.delta < 0


def diff_balances(previous: Optional[Snapshot], current: Snapshot) -> List[BalanceChange]:
    """Compare two snapshots.

    Only networks read successfully in both snapshots are compared, so a
    failed read never shows up as a balance movement.

    Args:
        previous: Snapshot from the previous poll, None on the first poll
        current: Snapshot from this poll

    Returns:
        One change per network whose balance differs, in current order
    """
    if not previous:
        return []

    changes = []
    for name, reading in current.items():
        before = previous.get(name)
        if before is None or not before.ok or not reading.ok:
            continue
        if reading.wei != before.wei:
            changes.append(BalanceChange(name, before.wei, reading.wei, reading.symbol))
    return changes


def incoming(changes: List[BalanceChange]) -> List[BalanceChange]:
    """Changes that increased the balance."""
    return [change for change in changes if change.is_incoming]


def merge_snapshot(previous: Optional[Snapshot], current: Snapshot) -> Snapshot:
    """Snapshot to compare the next poll against.

    A network whose read failed this poll keeps its last good reading.
    """
    merged = dict(current)
    if previous:
        for name, reading in current.items():
            before = previous.get(name)
            if not reading.ok and before is not None and before.ok:
                merged[name] = before
    return merged
