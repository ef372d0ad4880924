"""Formatting helpers for the balance report and notifications."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Optional
from web3 import Web3

TITLE = "🔔 Wallet Watcher v1.0"


def format_ether(wei: int) -> str:
    """Format a wei amount as an ether string.

    Trailing zeros are stripped but at least one fractional digit is kept,
    so 0 renders as "0.0" and 1.5 ether as "1.5".
    """
    value = Decimal(Web3.from_wei(wei, "ether"))
    text = format(value.normalize(), "f") if value else "0"
    if "." not in text:
        text += ".0"
    return text


def format_time(now: Optional[datetime] = None) -> str:
    """UTC timestamp as YYYY-MM-DD HH:MM:SS."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def format_balance_line(reading, change=None) -> str:
    """Format one network's line of the balance report.

    Args:
        reading: BalanceReading for the network
        change: BalanceChange for the network, if its balance moved

    Returns:
        The report line, marked with the delta and a warning on read failure
    """
    line = f"  {reading.emoji} {reading.network:<10}: {reading.ether} {reading.symbol}"
    if change is not None:
        if change.is_incoming:
            line += f" (+{format_ether(change.delta)}) 🎉"
        elif change.is_outgoing:
            line += f" (-{format_ether(-change.delta)})"
    if not reading.ok:
        line += " ⚠️"
    return line


def format_incoming_message(changes: Iterable, address: str) -> str:
    """Format the webhook message for incoming funds."""
    lines = ["🎉 Incoming funds detected!"]
    lines.extend(f"{change.network}: +{format_ether(change.delta)} {change.symbol}" for change in changes)
    lines.append(f"Wallet: {address}")
    return "\n".join(lines)


def format_banner(address: str, watch: bool, webhook_url: Optional[str] = None) -> str:
    """Format the start-up banner."""
    lines = [
        "",
        TITLE,
        "",
        f"Watching: {address}",
        f"Mode: {'Continuous' if watch else 'Single check'}",
    ]
    if webhook_url:
        lines.append(f"Webhook: {webhook_url[:30]}...")
    lines.append("")
    return "\n".join(lines)
