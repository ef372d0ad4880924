"""
Test the poll loop: reporting, diffing and notifications.
"""

import asyncio

from conftest import ADDRESS, ETHER

from wallet_watcher.blockchain.balances import BalanceFetcher
from wallet_watcher.monitor.watcher import BalanceWatcher


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    def send(self, message):
        self.messages.append(message)
        return True


def make_watcher(networks, client_factory, **kwargs):
    lines = []
    fetcher = BalanceFetcher(networks, client_factory=client_factory)
    watcher = BalanceWatcher(ADDRESS, fetcher, out=lines.append, **kwargs)
    return watcher, lines


def queue(rpc_script, networks, *polls):
    """Queue one balance per network for each poll."""
    for poll in polls:
        for network, value in zip(networks, poll):
            rpc_script[network.rpc_url].append(value)


def test_first_check_reports_without_notifying(networks, rpc_script, client_factory):
    queue(rpc_script, networks, (ETHER, 0, 2 * ETHER))
    notifier = RecordingNotifier()
    watcher, lines = make_watcher(networks, client_factory, notifier=notifier)

    assert watcher.check() == []

    assert lines[0].startswith("\n[")
    assert lines[1:] == [
        "  🔵 Base      : 1.0 ETH",
        "  🔷 Arbitrum  : 0.0 ETH",
        "  ⟠ Ethereum  : 2.0 ETH",
    ]
    assert notifier.messages == []


def test_incoming_funds_notify_once_with_all_networks(networks, rpc_script, client_factory):
    queue(rpc_script, networks, (ETHER, 0, 2 * ETHER), (2 * ETHER, ETHER // 2, ETHER))
    notifier = RecordingNotifier()
    watcher, lines = make_watcher(networks, client_factory, notifier=notifier)

    watcher.check()
    changes = watcher.check()

    assert len(changes) == 3
    assert lines[-3:] == [
        "  🔵 Base      : 2.0 ETH (+1.0) 🎉",
        "  🔷 Arbitrum  : 0.5 ETH (+0.5) 🎉",
        "  ⟠ Ethereum  : 1.0 ETH (-1.0)",
    ]
    assert notifier.messages == [
        "🎉 Incoming funds detected!\nBase: +1.0 ETH\nArbitrum: +0.5 ETH\nWallet: " + ADDRESS
    ]


def test_outgoing_funds_do_not_notify(networks, rpc_script, client_factory):
    queue(rpc_script, networks, (ETHER, ETHER, ETHER), (0, ETHER, ETHER))
    notifier = RecordingNotifier()
    watcher, _ = make_watcher(networks, client_factory, notifier=notifier)

    watcher.check()
    watcher.check()

    assert notifier.messages == []


def test_recovered_network_does_not_look_like_incoming_funds(networks, rpc_script, client_factory):
    queue(
        rpc_script,
        networks,
        (ETHER, ETHER, ETHER),
        (ConnectionError("down"), ETHER, ETHER),
        (ETHER, ETHER, ETHER),
    )
    notifier = RecordingNotifier()
    watcher, lines = make_watcher(networks, client_factory, notifier=notifier)

    watcher.check()
    watcher.check()
    assert "  🔵 Base      : 0.0 ETH ⚠️" in lines
    assert watcher.check() == []
    assert notifier.messages == []


def test_run_single_check(networks, rpc_script, client_factory):
    queue(rpc_script, networks, (ETHER, ETHER, ETHER))
    watcher, lines = make_watcher(networks, client_factory)

    asyncio.run(watcher.run(watch=False))

    assert len(lines) == 4
    assert not watcher.is_watching


def test_run_watch_polls_until_stopped(networks, rpc_script, client_factory):
    queue(rpc_script, networks, *[(ETHER, ETHER, ETHER)] * 3)
    watcher, lines = make_watcher(networks, client_factory, interval=0.01)
    checks = []
    original_check = watcher.check

    def counting_check():
        checks.append(1)
        result = original_check()
        if len(checks) == 3:
            watcher.stop()
        return result

    watcher.check = counting_check
    asyncio.run(asyncio.wait_for(watcher.run(watch=True), timeout=5))

    assert len(checks) == 3
    assert "\nPolling every 0.01s... (Ctrl+C to stop)" in lines


def test_run_watch_survives_failing_check(networks, rpc_script, client_factory):
    watcher, _ = make_watcher(networks, client_factory, interval=0.01)
    calls = []

    def flaky_check():
        calls.append(1)
        if len(calls) == 2:
            raise RuntimeError("boom")
        if len(calls) == 3:
            watcher.stop()
        return []

    watcher.check = flaky_check
    asyncio.run(asyncio.wait_for(watcher.run(watch=True), timeout=5))

    assert len(calls) == 3


class ExplodingNotifier:
    def __init__(self):
        self.calls = 0

    def send(self, message):
        self.calls += 1
        raise ValueError("cannot parse webhook url")


def test_run_single_check_survives_failing_notifier(networks, rpc_script, client_factory, caplog):
    queue(rpc_script, networks, (ETHER, ETHER, ETHER), (2 * ETHER, ETHER, ETHER))
    notifier = ExplodingNotifier()
    watcher, lines = make_watcher(networks, client_factory, notifier=notifier)
    watcher.check()

    asyncio.run(watcher.run(watch=False))

    assert notifier.calls == 1
    assert "  🔵 Base      : 2.0 ETH (+1.0) 🎉" in lines
    assert "Error in balance check: cannot parse webhook url" in caplog.text
    assert watcher.previous["Base"].wei == 2 * ETHER


def test_run_watch_keeps_polling_when_notifier_raises(networks, rpc_script, client_factory):
    # Balance rises on every poll, so every check after the first notifies
    queue(rpc_script, networks, (ETHER, 0, 0), (2 * ETHER, 0, 0), (3 * ETHER, 0, 0))
    notifier = ExplodingNotifier()
    watcher, lines = make_watcher(networks, client_factory, notifier=notifier, interval=0.01)
    original_check = watcher.check
    checks = []

    def counting_check():
        checks.append(1)
        if len(checks) == 3:
            watcher.stop()
        return original_check()

    watcher.check = counting_check
    asyncio.run(asyncio.wait_for(watcher.run(watch=True), timeout=5))

    assert len(checks) == 3
    assert notifier.calls == 2
    assert "  🔵 Base      : 3.0 ETH (+1.0) 🎉" in lines
