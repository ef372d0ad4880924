import sys
from pathlib import Path

import pytest

# Add project root so `import wallet_watcher` works in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wallet_watcher.config.networks import NETWORKS

ADDRESS = "0x4bc44a054965636001111806be44358fe4cf112d"
ETHER = 10 ** 18


class FakeClient:
    """Stands in for Web3Client; serves balances from a shared script."""

    def __init__(self, script, rpc_url, timeout=10.0):
        self.script = script
        self.rpc_url = rpc_url
        self.timeout = timeout
        self.reconnects = 0

    def reconnect(self):
        self.reconnects += 1

    def get_balance(self, address):
        value = self.script[self.rpc_url].pop(0)
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def networks():
    return list(NETWORKS)


@pytest.fixture
def rpc_script():
    """Queue of balances (or exceptions) per RPC URL, consumed one per poll."""
    return {network.rpc_url: [] for network in NETWORKS}


@pytest.fixture
def client_factory(rpc_script):
    created = []

    def factory(rpc_url, timeout=10.0):
        client = FakeClient(rpc_script, rpc_url, timeout)
        created.append(client)
        return client

    factory.created = created
    return factory
