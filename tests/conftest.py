"""Pytest configuration and shared fixtures."""

import json
import os

import pytest

from transeos import ClientConfig, Network, WalletAuth


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (run offline)")
    config.addinivalue_line("markers", "node: Integration tests against a live chain node")


def pytest_collection_modifyitems(config, items):
    """Skip live node tests unless a node URL is given."""
    for item in items:
        if "test_node" in str(item.fspath) and "TRANSEOS_NODE_URL" not in os.environ:
            item.add_marker(pytest.mark.skip(reason="Node tests skipped by default. Set TRANSEOS_NODE_URL to run them"))


# =============================================================================
# Mock collaborators
# =============================================================================


class MockResponse:
    """Stand-in for aiohttp.ClientResponse."""

    def __init__(self, payload=None, status=200, text=None, body=None):
        self.status = status
        self._payload = payload
        if body is None:
            body = (text if text is not None else json.dumps(payload)).encode("utf-8")
        self._body = body

    async def json(self, content_type="application/json"):
        if self._payload is None:
            return json.loads(self._body.decode("utf-8"))
        return self._payload

    async def text(self, encoding=None, errors="strict"):
        return self._body.decode(encoding or "utf-8", errors)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class MockSession:
    """Stand-in for aiohttp.ClientSession recording every POST.

    A list of responses is served in order, one per request.
    """

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []
        self.closed = False

    def post(self, url, data=None, headers=None):
        self.requests.append({"url": url, "body": json.loads(data), "headers": headers})
        if self.error is not None:
            raise self.error
        if isinstance(self.response, list):
            return self.response[len(self.requests) - 1]
        return self.response

    async def close(self):
        self.closed = True


class MockWallet:
    """Wallet recording transact calls."""

    def __init__(self, auth=None, result=None, error=None):
        self.auth = auth
        self.result = result if result is not None else {"transaction_id": "abc123"}
        self.error = error
        self.calls = []

    async def transact(self, transaction, options):
        self.calls.append((transaction, options))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def network():
    return Network(host="127.0.0.1", protocol="http", port=8888, chain_id="cf057bbf")


@pytest.fixture
def config(network):
    return ClientConfig(
        contract_address="transledger",
        exchange_address="gizmoexchnge",
        network=network,
    )


@pytest.fixture
def wallet():
    return MockWallet(auth=WalletAuth(account_name="alice", permission="owner"))
