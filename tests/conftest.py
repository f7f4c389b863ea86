# tests/conftest.py
"""
pytest configuration and fixtures for block fetcher testing.

The node is replaced by an in-memory chain so no test touches the network.
"""

import base64
import json
import threading
from typing import Any, Dict, List, Optional

import pytest

from blockfetch.clients.interfaces import NodeClientInterface
from blockfetch.core.logging import FetcherLogger
from blockfetch.fetcher import BlockFetcher
from blockfetch.stream import FetchOptions
from blockfetch.types import NodeClientError


def encode_tx(*kinds: str, memo: str = "") -> str:
    """Base64 amino-JSON StdTx with one message per kind."""
    tx = {
        "type": "cosmos-sdk/StdTx",
        "value": {
            "msg": [{"type": kind, "value": {"n": i}} for i, kind in enumerate(kinds)],
            "memo": memo,
        },
    }
    return base64.b64encode(json.dumps(tx).encode()).decode()


def raw_block(height: int, txs: Optional[List[str]] = None) -> Dict[str, Any]:
    return {
        "block_id": {"hash": "AB" * 32},
        "block": {
            "header": {
                "chain_id": "testnet",
                "height": str(height),
                "time": "2021-02-21T17:40:08.123456789Z",
            },
            "data": {"txs": txs},
        },
    }


class FakeNodeClient(NodeClientInterface):
    """
    In-memory node.

    Heights 1..tip exist. Every block carries one tx with a `test/Msg`
    message unless `txs` overrides it. `failures[height]` makes the next N
    requests for that height fail with a transport error. With
    `grow_every` set, the tip moves up by one every that many requests.
    """

    def __init__(self, tip: int = 10, grow_every: Optional[int] = None):
        self.tip = tip
        self.grow_every = grow_every
        self.txs: Dict[int, List[str]] = {}
        self.failures: Dict[int, int] = {}
        self.requests: List[Optional[int]] = []
        self._lock = threading.Lock()

    def get_block(self, height: Optional[int] = None) -> Dict[str, Any]:
        with self._lock:
            self.requests.append(height)
            if self.grow_every and len(self.requests) % self.grow_every == 0:
                self.tip += 1

            if height is None:
                height = self.tip

            if self.failures.get(height):
                self.failures[height] -= 1
                raise NodeClientError("connection refused")

            if height > self.tip:
                raise NodeClientError(
                    "Internal error",
                    code=-32603,
                    data=f"height {height} must be less than or equal to the current blockchain height {self.tip}",
                )

            return raw_block(height, self.txs.get(height, [encode_tx("test/Msg")]))


@pytest.fixture
def node():
    return FakeNodeClient()


@pytest.fixture
def fetcher(node):
    return BlockFetcher(node)


@pytest.fixture
def cancel():
    event = threading.Event()
    yield event
    event.set()


@pytest.fixture
def fast_options(cancel):
    return FetchOptions(
        retry_last_block_interval=0.001,
        retry_interval=0.001,
        cancel=cancel,
    )


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    FetcherLogger.reset()
