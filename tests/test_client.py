# tests/test_client.py

import pytest

from blockfetch.clients import TendermintRpcClient, normalize_node_address
from blockfetch.types import InvalidNodeAddress, NodeClientError, is_too_high_block_error


class StubProvider:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def make_request(self, method, params):
        self.calls.append((method, params))
        if self.exc:
            raise self.exc
        return self.response


class StubHttpResponse:
    def __init__(self, text):
        self.text = text


class StubHttpError(Exception):
    def __init__(self, text):
        super().__init__("500 Server Error")
        self.response = StubHttpResponse(text)


def install(client, stub):
    """Route the client's JSON-RPC calls to `stub`."""
    client.w3.provider.make_request = stub.make_request
    return stub


@pytest.fixture
def client():
    return TendermintRpcClient("http://127.0.0.1:26657", timeout=1.0)


@pytest.mark.parametrize("address, expected", [
    ("http://localhost:26657", "http://localhost:26657"),
    ("https://rpc.example.org/", "https://rpc.example.org"),
    ("tcp://10.0.0.1:26657", "http://10.0.0.1:26657"),
    ("localhost:26657", "http://localhost:26657"),
])
def test_normalize_node_address(address, expected):
    assert normalize_node_address(address) == expected


@pytest.mark.parametrize("address", ["", "   ", "ws://node:26657", "http://"])
def test_normalize_node_address_rejects(address):
    with pytest.raises(InvalidNodeAddress):
        normalize_node_address(address)


def test_get_block_sends_height_as_string(client):
    stub = install(client, StubProvider({"jsonrpc": "2.0", "id": 1, "result": {"block": {}}}))

    assert client.get_block(42) == {"block": {}}
    assert stub.calls == [("block", {"height": "42"})]


def test_get_block_latest_sends_no_height(client):
    stub = install(client, StubProvider({"jsonrpc": "2.0", "id": 1, "result": {}}))

    client.get_block(None)
    client.get_block(0)

    assert stub.calls == [("block", {}), ("block", {})]


def test_rpc_error_payload_keeps_data(client):
    install(client, StubProvider({
        "jsonrpc": "2.0",
        "id": 1,
        "error": {
            "code": -32603,
            "message": "Internal error",
            "data": "height 100 must be less than or equal to the current blockchain height 50",
        },
    }))

    with pytest.raises(NodeClientError) as exc_info:
        client.get_block(100)

    assert exc_info.value.code == -32603
    assert is_too_high_block_error(exc_info.value)


def test_http_error_body_is_parsed(client):
    body = '{"jsonrpc":"2.0","id":1,"error":{"code":-32603,"message":"Internal error",' \
           '"data":"height 9 must be less than or equal to the current blockchain height 8"}}'
    install(client, StubProvider(exc=StubHttpError(body)))

    with pytest.raises(NodeClientError) as exc_info:
        client.get_block(9)

    assert is_too_high_block_error(exc_info.value)
    assert isinstance(exc_info.value.__cause__, StubHttpError)


def test_transport_error_is_wrapped(client):
    install(client, StubProvider(exc=ConnectionError("refused")))

    with pytest.raises(NodeClientError, match="refused") as exc_info:
        client.get_block(1)

    assert not is_too_high_block_error(exc_info.value)


def test_missing_result_is_error(client):
    install(client, StubProvider({"jsonrpc": "2.0", "id": 1}))

    with pytest.raises(NodeClientError, match="no result"):
        client.get_block(1)


@pytest.mark.parametrize("message, expected", [
    ("height 5 must be less than or equal to the current blockchain height 4", True),
    ("height must be greater than 0", False),
    ("connection refused", False),
])
def test_too_high_classification(message, expected):
    assert is_too_high_block_error(Exception(message)) is expected
