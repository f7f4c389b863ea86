# blockfetch/clients/tendermint_rpc.py

from typing import Any, Dict, Optional
from urllib.parse import urlparse

import msgspec
from web3 import Web3

from .interfaces import NodeClientInterface
from ..core.logging import LoggingMixin
from ..types.errors import InvalidNodeAddress, NodeClientError


SUPPORTED_SCHEMES = ("http", "https")


def normalize_node_address(address: str) -> str:
    """
    Turn a node address into an HTTP endpoint URL.

    ``tcp://host:port`` is rewritten to ``http://``, a bare ``host:port``
    gets ``http://`` prepended. Anything else without a host is rejected.
    """
    if not address or not address.strip():
        raise InvalidNodeAddress("node address is empty")

    address = address.strip()
    if "://" not in address:
        address = f"http://{address}"
    elif address.startswith("tcp://"):
        address = "http://" + address[len("tcp://"):]

    parsed = urlparse(address)
    if parsed.scheme not in SUPPORTED_SCHEMES:
        raise InvalidNodeAddress(f"unsupported node address scheme: {parsed.scheme!r}")
    if not parsed.hostname:
        raise InvalidNodeAddress(f"node address has no host: {address!r}")

    return address.rstrip("/")


class TendermintRpcClient(NodeClientInterface, LoggingMixin):
    """
    A client for reading blocks from a Tendermint / CometBFT node over JSON-RPC.
    """

    def __init__(self, endpoint_url: str, timeout: float = 30.0):
        self.endpoint_url = normalize_node_address(endpoint_url)
        self.timeout = timeout
        self.w3 = Web3(Web3.HTTPProvider(self.endpoint_url, request_kwargs={"timeout": timeout}))

    def get_block(self, height: Optional[int] = None) -> Dict[str, Any]:
        """
        Get a block using height. None (or 0) asks the node for its latest block.
        """
        params: Dict[str, Any] = {}
        if height:
            # The node expects int64 values as JSON strings
            params["height"] = str(height)

        response = self.make_request("block", params)
        return response

    def make_request(self, method: str, params: Any) -> Any:
        """
        Make a JSON-RPC request to the node and return its result.

        Args:
            method: RPC method name
            params: Named parameters for the method

        Returns:
            The `result` member of the response
        """
        try:
            response = self.w3.provider.make_request(method, params)
        except Exception as e:
            raise self._error_from_exception(method, e) from e

        if response.get("error"):
            raise self._error_from_payload(response["error"])

        if "result" not in response:
            raise NodeClientError(f"{method}: response has no result")

        return response["result"]

    def _error_from_payload(self, error: Any) -> NodeClientError:
        if isinstance(error, dict):
            return NodeClientError(
                str(error.get("message", "rpc error")),
                code=error.get("code"),
                data=error.get("data"),
            )
        return NodeClientError(str(error))

    def _error_from_exception(self, method: str, exc: Exception) -> NodeClientError:
        # Older nodes answer RPC errors with HTTP 500 and the JSON error in the body
        body = getattr(getattr(exc, "response", None), "text", None)
        if body:
            try:
                payload = msgspec.json.decode(body)
            except msgspec.DecodeError:
                payload = None
            if isinstance(payload, dict) and payload.get("error"):
                return self._error_from_payload(payload["error"])
            return NodeClientError(f"{method} request failed: {exc}", data=body[:200])

        self.log_debug("Node request failed", node_url=self.endpoint_url, error=str(exc))
        return NodeClientError(f"{method} request failed: {exc}")
