# blockfetch/types/rpc.py
"""
Shapes of the node's `block` JSON-RPC result.

Only the fields the fetcher reads are declared; everything else in the
response is ignored on conversion.
"""

from typing import List, Optional

from msgspec import Struct


class RpcBlockHeader(Struct):
    height: str  # int64 encoded as a JSON string
    time: Optional[str] = None
    chain_id: Optional[str] = None


class RpcBlockData(Struct):
    txs: Optional[List[str]] = None  # base64 encoded transactions, null when empty


class RpcBlock(Struct):
    header: RpcBlockHeader
    data: RpcBlockData


class RpcBlockResult(Struct):
    block: RpcBlock
