# blockfetch/fetcher.py

import base64
from typing import Callable, Optional

import msgspec

from .clients.interfaces import NodeClientInterface
from .clients.tendermint_rpc import TendermintRpcClient
from .core.logging import LoggingMixin
from .decode import JsonTxDecoder
from .stream import BlockChannel, BlockFetcherInterface, FetchOptions
from .stream import run_callback_stream, start_channel_stream
from .types import (
    Block,
    BlockFetchError,
    RpcBlockResult,
    TooHighBlockRequested,
    Transaction,
    TxDecodeError,
    is_too_high_block_error,
)
from .utils import rfc3339_to_datetime


TxDecoder = Callable[[bytes], Transaction]


class BlockFetcher(BlockFetcherInterface, LoggingMixin):
    """
    Fetches blocks from a node and decodes their transactions.

    `fetch_block` is a single request with no retries. `stream_blocks` and
    `consume_blocks` walk heights forward and retry until cancelled.
    """

    def __init__(self, client: NodeClientInterface, decoder: Optional[TxDecoder] = None):
        self.client = client
        self.decoder = decoder or JsonTxDecoder()

    def fetch_block(self, height: int = 0) -> Block:
        if height < 0:
            raise ValueError("height must not be negative")

        try:
            raw = self.client.get_block(height or None)
        except Exception as e:
            if is_too_high_block_error(e):
                raise TooHighBlockRequested() from e
            raise BlockFetchError(f"failed to get block {height}: {e}", height=height) from e

        try:
            result = msgspec.convert(raw, type=RpcBlockResult)
            block_height = int(result.block.header.height)
            block_time = rfc3339_to_datetime(result.block.header.time)
        except (msgspec.ValidationError, ValueError, TypeError) as e:
            raise BlockFetchError(f"failed to parse block {height}: {e}", height=height) from e

        encoded_txs = result.block.data.txs or []
        transactions = []
        for index, encoded in enumerate(encoded_txs):
            try:
                transactions.append(self.decoder(base64.b64decode(encoded, validate=True)))
            except Exception as e:
                raise TxDecodeError(
                    f"failed to decode tx {index} of block {block_height}: {e}",
                    height=block_height,
                    tx_index=index,
                ) from e

        return Block(
            height=block_height,
            transactions=tuple(transactions),
            time=block_time,
        )

    def stream_blocks(self, from_height: int,
                      options: Optional[FetchOptions] = None) -> BlockChannel:
        return start_channel_stream(self.fetch_block, from_height, options)

    def consume_blocks(self, from_height: int,
                       on_block: Callable[[Block], None],
                       options: Optional[FetchOptions] = None) -> None:
        run_callback_stream(self.fetch_block, from_height, on_block, options)


def create_fetcher(node_url: str,
                   timeout: float = 30.0,
                   decoder: Optional[TxDecoder] = None) -> BlockFetcher:
    """
    Build a BlockFetcher bound to a node.

    Raises:
        InvalidNodeAddress: If `node_url` cannot be used as an HTTP endpoint
    """
    client = TendermintRpcClient(node_url, timeout=timeout)
    fetcher = BlockFetcher(client, decoder)
    fetcher.log_debug("Fetcher created", node_url=client.endpoint_url)
    return fetcher
