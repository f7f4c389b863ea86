# blockfetch/types/__init__.py

from .block import (
    Message,
    Transaction,
    Block,
)

from .rpc import (
    RpcBlockHeader,
    RpcBlockData,
    RpcBlock,
    RpcBlockResult,
)

from .errors import (
    BlockFetchException,
    TooHighBlockRequested,
    BlockFetchError,
    TxDecodeError,
    NodeClientError,
    InvalidNodeAddress,
    ConfigError,
    FetchCancelled,
    ChannelClosed,
    is_too_high_block_error,
)

__all__ = [
    'Message',
    'Transaction',
    'Block',
    'RpcBlockHeader',
    'RpcBlockData',
    'RpcBlock',
    'RpcBlockResult',
    'BlockFetchException',
    'TooHighBlockRequested',
    'BlockFetchError',
    'TxDecodeError',
    'NodeClientError',
    'InvalidNodeAddress',
    'ConfigError',
    'FetchCancelled',
    'ChannelClosed',
    'is_too_high_block_error',
]
