# blockfetch/__init__.py

import os
from pathlib import Path
from typing import Mapping, Optional

from .core.config import FetcherConfig
from .core.logging import FetcherLogger
from .fetcher import BlockFetcher, create_fetcher, TxDecoder
from .stream import BlockChannel, FetchOptions
from .types import (
    Block,
    Transaction,
    Message,
    BlockFetchException,
    TooHighBlockRequested,
    BlockFetchError,
    TxDecodeError,
    NodeClientError,
    InvalidNodeAddress,
    ConfigError,
    FetchCancelled,
    ChannelClosed,
)
from .utils import filter_messages


def create_fetcher_from_config(config: Optional[FetcherConfig] = None,
                               env: Optional[Mapping[str, str]] = None,
                               decoder: Optional[TxDecoder] = None) -> BlockFetcher:
    """
    Build a fetcher from a FetcherConfig, or from BLOCKFETCH_* variables when none is given.
    """
    if config is None:
        config = FetcherConfig.from_env(env)

    _configure_logging_early(config, env if env is not None else os.environ)

    logger = FetcherLogger.get_logger('init')
    logger.info(f"Creating block fetcher for {config.node_url}")

    return create_fetcher(config.node_url, timeout=config.timeout, decoder=decoder)


def _configure_logging_early(config: FetcherConfig, env: Mapping[str, str]) -> None:
    log_dir_env = env.get("BLOCKFETCH_LOG_DIR")
    structured_format = env.get("BLOCKFETCH_LOG_STRUCTURED", "false").lower() == "true"

    FetcherLogger.configure(
        log_dir=Path(log_dir_env) if log_dir_env else None,
        log_level=config.log_level,
        console_enabled=True,
        structured_format=structured_format,
    )


__all__ = [
    'create_fetcher',
    'create_fetcher_from_config',
    'BlockFetcher',
    'BlockChannel',
    'FetchOptions',
    'FetcherConfig',
    'FetcherLogger',
    'Block',
    'Transaction',
    'Message',
    'filter_messages',
    'BlockFetchException',
    'TooHighBlockRequested',
    'BlockFetchError',
    'TxDecodeError',
    'NodeClientError',
    'InvalidNodeAddress',
    'ConfigError',
    'FetchCancelled',
    'ChannelClosed',
]
