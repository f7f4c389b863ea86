"""
Interfaces for block fetching components.
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .channel import BlockChannel
from .options import FetchOptions
from ..types import Block


class BlockFetcherInterface(ABC):
    """Interface for block fetchers."""

    @abstractmethod
    def fetch_block(self, height: int = 0) -> Block:
        """
        Fetch one block.

        Args:
            height: Block height, 0 for the chain's highest block

        Returns:
            The block with decoded transactions

        Raises:
            TooHighBlockRequested: The height is above the chain tip
            BlockFetchError: Any other failure, including decoding
        """
        pass

    @abstractmethod
    def stream_blocks(self, from_height: int,
                      options: Optional[FetchOptions] = None) -> BlockChannel:
        """
        Start fetching blocks in the background.

        The returned channel has no buffer: the next block is fetched only
        after the previous one was taken. It is closed on cancellation.
        """
        pass

    @abstractmethod
    def consume_blocks(self, from_height: int,
                       on_block: Callable[[Block], None],
                       options: Optional[FetchOptions] = None) -> None:
        """
        Fetch blocks and pass each one to `on_block` on the calling thread.

        If `on_block` raises, the same height is fetched and handed over
        again, unless skip_on_error is set.

        Raises:
            FetchCancelled: When the cancellation event is set
        """
        pass
