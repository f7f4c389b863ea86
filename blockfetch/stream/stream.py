"""
Block fetch loop.

This module walks block heights forward one at a time, retries heights the
node cannot serve yet, and hands every fetched block to a delivery strategy:
an unbuffered channel drained by another thread, or a handler called on the
loop's own thread.
"""
import threading
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .channel import BlockChannel
from .options import FetchOptions
from ..core.logging import LoggingMixin
from ..types import Block, BlockFetchError, FetchCancelled, TooHighBlockRequested


BlockHandler = Callable[[Block], None]


class BlockDelivery(ABC):
    """How the loop passes a fetched block on."""

    @abstractmethod
    def deliver(self, block: Block, cancel: threading.Event) -> bool:
        """
        Pass the block on.

        Returns True when the block was accepted and the cursor may advance.
        An exception means the consumer rejected the block.
        """
        pass

    def close(self) -> None:
        pass


class ChannelDelivery(BlockDelivery):
    def __init__(self, channel: Optional[BlockChannel] = None):
        self.channel = channel or BlockChannel()

    def deliver(self, block: Block, cancel: threading.Event) -> bool:
        if self.channel.put(block, cancel):
            return True
        if self.channel.closed:
            # Consumer went away, nobody is left to take further blocks
            raise FetchCancelled(block.height)
        return False

    def close(self) -> None:
        self.channel.close()


class CallbackDelivery(BlockDelivery):
    def __init__(self, handler: BlockHandler):
        self.handler = handler

    def deliver(self, block: Block, cancel: threading.Event) -> bool:
        self.handler(block)
        return True


class FetchLoop(LoggingMixin):
    """
    Sequential fetch loop over block heights.

    The loop owns its cursor: it starts at max(1, from_height) and moves by
    one only after a block was accepted (or skipped, see skip_on_error).
    It runs until the cancellation event in `options` is set.
    """

    def __init__(self,
                 fetch_block: Callable[[int], Block],
                 from_height: int,
                 options: Optional[FetchOptions] = None):
        self.fetch_block = fetch_block
        self.options = options or FetchOptions()
        self.height = max(1, from_height)

    def run(self, delivery: BlockDelivery) -> None:
        """
        Run until cancelled or the delivery is closed, then close the delivery.

        Raises:
            FetchCancelled: Always, once the cancellation event is observed
                or the delivery reports its consumer is gone
        """
        opts = self.options
        self.log_info("Block fetching started", from_height=self.height)

        try:
            while True:
                if opts.cancel.is_set():
                    self.log_info("Block fetching cancelled", height=self.height)
                    raise FetchCancelled(self.height)

                try:
                    block = self.fetch_block(self.height)
                except TooHighBlockRequested:
                    self.log_debug("Block not produced yet", height=self.height)
                    opts.cancel.wait(opts.retry_last_block_interval)
                    continue
                except BlockFetchError as e:
                    self._report(e)
                    opts.cancel.wait(opts.retry_interval)
                    continue

                try:
                    accepted = delivery.deliver(block, opts.cancel)
                except FetchCancelled:
                    self.log_info("Block consumer closed", height=self.height)
                    raise
                except Exception as e:
                    self._report(e)
                    if not opts.skip_on_error:
                        opts.cancel.wait(opts.retry_interval)
                        continue
                    accepted = True

                if accepted:
                    self.log_debug("Block delivered", height=self.height)
                    self.height += 1
        finally:
            delivery.close()

    def _report(self, error: Exception) -> None:
        self.log_warning("Failed to process block", height=self.height, error=str(error))
        self.options.error_handler(self.height, error)


def start_channel_stream(fetch_block: Callable[[int], Block],
                         from_height: int,
                         options: Optional[FetchOptions] = None) -> BlockChannel:
    """Run a FetchLoop on a daemon thread and return the channel it fills."""
    loop = FetchLoop(fetch_block, from_height, options)
    delivery = ChannelDelivery()

    def worker() -> None:
        try:
            loop.run(delivery)
        except FetchCancelled:
            # Normal end of a channel stream, the channel is already closed
            pass

    thread = threading.Thread(
        target=worker,
        name=f"blockfetch-stream-{loop.height}",
        daemon=True,
    )
    thread.start()
    return delivery.channel


def run_callback_stream(fetch_block: Callable[[int], Block],
                        from_height: int,
                        on_block: BlockHandler,
                        options: Optional[FetchOptions] = None) -> None:
    """Run a FetchLoop on the calling thread. Returns only by raising FetchCancelled."""
    FetchLoop(fetch_block, from_height, options).run(CallbackDelivery(on_block))
