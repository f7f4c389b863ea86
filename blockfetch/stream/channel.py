# blockfetch/stream/channel.py

import threading
import time
from typing import Iterator, Optional

from ..types import Block, ChannelClosed


# How often a blocked producer looks at its cancellation event
HANDOFF_POLL_INTERVAL = 0.05


class BlockChannel:
    """
    Unbuffered handoff between a fetch loop thread and one consumer.

    `put` returns only once the consumer has taken the block, so the
    producer never fetches the next height before the previous block was
    accepted. Iterating the channel yields blocks until it is closed.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._pending: Optional[Block] = None
        self._taken = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def put(self, block: Block, cancel: threading.Event) -> bool:
        """
        Hand a block to the consumer and wait until it is taken.

        Returns False if `cancel` was set or the channel was closed before
        the consumer took the block; the block is then withdrawn.
        """
        with self._cond:
            if self._closed:
                return False
            self._pending = block
            self._taken = False
            self._cond.notify_all()

            while not self._taken:
                if self._closed:
                    return False
                if cancel.is_set():
                    self._pending = None
                    return False
                self._cond.wait(HANDOFF_POLL_INTERVAL)
            return True

    def get(self, timeout: Optional[float] = None) -> Block:
        """
        Take the next block, blocking until one is offered.

        Raises:
            ChannelClosed: The channel was closed and nothing is pending
            TimeoutError: `timeout` seconds passed without a block
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            while self._pending is None:
                if self._closed:
                    raise ChannelClosed("channel closed")
                remaining = None if deadline is None else deadline - time.monotonic()
                if remaining is not None and remaining <= 0:
                    raise TimeoutError("no block received in time")
                self._cond.wait(remaining)

            block = self._pending
            self._pending = None
            self._taken = True
            self._cond.notify_all()
            return block

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._pending = None
            self._cond.notify_all()

    def __iter__(self) -> Iterator[Block]:
        while True:
            try:
                yield self.get()
            except ChannelClosed:
                return
