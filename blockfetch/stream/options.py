# blockfetch/stream/options.py

import threading
from typing import Callable

from msgspec import Struct, field, structs

from ..core.config import FetcherConfig


ErrorHandler = Callable[[int, Exception], None]


def ignore_error(height: int, error: Exception) -> None:
    pass


class FetchOptions(Struct, frozen=True):
    """
    Settings for a block stream.

    Attributes:
        retry_last_block_interval: Seconds to wait after asking for a block
            the node has not produced yet.
        retry_interval: Seconds to wait after any other failure.
        error_handler: Called with (height, error) for every failure except
            "block not produced yet".
        cancel: Event the loop watches; setting it stops the stream.
        skip_on_error: Callback mode only. Advance past a height even when
            the block handler raised.
    """
    retry_last_block_interval: float = 1.0
    retry_interval: float = 1.0
    error_handler: ErrorHandler = ignore_error
    cancel: threading.Event = field(default_factory=threading.Event)
    skip_on_error: bool = False

    def with_retry_last_block_interval(self, seconds: float) -> "FetchOptions":
        return structs.replace(self, retry_last_block_interval=seconds)

    def with_retry_interval(self, seconds: float) -> "FetchOptions":
        return structs.replace(self, retry_interval=seconds)

    def with_error_handler(self, handler: ErrorHandler) -> "FetchOptions":
        return structs.replace(self, error_handler=handler)

    def with_cancel(self, cancel: threading.Event) -> "FetchOptions":
        return structs.replace(self, cancel=cancel)

    def with_skip_on_error(self, skip: bool = True) -> "FetchOptions":
        return structs.replace(self, skip_on_error=skip)

    @classmethod
    def from_config(cls, config: FetcherConfig, **overrides) -> "FetchOptions":
        options = cls(
            retry_last_block_interval=config.retry_last_block_interval,
            retry_interval=config.retry_interval,
            skip_on_error=config.skip_on_error,
        )
        return structs.replace(options, **overrides) if overrides else options
