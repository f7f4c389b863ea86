from .options import FetchOptions, ErrorHandler, ignore_error
from .channel import BlockChannel
from .stream import (
    BlockDelivery,
    ChannelDelivery,
    CallbackDelivery,
    FetchLoop,
    start_channel_stream,
    run_callback_stream,
)
from .interfaces import BlockFetcherInterface

__all__ = [
    'FetchOptions',
    'ErrorHandler',
    'ignore_error',
    'BlockChannel',
    'BlockDelivery',
    'ChannelDelivery',
    'CallbackDelivery',
    'FetchLoop',
    'start_channel_stream',
    'run_callback_stream',
    'BlockFetcherInterface',
]
