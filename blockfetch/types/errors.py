# blockfetch/types/errors.py

from typing import Any, Optional


# Phrase the node puts in its error when the requested height is above the chain tip.
TOO_HIGH_BLOCK_PHRASE = "must be less than or equal"


class BlockFetchException(Exception):
    """Base class for every error raised by blockfetch."""


class TooHighBlockRequested(BlockFetchException):
    """The requested height has not been produced yet."""

    def __init__(self, message: str = "too high block requested"):
        super().__init__(message)


class BlockFetchError(BlockFetchException):
    """A block could not be fetched. The underlying error is chained as ``__cause__``."""

    def __init__(self, message: str, height: Optional[int] = None):
        super().__init__(message)
        self.height = height


class TxDecodeError(BlockFetchError):
    """A transaction inside an otherwise valid block could not be decoded."""

    def __init__(self, message: str, height: Optional[int] = None, tx_index: Optional[int] = None):
        super().__init__(message, height)
        self.tx_index = tx_index


class NodeClientError(BlockFetchException):
    """Transport or JSON-RPC level failure reported by the node client."""

    def __init__(self, message: str, code: Optional[int] = None, data: Any = None):
        self.message = message
        self.code = code
        self.data = data
        super().__init__(self._render())

    def _render(self) -> str:
        parts = [self.message]
        if self.code is not None:
            parts.insert(0, f"[{self.code}]")
        if self.data:
            parts.append(f"({self.data})")
        return " ".join(parts)


class InvalidNodeAddress(BlockFetchException, ValueError):
    """The node address cannot be turned into an HTTP endpoint."""


class ConfigError(BlockFetchException, ValueError):
    """Configuration could not be loaded or is invalid."""


class FetchCancelled(BlockFetchException):
    """The fetch loop observed its cancellation signal and stopped."""

    def __init__(self, height: Optional[int] = None):
        super().__init__("block fetching cancelled")
        self.height = height


class ChannelClosed(BlockFetchException):
    """Raised when pulling from a closed and drained block channel."""


def is_too_high_block_error(error: BaseException) -> bool:
    """
    Tell whether a node error means "height is above the current chain height".

    The node exposes no structured code for this case, so the check matches
    the error text. Keep the match exactly this narrow.
    """
    return TOO_HIGH_BLOCK_PHRASE in str(error)
