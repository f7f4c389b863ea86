from .logging import FetcherLogger, LoggingMixin, log_with_context
from .config import FetcherConfig

__all__ = [
    'FetcherLogger',
    'LoggingMixin',
    'log_with_context',
    'FetcherConfig',
]
