from .messages import filter_messages
from .convert_time import rfc3339_to_datetime

__all__ = [
    'filter_messages',
    'rfc3339_to_datetime',
]
