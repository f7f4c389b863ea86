from typing import Iterable, List

from ..types import Message


def filter_messages(messages: Iterable[Message], kinds: Iterable[str]) -> List[Message]:
    """
    Return the messages whose kind is one of `kinds`, keeping their order.

    An empty `kinds` matches nothing.
    """
    wanted = set(kinds)
    if not wanted:
        return []
    return [msg for msg in messages if msg.kind in wanted]
