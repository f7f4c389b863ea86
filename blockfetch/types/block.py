# blockfetch/types/block.py

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from msgspec import Struct, field


class Message(Struct, frozen=True):
    kind: str  # type tag, e.g. "cosmos-sdk/MsgSend" or "/cosmos.bank.v1beta1.MsgSend"
    value: Dict[str, Any] = field(default_factory=dict)


class Transaction(Struct, frozen=True):
    messages: Tuple[Message, ...] = ()
    memo: str = ""


class Block(Struct, frozen=True):
    height: int
    transactions: Tuple[Transaction, ...] = ()
    time: Optional[datetime] = None

    def messages(self) -> List[Message]:
        """All messages of all transactions, in transaction order."""
        msgs: List[Message] = []
        for tx in self.transactions:
            msgs.extend(tx.messages)
        return msgs
