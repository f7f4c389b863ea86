# blockfetch/decode/transaction_decoder.py

from typing import Any, Dict, List, Optional

import msgspec
from msgspec import Struct, field

from .interfaces import TransactionDecoderInterface
from ..types import Message, Transaction


class AminoMsg(Struct):
    type: str
    value: Dict[str, Any] = field(default_factory=dict)


class StdTxValue(Struct):
    msg: List[AminoMsg] = field(default_factory=list)
    memo: str = ""


class StdTx(Struct):
    """Legacy amino-JSON envelope: {"type": "cosmos-sdk/StdTx", "value": {...}}"""
    type: str
    value: StdTxValue


class TxBody(Struct):
    messages: List[Dict[str, Any]] = field(default_factory=list)
    memo: str = ""


class ProtoJsonTx(Struct):
    """Proto-JSON transaction: {"body": {"messages": [{"@type": ...}]}}"""
    body: TxBody


class JsonTxDecoder(TransactionDecoderInterface):
    """
    Decoder for JSON encoded transactions.

    Accepts the legacy amino-JSON `StdTx` (wrapped in its type envelope or
    bare) and the proto-JSON `Tx` shape. Chains that put protobuf binary
    transactions into blocks need their own TransactionDecoderInterface.
    """

    def decode(self, tx_bytes: bytes) -> Transaction:
        raw = msgspec.json.decode(tx_bytes)
        if not isinstance(raw, dict):
            raise ValueError(f"transaction must be a JSON object, got {type(raw).__name__}")

        if "body" in raw:
            return self._from_proto_json(msgspec.convert(raw, type=ProtoJsonTx))

        if "type" in raw and "value" in raw:
            return self._from_std_tx(msgspec.convert(raw, type=StdTx).value)

        if "msg" in raw:
            return self._from_std_tx(msgspec.convert(raw, type=StdTxValue))

        raise ValueError("unrecognised transaction layout")

    def _from_std_tx(self, tx: StdTxValue) -> Transaction:
        messages = tuple(Message(kind=m.type, value=m.value) for m in tx.msg)
        return Transaction(messages=messages, memo=tx.memo)

    def _from_proto_json(self, tx: ProtoJsonTx) -> Transaction:
        messages = []
        for raw_msg in tx.body.messages:
            kind: Optional[str] = raw_msg.get("@type")
            if not kind:
                raise ValueError("message without @type")
            value = {k: v for k, v in raw_msg.items() if k != "@type"}
            messages.append(Message(kind=kind, value=value))
        return Transaction(messages=tuple(messages), memo=tx.body.memo)
