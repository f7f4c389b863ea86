# tests/test_decoder.py

import json

import msgspec
import pytest

from blockfetch.decode import JsonTxDecoder
from blockfetch.types import Message


@pytest.fixture
def decoder():
    return JsonTxDecoder()


def test_decode_amino_envelope(decoder):
    raw = {
        "type": "cosmos-sdk/StdTx",
        "value": {
            "msg": [
                {"type": "pdv/DistributeRewards", "value": {"rewards": [{"id": 1613929528}]}},
                {"type": "cosmos-sdk/MsgSend", "value": {"amount": []}},
            ],
            "fee": {"gas": "200000"},
            "memo": "hello",
        },
    }

    tx = decoder(json.dumps(raw).encode())

    assert tx.memo == "hello"
    assert tx.messages == (
        Message("pdv/DistributeRewards", {"rewards": [{"id": 1613929528}]}),
        Message("cosmos-sdk/MsgSend", {"amount": []}),
    )


def test_decode_bare_std_tx(decoder):
    raw = {"msg": [{"type": "gov/MsgVote", "value": {"option": "Yes"}}]}

    tx = decoder.decode(json.dumps(raw).encode())

    assert [m.kind for m in tx.messages] == ["gov/MsgVote"]
    assert tx.memo == ""


def test_decode_proto_json(decoder):
    raw = {
        "body": {
            "messages": [
                {"@type": "/cosmos.bank.v1beta1.MsgSend", "from_address": "a", "to_address": "b"},
            ],
            "memo": "m",
        },
        "auth_info": {},
        "signatures": [],
    }

    tx = decoder.decode(json.dumps(raw).encode())

    assert tx.messages == (
        Message("/cosmos.bank.v1beta1.MsgSend", {"from_address": "a", "to_address": "b"}),
    )
    assert tx.memo == "m"


def test_decode_proto_json_requires_type(decoder):
    raw = {"body": {"messages": [{"from_address": "a"}]}}

    with pytest.raises(ValueError):
        decoder.decode(json.dumps(raw).encode())


@pytest.mark.parametrize("payload", [b"\x0a\x02\x08\x01", b"[1, 2]", b'{"fee": {}}'])
def test_decode_rejects_unknown_payloads(decoder, payload):
    with pytest.raises((msgspec.DecodeError, ValueError)):
        decoder.decode(payload)


def test_decode_rejects_wrong_field_types(decoder):
    raw = {"msg": [{"type": 5}]}

    with pytest.raises(msgspec.ValidationError):
        decoder.decode(json.dumps(raw).encode())
