# tests/test_cli.py

import pytest
from click.testing import CliRunner

from blockfetch.cli.__main__ import cli
from blockfetch.fetcher import BlockFetcher

from conftest import FakeNodeClient, encode_tx


@pytest.fixture
def fake_node(monkeypatch):
    node = FakeNodeClient(tip=20)
    node.txs[3] = [encode_tx("bank/Send", "pdv/Create"), encode_tx("pdv/Create")]

    def fake_create_fetcher(node_url, timeout=30.0, decoder=None):
        return BlockFetcher(node, decoder)

    monkeypatch.setattr("blockfetch.cli.context.create_fetcher", fake_create_fetcher)
    return node


def test_block_command_prints_summary(fake_node):
    result = CliRunner().invoke(cli, ["--node", "http://node:26657", "block", "3"], obj={})

    assert result.exit_code == 0, result.output
    assert "Block 3 at 2021-02-21T17:40:08.123456+00:00: 2 transactions" in result.output
    assert "pdv/Create: 2" in result.output
    assert "bank/Send: 1" in result.output


def test_block_command_latest(fake_node):
    result = CliRunner().invoke(cli, ["--node", "http://node:26657", "block"], obj={})

    assert result.exit_code == 0, result.output
    assert "Block 20 " in result.output


def test_block_command_too_high(fake_node):
    result = CliRunner().invoke(cli, ["--node", "http://node:26657", "block", "99"], obj={})

    assert result.exit_code != 0
    assert "has not been produced yet" in result.output


def test_stream_command_with_limit_and_kind(fake_node):
    result = CliRunner().invoke(
        cli,
        ["--node", "http://node:26657", "stream", "2", "--limit", "3", "--kind", "pdv/Create"],
        obj={},
    )

    assert result.exit_code == 0, result.output
    lines = [line for line in result.output.splitlines() if line.startswith("block ")]
    assert lines == [
        "block 2: 1 txs, 0 messages",
        "block 3: 2 txs, 2 messages",
        "block 4: 1 txs, 0 messages",
    ]


def test_missing_node_is_reported(monkeypatch):
    monkeypatch.delenv("BLOCKFETCH_NODE_URL", raising=False)
    monkeypatch.setattr("blockfetch.core.config.load_dotenv", lambda *a, **k: False)

    result = CliRunner().invoke(cli, ["block", "1"], obj={})

    assert result.exit_code != 0
    assert "BLOCKFETCH_NODE_URL" in result.output
