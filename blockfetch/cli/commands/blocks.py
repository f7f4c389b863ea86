# blockfetch/cli/commands/blocks.py

"""
Block CLI Commands

Fetch one block, or follow the chain from a height.
"""

import threading
from collections import Counter

import click

from ...stream import FetchOptions
from ...types import BlockFetchException, TooHighBlockRequested
from ...utils import filter_messages


@click.command()
@click.argument('height', type=click.IntRange(min=0), default=0)
@click.pass_context
def block(ctx, height):
    """Fetch one block and print its messages

    HEIGHT defaults to 0, the chain's highest block.

    Examples:
        block
        block 3009
    """
    cli_context = ctx.obj['cli_context']

    try:
        b = cli_context.fetcher.fetch_block(height)
    except TooHighBlockRequested:
        raise click.ClickException(f"Block {height} has not been produced yet")
    except BlockFetchException as e:
        raise click.ClickException(str(e))

    time = b.time.isoformat() if b.time else "-"
    click.echo(f"Block {b.height} at {time}: {len(b.transactions)} transactions")

    for kind, count in sorted(Counter(m.kind for m in b.messages()).items()):
        click.echo(f"  {kind}: {count}")


@click.command()
@click.argument('from_height', type=click.IntRange(min=0), default=0)
@click.option('--kind', 'kinds', multiple=True, help='Only count messages of this kind (repeatable)')
@click.option('--limit', type=click.IntRange(min=1), help='Stop after this many blocks')
@click.pass_context
def stream(ctx, from_height, kinds, limit):
    """Follow the chain starting at FROM_HEIGHT

    Prints one line per block. Stop with Ctrl-C.

    Examples:
        stream 1000
        stream 1000 --kind cosmos-sdk/MsgSend --limit 10
    """
    cli_context = ctx.obj['cli_context']
    config = cli_context.config
    cancel = threading.Event()

    def on_error(height, error):
        click.echo(f"got an error on height {height}: {error}", err=True)

    options = FetchOptions.from_config(config, error_handler=on_error, cancel=cancel)
    channel = cli_context.fetcher.stream_blocks(from_height, options)

    seen = 0
    try:
        for b in channel:
            msgs = b.messages()
            if kinds:
                msgs = filter_messages(msgs, kinds)
            click.echo(f"block {b.height}: {len(b.transactions)} txs, {len(msgs)} messages")

            seen += 1
            if limit and seen >= limit:
                break
    except KeyboardInterrupt:
        click.echo("interrupted", err=True)
    finally:
        cancel.set()
