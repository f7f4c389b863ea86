# blockfetch/cli/__main__.py

"""
Block Fetcher CLI Tool

Usage: python -m blockfetch.cli [--node URL | --config FILE] [command] [options]
"""

import click

from blockfetch.cli.context import CLIContext
from blockfetch.core.logging import FetcherLogger


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--node', envvar='BLOCKFETCH_NODE_URL', help='Node RPC address, e.g. http://localhost:26657')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='YAML or JSON configuration file')
@click.option('--timeout', type=float, help='Request timeout in seconds')
@click.pass_context
def cli(ctx, verbose, node, config_path, timeout):
    """Block Fetcher CLI - read blocks from a ledger node

    Fetch single blocks or follow the chain block by block.
    """
    ctx.ensure_object(dict)

    FetcherLogger.configure(
        log_level="DEBUG" if verbose else "INFO",
        console_enabled=True,
        structured_format=verbose,
    )

    ctx.obj['cli_context'] = CLIContext(node_url=node, config_path=config_path, timeout=timeout)


from blockfetch.cli.commands.blocks import block, stream

cli.add_command(block)
cli.add_command(stream)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
