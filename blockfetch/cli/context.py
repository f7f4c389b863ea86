# blockfetch/cli/context.py

from typing import Optional

import click

from ..core.config import FetcherConfig
from ..core.logging import FetcherLogger
from ..fetcher import BlockFetcher, create_fetcher
from ..types import ConfigError, InvalidNodeAddress


class CLIContext:
    """
    Resolves configuration for CLI commands and builds the fetcher lazily.

    Precedence: --node/--timeout flags, then --config file, then BLOCKFETCH_* env.
    """

    def __init__(self, node_url: Optional[str] = None,
                 config_path: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.logger = FetcherLogger.get_logger('cli.context')
        self.node_url = node_url
        self.config_path = config_path
        self.timeout = timeout
        self._config: Optional[FetcherConfig] = None
        self._fetcher: Optional[BlockFetcher] = None

    @property
    def config(self) -> FetcherConfig:
        if self._config is None:
            self._config = self._load_config()
        return self._config

    @property
    def fetcher(self) -> BlockFetcher:
        if self._fetcher is None:
            config = self.config
            try:
                self._fetcher = create_fetcher(config.node_url, timeout=config.timeout)
            except InvalidNodeAddress as e:
                raise click.ClickException(str(e))
        return self._fetcher

    def _load_config(self) -> FetcherConfig:
        overrides = {}
        if self.node_url:
            overrides['node_url'] = self.node_url
        if self.timeout is not None:
            overrides['timeout'] = self.timeout

        try:
            if self.config_path:
                base = FetcherConfig.from_file(self.config_path)
                data = {f: getattr(base, f) for f in FetcherConfig.__struct_fields__}
                data.update(overrides)
                return FetcherConfig.from_dict(data)
            if 'node_url' in overrides:
                return FetcherConfig.from_dict(overrides)
            return FetcherConfig.from_env()
        except ConfigError as e:
            raise click.ClickException(str(e))
