# blockfetch/core/config.py

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import msgspec
import yaml
from dotenv import load_dotenv
from msgspec import Struct

from ..types.errors import ConfigError
from .logging import FetcherLogger


ENV_PREFIX = "BLOCKFETCH_"

logger = FetcherLogger.get_logger('core.config')


class FetcherConfig(Struct, frozen=True):
    node_url: str
    timeout: float = 30.0
    retry_interval: float = 1.0
    retry_last_block_interval: float = 1.0
    skip_on_error: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for name in ("timeout", "retry_interval", "retry_last_block_interval"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FetcherConfig":
        try:
            return msgspec.convert(dict(data), type=cls, strict=False)
        except (msgspec.ValidationError, ValueError) as e:
            raise ConfigError(f"Invalid fetcher configuration: {e}") from e

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None,
                 env_file: Optional[str] = None) -> "FetcherConfig":
        """
        Build the configuration from BLOCKFETCH_* environment variables.

        A .env file is loaded first when reading the process environment.
        """
        if env is None:
            load_dotenv(env_file)
            env = os.environ

        data: Dict[str, Any] = {}
        for field_name in cls.__struct_fields__:
            value = env.get(f"{ENV_PREFIX}{field_name.upper()}")
            if value is not None:
                data[field_name] = value

        if "node_url" not in data:
            raise ConfigError(f"{ENV_PREFIX}NODE_URL is not set")

        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "FetcherConfig":
        """Load configuration from a YAML or JSON file."""
        path = Path(path)
        logger.info(f"Loading configuration from {path}")
        try:
            text = path.read_text()
        except FileNotFoundError as e:
            raise ConfigError(f"Configuration file not found: {path}") from e

        if path.suffix == ".json":
            try:
                data = msgspec.json.decode(text)
            except msgspec.DecodeError as e:
                raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        else:
            try:
                data = yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration in {path} must be a mapping")

        return cls.from_dict(data)
