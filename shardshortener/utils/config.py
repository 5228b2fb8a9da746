"""Utility functions for application configuration management.

Configuration is read from environment variables, optionally backed by a
YAML file. Environment variables always win over the file, and the file
wins over built-in defaults.

The YAML file follows this structure:

    shard_id: B3
    log_level: DEBUG

Functions:
    config_path() -> Path | None
        Return the YAML config path from `SHORTENER_CONFIG`, or None.

    load_config(path: str | Path | None = None) -> dict
        Load the YAML configuration file as a Python dictionary.

    shard_id(config: dict | None = None) -> str
        Return the shard id for this process, defaulting to `'A0'`.

    log_level(config: dict | None = None) -> str
        Return the log level for this process, defaulting to `'INFO'`.

Example:
    >>> from shardshortener.utils.config import load_config, shard_id
    >>> os.environ['SHARD_ID'] = 'C4'
    >>> shard_id(load_config())
    'C4'
"""

import os
import logging
from pathlib import Path
from typing import Any

import yaml

from shardshortener.constants import ENV, DefaultConfig
from shardshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


def config_path() -> Path | None:
    path = os.environ.get(ENV.App.CONFIG_PATH)
    return Path(path) if path else None


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load the shortener configuration from a YAML file

    Args:
        path (str | Path | None):
            Explicit path to the YAML file. Falls back to `SHORTENER_CONFIG`.

    Returns:
        dict: Parsed configuration. Empty when no file is configured, or when
              the file named by `SHORTENER_CONFIG` does not exist.

    Raises:
        FileNotFoundError:
            If an explicit `path` is given and the file does not exist.
        BadConfigurationError:
            If the file does not contain a YAML mapping.
    """
    explicit = path is not None
    path = Path(path) if explicit else config_path()
    if path is None:
        return {}

    if not path.is_file():
        if explicit:
            raise FileNotFoundError(f'Configuration file {path} does not exist.')
        logger.warning('Configuration file not found. Using defaults.', extra={'configPath': str(path)})
        return {}

    with path.open('r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadConfigurationError(f'Configuration file {path} must contain a mapping (given type: {type(data).__name__}).')

    logger.debug('Loaded configuration file.', extra={'configPath': str(path)})
    return data


def shard_id(config: dict[str, Any] | None = None) -> str:
    """Return the shard id for this process

    NOTE: the value is not validated here. ShardedCodeGenerator rejects
          malformed shard ids at construction.

    Example:
        >>> shard_id({'shard_id': 'B3'})
        'B3'
        >>> shard_id()
        'A0'
    """
    value = os.environ.get(ENV.Generator.SHARD_ID) or (config or {}).get('shard_id')
    return str(value) if value else DefaultConfig.SHARD_ID


def log_level(config: dict[str, Any] | None = None) -> str:
    value = os.environ.get(ENV.App.LOG_LEVEL) or (config or {}).get('log_level')
    return str(value).upper() if value else DefaultConfig.LOG_LEVEL
