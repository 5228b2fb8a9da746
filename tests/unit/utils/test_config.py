"""Unit tests for configuration utilities in config.py

Test coverage includes:

1. Environment variable resolution
   - config_path(), shard_id() and log_level() read environment variables.

2. Precedence
   - Environment variables override the YAML file, which overrides defaults.

3. YAML loading
   - load_config() parses a YAML mapping.
   - Missing implicit files fall back to an empty configuration.
   - Missing explicit files raise FileNotFoundError.
   - Non-mapping documents raise BadConfigurationError.
"""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from shardshortener.constants import ENV
from shardshortener.exceptions import BadConfigurationError
from shardshortener.utils import config


@pytest.fixture(autouse=True)
def _env(monkeypatch: MonkeyPatch) -> None:
    """Start every test from a clean environment."""
    for name in (ENV.App.LOG_LEVEL, ENV.App.CONFIG_PATH, ENV.Generator.SHARD_ID):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / 'shortener.yml'
    path.write_text('shard_id: B3\nlog_level: debug\n', encoding='utf-8')
    return path


# -------------------------------
# 1. Environment variable resolution
# -------------------------------


def test_config_path_not_set() -> None:
    assert config.config_path() is None


def test_config_path(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv(ENV.App.CONFIG_PATH, '/monkey/shortener.yml')
    assert config.config_path() == Path('/monkey/shortener.yml')


def test_shard_id_defaults_to_a0() -> None:
    assert config.shard_id() == 'A0'
    assert config.shard_id({}) == 'A0'


def test_log_level_defaults_to_info() -> None:
    assert config.log_level() == 'INFO'


# -------------------------------
# 2. Precedence
# -------------------------------


def test_shard_id_from_config() -> None:
    assert config.shard_id({'shard_id': 'B3'}) == 'B3'


def test_shard_id_environment_overrides_config(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv(ENV.Generator.SHARD_ID, 'C4')
    assert config.shard_id({'shard_id': 'B3'}) == 'C4'


def test_log_level_environment_overrides_config(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv(ENV.App.LOG_LEVEL, 'warning')
    assert config.log_level({'log_level': 'debug'}) == 'WARNING'


# -------------------------------
# 3. YAML loading
# -------------------------------


def test_load_config_without_file_returns_empty_dict() -> None:
    assert config.load_config() == {}


def test_load_config_explicit_path(config_file: Path) -> None:
    data = config.load_config(config_file)
    assert data == {'shard_id': 'B3', 'log_level': 'debug'}
    assert config.shard_id(data) == 'B3'
    assert config.log_level(data) == 'DEBUG'


def test_load_config_from_environment(monkeypatch: MonkeyPatch, config_file: Path) -> None:
    monkeypatch.setenv(ENV.App.CONFIG_PATH, str(config_file))
    assert config.load_config() == {'shard_id': 'B3', 'log_level': 'debug'}


def test_load_config_missing_implicit_file_returns_empty_dict(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(ENV.App.CONFIG_PATH, str(tmp_path / 'missing.yml'))
    assert config.load_config() == {}


def test_load_config_missing_explicit_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        config.load_config(tmp_path / 'missing.yml')


def test_load_config_empty_file_returns_empty_dict(tmp_path: Path) -> None:
    path = tmp_path / 'empty.yml'
    path.write_text('', encoding='utf-8')
    assert config.load_config(path) == {}


def test_load_config_non_mapping_raises(tmp_path: Path) -> None:
    path = tmp_path / 'list.yml'
    path.write_text('- A0\n- B1\n', encoding='utf-8')
    with pytest.raises(BadConfigurationError, match='must contain a mapping'):
        config.load_config(path)
