# topmark:header:start
#
#   project      : Moustache
#   file         : test_config_loaders.py
#   file_relpath : tests/config/test_config_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading configuration from TOML text."""

from __future__ import annotations

import logging

import pytest

from moustache.config.loaders import (
    extract_settings_table,
    load_config_from_toml_text,
    parse_toml_text,
)
from moustache.config.model import Config
from moustache.constants import LOG_LEVEL_ENV_VAR
from moustache.core.errors import ConfigError, ErrorCode
from tests.conftest import parametrize


def test_moustache_table() -> None:
    text = '[moustache]\nlog_level = "INFO"\ncolor = false\nkey_separator = "/"\n'
    config = load_config_from_toml_text(text)
    assert config == Config(log_level=logging.INFO, color_enabled=False, key_separator="/")


def test_pyproject_tool_table() -> None:
    text = '[project]\nname = "demo"\n\n[tool.moustache]\nkey_separator = ":"\n'
    assert load_config_from_toml_text(text).key_separator == ":"


def test_top_level_table_wins_over_tool_table() -> None:
    data = parse_toml_text('[moustache]\ncolor = true\n[tool.moustache]\ncolor = false\n')
    assert extract_settings_table(data) == {"color": True}


def test_missing_table_yields_defaults() -> None:
    assert load_config_from_toml_text('[other]\nkey = 1\n') == Config()
    assert load_config_from_toml_text("") == Config()


def test_invalid_toml_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="Invalid TOML") as excinfo:
        load_config_from_toml_text("[moustache\n")
    assert excinfo.value.code is ErrorCode.CONFIG_ERROR


def test_non_table_settings_raise_config_error() -> None:
    with pytest.raises(ConfigError, match="must be a table"):
        load_config_from_toml_text("moustache = 3\n")


@parametrize("text", ["tool = 1\n", 'tool = "moustache"\n', "tool = [1, 2]\n"])
def test_non_table_tool_key_yields_defaults(text: str) -> None:
    """A ``tool`` key that is not a table holds no settings."""
    assert load_config_from_toml_text(text, apply_env=False) == Config()


def test_environment_overrides_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "ERROR")
    text = '[moustache]\nlog_level = "DEBUG"\n'
    assert load_config_from_toml_text(text).log_level == logging.ERROR
    assert load_config_from_toml_text(text, apply_env=False).log_level == logging.DEBUG
