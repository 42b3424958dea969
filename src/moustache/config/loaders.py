# topmark:header:start
#
#   project      : Moustache
#   file         : loaders.py
#   file_relpath : src/moustache/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load Moustache settings from TOML text.

Parsing is done with `tomlkit` and unwrapped into plain `dict` structures.
Settings live either in a top-level ``[moustache]`` table or, for
``pyproject.toml`` content, under ``[tool.moustache]``. Reading the text is
left to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from moustache.config.logging import get_logger
from moustache.config.model import Config, MutableConfig
from moustache.constants import CONFIG_TABLE
from moustache.core.errors import ConfigError

if TYPE_CHECKING:
    from moustache.config.logging import MoustacheLogger

logger: MoustacheLogger = get_logger(__name__)


def parse_toml_text(text: str) -> dict[str, Any]:
    """Parse a TOML document into a plain dict.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML: {exc}") from exc


def extract_settings_table(data: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[moustache]`` or ``[tool.moustache]`` table, empty if absent."""
    table: Any = data.get(CONFIG_TABLE)
    if table is None:
        tool: Any = data.get("tool")
        table = tool.get(CONFIG_TABLE) if isinstance(tool, dict) else None
    if table is None:
        logger.debug("No [%s] table found; using defaults", CONFIG_TABLE)
        return {}
    if not isinstance(table, dict):
        raise ConfigError(f"[{CONFIG_TABLE}] must be a table, got {type(table).__name__}")
    return table


def load_config_from_toml_text(text: str, *, apply_env: bool = True) -> Config:
    """Build a frozen `Config` from TOML text.

    Args:
        text (str): TOML document.
        apply_env (bool): Overlay environment settings after the document.

    Returns:
        Config: The effective configuration.
    """
    draft: MutableConfig = MutableConfig.from_dict(extract_settings_table(parse_toml_text(text)))
    if apply_env:
        draft.apply_env()
    logger.trace("Loaded configuration: %s", draft)
    return draft.freeze()
