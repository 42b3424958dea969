# topmark:header:start
#
#   project      : Moustache
#   file         : model.py
#   file_relpath : src/moustache/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model.

This module defines:
    - `Config`: an immutable runtime snapshot.
    - `MutableConfig`: a mutable builder; it can be frozen into `Config` and
      thawed back for edits.

TOML parsing lives in `moustache.config.loaders` to keep this model import-light.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from moustache.config.logging import get_logger, parse_log_level, resolve_env_log_level

if TYPE_CHECKING:
    from collections.abc import Mapping

    from moustache.config.logging import MoustacheLogger

logger: MoustacheLogger = get_logger(__name__)

DEFAULT_KEY_SEPARATOR: str = "."


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        log_level (int | None): Logging level; ``None`` defers to the environment.
        color_enabled (bool): Whether log output is colorized.
        key_separator (str): Separator splitting a key path into single keys.
    """

    log_level: int | None = None
    color_enabled: bool = True
    key_separator: str = DEFAULT_KEY_SEPARATOR

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            log_level=self.log_level,
            color_enabled=self.color_enabled,
            key_separator=self.key_separator,
        )

    def split_key_path(self, path: str) -> list[str]:
        """Split a key path such as ``"user.friends.count"`` into keys.

        Empty segments are dropped, so ``""`` yields no keys.
        """
        return [part for part in path.split(self.key_separator) if part]


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Collects defaults, TOML settings and CLI overrides, then produces an
    immutable `Config` via `freeze`.
    """

    log_level: int | None = None
    color_enabled: bool = True
    key_separator: str = DEFAULT_KEY_SEPARATOR

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls()

    @classmethod
    def from_dict(cls, table: Mapping[str, Any]) -> MutableConfig:
        """Create a builder from a plain ``[moustache]`` table.

        Unknown keys are ignored with a warning; values of the wrong type keep
        the default.
        """
        draft = cls.from_defaults()
        draft.merge_dict(table)
        return draft

    def merge_dict(self, table: Mapping[str, Any]) -> MutableConfig:
        """Overlay the keys of ``table`` onto this builder (last wins).

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        for key, raw in table.items():
            if key == "log_level":
                level = parse_log_level(raw) if isinstance(raw, (str, int)) else None
                if level is None:
                    logger.warning("Ignoring invalid log_level: %r", raw)
                else:
                    self.log_level = level
            elif key == "color":
                if isinstance(raw, bool):
                    self.color_enabled = raw
                else:
                    logger.warning("Ignoring non-boolean color setting: %r", raw)
            elif key == "key_separator":
                if isinstance(raw, str) and raw:
                    self.key_separator = raw
                else:
                    logger.warning("Ignoring invalid key_separator: %r", raw)
            else:
                logger.warning("Unknown configuration key: %s", key)
        return self

    def apply_env(self) -> MutableConfig:
        """Overlay environment settings (MOUSTACHE_LOG_LEVEL) onto this builder.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        level = resolve_env_log_level()
        if level is not None:
            self.log_level = level
        return self

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            log_level=self.log_level,
            color_enabled=self.color_enabled,
            key_separator=self.key_separator,
        )
