# topmark:header:start
#
#   project      : Moustache
#   file         : constants.py
#   file_relpath : src/moustache/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Moustache Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    MOUSTACHE_VERSION: str = get_version("moustache")
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    MOUSTACHE_VERSION = "0.0.0"

# Environment variable consulted for the runtime log level:
LOG_LEVEL_ENV_VAR: Final[str] = "MOUSTACHE_LOG_LEVEL"

# Name of the TOML table holding Moustache settings:
CONFIG_TABLE: Final[str] = "moustache"

# Pseudo keys answered by collections during key extraction:
KEY_COUNT: Final[str] = "count"
KEY_FIRST_OBJECT: Final[str] = "firstObject"
KEY_LAST_OBJECT: Final[str] = "lastObject"
KEY_ANY_OBJECT: Final[str] = "anyObject"
