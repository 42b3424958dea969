# topmark:header:start
#
#   project      : Moustache
#   file         : __init__.py
#   file_relpath : src/moustache/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for Moustache.

Public modules:
    - moustache.config.logging
    - moustache.config.model
    - moustache.config.loaders
"""

from __future__ import annotations

from moustache.config.loaders import load_config_from_toml_text
from moustache.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
    "load_config_from_toml_text",
]
