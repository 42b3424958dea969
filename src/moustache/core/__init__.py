# topmark:header:start
#
#   project      : Moustache
#   file         : __init__.py
#   file_relpath : src/moustache/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic helpers shared by the value model and the CLI."""

from __future__ import annotations
