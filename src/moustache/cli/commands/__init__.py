# topmark:header:start
#
#   project      : Moustache
#   file         : __init__.py
#   file_relpath : src/moustache/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Moustache CLI subcommands."""

from __future__ import annotations
