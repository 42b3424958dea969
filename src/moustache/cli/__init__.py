# topmark:header:start
#
#   project      : Moustache
#   file         : __init__.py
#   file_relpath : src/moustache/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command line interface for Moustache (``moustache``)."""

from __future__ import annotations
