# topmark:header:start
#
#   project      : Moustache
#   file         : __init__.py
#   file_relpath : src/moustache/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering primitives shared by values and the (external) engine.

Public modules:
    - moustache.rendering.types
    - moustache.rendering.contracts
    - moustache.rendering.context
    - moustache.rendering.info
    - moustache.rendering.dispatch

This package is kept import-light: `moustache.values` depends on
`moustache.rendering.types` at import time.
"""

from __future__ import annotations
