# topmark:header:start
#
#   project      : Moustache
#   file         : __init__.py
#   file_relpath : src/moustache/values/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The Moustache value model.

Public modules:
    - moustache.values.value: the `Value` tagged union.
    - moustache.values.capabilities: capability Protocols and `Cluster`.
    - moustache.values.filters: filter building blocks and `apply_filter`.
"""

from __future__ import annotations

from moustache.values.capabilities import (
    Cluster,
    Filter,
    KeyLookup,
    Renderable,
    TagObserver,
    build_cluster,
)
from moustache.values.filters import (
    BlockFilter,
    BlockRenderable,
    VariadicFilter,
    apply_filter,
)
from moustache.values.value import ScalarKind, Value, ValueKind

__all__ = [
    "BlockFilter",
    "BlockRenderable",
    "Cluster",
    "Filter",
    "KeyLookup",
    "Renderable",
    "ScalarKind",
    "TagObserver",
    "Value",
    "ValueKind",
    "VariadicFilter",
    "apply_filter",
    "build_cluster",
]
