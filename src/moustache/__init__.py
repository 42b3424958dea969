# topmark:header:start
#
#   project      : Moustache
#   file         : __init__.py
#   file_relpath : src/moustache/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Moustache package.

Moustache is the value model and rendering dispatch core of a Mustache-style
template engine. Host data (scalars, mappings, sequences, sets and objects that
opt into rendering capabilities) is erased into one immutable `Value` type that
knows how to answer key lookups, truthiness and how to render itself for a tag.

The template parser, the engine that walks parsed tags and template loading
live outside this package; see `moustache.rendering.contracts` for the
boundary they implement.
"""

from __future__ import annotations
