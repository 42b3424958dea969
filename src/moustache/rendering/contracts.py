# topmark:header:start
#
#   project      : Moustache
#   file         : contracts.py
#   file_relpath : src/moustache/rendering/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for the rendering engine boundary (engine-facing).

The template engine that parses templates and walks their tags lives outside
this package. It talks to values through two collaborators, described here as
Protocols:

Tag
    A parsed template directive. ``type`` says whether it is a variable tag
    (``{{name}}``) or a section tag (``{{#name}}...{{/name}}``); ``render``
    renders the tag's inner content against a given context. Values call it to
    render section bodies.

RenderingContext
    The scope stack. Values push themselves onto it with
    ``extended_context(value=...)`` before rendering a section body, and
    capability objects push tag observers with
    ``extended_context(tag_observer=...)``.

`moustache.rendering.context.Context` is a reference implementation of
`RenderingContext`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from moustache.rendering.types import Rendering, TagType
    from moustache.values.capabilities import TagObserver
    from moustache.values.value import Value


class RenderingContext(Protocol):
    """Protocol for the scope stack a tag renders against."""

    def extended_context(
        self,
        value: Value | None = None,
        tag_observer: TagObserver | None = None,
    ) -> RenderingContext:
        """Return a new context with ``value`` and/or ``tag_observer`` pushed on top.

        The receiver is left unchanged.
        """
        ...

    @property
    def tag_observers(self) -> Iterator[TagObserver]:
        """Iterate tag observers from the innermost to the outermost."""
        ...

    def __getitem__(self, key: str) -> Value:
        """Resolve ``key`` against the scopes, innermost first."""
        ...


class Tag(Protocol):
    """Protocol for a parsed template tag."""

    @property
    def type(self) -> TagType:
        """Whether this is a variable or a section tag."""
        ...

    def render(self, context: RenderingContext) -> Rendering:
        """Render the tag's inner content against ``context``.

        Raises on failure; values propagate the exception unchanged.
        """
        ...
