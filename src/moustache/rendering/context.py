# topmark:header:start
#
#   project      : Moustache
#   file         : context.py
#   file_relpath : src/moustache/rendering/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reference implementation of the rendering context stack.

A `Context` is an immutable linked stack: extending it returns a new context
whose parent is the receiver, so sibling sections never see each other's
scopes and a context can be shared between concurrent renders.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from moustache.values.value import Value

if TYPE_CHECKING:
    from collections.abc import Iterator

    from moustache.values.capabilities import TagObserver


class Context:
    """Immutable stack of scopes and tag observers."""

    __slots__ = ("_parent", "_scope", "_tag_observer")

    def __init__(
        self,
        *scopes: object,
        _parent: Context | None = None,
        _tag_observer: TagObserver | None = None,
    ) -> None:
        """Create a context.

        Args:
            *scopes (object): Root scopes, outermost first. Non-`Value` objects
                are wrapped with `Value`.
        """
        parent: Context | None = _parent
        for scope in scopes[:-1]:
            parent = Context(scope, _parent=parent)
        self._parent: Context | None = parent
        self._scope: Value | None = Value(scopes[-1]) if scopes else None
        self._tag_observer: TagObserver | None = _tag_observer

    def extended_context(
        self,
        value: Value | None = None,
        tag_observer: TagObserver | None = None,
    ) -> Context:
        """Return a new context with ``value`` and/or ``tag_observer`` on top."""
        context: Context = self
        if value is not None:
            context = Context(value, _parent=context)
        if tag_observer is not None:
            context = Context(_parent=context, _tag_observer=tag_observer)
        return context

    def _frames(self) -> Iterator[Context]:
        frame: Context | None = self
        while frame is not None:
            yield frame
            frame = frame._parent

    @property
    def tag_observers(self) -> Iterator[TagObserver]:
        """Iterate tag observers from the innermost to the outermost."""
        for frame in self._frames():
            if frame._tag_observer is not None:
                yield frame._tag_observer

    @property
    def top_value(self) -> Value:
        """Return the innermost scope, or an empty value."""
        for frame in self._frames():
            if frame._scope is not None:
                return frame._scope
        return Value()

    def __getitem__(self, key: str) -> Value:
        """Resolve ``key`` against the scopes, innermost first.

        The first scope answering a non-empty value wins; a miss everywhere
        yields an empty value.
        """
        for frame in self._frames():
            if frame._scope is None:
                continue
            found: Value = frame._scope[key]
            if not found.is_empty:
                return found
        return Value()

    def __repr__(self) -> str:
        scopes = [repr(frame._scope) for frame in self._frames() if frame._scope is not None]
        return f"Context({', '.join(reversed(scopes))})"
