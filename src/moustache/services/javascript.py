# topmark:header:start
#
#   project      : Moustache
#   file         : javascript.py
#   file_relpath : src/moustache/services/javascript.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JavaScript string escaping.

`JavascriptEscape` is one object that is at the same time a renderable, a
filter and a tag observer. Registered under a name such as ``js``, it supports:

    - ``{{ js(name) }}``: escapes the display string of ``name``;
    - ``{{#js}}...{{/js}}``: escapes every variable tag rendered inside the
      section (section tags inside are left alone, their inner variables are
      escaped when they render).

Escaping uses ``\\uXXXX`` forms for control characters and for every character
that could close a string or a ``<script>`` element, following the table of
Django's ``escapejs`` filter.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Final

from moustache.rendering.types import Rendering, TagType
from moustache.values.filters import BlockRenderable
from moustache.values.value import Value

if TYPE_CHECKING:
    from moustache.rendering.contracts import Tag
    from moustache.rendering.info import RenderingInfo
    from moustache.values.capabilities import Filter

_ESCAPED_CHARACTERS: Final[str] = "\\'\"<>&=-;\u2028\u2029"

_JAVASCRIPT_ESCAPES: Final[dict[int, str]] = {
    code: f"\\u{code:04X}"
    for code in [*range(0x20), *(ord(char) for char in _ESCAPED_CHARACTERS)]
}


def escape_javascript(text: str) -> str:
    r"""Escape ``text`` for inclusion in a JavaScript string literal.

    ``"\r\n"`` becomes ``\u000D\u000A``; characters outside the table are
    left unchanged.
    """
    return text.translate(_JAVASCRIPT_ESCAPES)


class JavascriptEscape:
    """Renderable, filter and tag observer escaping JavaScript strings."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # --- Renderable ---

    def mustache_render(self, info: RenderingInfo) -> Rendering:
        """Render ``{{js}}`` as its own description, ``{{#js}}`` with escaped variables."""
        if info.tag.type is TagType.VARIABLE:
            return Rendering(str(self))
        return info.tag.render(info.context.extended_context(tag_observer=self))

    # --- Filter ---

    def mustache_filter_by_applying_argument(self, argument: Value) -> Filter | None:
        """Refuse extra arguments: ``js`` is a single-argument filter."""
        return None

    def mustache_transform(self, value: Value) -> Value:
        """Return the escaped display string of ``value``; empty stays empty."""
        if value.is_empty:
            return Value()
        return Value(escape_javascript(value.as_string()))

    # --- Tag observer ---

    def mustache_will_render(self, tag: Tag, value: Value) -> Value:
        """Escape the future rendering of variable tags; leave sections alone."""
        if tag.type is TagType.VARIABLE:
            # The value may not be a string: escape whatever it renders to.
            return Value(BlockRenderable(partial(_escaped_rendering, value)))
        return value

    def mustache_did_render(self, tag: Tag, rendering: Rendering | None, value: Value) -> None:
        """Nothing to observe after rendering."""


def _escaped_rendering(value: Value, info: RenderingInfo) -> Rendering:
    rendering: Rendering = value.render(info)
    return Rendering(escape_javascript(rendering.string), rendering.content_type)
