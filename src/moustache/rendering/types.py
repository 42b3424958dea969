# topmark:header:start
#
#   project      : Moustache
#   file         : types.py
#   file_relpath : src/moustache/rendering/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering result and tag kinds."""

from __future__ import annotations

from dataclasses import dataclass

from moustache.core.enum_mixins import KeyedStrEnum


class ContentType(KeyedStrEnum):
    """Classification of rendered text.

    ``MARKUP`` text is assumed safe and is never escaped again by the default
    escaping pipeline; ``PLAIN_TEXT`` is escaped by that pipeline.
    """

    PLAIN_TEXT = ("text", "Plain text")
    MARKUP = ("html", "Markup")


class TagType(KeyedStrEnum):
    """Kinds of template tags a value can be rendered for."""

    VARIABLE = ("variable", "Variable tag {{name}}")
    SECTION = ("section", "Section tag {{#name}}...{{/name}}")


@dataclass(frozen=True, slots=True)
class Rendering:
    """A piece of rendered text tagged with its content type."""

    string: str
    content_type: ContentType = ContentType.PLAIN_TEXT

    def __str__(self) -> str:
        return self.string
