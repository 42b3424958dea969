# topmark:header:start
#
#   project      : Moustache
#   file         : info.py
#   file_relpath : src/moustache/rendering/info.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The record handed to `Value.render` and to `Renderable` capabilities."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from moustache.rendering.contracts import RenderingContext, Tag


@dataclass(frozen=True, slots=True)
class RenderingInfo:
    """What a value needs to know to render itself.

    Attributes:
        tag (Tag): The tag being rendered.
        context (RenderingContext): The scope stack of the tag.
        enumeration_item (bool): True when the value is rendered as one item
            of an enclosing collection.
    """

    tag: Tag
    context: RenderingContext
    enumeration_item: bool = False

    def by_setting_enumeration_item(self) -> RenderingInfo:
        """Return a copy flagged as rendering one collection item."""
        return replace(self, enumeration_item=True)
