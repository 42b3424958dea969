# topmark:header:start
#
#   project      : Moustache
#   file         : dispatch.py
#   file_relpath : src/moustache/rendering/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render one tag's value, honoring the tag observers of its context.

This is the call a template engine makes for every tag it meets, once it has
resolved the tag's expression to a `Value`:

1) every tag observer of the context, innermost first, may substitute the
   value (``mustache_will_render``);
2) the resulting value renders itself (`Value.render`);
3) observers are told about the rendering in reverse order
   (``mustache_did_render``), with ``None`` when rendering failed. The failure
   then propagates unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from moustache.config.logging import get_logger
from moustache.rendering.info import RenderingInfo

if TYPE_CHECKING:
    from moustache.config.logging import MoustacheLogger
    from moustache.rendering.contracts import RenderingContext, Tag
    from moustache.rendering.types import Rendering
    from moustache.values.capabilities import TagObserver
    from moustache.values.value import Value

logger: MoustacheLogger = get_logger(__name__)


def render_tag(tag: Tag, value: Value, context: RenderingContext) -> Rendering:
    """Render ``value`` for ``tag`` in ``context``.

    Args:
        tag (Tag): The tag being rendered.
        value (Value): The value the tag's expression resolved to.
        context (RenderingContext): The tag's context.

    Returns:
        Rendering: The rendering of the (possibly substituted) value.
    """
    observers: list[TagObserver] = list(context.tag_observers)
    for observer in observers:
        value = observer.mustache_will_render(tag, value)
    if observers:
        logger.trace("%d tag observer(s) for %s tag", len(observers), tag.type.value)

    try:
        rendering: Rendering = value.render(RenderingInfo(tag=tag, context=context))
    except Exception:
        for observer in reversed(observers):
            observer.mustache_did_render(tag, None, value)
        raise

    for observer in reversed(observers):
        observer.mustache_did_render(tag, rendering, value)
    return rendering
