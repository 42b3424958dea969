# topmark:header:start
#
#   project      : Moustache
#   file         : filters.py
#   file_relpath : src/moustache/values/filters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filter building blocks and the filter application protocol.

A filter is a unary transform. A template expression such as
``{{ f(a, b, c) }}`` is evaluated by currying: ``a`` then ``b`` are applied to
``f`` one at a time, each application returning a new filter, and the last
argument ``c`` is transformed by the final filter (see `apply_filter`).

Filters built here are immutable and can be shared between concurrent renders.

Example:
    ```python
    total = VariadicFilter(lambda args: sum(a.as_int() or 0 for a in args))
    assert apply_filter(total, [1, 2, 3]).as_int() == 6

    shout = string_filter(lambda s: None if s is None else s.upper())
    assert apply_filter(shout, ["hi"]).as_string() == "HI"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any

from moustache.config.logging import get_logger
from moustache.core.errors import FilterError
from moustache.values.capabilities import Filter
from moustache.values.value import Value

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from moustache.config.logging import MoustacheLogger
    from moustache.rendering.info import RenderingInfo
    from moustache.rendering.types import Rendering

logger: MoustacheLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class BlockFilter:
    """A single-argument filter backed by a function.

    The function receives the argument as a `Value` and may return a `Value`
    or any host object (wrapped with `Value`). It raises to signal failure.
    """

    block: Callable[[Value], Any]

    def mustache_filter_by_applying_argument(self, argument: Value) -> Filter | None:
        """Refuse extra arguments."""
        return None

    def mustache_transform(self, value: Value) -> Value:
        """Return ``block(value)`` as a `Value`."""
        return Value(self.block(value))


@dataclass(frozen=True, slots=True)
class VariadicFilter:
    """A filter accepting any number of arguments.

    Each applied argument yields a new filter closing over the longer argument
    tuple; the transform calls the function with every argument, the
    transformed value last.
    """

    block: Callable[[tuple[Value, ...]], Any]
    arguments: tuple[Value, ...] = ()

    def mustache_filter_by_applying_argument(self, argument: Value) -> Filter | None:
        """Return a new filter with ``argument`` appended to the arguments."""
        return VariadicFilter(self.block, (*self.arguments, argument))

    def mustache_transform(self, value: Value) -> Value:
        """Return ``block(arguments + (value,))`` as a `Value`."""
        return Value(self.block((*self.arguments, value)))


@dataclass(frozen=True, slots=True)
class BlockRenderable:
    """A renderable backed by a function of the rendering info."""

    block: Callable[[RenderingInfo], Rendering]

    def mustache_render(self, info: RenderingInfo) -> Rendering:
        """Return ``block(info)``."""
        return self.block(info)


def _unwrapping_filter(block: Callable[[Any], Any], unwrap: Callable[[Value], Any]) -> BlockFilter:
    def transform(value: Value) -> Any:
        return block(unwrap(value))

    return BlockFilter(transform)


def int_filter(block: Callable[[int | None], Any]) -> BlockFilter:
    """Return a filter calling ``block`` with the argument as an ``int`` (or ``None``)."""
    return _unwrapping_filter(block, Value.as_int)


def float_filter(block: Callable[[float | None], Any]) -> BlockFilter:
    """Return a filter calling ``block`` with the argument as a ``float`` (or ``None``)."""
    return _unwrapping_filter(block, Value.as_float)


def string_filter(block: Callable[[str | None], Any]) -> BlockFilter:
    """Return a filter calling ``block`` with the argument's display string.

    Empty arguments are passed as ``None``.
    """
    return _unwrapping_filter(block, lambda value: None if value.is_empty else value.as_string())


def object_filter(block: Callable[[Any], Any]) -> BlockFilter:
    """Return a filter calling ``block`` with the argument's host object."""
    return _unwrapping_filter(block, Value.as_object)


def rendering_filter(block: Callable[[Value, RenderingInfo], Rendering]) -> BlockFilter:
    """Return a filter whose result renders itself through ``block``.

    ``{{ f(x) }}`` then renders as ``block(x, info)``, which lets a filter
    decide the content type of its output or render section bodies.
    """

    def transform(value: Value) -> Value:
        return Value(BlockRenderable(partial(block, value)))

    return BlockFilter(transform)


def variadic_rendering_filter(
    block: Callable[[tuple[Value, ...], RenderingInfo], Rendering],
) -> VariadicFilter:
    """Variadic counterpart of `rendering_filter`."""

    def transform(arguments: tuple[Value, ...]) -> Value:
        return Value(BlockRenderable(partial(block, arguments)))

    return VariadicFilter(transform)


def apply_filter(filter_value: Value | Filter, arguments: Sequence[object]) -> Value:
    """Evaluate a filter call with one or more arguments.

    Every argument but the last is applied with
    ``mustache_filter_by_applying_argument``; the last is transformed.

    Args:
        filter_value (Value | Filter): The filter, or a value whose cluster
            has a filter capability.
        arguments (Sequence[object]): Call arguments; non-`Value` items are
            wrapped with `Value`.

    Returns:
        Value: The transformed value.

    Raises:
        FilterError: If ``filter_value`` is not a filter, no argument is
            given, or the filter does not accept that many arguments.
    """
    candidate: object = filter_value.filter if isinstance(filter_value, Value) else filter_value
    if isinstance(candidate, type) or not isinstance(candidate, Filter):
        raise FilterError(f"Not a filter: {filter_value!r}")
    current: Filter = candidate
    if not arguments:
        raise FilterError("Missing filter argument")

    *curried, last = arguments
    for position, argument in enumerate(curried, start=1):
        applied: Filter | None = current.mustache_filter_by_applying_argument(Value(argument))
        if applied is None:
            logger.debug("Filter %r refused argument %d", current, position)
            raise FilterError(f"Too many arguments: filter accepts {position}")
        current = applied
    return current.mustache_transform(Value(last))
