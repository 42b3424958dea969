# topmark:header:start
#
#   project      : Moustache
#   file         : value.py
#   file_relpath : src/moustache/values/value.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `Value` tagged union.

Every datum a template can render is erased into a `Value` holding exactly one
of six variants:

    - ``EMPTY``: absence (``None``, a missing key).
    - ``SCALAR``: one opaque host object (number, string, any other object),
      tagged with its `ScalarKind`.
    - ``MAPPING``: ``str`` keys to values.
    - ``SEQUENCE``: ordered values.
    - ``SET``: distinct host objects, wrapped into values lazily on iteration.
    - ``CLUSTER``: a host object with rendering capabilities
      (see `moustache.values.capabilities`).

Values are immutable. Conversions (``as_*``), key extraction and truthiness
never raise; rendering raises `RenderingError` subclasses, or propagates the
exceptions of the capabilities and tag bodies it delegates to.

Conversion of host objects follows an explicit, ordered list of adapters (see
`_canonicalize`): booleans are recognized before integers so that ``True``
never becomes the integer ``1``.
"""

from __future__ import annotations

import decimal
import math
import numbers
from collections.abc import Iterable, Mapping
from collections.abc import Set as AbstractSet
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from moustache.config.logging import get_logger
from moustache.constants import KEY_ANY_OBJECT, KEY_COUNT, KEY_FIRST_OBJECT, KEY_LAST_OBJECT
from moustache.core.enum_mixins import KeyedStrEnum
from moustache.core.errors import ContentTypeMismatchError
from moustache.rendering.types import ContentType, Rendering, TagType
from moustache.values.capabilities import Cluster, build_cluster

if TYPE_CHECKING:
    from collections.abc import Iterator

    from moustache.config.logging import MoustacheLogger
    from moustache.rendering.info import RenderingInfo
    from moustache.values.capabilities import Filter, KeyLookup, Renderable, TagObserver

logger: MoustacheLogger = get_logger(__name__)


class ValueKind(KeyedStrEnum):
    """The variants of a `Value`."""

    EMPTY = ("empty", "Empty")
    SCALAR = ("scalar", "Scalar")
    MAPPING = ("mapping", "Mapping")
    SEQUENCE = ("sequence", "Sequence")
    SET = ("set", "Unordered collection")
    CLUSTER = ("cluster", "Cluster")


class ScalarKind(KeyedStrEnum):
    """Host-level classification of a scalar."""

    BOOLEAN = ("boolean", "Boolean")
    INTEGER = ("integer", "Integer")
    FLOATING = ("floating", "Floating point")
    STRING = ("string", "String")
    OBJECT = ("object", "Opaque object")


# Host types that never answer reflective key lookups.
_PRIMITIVE_KINDS: frozenset[ScalarKind] = frozenset(
    {ScalarKind.BOOLEAN, ScalarKind.INTEGER, ScalarKind.FLOATING, ScalarKind.STRING}
)

# Opaque host types without reflective keys either.
_BYTES_TYPES: tuple[type, ...] = (bytes, bytearray, memoryview)

_Canonical = tuple[ValueKind, Any, ScalarKind | None]


def _canonicalize(obj: object) -> _Canonical:
    """Classify a host object into a value variant and its payload."""
    if obj is None:
        return ValueKind.EMPTY, None, None
    if isinstance(obj, Value):
        return obj._kind, obj._payload, obj._scalar_kind
    if isinstance(obj, Cluster):
        return ValueKind.CLUSTER, obj, None
    # bool is an Integral: test it first.
    if isinstance(obj, bool):
        return ValueKind.SCALAR, obj, ScalarKind.BOOLEAN
    if isinstance(obj, numbers.Integral):
        return ValueKind.SCALAR, obj, ScalarKind.INTEGER
    if isinstance(obj, numbers.Real):
        return ValueKind.SCALAR, obj, ScalarKind.FLOATING
    # Decimal registers as a Number only.
    if isinstance(obj, decimal.Decimal):
        return ValueKind.SCALAR, obj, ScalarKind.FLOATING
    if isinstance(obj, str):
        return ValueKind.SCALAR, obj, ScalarKind.STRING
    if isinstance(obj, _BYTES_TYPES):
        return ValueKind.SCALAR, obj, ScalarKind.OBJECT

    cluster: Cluster | None = build_cluster(obj)
    if cluster is not None:
        return ValueKind.CLUSTER, cluster, None

    if isinstance(obj, Mapping):
        items: dict[str, Value] = {str(key): Value(item) for key, item in obj.items()}
        return ValueKind.MAPPING, MappingProxyType(items), None
    if isinstance(obj, AbstractSet):
        # dict.fromkeys deduplicates by host equality and keeps iteration order
        return ValueKind.SET, tuple(dict.fromkeys(obj)), None
    if isinstance(obj, Iterable):
        return ValueKind.SEQUENCE, tuple(Value(item) for item in obj), None
    return ValueKind.SCALAR, obj, ScalarKind.OBJECT


class Value:
    """An immutable, renderable datum.

    ``Value(obj)`` accepts ``None``, booleans, numbers, strings, mappings,
    sets, any other iterable, `Value` and `Cluster` instances, and objects
    implementing rendering capabilities. Anything else becomes an opaque scalar.

    Example:
        ```python
        value = Value({"items": [1, 2, 3]})
        assert value["items"]["count"].as_int() == 3
        assert not Value([]).truthy
        ```
    """

    __slots__ = ("_kind", "_payload", "_scalar_kind")

    _kind: ValueKind
    _payload: Any
    _scalar_kind: ScalarKind | None

    def __init__(self, obj: object = None) -> None:
        kind, payload, scalar_kind = _canonicalize(obj)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_payload", payload)
        object.__setattr__(self, "_scalar_kind", scalar_kind)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- Variant inspection ---

    @property
    def kind(self) -> ValueKind:
        """The variant of this value."""
        return self._kind

    @property
    def scalar_kind(self) -> ScalarKind | None:
        """The host classification of a scalar, ``None`` for other variants."""
        return self._scalar_kind

    @property
    def is_empty(self) -> bool:
        """Whether this value represents absence."""
        return self._kind is ValueKind.EMPTY

    @property
    def truthy(self) -> bool:
        """Whether this value triggers sections rather than inverted sections.

        Empty values and empty collections are falsy; mappings, non-empty
        collections and every scalar are truthy; clusters decide for
        themselves. No capability is invoked.
        """
        kind = self._kind
        if kind is ValueKind.EMPTY:
            return False
        if kind is ValueKind.SEQUENCE or kind is ValueKind.SET:
            return len(self._payload) > 0
        if kind is ValueKind.CLUSTER:
            return self._payload.truthy
        return True

    def __bool__(self) -> bool:
        return self.truthy

    # --- Unwrapping ---

    def as_object(self) -> Any:
        """Return the host object behind this value.

        Mappings, sequences and sets are converted back to ``dict``, ``list``
        and ``set`` of host objects, skipping empty items. Clusters return
        their host. Empty values return ``None``.
        """
        kind = self._kind
        if kind is ValueKind.SCALAR or kind is ValueKind.EMPTY:
            return self._payload
        if kind is ValueKind.MAPPING:
            return {
                key: item.as_object() for key, item in self._payload.items() if not item.is_empty
            }
        if kind is ValueKind.SEQUENCE:
            return [item.as_object() for item in self._payload if not item.is_empty]
        if kind is ValueKind.SET:
            return set(self._payload)
        return self._payload.wrapped

    def as_cluster(self) -> Cluster | None:
        """Return the capabilities of a cluster value, ``None`` otherwise."""
        return self._payload if self._kind is ValueKind.CLUSTER else None

    def as_mapping(self) -> Mapping[str, Value] | None:
        """Return the read-only mapping of a mapping value, ``None`` otherwise."""
        return self._payload if self._kind is ValueKind.MAPPING else None

    def as_sequence(self) -> tuple[Value, ...] | None:
        """Return the items of a sequence value, ``None`` otherwise."""
        return self._payload if self._kind is ValueKind.SEQUENCE else None

    def as_int(self) -> int | None:
        """Return an integer scalar, or a floating scalar floored to an integer.

        Booleans are not integers. Returns ``None`` on mismatch, and for
        infinite or NaN floating scalars.
        """
        if self._scalar_kind is ScalarKind.INTEGER:
            return int(self._payload)
        if self._scalar_kind is ScalarKind.FLOATING:
            try:
                return math.floor(self._payload)
            except (ArithmeticError, ValueError):
                return None
        return None

    def as_float(self) -> float | None:
        """Return an integer or floating scalar as a float, ``None`` on mismatch."""
        if self._scalar_kind is ScalarKind.INTEGER or self._scalar_kind is ScalarKind.FLOATING:
            try:
                return float(self._payload)
            except (OverflowError, ValueError):
                return None
        return None

    def as_string(self) -> str:
        """Return the display string of this value.

        Every variant has one: empty values display as ``""``, collections in
        their structural debug form.
        """
        if self._kind is ValueKind.EMPTY:
            return ""
        if self._kind is ValueKind.SCALAR:
            return str(self._payload)
        if self._kind is ValueKind.CLUSTER:
            return str(self._payload)
        return str(self.as_object())

    # --- Capability shortcuts ---

    @property
    def key_lookup(self) -> KeyLookup | None:
        """The key lookup capability of a cluster value."""
        return self._payload.key_lookup if self._kind is ValueKind.CLUSTER else None

    @property
    def filter(self) -> Filter | None:
        """The filter capability of a cluster value."""
        return self._payload.filter if self._kind is ValueKind.CLUSTER else None

    @property
    def renderable(self) -> Renderable | None:
        """The rendering capability of a cluster value."""
        return self._payload.renderable if self._kind is ValueKind.CLUSTER else None

    @property
    def tag_observer(self) -> TagObserver | None:
        """The tag observation capability of a cluster value."""
        return self._payload.tag_observer if self._kind is ValueKind.CLUSTER else None

    # --- Key extraction ---

    def __getitem__(self, key: str) -> Value:
        """Extract ``key`` from this value; a miss yields an empty value.

        Mappings only answer their own keys. Sequences answer ``count``,
        ``firstObject`` and ``lastObject``; sets answer ``count`` and
        ``anyObject``. Clusters delegate to their key lookup capability and
        opaque scalars to attribute lookup.
        """
        kind = self._kind
        if kind is ValueKind.MAPPING:
            found: Value | None = self._payload.get(key)
            return found if found is not None else Value()
        if kind is ValueKind.SEQUENCE:
            items: tuple[Value, ...] = self._payload
            if key == KEY_COUNT:
                return Value(len(items))
            if key == KEY_FIRST_OBJECT:
                return items[0] if items else Value()
            if key == KEY_LAST_OBJECT:
                return items[-1] if items else Value()
            return Value()
        if kind is ValueKind.SET:
            if key == KEY_COUNT:
                return Value(len(self._payload))
            if key == KEY_ANY_OBJECT:
                return Value(self._payload[0]) if self._payload else Value()
            return Value()
        if kind is ValueKind.CLUSTER:
            lookup: KeyLookup | None = self._payload.key_lookup
            if lookup is None:
                return Value()
            return Value(lookup.mustache_value_for_key(key))
        if kind is ValueKind.SCALAR:
            return self._attribute_value(key)
        return Value()

    def _attribute_value(self, key: str) -> Value:
        # Primitives and private names have no reflective keys; a miss is final.
        if self._scalar_kind in _PRIMITIVE_KINDS or isinstance(self._payload, _BYTES_TYPES):
            return Value()
        if not key or key.startswith("_"):
            return Value()
        try:
            attribute: Any = getattr(self._payload, key, None)
        except Exception as exc:
            # Host properties may raise; the key is then missing.
            logger.debug(
                "Attribute %r of %s raised %s: %s",
                key,
                type(self._payload).__name__,
                type(exc).__name__,
                exc,
            )
            return Value()
        return Value(attribute)

    # --- Rendering ---

    def _items(self) -> Iterator[Value]:
        if self._kind is ValueKind.SET:
            for element in self._payload:
                yield Value(element)
        else:
            yield from self._payload

    def render(self, info: RenderingInfo) -> Rendering:
        """Render this value for ``info.tag``.

        Args:
            info (RenderingInfo): The tag, its context, and whether this value
                is one item of an enclosing collection.

        Returns:
            Rendering: The rendered text and its content type.

        Raises:
            ContentTypeMismatchError: If the items of a collection render with
                different content types.
        """
        kind = self._kind
        if kind is ValueKind.EMPTY:
            return _render_absence(info)
        if kind is ValueKind.SEQUENCE or kind is ValueKind.SET:
            if info.enumeration_item:
                return info.tag.render(info.context.extended_context(self))
            return self._render_items(info)
        if kind is ValueKind.CLUSTER:
            renderable: Renderable | None = self._payload.renderable
            if renderable is not None:
                return renderable.mustache_render(info)
        if info.tag.type is TagType.VARIABLE:
            return Rendering(self.as_string())
        return info.tag.render(info.context.extended_context(self))

    def _render_items(self, info: RenderingInfo) -> Rendering:
        item_info: RenderingInfo = info.by_setting_enumeration_item()
        buffer: list[str] = []
        content_type: ContentType | None = None
        for index, item in enumerate(self._items()):
            rendering: Rendering = item.render(item_info)
            if content_type is None:
                content_type = rendering.content_type
            elif rendering.content_type is not content_type:
                logger.debug(
                    "Content type mismatch at item %d: %s after %s",
                    index,
                    rendering.content_type.label,
                    content_type.label,
                )
                raise ContentTypeMismatchError(content_type, rendering.content_type, index)
            buffer.append(rendering.string)

        if content_type is None:
            return _render_absence(info)
        logger.trace("Rendered %d %s items", len(buffer), self._kind.value)
        return Rendering("".join(buffer), content_type)

    # --- Debugging ---

    def __repr__(self) -> str:
        kind = self._kind
        if kind is ValueKind.EMPTY:
            return "Value.EMPTY"
        if kind is ValueKind.MAPPING:
            return f"Value.MAPPING({dict(self._payload)!r})"
        if kind is ValueKind.SEQUENCE:
            return f"Value.SEQUENCE({list(self._payload)!r})"
        return f"Value.{kind.name}({self._payload!r})"

    def __str__(self) -> str:
        return self.as_string()


def _render_absence(info: RenderingInfo) -> Rendering:
    """Render nothing for variables; render section bodies in the unchanged context."""
    if info.tag.type is TagType.VARIABLE:
        return Rendering("")
    return info.tag.render(info.context)
