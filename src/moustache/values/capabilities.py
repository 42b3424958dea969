# topmark:header:start
#
#   project      : Moustache
#   file         : capabilities.py
#   file_relpath : src/moustache/values/capabilities.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering capabilities and their composition into a `Cluster`.

A host object opts into rendering behaviors by implementing any subset of five
independent capabilities, without inheriting from anything:

    - truthiness: a boolean ``mustache_bool`` attribute (defaults to true);
    - `KeyLookup`: answers ``{{object.key}}`` lookups;
    - `Filter`: can be applied in filter expressions ``{{ object(x) }}``;
    - `Renderable`: fully owns how the object renders for a tag;
    - `TagObserver`: sees every value before it renders inside a section the
      observer was pushed for, and sees the result afterwards.

`build_cluster` probes an object once, when it is wrapped into a `Value`, and
records which capabilities it actually has. The capabilities are orthogonal:
rendering only ever consults ``renderable`` and key extraction only ever
consults ``key_lookup``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from moustache.config.logging import get_logger

if TYPE_CHECKING:
    from moustache.config.logging import MoustacheLogger
    from moustache.rendering.contracts import Tag
    from moustache.rendering.info import RenderingInfo
    from moustache.rendering.types import Rendering
    from moustache.values.value import Value

logger: MoustacheLogger = get_logger(__name__)


@runtime_checkable
class KeyLookup(Protocol):
    """Capability: resolve keys such as ``{{object.key}}``."""

    def mustache_value_for_key(self, key: str) -> Value | None:
        """Return the value for ``key``, or ``None`` when the key is unknown."""
        ...


@runtime_checkable
class Filter(Protocol):
    """Capability: transform values in filter expressions.

    A filter is unary. Multi-argument calls such as ``{{ f(a, b, c) }}`` are
    curried: ``a`` and ``b`` are applied one at a time with
    `mustache_filter_by_applying_argument`, and ``c`` is transformed.
    """

    def mustache_filter_by_applying_argument(self, argument: Value) -> Filter | None:
        """Return a filter with ``argument`` applied, or ``None`` if no more arguments are accepted."""
        ...

    def mustache_transform(self, value: Value) -> Value:
        """Return the transformed value. Raise to signal failure."""
        ...


@runtime_checkable
class Renderable(Protocol):
    """Capability: render the object for a tag."""

    def mustache_render(self, info: RenderingInfo) -> Rendering:
        """Return the rendering for ``info.tag``. Raise to signal failure."""
        ...


@runtime_checkable
class TagObserver(Protocol):
    """Capability: observe the tags rendered inside a section."""

    def mustache_will_render(self, tag: Tag, value: Value) -> Value:
        """Return the value that should actually be rendered for ``tag``."""
        ...

    def mustache_did_render(self, tag: Tag, rendering: Rendering | None, value: Value) -> None:
        """Observe the rendering of ``value``; ``rendering`` is ``None`` if it failed."""
        ...


@dataclass(frozen=True, slots=True)
class Cluster:
    """The rendering capabilities of one host object.

    Attributes:
        host (object): The wrapped host object, ``None`` for clusters assembled
            directly from capability objects.
        truthy (bool): Whether the object triggers sections (``{{#x}}``) rather
            than inverted sections (``{{^x}}``).
        key_lookup (KeyLookup | None): Key lookup capability.
        filter (Filter | None): Filter capability.
        renderable (Renderable | None): Rendering capability.
        tag_observer (TagObserver | None): Tag observation capability.
    """

    host: object = None
    truthy: bool = True
    key_lookup: KeyLookup | None = None
    filter: Filter | None = None
    renderable: Renderable | None = None
    tag_observer: TagObserver | None = None

    @property
    def wrapped(self) -> object:
        """Return the host, or the first capability object when there is no host."""
        if self.host is not None:
            return self.host
        for capability in (self.filter, self.key_lookup, self.renderable, self.tag_observer):
            if capability is not None:
                return capability
        return None

    def __str__(self) -> str:
        return str(self.wrapped)


def build_cluster(obj: object) -> Cluster | None:
    """Probe ``obj`` for rendering capabilities.

    Each capability is probed independently. ``truthy`` comes from a boolean
    ``mustache_bool`` attribute when the object declares one.

    Args:
        obj (object): The host object.

    Returns:
        Cluster | None: The capabilities of ``obj``, or ``None`` when it has none
        (and declares no ``mustache_bool``).
    """
    if isinstance(obj, Cluster):
        return obj
    # Classes are hosts, not capability providers.
    if isinstance(obj, type):
        return None

    key_lookup: KeyLookup | None = obj if isinstance(obj, KeyLookup) else None
    filter_: Filter | None = obj if isinstance(obj, Filter) else None
    renderable: Renderable | None = obj if isinstance(obj, Renderable) else None
    tag_observer: TagObserver | None = obj if isinstance(obj, TagObserver) else None
    declared_bool: object = getattr(obj, "mustache_bool", None)

    if (
        key_lookup is None
        and filter_ is None
        and renderable is None
        and tag_observer is None
        and not isinstance(declared_bool, bool)
    ):
        return None

    cluster = Cluster(
        host=obj,
        truthy=declared_bool if isinstance(declared_bool, bool) else True,
        key_lookup=key_lookup,
        filter=filter_,
        renderable=renderable,
        tag_observer=tag_observer,
    )
    logger.trace(
        "Cluster for %s: key_lookup=%s filter=%s renderable=%s tag_observer=%s truthy=%s",
        type(obj).__name__,
        key_lookup is not None,
        filter_ is not None,
        renderable is not None,
        tag_observer is not None,
        cluster.truthy,
    )
    return cluster
