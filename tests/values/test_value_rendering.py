# topmark:header:start
#
#   project      : Moustache
#   file         : test_value_rendering.py
#   file_relpath : tests/values/test_value_rendering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Value.render` across all variants.

Templates are built from the stand-ins of `tests.fakes`; the section tags they
produce render PLAIN_TEXT unless stated otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import given
from hypothesis import strategies as st

from moustache.core.errors import ContentTypeMismatchError, RenderingError
from moustache.rendering.context import Context
from moustache.rendering.info import RenderingInfo
from moustache.rendering.types import ContentType, Rendering, TagType
from moustache.values.capabilities import Cluster
from moustache.values.value import Value
from tests.fakes import (
    FailingTag,
    FixedRenderable,
    Sec,
    SectionTag,
    Var,
    VariableTag,
    render_template,
)
from tests.strategies_moustache import s_content_types, s_mixed_content_types

if TYPE_CHECKING:
    from moustache.rendering.contracts import Tag


def _render(value: Value, tag: Tag, *scopes: object, enumeration_item: bool = False) -> Rendering:
    info = RenderingInfo(tag=tag, context=Context(*scopes), enumeration_item=enumeration_item)
    return value.render(info)


# --- Empty ---


def test_empty_variable_renders_nothing() -> None:
    rendering = _render(Value(), VariableTag())
    assert rendering == Rendering("", ContentType.PLAIN_TEXT)


def test_empty_section_renders_body_in_unchanged_context() -> None:
    """Absence renders section bodies as they are (inverted sections)."""
    rendering = _render(Value(), SectionTag(("x=", Var("x"))), {"x": 1})
    assert rendering.string == "x=1"


def test_inverted_section_over_missing_key() -> None:
    template = (Sec("missing", ("none",), inverted=True), Sec("missing", ("some",)))
    assert render_template(template, {}) == "none"


# --- Scalars and mappings ---


def test_scalar_variable_renders_display_string() -> None:
    assert render_template(("Hello ", Var("name")), {"name": "Arthur"}) == "Hello Arthur"
    assert render_template((Var("n"),), {"n": 42}) == "42"


def test_scalar_section_pushes_the_scalar() -> None:
    assert render_template((Sec("n", ("<", Var("."), ">")),), {"n": 0}) == "<0>"


def test_false_scalar_still_renders_section() -> None:
    """Scalars are always truthy, booleans included."""
    assert render_template((Sec("flag", ("on",)),), {"flag": False}) == "on"


def test_mapping_section_pushes_the_mapping() -> None:
    template = (Sec("user", ("Hi ", Var("name"), " from ", Var("planet"))),)
    data = {"user": {"name": "Ford"}, "planet": "Betelgeuse"}
    assert render_template(template, data) == "Hi Ford from Betelgeuse"


def test_mapping_variable_renders_structural_string() -> None:
    assert render_template((Var("user"),), {"user": {"a": 1}}) == "{'a': 1}"


# --- Collections ---


def test_sequence_section_renders_body_per_item() -> None:
    template = (Sec("items", (Var("n"), ",")),)
    data = {"items": [{"n": 1}, {"n": 2}, {"n": 3}]}
    assert render_template(template, data) == "1,2,3,"


def test_sequence_variable_concatenates_items() -> None:
    assert render_template((Var("items"),), {"items": [1, "a", 2.5]}) == "1a2.5"


def test_set_section_renders_body_per_element() -> None:
    rendering = _render(Value(frozenset({7})), SectionTag(("[", Var("."), "]")))
    assert rendering.string == "[7]"


def test_empty_collection_behaves_like_empty() -> None:
    assert _render(Value([]), VariableTag()).string == ""
    assert _render(Value(set()), SectionTag(("x",))).string == "x"


def test_enumeration_item_pushes_the_whole_collection() -> None:
    """A collection rendered as an item renders the body once, as a scope."""
    tag = SectionTag(("count=", Var("count")))
    assert _render(Value([1, 2]), tag, enumeration_item=True).string == "count=2"
    assert _render(Value([1, 2]), tag).string == "count=count="


def test_nested_sequences_render_items_as_scopes() -> None:
    template = (Sec("rows", (Var("count"), ";")),)
    assert render_template(template, {"rows": [[1, 2], [3], ["a", "b", "c"]]}) == "2;1;3;"


def test_homogeneous_markup_items_keep_content_type() -> None:
    value = Value(
        [
            FixedRenderable("<b>", ContentType.MARKUP),
            FixedRenderable("<i>", ContentType.MARKUP),
        ]
    )
    rendering = _render(value, VariableTag())
    assert rendering == Rendering("<b><i>", ContentType.MARKUP)


def test_content_type_mismatch_is_reported_with_position() -> None:
    value = Value(
        [
            FixedRenderable("a", ContentType.MARKUP),
            FixedRenderable("b", ContentType.MARKUP),
            FixedRenderable("c", ContentType.PLAIN_TEXT),
        ]
    )
    with pytest.raises(ContentTypeMismatchError) as excinfo:
        _render(value, VariableTag())
    error = excinfo.value
    assert isinstance(error, RenderingError)
    assert error.message == "Content type mismatch"
    assert error.expected is ContentType.MARKUP
    assert error.actual is ContentType.PLAIN_TEXT
    assert error.index == 2
    assert "item 2" in str(error)


@given(types=st.lists(s_content_types, min_size=1, max_size=8))
def test_homogeneous_items_concatenate(types: list[ContentType]) -> None:
    """Items sharing one content type concatenate in order."""
    content_type = types[0]
    items = [FixedRenderable(str(i), content_type) for i in range(len(types))]
    rendering = _render(Value(items), VariableTag())
    assert rendering.string == "".join(str(i) for i in range(len(types)))
    assert rendering.content_type is content_type


@given(types=s_mixed_content_types())
def test_mixed_items_always_fail(types: list[ContentType]) -> None:
    """Any ordering of mixed content types fails at the first deviating item."""
    items = [FixedRenderable(str(i), content_type) for i, content_type in enumerate(types)]
    first_mismatch = next(i for i, ct in enumerate(types) if ct is not types[0])
    with pytest.raises(ContentTypeMismatchError) as excinfo:
        _render(Value(items), VariableTag())
    assert excinfo.value.index == first_mismatch
    assert excinfo.value.expected is types[0]


# --- Clusters ---


class Shout:
    """Renderable that upper-cases its text for variables, wraps sections."""

    def __init__(self, text: str) -> None:
        self.text = text

    def mustache_render(self, info: RenderingInfo) -> Rendering:
        if info.tag.type is TagType.VARIABLE:
            return Rendering(self.text.upper(), ContentType.MARKUP)
        inner = info.tag.render(info.context)
        return Rendering(f"<<{inner.string}>>", inner.content_type)


class Named:
    """Key lookup only."""

    def mustache_value_for_key(self, key: str) -> Value | None:
        return Value(f"<{key}>")

    def __str__(self) -> str:
        return "named"


def test_renderable_cluster_owns_its_rendering() -> None:
    assert render_template((Var("x"),), {"x": Shout("hi")}) == "HI"
    assert render_template((Sec("x", ("body",)),), {"x": Shout("hi")}) == "<<body>>"


def test_cluster_without_renderable_renders_like_an_object() -> None:
    """Key lookup clusters display their host and push themselves for sections."""
    assert render_template((Var("x"),), {"x": Named()}) == "named"
    assert render_template((Sec("x", (Var("key"),)),), {"x": Named()}) == "<key>"


def test_falsy_cluster_skips_section() -> None:
    template = (Sec("x", ("yes",)), Sec("x", ("no",), inverted=True))
    assert render_template(template, {"x": Cluster(truthy=False)}) == "no"


def test_renderable_failure_propagates_unchanged() -> None:
    class Broken:
        def mustache_render(self, info: RenderingInfo) -> Rendering:
            raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        render_template((Var("x"),), {"x": Broken()})


def test_body_failure_propagates_unchanged() -> None:
    error = KeyError("inner")
    with pytest.raises(KeyError):
        _render(Value({"a": 1}), FailingTag(error))
