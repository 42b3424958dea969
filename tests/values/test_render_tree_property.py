# topmark:header:start
#
#   project      : Moustache
#   file         : test_render_tree_property.py
#   file_relpath : tests/values/test_render_tree_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests rendering arbitrary host data trees.

Plain host data only ever renders as plain text, so rendering a tree for a
variable or a section tag must never hit a content type mismatch.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import HealthCheck, given, settings

from moustache.rendering.context import Context
from moustache.rendering.info import RenderingInfo
from moustache.rendering.types import ContentType
from moustache.values.value import Value
from tests.fakes import SectionTag, Var, VariableTag
from tests.strategies_moustache import s_plain_trees

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


def _flatten(value: Value, *, item: bool = False) -> str:
    """Expected variable rendering.

    Sequences concatenate their items. A nested sequence is one item: it
    renders the tag once with itself as scope, and variable tags have no
    inner content.
    """
    items = value.as_sequence()
    if items is None:
        return value.as_string()
    if item:
        return ""
    return "".join(_flatten(element, item=True) for element in items)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=300)
@given(tree=s_plain_trees)
def test_variable_rendering_of_host_trees(tree: Any) -> None:
    value = Value(tree)
    rendering = value.render(RenderingInfo(tag=VariableTag(), context=Context()))
    assert rendering.content_type is ContentType.PLAIN_TEXT
    assert rendering.string == _flatten(value)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=300)
@given(tree=s_plain_trees)
def test_section_rendering_of_host_trees(tree: Any) -> None:
    """A section renders its body once per item, or once for other values."""
    value = Value(tree)
    tag = SectionTag(("<", Var("missing"), ">"))
    rendering = value.render(RenderingInfo(tag=tag, context=Context()))
    items = value.as_sequence()
    count = len(items) if items else 1
    assert rendering.string == "<>" * count
