"""Tests for the edge, group, inset and option model."""

import numpy as np
import pytest

from pinlayout import (
    Axis,
    Edge,
    EdgeGroup,
    EdgeInsets,
    LayoutAttribute,
    LayoutPriority,
    PinOptions,
    Relation,
)
from pinlayout.core.options import resolve_options


@pytest.mark.parametrize("edge,multiplier", [
    (Edge.TOP, 1.0),
    (Edge.LEFT, 1.0),
    (Edge.BOTTOM, -1.0),
    (Edge.RIGHT, -1.0),
])
def test_directional_multiplier(edge, multiplier):
    """Top/left move inward with positive constants, bottom/right with negative."""
    assert edge.directional_multiplier == multiplier


@pytest.mark.parametrize("edge", list(Edge))
def test_edge_maps_to_attribute_of_same_name(edge):
    assert edge.attribute is LayoutAttribute(edge.value)


def test_edge_axes():
    assert Edge.TOP.axis is Axis.VERTICAL
    assert Edge.BOTTOM.axis is Axis.VERTICAL
    assert Edge.LEFT.axis is Axis.HORIZONTAL
    assert Edge.RIGHT.axis is Axis.HORIZONTAL


def test_all_edges_order_is_fixed():
    assert Edge.all() == [Edge.TOP, Edge.LEFT, Edge.BOTTOM, Edge.RIGHT]


@pytest.mark.parametrize("group,edges", [
    (EdgeGroup.HORIZONTAL, [Edge.LEFT, Edge.RIGHT]),
    (EdgeGroup.VERTICAL, [Edge.TOP, Edge.BOTTOM]),
    (EdgeGroup.ALL, [Edge.TOP, Edge.LEFT, Edge.BOTTOM, Edge.RIGHT]),
])
def test_edge_groups(group, edges):
    assert group.edges == edges


def test_relation_symbols():
    assert Relation.EQUAL.symbol == "=="
    assert Relation("less_or_equal").symbol == "<="
    assert Relation("greater_or_equal").symbol == ">="


@pytest.mark.parametrize("value,expected", [
    (8, EdgeInsets(8, 8, 8, 8)),
    ([1, 2, 3, 4], EdgeInsets(top=1, left=2, bottom=3, right=4)),
    ({"left": 5, "right": 6}, EdgeInsets(left=5, right=6)),
    (None, EdgeInsets.ZERO),
])
def test_insets_coerce(value, expected):
    assert EdgeInsets.coerce(value) == expected


def test_insets_coerce_rejects_bad_values():
    with pytest.raises(ValueError):
        EdgeInsets.coerce([1, 2, 3])
    with pytest.raises(ValueError):
        EdgeInsets.coerce({"front": 1})
    with pytest.raises(TypeError):
        EdgeInsets.coerce("wide")


def test_insets_value_for():
    insets = EdgeInsets(top=10, left=5, bottom=10, right=5)
    assert [insets.value_for(edge) for edge in Edge.all()] == [10, 5, 10, 5]


@pytest.mark.parametrize("priority", [0, -1, 1000.5])
def test_priority_out_of_range(priority):
    with pytest.raises(ValueError):
        LayoutPriority.validate(priority)


def test_pin_options_defaults():
    options = PinOptions()
    assert options.inset == 0.0
    assert options.relation is Relation.EQUAL
    assert options.priority == LayoutPriority.REQUIRED


def test_pin_options_coerce_fields():
    options = PinOptions(inset={"top": 3}, relation="greater_or_equal", priority=750)
    assert options.insets == EdgeInsets(top=3)
    assert options.relation is Relation.GREATER_THAN_OR_EQUAL
    assert options.inset_for(Edge.TOP) == 3
    assert options.inset_for(Edge.BOTTOM) == 0


def test_resolve_options_applies_overrides():
    base = PinOptions(inset=4, priority=500)
    resolved = resolve_options(base, {"inset": 9})
    assert resolved.inset == 9
    assert resolved.priority == 500
    assert base.inset == 4
    assert resolve_options(base, {}) is base
    assert resolve_options(None, {"relation": "less_or_equal"}).relation is Relation.LESS_THAN_OR_EQUAL


def test_numpy_scalars_are_uniform_insets():
    assert EdgeInsets.coerce(np.int64(5)) == EdgeInsets.uniform(5)
    assert EdgeInsets.coerce(np.float32(2.5)) == EdgeInsets.uniform(2.5)

    options = PinOptions(inset=np.int64(5))
    assert options.inset == 5.0
    assert isinstance(options.inset, float)
    assert options.inset_for(Edge.RIGHT) == 5.0
