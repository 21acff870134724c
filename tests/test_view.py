"""Tests for the view hierarchy, anchors and constraint activation."""

import pytest

from pinlayout import (
    AxisMismatchError,
    Constraint,
    ConstraintActivationError,
    Frame,
    LayoutAttribute,
    Relation,
    View,
    pin_edges_to_superview,
    pin_edge_to_same_edge,
)


def test_add_subview_sets_superview(container):
    view = container.add_subview(View("a"))
    assert view.superview is container
    assert container.subviews == [view]
    assert view.depth == 1
    assert view.root is container


def test_add_subview_moves_between_superviews(container):
    other = View("other")
    view = container.add_subview(View("a"))
    other.add_subview(view)
    assert container.subviews == []
    assert view.superview is other


def test_find_and_iter_views(container, child, sibling):
    grandchild = child.add_subview(View("grandchild"))
    assert [v.name for v in container.iter_views()] == ["container", "child", "grandchild", "sibling"]
    assert container.find("grandchild") is grandchild
    assert container.find("missing") is None


def test_common_ancestor(container, child, sibling):
    grandchild = child.add_subview(View("grandchild"))
    assert grandchild.common_ancestor(sibling) is container
    assert grandchild.common_ancestor(child) is child
    assert child.common_ancestor(child) is child
    assert child.common_ancestor(View("stranger")) is None
    assert grandchild.is_descendant_of(container)
    assert not container.is_descendant_of(child)


def test_views_compare_by_identity():
    assert View("a") != View("a")


def test_remove_from_superview_deactivates_external_constraints(container, child):
    grandchild = child.add_subview(View("grandchild"))
    outer = pin_edges_to_superview(child)
    inner = pin_edge_to_same_edge(grandchild, "top", child)

    assert child.remove_from_superview()
    assert not any(c.is_active for c in outer)
    assert container.constraints == []
    assert inner.is_active
    assert child.superview is None
    assert not child.remove_from_superview()


def test_anchor_types(child):
    assert child.top_anchor.attribute is LayoutAttribute.TOP
    assert child.center_x_anchor.attribute is LayoutAttribute.CENTER_X
    assert child.height_anchor.attribute is LayoutAttribute.HEIGHT


@pytest.mark.parametrize("relation_kwarg,relation", [
    ("equal_to", Relation.EQUAL),
    ("less_than_or_equal_to", Relation.LESS_THAN_OR_EQUAL),
    ("greater_than_or_equal_to", Relation.GREATER_THAN_OR_EQUAL),
])
def test_anchor_constraint_relations(child, sibling, relation_kwarg, relation):
    constraint = child.left_anchor.constraint(**{relation_kwarg: sibling.right_anchor}, constant=2)
    assert constraint.relation is relation
    assert constraint.constant == 2
    assert not constraint.is_active


def test_anchor_constraint_rejects_other_axis(child, sibling):
    with pytest.raises(AxisMismatchError):
        child.top_anchor.constraint(equal_to=sibling.left_anchor)
    with pytest.raises(AxisMismatchError):
        child.width_anchor.constraint(equal_to=sibling.left_anchor)


def test_anchor_constraint_needs_exactly_one_target(child, sibling):
    with pytest.raises(ValueError):
        child.top_anchor.constraint()
    with pytest.raises(ValueError):
        child.top_anchor.constraint(
            equal_to=sibling.top_anchor, less_than_or_equal_to=sibling.bottom_anchor
        )


def test_activation_is_idempotent(container, child):
    constraint = child.top_anchor.constraint(equal_to=container.top_anchor)
    constraint.activate()
    constraint.activate()
    assert container.constraints == [constraint]

    constraint.is_active = False
    constraint.deactivate()
    assert container.constraints == []
    assert constraint.host is None


def test_activate_all_and_deactivate_all(container, child):
    constraints = [
        child.top_anchor.constraint(equal_to=container.top_anchor),
        child.width_anchor.constraint_to_constant(40),
    ]
    Constraint.activate_all(constraints)
    assert constraints[0].host is container
    assert constraints[1].host is child

    Constraint.deactivate_all(constraints)
    assert not any(c.is_active for c in constraints)


def test_activation_without_common_ancestor_fails(child):
    constraint = child.top_anchor.constraint(equal_to=View("stranger").top_anchor)
    with pytest.raises(ConstraintActivationError):
        constraint.activate()


def test_constraint_priority_validated(child, container):
    constraint = child.top_anchor.constraint(equal_to=container.top_anchor)
    constraint.priority = 500
    assert constraint.priority == 500
    with pytest.raises(ValueError):
        constraint.priority = 0


def test_constraint_repr(container, child):
    constraint = child.bottom_anchor.constraint(equal_to=container.bottom_anchor, constant=-8)
    constraint.priority = 750
    assert repr(constraint) == "Constraint(child.bottom == container.bottom - 8 @750)"


def test_frame_attribute_values():
    frame = Frame.from_values(10, 20, 100, 50)
    assert frame.value_of(LayoutAttribute.LEFT) == 10
    assert frame.value_of(LayoutAttribute.RIGHT) == 110
    assert frame.value_of(LayoutAttribute.TOP) == 20
    assert frame.value_of(LayoutAttribute.BOTTOM) == 70
    assert frame.value_of(LayoutAttribute.CENTER_X) == 60
    assert frame.value_of(LayoutAttribute.CENTER_Y) == 45


def test_frame_inset_by():
    frame = Frame.from_values(0, 0, 100, 50).inset_by(5)
    assert frame.to_array().tolist() == [5, 5, 90, 40]
