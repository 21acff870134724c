"""Tests for solving pinned hierarchies with the layout engine."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pinlayout import (
    Edge,
    EdgeInsets,
    Frame,
    LayoutEngine,
    LayoutPriority,
    Relation,
    UnsatisfiableLayoutError,
    View,
    pin_edge_to_edge,
    pin_edge_to_superview,
    pin_edges_to_superview,
    pin_edges_to_superview_excluding,
    pin_to_anchors,
)
from pinlayout.engine import priority_to_strength


def frame_of(view: View) -> list[float]:
    return view.frame.to_array().tolist()


def test_pin_all_edges_to_superview_insets_frame(container, child):
    pin_edges_to_superview(child, inset=EdgeInsets(top=10, left=5, bottom=10, right=5))
    LayoutEngine().layout(container)

    assert_allclose(frame_of(child), [5, 10, 190, 80])
    assert_allclose(frame_of(container), [0, 0, 200, 100])


def test_layout_if_needed_lays_out_whole_hierarchy(container, child):
    pin_edges_to_superview(child, inset=20)
    child.layout_if_needed()
    assert_allclose(frame_of(child), [20, 20, 160, 60])


def test_fixed_frames_are_kept(container, sibling):
    LayoutEngine().layout(container)
    assert_allclose(frame_of(sibling), [10, 20, 50, 30])


def test_pin_below_sibling(container, child, sibling):
    """Top pinned to a fixed sibling's bottom, remaining edges to the superview."""
    pin_edge_to_edge(child, Edge.TOP, sibling, Edge.BOTTOM, inset=4)
    pin_edges_to_superview_excluding(child, Edge.TOP)
    LayoutEngine().layout(container)

    assert_allclose(frame_of(child), [0, 54, 200, 46])


def test_nested_frames_are_relative_to_superview(container):
    card = container.add_subview(View("card"))
    inner = card.add_subview(View("inner"))
    pin_edges_to_superview(card, inset=20)
    pin_edges_to_superview(inner, inset=5)
    LayoutEngine().layout(container)

    assert_allclose(frame_of(card), [20, 20, 160, 60])
    assert_allclose(frame_of(inner), [5, 5, 150, 50])


def test_under_constrained_view_keeps_previous_frame(container):
    view = container.add_subview(View("view", Frame.from_values(1, 2, 3, 4)))
    pin_edge_to_superview(view, Edge.TOP, inset=10)
    LayoutEngine().layout(container)

    assert_allclose(frame_of(view), [1, 10, 3, 4])


def test_inequality_relation(container, child):
    child.frame = Frame.from_values(0, 0, 50, 50)
    pin_edge_to_superview(child, Edge.LEFT, inset=10, relation=Relation.GREATER_THAN_OR_EQUAL)
    LayoutEngine().layout(container)

    assert child.frame.min_x == pytest.approx(10)


def test_higher_priority_wins(container, child):
    pin_edges_to_superview(child, [Edge.TOP, Edge.LEFT])
    low = child.width_anchor.constraint_to_constant(50)
    low.priority = LayoutPriority.DEFAULT_LOW
    high = child.width_anchor.constraint_to_constant(80)
    high.priority = LayoutPriority.DEFAULT_HIGH
    low.activate()
    high.activate()
    LayoutEngine().layout(container)

    assert child.frame.width == pytest.approx(80)


def test_anchors_relative_to_sibling(container, child, sibling):
    pin_to_anchors(
        child,
        top=sibling.top_anchor,
        left=sibling.right_anchor,
        bottom=sibling.bottom_anchor,
        right=container.right_anchor,
        inset=EdgeInsets(left=5, right=5),
    )
    LayoutEngine().layout(container)

    assert_allclose(frame_of(child), [65, 20, 130, 30])


def test_conflicting_required_constraints_raise(container, child):
    pin_edges_to_superview(child)
    child.width_anchor.constraint_to_constant(50).activate()

    with pytest.raises(UnsatisfiableLayoutError):
        LayoutEngine().layout(container)


def test_priority_to_strength_is_monotonic():
    strengths = [priority_to_strength(p) for p in (1, 50, 250, 750, 999, 1000)]
    assert strengths == sorted(strengths)
    assert len(set(strengths)) == len(strengths)


def test_layout_writes_numpy_frames(container, child):
    pin_edges_to_superview(child)
    LayoutEngine().layout(container)
    assert isinstance(child.frame.origin, np.ndarray)
    assert child.frame.origin.dtype == np.float64
