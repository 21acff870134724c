"""Pinning functions that relate a view's edges to another view.

Every function switches off the pinned view's
``translates_autoresizing_mask_into_constraints`` flag, creates the
constraints, activates them and returns them so they can be stored or
deactivated later. Calling a function twice creates two independent sets of
constraints; nothing is deduplicated.

Options are given either as a PinOptions object or as keyword overrides
(``inset``, ``relation``, ``priority``) on top of it.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .core.anchors import XAxisAnchor, YAxisAnchor
from .core.constraint import Constraint
from .core.edges import Edge, EdgeGroup
from .core.options import PinOptions, resolve_options
from .core.view import View
from .errors import AxisMismatchError, ConstraintActivationError

logger = logging.getLogger(__name__)


def _require_common_ancestor(view: View, other: View) -> None:
    if view.common_ancestor(other) is None:
        raise ConstraintActivationError(
            f"Cannot pin '{view.name}' to '{other.name}': views have no common ancestor"
        )


def _normalize_edges(edges: Iterable[Edge | str] | EdgeGroup | Edge | str) -> list[Edge]:
    """Turn a single edge, an edge group or an iterable of edges into a list."""
    if isinstance(edges, EdgeGroup):
        return edges.edges
    if isinstance(edges, Edge):
        return [edges]
    if isinstance(edges, str):
        if edges in {group.value for group in EdgeGroup}:
            return EdgeGroup(edges).edges
        return [Edge(edges)]
    return [Edge(edge) for edge in edges]


def pin_to_anchors(
    view: View,
    top: YAxisAnchor | None = None,
    left: XAxisAnchor | None = None,
    bottom: YAxisAnchor | None = None,
    right: XAxisAnchor | None = None,
    options: PinOptions | None = None,
    **overrides: Any,
) -> list[Constraint]:
    """Pin the view's edges to arbitrary anchors.

    Each given anchor gets an equal constraint. Top and left insets are
    added, bottom and right insets subtracted, so positive insets always
    move the view's edges inward. The relation option is not used.

    If no anchor is given this does nothing.

    Args:
        view: The view to pin
        top: Anchor to pin the top edge to
        left: Anchor to pin the left edge to
        bottom: Anchor to pin the bottom edge to
        right: Anchor to pin the right edge to
        options: Insets and priority of the constraints

    Returns:
        The created constraints, in top, left, bottom, right order
    """
    opts = resolve_options(options, overrides)
    targets = [
        (view.top_anchor, top, Edge.TOP),
        (view.left_anchor, left, Edge.LEFT),
        (view.bottom_anchor, bottom, Edge.BOTTOM),
        (view.right_anchor, right, Edge.RIGHT),
    ]
    if all(anchor is None for _, anchor, _ in targets):
        logger.debug("No anchors given for '%s', nothing to pin", view.name)
        return []

    # Every constraint is built and checked before the view is touched
    constraints = []
    for own_anchor, anchor, edge in targets:
        if anchor is None:
            continue
        constraint = own_anchor.constraint(
            equal_to=anchor,
            constant=opts.inset_for(edge) * edge.directional_multiplier,
        )
        constraint.priority = opts.priority
        _require_common_ancestor(view, anchor.item)
        constraints.append(constraint)

    view.translates_autoresizing_mask_into_constraints = False
    Constraint.activate_all(constraints)
    return constraints


def pin_edge_to_edge(
    view: View,
    edge: Edge | str,
    target: View,
    target_edge: Edge | str,
    options: PinOptions | None = None,
    **overrides: Any,
) -> Constraint:
    """Pin an edge of the view to an edge of another view.

    Edges of different axes (e.g. top to left) cannot be paired.

    Args:
        view: The view to pin
        edge: The edge of ``view`` to pin
        target: The view to pin to; must share a hierarchy with ``view``
        target_edge: The edge of ``target`` to pin to
        options: Inset, relation and priority of the constraint

    Returns:
        The created, active constraint

    Raises:
        AxisMismatchError: If the edges belong to different axes
        ConstraintActivationError: If the views share no common ancestor
    """
    edge = Edge(edge)
    target_edge = Edge(target_edge)
    if edge.axis is not target_edge.axis:
        raise AxisMismatchError(
            f"Cannot pin {edge.value} of '{view.name}' to {target_edge.value} "
            f"of '{target.name}': edges have different axes"
        )
    opts = resolve_options(options, overrides)
    _require_common_ancestor(view, target)

    view.translates_autoresizing_mask_into_constraints = False

    constraint = Constraint(
        view,
        edge.attribute,
        opts.relation,
        target,
        target_edge.attribute,
        multiplier=1.0,
        constant=opts.inset_for(edge) * edge.directional_multiplier,
    )
    constraint.priority = opts.priority
    return constraint.activate()


def pin_edge_to_same_edge(
    view: View,
    edge: Edge | str,
    target: View,
    options: PinOptions | None = None,
    **overrides: Any,
) -> Constraint:
    """Pin an edge of the view to the same edge of another view."""
    return pin_edge_to_edge(view, edge, target, edge, options, **overrides)


def pin_edges_to_same_edges(
    view: View,
    target: View,
    edges: Iterable[Edge | str] | EdgeGroup | Edge | str | None = None,
    options: PinOptions | None = None,
    **overrides: Any,
) -> list[Constraint]:
    """Pin several edges of the view to the same edges of another view.

    Edges are pinned in the order given. There is no rollback: if one edge
    fails, constraints created for earlier edges stay active.

    Args:
        view: The view to pin
        target: The view to pin to
        edges: Edges to pin: an iterable of edges, a single edge or an edge
            group (either may be given by name). Defaults to all four.
        options: Insets (uniform or per edge), relation and priority

    Returns:
        The created constraints, one per edge
    """
    opts = resolve_options(options, overrides)
    edges = Edge.all() if edges is None else _normalize_edges(edges)
    return [pin_edge_to_same_edge(view, edge, target, opts) for edge in edges]


def pin_edges_of_group_to_same_edges(
    view: View,
    target: View,
    group: EdgeGroup | str,
    options: PinOptions | None = None,
    **overrides: Any,
) -> list[Constraint]:
    """Pin the edges of a group (horizontal, vertical, all) to another view."""
    return pin_edges_to_same_edges(view, target, EdgeGroup(group).edges, options, **overrides)


def pin_edges_to_same_edges_excluding(
    view: View,
    target: View,
    excluded_edge: Edge | str,
    options: PinOptions | None = None,
    **overrides: Any,
) -> list[Constraint]:
    """Pin every edge except one to the same edges of another view."""
    excluded_edge = Edge(excluded_edge)
    edges = [edge for edge in Edge.all() if edge is not excluded_edge]
    return pin_edges_to_same_edges(view, target, edges, options, **overrides)
