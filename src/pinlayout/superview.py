"""Pinning functions that relate a view's edges to its superview.

These mirror the functions in ``pinlayout.pin`` with the target resolved as
the view's superview at call time. A view without a superview is left
untouched: no constraints are created, the autoresizing flag is not changed
and no error is raised.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .core.constraint import Constraint
from .core.edges import Edge, EdgeGroup
from .core.options import PinOptions
from .core.view import View
from .pin import (
    pin_edge_to_edge,
    pin_edge_to_same_edge,
    pin_edges_of_group_to_same_edges,
    pin_edges_to_same_edges,
    pin_edges_to_same_edges_excluding,
)

logger = logging.getLogger(__name__)


def _superview_of(view: View) -> View | None:
    if view.superview is None:
        logger.debug("View '%s' has no superview, nothing to pin", view.name)
    return view.superview


def pin_edge_to_superview_edge(
    view: View,
    edge: Edge | str,
    superview_edge: Edge | str,
    options: PinOptions | None = None,
    **overrides: Any,
) -> Constraint | None:
    """Pin an edge of the view to a (possibly different) edge of its superview.

    Useful for placing a view against the opposite edge of its superview;
    for the same edge use pin_edge_to_superview.

    Returns:
        The created constraint, or None if the view has no superview

    Raises:
        AxisMismatchError: If the edges belong to different axes
    """
    superview = _superview_of(view)
    if superview is None:
        return None
    return pin_edge_to_edge(view, edge, superview, superview_edge, options, **overrides)


def pin_edge_to_superview(
    view: View,
    edge: Edge | str,
    options: PinOptions | None = None,
    **overrides: Any,
) -> Constraint | None:
    """Pin an edge of the view to the same edge of its superview.

    Returns:
        The created constraint, or None if the view has no superview
    """
    superview = _superview_of(view)
    if superview is None:
        return None
    return pin_edge_to_same_edge(view, edge, superview, options, **overrides)


def pin_edges_to_superview(
    view: View,
    edges: Iterable[Edge | str] | EdgeGroup | Edge | str | None = None,
    options: PinOptions | None = None,
    **overrides: Any,
) -> list[Constraint]:
    """Pin edges of the view (all four by default) to its superview.

    ``edges`` may also be a single edge or an edge group.

    Returns:
        The created constraints, empty if the view has no superview
    """
    superview = _superview_of(view)
    if superview is None:
        return []
    return pin_edges_to_same_edges(view, superview, edges, options, **overrides)


def pin_edges_of_group_to_superview(
    view: View,
    group: EdgeGroup | str,
    options: PinOptions | None = None,
    **overrides: Any,
) -> list[Constraint]:
    """Pin the edges of a group to the superview."""
    superview = _superview_of(view)
    if superview is None:
        return []
    return pin_edges_of_group_to_same_edges(view, superview, group, options, **overrides)


def pin_edges_to_superview_excluding(
    view: View,
    excluded_edge: Edge | str,
    options: PinOptions | None = None,
    **overrides: Any,
) -> list[Constraint]:
    """Pin every edge except one to the superview."""
    superview = _superview_of(view)
    if superview is None:
        return []
    return pin_edges_to_same_edges_excluding(
        view, superview, excluded_edge, options, **overrides
    )
