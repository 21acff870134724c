"""View class for the layout hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from .anchors import DimensionAnchor, XAxisAnchor, YAxisAnchor
from .constraint import Constraint
from .edges import LayoutAttribute
from .frame import Frame

if TYPE_CHECKING:
    from ..engine import LayoutEngine


@dataclass(eq=False)
class View:
    """A rectangular node in the view hierarchy.

    Each view has a frame in its superview's coordinates and can have
    subviews. Active constraints are stored on the nearest common ancestor
    of the views they relate, so a subtree carries everything needed to lay
    it out.

    While ``translates_autoresizing_mask_into_constraints`` is True the
    layout engine treats the frame as fixed. Pinning functions switch it off
    the first time a view is pinned; nothing in this package switches it
    back on.

    Example:
        screen = View("screen", Frame.from_values(0, 0, 320, 480))
        card = screen.add_subview(View("card"))
        pin_edges_to_superview(card, inset=16)
        screen.layout_if_needed()
    """

    name: str
    frame: Frame = field(default_factory=Frame)
    subviews: list[View] = field(default_factory=list)
    superview: View | None = field(default=None, repr=False)
    constraints: list[Constraint] = field(default_factory=list, repr=False)
    translates_autoresizing_mask_into_constraints: bool = field(default=True, repr=False)

    def add_subview(self, view: View) -> View:
        """Add a subview, moving it out of its current superview first.

        Args:
            view: The view to add

        Returns:
            The added view (for chaining)
        """
        if view.superview is not None:
            view.remove_from_superview()
        view.superview = self
        self.subviews.append(view)
        return view

    def remove_from_superview(self) -> bool:
        """Detach this view from its superview.

        Constraints installed above this view that reference anything in its
        subtree are deactivated; constraints inside the subtree are kept.

        Returns:
            True if the view had a superview
        """
        superview = self.superview
        if superview is None:
            return False

        subtree = set(map(id, self.iter_views()))
        ancestor: View | None = superview
        while ancestor is not None:
            for constraint in list(ancestor.constraints):
                if any(id(item) in subtree for item in constraint.items()):
                    constraint.deactivate()
            ancestor = ancestor.superview

        superview.subviews.remove(self)
        self.superview = None
        return True

    def iter_views(self, include_self: bool = True) -> Iterator[View]:
        """Iterate over this view and all descendants (depth-first).

        Args:
            include_self: Whether to include this view in the iteration

        Yields:
            View instances
        """
        if include_self:
            yield self
        for subview in self.subviews:
            yield from subview.iter_views(include_self=True)

    def find(self, name: str) -> View | None:
        """Find a descendant view by name.

        Args:
            name: The name to search for

        Returns:
            The first matching view, or None
        """
        for view in self.iter_views():
            if view.name == name:
                return view
        return None

    def is_descendant_of(self, other: View) -> bool:
        """Check whether ``other`` is this view or one of its ancestors."""
        view: View | None = self
        while view is not None:
            if view is other:
                return True
            view = view.superview
        return False

    def common_ancestor(self, other: View) -> View | None:
        """Find the nearest view that contains both this view and ``other``.

        A view counts as its own ancestor.

        Returns:
            The nearest common ancestor, or None if the views are in
            different hierarchies
        """
        ancestors = set()
        view: View | None = self
        while view is not None:
            ancestors.add(id(view))
            view = view.superview

        view = other
        while view is not None:
            if id(view) in ancestors:
                return view
            view = view.superview
        return None

    @property
    def depth(self) -> int:
        """Get the depth of this view in the hierarchy (root = 0)."""
        if self.superview is None:
            return 0
        return self.superview.depth + 1

    @property
    def root(self) -> View:
        """Get the root view of this hierarchy."""
        if self.superview is None:
            return self
        return self.superview.root

    def constraints_affecting(self) -> list[Constraint]:
        """All active constraints in the hierarchy that reference this view."""
        return [
            constraint
            for view in self.root.iter_views()
            for constraint in view.constraints
            if any(item is self for item in constraint.items())
        ]

    # Anchors

    @property
    def top_anchor(self) -> YAxisAnchor:
        return YAxisAnchor(self, LayoutAttribute.TOP)

    @property
    def bottom_anchor(self) -> YAxisAnchor:
        return YAxisAnchor(self, LayoutAttribute.BOTTOM)

    @property
    def center_y_anchor(self) -> YAxisAnchor:
        return YAxisAnchor(self, LayoutAttribute.CENTER_Y)

    @property
    def left_anchor(self) -> XAxisAnchor:
        return XAxisAnchor(self, LayoutAttribute.LEFT)

    @property
    def right_anchor(self) -> XAxisAnchor:
        return XAxisAnchor(self, LayoutAttribute.RIGHT)

    @property
    def center_x_anchor(self) -> XAxisAnchor:
        return XAxisAnchor(self, LayoutAttribute.CENTER_X)

    @property
    def width_anchor(self) -> DimensionAnchor:
        return DimensionAnchor(self, LayoutAttribute.WIDTH)

    @property
    def height_anchor(self) -> DimensionAnchor:
        return DimensionAnchor(self, LayoutAttribute.HEIGHT)

    def layout_if_needed(self, engine: LayoutEngine | None = None) -> None:
        """Run a layout pass over this view's whole hierarchy.

        Args:
            engine: Engine to use. Defaults to a fresh LayoutEngine.
        """
        from ..engine import LayoutEngine

        (engine or LayoutEngine()).layout(self.root)

    def __repr__(self) -> str:
        subviews_str = f", subviews={len(self.subviews)}" if self.subviews else ""
        return f"View({self.name!r}, {self.frame!r}{subviews_str})"
