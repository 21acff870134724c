"""YAML loader for view hierarchy and pin definitions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.anchors import Anchor
from ..core.constraint import Constraint
from ..core.edges import Edge, EdgeGroup
from ..core.frame import Frame
from ..core.options import PinOptions
from ..core.view import View
from ..errors import LayoutDefinitionError
from ..pin import (
    pin_edge_to_edge,
    pin_edges_of_group_to_same_edges,
    pin_edges_to_same_edges,
    pin_edges_to_same_edges_excluding,
    pin_to_anchors,
)
from ..superview import (
    pin_edge_to_superview_edge,
    pin_edges_of_group_to_superview,
    pin_edges_to_superview,
    pin_edges_to_superview_excluding,
)

logger = logging.getLogger(__name__)

# Keys of a pin entry that go into PinOptions
OPTION_KEYS = ("inset", "relation", "priority")

# Attribute names usable in "view.attribute" anchor references
ANCHOR_ATTRIBUTES = {
    "top": "top_anchor",
    "bottom": "bottom_anchor",
    "center_y": "center_y_anchor",
    "left": "left_anchor",
    "right": "right_anchor",
    "center_x": "center_x_anchor",
    "width": "width_anchor",
    "height": "height_anchor",
}


def _is_group(value: Any) -> bool:
    return isinstance(value, str) and value in {group.value for group in EdgeGroup}


class LayoutLoader:
    """Loads view hierarchies and their pins from YAML files.

    YAML format:
        name: screen
        frame: [x, y, width, height]     # root frame, fixed
        views:
          header:
            frame: [x, y, width, height] # optional, kept while unpinned
            size: {height: 44}           # optional fixed width/height
            views: {...}                 # optional nested subviews
            pins:
              # Edges (list, group name or single edge) to the superview
              - superview: [top, left, right]
                inset: 8                 # number, [t, l, b, r] or mapping
                relation: equal          # equal|less_or_equal|greater_or_equal
                priority: 1000
              # All edges but one to the superview
              - superview: all
                exclude: bottom
              # One edge to an edge of the superview
              - superview: bottom
                to_edge: top
              # One edge to an edge of another view
              - edge: top
                to: other_view
                to_edge: bottom          # defaults to the same edge
              # Several edges (list, group name) to another view
              - edges: horizontal
                to: other_view
              # Edges to arbitrary "view.attribute" anchors
              - anchors: {top: header.bottom, left: screen.left}

    Views are created before any pin is applied, so pins may reference views
    defined later in the document. Pins are applied in document order.
    """

    def load(self, path: str | Path) -> View:
        """Load a layout definition from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Root View of the loaded hierarchy with all pins applied
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        return self._build_hierarchy(data)

    def load_string(self, yaml_string: str) -> View:
        """Load a layout definition from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            Root View of the loaded hierarchy with all pins applied
        """
        data = yaml.safe_load(yaml_string)
        return self._build_hierarchy(data)

    def _build_hierarchy(self, data: dict[str, Any]) -> View:
        """Build the view hierarchy from parsed YAML data."""
        if not isinstance(data, dict):
            raise LayoutDefinitionError("Layout document must be a mapping")

        root = View(data.get("name", "root"), frame=self._parse_frame(data.get("frame")))
        views: dict[str, View] = {root.name: root}

        # First pass: create every view so pins can reference any of them
        definitions: list[tuple[View, dict[str, Any]]] = []
        self._create_views(root, data.get("views") or {}, views, definitions)

        # Second pass: sizes and pins, in document order
        constraint_count = 0
        for view, view_def in definitions:
            constraint_count += len(self._apply_size(view, view_def.get("size")))
            for pin_def in view_def.get("pins") or []:
                constraint_count += len(self._apply_pin(view, pin_def, views))

        logger.debug(
            "Loaded layout '%s': %d views, %d constraints",
            root.name, len(views), constraint_count,
        )
        return root

    def _create_views(
        self,
        parent: View,
        views_data: dict[str, Any],
        views: dict[str, View],
        definitions: list[tuple[View, dict[str, Any]]],
    ) -> None:
        for name, view_def in views_data.items():
            view_def = view_def or {}
            if name in views:
                raise LayoutDefinitionError(f"View '{name}' is defined more than once")

            view = parent.add_subview(View(name, frame=self._parse_frame(view_def.get("frame"))))
            views[name] = view
            definitions.append((view, view_def))
            self._create_views(view, view_def.get("views") or {}, views, definitions)

    def _apply_pin(
        self, view: View, pin_def: dict[str, Any], views: dict[str, View]
    ) -> list[Constraint]:
        """Apply one pin entry to a view.

        Returns:
            The constraints created by the entry
        """
        options = self._parse_options(view, pin_def)

        if "anchors" in pin_def:
            anchors = {
                edge: self._resolve_anchor(ref, views)
                for edge, ref in (pin_def["anchors"] or {}).items()
            }
            unknown = set(anchors) - {edge.value for edge in Edge}
            if unknown:
                raise LayoutDefinitionError(
                    f"Unknown anchor edges for '{view.name}': {sorted(unknown)}"
                )
            return pin_to_anchors(view, options=options, **anchors)

        if "superview" in pin_def:
            edges = pin_def["superview"]
            if "to_edge" in pin_def:
                constraint = pin_edge_to_superview_edge(
                    view,
                    self._parse_edge(edges),
                    self._parse_edge(pin_def["to_edge"]),
                    options,
                )
                return [constraint] if constraint is not None else []
            if "exclude" in pin_def:
                return pin_edges_to_superview_excluding(
                    view, self._parse_edge(pin_def["exclude"]), options
                )
            if _is_group(edges):
                return pin_edges_of_group_to_superview(view, EdgeGroup(edges), options)
            return pin_edges_to_superview(view, self._parse_edges(edges), options)

        target = self._resolve_view(pin_def.get("to"), views)

        if "edge" in pin_def:
            edge = self._parse_edge(pin_def["edge"])
            to_edge = self._parse_edge(pin_def.get("to_edge", pin_def["edge"]))
            return [pin_edge_to_edge(view, edge, target, to_edge, options)]

        if "exclude" in pin_def:
            return pin_edges_to_same_edges_excluding(
                view, target, self._parse_edge(pin_def["exclude"]), options
            )

        edges = pin_def.get("edges", "all")
        if _is_group(edges):
            return pin_edges_of_group_to_same_edges(view, target, EdgeGroup(edges), options)
        return pin_edges_to_same_edges(view, target, self._parse_edges(edges), options)

    def _apply_size(self, view: View, size_def: dict[str, Any] | None) -> list[Constraint]:
        """Fix width and/or height of a view to constants."""
        if not size_def:
            return []

        constraints = []
        for key, value in size_def.items():
            if key not in ("width", "height"):
                raise LayoutDefinitionError(f"Unknown size key '{key}' on '{view.name}'")
            anchor = view.width_anchor if key == "width" else view.height_anchor
            constraints.append(anchor.constraint_to_constant(float(value)).activate())
        view.translates_autoresizing_mask_into_constraints = False
        return constraints

    def _parse_options(self, view: View, pin_def: dict[str, Any]) -> PinOptions:
        values = {key: pin_def[key] for key in OPTION_KEYS if key in pin_def}
        try:
            return PinOptions(**values)
        except (TypeError, ValueError) as exc:
            raise LayoutDefinitionError(f"Invalid pin options for '{view.name}': {exc}") from exc

    def _parse_frame(self, frame_def: list[float] | None) -> Frame:
        if frame_def is None:
            return Frame()
        if len(frame_def) != 4:
            raise LayoutDefinitionError(
                f"Frame must be [x, y, width, height], got {frame_def}"
            )
        return Frame.from_values(*(float(v) for v in frame_def))

    def _parse_edge(self, value: str) -> Edge:
        try:
            return Edge(value)
        except ValueError:
            raise LayoutDefinitionError(f"Unknown edge '{value}'") from None

    def _parse_edges(self, value: str | list[str]) -> list[Edge]:
        if isinstance(value, str):
            return [self._parse_edge(value)]
        return [self._parse_edge(edge) for edge in value]

    def _resolve_view(self, name: str | None, views: dict[str, View]) -> View:
        if name is None:
            raise LayoutDefinitionError("Pin entry needs 'to', 'superview' or 'anchors'")
        if name not in views:
            raise LayoutDefinitionError(f"Pin references unknown view '{name}'")
        return views[name]

    def _resolve_anchor(self, ref: str, views: dict[str, View]) -> Anchor:
        """Resolve a "view.attribute" reference to an anchor."""
        view_name, _, attribute = str(ref).rpartition(".")
        if not view_name or attribute not in ANCHOR_ATTRIBUTES:
            raise LayoutDefinitionError(
                f"Anchor reference must be 'view.attribute', got '{ref}'"
            )
        return getattr(self._resolve_view(view_name, views), ANCHOR_ATTRIBUTES[attribute])

