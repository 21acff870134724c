"""Shorthand edge-pinning constraints for constraint-based view layout."""

from .core import (
    Axis,
    Constraint,
    DimensionAnchor,
    Edge,
    EdgeGroup,
    EdgeInsets,
    Frame,
    LayoutAttribute,
    LayoutPriority,
    PinOptions,
    Relation,
    View,
    XAxisAnchor,
    YAxisAnchor,
)
from .engine import LayoutEngine
from .errors import (
    AxisMismatchError,
    ConstraintActivationError,
    LayoutDefinitionError,
    PinLayoutError,
    UnsatisfiableLayoutError,
)
from .pin import (
    pin_edge_to_edge,
    pin_edge_to_same_edge,
    pin_edges_of_group_to_same_edges,
    pin_edges_to_same_edges,
    pin_edges_to_same_edges_excluding,
    pin_to_anchors,
)
from .superview import (
    pin_edge_to_superview,
    pin_edge_to_superview_edge,
    pin_edges_of_group_to_superview,
    pin_edges_to_superview,
    pin_edges_to_superview_excluding,
)

__all__ = [
    "Axis",
    "Constraint",
    "DimensionAnchor",
    "Edge",
    "EdgeGroup",
    "EdgeInsets",
    "Frame",
    "LayoutAttribute",
    "LayoutPriority",
    "PinOptions",
    "Relation",
    "View",
    "XAxisAnchor",
    "YAxisAnchor",
    "LayoutEngine",
    "AxisMismatchError",
    "ConstraintActivationError",
    "LayoutDefinitionError",
    "PinLayoutError",
    "UnsatisfiableLayoutError",
    "pin_edge_to_edge",
    "pin_edge_to_same_edge",
    "pin_edges_of_group_to_same_edges",
    "pin_edges_to_same_edges",
    "pin_edges_to_same_edges_excluding",
    "pin_to_anchors",
    "pin_edge_to_superview",
    "pin_edge_to_superview_edge",
    "pin_edges_of_group_to_superview",
    "pin_edges_to_superview",
    "pin_edges_to_superview_excluding",
]
