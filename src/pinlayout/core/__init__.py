"""Core layout model: edges, frames, views, anchors and constraints."""

from .edges import Axis, Edge, EdgeGroup, EdgeInsets, LayoutAttribute, LayoutPriority, Relation
from .frame import Frame
from .constraint import Constraint
from .anchors import Anchor, DimensionAnchor, XAxisAnchor, YAxisAnchor
from .view import View
from .options import PinOptions

__all__ = [
    "Axis",
    "Edge",
    "EdgeGroup",
    "EdgeInsets",
    "LayoutAttribute",
    "LayoutPriority",
    "Relation",
    "Frame",
    "Constraint",
    "Anchor",
    "DimensionAnchor",
    "XAxisAnchor",
    "YAxisAnchor",
    "View",
    "PinOptions",
]
