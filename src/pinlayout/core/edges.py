"""Edge, axis and relation model used to describe pinning requests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Mapping, Sequence


class Axis(Enum):
    """Layout axis an attribute or edge belongs to."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class LayoutAttribute(Enum):
    """Attributes of a view's frame that a constraint can relate."""

    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"
    WIDTH = "width"
    HEIGHT = "height"
    CENTER_X = "center_x"
    CENTER_Y = "center_y"

    @property
    def axis(self) -> Axis:
        """Axis along which this attribute is measured."""
        return _ATTRIBUTE_AXES[self]


_ATTRIBUTE_AXES: dict[LayoutAttribute, Axis] = {
    LayoutAttribute.TOP: Axis.VERTICAL,
    LayoutAttribute.BOTTOM: Axis.VERTICAL,
    LayoutAttribute.HEIGHT: Axis.VERTICAL,
    LayoutAttribute.CENTER_Y: Axis.VERTICAL,
    LayoutAttribute.LEFT: Axis.HORIZONTAL,
    LayoutAttribute.RIGHT: Axis.HORIZONTAL,
    LayoutAttribute.WIDTH: Axis.HORIZONTAL,
    LayoutAttribute.CENTER_X: Axis.HORIZONTAL,
}


class Edge(Enum):
    """One of the four boundary sides of a view.

    The directional multiplier turns a non-negative inset into a constant
    that always moves the edge inward:
    - TOP, LEFT: +1 (the edge moves down / right)
    - BOTTOM, RIGHT: -1 (the edge moves up / left)
    """

    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"

    @classmethod
    def all(cls) -> list[Edge]:
        """All edges in their fixed processing order."""
        return [cls.TOP, cls.LEFT, cls.BOTTOM, cls.RIGHT]

    @property
    def directional_multiplier(self) -> float:
        if self in (Edge.TOP, Edge.LEFT):
            return 1.0
        return -1.0

    @property
    def attribute(self) -> LayoutAttribute:
        return LayoutAttribute(self.value)

    @property
    def axis(self) -> Axis:
        return self.attribute.axis


class EdgeGroup(Enum):
    """Named, ordered sets of edges."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    ALL = "all"

    @property
    def edges(self) -> list[Edge]:
        if self is EdgeGroup.HORIZONTAL:
            return [Edge.LEFT, Edge.RIGHT]
        if self is EdgeGroup.VERTICAL:
            return [Edge.TOP, Edge.BOTTOM]
        return Edge.all()


class Relation(Enum):
    """Comparison operator of a constraint."""

    EQUAL = "equal"
    LESS_THAN_OR_EQUAL = "less_or_equal"
    GREATER_THAN_OR_EQUAL = "greater_or_equal"

    @property
    def symbol(self) -> str:
        return _RELATION_SYMBOLS[self]


_RELATION_SYMBOLS = {
    Relation.EQUAL: "==",
    Relation.LESS_THAN_OR_EQUAL: "<=",
    Relation.GREATER_THAN_OR_EQUAL: ">=",
}


class LayoutPriority:
    """Well-known constraint priorities.

    Priorities are plain numbers in (0, 1000]; these are the conventional
    reference points. Anything below REQUIRED may be broken by the engine.
    """

    REQUIRED = 1000.0
    DEFAULT_HIGH = 750.0
    DEFAULT_LOW = 250.0
    FITTING_SIZE = 50.0

    @staticmethod
    def validate(priority: float) -> float:
        """Return the priority as a float, or raise if it is out of range."""
        value = float(priority)
        if not 0.0 < value <= LayoutPriority.REQUIRED:
            raise ValueError(f"Priority must be in (0, 1000], got {priority!r}")
        return value


@dataclass(frozen=True)
class EdgeInsets:
    """Insets for each of the four edges."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, inset: float) -> EdgeInsets:
        """Same inset applied to every edge."""
        value = float(inset)
        return cls(top=value, left=value, bottom=value, right=value)

    @classmethod
    def coerce(cls, value: Any) -> EdgeInsets:
        """Build insets from a scalar, a sequence or a mapping.

        Args:
            value: An EdgeInsets, a number (applied uniformly), a
                [top, left, bottom, right] sequence, or a mapping with any of
                the keys top/left/bottom/right (missing keys are 0)

        Returns:
            EdgeInsets instance
        """
        if isinstance(value, EdgeInsets):
            return value
        if value is None:
            return cls.ZERO
        if isinstance(value, Real):
            return cls.uniform(value)
        if isinstance(value, Mapping):
            unknown = set(value) - {edge.value for edge in Edge}
            if unknown:
                raise ValueError(f"Unknown inset keys: {sorted(unknown)}")
            return cls(**{key: float(v) for key, v in value.items()})
        if isinstance(value, Sequence) and not isinstance(value, str):
            if len(value) != 4:
                raise ValueError(
                    f"Inset sequence must be [top, left, bottom, right], got {list(value)}"
                )
            top, left, bottom, right = (float(v) for v in value)
            return cls(top=top, left=left, bottom=bottom, right=right)
        raise TypeError(f"Cannot interpret {value!r} as edge insets")

    def value_for(self, edge: Edge) -> float:
        """Inset for a single edge."""
        return getattr(self, edge.value)


EdgeInsets.ZERO = EdgeInsets()
