"""Typed layout anchors for building constraints between views."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import AxisMismatchError
from .constraint import Constraint
from .edges import LayoutAttribute, Relation

if TYPE_CHECKING:
    from .view import View


class Anchor:
    """A reference to one layout attribute of a view.

    Anchors can only be related to anchors of the same class, so an
    X-axis anchor never ends up paired with a Y-axis anchor.
    """

    def __init__(self, item: View, attribute: LayoutAttribute) -> None:
        self.item = item
        self.attribute = attribute

    def constraint(
        self,
        equal_to: Anchor | None = None,
        *,
        less_than_or_equal_to: Anchor | None = None,
        greater_than_or_equal_to: Anchor | None = None,
        constant: float = 0.0,
    ) -> Constraint:
        """Create an inactive constraint relating this anchor to another.

        Exactly one of the three target arguments must be given.

        Args:
            equal_to: Anchor for an equal relation
            less_than_or_equal_to: Anchor for a <= relation
            greater_than_or_equal_to: Anchor for a >= relation
            constant: Offset added to the target anchor

        Returns:
            Constraint that still needs to be activated
        """
        targets = [
            (Relation.EQUAL, equal_to),
            (Relation.LESS_THAN_OR_EQUAL, less_than_or_equal_to),
            (Relation.GREATER_THAN_OR_EQUAL, greater_than_or_equal_to),
        ]
        given = [(relation, anchor) for relation, anchor in targets if anchor is not None]
        if len(given) != 1:
            raise ValueError("Exactly one target anchor must be given")
        relation, other = given[0]

        if not isinstance(other, type(self)):
            raise AxisMismatchError(
                f"Cannot relate {self!r} to {other!r}: anchors have different axes"
            )

        return Constraint(
            self.item,
            self.attribute,
            relation,
            other.item,
            other.attribute,
            constant=constant,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.item.name}.{self.attribute.value})"


class XAxisAnchor(Anchor):
    """Anchor for left, right and center X attributes."""


class YAxisAnchor(Anchor):
    """Anchor for top, bottom and center Y attributes."""


class DimensionAnchor(Anchor):
    """Anchor for width and height."""

    def constraint_to_constant(
        self, constant: float, relation: Relation = Relation.EQUAL
    ) -> Constraint:
        """Create an inactive constraint fixing this dimension to a constant."""
        return Constraint(self.item, self.attribute, relation, constant=constant)
