"""Constraint descriptors and their activation on the view hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import ConstraintActivationError
from .edges import LayoutAttribute, LayoutPriority, Relation

if TYPE_CHECKING:
    from .view import View


class Constraint:
    """A linear relation between two layout attributes.

    Reads as::

        first_item.first_attribute <relation> second_item.second_attribute * multiplier + constant

    ``second_item`` may be None for constant-only relations such as a fixed
    width. A constraint is inert until activated; activation installs it on
    the nearest common ancestor of its items, which is where the layout
    engine looks for it.
    """

    def __init__(
        self,
        first_item: View,
        first_attribute: LayoutAttribute,
        relation: Relation = Relation.EQUAL,
        second_item: View | None = None,
        second_attribute: LayoutAttribute | None = None,
        multiplier: float = 1.0,
        constant: float = 0.0,
        priority: float = LayoutPriority.REQUIRED,
    ) -> None:
        if (second_item is None) != (second_attribute is None):
            raise ValueError("second_item and second_attribute must be given together")
        self.first_item = first_item
        self.first_attribute = first_attribute
        self.relation = Relation(relation)
        self.second_item = second_item
        self.second_attribute = second_attribute
        self.multiplier = float(multiplier)
        self.constant = float(constant)
        self._priority = LayoutPriority.validate(priority)
        self._host: View | None = None

    @property
    def priority(self) -> float:
        return self._priority

    @priority.setter
    def priority(self, value: float) -> None:
        self._priority = LayoutPriority.validate(value)

    @property
    def is_active(self) -> bool:
        return self._host is not None

    @is_active.setter
    def is_active(self, value: bool) -> None:
        if value:
            self.activate()
        else:
            self.deactivate()

    @property
    def host(self) -> View | None:
        """The view this constraint is installed on while active."""
        return self._host

    def items(self) -> list[View]:
        """Views referenced by this constraint."""
        if self.second_item is None:
            return [self.first_item]
        return [self.first_item, self.second_item]

    def activate(self) -> Constraint:
        """Install the constraint on the nearest common ancestor of its items.

        Returns:
            This constraint (for chaining)

        Raises:
            ConstraintActivationError: If the items are in different hierarchies
        """
        if self._host is not None:
            return self

        if self.second_item is None:
            host = self.first_item
        else:
            host = self.first_item.common_ancestor(self.second_item)
        if host is None:
            raise ConstraintActivationError(
                f"Cannot activate {self!r}: '{self.first_item.name}' and "
                f"'{self.second_item.name}' have no common ancestor"
            )

        host.constraints.append(self)
        self._host = host
        return self

    def deactivate(self) -> Constraint:
        """Remove the constraint from the view it is installed on."""
        if self._host is not None:
            self._host.constraints.remove(self)
            self._host = None
        return self

    @staticmethod
    def activate_all(constraints: list[Constraint]) -> None:
        """Activate each constraint in order."""
        for constraint in constraints:
            constraint.activate()

    @staticmethod
    def deactivate_all(constraints: list[Constraint]) -> None:
        """Deactivate each constraint in order."""
        for constraint in constraints:
            constraint.deactivate()

    def __repr__(self) -> str:
        lhs = f"{self.first_item.name}.{self.first_attribute.value}"
        if self.second_item is None:
            rhs = f"{self.constant:g}"
        else:
            rhs = f"{self.second_item.name}.{self.second_attribute.value}"
            if self.multiplier != 1.0:
                rhs += f" * {self.multiplier:g}"
            if self.constant:
                sign = "+" if self.constant > 0 else "-"
                rhs += f" {sign} {abs(self.constant):g}"
        priority = "" if self.priority == LayoutPriority.REQUIRED else f" @{self.priority:g}"
        return f"Constraint({lhs} {self.relation.symbol} {rhs}{priority})"
