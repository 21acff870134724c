"""Per-call configuration for pinning functions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from numbers import Real
from typing import Any

from .edges import Edge, EdgeInsets, LayoutPriority, Relation


@dataclass
class PinOptions:
    """Options shared by every pinning function.

    Attributes:
        inset: A single inset for every edge, or per-edge EdgeInsets.
            Anything EdgeInsets.coerce accepts is allowed.
        relation: Relation of the created constraints (or its string value)
        priority: Priority of the created constraints, in (0, 1000]
    """

    inset: float | EdgeInsets = 0.0
    relation: Relation = Relation.EQUAL
    priority: float = LayoutPriority.REQUIRED

    def __post_init__(self) -> None:
        if isinstance(self.inset, Real):
            self.inset = float(self.inset)
        else:
            self.inset = EdgeInsets.coerce(self.inset)
        self.relation = Relation(self.relation)
        self.priority = LayoutPriority.validate(self.priority)

    @property
    def insets(self) -> EdgeInsets:
        """Insets for all four edges."""
        return EdgeInsets.coerce(self.inset)

    def inset_for(self, edge: Edge) -> float:
        """Inset that applies to a single edge."""
        return self.insets.value_for(edge)


def resolve_options(options: PinOptions | None, overrides: dict[str, Any]) -> PinOptions:
    """Combine an options object with keyword overrides.

    Args:
        options: Base options, or None for the defaults
        overrides: Field values that take precedence over ``options``

    Returns:
        A PinOptions instance (``options`` itself if there are no overrides)
    """
    if options is None:
        return PinOptions(**overrides)
    if not overrides:
        return options
    return replace(options, **overrides)
