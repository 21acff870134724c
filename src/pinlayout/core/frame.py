"""Frame class for view rectangles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

import numpy as np
from numpy.typing import NDArray

from .edges import EdgeInsets, LayoutAttribute


@dataclass
class Frame:
    """Axis-aligned rectangle of a view in its superview's coordinates.

    The origin is the top-left corner; Y grows downward.
    """

    origin: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(2, dtype=np.float64)
    )
    size: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(2, dtype=np.float64)
    )

    def __post_init__(self) -> None:
        self.origin = np.asarray(self.origin, dtype=np.float64)
        self.size = np.asarray(self.size, dtype=np.float64)

    @classmethod
    def from_values(cls, x: float, y: float, width: float, height: float) -> Self:
        """Create a frame from [x, y, width, height]."""
        return cls(origin=np.array([x, y]), size=np.array([width, height]))

    @property
    def min_x(self) -> float:
        return float(self.origin[0])

    @property
    def min_y(self) -> float:
        return float(self.origin[1])

    @property
    def width(self) -> float:
        return float(self.size[0])

    @property
    def height(self) -> float:
        return float(self.size[1])

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def max_y(self) -> float:
        return self.min_y + self.height

    def value_of(self, attribute: LayoutAttribute) -> float:
        """Get the value of a layout attribute in superview coordinates."""
        if attribute is LayoutAttribute.LEFT:
            return self.min_x
        if attribute is LayoutAttribute.RIGHT:
            return self.max_x
        if attribute is LayoutAttribute.TOP:
            return self.min_y
        if attribute is LayoutAttribute.BOTTOM:
            return self.max_y
        if attribute is LayoutAttribute.WIDTH:
            return self.width
        if attribute is LayoutAttribute.HEIGHT:
            return self.height
        if attribute is LayoutAttribute.CENTER_X:
            return self.min_x + self.width / 2
        return self.min_y + self.height / 2

    def inset_by(self, insets: EdgeInsets | float) -> Frame:
        """Return a frame shrunk by the given insets."""
        insets = EdgeInsets.coerce(insets)
        return Frame(
            origin=self.origin + np.array([insets.left, insets.top]),
            size=self.size - np.array([
                insets.left + insets.right,
                insets.top + insets.bottom,
            ]),
        )

    def to_array(self) -> NDArray[np.float64]:
        """Convert to [x, y, width, height]."""
        return np.concatenate([self.origin, self.size])

    def copy(self) -> Self:
        """Create a deep copy of this frame."""
        return Frame(origin=self.origin.copy(), size=self.size.copy())

    def __repr__(self) -> str:
        x, y, w, h = (float(v) + 0.0 for v in self.to_array())
        return f"Frame(x={x:g}, y={y:g}, width={w:g}, height={h:g})"
