"""Exceptions raised by pinlayout."""


class PinLayoutError(Exception):
    """Base class for all pinlayout errors."""


class AxisMismatchError(PinLayoutError, ValueError):
    """Two paired edges or anchors belong to different axes.

    This is a caller error and is raised before any constraint is created.
    """


class ConstraintActivationError(PinLayoutError, ValueError):
    """A constraint relates items that share no common ancestor view."""


class UnsatisfiableLayoutError(PinLayoutError):
    """Required constraints conflict with each other during a layout pass."""


class LayoutDefinitionError(PinLayoutError, ValueError):
    """A layout document references unknown views, edges or options."""
