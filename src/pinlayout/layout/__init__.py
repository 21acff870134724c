"""Layout system for data-driven view hierarchies."""

from .loader import LayoutLoader

__all__ = ["LayoutLoader"]
