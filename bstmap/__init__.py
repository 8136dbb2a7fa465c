"""Ordered map on a binary search tree with a user-supplied less-than comparator, with a demo and a scored self-check."""

__version__ = "0.1.0"
__all__ = ["treemap", "demo", "selfcheck"]