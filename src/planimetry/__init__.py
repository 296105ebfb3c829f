"""Planimetry: a small 2D computational geometry kernel."""

__version__ = "0.1.0"
