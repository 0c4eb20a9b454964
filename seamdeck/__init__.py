"""Seam-carving image resizing and a four-player Euchre game."""

__version__ = "0.1.0"