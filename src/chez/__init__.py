"""Chez — chessboard model with attack and check detection."""

__version__ = "0.1.0"
