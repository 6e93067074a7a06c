"""Hex grid coordinates and the tile map built on top of them."""

from .hexgrid import DIRECTIONS, ORIGIN, Hex

__all__ = ["DIRECTIONS", "Hex", "ORIGIN"]
