"""Axis-aligned rectangles used to place face parts on the canvas."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass


def _int16(value: float) -> int:
    """Truncate toward zero and wrap into the signed 16-bit range."""
    v = math.trunc(value)
    return (v + 0x8000) % 0x10000 - 0x8000


def _half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


@dataclass
class BoundingRect:
    """A rectangle given by its top-left corner and its size, in pixels.

    Coordinates are kept as signed 16-bit integers; fractional values are
    truncated toward zero.
    """

    top: int = 0
    left: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        self.top = _int16(self.top)
        self.left = _int16(self.left)
        self.width = _int16(self.width)
        self.height = _int16(self.height)

    def right(self) -> int:
        return _int16(self.left + self.width)

    def bottom(self) -> int:
        return _int16(self.top + self.height)

    def center_x(self) -> int:
        return _int16(self.left + _half(self.width))

    def center_y(self) -> int:
        return _int16(self.top + _half(self.height))

    def set_position(self, top: float, left: float) -> None:
        self.top = _int16(top)
        self.left = _int16(left)

    def set_size(self, width: float, height: float) -> None:
        self.width = _int16(width)
        self.height = _int16(height)

    def moved(self, top: float, left: float) -> BoundingRect:
        """Return a copy of this rectangle placed at a new position."""
        return dataclasses.replace(self, top=top, left=left)