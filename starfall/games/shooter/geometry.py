"""
Axis-aligned rectangle geometry shared by every entity footprint.

Coordinates use a top-left origin with y growing downward.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Rect:
    """A real-valued axis-aligned rectangle."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


def overlaps(a: Rect, b: Rect) -> bool:
    """
    AABB overlap test (top-left coordinates).

    Inequalities are strict, so rectangles that only share an edge do not
    overlap and a zero-area rectangle never overlaps itself.
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )
