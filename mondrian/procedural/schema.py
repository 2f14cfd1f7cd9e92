"""
Rectangle: one cell of the grid. Center-based, canvas origin in the middle, y axis up.
"""
from dataclasses import dataclass, field
from typing import Any

from .data.palettes import PaletteColor


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle. Immutable; splits and recolors build new ones."""
    x: float
    y: float
    w: float
    h: float
    color: PaletteColor = field(default=PaletteColor.WHITE)

    @property
    def left(self) -> float:
        return self.x - self.w / 2.0

    @property
    def right(self) -> float:
        return self.x + self.w / 2.0

    @property
    def bottom(self) -> float:
        return self.y - self.h / 2.0

    @property
    def top(self) -> float:
        return self.y + self.h / 2.0

    @property
    def area(self) -> float:
        return self.w * self.h

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(left, bottom, right, top)."""
        return self.left, self.bottom, self.right, self.top

    def spans_x(self, p: float) -> bool:
        """True if p lies strictly inside the horizontal span."""
        return self.left < p < self.right

    def spans_y(self, p: float) -> bool:
        """True if p lies strictly inside the vertical span."""
        return self.bottom < p < self.top

    def contains(self, other: "Rectangle", tol: float = 1e-6) -> bool:
        return (
            other.left >= self.left - tol
            and other.right <= self.right + tol
            and other.bottom >= self.bottom - tol
            and other.top <= self.top + tol
        )

    def overlaps(self, other: "Rectangle", tol: float = 1e-6) -> bool:
        """True if the open interiors intersect (shared edges do not count)."""
        dx = min(self.right, other.right) - max(self.left, other.left)
        dy = min(self.top, other.top) - max(self.bottom, other.bottom)
        return dx > tol and dy > tol

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging and reports."""
        return {
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "color": self.color.name,
        }
