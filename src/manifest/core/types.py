"""Grid constants and the 2D vector value type."""

from __future__ import annotations

from dataclasses import dataclass

GRID_SIZE = 15  # playfield cells per axis
VIEW_SIZE = GRID_SIZE + 2  # grid units mapped onto the output along the short axis

GRID_MIN = 0.0
GRID_MAX = float(GRID_SIZE - 1)


@dataclass(frozen=True, slots=True)
class Vec2:
    """2D coordinate in grid units."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def clamped(self, lo: float = GRID_MIN, hi: float = GRID_MAX) -> Vec2:
        """Clamp both axes to ``[lo, hi]``."""
        return Vec2(min(max(self.x, lo), hi), min(max(self.y, lo), hi))
