"""Shape: a placed circle, square or triangle with its auto-shapes."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from manifest.core.colors import is_color_index
from manifest.core.enums import MoveStep, ShapeType
from manifest.core.types import GRID_MAX, GRID_MIN, Vec2

_CENTRE = Vec2((GRID_MIN + GRID_MAX) / 2, (GRID_MIN + GRID_MAX) / 2)
MIN_SIZE = -1.0  # wire scale 0


@dataclass
class Shape:
    """One shape placement.

    ``pos`` is in grid units and is not clamped by the model; ``size`` 0 is
    the minimum footprint.  ``auto_shapes`` are owned by this shape and are
    drawn right after it, depth-first.  ``moves`` lives in memory only.
    """

    pos: Vec2 = _CENTRE
    size: float = 0.0
    ty: ShapeType = ShapeType.CIRCLE
    color: int = 0
    moves: list[MoveStep] = field(default_factory=list)
    auto_shapes: list[Shape] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.ty = ShapeType(self.ty)
        if not is_color_index(self.color):
            raise ValueError(f"Shape color is not a colour index: {self.color}")
        if not all(math.isfinite(v) for v in (self.pos.x, self.pos.y, self.size)):
            raise ValueError(
                f"Shape position and size must be finite: {self.pos}, {self.size}"
            )
        if self.size < MIN_SIZE:
            raise ValueError(f"Shape size must be at least {MIN_SIZE}, got {self.size}")

    def walk(self) -> Iterator[Shape]:
        """Yield this shape, then every auto-shape depth-first in paint order."""
        yield self
        for child in self.auto_shapes:
            yield from child.walk()

    def clamp_to_grid(self) -> None:
        self.pos = self.pos.clamped()

    def add_move(self, step: MoveStep) -> None:
        self.moves.append(MoveStep(step))

    def clear_moves(self) -> None:
        self.moves.clear()

    @property
    def is_static(self) -> bool:
        """True when the shape has no movement sequence."""
        return not self.moves
