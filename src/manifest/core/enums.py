"""Enumerations for the chart domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class ShapeType(IntEnum):
    """Kind of a placed shape. The integer value is the wire code."""

    CIRCLE = 0
    SQUARE = 1
    TRIANGLE = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


class MoveStep(StrEnum):
    """A single planned step of a shape's movement sequence."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    EXPAND = "expand"
    SHRINK = "shrink"
