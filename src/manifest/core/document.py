"""ChartDocument: header plus the ordered shape list."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from manifest.core.colors import is_color_index
from manifest.core.enums import ShapeType
from manifest.core.errors import CorruptDocumentError
from manifest.core.header import Header
from manifest.core.shape import MIN_SIZE, Shape
from manifest.core.types import Vec2


@dataclass
class ChartDocument:
    """A whole chart.  Shape order is paint order: the first shape is drawn first."""

    header: Header = field(default_factory=Header)
    shapes: list[Shape] = field(default_factory=list)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def new_default(cls) -> ChartDocument:
        """Empty chart with a default header."""
        return cls()

    @classmethod
    def demo(cls) -> ChartDocument:
        """Default header with a small demonstration shape set."""
        return cls(
            shapes=[
                Shape(pos=Vec2(0.0, 0.0), size=0.0, ty=ShapeType.TRIANGLE),
                Shape(pos=Vec2(4.0, 3.0), size=1.0, ty=ShapeType.SQUARE),
                Shape(pos=Vec2(8.0, 7.0), size=2.0, ty=ShapeType.CIRCLE),
            ]
        )

    def replace(self, other: ChartDocument) -> None:
        """Take over *other*'s header and shapes wholesale."""
        self.header = other.header
        self.shapes = other.shapes

    # ── Shape list ───────────────────────────────────────────────────────

    def add_shape(self, shape: Shape) -> int:
        """Append *shape* and return its index."""
        self.shapes.append(shape)
        return len(self.shapes) - 1

    def insert_shape(self, index: int, shape: Shape) -> None:
        self.shapes.insert(index, shape)

    def remove_shape(self, index: int) -> Shape:
        """Remove and return the shape at *index*, auto-shapes included."""
        return self.shapes.pop(index)

    def iter_shapes(self) -> Iterator[Shape]:
        """Every shape in paint order, auto-shapes right after their parent."""
        for shape in self.shapes:
            yield from shape.walk()

    def check_invariants(self) -> None:
        """Raise :class:`CorruptDocumentError` if the chart cannot be written out.

        Catches values edited in place after construction: colour indices outside
        the table, and positions or sizes that are not finite or below the minimum.
        """
        if not is_color_index(self.header.bg_color):
            raise CorruptDocumentError(f"bg_color out of range: {self.header.bg_color}")
        for shape in self.iter_shapes():
            if not is_color_index(shape.color):
                raise CorruptDocumentError(f"Shape color out of range: {shape.color}")
            values = (shape.pos.x, shape.pos.y, shape.size)
            if not all(math.isfinite(v) for v in values) or shape.size < MIN_SIZE:
                raise CorruptDocumentError(
                    "Shape geometry not representable: "
                    f"pos={shape.pos} size={shape.size}"
                )

    # ── Serialization ────────────────────────────────────────────────────

    def to_wire(self) -> list[dict[str, Any]]:
        """Encode as the JSON array: header object first, then one object per shape."""
        from manifest.core.wire import document_to_wire

        return document_to_wire(self)

    @classmethod
    def from_wire(cls, data: Any) -> ChartDocument:
        """Decode a parsed JSON array.

        Raises:
            ChartDecodeError: Any subtype, when *data* is not a valid chart.
        """
        from manifest.core.wire import document_from_wire

        return document_from_wire(data)

    def to_json(self) -> str:
        from manifest.core.wire import dumps_chart

        return dumps_chart(self)

    @classmethod
    def from_json(cls, text: str) -> ChartDocument:
        from manifest.core.wire import loads_chart

        return loads_chart(text)
