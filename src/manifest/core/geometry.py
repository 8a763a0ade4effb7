"""Grid-to-output mapping and renderer-agnostic drawing primitives.

A view of ``VIEW_SIZE`` x ``VIEW_SIZE`` grid units (the 15x15 playfield plus two
spare units) is mapped affinely onto an output rectangle, grid origin at the
output's top-left corner.  The source rectangle is stretched by the output's
square proportions, so the scale is the same on both axes and the spare room on
the longer axis extends past the view.
Circle radii use the largest element of the per-axis scale.

Everything here is pure: the same inputs always give equal primitive lists.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias

from manifest.core.colors import Rgb
from manifest.core.document import ChartDocument
from manifest.core.enums import ShapeType
from manifest.core.errors import CorruptDocumentError
from manifest.core.shape import Shape
from manifest.core.types import GRID_SIZE, VIEW_SIZE

GRID_LINE_COLOR: Rgb = (0, 0, 0)
GRID_LINE_WIDTH = 1.0


# ── Value types ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle given by its min and max corners."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_min_size(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(x, y, x + width, y + height)

    @classmethod
    def from_points(cls, a: Point, b: Point) -> Rect:
        return cls(a.x, a.y, b.x, b.y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def square_proportions(self) -> Point:
        """Aspect ratio as a vector whose smaller element is 1."""
        w, h = self.width, self.height
        if w > h:
            return Point(w / h, 1.0)
        return Point(1.0, h / w)


@dataclass(frozen=True, slots=True)
class Stroke:
    width: float
    color: Rgb


@dataclass(frozen=True, slots=True)
class CirclePrimitive:
    center: Point
    radius: float
    fill: Rgb


@dataclass(frozen=True, slots=True)
class RectPrimitive:
    """Filled and/or stroked rectangle.  Corners are not normalised."""

    rect: Rect
    fill: Rgb | None = None
    stroke: Stroke | None = None


@dataclass(frozen=True, slots=True)
class MeshPrimitive:
    """Flat-coloured triangle mesh."""

    vertices: tuple[Point, ...]
    indices: tuple[int, ...]
    fill: Rgb


Primitive: TypeAlias = CirclePrimitive | RectPrimitive | MeshPrimitive


# ── Transform ────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class GridTransform:
    """Affine map from a source rectangle in grid units onto a target rectangle."""

    source: Rect
    target: Rect

    @classmethod
    def for_output(cls, output_rect: Rect) -> GridTransform:
        """Transform that fits the grid view into *output_rect*."""
        if output_rect.width <= 0 or output_rect.height <= 0:
            raise ValueError(f"Output rectangle must be non-empty: {output_rect}")
        proportions = output_rect.square_proportions()
        source = Rect.from_min_size(
            0.0, 0.0, proportions.x * VIEW_SIZE, proportions.y * VIEW_SIZE
        )
        return cls(source, output_rect)

    @property
    def scale(self) -> Point:
        return Point(
            self.target.width / self.source.width,
            self.target.height / self.source.height,
        )

    @property
    def uniform_scale(self) -> float:
        s = self.scale
        return max(s.x, s.y)

    def map_point(self, x: float, y: float) -> Point:
        s = self.scale
        return Point(
            self.target.min_x + (x - self.source.min_x) * s.x,
            self.target.min_y + (y - self.source.min_y) * s.y,
        )

    def unmap_point(self, x: float, y: float) -> Point:
        """Inverse of :meth:`map_point`: output pixel to grid units."""
        s = self.scale
        return Point(
            self.source.min_x + (x - self.target.min_x) / s.x,
            self.source.min_y + (y - self.target.min_y) / s.y,
        )


# ── Projection ───────────────────────────────────────────────────────────────


def resolve_color(color_table: Sequence[Rgb], index: int) -> Rgb:
    if not 0 <= index < len(color_table):
        raise CorruptDocumentError(
            f"Colour index {index} outside colour table of {len(color_table)}"
        )
    return color_table[index]


def _shape_primitive(
    shape: Shape, transform: GridTransform, color_table: Sequence[Rgb]
) -> Primitive:
    color = resolve_color(color_table, shape.color)
    x, y, size = shape.pos.x, shape.pos.y, shape.size

    match shape.ty:
        case ShapeType.CIRCLE:
            return CirclePrimitive(
                center=transform.map_point(x + 0.5, y + 0.5),
                radius=transform.uniform_scale * (size + 0.5),
                fill=color,
            )
        case ShapeType.SQUARE:
            return RectPrimitive(
                rect=Rect.from_points(
                    transform.map_point(x - size, y - size),
                    transform.map_point(x + size + 1.0, y + size + 1.0),
                ),
                fill=color,
            )
        case ShapeType.TRIANGLE:
            return MeshPrimitive(
                vertices=(
                    transform.map_point(x - size, y + 1.0 + size),
                    transform.map_point(x + 1.0 + size, y + 1.0 + size),
                    transform.map_point(x + 0.5, y - size),
                ),
                indices=(0, 1, 2),
                fill=color,
            )
        case _:
            # Only reachable when ``ty`` was overwritten after construction.
            raise CorruptDocumentError(f"Unknown shape kind: {shape.ty!r}")


def project_to_primitives(
    shape: Shape, output_rect: Rect, color_table: Sequence[Rgb]
) -> list[Primitive]:
    """Primitives for *shape* followed by its auto-shapes, depth-first."""
    transform = GridTransform.for_output(output_rect)
    return [_shape_primitive(s, transform, color_table) for s in shape.walk()]


def grid_overlay(output_rect: Rect) -> list[RectPrimitive]:
    """Unfilled outlines of the 15x15 playfield cells, row by row."""
    transform = GridTransform.for_output(output_rect)
    stroke = Stroke(GRID_LINE_WIDTH, GRID_LINE_COLOR)
    cells: list[RectPrimitive] = []
    for i in range(GRID_SIZE * GRID_SIZE):
        col, row = i % GRID_SIZE, i // GRID_SIZE
        cells.append(
            RectPrimitive(
                rect=Rect.from_points(
                    transform.map_point(col, row),
                    transform.map_point(col + 1, row + 1),
                ),
                stroke=stroke,
            )
        )
    return cells


def project_document(document: ChartDocument, output_rect: Rect) -> list[Primitive]:
    """Every shape of *document* in paint order, then the grid overlay on top."""
    color_table = document.header.color_table
    primitives: list[Primitive] = []
    for shape in document.shapes:
        primitives.extend(project_to_primitives(shape, output_rect, color_table))
    primitives.extend(grid_overlay(output_rect))
    return primitives


def grid_cell_at(output_rect: Rect, x: float, y: float) -> tuple[int, int] | None:
    """Playfield cell ``(col, row)`` under output pixel ``(x, y)``, or ``None``."""
    point = GridTransform.for_output(output_rect).unmap_point(x, y)
    col, row = int(point.x // 1), int(point.y // 1)
    if 0 <= col < GRID_SIZE and 0 <= row < GRID_SIZE:
        return col, row
    return None
