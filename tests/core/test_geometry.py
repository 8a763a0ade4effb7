"""Tests for grid mapping and primitive projection."""

import pytest

from manifest.core.colors import DEFAULT_COLOR_TABLE
from manifest.core.document import ChartDocument
from manifest.core.enums import ShapeType
from manifest.core.errors import CorruptDocumentError
from manifest.core.geometry import (
    GRID_LINE_COLOR,
    CirclePrimitive,
    GridTransform,
    MeshPrimitive,
    Point,
    Rect,
    RectPrimitive,
    grid_cell_at,
    grid_overlay,
    project_document,
    project_to_primitives,
)
from manifest.core.shape import Shape
from manifest.core.types import Vec2

# 170 px over a 17-unit view: 10 px per grid unit.
SQUARE_170 = Rect.from_min_size(0.0, 0.0, 170.0, 170.0)
PALETTE = list(DEFAULT_COLOR_TABLE)


def _one(shape: Shape, rect: Rect = SQUARE_170):
    primitives = project_to_primitives(shape, rect, PALETTE)
    assert len(primitives) == 1
    return primitives[0]


class TestGridTransform:
    def test_square_output(self) -> None:
        t = GridTransform.for_output(SQUARE_170)
        assert t.scale == Point(10.0, 10.0)
        assert t.uniform_scale == 10.0
        assert t.map_point(0.0, 0.0) == Point(0.0, 0.0)
        assert t.map_point(15.0, 15.0) == Point(150.0, 150.0)

    def test_wide_output_keeps_uniform_scale(self) -> None:
        t = GridTransform.for_output(Rect.from_min_size(0.0, 0.0, 340.0, 170.0))
        assert t.scale.x == pytest.approx(10.0)
        assert t.scale.y == pytest.approx(10.0)

    def test_offset_output(self) -> None:
        t = GridTransform.for_output(Rect.from_min_size(20.0, 30.0, 170.0, 170.0))
        assert t.map_point(1.0, 2.0) == Point(30.0, 50.0)

    def test_unmap_inverts_map(self) -> None:
        t = GridTransform.for_output(Rect.from_min_size(5.0, 5.0, 255.0, 340.0))
        p = t.map_point(3.25, 11.5)
        back = t.unmap_point(p.x, p.y)
        assert back.x == pytest.approx(3.25)
        assert back.y == pytest.approx(11.5)

    @pytest.mark.parametrize(
        "rect",
        [
            Rect.from_min_size(0.0, 0.0, 0.0, 100.0),
            Rect.from_min_size(0.0, 0.0, 100.0, 0.0),
        ],
    )
    def test_empty_output_raises(self, rect: Rect) -> None:
        with pytest.raises(ValueError):
            GridTransform.for_output(rect)


class TestShapeProjection:
    def test_circle(self) -> None:
        prim = _one(Shape(pos=Vec2(4.0, 3.0), size=1.0, ty=ShapeType.CIRCLE, color=4))
        assert isinstance(prim, CirclePrimitive)
        assert prim.center == Point(45.0, 35.0)
        assert prim.radius == 15.0
        assert prim.fill == (0xFF, 0x00, 0x00)

    def test_square(self) -> None:
        prim = _one(Shape(pos=Vec2(4.0, 3.0), size=1.0, ty=ShapeType.SQUARE))
        assert isinstance(prim, RectPrimitive)
        assert prim.rect == Rect(30.0, 20.0, 60.0, 50.0)
        assert prim.fill == (0xFF, 0xFF, 0xFF)
        assert prim.stroke is None

    def test_triangle(self) -> None:
        prim = _one(Shape(pos=Vec2(0.0, 0.0), size=0.0, ty=ShapeType.TRIANGLE))
        assert isinstance(prim, MeshPrimitive)
        assert prim.vertices == (Point(0.0, 10.0), Point(10.0, 10.0), Point(5.0, 0.0))
        assert prim.indices == (0, 1, 2)

    def test_offset_rect_shifts_primitives(self) -> None:
        rect = Rect.from_min_size(100.0, 50.0, 170.0, 170.0)
        prim = _one(Shape(pos=Vec2(4.0, 3.0), size=1.0, ty=ShapeType.CIRCLE), rect)
        assert isinstance(prim, CirclePrimitive)
        assert prim.center == Point(145.0, 85.0)

    def test_auto_shapes_follow_parent_depth_first(self) -> None:
        shape = Shape(
            color=1,
            auto_shapes=[
                Shape(color=2, auto_shapes=[Shape(color=3)]),
                Shape(color=4),
            ],
        )
        fills = [p.fill for p in project_to_primitives(shape, SQUARE_170, PALETTE)]
        assert fills == [PALETTE[1], PALETTE[2], PALETTE[3], PALETTE[4]]

    def test_overwritten_kind_is_corrupt(self) -> None:
        shape = Shape()
        shape.ty = 7  # type: ignore[assignment]
        with pytest.raises(CorruptDocumentError, match="kind"):
            project_to_primitives(shape, SQUARE_170, PALETTE)

    def test_bad_colour_index_is_corrupt(self) -> None:
        shape = Shape()
        shape.color = 42
        with pytest.raises(CorruptDocumentError):
            project_to_primitives(shape, SQUARE_170, PALETTE)

    def test_same_input_same_output(self, demo_document: ChartDocument) -> None:
        first = project_document(demo_document, SQUARE_170)
        assert first == project_document(demo_document, SQUARE_170)


class TestGridOverlay:
    def test_cells(self) -> None:
        cells = grid_overlay(SQUARE_170)
        assert len(cells) == 225
        assert cells[0].rect == Rect(0.0, 0.0, 10.0, 10.0)
        assert cells[1].rect == Rect(10.0, 0.0, 20.0, 10.0)
        assert cells[-1].rect == Rect(140.0, 140.0, 150.0, 150.0)

    def test_cells_are_outlines(self) -> None:
        for cell in grid_overlay(SQUARE_170):
            assert cell.fill is None
            assert cell.stroke is not None
            assert cell.stroke.color == GRID_LINE_COLOR
            assert cell.stroke.width == 1.0

    def test_document_draws_shapes_then_grid(
        self, demo_document: ChartDocument
    ) -> None:
        primitives = project_document(demo_document, SQUARE_170)
        assert len(primitives) == 3 + 225
        assert isinstance(primitives[0], MeshPrimitive)
        assert isinstance(primitives[1], RectPrimitive)
        assert primitives[1].stroke is None
        assert isinstance(primitives[2], CirclePrimitive)
        assert all(p.stroke is not None for p in primitives[3:])

    def test_empty_document_is_grid_only(self) -> None:
        assert len(project_document(ChartDocument.new_default(), SQUARE_170)) == 225


class TestGridCellAt:
    @pytest.mark.parametrize(
        ("x", "y", "expected"),
        [
            (5.0, 5.0, (0, 0)),
            (45.0, 35.0, (4, 3)),
            (145.0, 145.0, (14, 14)),
            (155.0, 5.0, None),
            (5.0, 165.0, None),
        ],
    )
    def test_lookup(self, x: float, y: float, expected: tuple[int, int] | None) -> None:
        assert grid_cell_at(SQUARE_170, x, y) == expected

    def test_left_of_offset_rect_is_outside(self) -> None:
        rect = Rect.from_min_size(100.0, 0.0, 170.0, 170.0)
        assert grid_cell_at(rect, 95.0, 5.0) is None
        assert grid_cell_at(rect, 105.0, 5.0) == (0, 0)
