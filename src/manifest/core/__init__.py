"""Core domain layer — chart model, JSON codec and geometry, with no Qt dependency.

Quick start::

    from manifest.core import ChartDocument, Rect, project_document

    doc = ChartDocument.demo()
    text = doc.to_json()
    again = ChartDocument.from_json(text)
    primitives = project_document(again, Rect.from_min_size(0, 0, 680, 680))
"""

from manifest.core.colors import (
    COLOR_TABLE_SIZE,
    DEFAULT_COLOR_TABLE,
    Rgb,
    rgb_from_hex,
    rgb_to_hex,
)
from manifest.core.document import ChartDocument
from manifest.core.enums import MoveStep, ShapeType
from manifest.core.errors import (
    ChartDecodeError,
    CorruptDocumentError,
    InvalidBpmError,
    InvalidColorIndexError,
    InvalidColorTableError,
    InvalidOffsetError,
    InvalidShapeKindError,
    InvalidTimeSignatureError,
    MalformedJsonError,
)
from manifest.core.geometry import (
    CirclePrimitive,
    GridTransform,
    MeshPrimitive,
    Point,
    Primitive,
    Rect,
    RectPrimitive,
    Stroke,
    grid_cell_at,
    grid_overlay,
    project_document,
    project_to_primitives,
)
from manifest.core.header import Header
from manifest.core.shape import Shape
from manifest.core.types import GRID_SIZE, VIEW_SIZE, Vec2
from manifest.core.wire import (
    document_from_wire,
    document_to_wire,
    dumps_chart,
    loads_chart,
    shape_from_wire,
    shape_to_wire,
)

__all__ = [
    # Enums / constants
    "COLOR_TABLE_SIZE",
    "DEFAULT_COLOR_TABLE",
    "GRID_SIZE",
    "VIEW_SIZE",
    "MoveStep",
    "ShapeType",
    # Model
    "ChartDocument",
    "Header",
    "Rgb",
    "Shape",
    "Vec2",
    "rgb_from_hex",
    "rgb_to_hex",
    # Errors
    "ChartDecodeError",
    "CorruptDocumentError",
    "InvalidBpmError",
    "InvalidColorIndexError",
    "InvalidColorTableError",
    "InvalidOffsetError",
    "InvalidShapeKindError",
    "InvalidTimeSignatureError",
    "MalformedJsonError",
    # Geometry
    "CirclePrimitive",
    "GridTransform",
    "MeshPrimitive",
    "Point",
    "Primitive",
    "Rect",
    "RectPrimitive",
    "Stroke",
    "grid_cell_at",
    "grid_overlay",
    "project_document",
    "project_to_primitives",
    # Wire
    "document_from_wire",
    "document_to_wire",
    "dumps_chart",
    "loads_chart",
    "shape_from_wire",
    "shape_to_wire",
]
