"""Shape encoding and decoding.

The wire stores ``scale = size + 1.0`` so the minimum footprint serialises as
``1.0``.  Movement sequences are not written, so a decoded shape always starts
with no moves.
"""

from __future__ import annotations

from typing import Any

from manifest.core.colors import COLOR_TABLE_SIZE
from manifest.core.enums import ShapeType
from manifest.core.errors import (
    InvalidColorIndexError,
    InvalidShapeKindError,
    MalformedJsonError,
)
from manifest.core.shape import Shape
from manifest.core.types import Vec2
from manifest.core.wire.fields import require_float, require_int, require_object

_SCALE_BIAS = 1.0


def shape_to_wire(shape: Shape) -> dict[str, Any]:
    """Encode *shape*; ``auto_shapes`` is only written when non-empty."""
    data: dict[str, Any] = {
        "shape": int(shape.ty),
        "color": shape.color,
        "x": float(shape.pos.x),
        "y": float(shape.pos.y),
        "scale": float(shape.size) + _SCALE_BIAS,
    }
    if shape.auto_shapes:
        data["auto_shapes"] = [shape_to_wire(child) for child in shape.auto_shapes]
    return data


def _shape_kind_from_wire(obj: dict[str, Any], path: str) -> ShapeType:
    code = require_int(
        obj,
        "shape",
        path,
        error=InvalidShapeKindError,
        lo=int(min(ShapeType)),
        hi=int(max(ShapeType)),
    )
    return ShapeType(code)


def shape_from_wire(value: Any, path: str = "shape") -> Shape:
    """Decode one shape object (and its auto-shapes, recursively).

    Raises:
        InvalidShapeKindError: ``shape`` is not 0, 1 or 2.
        InvalidColorIndexError: ``color`` is not an index into the colour table.
        MalformedJsonError: Not an object, or ``x``/``y``/``scale``/``auto_shapes``
            missing or of the wrong type, a non-finite number or a negative ``scale``.
    """
    obj = require_object(value, path)
    ty = _shape_kind_from_wire(obj, path)
    x = require_float(obj, "x", path)
    y = require_float(obj, "y", path)
    scale = require_float(obj, "scale", path)
    if scale < 0.0:
        raise MalformedJsonError(f"{path}.scale must not be negative, got {scale!r}")
    color = require_int(
        obj, "color", path, error=InvalidColorIndexError, lo=0, hi=COLOR_TABLE_SIZE - 1
    )

    auto_shapes: list[Shape] = []
    if "auto_shapes" in obj:
        children = obj["auto_shapes"]
        if not isinstance(children, list):
            raise MalformedJsonError(f"{path}.auto_shapes must be an array")
        auto_shapes = [
            shape_from_wire(child, f"{path}.auto_shapes[{idx}]")
            for idx, child in enumerate(children)
        ]

    return Shape(
        pos=Vec2(x, y),
        size=scale - _SCALE_BIAS,
        ty=ty,
        color=color,
        auto_shapes=auto_shapes,
    )
