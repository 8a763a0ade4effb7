"""Rasterise geometry primitives with QPainter."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter, QPen, QPolygonF

from manifest.core.colors import Rgb
from manifest.core.geometry import (
    CirclePrimitive,
    MeshPrimitive,
    Primitive,
    Rect,
    RectPrimitive,
)


def to_qcolor(rgb: Rgb) -> QColor:
    return QColor(rgb[0], rgb[1], rgb[2])


def to_qrectf(rect: Rect) -> QRectF:
    return QRectF(
        QPointF(rect.min_x, rect.min_y), QPointF(rect.max_x, rect.max_y)
    ).normalized()


def paint_primitive(painter: QPainter, primitive: Primitive) -> None:
    if isinstance(primitive, CirclePrimitive):
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(to_qcolor(primitive.fill)))
        center = QPointF(primitive.center.x, primitive.center.y)
        painter.drawEllipse(center, primitive.radius, primitive.radius)
    elif isinstance(primitive, RectPrimitive):
        if primitive.stroke is None:
            painter.setPen(Qt.PenStyle.NoPen)
        else:
            stroke = primitive.stroke
            painter.setPen(QPen(to_qcolor(stroke.color), stroke.width))
        if primitive.fill is None:
            painter.setBrush(Qt.BrushStyle.NoBrush)
        else:
            painter.setBrush(QBrush(to_qcolor(primitive.fill)))
        painter.drawRect(to_qrectf(primitive.rect))
    elif isinstance(primitive, MeshPrimitive):
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(to_qcolor(primitive.fill)))
        indices = primitive.indices
        for i in range(0, len(indices) - 2, 3):
            triangle = QPolygonF(
                [
                    QPointF(primitive.vertices[j].x, primitive.vertices[j].y)
                    for j in indices[i : i + 3]
                ]
            )
            painter.drawPolygon(triangle)


def paint_primitives(painter: QPainter, primitives: Iterable[Primitive]) -> None:
    """Paint *primitives* in order; later ones are drawn on top."""
    painter.save()
    try:
        for primitive in primitives:
            paint_primitive(painter, primitive)
    finally:
        painter.restore()
