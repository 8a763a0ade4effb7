"""ChartCanvas — widget that paints a chart and reports clicked grid cells."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from manifest.core.document import ChartDocument
from manifest.core.geometry import (
    GridTransform,
    Rect,
    grid_cell_at,
    project_document,
)
from manifest.core.types import GRID_SIZE
from manifest.ui.painter import paint_primitives, to_qcolor
from manifest.ui.styles.theme import CanvasTheme


class ChartCanvas(QWidget):
    """Draws the document's shapes over the 15x15 grid.

    Signals:
        cell_clicked(int, int): Column and row of a left click inside the playfield.
    """

    cell_clicked = pyqtSignal(int, int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._document = ChartDocument.new_default()
        self._theme = CanvasTheme.dark()
        self._selected: int | None = None

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(340, 340)

    # ── Public API ───────────────────────────────────────────────────────

    def set_document(self, document: ChartDocument) -> None:
        self._document = document
        self._selected = None
        self.update()

    def set_theme(self, theme: CanvasTheme) -> None:
        self._theme = theme
        self.update()

    def set_selected(self, index: int | None) -> None:
        """Highlight the top-level shape at *index* (``None`` clears)."""
        self._selected = index
        self.update()

    def output_rect(self) -> Rect:
        return Rect.from_min_size(0.0, 0.0, float(self.width()), float(self.height()))

    # ── Qt events ────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent | None) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.fillRect(self.rect(), self._theme.surround)
            if self.width() <= 0 or self.height() <= 0:
                return

            rect = self.output_rect()
            transform = GridTransform.for_output(rect)
            playfield_end = transform.map_point(GRID_SIZE, GRID_SIZE)
            painter.fillRect(
                QRectF(rect.min_x, rect.min_y, playfield_end.x, playfield_end.y),
                to_qcolor(self._document.header.background_rgb),
            )

            paint_primitives(painter, project_document(self._document, rect))
            self._paint_selection(painter, transform)
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        if self.width() <= 0 or self.height() <= 0:
            return
        pos = event.position()
        cell = grid_cell_at(self.output_rect(), pos.x(), pos.y())
        if cell is not None:
            self.cell_clicked.emit(*cell)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _paint_selection(self, painter: QPainter, transform: GridTransform) -> None:
        shapes = self._document.shapes
        if self._selected is None or not 0 <= self._selected < len(shapes):
            return
        shape = shapes[self._selected]
        size = shape.size
        top_left = transform.map_point(shape.pos.x - size, shape.pos.y - size)
        bottom_right = transform.map_point(
            shape.pos.x + size + 1.0, shape.pos.y + size + 1.0
        )
        painter.setPen(QPen(self._theme.selection, 2.0, Qt.PenStyle.DashLine))
        painter.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        painter.drawRect(
            QRectF(
                QPointF(top_left.x, top_left.y), QPointF(bottom_right.x, bottom_right.y)
            ).normalized()
        )
