"""ShapePanel — list of top-level shapes with editors for the selected one."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QComboBox,
    QDoubleSpinBox,
    QFormLayout,
    QHBoxLayout,
    QListWidget,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from manifest.core.colors import COLOR_TABLE_SIZE
from manifest.core.document import ChartDocument
from manifest.core.enums import ShapeType
from manifest.core.shape import MIN_SIZE, Shape
from manifest.core.types import GRID_MAX, GRID_MIN, Vec2


def shape_label(shape: Shape) -> str:
    """One-line list entry for *shape*."""
    label = (
        f"{shape.ty.label} ({shape.pos.x:g}, {shape.pos.y:g}) "
        f"size {shape.size:g} colour {shape.color}"
    )
    if shape.auto_shapes:
        label += f" +{len(shape.auto_shapes)}"
    return label


class ShapePanel(QWidget):
    """Adds, removes and edits shapes of a :class:`ChartDocument`.

    Signals:
        shapes_changed(): The shape list or a shape's fields changed.
        selection_changed(int): Selected row, or -1 when nothing is selected.
    """

    shapes_changed = pyqtSignal()
    selection_changed = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._document = ChartDocument.new_default()
        self._setup_ui()
        self._sync_editors()

    def _setup_ui(self) -> None:
        root = QHBoxLayout(self)
        root.setContentsMargins(4, 4, 4, 4)
        root.setSpacing(6)

        left = QVBoxLayout()
        self._list = QListWidget()
        self._list.currentRowChanged.connect(self._on_row_changed)
        left.addWidget(self._list, stretch=1)

        buttons = QHBoxLayout()
        self._btn_add = QPushButton("Add shape")
        self._btn_add.clicked.connect(self._on_add)
        buttons.addWidget(self._btn_add)
        self._btn_remove = QPushButton("Remove")
        self._btn_remove.clicked.connect(self._on_remove)
        buttons.addWidget(self._btn_remove)
        left.addLayout(buttons)
        root.addLayout(left, stretch=2)

        form = QFormLayout()
        self._kind = QComboBox()
        for ty in ShapeType:
            self._kind.addItem(ty.label, int(ty))
        self._kind.currentIndexChanged.connect(self._on_kind_changed)
        form.addRow("Shape:", self._kind)

        self._color = QSpinBox()
        self._color.setRange(0, COLOR_TABLE_SIZE - 1)
        self._color.valueChanged.connect(self._on_color_changed)
        form.addRow("Colour:", self._color)

        self._size = QDoubleSpinBox()
        self._size.setRange(MIN_SIZE, GRID_MAX)
        self._size.setSingleStep(0.5)
        self._size.valueChanged.connect(self._on_size_changed)
        form.addRow("Size:", self._size)

        self._x = self._make_coord_spin(self._on_x_changed)
        self._y = self._make_coord_spin(self._on_y_changed)
        form.addRow("X:", self._x)
        form.addRow("Y:", self._y)
        root.addLayout(form, stretch=1)

    @staticmethod
    def _make_coord_spin(slot: Callable[[float], None]) -> QDoubleSpinBox:
        spin = QDoubleSpinBox()
        spin.setRange(GRID_MIN, GRID_MAX)
        spin.setSingleStep(1.0)
        spin.valueChanged.connect(slot)
        return spin

    # ── Public API ───────────────────────────────────────────────────────

    def set_document(self, document: ChartDocument) -> None:
        self._document = document
        self._rebuild_list()

    def selected_index(self) -> int | None:
        row = self._list.currentRow()
        if 0 <= row < len(self._document.shapes):
            return row
        return None

    def place_selected(self, col: int, row: int) -> bool:
        """Move the selected shape to grid cell ``(col, row)``."""
        index = self.selected_index()
        if index is None:
            return False
        shape = self._document.shapes[index]
        shape.pos = Vec2(float(col), float(row))
        shape.clamp_to_grid()
        self._refresh_row(index)
        self._sync_editors()
        self.shapes_changed.emit()
        return True

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_add(self) -> None:
        index = self._document.add_shape(Shape())
        self._rebuild_list()
        self._list.setCurrentRow(index)
        self.shapes_changed.emit()

    def _on_remove(self) -> None:
        index = self.selected_index()
        if index is None:
            return
        self._document.remove_shape(index)
        self._rebuild_list()
        if self._document.shapes:
            self._list.setCurrentRow(min(index, len(self._document.shapes) - 1))
        self.shapes_changed.emit()

    def _on_row_changed(self, row: int) -> None:
        self._sync_editors()
        self.selection_changed.emit(row if self.selected_index() is not None else -1)

    def _on_kind_changed(self, _index: int) -> None:
        ty = ShapeType(self._kind.currentData())
        self._edit_selected(lambda s: setattr(s, "ty", ty))

    def _on_color_changed(self, value: int) -> None:
        self._edit_selected(lambda s: setattr(s, "color", value))

    def _on_size_changed(self, value: float) -> None:
        self._edit_selected(lambda s: setattr(s, "size", value))

    def _on_x_changed(self, value: float) -> None:
        self._edit_selected(lambda s: setattr(s, "pos", Vec2(value, s.pos.y)))

    def _on_y_changed(self, value: float) -> None:
        self._edit_selected(lambda s: setattr(s, "pos", Vec2(s.pos.x, value)))

    # ── Helpers ──────────────────────────────────────────────────────────

    def _edit_selected(self, apply: Callable[[Shape], None]) -> None:
        """Apply one editor change to the selected shape only."""
        index = self.selected_index()
        if index is None:
            return
        apply(self._document.shapes[index])
        self._refresh_row(index)
        self.shapes_changed.emit()

    def _rebuild_list(self) -> None:
        self._list.blockSignals(True)
        self._list.clear()
        for shape in self._document.shapes:
            self._list.addItem(shape_label(shape))
        self._list.blockSignals(False)
        self._sync_editors()

    def _refresh_row(self, index: int) -> None:
        item = self._list.item(index)
        if item is not None:
            item.setText(shape_label(self._document.shapes[index]))

    def _sync_editors(self) -> None:
        index = self.selected_index()
        editors = (self._kind, self._color, self._size, self._x, self._y)
        for editor in editors:
            editor.setEnabled(index is not None)
        self._btn_remove.setEnabled(index is not None)
        if index is None:
            return

        shape = self._document.shapes[index]
        for editor in editors:
            editor.blockSignals(True)
        self._kind.setCurrentIndex(self._kind.findData(int(shape.ty)))
        self._color.setValue(shape.color)
        self._size.setValue(shape.size)
        self._x.setValue(shape.pos.x)
        self._y.setValue(shape.pos.y)
        for editor in editors:
            editor.blockSignals(False)
