"""HeaderPanel — form editing the chart header in place."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QSpinBox,
    QWidget,
)

from manifest.core.colors import COLOR_TABLE_SIZE
from manifest.core.header import U8_MAX, U16_MAX, Header

_TEXT_FIELDS = (
    ("Name:", "name"),
    ("Genre:", "genre"),
    ("Level author:", "level_author"),
    ("Song author:", "song_author"),
    ("Background effect:", "background_effect"),
)


class HeaderPanel(QWidget):
    """Edits a :class:`Header` through its setters.

    Signals:
        header_changed(): Emitted after any accepted edit.
    """

    header_changed = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._header = Header()
        self._text_edits: dict[str, QLineEdit] = {}
        self._setup_ui()
        self.set_header(self._header)

    def _setup_ui(self) -> None:
        form = QFormLayout(self)
        form.setSpacing(8)
        form.setContentsMargins(8, 8, 8, 8)

        title = QLabel("Manifest")
        title.setStyleSheet("font-size: 16px; font-weight: bold;")
        form.addRow(title)

        for label, attr in _TEXT_FIELDS:
            edit = QLineEdit()
            edit.textEdited.connect(
                lambda text, attr=attr: self._on_text_edited(attr, text)
            )
            self._text_edits[attr] = edit
            form.addRow(label, edit)

        self._bpm = self._make_spin(1, U16_MAX)
        self._bpm.valueChanged.connect(self._on_bpm_changed)
        form.addRow("BPM:", self._bpm)

        self._ts_top = self._make_spin(1, U8_MAX)
        self._ts_bottom = self._make_spin(1, U8_MAX)
        self._ts_top.valueChanged.connect(self._on_time_signature_changed)
        self._ts_bottom.valueChanged.connect(self._on_time_signature_changed)
        form.addRow("Beats per bar:", self._ts_top)
        form.addRow("Beat value:", self._ts_bottom)

        self._manual_offset = QCheckBox("Manual offset")
        self._manual_offset.toggled.connect(self._on_manual_offset_toggled)
        form.addRow(self._manual_offset)

        self._offset = self._make_spin(1, U16_MAX)
        self._offset.valueChanged.connect(self._on_offset_changed)
        form.addRow("Offset:", self._offset)

        self._bg_color = self._make_spin(0, COLOR_TABLE_SIZE - 1)
        self._bg_color.valueChanged.connect(self._on_bg_color_changed)
        form.addRow("Background colour:", self._bg_color)

    @staticmethod
    def _make_spin(lo: int, hi: int) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(lo, hi)
        return spin

    # ── Public API ───────────────────────────────────────────────────────

    def set_header(self, header: Header) -> None:
        """Show *header*; later edits are written straight into it."""
        self._header = header
        self._sync_widgets()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_text_edited(self, attr: str, text: str) -> None:
        setattr(self._header, attr, text)
        self.header_changed.emit()

    def _on_bpm_changed(self, value: int) -> None:
        if self._header.set_bpm(value):
            self.header_changed.emit()

    def _on_time_signature_changed(self, _value: int) -> None:
        top, bottom = self._ts_top.value(), self._ts_bottom.value()
        if self._header.set_time_signature(top, bottom):
            self._sync_offset()
            self.header_changed.emit()

    def _on_manual_offset_toggled(self, checked: bool) -> None:
        self._header.set_manual_offset(checked)
        self._sync_offset()
        self.header_changed.emit()

    def _on_offset_changed(self, value: int) -> None:
        if self._header.manual_offset and self._header.set_offset(value):
            self.header_changed.emit()

    def _on_bg_color_changed(self, value: int) -> None:
        if self._header.set_bg_color(value):
            self.header_changed.emit()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _sync_widgets(self) -> None:
        h = self._header
        for attr, edit in self._text_edits.items():
            edit.setText(getattr(h, attr))
        for spin, value in (
            (self._bpm, h.bpm),
            (self._ts_top, h.time_signature_top),
            (self._ts_bottom, h.time_signature_bottom),
            (self._bg_color, h.bg_color),
        ):
            spin.blockSignals(True)
            spin.setValue(value)
            spin.blockSignals(False)
        self._manual_offset.blockSignals(True)
        self._manual_offset.setChecked(h.manual_offset)
        self._manual_offset.blockSignals(False)
        self._sync_offset()

    def _sync_offset(self) -> None:
        self._offset.blockSignals(True)
        self._offset.setValue(self._header.offset)
        self._offset.blockSignals(False)
        self._offset.setEnabled(self._header.manual_offset)
