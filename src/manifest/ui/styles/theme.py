"""Visual theme constants and QSS styles for Manifest."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class CanvasTheme:
    """Colours the chart canvas uses around the chart itself."""

    surround: QColor  # widget area outside the chart view
    selection: QColor  # outline of the selected shape's cell

    @classmethod
    def dark(cls) -> CanvasTheme:
        return cls(
            surround=QColor(30, 30, 30),
            selection=QColor(255, 200, 0),  # amber
        )

    @classmethod
    def light(cls) -> CanvasTheme:
        return cls(
            surround=QColor(235, 235, 235),
            selection=QColor(0, 120, 215),  # blue
        )

    @classmethod
    def for_options(cls, dark_theme: bool) -> CanvasTheme:
        return cls.dark() if dark_theme else cls.light()


# ── Application-wide QSS ────────────────────────────────────────────────────

DARK_STYLE = """
QMainWindow, QDialog {
    background: #2b2b2b;
}

QLabel, QCheckBox {
    color: #e0e0e0;
}

QLineEdit, QSpinBox, QDoubleSpinBox, QComboBox {
    background: #1e1e1e;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
    border-radius: 3px;
    padding: 3px;
}

QListWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-size: 13px;
}

QListWidget::item:selected {
    background: #264f78;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""

# Fusion's own palette is already light; only a few accents are needed.
LIGHT_STYLE = """
QListWidget::item:selected {
    background: #cce4f7;
    color: #000000;
}
QPushButton {
    padding: 6px 14px;
}
"""


def app_style(dark_theme: bool) -> str:
    return DARK_STYLE if dark_theme else LIGHT_STYLE
