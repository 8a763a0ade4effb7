"""OptionsDialog — editor-wide options (theme, game executable)."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QCheckBox,
    QDialog,
    QDialogButtonBox,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from manifest.ui.options import Options


class OptionsDialog(QDialog):
    """Edits a copy of the options; :meth:`result_options` returns it after OK."""

    def __init__(self, options: Options, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowTitle("Options")
        self.setMinimumWidth(420)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._options = Options(
            dark_theme=options.dark_theme,
            executable_path=options.executable_path,
        )
        self._build_ui()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        form = QFormLayout()
        form.setSpacing(12)

        self._dark_theme = QCheckBox()
        self._dark_theme.setChecked(self._options.dark_theme)
        form.addRow("Dark mode:", self._dark_theme)

        path_row = QHBoxLayout()
        self._executable = QLineEdit(self._options.executable_path)
        path_row.addWidget(self._executable, stretch=1)
        self._btn_browse = QPushButton("Browse…")
        self._btn_browse.clicked.connect(self._on_browse)
        path_row.addWidget(self._btn_browse)
        form.addRow("Game executable:", path_row)
        root.addLayout(form)

        self._btn_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._btn_box.accepted.connect(self._on_accept)
        self._btn_box.rejected.connect(self.reject)
        root.addWidget(self._btn_box)

    def _on_browse(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(self, "Game executable", "")
        if file_path:
            self._executable.setText(file_path)

    def _on_accept(self) -> None:
        self._options.dark_theme = self._dark_theme.isChecked()
        self._options.executable_path = self._executable.text().strip()
        self.accept()

    def result_options(self) -> Options:
        return self._options
