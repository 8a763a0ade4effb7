"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from manifest.core.document import ChartDocument
from manifest.ui.canvas import ChartCanvas
from manifest.ui.dialogs.options_dialog import OptionsDialog
from manifest.ui.main_window_parts.chart import (
    on_export_chart,
    on_new_file,
    on_open_chart,
)
from manifest.ui.main_window_parts.settings import apply_options, on_options
from manifest.ui.options import OptionsStore, default_options_path
from manifest.ui.panels.header_panel import HeaderPanel
from manifest.ui.panels.shape_panel import ShapePanel


class MainWindow(QMainWindow):
    """Main application window for Manifest."""

    def __init__(self, options_path: Path | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Manifest")
        self.setMinimumSize(900, 640)
        self.resize(1100, 780)

        self._document = ChartDocument.demo()
        self._options_store = OptionsStore(options_path or default_options_path())
        self._options = self._options_store.load()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._after_document_replaced()
        self._apply_options()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Header form (left)
        self._header_panel = HeaderPanel()
        self._header_panel.setFixedWidth(280)
        root.addWidget(self._header_panel)

        # Canvas over shape list (center)
        center = QVBoxLayout()
        center.setSpacing(6)
        self._canvas = ChartCanvas()
        center.addWidget(self._canvas, stretch=3)
        self._shape_panel = ShapePanel()
        self._shape_panel.setMaximumHeight(220)
        center.addWidget(self._shape_panel, stretch=1)

        center_widget = QWidget()
        center_widget.setLayout(center)
        root.addWidget(center_widget, stretch=1)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_file = menu_bar.addMenu("&File")
        assert self._menu_file is not None

        self._act_new = QAction("New File", self)
        self._act_new.setShortcut("Ctrl+N")
        self._act_new.triggered.connect(self._on_new_file)
        self._menu_file.addAction(self._act_new)

        self._act_open = QAction("Open…", self)
        self._act_open.setShortcut("Ctrl+O")
        self._act_open.triggered.connect(self._on_open_chart)
        self._menu_file.addAction(self._act_open)

        self._act_export = QAction("Export…", self)
        self._act_export.setShortcut("Ctrl+S")
        self._act_export.triggered.connect(self._on_export_chart)
        self._menu_file.addAction(self._act_export)

        self._menu_file.addSeparator()

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

        self._menu_options = menu_bar.addMenu("&Options")
        assert self._menu_options is not None

        self._act_options = QAction("Options…", self)
        self._act_options.setShortcut("Ctrl+,")
        self._act_options.triggered.connect(self._on_options)
        self._menu_options.addAction(self._act_options)

    def _connect_signals(self) -> None:
        self._header_panel.header_changed.connect(self._canvas.update)
        self._shape_panel.shapes_changed.connect(self._on_shapes_changed)
        self._shape_panel.selection_changed.connect(self._on_selection_changed)
        self._canvas.cell_clicked.connect(self._on_cell_clicked)

    # ── Document sync ────────────────────────────────────────────────────

    def _after_document_replaced(self) -> None:
        """Point every panel at the (possibly new) header and shapes."""
        self._header_panel.set_header(self._document.header)
        self._shape_panel.set_document(self._document)
        self._canvas.set_document(self._document)

    def _on_shapes_changed(self) -> None:
        self._canvas.set_selected(self._shape_panel.selected_index())

    def _on_selection_changed(self, row: int) -> None:
        self._canvas.set_selected(row if row >= 0 else None)

    def _on_cell_clicked(self, col: int, row: int) -> None:
        if not self._shape_panel.place_selected(col, row):
            self._status_label.setText("Select a shape to place it")

    # ── Actions ──────────────────────────────────────────────────────────

    def _on_new_file(self) -> None:
        on_new_file(self)

    def _on_open_chart(self) -> None:
        on_open_chart(self, file_dialog_cls=QFileDialog, message_box_cls=QMessageBox)

    def _on_export_chart(self) -> None:
        on_export_chart(self, file_dialog_cls=QFileDialog, message_box_cls=QMessageBox)

    def _on_options(self) -> None:
        on_options(self, options_dialog_cls=OptionsDialog)

    def _apply_options(self) -> None:
        app = QApplication.instance()
        apply_options(self, app if isinstance(app, QApplication) else None)
