"""MainWindow chart file actions: new, open and export."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from manifest.core.document import ChartDocument
from manifest.core.errors import ChartDecodeError
from manifest.ui.chart_io import load_chart_file, save_chart_file

_LOGGER = logging.getLogger(__name__)

CHART_FILTER = "Chart files (*.json)"
ALL_FILES_FILTER = "All files (*)"


def on_new_file(host: Any) -> None:
    host._document.replace(ChartDocument.new_default())
    host._after_document_replaced()
    host._status_label.setText("New chart")


def on_open_chart(
    host: Any,
    *,
    file_dialog_cls: type[Any],
    message_box_cls: type[Any],
) -> None:
    file_path, _ = file_dialog_cls.getOpenFileName(
        host,
        "Open chart",
        "",
        f"{CHART_FILTER};;{ALL_FILES_FILTER}",
    )
    if not file_path:
        return

    try:
        loaded = load_chart_file(Path(file_path))
    except (OSError, UnicodeDecodeError, ChartDecodeError) as exc:
        # The current document stays as it was.
        _LOGGER.warning("Failed to open chart %s: %s", file_path, exc)
        message_box_cls.warning(host, "Open chart", f"Could not open chart:\n{exc}")
        return

    host._document.replace(loaded)
    host._after_document_replaced()
    host._status_label.setText(f"Loaded chart: {Path(file_path).name}")


def on_export_chart(
    host: Any,
    *,
    file_dialog_cls: type[Any],
    message_box_cls: type[Any],
) -> None:
    file_path, _ = file_dialog_cls.getSaveFileName(
        host,
        "Export chart",
        "chart.json",
        f"{CHART_FILTER};;{ALL_FILES_FILTER}",
    )
    if not file_path:
        return

    try:
        save_path = save_chart_file(host._document, Path(file_path))
    except OSError as exc:
        _LOGGER.warning("Failed to export chart to %s: %s", file_path, exc)
        message_box_cls.warning(host, "Export chart", f"Could not save chart:\n{exc}")
        return

    host._status_label.setText(f"Saved chart: {save_path.name}")
