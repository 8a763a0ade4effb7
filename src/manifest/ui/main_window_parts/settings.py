"""MainWindow options dialog and application helpers."""

from __future__ import annotations

import logging
from typing import Any

from manifest.ui.styles.theme import CanvasTheme, app_style

_LOGGER = logging.getLogger(__name__)


def on_options(host: Any, *, options_dialog_cls: type[Any]) -> None:
    dlg = options_dialog_cls(host._options, host)
    if not dlg.exec():
        return
    host._options = dlg.result_options()
    try:
        host._options_store.save(host._options)
    except OSError as exc:
        _LOGGER.warning("Could not save options: %s", exc)
        host._status_label.setText(f"Options not saved: {exc}")
    host._apply_options()


def apply_options(host: Any, app: Any | None) -> None:
    dark = host._options.dark_theme
    host._canvas.set_theme(CanvasTheme.for_options(dark))
    if app is not None:
        app.setStyleSheet(app_style(dark))
