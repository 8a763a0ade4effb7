"""Chart import/export helpers used by the main window."""

from __future__ import annotations

import logging
from pathlib import Path

from manifest.core.document import ChartDocument
from manifest.core.wire import dumps_chart, loads_chart

_LOGGER = logging.getLogger(__name__)

CHART_SUFFIX = ".json"


def chart_save_path(file_path: Path) -> Path:
    """Append ``.json`` when *file_path* has no extension; keep any other."""
    if not file_path.suffix:
        return file_path.with_suffix(CHART_SUFFIX)
    return file_path


def load_chart_file(file_path: Path) -> ChartDocument:
    """Read and decode a chart.

    Raises:
        OSError: The file cannot be read.
        ChartDecodeError: The file is not a valid chart.
    """
    text = file_path.read_text(encoding="utf-8")
    document = loads_chart(text)
    _LOGGER.info("Loaded chart %s (%d shapes)", file_path, len(document.shapes))
    return document


def save_chart_file(document: ChartDocument, file_path: Path) -> Path:
    """Encode *document* and write it, returning the path actually written.

    Raises:
        OSError: The file cannot be written.  *document* is left untouched.
        CorruptDocumentError: *document* holds a value the chart format cannot
            represent; nothing is written.
    """
    document.check_invariants()
    save_path = chart_save_path(file_path)
    save_path.write_text(dumps_chart(document), encoding="utf-8")
    _LOGGER.info("Saved chart %s (%d shapes)", save_path, len(document.shapes))
    return save_path
