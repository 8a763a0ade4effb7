"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from manifest.core.document import ChartDocument


def _headless() -> bool:
    if not sys.platform.startswith("linux"):
        return False
    return not any(
        key in os.environ for key in ("QT_QPA_PLATFORM", "DISPLAY", "WAYLAND_DISPLAY")
    )


if _headless():
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Singleton QApplication whose standard paths never hit the real profile."""
    from PyQt6.QtCore import QStandardPaths
    from PyQt6.QtWidgets import QApplication

    QStandardPaths.setTestModeEnabled(True)
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    app.setApplicationName("Manifest")
    app.setOrganizationName("Salsa Gal")
    yield app


@pytest.fixture
def options_path(tmp_path: Path) -> Path:
    """Options file location inside the test's temporary directory."""
    return tmp_path / "config" / "config.json"


@pytest.fixture
def demo_document() -> ChartDocument:
    return ChartDocument.demo()


@pytest.fixture(autouse=True)
def _close_top_level_widgets(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close windows a UI test left open so they cannot leak into the next one."""
    if "ui" not in Path(str(request.node.fspath)).parts:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
