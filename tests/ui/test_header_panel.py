"""Tests for HeaderPanel editing."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from manifest.core.header import Header
from manifest.ui.panels.header_panel import HeaderPanel


def _panel(header: Header) -> HeaderPanel:
    panel = HeaderPanel()
    panel.set_header(header)
    return panel


class TestHeaderPanel:
    def test_shows_header_values(self) -> None:
        header = Header(name="Song", bpm=140, bg_color=3)
        panel = _panel(header)

        assert panel._text_edits["name"].text() == "Song"
        assert panel._bpm.value() == 140
        assert panel._bg_color.value() == 3
        assert panel._offset.value() == 32
        assert not panel._offset.isEnabled()

    def test_text_edit_writes_header(self) -> None:
        header = Header()
        panel = _panel(header)
        spy = QSignalSpy(panel.header_changed)

        panel._text_edits["genre"].textEdited.emit("Synthwave")

        assert header.genre == "Synthwave"
        assert len(spy) == 1

    def test_bpm_spin_updates_header(self) -> None:
        header = Header()
        panel = _panel(header)
        panel._bpm.setValue(95)
        assert header.bpm == 95

    def test_time_signature_rederives_offset(self) -> None:
        header = Header()
        panel = _panel(header)

        panel._ts_top.setValue(3)

        assert header.time_signature == (3, 4)
        assert header.offset == 24
        assert panel._offset.value() == 24

    def test_manual_offset_enables_and_keeps_value(self) -> None:
        header = Header()
        panel = _panel(header)

        panel._manual_offset.setChecked(True)
        assert panel._offset.isEnabled()
        panel._offset.setValue(100)
        panel._ts_bottom.setValue(8)

        assert header.manual_offset
        assert header.offset == 100

    def test_clearing_manual_offset_rederives(self) -> None:
        header = Header(manual_offset=True, offset=500)
        panel = _panel(header)

        panel._manual_offset.setChecked(False)

        assert header.offset == 32
        assert panel._offset.value() == 32

    def test_set_header_does_not_emit(self) -> None:
        panel = HeaderPanel()
        spy = QSignalSpy(panel.header_changed)
        panel.set_header(Header(bpm=200, time_signature_top=7))
        assert len(spy) == 0
