"""Tests for Header defaults, validation and setters."""

import pytest

from manifest.core.colors import DEFAULT_COLOR_TABLE
from manifest.core.header import Header, derive_offset


class TestHeaderDefaults:
    def test_text_fields(self) -> None:
        h = Header()
        assert h.name == "Untitled"
        assert h.genre == "Unknown"
        assert h.level_author == "Anonymous"
        assert h.song_author == "Anonymous"
        assert h.background_effect == "none"

    def test_numeric_fields(self) -> None:
        h = Header()
        assert h.bpm == 120
        assert h.time_signature == (4, 4)
        assert h.offset == 32
        assert h.manual_offset is False
        assert h.bg_color == 15

    def test_palette_is_default_and_not_shared(self) -> None:
        a, b = Header(), Header()
        assert a.color_table == list(DEFAULT_COLOR_TABLE)
        a.color_table[0] = (1, 2, 3)
        assert b.color_table[0] == (0xFF, 0xFF, 0xFF)

    def test_background_rgb(self) -> None:
        assert Header().background_rgb == (0, 0, 0)

    def test_derive_offset(self) -> None:
        assert derive_offset(4, 4) == 32
        assert derive_offset(3, 8) == 48
        assert derive_offset(255, 255) == 65535


class TestHeaderValidation:
    @pytest.mark.parametrize("bpm", [0, -1, 65536])
    def test_bad_bpm_raises(self, bpm: int) -> None:
        with pytest.raises(ValueError, match="bpm"):
            Header(bpm=bpm)

    def test_zero_offset_raises(self) -> None:
        with pytest.raises(ValueError, match="offset"):
            Header(offset=0)

    @pytest.mark.parametrize("top, bottom", [(0, 4), (4, 0), (256, 4)])
    def test_bad_time_signature_raises(self, top: int, bottom: int) -> None:
        with pytest.raises(ValueError, match="time signature"):
            Header(time_signature_top=top, time_signature_bottom=bottom)

    @pytest.mark.parametrize("index", [-1, 16])
    def test_bad_bg_color_raises(self, index: int) -> None:
        with pytest.raises(ValueError, match="bg_color"):
            Header(bg_color=index)

    def test_short_color_table_raises(self) -> None:
        with pytest.raises(ValueError, match="16 entries"):
            Header(color_table=[(0, 0, 0)] * 15)

    def test_color_component_out_of_range_raises(self) -> None:
        table = list(DEFAULT_COLOR_TABLE)
        table[3] = (0, 256, 0)
        with pytest.raises(ValueError, match="out of range"):
            Header(color_table=table)


class TestHeaderSetters:
    def test_set_bpm_rejects_zero_and_keeps_value(self) -> None:
        h = Header()
        assert h.set_bpm(0) is False
        assert h.bpm == 120
        assert h.set_bpm(140) is True
        assert h.bpm == 140

    def test_set_offset(self) -> None:
        h = Header()
        assert h.set_offset(0) is False
        assert h.offset == 32
        assert h.set_offset(100) is True
        assert h.offset == 100

    def test_time_signature_recomputes_auto_offset(self) -> None:
        h = Header()
        assert h.set_time_signature(3, 4) is True
        assert h.time_signature == (3, 4)
        assert h.offset == 24

    def test_time_signature_keeps_manual_offset(self) -> None:
        h = Header()
        h.set_manual_offset(True)
        h.set_offset(7)
        h.set_time_signature(6, 8)
        assert h.offset == 7

    def test_time_signature_rejects_zero(self) -> None:
        h = Header()
        assert h.set_time_signature(0, 4) is False
        assert h.time_signature == (4, 4)

    def test_clearing_manual_offset_rederives(self) -> None:
        h = Header()
        h.set_manual_offset(True)
        h.set_offset(99)
        h.set_manual_offset(False)
        assert h.offset == 32

    def test_set_bg_color(self) -> None:
        h = Header()
        assert h.set_bg_color(16) is False
        assert h.bg_color == 15
        assert h.set_bg_color(3) is True
        assert h.bg_color == 3

    def test_set_palette_color(self) -> None:
        h = Header()
        assert h.set_palette_color(2, (10, 20, 30)) is True
        assert h.color_table[2] == (10, 20, 30)
        assert h.set_palette_color(16, (0, 0, 0)) is False
        assert h.set_palette_color(2, (0, 0, 300)) is False
        assert h.color_table[2] == (10, 20, 30)
