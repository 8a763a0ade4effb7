"""Chart header: song / level metadata, tempo and palette."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from manifest.core.colors import (
    COLOR_TABLE_SIZE,
    DEFAULT_COLOR_TABLE,
    Rgb,
    is_color_index,
    validate_rgb,
)

_LOGGER = logging.getLogger(__name__)

U8_MAX = 0xFF
U16_MAX = 0xFFFF

DEFAULT_BPM = 120
DEFAULT_TIME_SIGNATURE = (4, 4)
DEFAULT_BG_COLOR = 15


def derive_offset(top: int, bottom: int) -> int:
    """Automatic offset ``top * bottom * 2``, capped to 16 bits."""
    return min(top * bottom * 2, U16_MAX)


def is_u16(value: int) -> bool:
    """Return whether *value* is a non-zero unsigned 16-bit integer."""
    return 0 < value <= U16_MAX


def is_u8(value: int) -> bool:
    """Return whether *value* is a non-zero unsigned 8-bit integer."""
    return 0 < value <= U8_MAX


@dataclass
class Header:
    """Document-level metadata.

    ``bpm``, ``offset`` and the time signature are never zero, ``color_table``
    always holds 16 RGB triples and ``bg_color`` is an index into it.  The
    constructor enforces this; the ``set_*`` methods keep it while editing by
    refusing invalid values instead of raising.
    """

    name: str = "Untitled"
    genre: str = "Unknown"
    level_author: str = "Anonymous"
    song_author: str = "Anonymous"
    background_effect: str = "none"
    bpm: int = DEFAULT_BPM
    offset: int = derive_offset(*DEFAULT_TIME_SIGNATURE)
    manual_offset: bool = False
    time_signature_top: int = DEFAULT_TIME_SIGNATURE[0]
    time_signature_bottom: int = DEFAULT_TIME_SIGNATURE[1]
    bg_color: int = DEFAULT_BG_COLOR
    color_table: list[Rgb] = field(default_factory=lambda: list(DEFAULT_COLOR_TABLE))

    def __post_init__(self) -> None:
        if not is_u16(self.bpm):
            raise ValueError(f"bpm must be in 1..{U16_MAX}, got {self.bpm}")
        if not is_u16(self.offset):
            raise ValueError(f"offset must be in 1..{U16_MAX}, got {self.offset}")
        if not (is_u8(self.time_signature_top) and is_u8(self.time_signature_bottom)):
            raise ValueError(
                "time signature parts must be in 1..255, got "
                f"{self.time_signature_top}/{self.time_signature_bottom}"
            )
        if len(self.color_table) != COLOR_TABLE_SIZE:
            raise ValueError(
                f"color_table must have {COLOR_TABLE_SIZE} entries, "
                f"got {len(self.color_table)}"
            )
        self.color_table = [validate_rgb(rgb) for rgb in self.color_table]
        if not is_color_index(self.bg_color):
            raise ValueError(f"bg_color is not a colour index: {self.bg_color}")

    # ── Derived values ───────────────────────────────────────────────────

    @property
    def time_signature(self) -> tuple[int, int]:
        return self.time_signature_top, self.time_signature_bottom

    @property
    def background_rgb(self) -> Rgb:
        return self.color_table[self.bg_color]

    def auto_offset(self) -> int:
        return derive_offset(self.time_signature_top, self.time_signature_bottom)

    # ── Editing ──────────────────────────────────────────────────────────

    def set_bpm(self, value: int) -> bool:
        if not is_u16(value):
            _LOGGER.debug("Rejected bpm %r", value)
            return False
        self.bpm = value
        return True

    def set_offset(self, value: int) -> bool:
        if not is_u16(value):
            _LOGGER.debug("Rejected offset %r", value)
            return False
        self.offset = value
        return True

    def set_manual_offset(self, manual: bool) -> None:
        """Toggle the manual-offset flag; turning it off re-derives the offset."""
        self.manual_offset = manual
        if not manual:
            self.offset = self.auto_offset()

    def set_time_signature(self, top: int, bottom: int) -> bool:
        if not (is_u8(top) and is_u8(bottom)):
            _LOGGER.debug("Rejected time signature %r/%r", top, bottom)
            return False
        self.time_signature_top = top
        self.time_signature_bottom = bottom
        if not self.manual_offset:
            self.offset = self.auto_offset()
        return True

    def set_bg_color(self, index: int) -> bool:
        if not is_color_index(index):
            _LOGGER.debug("Rejected bg_color %r", index)
            return False
        self.bg_color = index
        return True

    def set_palette_color(self, index: int, rgb: Rgb) -> bool:
        """Replace one palette entry; returns False for a bad index or triple."""
        if not is_color_index(index):
            return False
        try:
            self.color_table[index] = validate_rgb(rgb)
        except ValueError:
            _LOGGER.debug("Rejected palette colour %r", rgb)
            return False
        return True
