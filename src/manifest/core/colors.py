"""Palette constants and ``#RRGGBB`` conversion helpers."""

from __future__ import annotations

import re
from typing import TypeAlias

Rgb: TypeAlias = tuple[int, int, int]

COLOR_TABLE_SIZE = 16

_HEX_RE = re.compile(r"^#([0-9A-Fa-f]{6})$")

DEFAULT_COLOR_TABLE: tuple[Rgb, ...] = (
    (0xFF, 0xFF, 0xFF),  # white
    (0x00, 0x00, 0xFF),  # blue
    (0x00, 0xFF, 0x00),  # green
    (0x00, 0xFF, 0xFF),  # cyan
    (0xFF, 0x00, 0x00),  # red
    (0xFF, 0x00, 0xFF),  # magenta
    (0xFF, 0x66, 0x00),  # orange
    (0xAA, 0xAA, 0xAA),  # light grey
    (0x66, 0x66, 0x66),  # dark grey
    (0x66, 0x66, 0xFF),  # light blue
    (0x66, 0xFF, 0x66),  # light green
    (0x66, 0xFF, 0xFF),  # light cyan
    (0xFF, 0x66, 0x66),  # light red
    (0xFF, 0x66, 0xFF),  # light magenta
    (0xFF, 0xFF, 0x22),  # yellow
    (0x00, 0x00, 0x00),  # black
)


def is_color_index(value: int) -> bool:
    """Return whether *value* addresses an entry of a 16-colour table."""
    return 0 <= value < COLOR_TABLE_SIZE


def validate_rgb(rgb: Rgb) -> Rgb:
    """Return *rgb* as a plain tuple; ``ValueError`` if a byte is out of range."""
    if len(rgb) != 3:
        raise ValueError(f"RGB triple must have 3 components, got {len(rgb)}")
    r, g, b = (int(c) for c in rgb)
    for component in (r, g, b):
        if not 0 <= component <= 0xFF:
            raise ValueError(f"RGB component out of range: {component}")
    return r, g, b


def rgb_to_hex(rgb: Rgb) -> str:
    """Format an RGB triple as uppercase ``#RRGGBB``."""
    r, g, b = validate_rgb(rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_from_hex(text: str) -> Rgb:
    """Parse ``#RRGGBB`` (any letter case) into an RGB triple."""
    match = _HEX_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid hex colour: {text!r}")
    digits = match.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
