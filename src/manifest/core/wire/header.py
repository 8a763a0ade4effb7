"""Header encoding and lenient decoding.

Only ``name``, ``genre``, ``level_author``, ``song_author``,
``background_effect``, ``bpm`` and ``bg_color`` are required on the wire.
Fields added later (offset, time signature, palette, manual offset) are read
when present and validated, and fall back to defaults when absent, so older
files keep loading.
"""

from __future__ import annotations

from typing import Any

from manifest.core.colors import (
    COLOR_TABLE_SIZE,
    DEFAULT_COLOR_TABLE,
    Rgb,
    rgb_from_hex,
    rgb_to_hex,
)
from manifest.core.errors import (
    InvalidBpmError,
    InvalidColorIndexError,
    InvalidColorTableError,
    InvalidOffsetError,
    InvalidTimeSignatureError,
)
from manifest.core.header import (
    DEFAULT_TIME_SIGNATURE,
    U8_MAX,
    U16_MAX,
    Header,
    derive_offset,
)
from manifest.core.wire.fields import (
    optional_bool,
    optional_int,
    require_int,
    require_object,
    require_str,
)

_TEXT_FIELDS = ("name", "genre", "level_author", "song_author", "background_effect")


def header_to_wire(header: Header) -> dict[str, Any]:
    """Encode *header* with keys in canonical order."""
    data: dict[str, Any] = {key: getattr(header, key) for key in _TEXT_FIELDS}
    data["bpm"] = header.bpm
    data["offset"] = header.offset
    data["time_signature_top"] = header.time_signature_top
    data["time_signature_bottom"] = header.time_signature_bottom
    data["bg_color"] = header.bg_color
    data["color_table"] = [rgb_to_hex(rgb) for rgb in header.color_table]
    if header.manual_offset:
        data["manual_offset"] = True
    return data


def _color_table_from_wire(value: Any, path: str) -> list[Rgb]:
    if not isinstance(value, list) or len(value) != COLOR_TABLE_SIZE:
        raise InvalidColorTableError(
            f"{path}.color_table must be a list of {COLOR_TABLE_SIZE} colours"
        )
    table: list[Rgb] = []
    for idx, entry in enumerate(value):
        if not isinstance(entry, str):
            raise InvalidColorTableError(f"{path}.color_table[{idx}] must be a string")
        try:
            table.append(rgb_from_hex(entry))
        except ValueError as exc:
            raise InvalidColorTableError(f"{path}.color_table[{idx}]: {exc}") from exc
    return table


def header_from_wire(value: Any, path: str = "header") -> Header:
    """Decode a header object.

    Raises:
        MalformedJsonError: Not an object, or a text field missing / not a string.
        InvalidBpmError, InvalidOffsetError, InvalidTimeSignatureError,
        InvalidColorIndexError, InvalidColorTableError: Bad numeric or palette field.
    """
    obj = require_object(value, path)
    texts = {key: require_str(obj, key, path) for key in _TEXT_FIELDS}

    bpm = require_int(obj, "bpm", path, error=InvalidBpmError, lo=1, hi=U16_MAX)
    bg_color = require_int(
        obj,
        "bg_color",
        path,
        error=InvalidColorIndexError,
        lo=0,
        hi=COLOR_TABLE_SIZE - 1,
    )

    top = optional_int(
        obj,
        "time_signature_top",
        path,
        DEFAULT_TIME_SIGNATURE[0],
        error=InvalidTimeSignatureError,
        lo=1,
        hi=U8_MAX,
    )
    bottom = optional_int(
        obj,
        "time_signature_bottom",
        path,
        DEFAULT_TIME_SIGNATURE[1],
        error=InvalidTimeSignatureError,
        lo=1,
        hi=U8_MAX,
    )
    offset = optional_int(
        obj,
        "offset",
        path,
        derive_offset(top, bottom),
        error=InvalidOffsetError,
        lo=1,
        hi=U16_MAX,
    )
    manual_offset = optional_bool(obj, "manual_offset", path, False)

    if "color_table" in obj:
        color_table = _color_table_from_wire(obj["color_table"], path)
    else:
        color_table = list(DEFAULT_COLOR_TABLE)

    return Header(
        **texts,
        bpm=bpm,
        offset=offset,
        manual_offset=manual_offset,
        time_signature_top=top,
        time_signature_bottom=bottom,
        bg_color=bg_color,
        color_table=color_table,
    )
