"""Exceptions raised by the chart codec and geometry layer."""

from __future__ import annotations


class ChartDecodeError(ValueError):
    """Base class for every failure to turn wire data into a chart.

    Decoding is all-or-nothing: when one of these is raised no partially
    built document or shape is returned.
    """


class MalformedJsonError(ChartDecodeError):
    """Input is not JSON, not an array with a header first, or structurally wrong."""


class InvalidBpmError(ChartDecodeError):
    """``bpm`` is missing, zero, non-numeric or outside 16 bits."""


class InvalidOffsetError(ChartDecodeError):
    """``offset`` is zero, non-numeric or outside 16 bits."""


class InvalidTimeSignatureError(ChartDecodeError):
    """A time signature part is zero, non-numeric or outside 8 bits."""


class InvalidColorIndexError(ChartDecodeError):
    """``bg_color`` or a shape ``color`` is not an index into the colour table."""


class InvalidColorTableError(ChartDecodeError):
    """``color_table`` is not a list of exactly 16 ``#RRGGBB`` strings."""


class InvalidShapeKindError(ChartDecodeError):
    """A shape's ``shape`` code is not one of 0, 1, 2."""


class CorruptDocumentError(RuntimeError):
    """An in-memory chart breaks an invariant the decoder guarantees.

    This signals a programming error, not bad user input, and is not meant
    to be caught by the UI.
    """
