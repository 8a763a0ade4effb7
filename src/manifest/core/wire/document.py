"""Whole-chart encoding plus the JSON text layer."""

from __future__ import annotations

import json
from typing import Any

from manifest.core.document import ChartDocument
from manifest.core.errors import MalformedJsonError
from manifest.core.wire.header import header_from_wire, header_to_wire
from manifest.core.wire.shape import shape_from_wire, shape_to_wire

JSON_INDENT = 4


def document_to_wire(document: ChartDocument) -> list[dict[str, Any]]:
    """Header object at index 0, then top-level shapes as siblings in list order."""
    wire: list[dict[str, Any]] = [header_to_wire(document.header)]
    wire.extend(shape_to_wire(shape) for shape in document.shapes)
    return wire


def document_from_wire(data: Any) -> ChartDocument:
    """Decode a parsed JSON value into a new document, all-or-nothing."""
    if not isinstance(data, list) or not data:
        raise MalformedJsonError("Chart must be a JSON array with the header first")

    header = header_from_wire(data[0])
    shapes = [
        shape_from_wire(element, f"shapes[{idx}]")
        for idx, element in enumerate(data[1:])
    ]
    return ChartDocument(header=header, shapes=shapes)


def dumps_chart(document: ChartDocument) -> str:
    """Render *document* as pretty-printed JSON text.

    Raises:
        ValueError: A coordinate or size is NaN or infinite.
    """
    wire = document_to_wire(document)
    return json.dumps(wire, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False)


def loads_chart(text: str) -> ChartDocument:
    """Parse JSON *text* into a document.

    Raises:
        MalformedJsonError: *text* is not valid JSON.
        ChartDecodeError: Any other decode failure (see :func:`document_from_wire`).
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedJsonError(f"Invalid JSON: {exc}") from exc
    return document_from_wire(data)
