"""Wire package: JSON encoding and decoding of charts, headers and shapes."""

from manifest.core.wire.document import (
    JSON_INDENT,
    document_from_wire,
    document_to_wire,
    dumps_chart,
    loads_chart,
)
from manifest.core.wire.header import header_from_wire, header_to_wire
from manifest.core.wire.shape import shape_from_wire, shape_to_wire

__all__ = [
    "JSON_INDENT",
    "document_from_wire",
    "document_to_wire",
    "dumps_chart",
    "loads_chart",
    "header_from_wire",
    "header_to_wire",
    "shape_from_wire",
    "shape_to_wire",
]
