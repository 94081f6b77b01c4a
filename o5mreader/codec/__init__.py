"""
O5M binary codec

Decoder components, leaves first:
- Cursor: Position-tracked byte readers (memory, stream, bounded)
- Varint: Unsigned and signed variable-length integers
- Deltas: Running values for delta-coded fields
- Strings: Back-referenced string pair table
- Records: Header, boundary, node, way and tag decoders
- Stream: Magic header check and record dispatch
"""

from .cursor import ByteCursor, StreamCursor, BoundedCursor
from .entities import Author, Boundary, Dataset, Header, Node, Way
from .errors import (
    O5MError, InvalidFormat, UnknownRecordMarker, UnexpectedEndOfInput,
    UnresolvedStringReference, BudgetMismatch
)
from .stream import StreamDecoder, MAGIC

__all__ = [
    "ByteCursor",
    "StreamCursor",
    "BoundedCursor",
    "Author",
    "Boundary",
    "Dataset",
    "Header",
    "Node",
    "Way",
    "O5MError",
    "InvalidFormat",
    "UnknownRecordMarker",
    "UnexpectedEndOfInput",
    "UnresolvedStringReference",
    "BudgetMismatch",
    "StreamDecoder",
    "MAGIC",
]
