"""
O5M reader

Decodes .o5m OpenStreetMap extracts into a boundary, nodes and ways:
- Reader: File entry points (memory or streaming)
- Codec: Binary decoding (varints, deltas, string table, records)
- Features: Way coordinates, shapely geometries, GeoJSON export
- Config: Decoder and reader settings
"""

from .config import O5MConfig, DecoderConfig, ReaderConfig, get_config
from .codec import (
    Author, Boundary, Dataset, Header, Node, Way,
    O5MError, InvalidFormat, UnknownRecordMarker, UnexpectedEndOfInput,
    UnresolvedStringReference, BudgetMismatch
)
from .reader import read_o5m, decode_bytes, decode_stream
from .features import way_coordinates, way_geometry, node_geometry, to_feature_collection

__version__ = "1.0.0"

__all__ = [
    "O5MConfig",
    "DecoderConfig",
    "ReaderConfig",
    "get_config",
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
    "read_o5m",
    "decode_bytes",
    "decode_stream",
    "way_coordinates",
    "way_geometry",
    "node_geometry",
    "to_feature_collection",
]
