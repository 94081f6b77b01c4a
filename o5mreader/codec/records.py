"""
Record decoders

Each decoder reads one record body from a cursor positioned just after the
record marker. Variable-size bodies are read through a BoundedCursor so a body
can neither be overrun nor left partially unread.
"""

from typing import Dict
from loguru import logger

from ..config import DecoderConfig
from .cursor import Cursor, BoundedCursor
from .deltas import DeltaTracker, NODE_ID, NODE_LAT, NODE_LON, WAY_ID, NODE_REF, TIMESTAMP, CHANGESET
from .entities import Author, Boundary, Header, Node, Way, to_degrees
from .errors import BudgetMismatch, UnresolvedStringReference
from .strings import StringTable, read_author_pair, read_string_pair, split_pair
from .varint import read_svarint, read_uvarint


class DecodeSession:
    """
    State carried across the records of one decode

    Holds the delta running values and the string table. Both are cleared
    together by reset() and by nothing else.
    """

    def __init__(self, config: DecoderConfig):
        self.config = config
        self.deltas = DeltaTracker(zero_passthrough=config.zero_delta_passthrough)
        self.strings = StringTable()

    def reset(self) -> None:
        self.deltas.reset()
        self.strings.reset()

    def uvarint(self, cursor: Cursor) -> int:
        return read_uvarint(cursor, self.config.max_varint_bytes)

    def svarint(self, cursor: Cursor) -> int:
        return read_svarint(cursor, self.config.max_varint_bytes)

    def delta(self, cursor: Cursor, key: str) -> int:
        return self.deltas.apply(self.svarint(cursor), key)

    def body(self, cursor: Cursor) -> BoundedCursor:
        """Read a body length and return a cursor limited to that body"""
        return cursor.bounded(self.uvarint(cursor))


def read_header(cursor: Cursor, session: DecodeSession) -> Header:
    """
    Read version, timestamp, changeset and author

    Raises:
        UnresolvedStringReference: Author back-reference is outside the table
    """
    version = session.uvarint(cursor)
    if version == 0:
        return Header()

    raw_timestamp = session.svarint(cursor)
    if raw_timestamp == 0 and session.config.author_requires_timestamp:
        return Header(version=version)
    timestamp = session.deltas.apply(raw_timestamp, TIMESTAMP)
    changeset = session.delta(cursor, CHANGESET)

    uid, name = split_pair(
        read_author_pair(cursor, session.strings, session.config.max_varint_bytes)
    )
    return Header(
        version=version,
        timestamp=timestamp,
        changeset=changeset,
        author=Author(id=uid, name=name)
    )


def read_tags(body: BoundedCursor, session: DecodeSession) -> Dict[str, str]:
    """
    Read key/value pairs until the body is used up

    A back-reference outside the string table drops that one tag only.
    """
    tags: Dict[str, str] = {}
    while not body.at_end():
        try:
            entry = read_string_pair(body, session.strings, session.config.max_varint_bytes)
        except UnresolvedStringReference as e:
            logger.warning(f"Dropping unresolvable tag: {e}")
            continue
        key, value = split_pair(entry)
        tags[key] = value
    return tags


def read_boundary(cursor: Cursor, session: DecodeSession) -> Boundary:
    """Read a bounding box: min lon, min lat, max lon, max lat (not delta coded)"""
    body = session.body(cursor)
    min_lon = session.svarint(body)
    min_lat = session.svarint(body)
    max_lon = session.svarint(body)
    max_lat = session.svarint(body)
    body.finish()
    return Boundary(
        min_lat=to_degrees(min_lat),
        min_lon=to_degrees(min_lon),
        max_lat=to_degrees(max_lat),
        max_lon=to_degrees(max_lon)
    )


def read_node(cursor: Cursor, session: DecodeSession) -> Node:
    body = session.body(cursor)
    node_id = session.delta(body, NODE_ID)
    header = read_header(body, session)
    lon = session.delta(body, NODE_LON)
    lat = session.delta(body, NODE_LAT)
    tags = read_tags(body, session)
    body.finish()
    return Node(
        id=node_id,
        header=header,
        lat=to_degrees(lat),
        lon=to_degrees(lon),
        tags=tags
    )


def read_way(cursor: Cursor, session: DecodeSession) -> Way:
    """
    Read a way: id, header, node references, tags

    Node references are delta coded against one running value shared by
    every way in the stream.
    """
    body = session.body(cursor)
    way_id = session.delta(body, WAY_ID)
    header = read_header(body, session)

    refs_length = session.uvarint(body)
    if refs_length > body.remaining:
        raise BudgetMismatch(
            f"Reference block of {refs_length} bytes exceeds {body.remaining} left in way body",
            body.position
        )
    refs_cursor = body.bounded(refs_length)
    refs = []
    while not refs_cursor.at_end():
        refs.append(session.delta(refs_cursor, NODE_REF))

    tags = read_tags(body, session)
    body.finish()
    return Way(id=way_id, header=header, refs=refs, tags=tags)

