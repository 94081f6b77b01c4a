"""
String table

Tag key/value pairs and author uid/name pairs are written literally the first
time and later referenced by their position counted back from the newest
table entry. Each table entry is the two halves joined by SEPARATOR.
"""

from typing import Dict, List, Optional, Tuple

from .cursor import Cursor
from .errors import InvalidFormat, UnresolvedStringReference
from .varint import MAX_VARINT_BYTES, read_uvarint

SEPARATOR = "\0"


class StringTable:
    """Append-only, de-duplicated table of string pairs"""

    def __init__(self):
        self._entries: List[str] = []
        self._known: Dict[str, int] = {}

    def add(self, entry: str) -> bool:
        """Append `entry` unless an identical entry exists; return True if appended"""
        if entry in self._known:
            return False
        self._known[entry] = len(self._entries)
        self._entries.append(entry)
        return True

    def resolve(self, index: int, offset: Optional[int] = None) -> str:
        """Return the `index`-th newest entry (1 is the newest)"""
        size = len(self._entries)
        if index < 1 or index > size:
            raise UnresolvedStringReference(index, size, offset)
        return self._entries[size - index]

    def reset(self) -> None:
        self._entries.clear()
        self._known.clear()

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry: str) -> bool:
        return entry in self._known


def split_pair(entry: str) -> Tuple[str, str]:
    first, _, second = entry.partition(SEPARATOR)
    return first, second


def _text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def _read_reference(cursor: Cursor, table: StringTable, max_varint_bytes: int) -> str:
    offset = cursor.position
    index = read_uvarint(cursor, max_varint_bytes)
    return table.resolve(index, offset)


def read_string_pair(
    cursor: Cursor,
    table: StringTable,
    max_varint_bytes: int = MAX_VARINT_BYTES
) -> str:
    """
    Read a literal or back-referenced string pair

    A literal starts with 0x00 followed by two zero-terminated UTF-8 strings
    and is added to the table. Anything else is a back-reference varint.

    Returns:
        The joined pair, split it with split_pair()

    Raises:
        UnresolvedStringReference: Back-reference outside the table
    """
    if cursor.peek_byte() != 0:
        return _read_reference(cursor, table, max_varint_bytes)

    cursor.read_byte()
    first = _text(cursor.read_until_zero())
    second = _text(cursor.read_until_zero())
    entry = first + SEPARATOR + second
    table.add(entry)
    return entry


def read_author_pair(
    cursor: Cursor,
    table: StringTable,
    max_varint_bytes: int = MAX_VARINT_BYTES
) -> str:
    """
    Read a literal or back-referenced author (uid, name) pair

    The literal form differs from tag pairs: the uid is an unsigned varint,
    stored in the table as its decimal text.
    """
    if cursor.peek_byte() != 0:
        return _read_reference(cursor, table, max_varint_bytes)

    cursor.read_byte()
    uid = read_uvarint(cursor, max_varint_bytes)
    offset = cursor.position
    if cursor.read_byte() != 0:
        raise InvalidFormat("Author uid not followed by 0x00", offset)
    name = _text(cursor.read_until_zero())
    entry = str(uid) + SEPARATOR + name
    table.add(entry)
    return entry
