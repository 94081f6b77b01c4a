"""
Variable-length integers

7 payload bits per byte, least significant chunk first, high bit set when
more bytes follow. The signed form stores the sign in the lowest payload bit
of the first byte, leaving 6 value bits there: a set sign bit means the value
is -(magnitude) - 1.
"""

from .cursor import Cursor
from .errors import UnexpectedEndOfInput

MAX_VARINT_BYTES = 10


def read_uvarint(cursor: Cursor, max_bytes: int = MAX_VARINT_BYTES) -> int:
    """
    Read an unsigned varint

    Args:
        cursor: Source cursor
        max_bytes: Longest accepted encoding

    Returns:
        Decoded non-negative integer

    Raises:
        UnexpectedEndOfInput: Input ends mid-number or no terminating byte
            within max_bytes
    """
    start = cursor.position
    value = 0
    shift = 0
    for _ in range(max_bytes):
        b = cursor.read_byte()
        value |= (b & 0x7F) << shift
        if not b & 0x80:
            return value
        shift += 7
    raise UnexpectedEndOfInput(f"Varint not terminated within {max_bytes} bytes", start)


def read_svarint(cursor: Cursor, max_bytes: int = MAX_VARINT_BYTES) -> int:
    """Read a signed varint (sign flag in bit 0 of the first byte)"""
    start = cursor.position
    b = cursor.read_byte()
    negative = b & 0x01
    value = (b & 0x7F) >> 1
    shift = 6
    more = b & 0x80
    count = 1
    while more:
        if count >= max_bytes:
            raise UnexpectedEndOfInput(
                f"Varint not terminated within {max_bytes} bytes", start
            )
        b = cursor.read_byte()
        value |= (b & 0x7F) << shift
        shift += 7
        more = b & 0x80
        count += 1
    if negative:
        return -value - 1
    return value
