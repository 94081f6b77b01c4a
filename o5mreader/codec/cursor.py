"""
Byte cursors

Sequential, position-tracked readers used by every decoder:
- ByteCursor: over an in-memory buffer
- StreamCursor: over a binary file object, one byte of lookahead
- BoundedCursor: a view restricted to the next N bytes of a parent cursor
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

from .errors import BudgetMismatch, UnexpectedEndOfInput

# Largest single read issued to a file object
READ_CHUNK = 65536


class Cursor(ABC):
    """Common reading interface shared by all cursors"""

    @property
    @abstractmethod
    def position(self) -> int:
        ...

    @abstractmethod
    def read_byte(self) -> int:
        ...

    @abstractmethod
    def peek_byte(self) -> Optional[int]:
        """Return the next byte without consuming it, or None at the end"""

    @abstractmethod
    def read_exact(self, count: int) -> bytes:
        ...

    def at_end(self) -> bool:
        return self.peek_byte() is None

    def skip(self, count: int) -> None:
        self.read_exact(count)

    def read_until_zero(self) -> bytes:
        """Read bytes up to a 0x00 terminator, consume it, return the bytes before it"""
        out = bytearray()
        while True:
            b = self.read_byte()
            if b == 0:
                return bytes(out)
            out.append(b)

    def bounded(self, limit: int) -> "BoundedCursor":
        return BoundedCursor(self, limit)


class ByteCursor(Cursor):
    """Cursor over a fully materialized buffer"""

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def read_byte(self) -> int:
        if self._pos >= len(self._data):
            raise UnexpectedEndOfInput("Read past end of input", self._pos)
        b = self._data[self._pos]
        self._pos += 1
        return b

    def peek_byte(self) -> Optional[int]:
        if self._pos >= len(self._data):
            return None
        return self._data[self._pos]

    def read_exact(self, count: int) -> bytes:
        end = self._pos + count
        if count < 0 or end > len(self._data):
            raise UnexpectedEndOfInput(
                f"Needed {count} bytes, {len(self._data) - self._pos} available", self._pos
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def read_until_zero(self) -> bytes:
        try:
            end = self._data.index(0, self._pos)
        except ValueError:
            raise UnexpectedEndOfInput("Unterminated string", self._pos) from None
        chunk = self._data[self._pos:end]
        self._pos = end + 1
        return chunk


class StreamCursor(Cursor):
    """Cursor reading directly from a binary file object"""

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._pos = 0
        self._lookahead: Optional[int] = None

    @property
    def position(self) -> int:
        return self._pos

    def _fill(self) -> Optional[int]:
        if self._lookahead is None:
            chunk = self._stream.read(1)
            if chunk:
                self._lookahead = chunk[0]
        return self._lookahead

    def read_byte(self) -> int:
        b = self._fill()
        if b is None:
            raise UnexpectedEndOfInput("Read past end of input", self._pos)
        self._lookahead = None
        self._pos += 1
        return b

    def peek_byte(self) -> Optional[int]:
        return self._fill()

    def read_exact(self, count: int) -> bytes:
        if count < 0:
            raise UnexpectedEndOfInput(f"Negative read of {count} bytes", self._pos)
        if count == 0:
            return b""
        out = bytearray()
        if self._lookahead is not None:
            out.append(self._lookahead)
            self._lookahead = None
        while len(out) < count:
            chunk = self._stream.read(min(count - len(out), READ_CHUNK))
            if not chunk:
                raise UnexpectedEndOfInput(
                    f"Needed {count} bytes, {len(out)} available", self._pos
                )
            out.extend(chunk)
        self._pos += count
        return bytes(out)

    def skip(self, count: int) -> None:
        """Discard `count` bytes without holding them in memory"""
        if count < 0:
            raise UnexpectedEndOfInput(f"Negative skip of {count} bytes", self._pos)
        left = count
        if left and self._lookahead is not None:
            self._lookahead = None
            left -= 1
        while left:
            chunk = self._stream.read(min(left, READ_CHUNK))
            if not chunk:
                raise UnexpectedEndOfInput(
                    f"Needed {count} bytes, {count - left} available", self._pos
                )
            left -= len(chunk)
        self._pos += count


class BoundedCursor(Cursor):
    """
    View over the next `limit` bytes of a parent cursor

    Reading past the limit raises BudgetMismatch; running out of parent
    input raises UnexpectedEndOfInput from the parent.
    """

    def __init__(self, parent: Cursor, limit: int):
        if limit < 0:
            raise BudgetMismatch(f"Negative body length {limit}", parent.position)
        self._parent = parent
        self._start = parent.position
        self.limit = limit

    @property
    def position(self) -> int:
        return self._parent.position

    @property
    def consumed(self) -> int:
        return self._parent.position - self._start

    @property
    def remaining(self) -> int:
        return self.limit - self.consumed

    def read_byte(self) -> int:
        if self.remaining <= 0:
            raise BudgetMismatch(f"Record body of {self.limit} bytes overrun", self.position)
        return self._parent.read_byte()

    def peek_byte(self) -> Optional[int]:
        if self.remaining <= 0:
            return None
        return self._parent.peek_byte()

    def read_exact(self, count: int) -> bytes:
        if count > self.remaining:
            raise BudgetMismatch(
                f"Read of {count} bytes exceeds {self.remaining} left in record body",
                self.position,
            )
        return self._parent.read_exact(count)

    def at_end(self) -> bool:
        return self.remaining <= 0

    def finish(self) -> None:
        """Check that the whole body was consumed"""
        if self.remaining != 0:
            raise BudgetMismatch(
                f"Record body of {self.limit} bytes has {self.remaining} bytes unread",
                self.position,
            )
