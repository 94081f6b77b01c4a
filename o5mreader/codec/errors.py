"""
Decode errors

Every failure raised by the codec derives from O5MError, which is a ValueError
so callers that already guard against bad input keep working.
"""

from typing import Optional


class O5MError(ValueError):
    """Base class for all O5M decode errors"""

    def __init__(self, message: str, offset: Optional[int] = None):
        self.offset = offset
        if offset is not None:
            message = f"{message} (at byte {offset})"
        super().__init__(message)


class InvalidFormat(O5MError):
    """The stream does not start with the O5M magic header"""


class UnknownRecordMarker(InvalidFormat):
    """A record marker outside the supported subset was met in strict mode"""

    def __init__(self, marker: int, offset: Optional[int] = None):
        self.marker = marker
        super().__init__(f"Unsupported record marker 0x{marker:02X}", offset)


class UnexpectedEndOfInput(O5MError):
    """The byte source ran out, or a varint never terminated"""


class UnresolvedStringReference(O5MError):
    """A string table back-reference points outside the table"""

    def __init__(self, index: int, table_size: int, offset: Optional[int] = None):
        self.index = index
        self.table_size = table_size
        super().__init__(
            f"String reference {index} outside table of {table_size} entries", offset
        )


class BudgetMismatch(O5MError):
    """A record body was overrun or left partially unread"""
