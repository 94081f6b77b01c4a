"""
O5M stream decoder

Validates the magic header, then dispatches each record marker to its
decoder until the input ends.
"""

from typing import Optional
from loguru import logger

from ..config import DecoderConfig, STRICT, SKIP_FRAMED, get_config
from .cursor import Cursor
from .entities import Dataset
from .errors import InvalidFormat, O5MError, UnexpectedEndOfInput, UnknownRecordMarker
from .records import DecodeSession, read_boundary, read_node, read_way

# 0xFF reset marker followed by the 0xE0 "o5m2" file header record
MAGIC = bytes([0xFF, 0xE0, 0x04, 0x6F, 0x35, 0x6D, 0x32])

NODE = 0x10
WAY = 0x11
BOUNDARY = 0xDB
END_OF_FILE = 0xFE
RESET = 0xFF

# Markers from 0xF0 up carry no length-prefixed body
FIRST_UNFRAMED_MARKER = 0xF0


class StreamDecoder:
    """
    Decode an O5M byte stream into a Dataset

    Usage:
        decoder = StreamDecoder()
        dataset = decoder.decode(ByteCursor(data))
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        self.config = config or get_config().decoder
        if self.config.unknown_marker_policy not in (STRICT, SKIP_FRAMED):
            raise ValueError(
                f"unknown_marker_policy must be '{STRICT}' or '{SKIP_FRAMED}', "
                f"got {self.config.unknown_marker_policy!r}"
            )

    def decode(self, cursor: Cursor) -> Dataset:
        """
        Decode a whole stream

        Args:
            cursor: Cursor at the start of the stream

        Returns:
            Dataset; `success` is False if a record failed to decode, with
            the records read before the failure kept

        Raises:
            InvalidFormat: The magic header is missing
        """
        self._validate_magic(cursor)

        session = DecodeSession(self.config)
        dataset = Dataset()
        try:
            self._decode_records(cursor, session, dataset)
        except O5MError as e:
            logger.error(f"O5M decode stopped: {e}")
            dataset.error = e
            dataset.success = False
        else:
            dataset.success = True

        dataset.string_table = session.strings.entries
        dataset.bytes_consumed = cursor.position
        logger.info(
            f"Decoded {len(dataset.nodes)} nodes, {len(dataset.ways)} ways, "
            f"{len(dataset.string_table)} strings"
        )
        return dataset

    @staticmethod
    def _validate_magic(cursor: Cursor) -> None:
        try:
            head = cursor.read_exact(len(MAGIC))
        except UnexpectedEndOfInput:
            raise InvalidFormat("Input shorter than the O5M header", 0) from None
        if head != MAGIC:
            raise InvalidFormat(f"Bad O5M header {head.hex(' ')}", 0)

    def _decode_records(self, cursor: Cursor, session: DecodeSession, dataset: Dataset) -> None:
        while not cursor.at_end():
            offset = cursor.position
            marker = cursor.read_byte()

            if marker == RESET:
                session.reset()
                logger.debug(f"Reset at byte {offset}")
            elif marker == NODE:
                node = read_node(cursor, session)
                dataset.nodes[node.id] = node
            elif marker == WAY:
                dataset.ways.append(read_way(cursor, session))
            elif marker == BOUNDARY:
                boundary = read_boundary(cursor, session)
                if dataset.boundary is None:
                    dataset.boundary = boundary
                else:
                    logger.debug(f"Ignoring extra boundary at byte {offset}")
            elif marker == END_OF_FILE:
                if not cursor.at_end():
                    logger.warning(f"Ignoring data after end-of-file marker at byte {offset}")
                return
            else:
                self._skip_record(cursor, session, marker, offset)

    def _skip_record(self, cursor: Cursor, session: DecodeSession, marker: int, offset: int) -> None:
        if self.config.unknown_marker_policy != SKIP_FRAMED:
            raise UnknownRecordMarker(marker, offset)
        if marker < FIRST_UNFRAMED_MARKER:
            length = session.uvarint(cursor)
            cursor.skip(length)
            logger.debug(f"Skipped record 0x{marker:02X} of {length} bytes at byte {offset}")
        else:
            logger.debug(f"Skipped marker 0x{marker:02X} at byte {offset}")
