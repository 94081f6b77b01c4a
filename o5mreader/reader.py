"""
O5M file reader

Entry points that pick a byte source and run the stream decoder:
- read_o5m: decode a file, fully loaded into memory or streamed from disk
- decode_bytes: decode an in-memory buffer
- decode_stream: decode an already opened binary file object
"""

from pathlib import Path
from typing import BinaryIO, Optional, Union
from loguru import logger

from .config import O5MConfig, MEMORY, STREAM, get_config, validate_config
from .codec import ByteCursor, Dataset, StreamCursor, StreamDecoder


def decode_bytes(data: bytes, config: Optional[O5MConfig] = None) -> Dataset:
    """Decode an O5M stream held in memory"""
    config = config or get_config()
    validate_config(config)
    return StreamDecoder(config.decoder).decode(ByteCursor(data))


def decode_stream(stream: BinaryIO, config: Optional[O5MConfig] = None) -> Dataset:
    """Decode an O5M stream from a readable binary file object (not closed here)"""
    config = config or get_config()
    validate_config(config)
    return StreamDecoder(config.decoder).decode(StreamCursor(stream))


def read_o5m(
    path: Union[str, Path],
    config: Optional[O5MConfig] = None,
    mode: Optional[str] = None
) -> Dataset:
    """
    Decode an .o5m file

    Both modes give the same result; "memory" trades memory for fewer reads.

    Args:
        path: File to read
        config: Settings, defaults to the global config
        mode: "memory" or "stream", overrides config.reader.mode

    Returns:
        Decoded Dataset (check `success`)

    Raises:
        InvalidFormat: File does not start with the O5M header
        ValueError: Invalid configuration or mode
        OSError: File cannot be opened
    """
    config = config or get_config()
    validate_config(config)
    mode = mode or config.reader.mode
    path = Path(path)

    logger.info(f"Reading O5M file {path} ({mode} mode)")

    if mode == MEMORY:
        return decode_bytes(path.read_bytes(), config)
    if mode == STREAM:
        with open(path, "rb", buffering=config.reader.buffer_size) as f:
            return decode_stream(f, config)
    raise ValueError(f"Unknown read mode {mode!r}, expected '{MEMORY}' or '{STREAM}'")
