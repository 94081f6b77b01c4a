"""
Test-only O5M encoder

Builds varints, string pairs and whole records so decoder tests can describe
their input field by field.
"""

from typing import Iterable

MAGIC = bytes([0xFF, 0xE0, 0x04, 0x6F, 0x35, 0x6D, 0x32])

NODE = 0x10
WAY = 0x11
BOUNDARY = 0xDB
END_OF_FILE = 0xFE
RESET = 0xFF


def uvarint(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def svarint(value: int) -> bytes:
    if value < 0:
        magnitude, sign = -value - 1, 1
    else:
        magnitude, sign = value, 0
    first = ((magnitude & 0x3F) << 1) | sign
    magnitude >>= 6
    if magnitude:
        first |= 0x80
    return bytes([first]) + (uvarint(magnitude) if magnitude else b"")


def string_pair(first: str, second: str) -> bytes:
    return b"\x00" + first.encode("utf-8") + b"\x00" + second.encode("utf-8") + b"\x00"


def author(uid: int, name: str) -> bytes:
    return b"\x00" + uvarint(uid) + b"\x00" + name.encode("utf-8") + b"\x00"


def header(version: int = 0, timestamp: int = 0, changeset: int = 0, author_bytes: bytes = b"") -> bytes:
    if version == 0:
        return uvarint(0)
    return uvarint(version) + svarint(timestamp) + svarint(changeset) + author_bytes


def record(marker: int, body: bytes) -> bytes:
    return bytes([marker]) + uvarint(len(body)) + body


def boundary(min_lon: int, min_lat: int, max_lon: int, max_lat: int) -> bytes:
    return record(BOUNDARY, svarint(min_lon) + svarint(min_lat) + svarint(max_lon) + svarint(max_lat))


def node(id_delta: int, lon_delta: int, lat_delta: int, head: bytes = b"\x00", tags: bytes = b"") -> bytes:
    return record(NODE, svarint(id_delta) + head + svarint(lon_delta) + svarint(lat_delta) + tags)


def way(id_delta: int, ref_deltas: Iterable[int], head: bytes = b"\x00", tags: bytes = b"") -> bytes:
    refs = b"".join(svarint(r) for r in ref_deltas)
    return record(WAY, svarint(id_delta) + head + uvarint(len(refs)) + refs + tags)


def stream(*records: bytes) -> bytes:
    return MAGIC + b"".join(records)
