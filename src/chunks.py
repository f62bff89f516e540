"""PNG signature validation, chunk walking and payload extraction.

A PNG file is the 8-byte signature followed by a flat sequence of
chunks: ``length (4, big-endian) | type (4, ASCII) | payload | CRC (4)``.
The walker reads each header, hands the payload of known chunks to a
per-tag extractor and then moves exactly ``length + 4`` bytes past the
payload start. CRCs are never checked. Pixel data is never read.
"""

from __future__ import annotations

import enum
import logging
import struct
from dataclasses import dataclass
from typing import Any, BinaryIO, Callable, Iterator, NamedTuple

from constants import (
    CHUNK_CRC_SIZE,
    CHUNK_HEADER_SIZE,
    IHDR_FIELD_NAMES,
    IHDR_FIELD_SIZES,
    PNG_SIGNATURE,
)
from cursor import ChunkCursor
from errors import MalformedSignatureError, TruncatedHeaderError, TruncatedPayloadError

logger = logging.getLogger(__name__)

_HEADER_STRUCT = struct.Struct(">I4s")


class ChunkTag(str, enum.Enum):
    """Chunk types the walker understands. Anything else is skipped."""

    IHDR = "IHDR"
    TEXT = "tEXt"
    EXIF = "eXIf"
    SRGB = "sRGB"
    ITXT = "iTXt"
    BKGD = "bKGD"
    IEND = "IEND"

    @classmethod
    def lookup(cls, chunk_type: str) -> ChunkTag | None:
        try:
            return cls(chunk_type)
        except ValueError:
            return None


@dataclass(frozen=True)
class ChunkHeader:
    length: int
    type: str


class TextEntry(NamedTuple):
    keyword: str
    text: str


@dataclass(frozen=True)
class ChunkRecord:
    """One extracted chunk: its tag and the value its extractor produced."""

    tag: ChunkTag
    payload: Any


def check_signature(cursor: ChunkCursor) -> None:
    """
    Consume the first 8 bytes and verify they are the PNG magic.

    Raises:
        MalformedSignatureError: If fewer than 8 bytes are available or
            any byte differs.
    """
    signature = cursor.read(len(PNG_SIGNATURE), MalformedSignatureError)
    if signature != PNG_SIGNATURE:
        raise MalformedSignatureError(f"Invalid PNG file signature: {signature!r}")


def read_chunk_header(cursor: ChunkCursor) -> ChunkHeader | None:
    """
    Read the next chunk header.

    Returns:
        The header, or None when the stream is exhausted exactly at a
        chunk boundary.

    Raises:
        TruncatedHeaderError: If the stream ends inside the header.
    """
    if cursor.remaining == 0:
        return None
    raw = cursor.read(CHUNK_HEADER_SIZE, TruncatedHeaderError)
    length, chunk_type = _HEADER_STRUCT.unpack(raw)
    return ChunkHeader(length=length, type=chunk_type.decode("latin-1"))


def _extract_text(payload: bytes) -> TextEntry:
    keyword, _, text = payload.partition(b"\x00")
    return TextEntry(keyword.decode("latin-1"), text.decode("latin-1"))


def _extract_raw(payload: bytes) -> bytes:
    return payload


def _extract_header(payload: bytes) -> tuple[bytes, ...]:
    # Byte groups are kept raw; decode_header interprets them.
    groups = []
    offset = 0
    for size in IHDR_FIELD_SIZES:
        groups.append(payload[offset:offset + size])
        offset += size
    return tuple(groups)


EXTRACTORS: dict[ChunkTag, Callable[[bytes], Any]] = {
    ChunkTag.IHDR: _extract_header,
    ChunkTag.TEXT: _extract_text,
    ChunkTag.EXIF: _extract_raw,
    ChunkTag.SRGB: _extract_raw,
    ChunkTag.ITXT: _extract_raw,
    ChunkTag.BKGD: _extract_raw,
}


def walk_chunks(stream: BinaryIO) -> Iterator[ChunkRecord]:
    """
    Validate the signature and yield a record for every known chunk.

    The walk ends at IEND or, without error, at end of stream. Unknown
    and zero-length chunks are skipped without producing a record.

    Args:
        stream: Seekable binary stream positioned at the PNG signature.

    Yields:
        ChunkRecord for each extracted chunk, in file order.

    Raises:
        MalformedSignatureError: If the signature is wrong.
        TruncatedHeaderError: If the stream ends inside a chunk header.
        TruncatedPayloadError: If a chunk declares more payload bytes
            than remain. A missing trailing CRC is tolerated.
    """
    cursor = ChunkCursor(stream)
    check_signature(cursor)

    while True:
        header = read_chunk_header(cursor)
        if header is None:
            logger.debug("Reached end of stream without IEND")
            return

        tag = ChunkTag.lookup(header.type)
        if tag is ChunkTag.IEND:
            return

        payload_start = cursor.tell()
        if header.length > cursor.remaining:
            raise TruncatedPayloadError(
                f"Chunk {header.type!r} at offset {payload_start - CHUNK_HEADER_SIZE} "
                f"declares {header.length} bytes but only {cursor.remaining} remain"
            )

        extractor = EXTRACTORS.get(tag) if tag is not None else None
        if extractor is not None and header.length > 0:
            payload = cursor.peek(header.length)
            yield ChunkRecord(tag=tag, payload=extractor(payload))
        else:
            logger.debug("Skipping %s chunk (%d bytes)", header.type, header.length)

        # A CRC cut off by end of stream ends the walk on the next header read
        cursor.seek(min(payload_start + header.length + CHUNK_CRC_SIZE, cursor.size))


def collect_chunks(stream: BinaryIO) -> dict[ChunkTag, Any]:
    """
    Walk the stream and fold records into one value per tag.

    tEXt entries accumulate into a list in file order; every other tag
    keeps only its last occurrence.
    """
    chunks: dict[ChunkTag, Any] = {}
    for record in walk_chunks(stream):
        if record.tag is ChunkTag.TEXT:
            chunks.setdefault(ChunkTag.TEXT, []).append(record.payload)
        else:
            if record.tag in chunks:
                logger.debug("Duplicate %s chunk, keeping the last one", record.tag.value)
            chunks[record.tag] = record.payload
    return chunks


def decode_header(groups: tuple[bytes, ...]) -> dict[str, int]:
    """
    Interpret the raw IHDR byte groups as unsigned big-endian integers.

    Groups cut short by an undersized IHDR payload are left out.
    """
    header: dict[str, int] = {}
    for name, size, group in zip(IHDR_FIELD_NAMES, IHDR_FIELD_SIZES, groups):
        if len(group) == size:
            header[name] = int.from_bytes(group, "big")
    return header
