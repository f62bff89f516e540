"""Forward-only byte cursor over a seekable binary stream.

The chunk walker owns the only ``ChunkCursor`` of an extraction.
Payload extractors receive plain ``bytes`` obtained through ``peek``,
so they cannot move the position the walker relies on.
"""

from __future__ import annotations

import io
from typing import BinaryIO

from errors import PNGMetadataError, TruncatedPayloadError


class ChunkCursor:
    """Bounds-checked reads over *stream* starting at its current position."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        start = stream.tell()
        self._size = stream.seek(0, io.SEEK_END)
        stream.seek(start, io.SEEK_SET)

    @property
    def size(self) -> int:
        return self._size

    @property
    def remaining(self) -> int:
        """Number of unread bytes between the position and end of stream."""
        return max(0, self._size - self._stream.tell())

    def tell(self) -> int:
        return self._stream.tell()

    def read(self, n: int, error: type[PNGMetadataError] = TruncatedPayloadError) -> bytes:
        """
        Read exactly *n* bytes and advance past them.

        Args:
            n: Number of bytes to read.
            error: Exception type raised when fewer than *n* bytes remain.

        Returns:
            The bytes read.
        """
        if n > self.remaining:
            raise error(
                f"Expected {n} bytes at offset {self.tell()}, "
                f"only {self.remaining} remain"
            )
        data = self._stream.read(n)
        if len(data) != n:
            raise error(f"Short read at offset {self.tell()}: wanted {n}, got {len(data)}")
        return data

    def peek(self, n: int, error: type[PNGMetadataError] = TruncatedPayloadError) -> bytes:
        """Read exactly *n* bytes without moving the position."""
        offset = self.tell()
        try:
            return self.read(n, error)
        finally:
            self._stream.seek(offset, io.SEEK_SET)

    def seek(self, offset: int) -> None:
        """Move to absolute *offset*, which must not lie past end of stream."""
        if offset > self._size:
            raise TruncatedPayloadError(
                f"Cannot seek to offset {offset}, stream is {self._size} bytes"
            )
        self._stream.seek(offset, io.SEEK_SET)
