"""Binary reader for fixed-offset fields of a seekable stream."""

from __future__ import annotations

import io
import struct
from pathlib import Path
from typing import BinaryIO

from srsge.errors import ReadSeekError, ShortReadError


class Reader:
    """Little-endian reader over a seekable binary stream.

    Every read starts from an absolute position set with `seek`, so the
    stream's initial cursor does not matter. The field name given to `seek`
    is attached to any error raised until the next seek.
    """

    def __init__(self, stream: BinaryIO, path: Path | None = None) -> None:
        self._stream = stream
        self._path = path
        self._field: str | None = None

    @property
    def position(self) -> int:
        """Current read position."""
        return self._stream.tell()

    @property
    def size(self) -> int:
        """Total size of the stream."""
        current = self._stream.tell()
        size = self._stream.seek(0, io.SEEK_END)
        self._stream.seek(current)
        return size

    def seek(self, offset: int, field: str | None = None) -> None:
        """Move to an absolute offset from the start of the stream."""
        self._field = field
        try:
            size = self.size
            if offset < 0 or offset > size:
                raise ReadSeekError(f'Offset out of range [0, {size}]', field, offset, self._path)
            self._stream.seek(offset, io.SEEK_SET)
        except OSError as e:
            raise ReadSeekError(f'Seek failed: {e}', field, offset, self._path) from e

    def read_bytes(self, count: int) -> bytes:
        """Read exactly `count` bytes."""
        offset = self.position
        try:
            data = self._stream.read(count)
        except OSError as e:
            raise ShortReadError(f'Read failed: {e}', self._field, offset, self._path) from e
        if data is None or len(data) < count:
            got = 0 if data is None else len(data)
            raise ShortReadError(f'Read {got} of {count} bytes', self._field, offset, self._path)
        return data

    def read_uint16(self) -> int:
        """Read unsigned 16-bit integer (little-endian)."""
        return struct.unpack('<H', self.read_bytes(2))[0]

    def read_uint32(self) -> int:
        """Read unsigned 32-bit integer (little-endian)."""
        return struct.unpack('<I', self.read_bytes(4))[0]
