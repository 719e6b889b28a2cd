"""Binary writer that patches fixed-offset fields of an existing stream."""

from __future__ import annotations

import io
import struct
from pathlib import Path
from typing import BinaryIO

from srsge.errors import ShortWriteError, WriteSeekError


class Writer:
    """Little-endian writer for in-place updates.

    The stream is never extended: a write that would run past the current
    end raises before anything is written, so the stream keeps its length.
    """

    def __init__(self, stream: BinaryIO, path: Path | None = None) -> None:
        self._stream = stream
        self._path = path
        self._field: str | None = None

    @property
    def position(self) -> int:
        """Current write position."""
        return self._stream.tell()

    @property
    def size(self) -> int:
        """Current size of the stream."""
        current = self._stream.tell()
        size = self._stream.seek(0, io.SEEK_END)
        self._stream.seek(current)
        return size

    def check_range(self, offset: int, width: int, field: str | None = None) -> None:
        """Ensure [offset, offset + width) lies inside the stream."""
        try:
            size = self.size
        except OSError as e:
            raise WriteSeekError(f'Seek failed: {e}', field, offset, self._path) from e
        if offset < 0 or offset + width > size:
            raise WriteSeekError(f'Range [{offset}, {offset + width}) exceeds size {size}', field, offset, self._path)

    def seek(self, offset: int, field: str | None = None) -> None:
        """Move to an absolute offset from the start of the stream."""
        self._field = field
        try:
            size = self.size
            if offset < 0 or offset > size:
                raise WriteSeekError(f'Offset out of range [0, {size}]', field, offset, self._path)
            self._stream.seek(offset, io.SEEK_SET)
        except OSError as e:
            raise WriteSeekError(f'Seek failed: {e}', field, offset, self._path) from e

    def write_bytes(self, data: bytes) -> None:
        """Overwrite bytes at the current position."""
        offset = self.position
        if offset + len(data) > self.size:
            raise ShortWriteError(f'Write of {len(data)} bytes would extend the file', self._field, offset, self._path)
        try:
            written = self._stream.write(data)
        except OSError as e:
            raise ShortWriteError(f'Write failed: {e}', self._field, offset, self._path) from e
        # Raw streams may report partial writes
        if written is not None and written < len(data):
            raise ShortWriteError(f'Wrote {written} of {len(data)} bytes', self._field, offset, self._path)

    def write_uint16(self, value: int) -> None:
        """Write unsigned 16-bit integer (little-endian), keeping the low 16 bits."""
        self.write_bytes(struct.pack('<H', value & 0xFFFF))

    def write_uint32(self, value: int) -> None:
        """Write unsigned 32-bit integer (little-endian)."""
        self.write_bytes(struct.pack('<I', value & 0xFFFFFFFF))

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as e:
            raise ShortWriteError(f'Flush failed: {e}', self._field, None, self._path) from e
