"""Errors raised while reading or writing save header fields.

Every error carries the field name, its offset and (when known) the file path
so the caller can build a message without inspecting the traceback.
"""

from __future__ import annotations

from pathlib import Path


class SaveFieldError(Exception):
    """Base class for all save header IO failures."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        offset: int | None = None,
        path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.offset = offset
        self.path = path

    def __str__(self) -> str:
        parts = [self.message]
        if self.field is not None:
            parts.append(f'field={self.field}')
        if self.offset is not None:
            parts.append(f'offset={self.offset}')
        if self.path is not None:
            parts.append(f'path={self.path}')
        return ', '.join(parts)


# Direction: which operation failed
class ReadError(SaveFieldError):
    """Decoding fields from a save header failed."""


class WriteError(SaveFieldError):
    """Encoding fields into a save header failed."""


# Kind: what went wrong
class OpenError(SaveFieldError):
    """File missing or inaccessible."""


class SeekError(SaveFieldError):
    """Field offset lies beyond the end of the file."""


class ShortReadError(ReadError):
    """Fewer bytes were read than the field width."""


class ShortWriteError(WriteError):
    """Fewer bytes were written than the field width."""


class ReadOpenError(OpenError, ReadError):
    pass


class ReadSeekError(SeekError, ReadError):
    pass


class WriteOpenError(OpenError, WriteError):
    pass


class WriteSeekError(SeekError, WriteError):
    pass
