"""Read and write the fixed-offset fields of a save header.

`decode`/`encode` work on any seekable binary stream; `decode_path` and
`encode_path` open the file, run the stream operation and always release
the handle. Files are patched in place and never truncated or extended.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from srsge.errors import ReadOpenError, WriteOpenError
from srsge.io.reader import Reader
from srsge.io.writer import Writer
from srsge.log import log
from srsge.model.record import FIELDS, SaveRecord


def decode(stream: BinaryIO, path: Path | None = None) -> SaveRecord:
    """Decode a SaveRecord from a seekable stream.

    Args:
        stream: Readable, seekable binary stream; its position is irrelevant
        path: Optional file path, only used for error context

    Returns:
        Freshly built SaveRecord

    Raises:
        ReadError: On the first seek or read that fails
    """
    record = SaveRecord.read(Reader(stream, path))
    log.debug(f'Decoded {record}')
    return record


def encode(stream: BinaryIO, record: SaveRecord, path: Path | None = None) -> None:
    """Write a SaveRecord into a seekable stream in place.

    All field ranges are checked against the stream length first, so a
    stream that is too short is left untouched.

    Raises:
        WriteError: If a field does not fit or a write is short
    """
    writer = Writer(stream, path)
    for layout in FIELDS:
        writer.check_range(layout.offset, layout.width, layout.name)

    record.write(writer)
    writer.flush()
    log.debug(f'Encoded {record}')


def decode_path(path: Path | str) -> SaveRecord:
    """Open `path` read-only and decode its fields.

    Raises:
        ReadOpenError: If the file cannot be opened
        ReadError: If decoding fails
    """
    path = Path(path)
    try:
        stream = path.open('rb')
    except OSError as e:
        raise ReadOpenError(f'Cannot open for reading: {e.strerror or e}', path=path) from e

    with stream:
        return decode(stream, path)


def encode_path(path: Path | str, record: SaveRecord) -> None:
    """Patch the fields of an existing file.

    The file is opened with 'r+b': it must already exist, and its length
    and all other bytes are preserved.

    Raises:
        WriteOpenError: If the file cannot be opened for writing
        WriteError: If encoding fails
    """
    path = Path(path)
    try:
        stream = path.open('r+b')
    except OSError as e:
        raise WriteOpenError(f'Cannot open for writing: {e.strerror or e}', path=path) from e

    with stream:
        encode(stream, record, path)
