"""Editor for the year and treasury fields of Soviet Republic save headers."""

from srsge.codec import decode, decode_path, encode, encode_path
from srsge.errors import (
    OpenError,
    ReadError,
    SaveFieldError,
    SeekError,
    ShortReadError,
    ShortWriteError,
    WriteError,
)
from srsge.model.record import SaveRecord

__all__ = [
    'OpenError',
    'ReadError',
    'SaveFieldError',
    'SaveRecord',
    'SeekError',
    'ShortReadError',
    'ShortWriteError',
    'WriteError',
    'decode',
    'decode_path',
    'encode',
    'encode_path',
]
