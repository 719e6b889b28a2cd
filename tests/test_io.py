"""
Tests for the stream reader and writer.
"""

import io
import struct

import pytest

from srsge.errors import ReadSeekError, ShortReadError, ShortWriteError, WriteSeekError
from srsge.io import Reader, Writer


class PartialWriteStream(io.BytesIO):
    """BytesIO whose write() stores only the first byte."""

    def write(self, data) -> int:
        return super().write(bytes(data)[:1])


def test_read_uint16_little_endian() -> None:
    reader = Reader(io.BytesIO(b'\x00\xef\x07'))
    reader.seek(1, 'year')

    assert reader.read_uint16() == 0x07EF
    assert reader.position == 3


def test_read_uint32_little_endian() -> None:
    reader = Reader(io.BytesIO(b'\x00\x00' + struct.pack('<f', 123.5)))
    reader.seek(2)

    assert reader.read_uint32() == 0x42F70000


def test_reader_seek_past_end() -> None:
    reader = Reader(io.BytesIO(bytes(10)))

    with pytest.raises(ReadSeekError) as exc_info:
        reader.seek(11, 'rubles')

    assert exc_info.value.field == 'rubles'
    assert exc_info.value.offset == 11


def test_reader_seek_to_end_then_short_read() -> None:
    """Seeking to exactly the end is allowed, but the read comes up short."""
    reader = Reader(io.BytesIO(bytes(10)))
    reader.seek(8, 'dollars')

    with pytest.raises(ShortReadError) as exc_info:
        reader.read_uint32()

    assert exc_info.value.field == 'dollars'
    assert exc_info.value.offset == 8
    assert 'Read 2 of 4 bytes' in str(exc_info.value)


def test_reader_size_keeps_position() -> None:
    stream = io.BytesIO(bytes(20))
    stream.seek(5)
    reader = Reader(stream)

    assert reader.size == 20
    assert reader.position == 5


def test_write_uint16_keeps_low_bits() -> None:
    stream = io.BytesIO(bytes(4))
    writer = Writer(stream)
    writer.seek(1)
    writer.write_uint16(0x12345)

    assert stream.getvalue() == b'\x00\x45\x23\x00'


def test_writer_never_extends_stream() -> None:
    stream = io.BytesIO(bytes(6))
    writer = Writer(stream)
    writer.seek(4, 'dollars')

    with pytest.raises(ShortWriteError):
        writer.write_uint32(0x3F800000)

    assert stream.getvalue() == bytes(6)


def test_writer_seek_past_end() -> None:
    writer = Writer(io.BytesIO(bytes(6)))

    with pytest.raises(WriteSeekError):
        writer.seek(7)


def test_writer_check_range() -> None:
    writer = Writer(io.BytesIO(bytes(414)))

    writer.check_range(412, 2, 'year')
    with pytest.raises(WriteSeekError) as exc_info:
        writer.check_range(413, 2, 'year')

    assert exc_info.value.field == 'year'


def test_writer_partial_write() -> None:
    """A stream that accepts fewer bytes than given is reported."""
    writer = Writer(PartialWriteStream(bytes(8)))
    writer.seek(0, 'rubles')

    with pytest.raises(ShortWriteError) as exc_info:
        writer.write_uint32(0x40000000)

    assert 'Wrote 1 of 4 bytes' in str(exc_info.value)
