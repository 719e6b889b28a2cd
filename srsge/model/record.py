"""Fixed-offset fields of a Soviet Republic save header.

Only three values of `header.bin` are understood; every other byte is
opaque and left untouched:

    388-391  dollars  float32 LE
    392-395  rubles   float32 LE
    412-413  year     uint16  LE
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from srsge.io.reader import Reader
    from srsge.io.writer import Writer


DOLLARS_OFFSET = 388
RUBLES_OFFSET = 392
YEAR_OFFSET = 412


class FieldLayout(NamedTuple):
    name: str
    offset: int
    width: int


# Read and write order
FIELDS = (
    FieldLayout('dollars', DOLLARS_OFFSET, 4),
    FieldLayout('rubles', RUBLES_OFFSET, 4),
    FieldLayout('year', YEAR_OFFSET, 2),
)

# Smallest file that holds every field
RECORD_END = max(f.offset + f.width for f in FIELDS)


def to_float32(value: float) -> float:
    """Round a Python float to the nearest float32.

    Raises:
        ValueError: If a finite value is outside the float32 range.
    """
    return bits_to_float32(float32_bits(value))


def float32_bits(value: float) -> int:
    """Bit pattern of `value` stored as a little-endian float32.

    Raises:
        ValueError: If a finite value is outside the float32 range.
    """
    try:
        return struct.unpack('<I', struct.pack('<f', value))[0]
    except (OverflowError, struct.error) as e:
        raise ValueError(f'{value!r} does not fit in a 32-bit float') from e


def bits_to_float32(bits: int) -> float:
    return struct.unpack('<f', struct.pack('<I', bits))[0]


def _same_float(a: float, b: float) -> bool:
    # Bitwise, so NaNs and signed zeros compare the way they are stored
    return struct.pack('<d', a) == struct.pack('<d', b)


@dataclass(frozen=True)
class SaveRecord:
    """Year and treasury values of one save.

    Each currency keeps the float32 bit pattern it was read with, so fields
    that were not edited are written back unchanged even when they hold
    NaN payloads a Python float cannot carry. Passing a new value with
    stale bits (as `dataclasses.replace` does) recomputes the bits from the
    value. Records compare by stored bits.

    The year is stored as its low 16 bits.
    """

    year: int
    rubles: float = field(compare=False)
    dollars: float = field(compare=False)
    rubles_bits: int | None = field(default=None, repr=False)
    dollars_bits: int | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        try:
            year = int(self.year)
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f'invalid year: {self.year!r}') from e
        object.__setattr__(self, 'year', year)

        for name in ('rubles', 'dollars'):
            value = getattr(self, name)
            bits = getattr(self, f'{name}_bits')
            if bits is None or not _same_float(bits_to_float32(bits), value):
                bits = float32_bits(value)
            object.__setattr__(self, f'{name}_bits', bits)
            object.__setattr__(self, name, bits_to_float32(bits))

    @classmethod
    def from_bits(cls, year: int, rubles_bits: int, dollars_bits: int) -> SaveRecord:
        return cls(
            year=year,
            rubles=bits_to_float32(rubles_bits),
            dollars=bits_to_float32(dollars_bits),
            rubles_bits=rubles_bits,
            dollars_bits=dollars_bits,
        )

    @classmethod
    def read(cls, reader: Reader) -> SaveRecord:
        """Read all three fields; the first failure aborts the read."""
        reader.seek(DOLLARS_OFFSET, 'dollars')
        dollars_bits = reader.read_uint32()
        reader.seek(RUBLES_OFFSET, 'rubles')
        rubles_bits = reader.read_uint32()
        reader.seek(YEAR_OFFSET, 'year')
        year = reader.read_uint16()
        return cls.from_bits(year, rubles_bits=rubles_bits, dollars_bits=dollars_bits)

    def write(self, writer: Writer) -> None:
        """Write all three fields in place."""
        writer.seek(DOLLARS_OFFSET, 'dollars')
        writer.write_uint32(self.dollars_bits)
        writer.seek(RUBLES_OFFSET, 'rubles')
        writer.write_uint32(self.rubles_bits)
        writer.seek(YEAR_OFFSET, 'year')
        writer.write_uint16(self.year)

    def as_dict(self) -> dict[str, int | float]:
        return {'year': self.year, 'rubles': self.rubles, 'dollars': self.dollars}
