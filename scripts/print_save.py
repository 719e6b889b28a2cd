#!/usr/bin/env python3
"""
Print the editable fields of a header.bin together with their raw bytes.

Usage: uv run python scripts/print_save.py <path/to/header.bin>
"""

import argparse
from pathlib import Path

from srsge.codec import decode_path
from srsge.errors import SaveFieldError
from srsge.log import log
from srsge.model.record import FIELDS, RECORD_END


def field_hex(data: bytes) -> dict[str, str]:
    """Hex dump of each field's byte range in a header."""
    return {f.name: data[f.offset : f.offset + f.width].hex(' ') for f in FIELDS}


def main() -> int:
    parser = argparse.ArgumentParser(description='Print the editable fields of a save header')
    parser.add_argument('path', type=Path, help='Path to header.bin')
    args = parser.parse_args()

    try:
        record = decode_path(args.path)
    except SaveFieldError as e:
        log.error(f'Could not read save: {e}')
        return 1

    data = args.path.read_bytes()
    log.info(f'Header size: {len(data)} bytes (fields end at {RECORD_END})')
    raw = field_hex(data)
    for name, value in record.as_dict().items():
        log.info(f'  {name}: {value!r} [{raw[name]}]')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
