"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest

from srsge.const import HEADER_FILENAME


HEADER_SIZE = 512


@pytest.fixture()
def save_root(tmp_path: Path) -> Path:
    """Save folder with a single zeroed save called 'mysave'."""
    root = tmp_path / 'save'
    save_dir = root / 'mysave'
    save_dir.mkdir(parents=True)
    (save_dir / HEADER_FILENAME).write_bytes(bytes(HEADER_SIZE))
    return root


@pytest.fixture()
def save_dir(save_root: Path) -> Path:
    return save_root / 'mysave'


@pytest.fixture()
def header_file(save_dir: Path) -> Path:
    """A 512-byte all-zero header.bin."""
    return save_dir / HEADER_FILENAME


@pytest.fixture()
def patterned_header() -> bytes:
    """512 bytes where every byte differs from its neighbours."""
    return bytes((i * 7 + 3) % 256 for i in range(HEADER_SIZE))
