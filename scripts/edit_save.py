#!/usr/bin/env python3
"""
Edit the year and treasury of a Soviet Republic save.

Usage:
    uv run python scripts/edit_save.py list [--root DIR]
    uv run python scripts/edit_save.py show <save_dir> [--root DIR]
    uv run python scripts/edit_save.py edit <save_dir> [--root DIR] [--year N] [--rubles X] [--dollars X] [--backup]

<save_dir> is a path, or a save name inside the save folder (--root, or auto-detected).
"""

from srsge.save_editor import main

if __name__ == '__main__':
    raise SystemExit(main())
