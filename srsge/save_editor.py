"""Save header editing for Workers & Resources: Soviet Republic.

Loading returns a SaveRecord and saving takes one back explicitly; nothing
is remembered between the two steps.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import shutil
from pathlib import Path

from srsge.codec import decode_path, encode_path
from srsge.const import (
    BACKUP_SUFFIX,
    DEFAULT_WINDOWS_SAVE_ROOT,
    HEADER_FILENAME,
    SAVE_SUBDIR,
    SOVIET_REPUBLIC_APP_ID,
    YEAR_MAX,
    YEAR_MIN,
)
from srsge.errors import SaveFieldError, WriteError
from srsge.log import log
from srsge.model.record import SaveRecord, to_float32
from srsge.steam_storage import get_game


def header_path(save_dir: Path) -> Path:
    """Path of the header file inside a save directory."""
    return Path(save_dir) / HEADER_FILENAME


def load_save(save_dir: Path) -> SaveRecord:
    """Read the editable fields of a save.

    Raises:
        ReadError: If the header cannot be opened or decoded
    """
    path = header_path(save_dir)
    log.debug(f'Loading {path}')
    return decode_path(path)


def apply_changes(
    record: SaveRecord,
    year: int | None = None,
    rubles: float | None = None,
    dollars: float | None = None,
) -> SaveRecord:
    """Return a copy of `record` with the given fields replaced."""
    changes = {}
    if year is not None:
        changes['year'] = year
    if rubles is not None:
        changes['rubles'] = rubles
    if dollars is not None:
        changes['dollars'] = dollars
    return dataclasses.replace(record, **changes)


def backup_header(save_dir: Path) -> Path | None:
    """Copy header.bin to header.bin.bak unless a backup already exists.

    Returns:
        The backup path if one was created, None if it was already there.
    """
    path = header_path(save_dir)
    backup = path.with_name(path.name + BACKUP_SUFFIX)
    if backup.exists():
        log.info(f'Backup already exists: {backup} (leaving as-is)')
        return None

    try:
        shutil.copy2(path, backup)
    except OSError as e:
        raise WriteError(f'Cannot create backup: {e.strerror or e}', path=backup) from e
    log.info(f'Backup created: {backup}')
    return backup


def save_changes(save_dir: Path, record: SaveRecord, backup: bool = False) -> None:
    """Write `record` into the save's header in place.

    Raises:
        WriteError: If the header cannot be opened or written
    """
    if backup:
        backup_header(save_dir)
    path = header_path(save_dir)
    log.debug(f'Saving {path}')
    encode_path(path, record)


def list_saves(save_root: Path) -> list[Path]:
    """List save directories (those holding a header file) under `save_root`."""
    save_root = Path(save_root)
    if not save_root.is_dir():
        return []
    return sorted(p for p in save_root.iterdir() if p.is_dir() and header_path(p).is_file())


def default_save_root(steam_root: Path | None = None) -> Path | None:
    """Locate the game's save folder.

    Tries the Steam installation first, then the default Windows path.
    """
    try:
        game = get_game(SOVIET_REPUBLIC_APP_ID, steam_root)
    except LookupError as e:
        log.debug(str(e))
    else:
        save_root = game / SAVE_SUBDIR
        if save_root.is_dir():
            return save_root

    if DEFAULT_WINDOWS_SAVE_ROOT.is_dir():
        return DEFAULT_WINDOWS_SAVE_ROOT
    return None


def resolve_save_dir(name: Path, save_root: Path | None) -> Path | None:
    """Resolve a save directory given as a path or as a name under the save root."""
    if name.is_dir():
        return name
    if save_root is not None and (save_root / name).is_dir():
        return save_root / name
    return None


def _year(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid year: {text!r}')
    if not YEAR_MIN <= value <= YEAR_MAX:
        raise argparse.ArgumentTypeError(f'year must be between {YEAR_MIN} and {YEAR_MAX}')
    return value


def _float32(text: str) -> float:
    try:
        return to_float32(float(text))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _log_record(record: SaveRecord) -> None:
    log.info(f'  Year:    {record.year}')
    log.info(f'  Rubles:  {record.rubles:.4f}')
    log.info(f'  Dollars: {record.dollars:.4f}')


def _add_root_option(parser: argparse.ArgumentParser, default) -> None:
    parser.add_argument(
        '--root',
        '-r',
        type=Path,
        default=default,
        help='Save folder holding one directory per save (default: auto-detected)',
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='srsge',
        description='Edit the year and treasury of a Workers & Resources: Soviet Republic save',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    _add_root_option(parser, None)

    # --root may also follow the subcommand; SUPPRESS keeps a value given before it
    common = argparse.ArgumentParser(add_help=False)
    _add_root_option(common, argparse.SUPPRESS)

    commands = parser.add_subparsers(dest='command', required=True)

    commands.add_parser('list', parents=[common], help='List saves in the save folder')

    show = commands.add_parser('show', parents=[common], help='Print the editable fields of a save')
    show.add_argument('save_dir', type=Path, help='Save directory, or its name in the save folder')

    edit = commands.add_parser('edit', parents=[common], help='Change fields of a save in place')
    edit.add_argument('save_dir', type=Path, help='Save directory, or its name in the save folder')
    edit.add_argument('--year', type=_year, help=f'New year ({YEAR_MIN}-{YEAR_MAX})')
    edit.add_argument('--rubles', type=_float32, help='New ruble balance')
    edit.add_argument('--dollars', type=_float32, help='New dollar balance')
    edit.add_argument('--backup', '-b', action='store_true', help=f'Keep a copy as {HEADER_FILENAME}{BACKUP_SUFFIX}')

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log.setLevel(logging.DEBUG)

    save_root = args.root if args.root is not None else default_save_root()

    if args.command == 'list':
        if save_root is None:
            log.error('Save folder not found, pass --root')
            return 1
        saves = list_saves(save_root)
        if not saves:
            log.warning(f'No saves found in {save_root}')
            return 0
        log.info(f'Saves in {save_root} ({len(saves)}):')
        for save_dir in saves:
            log.info(f'  {save_dir.name}')
        return 0

    if args.command == 'edit' and args.year is None and args.rubles is None and args.dollars is None:
        parser.error('nothing to change: give --year, --rubles or --dollars')

    save_dir = resolve_save_dir(args.save_dir, save_root)
    if save_dir is None:
        log.error(f'Save directory not found: {args.save_dir}')
        return 1

    try:
        record = load_save(save_dir)
    except SaveFieldError as e:
        log.error(f'Could not read save: {e}')
        return 1

    if args.command == 'show':
        log.info(f'Save {save_dir.name}:')
        _log_record(record)
        return 0

    updated = apply_changes(record, year=args.year, rubles=args.rubles, dollars=args.dollars)
    try:
        save_changes(save_dir, updated, backup=args.backup)
    except SaveFieldError as e:
        log.error(f'Could not write save: {e}')
        return 1

    log.info(f'Updated save {save_dir.name}:')
    _log_record(updated)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
