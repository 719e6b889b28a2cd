"""
Steam library discovery.

Finds where Steam installed a game so the default save folder can be
offered without asking the user. Works with Linux and Windows layouts.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from srsge.log import log

# Quoted string (with backslash escapes) or a brace
_VDF_TOKEN = re.compile(r'"((?:\\.|[^"\\])*)"|([{}])')


def parse_vdf(content: str) -> dict:
    """Parse Valve Data Format (VDF) text into nested dictionaries.

    VDF is the key-value format of libraryfolders.vdf and appmanifest files:
        "key"   "value"
        "key"
        {
            "nested"    "value"
        }

    Braces may appear on their own line or next to a key. Unbalanced
    closing braces are ignored.
    """
    result: dict = {}
    stack = [result]
    pending_key = None

    for match in _VDF_TOKEN.finditer(content):
        text, brace = match.groups()

        if brace == '{':
            if pending_key is None:
                continue
            child: dict = {}
            stack[-1][pending_key] = child
            stack.append(child)
            pending_key = None
        elif brace == '}':
            pending_key = None
            if len(stack) > 1:
                stack.pop()
        elif pending_key is None:
            pending_key = text.replace('\\\\', '\\')
        else:
            stack[-1][pending_key] = text.replace('\\\\', '\\')
            pending_key = None

    return result


@dataclass
class SteamLibrary:
    """A Steam library folder."""

    path: Path

    @property
    def steamapps_path(self) -> Path:
        return self.path / 'steamapps'


@dataclass
class GameInfo:
    """An installed game found through its appmanifest."""

    app_id: int
    name: str
    install_dir: str
    library: SteamLibrary

    @property
    def game_path(self) -> Path:
        """Path to game installation directory."""
        return self.library.steamapps_path / 'common' / self.install_dir

    def __truediv__(self, other: str | Path) -> Path:
        """Join a path relative to the installation directory."""
        return self.game_path / other


def _candidate_roots() -> list[Path]:
    if os.name == 'nt':
        return [
            Path(r'C:\Program Files (x86)\Steam'),
            Path(r'C:\Program Files\Steam'),
        ]
    return [
        Path.home() / '.steam' / 'steam',
        Path.home() / '.local' / 'share' / 'Steam',
    ]


def get_steam_root() -> Path | None:
    """Find the Steam installation root, or None if Steam is not installed."""
    for candidate in _candidate_roots():
        if candidate.exists():
            return candidate.resolve()
    return None


def list_libraries(steam_root: Path | None = None) -> list[SteamLibrary]:
    """List all Steam library folders declared in libraryfolders.vdf.

    The Steam root itself is always the first library.
    """
    if steam_root is None:
        steam_root = get_steam_root()
    if steam_root is None:
        return []

    libraries = [SteamLibrary(path=steam_root)]

    vdf_path = steam_root / 'steamapps' / 'libraryfolders.vdf'
    if not vdf_path.exists():
        return libraries

    try:
        data = parse_vdf(vdf_path.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError) as e:
        log.warning(f'Cannot read {vdf_path}: {e}')
        return libraries

    for key, info in data.get('libraryfolders', {}).items():
        if not key.isdigit() or not isinstance(info, dict):
            continue

        path = info.get('path')
        if not path:
            continue

        library = SteamLibrary(path=Path(path))
        if library.path.resolve() != steam_root.resolve():
            libraries.append(library)

    return libraries


def list_games(steam_root: Path | None = None) -> list[GameInfo]:
    """List all installed games across all Steam libraries."""
    games = []

    for library in list_libraries(steam_root):
        steamapps = library.steamapps_path
        if not steamapps.exists():
            continue

        for manifest_path in sorted(steamapps.glob('appmanifest_*.acf')):
            try:
                app_state = parse_vdf(manifest_path.read_text(encoding='utf-8')).get('AppState', {})
                app_id = app_state.get('appid')
                name = app_state.get('name')
                install_dir = app_state.get('installdir')

                if not all([app_id, name, install_dir]):
                    continue

                games.append(GameInfo(app_id=int(app_id), name=name, install_dir=install_dir, library=library))
            except (ValueError, OSError) as e:
                log.debug(f'Skipping {manifest_path}: {e}')

    return games


def get_game(app_id: int, steam_root: Path | None = None) -> GameInfo:
    """Get game information by Steam app ID.

    Raises:
        LookupError: If game is not found in any Steam library.
    """
    for game in list_games(steam_root):
        if game.app_id == app_id:
            return game
    raise LookupError(f'Game with app_id={app_id} not found in any Steam library')
