"""Tests for Steam storage discovery module."""

from pathlib import Path

import pytest

from srsge import steam_storage
from srsge.steam_storage import GameInfo, SteamLibrary, get_game, get_steam_root, list_games, list_libraries, parse_vdf


def write_manifest(steamapps: Path, app_id: int, name: str, install_dir: str) -> None:
    steamapps.mkdir(parents=True, exist_ok=True)
    (steamapps / f'appmanifest_{app_id}.acf').write_text(
        f'''
"AppState"
{{
    "appid"     "{app_id}"
    "name"      "{name}"
    "installdir"        "{install_dir}"
}}
''',
        encoding='utf-8',
    )


class TestParseVdf:
    """Tests for VDF parser."""

    def test_simple_key_value(self):
        assert parse_vdf('"key"\t\t"value"') == {"key": "value"}

    def test_nested_structure(self):
        content = '''
"root"
{
    "child"     "value"
}
'''
        assert parse_vdf(content) == {"root": {"child": "value"}}

    def test_brace_on_key_line(self):
        assert parse_vdf('"root" { "a" "1" "b" { "c" "2" } }') == {"root": {"a": "1", "b": {"c": "2"}}}

    def test_escaped_windows_path(self):
        content = '"path"  "C:\\\\Program Files (x86)\\\\Steam"'
        assert parse_vdf(content) == {"path": "C:\\Program Files (x86)\\Steam"}

    def test_libraryfolders_structure(self):
        content = '''
"libraryfolders"
{
    "0"
    {
        "path"      "/home/user/.local/share/Steam"
        "apps"
        {
            "784150"        "5207380521"
        }
    }
}
'''
        lib = parse_vdf(content)["libraryfolders"]["0"]
        assert lib["path"] == "/home/user/.local/share/Steam"
        assert lib["apps"]["784150"] == "5207380521"

    def test_empty_content(self):
        assert parse_vdf("") == {}

    def test_empty_value(self):
        assert parse_vdf('"key"       ""') == {"key": ""}

    def test_unbalanced_closing_brace(self):
        assert parse_vdf('}\n"key" "value"') == {"key": "value"}


class TestGameInfo:
    def test_game_path(self, tmp_path: Path):
        game = GameInfo(app_id=784150, name='Workers & Resources: Soviet Republic', install_dir='SovietRepublic', library=SteamLibrary(tmp_path))

        assert game.game_path == tmp_path / 'steamapps' / 'common' / 'SovietRepublic'
        assert game / 'media_soviet' == game.game_path / 'media_soviet'


class TestDiscovery:
    def test_get_steam_root(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(steam_storage, '_candidate_roots', lambda: [tmp_path / 'missing', tmp_path])
        assert get_steam_root() == tmp_path.resolve()

    def test_get_steam_root_missing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(steam_storage, '_candidate_roots', lambda: [tmp_path / 'missing'])
        assert get_steam_root() is None
        assert list_libraries() == []

    def test_list_libraries_includes_extra_folders(self, tmp_path: Path):
        steam_root = tmp_path / 'steam'
        extra = tmp_path / 'games'
        (steam_root / 'steamapps').mkdir(parents=True)
        (steam_root / 'steamapps' / 'libraryfolders.vdf').write_text(
            f'''
"libraryfolders"
{{
    "0" {{ "path" "{steam_root}" }}
    "1" {{ "path" "{extra}" }}
    "contentstatsid" "123"
}}
''',
            encoding='utf-8',
        )

        libraries = list_libraries(steam_root)

        assert [lib.path for lib in libraries] == [steam_root, extra]

    def test_list_games_skips_incomplete_manifest(self, tmp_path: Path):
        steamapps = tmp_path / 'steamapps'
        write_manifest(steamapps, 784150, 'Workers & Resources: Soviet Republic', 'SovietRepublic')
        (steamapps / 'appmanifest_1.acf').write_text('"AppState" { "appid" "1" }', encoding='utf-8')

        games = list_games(tmp_path)

        assert [game.app_id for game in games] == [784150]

    def test_get_game(self, tmp_path: Path):
        write_manifest(tmp_path / 'steamapps', 784150, 'Workers & Resources: Soviet Republic', 'SovietRepublic')

        game = get_game(784150, tmp_path)

        assert game.install_dir == 'SovietRepublic'
        assert game.game_path == tmp_path / 'steamapps' / 'common' / 'SovietRepublic'

    def test_get_game_not_found(self, tmp_path: Path):
        (tmp_path / 'steamapps').mkdir()
        with pytest.raises(LookupError, match='784150'):
            get_game(784150, tmp_path)
