from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
import vdf

from shortcut_bridge.shortcuts.encoder import encode_shortcuts, write_shortcuts
from shortcut_bridge.shortcuts.entry import ShortcutEntry


def _entry(name: str = "Game", exe: str = "C:\\Games\\game.exe",
           start: str = "C:\\Games", options: str = "") -> ShortcutEntry:
    return ShortcutEntry(name=name, executable_path=exe, start_directory=start,
                         launch_options=options)


def test_encode_single_entry_layout() -> None:
    expected = (
        b"\x00shortcuts\x00"
        b"\x000\x00"
        b"\x01appname\x00Game\x00"
        b'\x01exe\x00"C:\\Games\\game.exe"\x00'
        b'\x01StartDir\x00"C:\\Games"\x00'
        b"\x01icon\x00\x00"
        b"\x01ShortcutPath\x00\x00"
        b"\x01LaunchOptions\x00\x00"
        b"\x02hidden\x00\x00\x00\x00\x00"
        b"\x00tags\x00"
        b"\x010\x00Imported\x00"
        b"\x011\x00Non-Steam\x00"
        b"\x08"
        b"\x08"
        b"\x08"
    )
    assert encode_shortcuts([_entry()]) == expected


def test_encode_empty_list() -> None:
    assert encode_shortcuts([]) == b"\x00shortcuts\x00\x08"


def test_encode_regenerates_indexes() -> None:
    data = encode_shortcuts([_entry("A", "C:\\a.exe"), _entry("B", "C:\\b.exe")])
    assert b"\x000\x00\x01appname\x00A\x00" in data
    assert b"\x001\x00\x01appname\x00B\x00" in data


def test_encode_launch_options() -> None:
    data = encode_shortcuts([_entry(options="-windowed --fps 60")])
    assert b"\x01LaunchOptions\x00-windowed --fps 60\x00" in data


def test_drive_letter_paths_are_quoted() -> None:
    data = encode_shortcuts([_entry(exe="D:\\X\\run.exe", start="D:\\X")])
    assert b'\x01exe\x00"D:\\X\\run.exe"\x00' in data
    assert b'\x01StartDir\x00"D:\\X"\x00' in data


def test_relative_paths_are_not_quoted() -> None:
    data = encode_shortcuts([_entry(exe="bin\\run.exe", start="bin")])
    assert b"\x01exe\x00bin\\run.exe\x00" in data
    assert b"\x01StartDir\x00bin\x00" in data
    assert b'"' not in data


def test_symbol_only_title_uses_placeholder() -> None:
    data = encode_shortcuts([_entry(name="\u2122\u00a9")])
    assert b"\x01appname\x00Unknown Game\x00" in data
    assert b"\x01appname\x00\x00" not in data


def test_non_ascii_is_cleaned() -> None:
    data = encode_shortcuts([_entry(name="Caf\u00e9\u2122", exe="C:\\J\u00f6\\a.exe")])
    assert b"\x01appname\x00Cafe\x00" in data
    assert b'"C:\\Jo\\a.exe"' in data
    assert all(b < 0x80 for b in data)


def test_custom_tags() -> None:
    data = encode_shortcuts([_entry()], tags=("Launcher", "Games"))
    assert b"\x00tags\x00\x010\x00Launcher\x00\x011\x00Games\x00\x08" in data


def test_every_entry_is_visible_and_tagged() -> None:
    data = encode_shortcuts([_entry("A", "C:\\a.exe"), _entry("B", "C:\\b.exe")])
    assert data.count(b"\x02hidden\x00\x00\x00\x00\x00") == 2
    assert data.count(b"\x00tags\x00\x010\x00Imported\x00\x011\x00Non-Steam\x00\x08") == 2


def test_missing_executable_raises() -> None:
    with pytest.raises(ValueError):
        encode_shortcuts([_entry(exe="")])


def test_output_parses_with_vdf_library() -> None:
    data = encode_shortcuts([_entry("One", "C:\\1.exe", "C:\\"), _entry("Two", "C:\\2.exe", "C:\\")])
    parsed = vdf.binary_loads(data)
    shortcuts = parsed["shortcuts"]
    assert list(shortcuts) == ["0", "1"]
    assert shortcuts["0"]["appname"] == "One"
    assert shortcuts["1"]["exe"] == '"C:\\2.exe"'
    assert shortcuts["1"]["hidden"] == 0
    assert shortcuts["1"]["tags"] == {"0": "Imported", "1": "Non-Steam"}


def test_write_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "userdata" / "1" / "config" / "shortcuts.vdf"
    assert write_shortcuts([_entry()], str(path)) is True
    assert path.read_bytes() == encode_shortcuts([_entry()])


def test_write_reports_encoding_failure_without_touching_file(tmp_path: Path) -> None:
    path = tmp_path / "shortcuts.vdf"
    path.write_bytes(b"original")
    assert write_shortcuts([_entry(start="")], str(path)) is False
    assert path.read_bytes() == b"original"


def test_write_reports_io_failure(tmp_path: Path) -> None:
    path = tmp_path / "shortcuts.vdf"
    with patch("builtins.open", side_effect=PermissionError("denied")):
        assert write_shortcuts([_entry()], str(path)) is False
