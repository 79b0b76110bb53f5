from __future__ import annotations

from shortcut_bridge.shortcuts.entry import ShortcutEntry
from shortcut_bridge.shortcuts.merger import merge_entries


def _entry(name: str, exe: str) -> ShortcutEntry:
    return ShortcutEntry(name=name, executable_path=exe, start_directory="C:\\G")


EXISTING = [_entry("Game A", "C:\\G\\a.exe"), _entry("Game B", "C:\\G\\b2.exe")]


def test_merge_into_empty() -> None:
    new = [_entry("One", "C:\\1.exe"), _entry("Two", "C:\\2.exe"), _entry("Three", "C:\\3.exe")]
    result = merge_entries([], new)
    assert result.entries == new
    assert result.added == 3
    assert result.skipped == 0


def test_merge_with_itself_adds_nothing() -> None:
    result = merge_entries(EXISTING, list(EXISTING))
    assert result.entries == EXISTING
    assert result.added == 0
    assert result.skipped == len(EXISTING)


def test_same_path_different_case_is_duplicate() -> None:
    result = merge_entries(EXISTING, [_entry("Game A (Remastered)", "c:\\g\\a.exe")])
    assert result.added == 0
    assert result.skipped == 1


def test_same_name_different_path_is_duplicate() -> None:
    result = merge_entries(EXISTING, [_entry("Game A", "C:\\G\\b.exe")])
    assert result.added == 0
    assert result.skipped == 1


def test_name_match_ignores_case_and_symbols() -> None:
    result = merge_entries(EXISTING, [_entry("GAME a\u2122", "C:\\Other\\x.exe")])
    assert result.skipped == 1


def test_path_match_ignores_slash_style_and_quotes() -> None:
    result = merge_entries(EXISTING, [
        _entry("New 1", "C:/G/a.exe"),
        _entry("New 2", '"C:\\G\\b2.exe"'),
    ])
    assert result.added == 0
    assert result.skipped == 2


def test_existing_first_then_new_in_order() -> None:
    new = [_entry("Zeta", "C:\\z.exe"), _entry("Game B", "C:\\dupe.exe"), _entry("Eta", "C:\\e.exe")]
    result = merge_entries(EXISTING, new)
    assert [e.name for e in result.entries] == ["Game A", "Game B", "Zeta", "Eta"]
    assert result.added == 2
    assert result.skipped == 1


def test_existing_entries_are_not_modified() -> None:
    existing = [_entry("Game A", "C:\\G\\a.exe")]
    result = merge_entries(existing, [ShortcutEntry("Game A", "D:\\new.exe", "D:\\", "-new")])
    assert result.entries[0] is existing[0]
    assert result.entries[0].executable_path == "C:\\G\\a.exe"
    assert result.entries[0].launch_options == ""


def test_duplicates_within_new_batch() -> None:
    new = [_entry("Solo", "C:\\s.exe"), _entry("solo", "C:\\other.exe"), _entry("Other", "c:\\S.EXE")]
    result = merge_entries([], new)
    assert [e.name for e in result.entries] == ["Solo"]
    assert result.skipped == 2


def test_nameless_entries_match_on_path_only() -> None:
    new = [_entry("", "C:\\a\\a.exe"), _entry("", "C:\\b\\b.exe"), _entry("\u2122", "C:\\c\\c.exe")]
    result = merge_entries([_entry("Unknown Game", "C:\\u.exe")], new)
    assert result.added == 3
    assert result.skipped == 0


def test_nameless_entry_with_known_path_is_duplicate() -> None:
    result = merge_entries([_entry("", "C:\\a\\a.exe")], [_entry("", "c:\\A\\A.EXE")])
    assert result.added == 0
    assert result.skipped == 1


def test_literal_placeholder_name_still_matches() -> None:
    result = merge_entries([_entry("Unknown Game", "C:\\u.exe")], [_entry("unknown game", "C:\\v.exe")])
    assert result.skipped == 1
