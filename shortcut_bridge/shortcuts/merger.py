"""Merge new shortcuts into an existing shortcut list without duplicates."""

import logging
from dataclasses import dataclass, field
from typing import List, Iterable, Optional, Set

from .entry import ShortcutEntry
from .format import PLACEHOLDER_NAME
from .sanitize import clean_title, clean_value, quote_path, unquote_path

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """Merged shortcut list plus how many candidates were added or skipped"""
    entries: List[ShortcutEntry] = field(default_factory=list)
    added: int = 0
    skipped: int = 0


def _exe_key(path: str) -> str:
    """Executable path as it would be written, lowercased for comparison."""
    return unquote_path(quote_path(clean_value(path))).lower()


def _name_key(name: str) -> Optional[str]:
    """Display name as it would be written, lowercased for comparison.

    None when the name only turns into the placeholder while cleaning;
    such shortcuts are matched by executable path alone.
    """
    cleaned = clean_title(name)
    if cleaned == PLACEHOLDER_NAME and (name or "").strip().lower() != PLACEHOLDER_NAME.lower():
        return None
    return cleaned.lower()


def merge_entries(existing: Iterable[ShortcutEntry],
                  new: Iterable[ShortcutEntry]) -> MergeResult:
    """Append the new shortcuts that are not already present.

    Existing shortcuts come first, untouched and in their original order.
    A new shortcut is a duplicate when its executable path OR its name
    matches a shortcut already in the list, ignoring case. Duplicates are
    dropped, never used to update the existing entry.
    """
    result = MergeResult(entries=list(existing))

    seen_exes: Set[str] = set()
    seen_names: Set[str] = set()
    for entry in result.entries:
        seen_exes.add(_exe_key(entry.executable_path))
        name = _name_key(entry.name)
        if name is not None:
            seen_names.add(name)

    for candidate in new:
        exe = _exe_key(candidate.executable_path)
        name = _name_key(candidate.name)
        if exe in seen_exes or (name is not None and name in seen_names):
            result.skipped += 1
            logger.debug(f"[Merger] Skipping duplicate: {candidate.name} ({candidate.executable_path})")
            continue

        result.entries.append(candidate)
        result.added += 1
        seen_exes.add(exe)
        if name is not None:
            seen_names.add(name)

    logger.info(f"[Merger] {result.added} added, {result.skipped} duplicates skipped, "
                f"{len(result.entries)} total")
    return result
