"""shortcuts.vdf file helpers built on the decoder and encoder"""

import os
import shutil
import logging
from typing import List, Sequence

from .decoder import decode_shortcuts
from .encoder import write_shortcuts
from .entry import ShortcutEntry, DecodeResult
from .format import IMPORT_TAGS

logger = logging.getLogger(__name__)


def backup_path_for(path: str) -> str:
    return path + '.backup'


def load_shortcuts_vdf(path: str) -> DecodeResult:
    """Load and decode a shortcuts.vdf file.

    A missing file is a fresh install and decodes to an empty, complete
    result. An unreadable file decodes to an empty, incomplete one.
    """
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except FileNotFoundError:
        logger.info(f"[ShortcutsVdf] No shortcuts.vdf at {path}, starting empty")
        return DecodeResult()
    except OSError as e:
        logger.error(f"[ShortcutsVdf] Error reading shortcuts.vdf: {e}")
        return DecodeResult(complete=False, error=str(e))

    return decode_shortcuts(data)


def save_shortcuts_vdf(path: str, entries: List[ShortcutEntry],
                       tags: Sequence[str] = IMPORT_TAGS,
                       create_backup: bool = True, validate: bool = True) -> bool:
    """Write entries to shortcuts.vdf.

    Args:
        path: Target file
        entries: Full shortcut list, in order
        tags: Category tags written on every entry
        create_backup: Copy the current file to <path>.backup first
        validate: Re-read the file and compare the shortcut count; on a
            mismatch the backup is restored and False returned

    Returns:
        True if the file was written (and validated, when asked)
    """
    backup_path = backup_path_for(path)
    has_backup = False
    if create_backup and os.path.exists(path):
        try:
            shutil.copyfile(path, backup_path)
            has_backup = True
            logger.info(f"[ShortcutsVdf] Backed up shortcuts.vdf to {backup_path}")
        except OSError as e:
            logger.error(f"[ShortcutsVdf] Could not back up shortcuts.vdf, not writing: {e}")
            return False

    if not write_shortcuts(entries, path, tags):
        return False

    if not validate:
        return True

    validation = load_shortcuts_vdf(path)
    expected_count = len(entries)
    actual_count = len(validation.entries)
    if not validation.complete or actual_count != expected_count:
        logger.error(f"[ShortcutsVdf] Write validation failed! Expected {expected_count}, got {actual_count}")
        if has_backup:
            try:
                shutil.copyfile(backup_path, path)
                logger.info("[ShortcutsVdf] Restored shortcuts.vdf from backup")
            except OSError as e:
                logger.error(f"[ShortcutsVdf] Could not restore backup {backup_path}: {e}")
        return False

    logger.info(f"[ShortcutsVdf] Write validated: {actual_count} shortcuts persisted to disk")
    return True
