"""shortcuts.vdf encoder.

Produces the exact byte layout Steam reads for non-Steam shortcuts. Entry
indexes are regenerated from list position on every call.
"""

import os
import logging
import struct
from typing import Iterable, Sequence

from .entry import ShortcutEntry
from .format import (
    MAP_START, MAP_END, STRING, INT32, NUL, ROOT_HEADER, IMPORT_TAGS,
    FIELD_APPNAME, FIELD_EXE, FIELD_START_DIR, FIELD_ICON,
    FIELD_SHORTCUT_PATH, FIELD_LAUNCH_OPTIONS, FIELD_HIDDEN, FIELD_TAGS,
)
from .sanitize import clean_title, clean_value, quote_path

logger = logging.getLogger(__name__)


def _cstring(value: str) -> bytes:
    # Values are cleaned to printable ASCII before they get here
    return value.encode("ascii") + NUL


def _write_string(buf: bytearray, key: str, value: str) -> None:
    buf.append(STRING)
    buf += _cstring(key)
    buf += _cstring(value)


def _write_int32(buf: bytearray, key: str, value: int) -> None:
    buf.append(INT32)
    buf += _cstring(key)
    buf += struct.pack("<i", value)


def _write_tags(buf: bytearray, tags: Sequence[str]) -> None:
    buf.append(MAP_START)
    buf += _cstring(FIELD_TAGS)
    for i, tag in enumerate(tags):
        _write_string(buf, str(i), clean_value(tag))
    buf.append(MAP_END)


def _write_entry(buf: bytearray, index: int, entry: ShortcutEntry, tags: Sequence[str]) -> None:
    exe = quote_path(clean_value(entry.executable_path))
    start_dir = quote_path(clean_value(entry.start_directory))
    if not exe or not start_dir:
        raise ValueError(f"Shortcut '{entry.name}' is missing its executable or start directory")

    buf.append(MAP_START)
    buf += _cstring(str(index))
    _write_string(buf, FIELD_APPNAME, clean_title(entry.name))
    _write_string(buf, FIELD_EXE, exe)
    _write_string(buf, FIELD_START_DIR, start_dir)
    _write_string(buf, FIELD_ICON, "")
    _write_string(buf, FIELD_SHORTCUT_PATH, "")
    _write_string(buf, FIELD_LAUNCH_OPTIONS, clean_value(entry.launch_options))
    # Imported shortcuts are never hidden
    _write_int32(buf, FIELD_HIDDEN, 0)
    _write_tags(buf, tags)
    buf.append(MAP_END)


def encode_shortcuts(entries: Iterable[ShortcutEntry],
                     tags: Sequence[str] = IMPORT_TAGS) -> bytes:
    """Serialize entries into a complete shortcuts.vdf buffer.

    Args:
        entries: Shortcuts in the order they should appear.
        tags: Category tags written on every entry.

    Returns:
        The encoded file contents.

    Raises:
        ValueError: If an entry has no executable or start directory.
    """
    buf = bytearray(ROOT_HEADER)
    count = 0
    for index, entry in enumerate(entries):
        _write_entry(buf, index, entry, tags)
        count += 1
    buf.append(MAP_END)

    logger.debug(f"[Encoder] Encoded {count} shortcuts into {len(buf)} bytes")
    return bytes(buf)


def write_shortcuts(entries: Iterable[ShortcutEntry], path: str,
                    tags: Sequence[str] = IMPORT_TAGS) -> bool:
    """Encode entries and write them to path in one call.

    The whole file is built in memory first, so an encoding problem never
    leaves a half-written file behind. Parent directories are created.

    Returns:
        True on success, False if encoding or writing failed.
    """
    try:
        data = encode_shortcuts(entries, tags)

        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)

        with open(path, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

        logger.info(f"[Encoder] Wrote {len(data)} bytes to {path}")
        return True
    except (OSError, ValueError) as e:
        logger.error(f"[Encoder] Failed to write {path}: {e}")
        return False
