"""shortcuts.vdf decoder.

Parses the binary file into ShortcutEntry objects. Only appname, exe and
StartDir are recovered; every other field, including nested maps such as
tags, is skipped without being interpreted.

Decoding never raises. Malformed or truncated input yields a DecodeResult
holding the entries parsed before the problem, with complete=False.
"""

import logging
from typing import Optional

from .entry import ShortcutEntry, DecodeResult
from .format import (
    MAP_START, MAP_END, STRING, INT32, INT32_SIZE, ROOT_KEY,
    FIELD_APPNAME, FIELD_EXE, FIELD_START_DIR,
)
from .sanitize import unquote_path

logger = logging.getLogger(__name__)


class _Reader:
    """Cursor over an in-memory buffer. Raises ValueError past the end."""

    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.data)

    def byte(self) -> int:
        if self.exhausted:
            raise ValueError(f"unexpected end of data at offset {self.pos}")
        value = self.data[self.pos]
        self.pos += 1
        return value

    def cstring(self) -> str:
        end = self.data.find(b"\x00", self.pos)
        if end < 0:
            raise ValueError(f"unterminated string at offset {self.pos}")
        raw = self.data[self.pos:end]
        self.pos = end + 1
        return raw.decode("utf-8", errors="replace")

    def skip(self, count: int) -> None:
        if self.pos + count > len(self.data):
            raise ValueError(f"unexpected end of data at offset {self.pos}")
        self.pos += count


def _skip_map(reader: _Reader) -> None:
    """Skip a nested map whose MAP_START and key were already consumed.

    Counts depth on MAP_START/MAP_END and steps over string and int fields
    whole, so marker-looking bytes inside values are never miscounted.
    """
    depth = 1
    while depth:
        marker = reader.byte()
        if marker == MAP_END:
            depth -= 1
        elif marker == MAP_START:
            reader.cstring()
            depth += 1
        elif marker == STRING:
            reader.cstring()
            reader.cstring()
        elif marker == INT32:
            reader.cstring()
            reader.skip(INT32_SIZE)
        else:
            raise ValueError(f"unexpected marker 0x{marker:02x} at offset {reader.pos - 1}")


def _read_entry(reader: _Reader) -> ShortcutEntry:
    """Read the fields of one entry up to and including its MAP_END."""
    entry = ShortcutEntry(name="", executable_path="", start_directory="")

    while True:
        marker = reader.byte()
        if marker == MAP_END:
            return entry

        if marker == STRING:
            key = reader.cstring()
            value = reader.cstring()
            # Older Steam builds write "AppName"
            lowered = key.lower()
            if lowered == FIELD_APPNAME:
                entry.name = value
            elif lowered == FIELD_EXE:
                entry.executable_path = unquote_path(value)
            elif lowered == FIELD_START_DIR.lower():
                entry.start_directory = unquote_path(value)
        elif marker == INT32:
            reader.cstring()
            reader.skip(INT32_SIZE)
        elif marker == MAP_START:
            reader.cstring()
            _skip_map(reader)
        else:
            raise ValueError(f"unexpected marker 0x{marker:02x} at offset {reader.pos - 1}")


def _read_header(reader: _Reader) -> None:
    marker = reader.byte()
    if marker != MAP_START:
        raise ValueError(f"expected root map marker, got 0x{marker:02x}")
    key = reader.cstring()
    if key.lower() != ROOT_KEY:
        raise ValueError(f"unexpected root key {key!r}")


def decode_shortcuts(data: Optional[bytes]) -> DecodeResult:
    """Decode a shortcuts.vdf buffer.

    Args:
        data: Raw file contents. Empty or None means no shortcuts.

    Returns:
        DecodeResult with every complete entry found, in file order.
    """
    result = DecodeResult()
    if not data:
        return result

    reader = _Reader(data)
    discarded = 0
    try:
        _read_header(reader)
        while True:
            if reader.exhausted:
                raise ValueError("missing end of shortcuts map")

            marker = reader.byte()
            if marker == MAP_END:
                break
            if marker != MAP_START:
                raise ValueError(f"unexpected marker 0x{marker:02x} at offset {reader.pos - 1}")

            index = reader.cstring()
            entry = _read_entry(reader)
            if entry.is_complete():
                result.entries.append(entry)
            else:
                discarded += 1
                logger.debug(f"[Decoder] Discarding incomplete entry {index!r}")
    except ValueError as e:
        result.complete = False
        result.error = str(e)
        logger.warning(
            f"[Decoder] Stopped early ({e}); recovered {len(result.entries)} shortcuts"
        )

    if discarded:
        logger.info(f"[Decoder] Discarded {discarded} incomplete shortcuts")
    logger.debug(f"[Decoder] Decoded {len(result.entries)} shortcuts from {len(data)} bytes")
    return result
