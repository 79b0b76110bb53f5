"""Shortcut entry model shared by the decoder, encoder and merger."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ShortcutEntry:
    """Represents one non-Steam shortcut in shortcuts.vdf.

    Tags and the hidden flag are not stored per entry: the encoder writes
    the same tags on every shortcut and never hides one.
    """
    name: str
    executable_path: str  # unquoted
    start_directory: str  # unquoted
    launch_options: str = ""

    def is_complete(self) -> bool:
        """True when the entry has everything Steam needs to launch it."""
        return bool(self.name and self.executable_path and self.start_directory)


@dataclass
class DecodeResult:
    """Outcome of decoding a shortcuts.vdf buffer.

    Decoding is best-effort: when the buffer is malformed or truncated,
    ``entries`` holds everything parsed before the problem, ``complete`` is
    False and ``error`` describes what went wrong. Callers that only care
    about the entries can use them either way.
    """
    entries: List[ShortcutEntry] = field(default_factory=list)
    complete: bool = True
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.complete
