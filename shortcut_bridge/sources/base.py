"""
Install records handed to the importer.

Whatever finds installed applications (a launcher database, a scan, a
hand-written list) produces InstallRecord objects; the importer turns the
valid ones into shortcut entries.
"""
from dataclasses import dataclass, asdict
from typing import List, Dict, Any, Optional, Iterable, Tuple, Union
import logging

from ..shortcuts.entry import ShortcutEntry
from ..shortcuts.sanitize import clean_value, quote_path, unquote_path


logger = logging.getLogger(__name__)


def _writable_path(value: Optional[str]) -> bool:
    written = quote_path(clean_value((value or "").strip()))
    return bool(unquote_path(written).strip())


@dataclass
class InstallRecord:
    """One installed application to import"""
    name: str
    executable_path: str
    start_directory: str
    launch_options: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InstallRecord":
        return cls(
            name=data.get('name') or "",
            executable_path=data.get('executable_path') or "",
            start_directory=data.get('start_directory') or "",
            launch_options=data.get('launch_options') or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> Optional[str]:
        """Return a description of what is wrong, or None if importable.

        Paths are checked the way the encoder will write them, so a value
        that cleans down to nothing (only quotes, only non-ASCII) is
        rejected here instead of failing the whole write.
        """
        if not _writable_path(self.executable_path):
            return "missing executable path"
        if not _writable_path(self.start_directory):
            return "missing start directory"
        return None

    def to_entry(self) -> ShortcutEntry:
        return ShortcutEntry(
            name=self.name or "",
            executable_path=self.executable_path.strip(),
            start_directory=self.start_directory.strip(),
            launch_options=self.launch_options or "",
        )


def records_to_entries(
    records: Iterable[Union[InstallRecord, Dict[str, Any]]]
) -> Tuple[List[ShortcutEntry], int]:
    """
    Convert install records to shortcut entries, skipping invalid ones.

    Args:
        records: InstallRecord objects or dicts with the same keys.

    Returns:
        (entries, number of records skipped as invalid)
    """
    entries = []
    invalid = 0
    for record in records:
        if isinstance(record, dict):
            record = InstallRecord.from_dict(record)

        problem = record.validate()
        if problem:
            invalid += 1
            logger.warning(f"[Records] Skipping '{record.name or '<unnamed>'}': {problem}")
            continue

        entries.append(record.to_entry())

    return entries, invalid
