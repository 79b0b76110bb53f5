"""Steam shortcuts manager for imported applications.

Reads the current shortcuts.vdf, merges install records into it and writes
the result back with a backup of the previous file.
"""

import os
import logging
from typing import Dict, Any, Optional, Iterable, Union

from ..config import ImportConfig
from ..shortcuts.entry import DecodeResult
from ..shortcuts.merger import merge_entries
from ..shortcuts.vdf import load_shortcuts_vdf, save_shortcuts_vdf, backup_path_for
from ..sources.base import InstallRecord, records_to_entries
from ..utils.steam_user import find_shortcuts_vdf

logger = logging.getLogger(__name__)


class ShortcutsManager:
    """Manages Steam's shortcuts.vdf file for imported applications"""

    def __init__(self, config: Optional[ImportConfig] = None):
        self.config = config or ImportConfig()
        self.shortcuts_path = self.config.shortcuts_path or find_shortcuts_vdf(
            self.config.steam_path, self.config.user_id
        )
        logger.info(f"[ShortcutsManager] Shortcuts path: {self.shortcuts_path}")

    def read_shortcuts(self) -> DecodeResult:
        """Decode the current shortcuts.vdf (empty if there is none)."""
        if not self.shortcuts_path:
            return DecodeResult(complete=False, error="shortcuts.vdf location unknown")
        return load_shortcuts_vdf(self.shortcuts_path)

    def import_records(
        self, records: Iterable[Union[InstallRecord, Dict[str, Any]]]
    ) -> Dict[str, Any]:
        """Add install records to shortcuts.vdf, keeping existing shortcuts.

        Records whose executable path or name already appears in the file
        are skipped. Records missing a required field are skipped too and
        counted as invalid.

        Returns:
            Dict with 'success', 'added', 'skipped', 'invalid', 'total',
            'written', 'path', 'backup_path', 'decode_complete' and, on
            failure, 'error'.
        """
        result: Dict[str, Any] = {
            'success': False,
            'added': 0,
            'skipped': 0,
            'invalid': 0,
            'total': 0,
            'written': False,
            'path': self.shortcuts_path,
            'backup_path': None,
            'decode_complete': False,
        }

        if not self.shortcuts_path:
            logger.error("[ShortcutsManager] No shortcuts.vdf path, cannot import")
            result['error'] = "shortcuts.vdf location unknown"
            return result

        new_entries, invalid = records_to_entries(records)
        result['invalid'] = invalid

        existing = self.read_shortcuts()
        result['decode_complete'] = existing.complete
        if not existing.complete:
            logger.warning(
                f"[ShortcutsManager] shortcuts.vdf only partly readable ({existing.error}); "
                f"keeping the {len(existing.entries)} shortcuts recovered"
            )

        merged = merge_entries(existing.entries, new_entries)
        result['added'] = merged.added
        result['skipped'] = merged.skipped
        result['total'] = len(merged.entries)

        file_exists = os.path.exists(self.shortcuts_path)
        if merged.added == 0 and file_exists:
            logger.info("[ShortcutsManager] Nothing new to import, leaving shortcuts.vdf untouched")
            result['success'] = True
            return result

        saved = save_shortcuts_vdf(
            self.shortcuts_path,
            merged.entries,
            tags=self.config.tags,
            create_backup=self.config.create_backup,
            validate=self.config.validate_write,
        )
        if not saved:
            result['error'] = f"Failed to write {self.shortcuts_path}"
            return result

        if self.config.create_backup and file_exists:
            result['backup_path'] = backup_path_for(self.shortcuts_path)
        result['written'] = True
        result['success'] = True
        logger.info(
            f"[ShortcutsManager] Imported {merged.added} shortcuts "
            f"({merged.skipped} duplicates, {invalid} invalid), {result['total']} total"
        )
        return result
