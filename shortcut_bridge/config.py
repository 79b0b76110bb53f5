"""Import settings.

Settings live in a small JSON file in the shortcut-bridge data directory.
Nothing here is global: an ImportConfig is loaded once and passed to
ShortcutsManager.
"""

import os
import json
import logging
from dataclasses import dataclass, field, asdict, fields
from typing import Optional, Tuple, Dict, Any

from .shortcuts.format import IMPORT_TAGS
from .utils.paths import SETTINGS_PATH

logger = logging.getLogger(__name__)


@dataclass
class ImportConfig:
    """Where and how to write shortcuts.vdf"""
    shortcuts_path: Optional[str] = None  # None: resolve for the logged-in Steam user
    steam_path: Optional[str] = None  # None: autodetect
    user_id: Optional[str] = None  # None: logged-in user
    create_backup: bool = True
    validate_write: bool = True
    tags: Tuple[str, ...] = field(default_factory=lambda: tuple(IMPORT_TAGS))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImportConfig":
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        unknown = set(data) - known
        if unknown:
            logger.debug(f"[Config] Ignoring unknown settings: {sorted(unknown)}")
        if 'tags' in values:
            values['tags'] = tuple(str(t) for t in values['tags'])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['tags'] = list(self.tags)
        return data


def load_import_config(path: str = SETTINGS_PATH) -> ImportConfig:
    """Load settings, falling back to defaults if the file is missing or bad."""
    if not os.path.exists(path):
        logger.debug(f"[Config] No settings at {path}, using defaults")
        return ImportConfig()

    try:
        with open(path, 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("settings must be a JSON object")
        config = ImportConfig.from_dict(data)
        logger.info(f"[Config] Loaded settings from {path}")
        return config
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"[Config] Error loading settings from {path}: {e}")
        return ImportConfig()


def save_import_config(config: ImportConfig, path: str = SETTINGS_PATH) -> bool:
    """Save settings to path."""
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            json.dump(config.to_dict(), f, indent=2)
        logger.info(f"[Config] Saved settings to {path}")
        return True
    except OSError as e:
        logger.error(f"[Config] Error saving settings: {e}")
        return False
