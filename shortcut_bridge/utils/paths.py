"""shortcut-bridge file path constants."""

import os


# shortcut-bridge data directory
DATA_DIR = os.path.expanduser("~/.local/share/shortcut-bridge")

SETTINGS_PATH = os.path.join(DATA_DIR, "settings.json")

# Steam install locations, checked in order
STEAM_PATH_CANDIDATES = [
    "~/.steam/steam",
    "~/.local/share/Steam",
]


def get_shortcuts_path(steam_path: str, user_id: str) -> str:
    """Path of a Steam user's shortcuts.vdf.

    Args:
        steam_path: Steam installation root
        user_id: Account ID (the folder name under userdata/)
    """
    return os.path.join(steam_path, "userdata", user_id, "config", "shortcuts.vdf")
