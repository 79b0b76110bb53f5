# Utils package
from .paths import (
    get_shortcuts_path,
    DATA_DIR,
    SETTINGS_PATH,
    STEAM_PATH_CANDIDATES,
)
from .steam_user import (
    find_steam_path,
    find_shortcuts_vdf,
    get_logged_in_steam_user,
)

__all__ = [
    'get_shortcuts_path',
    'DATA_DIR',
    'SETTINGS_PATH',
    'STEAM_PATH_CANDIDATES',
    'find_steam_path',
    'find_shortcuts_vdf',
    'get_logged_in_steam_user',
]
