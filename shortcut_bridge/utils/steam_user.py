"""
Steam User Detection Utilities

Finds the logged-in Steam user by parsing Steam's loginusers.vdf instead of
relying on directory modification times, so imports land in the right
userdata/<id>/config/shortcuts.vdf.
"""

import os
import logging
from typing import Optional

import vdf

from .paths import STEAM_PATH_CANDIDATES, get_shortcuts_path

logger = logging.getLogger(__name__)


def find_steam_path() -> Optional[str]:
    """Find Steam installation directory"""
    for candidate in STEAM_PATH_CANDIDATES:
        path = os.path.expanduser(candidate)
        if os.path.isdir(os.path.join(path, "userdata")):
            return path

    return None


def get_logged_in_steam_user(steam_path: Optional[str] = None) -> Optional[str]:
    """
    Get the currently logged-in Steam user's account ID (userdata folder name).

    Uses loginusers.vdf with MostRecent flag as primary source,
    falls back to mtime-based detection (excluding user 0).

    Args:
        steam_path: Path to Steam installation (auto-detected if None)

    Returns:
        Account ID string or None
    """
    if steam_path is None:
        steam_path = find_steam_path()

    if not steam_path:
        logger.warning("[SteamUser] Could not find Steam installation path")
        return None

    user_id = _get_user_from_loginusers(steam_path)
    if user_id:
        logger.info(f"[SteamUser] Found logged-in user from loginusers.vdf: {user_id}")
        return user_id

    user_id = _get_user_from_mtime(steam_path)
    if user_id:
        logger.info(f"[SteamUser] Fallback: Using mtime-based user detection: {user_id}")
        return user_id

    logger.error("[SteamUser] Could not detect logged-in Steam user")
    return None


def _get_user_from_loginusers(steam_path: str) -> Optional[str]:
    """
    Get the logged-in user from loginusers.vdf

    The file lists Steam64 IDs; the userdata folder name is the account ID,
    i.e. the low 32 bits.
    """
    loginusers_path = os.path.join(steam_path, "config", "loginusers.vdf")

    if not os.path.exists(loginusers_path):
        logger.debug(f"[SteamUser] loginusers.vdf not found at {loginusers_path}")
        return None

    try:
        with open(loginusers_path, 'r', encoding='utf-8', errors='ignore') as f:
            data = vdf.load(f)
    except (OSError, SyntaxError) as e:
        logger.warning(f"[SteamUser] Error reading loginusers.vdf: {e}")
        return None

    users = data.get('users', {})
    for steam64_id_str, user_info in users.items():
        if not isinstance(user_info, dict) or user_info.get('MostRecent') != '1':
            continue
        try:
            account_id = int(steam64_id_str) & 0xFFFFFFFF
        except ValueError:
            logger.warning(f"[SteamUser] Invalid Steam64ID: {steam64_id_str}")
            continue

        if account_id == 0:
            continue

        userdata_path = os.path.join(steam_path, "userdata", str(account_id))
        if os.path.isdir(userdata_path):
            return str(account_id)
        logger.warning(f"[SteamUser] MostRecent user {account_id} folder doesn't exist")

    logger.debug("[SteamUser] No MostRecent user found in loginusers.vdf")
    return None


def _get_user_from_mtime(steam_path: str) -> Optional[str]:
    """
    Fallback: Get the most recently active user by directory mtime.

    User 0 is a meta-directory and never returned.
    """
    userdata_path = os.path.join(steam_path, "userdata")

    if not os.path.isdir(userdata_path):
        return None

    user_dirs = []
    for d in os.listdir(userdata_path):
        if not d.isdigit() or d == '0':
            continue

        dir_path = os.path.join(userdata_path, d)
        if os.path.isdir(dir_path):
            user_dirs.append((d, os.path.getmtime(dir_path)))

    if not user_dirs:
        return None

    user_dirs.sort(key=lambda x: x[1], reverse=True)
    return user_dirs[0][0]


def find_shortcuts_vdf(steam_path: Optional[str] = None,
                       user_id: Optional[str] = None) -> Optional[str]:
    """Resolve shortcuts.vdf for the given or logged-in user.

    Returns:
        Path to shortcuts.vdf (which may not exist yet), or None if no
        Steam user could be determined
    """
    if steam_path is None:
        steam_path = find_steam_path()
    if not steam_path:
        return None

    if user_id is None:
        user_id = get_logged_in_steam_user(steam_path)
    if not user_id or user_id == '0':
        logger.error(f"[SteamUser] No usable Steam user (got {user_id!r})")
        return None

    return get_shortcuts_path(steam_path, user_id)
