from .shortcuts_manager import ShortcutsManager
