# shortcut-bridge
# Imports externally installed applications into Steam's shortcuts.vdf.

from .config import ImportConfig, load_import_config, save_import_config
from .controllers import ShortcutsManager
from .shortcuts import ShortcutEntry, DecodeResult
from .sources import InstallRecord
