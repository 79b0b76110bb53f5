from .entry import ShortcutEntry, DecodeResult
from .decoder import decode_shortcuts
from .encoder import encode_shortcuts, write_shortcuts
from .merger import merge_entries, MergeResult
from .sanitize import clean_title, clean_value, quote_path, unquote_path
from .vdf import load_shortcuts_vdf, save_shortcuts_vdf, backup_path_for
