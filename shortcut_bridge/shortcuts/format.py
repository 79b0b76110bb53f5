"""Binary shortcuts.vdf layout constants.

The file is a nested key/value map. Every field starts with a one-byte type
marker followed by a null-terminated key:

    0x00  MAP_START  nested map, fields follow until MAP_END
    0x01  STRING     null-terminated value
    0x02  INT32      4 bytes, little-endian
    0x08  MAP_END    closes the innermost open map
"""

MAP_START = 0x00
STRING = 0x01
INT32 = 0x02
MAP_END = 0x08

NUL = b"\x00"

ROOT_KEY = "shortcuts"
# 00 "shortcuts" 00
ROOT_HEADER = bytes([MAP_START]) + ROOT_KEY.encode("ascii") + NUL

# Field keys, in the order Steam expects them inside an entry
FIELD_APPNAME = "appname"
FIELD_EXE = "exe"
FIELD_START_DIR = "StartDir"
FIELD_ICON = "icon"
FIELD_SHORTCUT_PATH = "ShortcutPath"
FIELD_LAUNCH_OPTIONS = "LaunchOptions"
FIELD_HIDDEN = "hidden"
FIELD_TAGS = "tags"

INT32_SIZE = 4

# Every imported entry is tagged with these two categories
IMPORT_TAGS = ("Imported", "Non-Steam")

PLACEHOLDER_NAME = "Unknown Game"
