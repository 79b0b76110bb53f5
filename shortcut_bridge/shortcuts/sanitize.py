"""Title and value cleaning for shortcuts.vdf.

Steam and the tools around it do not agree on how non-ASCII bytes are
stored in shortcuts.vdf, so everything written by the encoder is reduced to
printable ASCII first.
"""

import re
import unicodedata

from .format import PLACEHOLDER_NAME


_MARKS_RE = re.compile(r"[\u2122\u00AE\u00A9\u2120]")  # ™ ® © ℠

_PUNCTUATION = {
    # single quotes
    "\u2018": "'", "\u2019": "'", "\u201A": "'", "\u201B": "'", "\u2032": "'",
    "\u00B4": "'",
    # double quotes
    "\u201C": '"', "\u201D": '"', "\u201E": '"', "\u201F": '"', "\u2033": '"',
    "\u00AB": '"', "\u00BB": '"',
    # dashes
    "\u2010": "-", "\u2011": "-", "\u2012": "-", "\u2013": "-", "\u2014": "-",
    "\u2015": "-", "\u2212": "-",
    "\u2026": "...",
    # bullets
    "\u2022": "*", "\u2023": "*", "\u2043": "*", "\u2219": "*", "\u25CF": "*",
    "\u00D7": "x",
}

# Latin letters that have no canonical decomposition
_LETTERS = {
    "\u00DF": "ss", "\u00C6": "AE", "\u00E6": "ae", "\u0152": "OE", "\u0153": "oe",
    "\u00D8": "O", "\u00F8": "o", "\u0110": "D", "\u0111": "d", "\u0141": "L",
    "\u0142": "l", "\u00D0": "D", "\u00F0": "d", "\u00DE": "Th", "\u00FE": "th",
    "\u0131": "i", "\u0126": "H", "\u0127": "h", "\u0166": "T", "\u0167": "t",
}

_WHITESPACE_RE = re.compile(r"\s+")


def _replace_punctuation(text: str) -> str:
    return "".join(_PUNCTUATION.get(ch, ch) for ch in text)


def _transliterate(text: str) -> str:
    """Map accented Latin letters (U+00C0-U+024F) to their ASCII base."""
    out = []
    for ch in text:
        if ch in _LETTERS:
            out.append(_LETTERS[ch])
        elif "\u00C0" <= ch <= "\u024F":
            base = unicodedata.normalize("NFD", ch)
            out.append("".join(c for c in base if not unicodedata.combining(c)))
        else:
            out.append(ch)
    return "".join(out)


def _printable_ascii(text: str) -> str:
    """Drop everything outside 0x20-0x7E; other whitespace becomes a space."""
    out = []
    for ch in text:
        if " " <= ch <= "~":
            out.append(ch)
        elif ch.isspace():
            out.append(" ")
    return "".join(out)


def clean_value(value: str) -> str:
    """Reduce any string field to printable ASCII.

    Unlike clean_title, inner whitespace is left alone since paths and
    launch options may depend on it.
    """
    if not value:
        return ""
    value = _MARKS_RE.sub("", value)
    value = _replace_punctuation(value)
    value = _transliterate(value)
    return _printable_ascii(value)


def clean_title(title: str) -> str:
    """Clean a display name for shortcuts.vdf.

    Examples:
        "DOOM™ Eternal" -> "DOOM Eternal"
        "Pokémon “Légendes” – Arceus" -> 'Pokemon "Legendes" - Arceus'
        "™©" -> "Unknown Game"
    """
    title = clean_value(title or "")
    title = _WHITESPACE_RE.sub(" ", title).strip()
    return title or PLACEHOLDER_NAME


_WINDOWS_PATH_RE = re.compile(r"^(?:[A-Za-z]:[\\/]|[\\/]{2})")
_ABSOLUTE_PATH_RE = re.compile(r"^(?:[A-Za-z]:\\|\\\\)")


def unquote_path(value: str) -> str:
    """Strip one pair of wrapping double quotes, if present."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def is_absolute_path(value: str) -> bool:
    """True for drive-letter (C:\\...) and UNC (\\\\server\\...) paths."""
    return bool(_ABSOLUTE_PATH_RE.match(value))


def quote_path(value: str) -> str:
    """Prepare an exe/StartDir value for writing.

    Windows-style paths get their forward slashes turned into backslashes,
    then drive-letter and UNC paths are wrapped in double quotes. Anything
    else (relative or POSIX paths) is written as is. Quoting an already
    quoted value does not add a second pair.
    """
    value = unquote_path(value)
    if _WINDOWS_PATH_RE.match(value):
        value = value.replace("/", "\\")
    if is_absolute_path(value):
        return f'"{value}"'
    return value
