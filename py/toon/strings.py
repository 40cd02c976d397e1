"""
TOON String Utilities

Quoting decisions, escaping, and quote-aware scanning of a single line.
"""

from __future__ import annotations
from typing import List

from .constants import (
    BACKSLASH,
    CONTROL_CHARS_RE,
    DOUBLE_QUOTE,
    NUMERIC_RE,
    OCTAL_RE,
    RESERVED_LITERALS,
    STRUCTURAL_CHARS_RE,
    VALID_KEY_RE,
)
from .errors import ToonDecodeError

_SHORT_ESCAPES = {
    '"': '\\"',
    '\\': '\\\\',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}

_UNESCAPES = {
    '"': '"',
    '\\': '\\',
    'n': '\n',
    'r': '\r',
    't': '\t',
}

_HEX_DIGITS = set("0123456789abcdefABCDEF")


# ============================================================
# Quoting Rules
# ============================================================

def is_safe_unquoted(s: str, delimiter: str) -> bool:
    """Check if a string value can be written without quotes."""
    if not s:
        return False
    if s in RESERVED_LITERALS:
        return False
    # Would read back as a number
    if NUMERIC_RE.match(s) or OCTAL_RE.match(s):
        return False
    if s != s.strip():
        return False
    if STRUCTURAL_CHARS_RE.search(s):
        return False
    if CONTROL_CHARS_RE.search(s):
        return False
    # Quotes and backslashes only make sense inside a quoted literal
    if DOUBLE_QUOTE in s or BACKSLASH in s:
        return False
    if delimiter in s:
        return False
    return True


def is_valid_unquoted_key(s: str) -> bool:
    """Check if an object key can be written without quotes."""
    return VALID_KEY_RE.fullmatch(s) is not None


# ============================================================
# Escaping
# ============================================================

def escape_string(s: str) -> str:
    """Escape a string for the inside of a quoted TOON literal."""
    result = []
    for c in s:
        esc = _SHORT_ESCAPES.get(c)
        if esc is not None:
            result.append(esc)
        elif ord(c) < 32 or ord(c) == 127:
            result.append(f"\\u{ord(c):04x}")
        else:
            result.append(c)
    return ''.join(result)


def unescape_string(s: str) -> str:
    """
    Reverse escape_string.

    Raises ToonDecodeError on a trailing backslash, an unknown escape letter,
    or a malformed \\uXXXX sequence.
    """
    if BACKSLASH not in s:
        return s

    result = []
    i = 0
    n = len(s)
    while i < n:
        c = s[i]
        if c != BACKSLASH:
            result.append(c)
            i += 1
            continue

        if i + 1 >= n:
            raise ToonDecodeError("Incomplete escape sequence at end of string")
        esc = s[i + 1]
        if esc in _UNESCAPES:
            result.append(_UNESCAPES[esc])
            i += 2
        elif esc == 'u':
            hex_str = s[i + 2:i + 6]
            if len(hex_str) < 4:
                raise ToonDecodeError("Incomplete unicode escape sequence")
            if not all(h in _HEX_DIGITS for h in hex_str):
                raise ToonDecodeError(f"Invalid unicode escape sequence: \\u{hex_str}")
            result.append(chr(int(hex_str, 16)))
            i += 6
        else:
            raise ToonDecodeError(f"Invalid escape sequence: \\{esc}")
    return ''.join(result)


# ============================================================
# Quote-aware Scanning
# ============================================================

def find_closing_quote(text: str, start: int) -> int:
    """
    Index of the quote closing the string opened at text[start].

    Returns -1 when the string is unterminated.
    """
    i = start + 1
    n = len(text)
    while i < n:
        c = text[i]
        if c == BACKSLASH:
            i += 2
            continue
        if c == DOUBLE_QUOTE:
            return i
        i += 1
    return -1


def find_unquoted(text: str, char: str, start: int = 0) -> int:
    """Index of the first `char` outside quoted strings, or -1."""
    i = start
    n = len(text)
    while i < n:
        c = text[i]
        if c == DOUBLE_QUOTE:
            end = find_closing_quote(text, i)
            if end < 0:
                return -1
            i = end + 1
            continue
        if c == char:
            return i
        i += 1
    return -1


def split_unquoted(text: str, delimiter: str) -> List[str]:
    """Split on `delimiter`, leaving delimiters inside quoted strings alone."""
    parts = []
    start = 0
    while True:
        idx = find_unquoted(text, delimiter, start)
        if idx < 0:
            parts.append(text[start:])
            return parts
        parts.append(text[start:idx])
        start = idx + 1
