"""
TOON Constants

Literals, structural characters and patterns shared by the encoder and decoder.
"""

from __future__ import annotations
import re

# Structural characters
COLON = ":"
COMMA = ","
TAB = "\t"
PIPE = "|"
SPACE = " "
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"

# List items
LIST_ITEM_MARKER = "-"
LIST_ITEM_PREFIX = "- "

# Literals
NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"
RESERVED_LITERALS = frozenset({NULL_LITERAL, TRUE_LITERAL, FALSE_LITERAL})

# Delimiters
DELIMITERS = {
    "comma": COMMA,
    "tab": TAB,
    "pipe": PIPE,
}
DELIMITER_CHARS = frozenset(DELIMITERS.values())

# Defaults
DEFAULT_DELIMITER = COMMA
DEFAULT_INDENT = 2

# Patterns
NUMERIC_RE = re.compile(r"^-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?$", re.ASCII)
OCTAL_RE = re.compile(r"^0[0-7]+$")
VALID_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")
STRUCTURAL_CHARS_RE = re.compile(r"[\[\]{}:\-]")
CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")

# Bracket segment of a header: optional marker, length, optional delimiter
BRACKET_RE = re.compile(r"^(?P<marker>[^0-9,|\t\]])?(?P<length>\d+)(?P<delim>[,|\t])?$", re.ASCII)
