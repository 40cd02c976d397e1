"""
TOON Primitive Encoding

Renders single primitives, object keys and array headers.

Canonical rules:
- null -> "null"
- bool -> "true" / "false"
- int -> decimal
- float -> fixed-point decimal, never exponent notation, no trailing zeros
- string -> bare if safe, otherwise quoted
- key -> bare if an identifier-like name, otherwise quoted
"""

from __future__ import annotations
from decimal import Decimal
from typing import Iterable, List, Optional

from .constants import (
    CLOSE_BRACE,
    CLOSE_BRACKET,
    COLON,
    COMMA,
    DEFAULT_DELIMITER,
    DOUBLE_QUOTE,
    FALSE_LITERAL,
    NULL_LITERAL,
    OPEN_BRACE,
    OPEN_BRACKET,
    TRUE_LITERAL,
)
from .strings import escape_string, is_safe_unquoted, is_valid_unquoted_key
from .types import TType, TValue


def format_float(f: float) -> str:
    """Format a float as plain decimal text."""
    if f == 0:
        return "0"
    if f.is_integer():
        # Exact digits, so the integer read back compares equal to f
        return str(int(f))
    # repr gives the shortest round-trip digits; Decimal expands any exponent
    s = format(Decimal(repr(f)), "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def encode_string_literal(s: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Encode a string value, quoting only when necessary."""
    if is_safe_unquoted(s, delimiter):
        return s
    return f'{DOUBLE_QUOTE}{escape_string(s)}{DOUBLE_QUOTE}'


def encode_primitive(v: TValue, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Encode a primitive TValue."""
    t = v.type

    if t == TType.NULL:
        return NULL_LITERAL
    elif t == TType.BOOL:
        return TRUE_LITERAL if v.as_bool() else FALSE_LITERAL
    elif t == TType.INT:
        return str(v.as_int())
    elif t == TType.FLOAT:
        return format_float(v.as_float())
    elif t == TType.STR:
        return encode_string_literal(v.as_str(), delimiter)

    raise TypeError(f"not a primitive: {t}")


def encode_key(key: str) -> str:
    """Encode an object key or tabular field name."""
    if is_valid_unquoted_key(key):
        return key
    return f'{DOUBLE_QUOTE}{escape_string(key)}{DOUBLE_QUOTE}'


def join_encoded_values(values: Iterable[TValue], delimiter: str) -> str:
    """Encode primitives and join them with the delimiter."""
    return delimiter.join(encode_primitive(v, delimiter) for v in values)


def format_header(
    length: int,
    key: Optional[str] = None,
    fields: Optional[List[str]] = None,
    delimiter: str = DEFAULT_DELIMITER,
    length_marker: Optional[str] = None,
) -> str:
    """
    Format an array header: key[#N<delim>]{fields}:

    The delimiter goes inside the brackets when it is not the default comma,
    and always for tabular headers, so a decoder knows how to split the rows.
    Field names are always comma-joined.
    """
    marker = length_marker or ""
    show_delimiter = fields is not None or delimiter != COMMA
    bracket = f"{OPEN_BRACKET}{marker}{length}{delimiter if show_delimiter else ''}{CLOSE_BRACKET}"

    fields_str = ""
    if fields is not None:
        fields_str = OPEN_BRACE + COMMA.join(encode_key(f) for f in fields) + CLOSE_BRACE

    prefix = encode_key(key) if key is not None else ""
    return f"{prefix}{bracket}{fields_str}{COLON}"
