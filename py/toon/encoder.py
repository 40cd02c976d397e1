"""
TOON Encoder

Walks a normalized TValue tree and writes TOON lines.

Array forms, chosen in this order:
- empty        -> key[0]:
- primitives   -> key[N]: v1,v2,v3                      (inline)
- uniform maps -> key[N,]{f1,f2}: then one row per item (tabular)
- anything else -> key[N]: then one "- " line per item   (list)

Tabular form needs every item to be a map with the same non-empty key set and
only primitive values; column order follows the first item.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Union

from .constants import COLON, LIST_ITEM_MARKER, LIST_ITEM_PREFIX, SPACE
from .normalize import normalize
from .options import EncodeOptions, resolve_encode_options
from .primitives import encode_key, encode_primitive, format_header, join_encoded_values
from .types import TType, TValue, MapEntry
from .writer import LineWriter


class Encoder:
    """Writes TValues into a LineWriter."""

    def __init__(self, opts: EncodeOptions, writer: LineWriter):
        self.opts = opts
        self.writer = writer

    # ============================================================
    # Values
    # ============================================================

    def encode_value(self, v: TValue, depth: int = 0) -> None:
        """Encode a document root (or any value written on its own)."""
        if v.is_primitive():
            self.writer.push(depth, self._primitive(v))
        elif v.type == TType.LIST:
            self.encode_array(None, v.as_list(), depth)
        elif v.type == TType.MAP:
            # An empty map writes no lines at all
            self.encode_object(v.as_map(), depth)

    def encode_object(self, entries: List[MapEntry], depth: int) -> None:
        """Encode object members, one per line, at `depth`."""
        for e in entries:
            self.encode_key_value(e.key, e.value, depth)

    def encode_key_value(self, key: str, v: TValue, depth: int) -> None:
        if v.is_primitive():
            self.writer.push(depth, f"{encode_key(key)}{COLON}{SPACE}{self._primitive(v)}")
        elif v.type == TType.LIST:
            self.encode_array(key, v.as_list(), depth)
        else:
            self.writer.push(depth, f"{encode_key(key)}{COLON}")
            self.encode_object(v.as_map(), depth + 1)

    # ============================================================
    # Arrays
    # ============================================================

    def encode_array(
        self,
        key: Optional[str],
        items: List[TValue],
        depth: int,
        prefix: str = "",
        body_depth: Optional[int] = None,
    ) -> None:
        """
        Encode an array header at `depth` and its body.

        `prefix` is prepended to the header line ("- " for list items) and the
        body goes at `body_depth`, one level below the header by default.
        """
        if body_depth is None:
            body_depth = depth + 1

        if not items:
            self.writer.push(depth, prefix + self._header(0, key))
            return

        if all(item.is_primitive() for item in items):
            header = self._header(len(items), key)
            joined = join_encoded_values(items, self.opts.delimiter)
            self.writer.push(depth, f"{prefix}{header}{SPACE}{joined}")
            return

        fields = tabular_fields(items)
        if fields is not None:
            self.writer.push(depth, prefix + self._header(len(items), key, fields))
            for item in items:
                self.writer.push(body_depth, self._tabular_row(item, fields))
            return

        self.writer.push(depth, prefix + self._header(len(items), key))
        for item in items:
            self.encode_list_item(item, body_depth)

    def _tabular_row(self, item: TValue, fields: List[str]) -> str:
        row = [item.get(f) for f in fields]
        return join_encoded_values(row, self.opts.delimiter)  # type: ignore[arg-type]

    # ============================================================
    # List Items
    # ============================================================

    def encode_list_item(self, item: TValue, depth: int) -> None:
        """Encode one "- " entry of a list array at `depth`."""
        if item.is_primitive():
            self.writer.push(depth, LIST_ITEM_PREFIX + self._primitive(item))
        elif item.type == TType.LIST:
            self.encode_array(None, item.as_list(), depth, prefix=LIST_ITEM_PREFIX)
        else:
            self.encode_object_as_list_item(item.as_map(), depth)

    def encode_object_as_list_item(self, entries: List[MapEntry], depth: int) -> None:
        """
        Encode a map as a list item.

        The first member shares the dash line; the others sit one level deeper,
        where the object's members live. Anything nested under the first member
        therefore goes two levels below the dash.
        """
        if not entries:
            self.writer.push(depth, LIST_ITEM_MARKER)
            return

        first, rest = entries[0], entries[1:]
        v = first.value
        if v.is_primitive():
            self.writer.push(
                depth,
                f"{LIST_ITEM_PREFIX}{encode_key(first.key)}{COLON}{SPACE}{self._primitive(v)}",
            )
        elif v.type == TType.LIST:
            self.encode_array(
                first.key, v.as_list(), depth, prefix=LIST_ITEM_PREFIX, body_depth=depth + 2,
            )
        else:
            self.writer.push(depth, f"{LIST_ITEM_PREFIX}{encode_key(first.key)}{COLON}")
            self.encode_object(v.as_map(), depth + 2)

        for e in rest:
            self.encode_key_value(e.key, e.value, depth + 1)

    # ============================================================
    # Helpers
    # ============================================================

    def _primitive(self, v: TValue) -> str:
        return encode_primitive(v, self.opts.delimiter)

    def _header(self, length: int, key: Optional[str], fields: Optional[List[str]] = None) -> str:
        return format_header(
            length,
            key=key,
            fields=fields,
            delimiter=self.opts.delimiter,
            length_marker=self.opts.length_marker,
        )


def tabular_fields(items: List[TValue]) -> Optional[List[str]]:
    """Return the column names if `items` can be written as a table."""
    if not items:
        return None

    first = items[0]
    if first.type != TType.MAP or len(first) == 0:
        return None
    fields = first.keys()
    field_set = set(fields)

    for item in items:
        if item.type != TType.MAP:
            return None
        entries = item.as_map()
        if {e.key for e in entries} != field_set:
            return None
        if not all(e.value.is_primitive() for e in entries):
            return None

    return fields


# ============================================================
# Public API
# ============================================================

def encode(value: Any, options: Union[EncodeOptions, Dict[str, Any], None] = None) -> str:
    """
    Encode a Python value (or TValue) as TOON text.

    Unsupported values become null; encoding never raises for data.
    """
    opts = resolve_encode_options(options)
    writer = LineWriter(opts.indent)
    Encoder(opts, writer).encode_value(normalize(value), 0)
    return writer.to_string()
