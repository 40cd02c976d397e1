"""
TOON Decoder

Reads TOON text back into TValue trees.

Input is first scanned into depth-tagged lines, then decoded by recursive
descent. Every object or array body lives exactly one level below the line
that opens it and ends at the first shallower line; a LineCursor walks the
lines so no body has to track indices by hand.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .constants import (
    BRACKET_RE,
    CLOSE_BRACE,
    CLOSE_BRACKET,
    COLON,
    COMMA,
    DOUBLE_QUOTE,
    FALSE_LITERAL,
    LIST_ITEM_MARKER,
    LIST_ITEM_PREFIX,
    NULL_LITERAL,
    NUMERIC_RE,
    OPEN_BRACE,
    OPEN_BRACKET,
    TRUE_LITERAL,
)
from .errors import ToonDecodeError
from .normalize import to_python
from .options import DecodeOptions, resolve_decode_options
from .strings import find_closing_quote, find_unquoted, split_unquoted, unescape_string
from .types import TValue

logger = logging.getLogger(__name__)

_LINE_WHITESPACE = " \t\r"


# ============================================================
# Line Scanning
# ============================================================

@dataclass
class ParsedLine:
    """A non-blank source line."""
    depth: int
    content: str
    line_no: int


def scan_lines(text: str, indent: int) -> List[ParsedLine]:
    """Split text into non-blank lines tagged with their nesting depth."""
    lines = []
    for line_no, raw in enumerate(text.split("\n"), start=1):
        content = raw.strip(_LINE_WHITESPACE)
        if not content:
            continue
        spaces = len(raw) - len(raw.lstrip(" "))
        lines.append(ParsedLine(spaces // indent, content, line_no))
    return lines


class LineCursor:
    """Forward-only cursor over scanned lines."""

    def __init__(self, lines: List[ParsedLine]):
        self._lines = lines
        self._pos = 0

    def peek(self) -> Optional[ParsedLine]:
        if self._pos >= len(self._lines):
            return None
        return self._lines[self._pos]

    def advance(self) -> ParsedLine:
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def at_depth_boundary(self, depth: int) -> bool:
        """True when the next line is shallower than `depth` or input is done."""
        line = self.peek()
        return line is None or line.depth < depth


# ============================================================
# Token Parsing
# ============================================================

@dataclass
class ArrayHeader:
    """Parsed form of key[#N<delim>]{fields}: tail"""
    key: Optional[str]
    length: int
    delimiter: str
    fields: Optional[List[str]]
    inline: Optional[str]


def parse_key(text: str) -> str:
    """Parse a bare or quoted key."""
    text = text.strip(_LINE_WHITESPACE)
    if text.startswith(DOUBLE_QUOTE):
        end = find_closing_quote(text, 0)
        if end < 0:
            raise ToonDecodeError("Unterminated quoted key")
        if end != len(text) - 1:
            raise ToonDecodeError(f"Unexpected characters after quoted key: {text[end + 1:]!r}")
        return unescape_string(text[1:end])
    return text


def parse_primitive(token: str) -> TValue:
    """Parse a single value token."""
    token = token.strip(_LINE_WHITESPACE)

    if token.startswith(DOUBLE_QUOTE):
        end = find_closing_quote(token, 0)
        if end < 0:
            raise ToonDecodeError("Unterminated string: missing closing quote")
        if end != len(token) - 1:
            raise ToonDecodeError(f"Unexpected characters after closing quote: {token[end + 1:]!r}")
        return TValue.str_(unescape_string(token[1:end]))

    if token == TRUE_LITERAL:
        return TValue.bool_(True)
    if token == FALSE_LITERAL:
        return TValue.bool_(False)
    if token == NULL_LITERAL:
        return TValue.null()

    if NUMERIC_RE.match(token):
        if "." in token or "e" in token or "E" in token:
            return TValue.float_(float(token))
        return TValue.int_(int(token))

    return TValue.str_(token)


def parse_header(content: str) -> Optional[ArrayHeader]:
    """
    Parse an array header line, or return None if `content` is not one.

    Recognizes [N]:, key[N]:, key[N|]: a|b, key[#N,]{a,b}: and quoted keys.
    """
    n = len(content)
    key: Optional[str] = None

    if content.startswith(DOUBLE_QUOTE):
        end = find_closing_quote(content, 0)
        if end < 0:
            return None
        i = end + 1
        if i >= n or content[i] != OPEN_BRACKET:
            return None
        key = unescape_string(content[1:end])
    else:
        i = content.find(OPEN_BRACKET)
        if i < 0:
            return None
        colon = content.find(COLON)
        if colon < 0 or colon < i:
            return None
        key = content[:i].strip(_LINE_WHITESPACE) or None

    close = content.find(CLOSE_BRACKET, i)
    if close < 0:
        return None
    m = BRACKET_RE.match(content[i + 1:close])
    if m is None:
        return None
    length = int(m.group("length"))
    delimiter = m.group("delim") or COMMA
    i = close + 1

    fields: Optional[List[str]] = None
    if i < n and content[i] == OPEN_BRACE:
        end = find_unquoted(content, CLOSE_BRACE, i + 1)
        if end < 0:
            return None
        fields = _split_fields(content[i + 1:end], delimiter)
        i = end + 1

    if i >= n or content[i] != COLON:
        return None

    tail = content[i + 1:].strip(" ")
    return ArrayHeader(key, length, delimiter, fields, tail or None)


def _split_fields(text: str, delimiter: str) -> List[str]:
    parts = split_unquoted(text, COMMA)
    # Some writers join field names with the row delimiter instead
    if len(parts) == 1 and delimiter != COMMA:
        parts = split_unquoted(text, delimiter)
    return [parse_key(p) for p in parts]


# ============================================================
# Decoder
# ============================================================

class Decoder:
    """Recursive descent decoder over depth-tagged lines."""

    def __init__(self, opts: DecodeOptions):
        self.opts = opts

    def decode(self, text: str) -> TValue:
        lines = scan_lines(text, self.opts.indent)
        if not lines:
            return TValue.list_()

        cursor = LineCursor(lines)
        first = lines[0]

        header = self._header(first.content, first)
        if header is not None and header.key is None:
            cursor.advance()
            result = self._array_body(cursor, header, first, first.depth + 1)
            self._check_trailing(cursor)
            return result

        if len(lines) == 1 and find_unquoted(first.content, COLON) < 0:
            return self._primitive(first.content, first)

        root = TValue.map_()
        self._object_body(cursor, 0, root)
        self._check_trailing(cursor)
        return root

    # ------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------

    def _object_body(self, cursor: LineCursor, depth: int, obj: TValue) -> None:
        """Read members at `depth` into `obj` until a shallower line."""
        while not cursor.at_depth_boundary(depth):
            line = cursor.advance()
            if line.depth > depth:
                self._skip(line, "unexpected indentation")
                continue
            self._member(cursor, line, line.content, depth, obj)

    def _member(
        self,
        cursor: LineCursor,
        line: ParsedLine,
        content: str,
        depth: int,
        obj: TValue,
        header: Optional[ArrayHeader] = None,
    ) -> None:
        """Decode one `key: value`, `key:` or `key[N]...:` member living at `depth`."""
        if header is None:
            header = self._header(content, line)
        if header is not None:
            if header.key is None:
                raise ToonDecodeError("Array header inside an object needs a key", line.line_no)
            obj.set(header.key, self._array_body(cursor, header, line, depth + 1))
            return

        colon = find_unquoted(content, COLON)
        if colon < 0:
            raise ToonDecodeError("Missing colon after key", line.line_no)
        key = self._key(content[:colon], line)
        rest = content[colon + 1:].strip(_LINE_WHITESPACE)

        if rest:
            obj.set(key, self._primitive(rest, line))
        else:
            child = TValue.map_()
            self._object_body(cursor, depth + 1, child)
            obj.set(key, child)

    # ------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------

    def _array_body(
        self, cursor: LineCursor, header: ArrayHeader, line: ParsedLine, depth: int,
    ) -> TValue:
        """Decode the values announced by `header`; block bodies sit at `depth`."""
        if header.inline is not None:
            tokens = split_unquoted(header.inline, header.delimiter)
            items = TValue.list_()
            for tok in tokens:
                items.append(self._primitive(tok, line))
            self._check_length(header, len(items), line)
            return items

        if header.fields is not None:
            return self._tabular_body(cursor, header, line, depth)

        return self._list_body(cursor, header, line, depth)

    def _tabular_body(
        self, cursor: LineCursor, header: ArrayHeader, line: ParsedLine, depth: int,
    ) -> TValue:
        fields = header.fields or []
        rows = TValue.list_()
        while not cursor.at_depth_boundary(depth):
            row_line = cursor.advance()
            if row_line.depth > depth:
                self._skip(row_line, "unexpected indentation in table")
                continue

            cells = split_unquoted(row_line.content, header.delimiter)
            if len(cells) != len(fields):
                if self.opts.strict:
                    raise ToonDecodeError(
                        f"Expected {len(fields)} values in row, got {len(cells)}",
                        row_line.line_no,
                    )
                logger.debug(
                    "line %d: row has %d values for %d fields",
                    row_line.line_no, len(cells), len(fields),
                )

            row = TValue.map_()
            for idx, f in enumerate(fields):
                if idx < len(cells):
                    row.set(f, self._primitive(cells[idx], row_line))
                else:
                    row.set(f, TValue.null())
            rows.append(row)

        self._check_length(header, len(rows), line)
        return rows

    def _list_body(
        self, cursor: LineCursor, header: ArrayHeader, line: ParsedLine, depth: int,
    ) -> TValue:
        items = TValue.list_()
        while not cursor.at_depth_boundary(depth):
            item_line = cursor.advance()
            if item_line.depth > depth:
                self._skip(item_line, "unexpected indentation in list")
                continue

            content = item_line.content
            if content == LIST_ITEM_MARKER:
                obj = TValue.map_()
                self._object_body(cursor, depth + 1, obj)
                items.append(obj)
            elif content.startswith(LIST_ITEM_PREFIX):
                rest = content[len(LIST_ITEM_PREFIX):].strip(_LINE_WHITESPACE)
                items.append(self._list_item(cursor, item_line, rest, depth))
            elif self.opts.strict:
                raise ToonDecodeError("Expected list item starting with '- '", item_line.line_no)
            else:
                self._skip(item_line, "not a list item")

        self._check_length(header, len(items), line)
        return items

    def _list_item(self, cursor: LineCursor, line: ParsedLine, rest: str, depth: int) -> TValue:
        """
        Decode the text after "- " on a line at `depth`.

        An object item keeps its members at depth + 1; its first member is
        written on the dash line, so whatever nests under it sits at depth + 2.
        """
        header = self._header(rest, line)
        if header is not None and header.key is None:
            return self._array_body(cursor, header, line, depth + 1)

        if header is not None or find_unquoted(rest, COLON) >= 0:
            obj = TValue.map_()
            self._member(cursor, line, rest, depth + 1, obj, header)
            self._object_body(cursor, depth + 1, obj)
            return obj

        return self._primitive(rest, line)

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    def _check_length(self, header: ArrayHeader, actual: int, line: ParsedLine) -> None:
        if actual == header.length:
            return
        if self.opts.strict:
            raise ToonDecodeError(
                f"Array length mismatch: expected {header.length} items, got {actual}",
                line.line_no,
            )
        logger.debug(
            "line %d: header declares %d items, found %d",
            line.line_no, header.length, actual,
        )

    def _check_trailing(self, cursor: LineCursor) -> None:
        while not cursor.at_end():
            line = cursor.advance()
            if self.opts.strict:
                raise ToonDecodeError("Unexpected content after document root", line.line_no)
            self._skip(line, "after document root")

    def _skip(self, line: ParsedLine, reason: str) -> None:
        logger.debug("line %d: skipped (%s): %r", line.line_no, reason, line.content)

    def _header(self, content: str, line: ParsedLine) -> Optional[ArrayHeader]:
        try:
            return parse_header(content)
        except ToonDecodeError as e:
            raise e.with_line(line.line_no) from None

    def _key(self, text: str, line: ParsedLine) -> str:
        try:
            return parse_key(text)
        except ToonDecodeError as e:
            raise e.with_line(line.line_no) from None

    def _primitive(self, token: str, line: ParsedLine) -> TValue:
        try:
            return parse_primitive(token)
        except ToonDecodeError as e:
            raise e.with_line(line.line_no) from None


# ============================================================
# Public API
# ============================================================

def parse(text: str, options: Union[DecodeOptions, Dict[str, Any], None] = None) -> TValue:
    """Decode TOON text into a TValue tree."""
    opts = resolve_decode_options(options)
    return Decoder(opts).decode(text)


def decode(text: str, options: Union[DecodeOptions, Dict[str, Any], None] = None) -> Any:
    """
    Decode TOON text into plain Python values.

    Raises ToonDecodeError on malformed input.
    """
    return to_python(parse(text, options))
