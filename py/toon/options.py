"""
TOON Options

Encode and decode settings. Options are immutable and passed explicitly to
every call; nothing in the codec reads module-level formatting state.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .constants import DEFAULT_DELIMITER, DEFAULT_INDENT, DELIMITERS, DELIMITER_CHARS, PIPE, TAB


@dataclass(frozen=True)
class EncodeOptions:
    """Options for encoding."""
    indent: int = DEFAULT_INDENT
    delimiter: str = DEFAULT_DELIMITER
    length_marker: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0:
            raise ValueError(f"indent must be a non-negative integer, got {self.indent!r}")
        # Accept delimiter names as well as the characters themselves
        delimiter = DELIMITERS.get(self.delimiter, self.delimiter)
        if delimiter not in DELIMITER_CHARS:
            raise ValueError(f"unsupported delimiter: {self.delimiter!r}")
        object.__setattr__(self, "delimiter", delimiter)

        marker = self.length_marker
        if marker is False or marker == "":
            marker = None
        if marker is not None:
            if not isinstance(marker, str) or len(marker) != 1 or marker.isdigit() \
                    or marker in DELIMITER_CHARS or marker in "[]{}:\" \n":
                raise ValueError(f"invalid length marker: {self.length_marker!r}")
        object.__setattr__(self, "length_marker", marker)

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> "EncodeOptions":
        """Build options from a plain dict (snake_case or camelCase keys)."""
        return cls(
            indent=options.get("indent", DEFAULT_INDENT),
            delimiter=options.get("delimiter", DEFAULT_DELIMITER),
            length_marker=options.get("length_marker", options.get("lengthMarker")),
        )


@dataclass(frozen=True)
class DecodeOptions:
    """Options for decoding."""
    indent: int = DEFAULT_INDENT
    strict: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 1:
            raise ValueError(f"indent must be a positive integer, got {self.indent!r}")

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> "DecodeOptions":
        """Build options from a plain dict."""
        return cls(
            indent=options.get("indent", DEFAULT_INDENT),
            strict=bool(options.get("strict", True)),
        )


def default_encode_options() -> EncodeOptions:
    """Two-space indent, comma delimiter, no length marker."""
    return EncodeOptions()


def tab_encode_options() -> EncodeOptions:
    """Tab-delimited rows and inline arrays."""
    return EncodeOptions(delimiter=TAB)


def pipe_encode_options() -> EncodeOptions:
    """Pipe-delimited rows and inline arrays."""
    return EncodeOptions(delimiter=PIPE)


def default_decode_options() -> DecodeOptions:
    """Strict decoding with two-space indent."""
    return DecodeOptions()


def lenient_decode_options() -> DecodeOptions:
    """Decoding that tolerates array length mismatches."""
    return DecodeOptions(strict=False)


def resolve_encode_options(
    options: Union[EncodeOptions, Dict[str, Any], None],
) -> EncodeOptions:
    if options is None:
        return default_encode_options()
    if isinstance(options, EncodeOptions):
        return options
    return EncodeOptions.from_dict(options)


def resolve_decode_options(
    options: Union[DecodeOptions, Dict[str, Any], None],
) -> DecodeOptions:
    if options is None:
        return default_decode_options()
    if isinstance(options, DecodeOptions):
        return options
    return DecodeOptions.from_dict(options)
