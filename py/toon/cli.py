"""TOON command-line interface.

Usage:
    echo '{"a": [1, 2, 3]}' | python3 -m toon encode [--delimiter tab] [--length-marker '#']
    python3 -m toon decode --input data.toon [--lenient] [--json-indent 2]
    python3 -m toon version
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import (
    DecodeOptions,
    EncodeOptions,
    ToonDecodeError,
    __version__,
    decode,
    encode,
)
from .constants import DEFAULT_INDENT, DELIMITERS

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toon",
        description="TOON: convert between JSON and Token-Oriented Object Notation",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    # ── encode ──
    enc_p = sub.add_parser("encode", help="Read JSON, write TOON")
    enc_p.add_argument("--input", "-i", metavar="FILE",
                       help="Read JSON from FILE instead of stdin")
    enc_p.add_argument("--indent", type=int, default=DEFAULT_INDENT,
                       help="Spaces per indentation level (default: 2)")
    enc_p.add_argument("--delimiter", choices=sorted(DELIMITERS), default="comma",
                       help="Delimiter for inline arrays and table rows")
    enc_p.add_argument("--length-marker", metavar="CHAR",
                       help="Prefix array lengths with CHAR, e.g. '#'")

    # ── decode ──
    dec_p = sub.add_parser("decode", help="Read TOON, write JSON")
    dec_p.add_argument("--input", "-i", metavar="FILE",
                       help="Read TOON from FILE instead of stdin")
    dec_p.add_argument("--indent", type=int, default=DEFAULT_INDENT,
                       help="Spaces per indentation level (default: 2)")
    dec_p.add_argument("--lenient", action="store_true",
                       help="Accept array lengths that differ from their headers")
    dec_p.add_argument("--json-indent", type=int, default=None, metavar="N",
                       help="Pretty-print JSON output with N spaces")

    # ── version ──
    sub.add_parser("version", help="Print version and exit")

    return parser


def _read_input(filepath: Optional[str]) -> str:
    """Read text from a file or stdin."""
    if filepath:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()
    if sys.stdin.isatty():
        print("toon: reading from stdin (Ctrl-D to end)...", file=sys.stderr)
    return sys.stdin.read()


def _cmd_encode(args: argparse.Namespace) -> None:
    data = json.loads(_read_input(args.input))
    opts = EncodeOptions(
        indent=args.indent,
        delimiter=DELIMITERS[args.delimiter],
        length_marker=args.length_marker,
    )
    print(encode(data, opts))


def _cmd_decode(args: argparse.Namespace) -> None:
    text = _read_input(args.input)
    opts = DecodeOptions(indent=args.indent, strict=not args.lenient)
    value = decode(text, opts)
    print(json.dumps(value, indent=args.json_indent, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "version":
        print(f"toon {__version__}")
        return

    try:
        if args.command == "encode":
            _cmd_encode(args)
        elif args.command == "decode":
            _cmd_decode(args)
    except ToonDecodeError as e:
        logger.debug("decode failed", exc_info=True)
        print(f"toon: decode error: {e}", file=sys.stderr)
        sys.exit(2)
    except json.JSONDecodeError as e:
        print(f"toon: JSON parse error: {e}", file=sys.stderr)
        sys.exit(2)
    except ValueError as e:
        print(f"toon: invalid option: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
