"""Command line interface for checking JSON documents."""

from __future__ import annotations

import argparse
from collections.abc import Callable
import logging
from pathlib import Path
import sys
from typing import Optional

from .decoder import decode_array, decode_object, decode_utf8, decode_value
from .errors import DecodeError
from .json_types import JSONValue
from .kinds import kind_of

_STDIN_PATH = "-"
_STDIN_LABEL = "<stdin>"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_DECODERS: dict[str, Callable[[str], JSONValue]] = {
    "value": decode_value,
    "object": decode_object,
    "array": decode_array,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="json-text-decoder",
        description="Decode a JSON document and report its top-level kind",
    )
    parser.add_argument("path", help="Path to a JSON document, or '-' for standard input")
    parser.add_argument(
        "--expect",
        choices=sorted(_DECODERS),
        default="value",
        help="Required top-level kind (default: any value)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for diagnostic output",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run CLI and return process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=_LOG_FORMAT)

    label = _STDIN_LABEL if args.path == _STDIN_PATH else args.path
    try:
        raw = _read_payload(args.path)
    except OSError as exc:
        parser.error(f"Failed to read {label}: {exc}")
        return 2

    decode = _DECODERS[args.expect]
    try:
        value = decode(decode_utf8(raw))
    except DecodeError as exc:
        print(f"{label}: {exc}", file=sys.stderr)
        return 1

    print(f"{label}: {kind_of(value).value}")
    return 0


def _read_payload(path: str) -> bytes:
    if path == _STDIN_PATH:
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


if __name__ == "__main__":
    raise SystemExit(main())
