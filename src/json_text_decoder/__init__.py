"""Decode JSON text into native values with typed errors."""

from __future__ import annotations

from .cli import main
from .decoder import decode_array, decode_object, decode_utf8, decode_value, decode_value_bytes
from .errors import DecodeError, DecodeErrorKind, ParseFailure, ShapeMismatch
from .kinds import JSONKind, kind_of

__all__ = [
    "DecodeError",
    "DecodeErrorKind",
    "JSONKind",
    "ParseFailure",
    "ShapeMismatch",
    "decode_array",
    "decode_object",
    "decode_utf8",
    "decode_value",
    "decode_value_bytes",
    "kind_of",
    "main",
]
