"""Decode JSON text into native values with top-level shape checks."""

from __future__ import annotations

import json
import logging
from typing import NoReturn

from .errors import ParseFailure, ShapeMismatch
from .json_types import JSONArray, JSONObject, JSONValue
from .kinds import JSONKind, kind_of

_LOGGER = logging.getLogger(__name__)


def decode_value(text: str) -> JSONValue:
    """Parse JSON text into a value of any top-level kind.

    Args:
        text (str): JSON text. Scalars and ``null`` are accepted at the top level.

    Returns:
        JSONValue: The parsed value.

    Raises:
        ParseFailure: If the text cannot be encoded as UTF-8 or is not valid JSON.
    """
    try:
        payload = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        _LOGGER.debug("Rejected JSON text at offset %d: not encodable as UTF-8", exc.start)
        raise ParseFailure(f"Could not encode JSON text as UTF-8:\n{text}", text=text) from exc

    try:
        # Parse text, not bytes, so the parser never guesses an encoding.
        return json.loads(payload.decode("utf-8-sig"), parse_constant=_reject_constant)
    except ValueError as exc:
        _LOGGER.debug("Rejected JSON text of length %d: %s", len(text), exc)
        raise ParseFailure(f"Invalid JSON text: {exc}", text=text) from exc
    except RecursionError as exc:
        _LOGGER.debug("Rejected JSON text of length %d: nesting is too deep", len(text))
        raise ParseFailure("Invalid JSON text: nesting is too deep", text=text) from exc


def decode_object(text: str) -> JSONObject:
    """Parse JSON text that must hold an object at the top level."""
    value = decode_value(text)
    match value:
        case dict():
            return value
    _shape_mismatch(JSONKind.OBJECT, value)


def decode_array(text: str) -> JSONArray:
    """Parse JSON text that must hold an array at the top level."""
    value = decode_value(text)
    match value:
        case list():
            return value
    _shape_mismatch(JSONKind.ARRAY, value)


def decode_utf8(raw: bytes) -> str:
    """Decode a UTF-8 byte payload into text, dropping a leading byte order mark.

    Raises:
        ParseFailure: If the payload is not valid UTF-8.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        text = raw.decode("utf-8", errors="replace")
        _LOGGER.debug("Rejected JSON payload at byte %d: not valid UTF-8", exc.start)
        raise ParseFailure(
            f"Could not decode JSON payload as UTF-8 at byte {exc.start}", text=text
        ) from exc


def decode_value_bytes(raw: bytes) -> JSONValue:
    """Parse a UTF-8 JSON payload into a value of any top-level kind."""
    return decode_value(decode_utf8(raw))


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Non-standard JSON constant {name!r}")


def _shape_mismatch(expected: JSONKind, value: JSONValue) -> NoReturn:
    actual = kind_of(value)
    _LOGGER.debug("Rejected JSON %s where %s was required", actual.value, expected.value)
    raise ShapeMismatch(expected=expected, actual=actual)
