"""Top-level kind classification for decoded JSON values."""

from __future__ import annotations

from enum import Enum

from .json_types import JSONValue


class JSONKind(Enum):
    """Outermost structural type of a JSON value."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def kind_of(value: JSONValue) -> JSONKind:
    """Return the top-level kind of a decoded JSON value.

    Args:
        value (JSONValue): A value as produced by the decoder.

    Returns:
        JSONKind: The kind of the outermost value.

    Raises:
        TypeError: If ``value`` is not part of the JSON data model.
    """
    # bool must be matched before int.
    match value:
        case None:
            return JSONKind.NULL
        case bool():
            return JSONKind.BOOLEAN
        case int() | float():
            return JSONKind.NUMBER
        case str():
            return JSONKind.STRING
        case list():
            return JSONKind.ARRAY
        case dict():
            return JSONKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")
