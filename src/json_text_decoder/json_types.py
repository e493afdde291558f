"""JSON-compatible typing aliases shared across the project."""

from __future__ import annotations

from typing import Union

type JSONPrimitive = Union[str, int, float, bool, None]
type JSONValue = Union[JSONPrimitive, list[JSONValue], dict[str, JSONValue]]
type JSONObject = dict[str, JSONValue]
type JSONArray = list[JSONValue]
