"""Error taxonomy for JSON text decoding."""

from __future__ import annotations

from enum import Enum

from .kinds import JSONKind


class DecodeErrorKind(Enum):
    """Discriminates the two ways a decode can fail."""

    PARSE_FAILURE = "parse_failure"
    SHAPE_MISMATCH = "shape_mismatch"


class DecodeError(RuntimeError):
    """Raised when JSON text cannot be decoded into the requested value."""

    kind: DecodeErrorKind

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""
        return str(self)


class ParseFailure(DecodeError):
    """Raised when text is not valid JSON or cannot be encoded as UTF-8."""

    kind = DecodeErrorKind.PARSE_FAILURE

    def __init__(self, message: str, *, text: str) -> None:
        super().__init__(message)
        self.text = text


class ShapeMismatch(DecodeError):
    """Raised when valid JSON has the wrong top-level kind."""

    kind = DecodeErrorKind.SHAPE_MISMATCH

    def __init__(self, *, expected: JSONKind, actual: JSONKind) -> None:
        super().__init__(f"Expected a top-level JSON {expected.value}, got {actual.value}")
        self.expected = expected
        self.actual = actual
