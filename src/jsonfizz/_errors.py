"""
Error taxonomy for configuration, hook management, encoding and decoding.

Every error is raised synchronously and aborts the whole call; nothing in
this package retries or returns partial results.
"""

from typing import Any

from ._types import Position


class FizzError(Exception):
    """Base class for every error raised by jsonfizz."""


class InvalidHookError(FizzError, TypeError):
    """Raised when a non-callable is registered as a hook."""

    def __init__(self, hook: Any) -> None:
        self.hook = hook
        super().__init__(f"Not a valid hook function: {hook!r}")


class InvalidConfigError(FizzError, ValueError):
    """Raised when separators or brackets would make decoding ambiguous."""


class UnserializableValueError(FizzError, TypeError):
    """Raised when the encoder meets a value it has no representation for."""

    def __init__(self, value: Any, what: str = "Object") -> None:
        self.value = value
        super().__init__(
            f"{what} of type {type(value).__name__} is not serializable"
        )


class FizzDecodeError(FizzError, ValueError):
    """
    Handles parsing failures with precise position and context information.

    Error state containing position, line/column numbers, and the source
    document to help users identify and fix syntax issues.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    @property
    def position(self) -> Position:
        return self.pos

    @property
    def details(self) -> dict[str, Any]:
        return {"position": self.pos}


class InvalidCharacterError(FizzDecodeError):
    """No grammar production matches the character at ``position``."""

    def __init__(self, doc: str, pos: Position, msg: str | None = None) -> None:
        self.character = doc[pos] if pos < len(doc) else ""
        if msg is None:
            msg = (
                f"Invalid character {self.character!r}"
                if self.character
                else "Unexpected end of input"
            )
        super().__init__(msg, doc, pos)

    @property
    def details(self) -> dict[str, Any]:
        return {"position": self.pos, "character": self.character}


class InvalidDelimiterError(FizzDecodeError):
    """A specific separator or bracket was expected at ``position``."""

    def __init__(
        self, doc: str, pos: Position, expected: str, msg: str | None = None
    ) -> None:
        self.expected = expected
        super().__init__(msg or f"Expecting {expected!r} delimiter", doc, pos)

    @property
    def details(self) -> dict[str, Any]:
        return {"position": self.pos, "expected": self.expected}


class TrailingDataError(FizzDecodeError):
    """Characters remain after a complete top-level value."""

    def __init__(self, doc: str, pos: Position) -> None:
        super().__init__("Extra data", doc, pos)
