"""
Recursive-descent deserializer for delimited text.

Every production takes the source and a cursor position and returns the
parsed value together with the position just past it; the decoder keeps
no cursor of its own.
"""

import logging
import re
from typing import Any
from typing import Final

from ._config import DEFAULT_CONFIG
from ._config import FizzConfig
from ._errors import FizzDecodeError
from ._errors import InvalidCharacterError
from ._errors import InvalidDelimiterError
from ._errors import TrailingDataError
from ._hooks import HookPipeline
from ._profiling import hot_path
from ._types import Hook
from ._types import HookKey
from ._types import ParseResult
from ._types import Position

logger = logging.getLogger(__name__)

# Optional sign, no leading zeros, optional fraction and exponent
_NUMBER_PATTERN: Final = re.compile(
    r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?"
)
_NUMBER_INITIALS: Final = frozenset("0123456789-")
_DIGITS: Final = frozenset("0123456789")
_WHITESPACE: Final = frozenset(" \t\n\r\f\v")

_ESCAPES: Final = {
    '"': '"',
    "\\": "\\",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_LITERALS: Final = (("null", None), ("true", True), ("false", False))


class FizzDecoder:
    """
    Decodes text produced with the same separators and brackets.

    Numbers always decode to ``float``, arrays to ``list`` and objects to
    ``dict``. Not thread-safe while its hooks are being modified.
    """

    def __init__(self, config: FizzConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.hooks = HookPipeline("decoder")

    def add_hook(self, hook: Hook) -> bool:
        return self.hooks.add(hook)

    def remove_hook(self, hook: Hook) -> bool:
        return self.hooks.remove(hook)

    def reset_hooks(self) -> None:
        self.hooks.reset()

    @hot_path("decode")
    def decode(self, text: str) -> Any:
        """Parses ``text`` completely; trailing characters are an error."""
        if not isinstance(text, str):
            raise TypeError(
                f"the document must be str, not {type(text).__name__}"
            )

        try:
            value, end = self._decode(None, text, 0)
            if end != len(text):
                raise TrailingDataError(text, end)
        except FizzDecodeError as e:
            logger.debug("Decoding failed at position %d: %s", e.pos, e.msg)
            raise
        return value

    def _decode(self, key: HookKey, text: str, pos: Position) -> ParseResult:
        """Parses one value and runs it through the reviver hooks."""
        value, pos = self._scan_value(text, pos)
        return self.hooks.apply(key, value), pos

    def _scan_value(self, text: str, pos: Position) -> ParseResult:
        pos = _skip_whitespace(text, pos)
        brackets = self.config.brackets

        if text.startswith(brackets.string.open, pos):
            value, pos = self.scan_string(text, pos)
        elif pos < len(text) and text[pos] in _NUMBER_INITIALS:
            value, pos = self.scan_number(text, pos)
        elif text.startswith(brackets.array.open, pos):
            value, pos = self.scan_array(text, pos)
        elif text.startswith(brackets.object.open, pos):
            value, pos = self.scan_object(text, pos)
        else:
            value, pos = _scan_literal(text, pos)

        return value, _skip_whitespace(text, pos)

    @hot_path("scan_number")
    def scan_number(self, text: str, pos: Position) -> ParseResult:
        match = _NUMBER_PATTERN.match(text, pos)
        if match is None:
            raise InvalidCharacterError(text, pos)

        end = match.end()
        if end < len(text) and text[end] in _DIGITS:
            raise InvalidCharacterError(
                text, end, "Leading zeros not allowed"
            )
        return float(match.group()), end

    @hot_path("scan_string")
    def scan_string(self, text: str, pos: Position) -> ParseResult:
        brackets = self.config.brackets.string
        close = brackets.close
        pos += len(brackets.open)
        chunks: list[str] = []

        while True:
            close_at = text.find(close, pos)
            if close_at == -1:
                raise InvalidDelimiterError(
                    text, len(text), close, "Unterminated string"
                )

            escape_at = text.find("\\", pos, close_at)
            if escape_at == -1:
                chunks.append(text[pos:close_at])
                return "".join(chunks), close_at + len(close)

            chunks.append(text[pos:escape_at])
            char, pos = self._scan_escape(text, escape_at)
            chunks.append(char)

    def _scan_escape(self, text: str, pos: Position) -> tuple[str, Position]:
        """Resolves the escape sequence whose backslash sits at ``pos``."""
        close_initial = self.config.brackets.string.close[0]
        if text.startswith(close_initial, pos + 1):
            return close_initial, pos + 2

        next_char = text[pos + 1 : pos + 2]
        if next_char in _ESCAPES:
            return _ESCAPES[next_char], pos + 2

        # Unknown escapes keep the backslash as an ordinary character
        return "\\", pos + 1

    @hot_path("scan_array")
    def scan_array(self, text: str, pos: Position) -> ParseResult:
        brackets = self.config.brackets.array
        separator = self.config.separators.value

        pos = _skip_whitespace(text, pos + len(brackets.open))
        if text.startswith(brackets.close, pos):
            return [], pos + len(brackets.close)

        values: list[Any] = []
        while True:
            value, pos = self._decode(len(values), text, pos)
            values.append(value)

            if text.startswith(brackets.close, pos):
                return values, pos + len(brackets.close)
            if not text.startswith(separator, pos):
                raise InvalidDelimiterError(text, pos, separator)
            pos += len(separator)

    @hot_path("scan_object")
    def scan_object(self, text: str, pos: Position) -> ParseResult:
        brackets = self.config.brackets.object
        separators = self.config.separators

        pos = _skip_whitespace(text, pos + len(brackets.open))
        if text.startswith(brackets.close, pos):
            return {}, pos + len(brackets.close)

        obj: dict[str, Any] = {}
        while True:
            key, pos = self._scan_key(text, pos)

            if not text.startswith(separators.key, pos):
                raise InvalidDelimiterError(text, pos, separators.key)
            pos += len(separators.key)

            value, pos = self._decode(key, text, pos)
            obj[key] = value

            if text.startswith(brackets.close, pos):
                return obj, pos + len(brackets.close)
            if not text.startswith(separators.value, pos):
                raise InvalidDelimiterError(text, pos, separators.value)
            pos += len(separators.value)

    def _scan_key(self, text: str, pos: Position) -> tuple[str, Position]:
        """Parses an object key; keys are never passed to the hooks."""
        pos = _skip_whitespace(text, pos)
        if not text.startswith(self.config.brackets.string.open, pos):
            raise InvalidCharacterError(
                text, pos, "Expecting property name enclosed in string brackets"
            )
        key, pos = self.scan_string(text, pos)
        return key, _skip_whitespace(text, pos)


def _skip_whitespace(text: str, pos: Position) -> Position:
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _scan_literal(text: str, pos: Position) -> ParseResult:
    for literal, value in _LITERALS:
        if text.startswith(literal, pos):
            return value, pos + len(literal)
    raise InvalidCharacterError(text, pos)
