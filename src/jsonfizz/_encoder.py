"""
Serializer turning Python values into delimited text.

Every node passes through the encoder's hook pipeline before its type is
inspected, so replacers can rewrite any value, including the root.
"""

import math
import re
from collections.abc import Mapping
from typing import Any
from typing import Final

from ._config import DEFAULT_CONFIG
from ._config import FizzConfig
from ._errors import UnserializableValueError
from ._hooks import HookPipeline
from ._profiling import hot_path
from ._types import Hook
from ._types import HookKey
from ._types import Serializable

# Returned for callables: dropped from objects, written as null in arrays
_OMITTED: Final = object()

# Integral floats below this are written without a fraction or exponent
_MAX_PLAIN_INTEGRAL: Final = 1e21

_CONTROL_ESCAPES: Final = {
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class FizzEncoder:
    """
    Encodes values using the configured separators and brackets.

    Not thread-safe while its hooks are being modified.
    """

    def __init__(self, config: FizzConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.hooks = HookPipeline("encoder")

        # Every occurrence of the close bracket's first character is escaped,
        # so string content never forms a close token, even a partial one
        close_initial = self.config.brackets.string.close[0]
        self._escapes = {
            **_CONTROL_ESCAPES,
            close_initial: "\\" + close_initial,
        }
        self._escape_pattern = re.compile(
            "[" + "".join(re.escape(char) for char in self._escapes) + "]"
        )

    def add_hook(self, hook: Hook) -> bool:
        return self.hooks.add(hook)

    def remove_hook(self, hook: Hook) -> bool:
        return self.hooks.remove(hook)

    def reset_hooks(self) -> None:
        self.hooks.reset()

    @hot_path("encode")
    def encode(self, value: Any) -> str | None:
        """
        Serializes ``value`` to text.

        Returns None when the root value itself is omitted, i.e. it is (or
        a hook turned it into) a callable.
        """
        encoded = self._encode(None, value)
        return None if encoded is _OMITTED else encoded

    def _encode(self, key: HookKey, value: Any) -> Any:
        value = self.hooks.apply(key, value)

        if (
            isinstance(value, Serializable)
            and not isinstance(value, type)
            and callable(value.to_json)
        ):
            return self._encode(key, value.to_json())

        if value is None:
            return "null"
        elif isinstance(value, bool):
            return "true" if value else "false"
        elif isinstance(value, int | float):
            return self.encode_number(value)
        elif isinstance(value, str):
            return self.encode_string(value)
        elif isinstance(value, Mapping):
            return self._encode_object(value)
        elif isinstance(value, list | tuple):
            return self._encode_array(value)
        elif callable(value):
            return _OMITTED
        raise UnserializableValueError(value)

    def encode_number(self, number: int | float) -> str:
        """Writes finite numbers as decimal text and everything else as null."""
        if isinstance(number, int):
            return str(number)
        if not math.isfinite(number):
            return "null"
        if number.is_integer() and abs(number) < _MAX_PLAIN_INTEGRAL:
            return str(int(number))
        return repr(number)

    def encode_string(self, text: str) -> str:
        """Escapes control characters and wraps ``text`` in string brackets."""
        brackets = self.config.brackets.string
        escaped = self._escape_pattern.sub(
            lambda match: self._escapes[match.group()], text
        )
        return brackets.open + escaped + brackets.close

    @hot_path("encode_array")
    def _encode_array(self, array: list[Any] | tuple[Any, ...]) -> str:
        brackets = self.config.brackets.array
        items = []
        for index, item in enumerate(array):
            encoded = self._encode(index, item)
            items.append("null" if encoded is _OMITTED else encoded)
        return (
            brackets.open
            + self.config.separators.value.join(items)
            + brackets.close
        )

    @hot_path("encode_object")
    def _encode_object(self, obj: Mapping[Any, Any]) -> str:
        brackets = self.config.brackets.object
        key_separator = self.config.separators.key
        entries = []
        for raw_key, item in obj.items():
            key = self._stringify_key(raw_key)
            encoded = self._encode(key, item)
            if encoded is _OMITTED:
                continue
            entries.append(self.encode_string(key) + key_separator + encoded)
        return (
            brackets.open
            + self.config.separators.value.join(entries)
            + brackets.close
        )

    def _stringify_key(self, key: Any) -> str:
        if isinstance(key, str):
            return key
        # Only allow basic types to be converted to strings
        if key is None:
            return "null"
        if isinstance(key, bool):
            return "true" if key else "false"
        if isinstance(key, int | float):
            return self.encode_number(key)
        raise UnserializableValueError(key, "Key")
