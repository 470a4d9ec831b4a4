"""Type aliases shared by the encoder, decoder and hook pipeline."""

from collections.abc import Callable
from typing import Any
from typing import Protocol
from typing import runtime_checkable

# Type aliases for domain concepts - recursive definition
FizzValue = (
    str
    | int
    | float
    | bool
    | None
    | dict[str, "FizzValue"]
    | list["FizzValue"]
)
type Position = int

# Object property name, array index, or None at the document root
HookKey = str | int | None
Hook = Callable[[HookKey, Any], Any]

# Every decode primitive returns the value and the index after it
type ParseResult = tuple[Any, Position]


@runtime_checkable
class Serializable(Protocol):
    """
    Values that know how to convert themselves before encoding.

    The encoder calls ``to_json()`` and encodes the result in place of the
    original object.
    """

    def to_json(self) -> Any: ...
