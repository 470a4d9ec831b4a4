"""
Separator and bracket configuration shared by an encoder/decoder pair.

Configuration objects are immutable and validated at construction, so the
decoder can rely on the first character of a value to pick its production.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from ._errors import InvalidConfigError

logger = logging.getLogger(__name__)

# Characters that already start a number or a literal keyword
_RESERVED_INITIALS = frozenset("0123456789-ntf")
_WHITESPACE = frozenset(" \t\n\r\f\v")
# Letters that follow a backslash in control character escapes
_ESCAPE_LETTERS = frozenset("bfnrt")
# Characters a number can continue with after its first digit
_NUMBER_CONTINUATIONS = frozenset("0123456789.eE")


def _check_token(name: str, token: Any) -> None:
    if not isinstance(token, str):
        raise TypeError(f"{name} must be a string")
    if not token:
        raise InvalidConfigError(f"{name} must not be empty")
    if any(char in _WHITESPACE for char in token):
        raise InvalidConfigError(f"{name} must not contain whitespace")


@dataclass(frozen=True)
class BracketPair:
    """Opening and closing token wrapping a string, array or object."""

    open: str
    close: str

    def __post_init__(self) -> None:
        _check_token("open bracket", self.open)
        _check_token("close bracket", self.close)


@dataclass(frozen=True)
class Separators:
    """Tokens placed between entries and between an object key and value."""

    value: str = ","
    key: str = ":"

    def __post_init__(self) -> None:
        _check_token("value separator", self.value)
        _check_token("key separator", self.key)
        if self.value == self.key:
            raise InvalidConfigError(
                "value and key separators must differ, both are "
                f"{self.value!r}"
            )


@dataclass(frozen=True)
class Brackets:
    """Bracket pairs for strings, arrays and objects."""

    string: BracketPair = field(default_factory=lambda: BracketPair('"', '"'))
    array: BracketPair = field(default_factory=lambda: BracketPair("[", "]"))
    object: BracketPair = field(default_factory=lambda: BracketPair("{", "}"))

    def __post_init__(self) -> None:
        if "\\" in self.string.open or "\\" in self.string.close:
            raise InvalidConfigError(
                "string brackets must not contain a backslash"
            )
        if self.string.close[0] in _ESCAPE_LETTERS:
            raise InvalidConfigError(
                f"string close bracket {self.string.close!r} starts with an "
                "escape letter"
            )

        seen: dict[str, str] = {}
        for kind, pair in (
            ("string", self.string),
            ("array", self.array),
            ("object", self.object),
        ):
            initial = pair.open[0]
            if initial in _RESERVED_INITIALS:
                raise InvalidConfigError(
                    f"{kind} open bracket {pair.open!r} starts like a "
                    "number or literal"
                )
            if initial in seen:
                raise InvalidConfigError(
                    f"{kind} and {seen[initial]} open brackets both start "
                    f"with {initial!r}"
                )
            seen[initial] = kind


@dataclass(frozen=True)
class FizzConfig:
    """
    Complete delimiter configuration for one encoder/decoder pair.

    Defaults reproduce conventional JSON. Use ``from_options`` to build one
    from the nested option mapping accepted by ``JSONFizz``.
    """

    separators: Separators = field(default_factory=Separators)
    brackets: Brackets = field(default_factory=Brackets)

    def __post_init__(self) -> None:
        if not isinstance(self.separators, Separators):
            raise TypeError("separators must be a Separators instance")
        if not isinstance(self.brackets, Brackets):
            raise TypeError("brackets must be a Brackets instance")

        value_sep = self.separators.value
        for kind, pair in (
            ("array", self.brackets.array),
            ("object", self.brackets.object),
        ):
            if value_sep == pair.close:
                raise InvalidConfigError(
                    f"value separator {value_sep!r} is also the {kind} "
                    "close bracket"
                )

        for name, token in (
            ("value separator", value_sep),
            ("array close bracket", self.brackets.array.close),
            ("object close bracket", self.brackets.object.close),
        ):
            if token[0] in _NUMBER_CONTINUATIONS:
                raise InvalidConfigError(
                    f"{name} {token!r} could continue a number"
                )

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any] | None = None
    ) -> "FizzConfig":
        """
        Builds a configuration from nested options.

        Recognized keys are ``separators.value``, ``separators.key`` and
        ``brackets.{string,array,object}.{open,close}``; anything missing
        keeps its default.
        """
        options = options or {}
        _reject_unknown("option", options, {"separators", "brackets"})

        separator_options = options.get("separators") or {}
        _reject_unknown("separator", separator_options, {"value", "key"})
        defaults = Separators()
        separators = Separators(
            value=separator_options.get("value", defaults.value),
            key=separator_options.get("key", defaults.key),
        )

        bracket_options = options.get("brackets") or {}
        _reject_unknown(
            "bracket", bracket_options, {"string", "array", "object"}
        )
        default_brackets = Brackets()
        pairs: dict[str, BracketPair] = {}
        for kind in ("string", "array", "object"):
            default_pair: BracketPair = getattr(default_brackets, kind)
            pair_options = bracket_options.get(kind) or {}
            _reject_unknown(f"{kind} bracket", pair_options, {"open", "close"})
            pairs[kind] = BracketPair(
                open=pair_options.get("open", default_pair.open),
                close=pair_options.get("close", default_pair.close),
            )

        config = cls(separators=separators, brackets=Brackets(**pairs))
        logger.debug("Built configuration from options: %r", config)
        return config


def _reject_unknown(
    kind: str, options: Mapping[str, Any], allowed: set[str]
) -> None:
    if not isinstance(options, Mapping):
        raise TypeError(f"{kind} options must be a mapping")
    unknown = sorted(set(options) - allowed)
    if unknown:
        raise InvalidConfigError(
            f"Unknown {kind} name(s): {', '.join(map(str, unknown))}"
        )


DEFAULT_CONFIG = FizzConfig()

# Delimiters that survive inside URL query strings unescaped
FIZZ_CONFIG = FizzConfig(
    separators=Separators(value=";", key="_"),
    brackets=Brackets(
        string=BracketPair("`", "`"),
        array=BracketPair("<", ">"),
        object=BracketPair("(", ")"),
    ),
)
