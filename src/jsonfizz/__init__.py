"""
JSON-style serialization with configurable separators and brackets.

Provides a symmetric encoder and decoder whose delimiters are chosen by the
caller, plus replacer/reviver hook pipelines that see every key/value pair
during encoding and decoding.
"""

import logging
from collections.abc import Iterable
from collections.abc import Mapping
from typing import IO
from typing import Any

from ._config import DEFAULT_CONFIG
from ._config import FIZZ_CONFIG
from ._config import BracketPair
from ._config import Brackets
from ._config import FizzConfig
from ._config import Separators
from ._decoder import FizzDecoder
from ._encoder import FizzEncoder
from ._errors import FizzDecodeError
from ._errors import FizzError
from ._errors import InvalidCharacterError
from ._errors import InvalidConfigError
from ._errors import InvalidDelimiterError
from ._errors import InvalidHookError
from ._errors import TrailingDataError
from ._errors import UnserializableValueError
from ._hooks import HookPipeline
from ._profiling import PROFILE_HOT_PATHS
from ._profiling import HotPathStats
from ._profiling import clear_hot_path_stats
from ._profiling import get_hot_path_stats
from ._types import FizzValue
from ._types import Hook
from ._types import HookKey
from ._types import Serializable

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

ConfigLike = FizzConfig | Mapping[str, Any] | None


def _resolve_config(config: ConfigLike) -> FizzConfig:
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, FizzConfig):
        return config
    return FizzConfig.from_options(config)


class JSONFizz:
    """
    One configuration wired into one encoder and one decoder.

    ``config`` may be a ``FizzConfig``, a nested option mapping such as
    ``{"separators": {"value": ";"}}``, or None for JSON delimiters. The
    encoder's replacer hooks and the decoder's reviver hooks are separate
    pipelines and never see each other's registrations.
    """

    def __init__(self, config: ConfigLike = None) -> None:
        self.config = _resolve_config(config)
        self.encoder = FizzEncoder(self.config)
        self.decoder = FizzDecoder(self.config)
        logger.debug("Created JSONFizz with %r", self.config)

    def stringify(self, value: Any) -> str | None:
        return self.encoder.encode(value)

    def parse(self, text: str) -> Any:
        return self.decoder.decode(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"


def dumps(
    obj: Any, *, config: ConfigLike = None, hooks: Iterable[Hook] = ()
) -> str | None:
    """
    Serializes ``obj`` with a one-off encoder.

    ``hooks`` are registered as replacers in the order given.
    """
    encoder = FizzEncoder(_resolve_config(config))
    for hook in hooks:
        encoder.add_hook(hook)
    return encoder.encode(obj)


def loads(
    s: str, *, config: ConfigLike = None, hooks: Iterable[Hook] = ()
) -> Any:
    """
    Parses ``s`` with a one-off decoder.

    ``hooks`` are registered as revivers in the order given.
    """
    decoder = FizzDecoder(_resolve_config(config))
    for hook in hooks:
        decoder.add_hook(hook)
    return decoder.decode(s)


def dump(obj: Any, fp: IO[str], **kwargs: Any) -> None:
    """Serializes ``obj`` and writes the text to a file-like object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    encoded = dumps(obj, **kwargs)
    if encoded is not None:
        fp.write(encoded)


def load(fp: IO[str], **kwargs: Any) -> Any:
    """Parses the whole content of a file-like object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


__all__ = [
    "DEFAULT_CONFIG",
    "FIZZ_CONFIG",
    "PROFILE_HOT_PATHS",
    "BracketPair",
    "Brackets",
    "FizzConfig",
    "FizzDecodeError",
    "FizzDecoder",
    "FizzEncoder",
    "FizzError",
    "FizzValue",
    "Hook",
    "HookKey",
    "HookPipeline",
    "HotPathStats",
    "InvalidCharacterError",
    "InvalidConfigError",
    "InvalidDelimiterError",
    "InvalidHookError",
    "JSONFizz",
    "Separators",
    "Serializable",
    "TrailingDataError",
    "UnserializableValueError",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "get_hot_path_stats",
    "load",
    "loads",
]
