"""Ordered replacer/reviver pipeline owned by one encoder or decoder."""

import inspect
import logging
from collections.abc import Iterator
from typing import Any

from ._errors import InvalidHookError
from ._types import Hook
from ._types import HookKey

logger = logging.getLogger(__name__)


class HookPipeline:
    """
    Applies hooks to every key/value pair in insertion order.

    Each hook receives the contextual key and the previous hook's output
    and returns the value to pass on. Hooks are matched by identity; a
    bound method also matches any other bound method of the same function
    on the same instance, since each attribute access creates a new one.
    Custom ``__eq__`` implementations are never consulted.

    The hook list is not synchronized; guard add/remove/reset yourself if
    the owner is shared between threads while encoding or decoding.
    """

    def __init__(self, owner: str = "pipeline") -> None:
        self.owner = owner
        self._hooks: list[Hook] = []

    def add(self, hook: Hook) -> bool:
        """Appends ``hook``; returns False if it was already registered."""
        if not callable(hook):
            raise InvalidHookError(hook)
        if self._index(hook) is not None:
            return False
        self._hooks.append(hook)
        logger.debug("Added %s hook %r", self.owner, hook)
        return True

    def remove(self, hook: Hook) -> bool:
        """Removes ``hook``; returns False if it was not registered."""
        index = self._index(hook)
        if index is None:
            return False
        del self._hooks[index]
        logger.debug("Removed %s hook %r", self.owner, hook)
        return True

    def reset(self) -> None:
        self._hooks.clear()
        logger.debug("Cleared %s hooks", self.owner)

    def _index(self, hook: Hook) -> int | None:
        for index, registered in enumerate(self._hooks):
            if _same_hook(registered, hook):
                return index
        return None

    def apply(self, key: HookKey, value: Any) -> Any:
        for hook in self._hooks:
            value = hook(key, value)
        return value

    def __len__(self) -> int:
        return len(self._hooks)

    def __iter__(self) -> Iterator[Hook]:
        return iter(tuple(self._hooks))

    def __contains__(self, hook: object) -> bool:
        return callable(hook) and self._index(hook) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(owner={self.owner!r}, hooks={len(self)})"


def _same_hook(registered: Hook, hook: Hook) -> bool:
    if registered is hook:
        return True
    return (
        inspect.ismethod(registered)
        and inspect.ismethod(hook)
        and registered.__self__ is hook.__self__
        and registered.__func__ is hook.__func__
    )
