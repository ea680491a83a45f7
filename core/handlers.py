"""HandlerList: ordered multicast callback list with identity removal."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Iterator


def same_handler(a: Callable, b: Callable) -> bool:
    """True if ``a`` and ``b`` are the same callback.

    Plain functions and lambdas must be the same object. Bound methods are
    created fresh on every attribute access, so they match when they wrap
    the same function on the same receiver object.
    """
    if a is b:
        return True
    if inspect.ismethod(a) and inspect.ismethod(b):
        return a.__self__ is b.__self__ and a.__func__ is b.__func__
    return False


class HandlerList:
    """Append-only multiset of callbacks until explicitly removed.

    The same callback may be added more than once; each ``remove`` drops a
    single occurrence (the earliest).
    """

    def __init__(self) -> None:
        self._handlers: list[Callable] = []

    def add(self, handler: Callable) -> None:
        self._handlers.append(handler)

    def remove(self, handler: Callable) -> bool:
        """Remove the first matching occurrence. Returns False if absent."""
        for index, existing in enumerate(self._handlers):
            if same_handler(existing, handler):
                del self._handlers[index]
                return True
        return False

    def snapshot(self) -> list[Callable]:
        return list(self._handlers)

    def invoke(self, *args: Any) -> None:
        """Call every handler present when invocation starts, in order."""
        for handler in self.snapshot():
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[Callable]:
        return iter(self.snapshot())
