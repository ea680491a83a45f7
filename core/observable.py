"""ObservableValue: a mutable cell that notifies on change."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from core.handlers import HandlerList
from core.unregister import ObservableUnregister

T = TypeVar("T")


class ObservableValue(Generic[T]):
    """Holds one value and notifies subscribers when it changes.

    Setting a value equal to the current one is silent. Two ``None`` values
    are always considered equal.
    """

    def __init__(self, default: T = None):
        self._value: T = default
        self._on_changed = HandlerList()

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if new_value is None and self._value is None:
            return
        if new_value is not None and new_value == self._value:
            return
        self._value = new_value
        self._on_changed.invoke(new_value)

    def subscribe(self, handler: Callable[[T], None]) -> ObservableUnregister:
        """Call ``handler`` with every future change."""
        self._on_changed.add(handler)
        return ObservableUnregister(self, handler)

    def subscribe_with_replay(self, handler: Callable[[T], None]) -> ObservableUnregister:
        """Call ``handler`` with the current value now, then on every change."""
        handler(self._value)
        return self.subscribe(handler)

    def unsubscribe(self, handler: Callable[[T], None]) -> None:
        self._on_changed.remove(handler)

    @property
    def subscriber_count(self) -> int:
        return len(self._on_changed)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"ObservableValue({self._value!r})"
