"""Unregister handles: one-shot tokens that reverse a subscription.

Every handle is safe to call repeatedly: the first call does the work and
drops the captured state, later calls do nothing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol

if TYPE_CHECKING:
    from core.event_bus import EventBus
    from core.observable import ObservableValue

logger = logging.getLogger(__name__)


class Unregister(Protocol):
    def unregister(self) -> None: ...


class EventUnregister:
    """Removes one handler from one EventBus event type."""

    def __init__(self, bus: EventBus, event_type: type, handler: Callable[[Any], None]):
        self._bus: Optional[EventBus] = bus
        self._event_type: Optional[type] = event_type
        self._handler: Optional[Callable[[Any], None]] = handler

    def unregister(self) -> None:
        if self._bus is None:
            return
        self._bus.unsubscribe(self._event_type, self._handler)
        self._bus = None
        self._event_type = None
        self._handler = None


class ObservableUnregister:
    """Removes one change handler from an ObservableValue."""

    def __init__(self, observable: ObservableValue, handler: Callable[[Any], None]):
        self._observable: Optional[ObservableValue] = observable
        self._handler: Optional[Callable[[Any], None]] = handler

    def unregister(self) -> None:
        if self._observable is None:
            return
        self._observable.unsubscribe(self._handler)
        self._observable = None
        self._handler = None


class CustomUnregister:
    """Wraps an arbitrary teardown callable as a one-shot handle."""

    def __init__(self, on_unregister: Callable[[], None]):
        self._on_unregister: Optional[Callable[[], None]] = on_unregister

    def unregister(self) -> None:
        if self._on_unregister is None:
            return
        callback = self._on_unregister
        self._on_unregister = None
        callback()


class UnregisterList:
    """Mixin for objects that collect handles and release them together."""

    @property
    def unregister_list(self) -> list[Unregister]:
        handles = self.__dict__.get("_unregister_list")
        if handles is None:
            handles = []
            self.__dict__["_unregister_list"] = handles
        return handles


def add_to_unregister_list(handle: Unregister, owner: UnregisterList) -> Unregister:
    """Append ``handle`` to ``owner``'s list and return it for chaining."""
    owner.unregister_list.append(handle)
    return handle


def unregister_all(owner: UnregisterList) -> None:
    """Invoke every collected handle once, then empty the list."""
    handles = owner.unregister_list
    for handle in list(handles):
        handle.unregister()
    handles.clear()


class UnregisterTrigger:
    """Unordered set of handles released when the owning object goes away.

    Hosts call ``fire()`` from their own teardown path (view disposal,
    window close). The trigger is attached to the owner on first use via
    ``UnregisterTrigger.of(owner)``.
    """

    _ATTR = "_unregister_trigger"

    def __init__(self) -> None:
        self._handles: set[Unregister] = set()

    @classmethod
    def of(cls, owner: Any) -> UnregisterTrigger:
        """Get the trigger attached to ``owner``, creating it if needed."""
        trigger = getattr(owner, cls._ATTR, None)
        if trigger is None:
            trigger = cls()
            setattr(owner, cls._ATTR, trigger)
        return trigger

    def add(self, handle: Unregister) -> None:
        self._handles.add(handle)

    def fire(self) -> None:
        if self._handles:
            logger.debug("Releasing %d handle(s)", len(self._handles))
        for handle in list(self._handles):
            handle.unregister()
        self._handles.clear()

    def __len__(self) -> int:
        return len(self._handles)


def unregister_when_disposed(handle: Unregister, owner: Any) -> Unregister:
    """Tie ``handle`` to ``owner``'s trigger and return it."""
    UnregisterTrigger.of(owner).add(handle)
    return handle
