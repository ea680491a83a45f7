"""EventBus: synchronous publish/subscribe keyed by event payload type.

Each Architecture owns one bus; a separate process-wide bus is available
through ``EventBus.global_bus()`` for listeners that live outside any
architecture.

Dispatch works on a snapshot of the handler list taken when ``send``
starts. A handler that subscribes or unsubscribes during dispatch affects
later sends only.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol, TypeVar

from pydantic import ValidationError

from core.handlers import HandlerList
from core.unregister import EventUnregister

logger = logging.getLogger(__name__)

E = TypeVar("E")


def instantiate(cls: type[E]) -> E:
    """Build ``cls`` with no arguments, failing fast if that is not possible."""
    try:
        return cls()
    except (TypeError, ValidationError) as exc:
        raise TypeError(
            f"{cls.__qualname__} cannot be constructed without arguments: {exc}"
        ) from exc


class EventBus:
    """Type-keyed multicast bus. Exact type match, no subclass fan-out."""

    _global: EventBus | None = None

    def __init__(self) -> None:
        self._registrations: dict[type, HandlerList] = {}

    @classmethod
    def global_bus(cls) -> EventBus:
        """The process-wide bus, created on first use."""
        if cls._global is None:
            cls._global = cls()
        return cls._global

    @classmethod
    def reset_global(cls) -> None:
        """Drop the process-wide bus (for testing)."""
        cls._global = None

    def send(self, event: Any, event_type: Optional[type] = None) -> None:
        """Deliver ``event`` to every handler subscribed to its type.

        Passing a class instead of an instance sends a default-constructed
        instance of that class. ``event_type`` overrides the routing key,
        e.g. to publish a subclass instance to base-class subscribers.
        """
        if isinstance(event, type):
            event_type = event_type or event
            event = instantiate(event)
        key = event_type if event_type is not None else type(event)

        handlers = self._registrations.get(key)
        if handlers is None:
            return
        logger.debug("Dispatching %s to %d handler(s)", key.__qualname__, len(handlers))
        handlers.invoke(event)

    def subscribe(self, event_type: type[E], handler: Callable[[E], None]) -> EventUnregister:
        """Add ``handler`` for ``event_type``; the returned handle removes it."""
        handlers = self._registrations.get(event_type)
        if handlers is None:
            handlers = HandlerList()
            self._registrations[event_type] = handlers
        handlers.add(handler)
        logger.debug("Subscribed handler to %s", event_type.__qualname__)
        return EventUnregister(self, event_type, handler)

    def unsubscribe(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        """Remove one occurrence of ``handler``. No-op if it is not subscribed."""
        handlers = self._registrations.get(event_type)
        if handlers is not None and handlers.remove(handler):
            logger.debug("Unsubscribed handler from %s", event_type.__qualname__)

    def event_types(self) -> list[type]:
        return [key for key, handlers in self._registrations.items() if len(handlers)]

    def handler_count(self, event_type: type) -> int:
        handlers = self._registrations.get(event_type)
        return len(handlers) if handlers is not None else 0


class OnEvent(Protocol[E]):
    """A listener that receives global events through ``on_event``."""

    def on_event(self, e: E) -> None: ...


def register_global_event(listener: OnEvent[E], event_type: type[E]) -> EventUnregister:
    """Subscribe ``listener.on_event`` to ``event_type`` on the global bus."""
    return EventBus.global_bus().subscribe(event_type, listener.on_event)


def unregister_global_event(listener: OnEvent[E], event_type: type[E]) -> None:
    """Remove ``listener.on_event`` from ``event_type`` on the global bus."""
    EventBus.global_bus().unsubscribe(event_type, listener.on_event)
