"""Architecture: the mediator every participant talks through.

An Architecture owns one TypeRegistry (systems, models, utilities), one
EventBus and the deferred-init queues used while it is being set up.
Participants never hold references to each other; they look each other up
and exchange events through the architecture they belong to.

Lifecycle:
    UNINITIALIZED -> INITIALIZING -> INITIALIZED

``ensure_initialized()`` runs the subclass ``init()`` hook, then any
register-patch callbacks, then initializes queued models and queued
systems in registration order. Registrations made after that point are
initialized immediately.

Subclasses can be constructed directly and passed around as an explicit
application context, or obtained through ``get_or_create()`` which keeps
one lazily built instance per concrete subclass.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, ClassVar, Optional, TypeVar

from pydantic import BaseModel, Field

from architecture.commands import Command, Query
from architecture.components import Model, System, Utility
from core.event_bus import EventBus, instantiate
from core.registry import TypeRegistry
from core.unregister import EventUnregister

logger = logging.getLogger(__name__)

A = TypeVar("A", bound="Architecture")
T = TypeVar("T")
R = TypeVar("R")


class ArchitectureState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    INITIALIZED = "initialized"


class ComponentEntry(BaseModel):
    """One registered system, model or utility."""

    key: str
    kind: str  # "system" | "model" | "utility"
    implementation: str


class EventEntry(BaseModel):
    event_type: str
    handler_count: int


class ArchitectureSnapshot(BaseModel):
    """Read-only description of an architecture, for tooling."""

    name: str
    state: ArchitectureState
    components: list[ComponentEntry] = Field(default_factory=list)
    events: list[EventEntry] = Field(default_factory=list)
    pending_models: int = 0
    pending_systems: int = 0


class Architecture(ABC):
    """Base mediator. Subclasses implement ``init`` to register participants."""

    _instances: ClassVar[dict[type, Architecture]] = {}
    _register_patches: ClassVar[dict[type, list[Callable[[Any], None]]]] = {}
    # Process-wide: one lock guards the shared instances of every subclass.
    _lock: ClassVar[threading.RLock] = threading.RLock()

    def __init__(self) -> None:
        self._state = ArchitectureState.UNINITIALIZED
        self._container = TypeRegistry()
        self._event_bus = EventBus()
        self._pending_models: list[Model] = []
        self._pending_systems: list[System] = []
        self._kinds: dict[type, str] = {}

    # -- singleton access -------------------------------------------------

    @classmethod
    def get_or_create(cls: type[A]) -> A:
        """Return this class's shared instance, building and initializing it once."""
        with cls._lock:
            instance = Architecture._instances.get(cls)
            if instance is None:
                instance = cls()
                # Cached first so a setup hook calling get_or_create() gets this instance.
                Architecture._instances[cls] = instance
                try:
                    instance.ensure_initialized()
                except Exception:
                    Architecture._instances.pop(cls, None)
                    raise
            return instance

    @classmethod
    def reset(cls) -> None:
        """Forget this class's shared instance (for testing)."""
        with cls._lock:
            Architecture._instances.pop(cls, None)

    @classmethod
    def add_register_patch(cls: type[A], patch: Callable[[A], None]) -> None:
        """Run ``patch`` after ``init()`` and before any model/system init.

        Lets code outside the subclass inject or replace registrations.
        """
        Architecture._register_patches.setdefault(cls, []).append(patch)

    @classmethod
    def clear_register_patches(cls) -> None:
        Architecture._register_patches.pop(cls, None)

    # -- lifecycle --------------------------------------------------------

    @property
    def state(self) -> ArchitectureState:
        return self._state

    @property
    def initialized(self) -> bool:
        return self._state is ArchitectureState.INITIALIZED

    @abstractmethod
    def init(self) -> None:
        """Register systems, models and utilities."""

    def ensure_initialized(self) -> None:
        """Run setup once. Later calls, including re-entrant ones, do nothing."""
        if self._state is not ArchitectureState.UNINITIALIZED:
            return
        name = type(self).__qualname__
        self._state = ArchitectureState.INITIALIZING

        try:
            self.init()

            for patch in list(Architecture._register_patches.get(type(self), ())):
                patch(self)

            self._drain_pending()
        except Exception:
            logger.exception("Architecture %s failed to initialize", name)
            self._pending_models.clear()
            self._pending_systems.clear()
            self._state = ArchitectureState.UNINITIALIZED
            raise

        self._state = ArchitectureState.INITIALIZED
        logger.info("Architecture %s initialized (%d components)", name, len(self._container))

    def _drain_pending(self) -> None:
        """Init queued models, then queued systems, until both queues stay empty.

        Any init() may queue further registrations. A model queued by a
        system is initialized before the next system runs.
        """
        models_done = systems_done = 0
        while True:
            if models_done < len(self._pending_models):
                self._pending_models[models_done].init()
                models_done += 1
            elif systems_done < len(self._pending_systems):
                self._pending_systems[systems_done].init()
                systems_done += 1
            else:
                break
        self._pending_models.clear()
        self._pending_systems.clear()

    # -- registration -----------------------------------------------------

    def register_system(self, system: System, as_type: Optional[type] = None) -> None:
        system.set_architecture(self)
        self._register(system, as_type, "system")
        if self.initialized:
            system.init()
        else:
            self._pending_systems.append(system)

    def register_model(self, model: Model, as_type: Optional[type] = None) -> None:
        model.set_architecture(self)
        self._register(model, as_type, "model")
        if self.initialized:
            model.init()
        else:
            self._pending_models.append(model)

    def register_utility(self, utility: Utility, as_type: Optional[type] = None) -> None:
        self._register(utility, as_type, "utility")

    def _register(self, instance: Any, as_type: Optional[type], kind: str) -> None:
        key = as_type if as_type is not None else type(instance)
        self._container.register(instance, key)
        self._kinds[key] = kind
        logger.debug(
            "Registered %s %s as %s", kind, type(instance).__qualname__, key.__qualname__,
        )

    def get_system(self, system_type: type[T]) -> Optional[T]:
        return self._container.get(system_type)

    def get_model(self, model_type: type[T]) -> Optional[T]:
        return self._container.get(model_type)

    def get_utility(self, utility_type: type[T]) -> Optional[T]:
        return self._container.get(utility_type)

    # -- commands & queries -----------------------------------------------

    def send_command(self, command: Command | type[Command]) -> None:
        """Bind and execute ``command``. A class is instantiated with no arguments."""
        if isinstance(command, type):
            command = instantiate(command)
        command.set_architecture(self)
        logger.debug("Executing command %s", type(command).__qualname__)
        command.execute()

    def send_query(self, query: Query[R]) -> R:
        query.set_architecture(self)
        return query.do()

    # -- events -----------------------------------------------------------

    def send_event(self, event: Any, event_type: Optional[type] = None) -> None:
        self._event_bus.send(event, event_type)

    def register_event(self, event_type: type[T], handler: Callable[[T], None]) -> EventUnregister:
        return self._event_bus.subscribe(event_type, handler)

    def unregister_event(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        self._event_bus.unsubscribe(event_type, handler)

    # -- tooling ----------------------------------------------------------

    def snapshot(self) -> ArchitectureSnapshot:
        components = [
            ComponentEntry(
                key=key.__qualname__,
                kind=self._kinds.get(key, "utility"),
                implementation=type(instance).__qualname__,
            )
            for key, instance in self._container.items()
        ]
        events = [
            EventEntry(
                event_type=event_type.__qualname__,
                handler_count=self._event_bus.handler_count(event_type),
            )
            for event_type in self._event_bus.event_types()
        ]
        return ArchitectureSnapshot(
            name=type(self).__qualname__,
            state=self._state,
            components=components,
            events=events,
            pending_models=len(self._pending_models),
            pending_systems=len(self._pending_systems),
        )
