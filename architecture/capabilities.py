"""Capability mixins for architecture participants.

Each capability depends only on ``get_architecture()``. A participant type
lists the capabilities it supports as bases; there is no shared base class
carrying the whole surface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

if TYPE_CHECKING:
    from architecture.architecture import Architecture
    from architecture.commands import Command, Query
    from core.unregister import EventUnregister

T = TypeVar("T")
R = TypeVar("R")


class BelongsToArchitecture(ABC):
    @abstractmethod
    def get_architecture(self) -> Architecture:
        """Return the architecture this participant is bound to."""


class CanSetArchitecture(ABC):
    @abstractmethod
    def set_architecture(self, architecture: Architecture) -> None:
        """Bind the back-reference. Called by the architecture itself."""


class CanGetModel(BelongsToArchitecture):
    def get_model(self, model_type: type[T]) -> Optional[T]:
        return self.get_architecture().get_model(model_type)


class CanGetSystem(BelongsToArchitecture):
    def get_system(self, system_type: type[T]) -> Optional[T]:
        return self.get_architecture().get_system(system_type)


class CanGetUtility(BelongsToArchitecture):
    def get_utility(self, utility_type: type[T]) -> Optional[T]:
        return self.get_architecture().get_utility(utility_type)


class CanRegisterEvent(BelongsToArchitecture):
    def register_event(self, event_type: type[T], handler: Callable[[T], None]) -> EventUnregister:
        return self.get_architecture().register_event(event_type, handler)

    def unregister_event(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        self.get_architecture().unregister_event(event_type, handler)


class CanSendCommand(BelongsToArchitecture):
    def send_command(self, command: Command | type[Command]) -> None:
        self.get_architecture().send_command(command)


class CanSendEvent(BelongsToArchitecture):
    def send_event(self, event: Any, event_type: Optional[type] = None) -> None:
        self.get_architecture().send_event(event, event_type)


class CanSendQuery(BelongsToArchitecture):
    def send_query(self, query: Query[R]) -> R:
        return self.get_architecture().send_query(query)
