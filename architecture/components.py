"""Long-lived participants: controllers, systems, models and utilities."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from architecture.capabilities import (
    CanGetModel,
    CanGetSystem,
    CanGetUtility,
    CanRegisterEvent,
    CanSendCommand,
    CanSendEvent,
    CanSendQuery,
    CanSetArchitecture,
)

if TYPE_CHECKING:
    from architecture.architecture import Architecture


class Controller(
    CanSendCommand,
    CanGetSystem,
    CanGetModel,
    CanRegisterEvent,
    CanSendQuery,
):
    """Presentation-side participant (editor views, windows).

    Controllers are never registered; implementers return the architecture
    they talk to from ``get_architecture``.
    """


class System(
    CanSetArchitecture,
    CanGetModel,
    CanGetUtility,
    CanRegisterEvent,
    CanSendEvent,
    CanGetSystem,
):
    @abstractmethod
    def init(self) -> None:
        """Called once, after every model has been initialized."""


class Model(CanSetArchitecture, CanGetUtility, CanSendEvent):
    @abstractmethod
    def init(self) -> None:
        """Called once, before any system is initialized."""


class Utility:
    """Marker for stateless helpers. Utilities have no capabilities."""


class AbstractSystem(System):
    _architecture: Optional[Architecture] = None

    def get_architecture(self) -> Architecture:
        return self._architecture

    def set_architecture(self, architecture: Architecture) -> None:
        self._architecture = architecture

    def init(self) -> None:
        self.on_init()

    @abstractmethod
    def on_init(self) -> None: ...


class AbstractModel(Model):
    _architecture: Optional[Architecture] = None

    def get_architecture(self) -> Architecture:
        return self._architecture

    def set_architecture(self, architecture: Architecture) -> None:
        self._architecture = architecture

    def init(self) -> None:
        self.on_init()

    @abstractmethod
    def on_init(self) -> None: ...
