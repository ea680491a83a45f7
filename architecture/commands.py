"""One-shot participants: commands (actions) and queries (reads)."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from architecture.capabilities import (
    CanGetModel,
    CanGetSystem,
    CanGetUtility,
    CanSendCommand,
    CanSendEvent,
    CanSendQuery,
    CanSetArchitecture,
)

if TYPE_CHECKING:
    from architecture.architecture import Architecture

R = TypeVar("R")


class Command(
    CanSetArchitecture,
    CanGetSystem,
    CanGetModel,
    CanGetUtility,
    CanSendEvent,
    CanSendCommand,
    CanSendQuery,
):
    @abstractmethod
    def execute(self) -> None: ...


class Query(
    CanSetArchitecture,
    CanGetModel,
    CanGetSystem,
    CanSendQuery,
    Generic[R],
):
    @abstractmethod
    def do(self) -> R: ...


class AbstractCommand(Command):
    """Base for commands; subclasses implement ``on_execute``.

    The architecture binds itself before calling ``execute``, so
    ``on_execute`` can use every capability.
    """

    _architecture: Optional[Architecture] = None

    def get_architecture(self) -> Architecture:
        return self._architecture

    def set_architecture(self, architecture: Architecture) -> None:
        self._architecture = architecture

    def execute(self) -> None:
        self.on_execute()

    @abstractmethod
    def on_execute(self) -> None: ...


class AbstractQuery(Query[R]):
    """Base for queries; subclasses implement ``on_do`` and return the result."""

    _architecture: Optional[Architecture] = None

    def get_architecture(self) -> Architecture:
        return self._architecture

    def set_architecture(self, architecture: Architecture) -> None:
        self._architecture = architecture

    def do(self) -> R:
        return self.on_do()

    @abstractmethod
    def on_do(self) -> R: ...
