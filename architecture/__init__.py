"""Mediator layer: architectures, participant roles and their capabilities."""

from architecture.architecture import (
    Architecture,
    ArchitectureSnapshot,
    ArchitectureState,
    ComponentEntry,
    EventEntry,
)
from architecture.capabilities import (
    BelongsToArchitecture,
    CanGetModel,
    CanGetSystem,
    CanGetUtility,
    CanRegisterEvent,
    CanSendCommand,
    CanSendEvent,
    CanSendQuery,
    CanSetArchitecture,
)
from architecture.commands import AbstractCommand, AbstractQuery, Command, Query
from architecture.components import (
    AbstractModel,
    AbstractSystem,
    Controller,
    Model,
    System,
    Utility,
)

__all__ = [
    "AbstractCommand",
    "AbstractModel",
    "AbstractQuery",
    "AbstractSystem",
    "Architecture",
    "ArchitectureSnapshot",
    "ArchitectureState",
    "BelongsToArchitecture",
    "CanGetModel",
    "CanGetSystem",
    "CanGetUtility",
    "CanRegisterEvent",
    "CanSendCommand",
    "CanSendEvent",
    "CanSendQuery",
    "CanSetArchitecture",
    "Command",
    "ComponentEntry",
    "Controller",
    "EventEntry",
    "Model",
    "Query",
    "System",
    "Utility",
]
