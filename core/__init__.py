from core.event_bus import EventBus, OnEvent, register_global_event, unregister_global_event
from core.handlers import HandlerList
from core.observable import ObservableValue
from core.registry import TypeRegistry
from core.unregister import (
    CustomUnregister,
    Unregister,
    UnregisterList,
    UnregisterTrigger,
    add_to_unregister_list,
    unregister_all,
    unregister_when_disposed,
)

__all__ = [
    "CustomUnregister",
    "EventBus",
    "HandlerList",
    "ObservableValue",
    "OnEvent",
    "TypeRegistry",
    "Unregister",
    "UnregisterList",
    "UnregisterTrigger",
    "add_to_unregister_list",
    "register_global_event",
    "unregister_all",
    "unregister_global_event",
    "unregister_when_disposed",
]
