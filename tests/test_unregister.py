"""
Unregister handle tests: custom handles, unregister lists and triggers.
"""

from pydantic import BaseModel

from core.event_bus import EventBus
from core.unregister import (
    CustomUnregister,
    UnregisterList,
    UnregisterTrigger,
    add_to_unregister_list,
    unregister_all,
    unregister_when_disposed,
)


class Tick(BaseModel):
    pass


class Owner(UnregisterList):
    pass


class TestCustomUnregister:
    def test_runs_callback_once(self):
        calls = []
        handle = CustomUnregister(lambda: calls.append(1))

        handle.unregister()
        handle.unregister()

        assert calls == [1]


class TestUnregisterList:
    def test_unregister_all_twice_is_safe(self, recorder_factory):
        bus = EventBus()
        owner = Owner()
        first, second = recorder_factory(), recorder_factory()
        add_to_unregister_list(bus.subscribe(Tick, first), owner)
        add_to_unregister_list(bus.subscribe(Tick, second), owner)

        unregister_all(owner)
        unregister_all(owner)
        bus.send(Tick())

        assert first.calls == []
        assert second.calls == []
        assert owner.unregister_list == []

    def test_add_returns_handle(self):
        owner = Owner()
        handle = CustomUnregister(lambda: None)

        assert add_to_unregister_list(handle, owner) is handle
        assert owner.unregister_list == [handle]

    def test_lists_are_per_instance(self):
        a, b = Owner(), Owner()
        add_to_unregister_list(CustomUnregister(lambda: None), a)

        assert len(a.unregister_list) == 1
        assert b.unregister_list == []


class TestUnregisterTrigger:
    def test_of_returns_same_trigger_for_owner(self):
        class Window:
            pass

        window = Window()

        assert UnregisterTrigger.of(window) is UnregisterTrigger.of(window)

    def test_fire_releases_every_handle_once(self, recorder_factory):
        class Window:
            pass

        bus = EventBus()
        window = Window()
        handler = recorder_factory()
        released = []
        unregister_when_disposed(bus.subscribe(Tick, handler), window)
        unregister_when_disposed(CustomUnregister(lambda: released.append(1)), window)

        trigger = UnregisterTrigger.of(window)
        assert len(trigger) == 2

        trigger.fire()
        trigger.fire()
        bus.send(Tick())

        assert handler.calls == []
        assert released == [1]
        assert len(trigger) == 0
