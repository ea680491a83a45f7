"""
TypeRegistry tests: identity round trip, misses, overwrite, explicit keys.
"""

from core.registry import TypeRegistry


class Service:
    pass


class FancyService(Service):
    pass


class Other:
    pass


class TestTypeRegistry:
    def test_register_then_get_returns_same_instance(self):
        registry = TypeRegistry()
        service = Service()

        registry.register(service)

        assert registry.get(Service) is service

    def test_get_unregistered_returns_none(self):
        registry = TypeRegistry()

        assert registry.get(Service) is None
        assert Service not in registry

    def test_reregistration_is_last_write_wins(self):
        registry = TypeRegistry()
        first, second = Service(), Service()

        registry.register(first)
        registry.register(second)

        assert registry.get(Service) is second
        assert len(registry) == 1

    def test_key_defaults_to_concrete_class(self):
        registry = TypeRegistry()
        fancy = FancyService()

        registry.register(fancy)

        assert registry.get(FancyService) is fancy
        assert registry.get(Service) is None

    def test_explicit_key_registers_under_base(self):
        registry = TypeRegistry()
        fancy = FancyService()

        registry.register(fancy, as_type=Service)

        assert registry.get(Service) is fancy
        assert registry.get(FancyService) is None

    def test_keys_are_independent(self):
        registry = TypeRegistry()
        service, other = Service(), Other()

        registry.register(service)
        registry.register(other)

        assert registry.get(Service) is service
        assert registry.get(Other) is other
        assert set(registry.keys()) == {Service, Other}

    def test_items_is_a_snapshot(self):
        registry = TypeRegistry()
        registry.register(Service())

        items = registry.items()
        items.clear()

        assert len(registry) == 1
