"""
Model tests: proxy registry
"""

import pytest

from mvccore import Model, MultitonError, Proxy


class TrackingProxy(Proxy):

    def __init__(self, name, data=None):
        super().__init__(name, data)
        self.events = []

    def on_register(self):
        self.events.append("register")

    def on_remove(self):
        self.events.append("remove")


@pytest.fixture
def model(core_key):
    return Model(core_key)


class TestProxyRegistry:

    def test_register_and_retrieve(self, model):
        proxy = TrackingProxy("prefs", {"theme": "dark"})

        model.register_proxy(proxy)

        assert model.has_proxy("prefs")
        assert model.retrieve_proxy("prefs") is proxy
        assert model.retrieve_proxy("prefs").data == {"theme": "dark"}
        assert proxy.events == ["register"]

    def test_second_registration_under_same_name_overwrites(self, model):
        first = TrackingProxy("X")
        second = TrackingProxy("X")

        model.register_proxy(first)
        model.register_proxy(second)

        assert model.retrieve_proxy("X") is second
        assert first.events == ["register"]
        assert second.events == ["register"]

    def test_remove_runs_hook_and_returns_proxy(self, model):
        proxy = TrackingProxy("prefs")
        model.register_proxy(proxy)

        assert model.remove_proxy("prefs") is proxy
        assert proxy.events == ["register", "remove"]
        assert not model.has_proxy("prefs")

    def test_missing_proxy_lookups_return_none(self, model):
        assert model.retrieve_proxy("ghost") is None
        assert model.remove_proxy("ghost") is None
        assert model.has_proxy("ghost") is False

    def test_registration_attaches_proxy_to_core(self, model, core_key):
        proxy = TrackingProxy("prefs")
        model.register_proxy(proxy)

        assert proxy.multiton_key == core_key

    def test_default_proxy_name(self):
        assert Proxy().name == "Proxy"


class TestModelLifecycle:

    def test_second_construction_for_key_fails(self, model, core_key):
        with pytest.raises(MultitonError) as exc_info:
            Model(core_key)

        assert exc_info.value.component == "Model"
        assert exc_info.value.key == core_key

    def test_get_instance_returns_existing(self, model, core_key):
        assert Model.get_instance(core_key) is model
