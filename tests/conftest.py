"""
Shared fixtures

Every test gets its own core key so registries never leak between tests;
cores and stand-alone registries are torn down afterwards.
"""

import uuid

import pytest

from mvccore import Controller, CoreConfig, Environment, Facade, Model, View


@pytest.fixture
def core_key():
    key = f"test-{uuid.uuid4().hex}"
    yield key
    Facade.remove_core(key)
    View.remove_view(key)
    Model.remove_model(key)
    Controller.remove_controller(key)


@pytest.fixture
def config():
    return CoreConfig.for_environment(Environment.TESTING)


@pytest.fixture
def facade(core_key, config):
    return Facade(core_key, config)


@pytest.fixture
def view(core_key):
    return View(core_key)


class Recorder:
    """Collects (label, name, body, type) tuples in call order"""

    def __init__(self):
        self.calls = []

    def callback(self, label):
        def notify(name, body=None, type=None):
            self.calls.append((label, name, body, type))
        return notify

    @property
    def labels(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def recorder():
    return Recorder()
