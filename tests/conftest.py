"""Shared test fixtures."""

import os
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from storebridge import ComponentOptions, LocalStore, MutationHistory, bridge, define_component


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Bridges read STOREBRIDGE_* settings; keep the developer's env out of tests."""
    for name in list(os.environ):
        if name.startswith("STOREBRIDGE_"):
            monkeypatch.delenv(name)


@pytest.fixture
def store():
    """Fresh LocalStore instance."""
    return LocalStore()


@pytest.fixture
def history(store):
    """Mutation history subscribed to the store fixture."""
    recorder = MutationHistory()
    store.subscribe(recorder)
    return recorder


@pytest.fixture
def make_component():
    """Bridge a component kind and return (bridge, instance class)."""

    def factory(name="test", component_options=None, **bridge_kwargs):
        setting = bridge(**bridge_kwargs)
        options = component_options or ComponentOptions(name=name)
        return setting, define_component(setting(options))

    return factory
