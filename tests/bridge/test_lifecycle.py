"""Tests for the binding lifecycle state machine.

Critical Invariants:
- No transition skips a step
- A failed activation never exposes a binding
- Teardown removes only the instance's own slice
"""

import dataclasses
import logging

import pytest

from storebridge.bridge import (
    Binding,
    BindingLifecycle,
    BindingState,
    BridgeOptions,
    attach_lifecycle,
    binding_of,
    lifecycle_of,
)
from storebridge.core.errors import ErrorMode, IntegrationError, KeyGenerationError, LifecycleError


class Instance:
    """Bare instance exposing a store, like a host component would."""

    def __init__(self, store=None, key=None):
        self.store = store
        self.key = key


@pytest.fixture
def options():
    return BridgeOptions(initial_state={"foo": 100})


def test_full_lifecycle(store, options):
    instance = Instance(store)
    lifecycle = BindingLifecycle(options, "test")
    assert lifecycle.state is BindingState.UNBOUND

    binding = lifecycle.activate(instance)

    assert lifecycle.state is BindingState.ACTIVE
    assert binding == Binding("test", "bridge", "bridge_key", "default")
    assert instance.bridge_key == "default"
    assert store.state["bridge"]["test"]["default"] == {"foo": 100}

    lifecycle.destroy(instance)

    assert lifecycle.state is BindingState.DESTROYED
    assert store.state["bridge"]["test"]["default"] == {"foo": 100}


def test_activate_twice_raises(store, options):
    lifecycle = BindingLifecycle(options, "test")
    lifecycle.activate(Instance(store))

    with pytest.raises(LifecycleError, match="ACTIVE to ACTIVATING"):
        lifecycle.activate(Instance(store))


def test_destroy_before_activate_raises(options):
    lifecycle = BindingLifecycle(options, "test")
    with pytest.raises(LifecycleError, match="UNBOUND to DESTROYED"):
        lifecycle.destroy(Instance())


def test_missing_store_strict(options):
    lifecycle = BindingLifecycle(options, "test")

    with pytest.raises(IntegrationError):
        lifecycle.activate(Instance())

    assert lifecycle.state is BindingState.ACTIVATING
    assert lifecycle.binding is None


def test_missing_store_lenient(caplog, options):
    lenient = dataclasses.replace(options, error_mode=ErrorMode.LENIENT)
    lifecycle = BindingLifecycle(lenient, "test")

    with caplog.at_level(logging.WARNING):
        assert lifecycle.activate(Instance()) is None

    assert [r.levelno for r in caplog.records] == [logging.WARNING]
    assert "IntegrationError" in caplog.text
    assert lifecycle.state is BindingState.ACTIVE
    assert lifecycle.binding is None

    lifecycle.destroy(Instance())
    assert lifecycle.state is BindingState.DESTROYED


def test_invalid_key_aborts_before_slice_creation(store, options):
    """CRITICAL: activation failures leave neither a binding nor a slice."""
    failing = dataclasses.replace(options, key=lambda vm: 12)
    lifecycle = BindingLifecycle(failing, "test")

    with pytest.raises(KeyGenerationError):
        lifecycle.activate(Instance(store))

    assert lifecycle.binding is None
    assert "bridge" not in store.state


def test_invalid_key_lenient_uses_default(store, options):
    lenient = dataclasses.replace(options, key=lambda vm: None, error_mode=ErrorMode.LENIENT)
    binding = BindingLifecycle(lenient, "test").activate(Instance(store))

    assert binding is not None
    assert binding.instance_key == "default"


def test_remove_on_destroy_removes_only_own_slice(store, options):
    removing = dataclasses.replace(options, remove_on_destroy=True, key=lambda vm: vm.key)
    first, second = Instance(store, "1"), Instance(store, "2")
    first_lifecycle = BindingLifecycle(removing, "test")
    first_lifecycle.activate(first)
    BindingLifecycle(removing, "test").activate(second)

    first_lifecycle.destroy(first)

    assert "1" not in store.state["bridge"]["test"]
    assert store.state["bridge"]["test"]["2"] == {"foo": 100}


def test_binding_is_immutable():
    binding = Binding("test", "bridge", "bridge_key", "default")
    with pytest.raises(dataclasses.FrozenInstanceError):
        binding.instance_key = "other"  # type: ignore[misc]


def test_attach_lifecycle(store, options):
    instance = Instance(store)
    lifecycle = BindingLifecycle(options, "test")
    attach_lifecycle(instance, lifecycle)

    assert lifecycle_of(instance, "bridge") is lifecycle
    assert binding_of(instance, "bridge") is None
    lifecycle.activate(instance)
    assert binding_of(instance, "bridge") is lifecycle.binding
    assert lifecycle_of(instance, "other") is None

    with pytest.raises(LifecycleError, match="already bound"):
        attach_lifecycle(instance, BindingLifecycle(options, "test"))
