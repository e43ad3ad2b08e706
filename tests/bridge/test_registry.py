"""Tests for namespace registration."""

from storebridge.bridge import ensure_namespace, installed_path, is_installed, namespace_module
from storebridge.core.mutation import InitializePayload
from storebridge.store import LocalStore


def test_ensure_namespace_registers_once(store):
    assert not is_installed(store, "bridge")

    assert ensure_namespace(store, "bridge") is True
    assert ensure_namespace(store, "bridge") is False

    assert store.getters[installed_path("bridge")] is True
    assert store.state["bridge"] == {}


def test_second_ensure_keeps_content(store):
    """CRITICAL: re-registration never resets or duplicates namespace content."""
    ensure_namespace(store, "bridge")
    store.commit("bridge/initialize", InitializePayload("Card", "1", {"a": 1}))
    namespace_state = store.state["bridge"]

    ensure_namespace(store, "bridge")

    assert store.state["bridge"] is namespace_state
    assert store.state["bridge"] == {"Card": {"1": {"a": 1}}}


def test_registration_seeds_from_existing_subtree():
    """Rehydrated state under the namespace name survives registration."""
    store = LocalStore(state={"bridge": {"Card": {"1": {"a": 5}}}, "other": {"x": 1}})

    ensure_namespace(store, "bridge")

    assert store.state["bridge"] == {"Card": {"1": {"a": 5}}}
    assert store.state["other"] == {"x": 1}
    assert is_installed(store, "bridge")


def test_custom_namespace(store):
    ensure_namespace(store, "ui")

    assert is_installed(store, "ui")
    assert not is_installed(store, "bridge")


def test_namespace_module_members(store):
    descriptor = namespace_module(store, "bridge")

    assert descriptor.namespaced
    assert set(descriptor.mutations) == {"initialize", "mutate", "replace", "assign", "remove"}
    assert descriptor.getters["installed"]({}) is True
