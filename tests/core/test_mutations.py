"""Tests for the pure mutation operations.

Critical Invariants:
- Every mutation touches only the slice named in its payload
- Field-level writes never introduce undeclared fields
- replace reconciles deletions, assign never grows the field set
"""

import pytest

from storebridge.core.mutation import (
    AssignPayload,
    InitializePayload,
    MutatePayload,
    RemovePayload,
    ReplacePayload,
    assign,
    initialize,
    mutate,
    remove,
    replace,
)


@pytest.fixture
def state():
    """Namespace state with two kinds and two keys under the first."""
    return {
        "Card": {
            "1": {"a": 1, "b": 2},
            "2": {"a": 10, "b": 20},
        },
        "List": {"default": {"a": 1, "b": 2}},
    }


def test_initialize_creates_kind_mapping():
    state = {}
    initialize(state, InitializePayload("Card", "1", {"foo": 100}))
    assert state == {"Card": {"1": {"foo": 100}}}


def test_initialize_adds_key_next_to_siblings(state):
    initialize(state, InitializePayload("Card", "3", {"a": 0}))

    assert state["Card"]["3"] == {"a": 0}
    assert state["Card"]["1"] == {"a": 1, "b": 2}
    assert state["Card"]["2"] == {"a": 10, "b": 20}


def test_initialize_goes_through_set_primitive():
    """The reactive set primitive sees the new kind and the new key."""
    calls = []

    def set_key(mapping, key, value):
        calls.append(key)
        mapping[key] = value

    state = {}
    initialize(state, InitializePayload("Card", "1", {}), set_key=set_key)
    initialize(state, InitializePayload("Card", "2", {}), set_key=set_key)

    assert calls == ["Card", "2"]


def test_mutate_sets_one_field(state):
    mutate(state, MutatePayload("Card", "1", "a", 99))

    assert state["Card"]["1"] == {"a": 99, "b": 2}
    assert state["Card"]["2"] == {"a": 10, "b": 20}
    assert state["List"]["default"] == {"a": 1, "b": 2}


def test_mutate_rejects_undeclared_field(state):
    """CRITICAL: a field write never introduces a new field."""
    with pytest.raises(KeyError, match="not declared"):
        mutate(state, MutatePayload("Card", "1", "c", 3))
    assert state["Card"]["1"] == {"a": 1, "b": 2}


def test_mutate_missing_slice_raises(state):
    with pytest.raises(KeyError):
        mutate(state, MutatePayload("Card", "missing", "a", 3))


def test_replace_reconciles_fields(state):
    """CRITICAL: {a:1,b:2} replaced by {a:9,c:3} is exactly {a:9,c:3}."""
    original = state["Card"]["1"]

    replace(state, ReplacePayload("Card", "1", {"a": 9, "c": 3}))

    assert state["Card"]["1"] == {"a": 9, "c": 3}
    assert state["Card"]["1"] is original
    assert state["Card"]["2"] == {"a": 10, "b": 20}


def test_replace_uses_store_primitives(state):
    deleted = []
    written = []

    def set_key(mapping, key, value):
        written.append(key)
        mapping[key] = value

    def delete_key(mapping, key):
        deleted.append(key)
        del mapping[key]

    replace(
        state,
        ReplacePayload("Card", "1", {"a": 9, "c": 3}),
        set_key=set_key,
        delete_key=delete_key,
    )

    assert deleted == ["b"]
    assert written == ["a", "c"]


def test_assign_ignores_unknown_fields(state):
    assign(state, AssignPayload("Card", "1", {"a": 5, "z": 0}))

    assert state["Card"]["1"] == {"a": 5, "b": 2}


def test_assign_missing_slice_raises(state):
    with pytest.raises(KeyError):
        assign(state, AssignPayload("Card", "missing", {"a": 5}))


def test_remove_deletes_only_its_key(state):
    remove(state, RemovePayload("Card", "1"))

    assert "1" not in state["Card"]
    assert state["Card"]["2"] == {"a": 10, "b": 20}
    assert "List" in state


@pytest.mark.parametrize(("kind", "key"), [("Card", "missing"), ("Unknown", "1")])
def test_remove_missing_slice_is_noop(state, kind, key):
    remove(state, RemovePayload(kind, key))
    assert set(state["Card"]) == {"1", "2"}
