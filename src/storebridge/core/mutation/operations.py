"""Pure mutation functions applied to a namespace's state.

Every function takes the namespace state mapping
(component kind -> instance key -> slice) and a payload. The idempotency
guard for `initialize` lives in the caller, not here.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from storebridge.core.mutation.models import (
    AssignPayload,
    InitializePayload,
    KeyDeleter,
    KeySetter,
    MutatePayload,
    RemovePayload,
    ReplacePayload,
)

type NamespaceState = MutableMapping[str, Any]


def plain_set(mapping: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Non-reactive set, used when no store primitive is supplied."""
    mapping[key] = value


def plain_delete(mapping: MutableMapping[str, Any], key: str) -> None:
    """Non-reactive delete, used when no store primitive is supplied."""
    del mapping[key]


def _slice(state: NamespaceState, component_kind: str, key: str) -> dict[str, Any]:
    return state[component_kind][key]


def initialize(
    state: NamespaceState,
    payload: InitializePayload,
    *,
    set_key: KeySetter = plain_set,
) -> None:
    """Create the slice for (component_kind, key).

    If the component kind has no mapping yet it is created holding the single
    new entry. The slice is a shallow copy of the payload value, so the
    committed payload keeps describing what was initialized.

    Args:
        state: Namespace state.
        payload: Slice coordinates and initial value.
        set_key: Reactive set primitive of the owning store.
    """
    if payload.component_kind not in state:
        set_key(state, payload.component_kind, {payload.key: dict(payload.value)})
    else:
        set_key(state[payload.component_kind], payload.key, dict(payload.value))


def mutate(state: NamespaceState, payload: MutatePayload) -> None:
    """Set one field of an existing slice.

    Args:
        state: Namespace state.
        payload: Slice coordinates, field name and new value.

    Raises:
        KeyError: If the slice does not exist or the field was never declared.
    """
    target = _slice(state, payload.component_kind, payload.key)
    if payload.field not in target:
        raise KeyError(
            f"Field {payload.field!r} is not declared on "
            f"{payload.component_kind}[{payload.key!r}]"
        )
    target[payload.field] = payload.value


def replace(
    state: NamespaceState,
    payload: ReplacePayload,
    *,
    set_key: KeySetter = plain_set,
    delete_key: KeyDeleter = plain_delete,
) -> None:
    """Structurally replace a slice, keeping the slice object itself.

    Fields missing from the new value are removed, every field in it is
    (re)assigned. Afterwards the slice holds exactly the new value's fields.

    Args:
        state: Namespace state.
        payload: Slice coordinates and the new value.
        set_key: Reactive set primitive of the owning store.
        delete_key: Reactive delete primitive of the owning store.

    Raises:
        KeyError: If the slice does not exist.
    """
    target = _slice(state, payload.component_kind, payload.key)
    for name in [name for name in target if name not in payload.value]:
        delete_key(target, name)
    for name, value in payload.value.items():
        set_key(target, name, value)


def assign(
    state: NamespaceState,
    payload: AssignPayload,
    *,
    set_key: KeySetter = plain_set,
    delete_key: KeyDeleter = plain_delete,
) -> None:
    """Merge-only update: only fields already in the slice are written.

    Unknown keys in `values` are ignored, so the field set never grows.

    Args:
        state: Namespace state.
        payload: Slice coordinates and partial values.
        set_key: Reactive set primitive of the owning store.
        delete_key: Reactive delete primitive of the owning store.

    Raises:
        KeyError: If the slice does not exist.
    """
    target = _slice(state, payload.component_kind, payload.key)
    merged = dict(target)
    merged.update((name, value) for name, value in payload.values.items() if name in target)
    replace(
        state,
        ReplacePayload(payload.component_kind, payload.key, merged),
        set_key=set_key,
        delete_key=delete_key,
    )


def remove(
    state: NamespaceState,
    payload: RemovePayload,
    *,
    delete_key: KeyDeleter = plain_delete,
) -> None:
    """Delete one slice, leaving sibling keys untouched. Missing slices are ignored.

    Args:
        state: Namespace state.
        payload: Slice coordinates.
        delete_key: Reactive delete primitive of the owning store.
    """
    slices = state.get(payload.component_kind)
    if slices is not None and payload.key in slices:
        delete_key(slices, payload.key)
