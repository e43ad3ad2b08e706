"""Mutation payload models.

Each payload names exactly one slice by (component_kind, key); mutations never
reach beyond it.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

type KeySetter = Callable[[MutableMapping[str, Any], str, Any], None]
"""Reactive set primitive: (mapping, key, value) -> None."""

type KeyDeleter = Callable[[MutableMapping[str, Any], str], None]
"""Reactive delete primitive: (mapping, key) -> None."""


@dataclass(frozen=True, slots=True)
class InitializePayload:
    """Create the slice for (component_kind, key) holding `value`."""

    component_kind: str
    key: str
    value: dict[str, Any]


@dataclass(frozen=True, slots=True)
class MutatePayload:
    """Set one declared field of one slice."""

    component_kind: str
    key: str
    field: str
    value: Any


@dataclass(frozen=True, slots=True)
class ReplacePayload:
    """Structurally replace one slice with `value`."""

    component_kind: str
    key: str
    value: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class AssignPayload:
    """Update the already-existing fields of one slice from `values`."""

    component_kind: str
    key: str
    values: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class RemovePayload:
    """Delete one slice."""

    component_kind: str
    key: str
