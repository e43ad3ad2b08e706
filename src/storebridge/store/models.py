"""Store models: module descriptors, getter views and store errors."""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

type Getter = Callable[[dict[str, Any]], Any]
"""Derived value computed from a module's state."""

type MutationHandler = Callable[[dict[str, Any], Any], None]
"""Synchronous state change: (module_state, payload) -> None."""


class StoreError(Exception):
    """Base class for store errors."""

    pass


class UnknownMutationError(StoreError, KeyError):
    """Raised when committing a mutation path that nothing registered."""

    pass


class ModuleRegisteredError(StoreError):
    """Raised when registering a module name twice."""

    pass


@dataclass(slots=True)
class ModuleDescriptor:
    """A store module: its state subtree plus getters and mutations.

    Namespaced modules expose getters and mutations as "<name>/<member>".
    """

    state: dict[str, Any] = field(default_factory=dict)
    getters: dict[str, Getter] = field(default_factory=dict)
    mutations: dict[str, MutationHandler] = field(default_factory=dict)
    namespaced: bool = True


class Getters(Mapping[str, Any]):
    """Read-only view evaluating store getters on access."""

    def __init__(self, resolve: Callable[[str], Any], names: Callable[[], Collection[str]]):
        self._resolve = resolve
        self._names = names

    def __getitem__(self, path: str) -> Any:
        return self._resolve(path)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names())

    def __len__(self) -> int:
        return len(self._names())

    def __contains__(self, path: object) -> bool:
        return path in self._names()
