"""Local in-memory store implementation.

Plain dict-based state tree with namespaced modules, suitable for
single-process use and testing.

Usage:
    store = LocalStore(state={"bridge": previously_rendered_state})
    store.register_module("cart", ModuleDescriptor(
        state={"items": []},
        getters={"empty": lambda state: not state["items"]},
        mutations={"add": lambda state, item: state["items"].append(item)},
    ))
    store.commit("cart/add", "apple")
    store.getters["cart/empty"]  # False
"""

from __future__ import annotations

import copy as cp
import logging
import pickle  # nosec B403 - Used only for local snapshots, never for untrusted data
import time
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from storebridge.store.models import (
    Getter,
    Getters,
    ModuleDescriptor,
    ModuleRegisteredError,
    MutationHandler,
    StoreError,
    UnknownMutationError,
)
from storebridge.store.protocol import Subscriber
from storebridge.tracing.models import MutationRecord

_logger = logging.getLogger(__name__)


class LocalStore:
    """Simple in-memory store.

    Structure:
        _state[module_name] = module subtree
        _mutations["module/name"] = (module_name, handler)
        _getters["module/name"] = (module_name, getter)

    Args:
        state: Initial root state. Subtrees already present under a module's
            name are kept until that module registers (rehydration).
        strict: If True, committing from inside a mutation handler raises.
    """

    def __init__(self, state: Mapping[str, Any] | None = None, *, strict: bool = False):
        """Initialize local store.

        Args:
            state: Initial root state (deep-copied).
            strict: Reject nested commits.
        """
        self._state: dict[str, Any] = cp.deepcopy(dict(state or {}))
        self._modules: dict[str, ModuleDescriptor] = {}
        self._mutations: dict[str, tuple[str, MutationHandler]] = {}
        self._getters: dict[str, tuple[str, Getter]] = {}
        self._subscribers: list[Subscriber] = []
        self._strict = strict
        self._committing = False
        self._version = 0
        self._sequence = 0

    @property
    def state(self) -> dict[str, Any]:
        """Root state tree."""
        return self._state

    @property
    def getters(self) -> Mapping[str, Any]:
        """Getter view, evaluated on access."""
        return Getters(self._resolve_getter, lambda: self._getters.keys())

    @property
    def version(self) -> int:
        """Change counter, bumped by commits and reactive set/delete."""
        return self._version

    @property
    def strict(self) -> bool:
        return self._strict

    def _touch(self) -> None:
        self._version += 1

    def _resolve_getter(self, path: str) -> Any:
        try:
            module_name, getter = self._getters[path]
        except KeyError:
            raise KeyError(f"Unknown getter: {path}") from None
        return getter(self._state[module_name])

    def register_module(self, name: str, descriptor: ModuleDescriptor) -> None:
        """Install a module.

        The descriptor's state replaces whatever subtree was stored under
        `name`; seed it from `store.state.get(name)` to keep rehydrated data.

        Args:
            name: Module name, also its top-level state key.
            descriptor: State, getters and mutations of the module.

        Raises:
            ModuleRegisteredError: If a module is already registered under name.
        """
        if name in self._modules:
            raise ModuleRegisteredError(f"Module {name!r} is already registered")

        prefix = f"{name}/" if descriptor.namespaced else ""
        self._modules[name] = descriptor
        self._state[name] = descriptor.state
        for member, handler in descriptor.mutations.items():
            self._mutations[prefix + member] = (name, handler)
        for member, getter in descriptor.getters.items():
            self._getters[prefix + member] = (name, getter)
        self._touch()
        _logger.debug("Registered store module %s", name)

    def unregister_module(self, name: str) -> None:
        """Remove a module, its state, getters and mutations.

        Args:
            name: Module name.

        Raises:
            KeyError: If no module is registered under name.
        """
        if name not in self._modules:
            raise KeyError(f"Module {name!r} is not registered")
        del self._modules[name]
        self._state.pop(name, None)
        self._mutations = {p: m for p, m in self._mutations.items() if m[0] != name}
        self._getters = {p: g for p, g in self._getters.items() if g[0] != name}
        self._touch()

    def has_module(self, name: str) -> bool:
        """Check whether a module is registered under name."""
        return name in self._modules

    def commit(self, path: str, payload: Any = None) -> None:
        """Apply a mutation synchronously and notify subscribers.

        Handler exceptions propagate; subscribers are only notified of
        mutations that completed.

        Args:
            path: Mutation path, "<module>/<mutation>" for namespaced modules.
            payload: Value handed to the mutation handler.

        Raises:
            UnknownMutationError: If no mutation is registered under path.
            StoreError: On a nested commit in strict mode.
        """
        try:
            module_name, handler = self._mutations[path]
        except KeyError:
            raise UnknownMutationError(f"Unknown mutation: {path}") from None
        if self._strict and self._committing:
            raise StoreError(f"Cannot commit {path} from inside another mutation")

        outer = self._committing
        self._committing = True
        try:
            handler(self._state[module_name], payload)
        finally:
            self._committing = outer

        self._touch()
        self._sequence += 1
        record = MutationRecord(
            sequence=self._sequence,
            path=path,
            payload=payload,
            timestamp=time.time(),
        )
        for subscriber in list(self._subscribers):
            subscriber(record, self._state)

    def set_key(self, mapping: MutableMapping[str, Any], key: str, value: Any) -> None:
        """Set a dynamically named key and record the change."""
        mapping[key] = value
        self._touch()

    def delete_key(self, mapping: MutableMapping[str, Any], key: str) -> None:
        """Delete a dynamically named key and record the change. Missing keys are ignored."""
        if key in mapping:
            del mapping[key]
            self._touch()

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register a commit subscriber.

        Args:
            subscriber: Called as subscriber(record, root_state) after each commit.

        Returns:
            Function removing the subscriber again.
        """
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    def replace_state(self, state: Mapping[str, Any]) -> None:
        """Replace the root state. Registered modules keep their getters and mutations.

        Args:
            state: New root state (deep-copied).
        """
        self._state = cp.deepcopy(dict(state))
        for name in self._modules:
            self._state.setdefault(name, {})
        self._touch()

    def snapshot(self) -> bytes:
        """Pickle the root state.

        Returns:
            Pickled bytes of the state tree.
        """
        return pickle.dumps(self._state)

    def restore(self, data: bytes) -> None:
        """Restore from pickle snapshot.

        Args:
            data: Pickled bytes from previous snapshot() call.
        """
        state = pickle.loads(data)  # nosec B301 - Only snapshots produced by snapshot()
        self.replace_state(state)
