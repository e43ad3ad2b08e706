"""Store protocol: the contract the bridge consumes.

Any object providing these members can back a bridge:
- a nested state tree readable by path
- module registration with state, getters and mutations
- a synchronous commit channel
- a getter surface
- reactive set/delete primitives for dynamically named keys

Usage:
    store = LocalStore()
    options = bridge(initial_state={"count": 0})(ComponentOptions(name="Counter"))
    counter = Component(options, store=store)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from storebridge.store.models import ModuleDescriptor
    from storebridge.tracing.models import MutationRecord

type Subscriber = Callable[["MutationRecord", dict[str, Any]], None]
"""Called after every successful commit with the record and the root state."""


@runtime_checkable
class Store(Protocol):
    """Abstract store interface. Implementations own the state tree."""

    @property
    def state(self) -> dict[str, Any]:
        """Root state tree: namespace -> subtree."""
        ...

    @property
    def getters(self) -> Mapping[str, Any]:
        """Derived values by path, e.g. getters["bridge/installed"]."""
        ...

    @property
    def version(self) -> int:
        """Counter bumped on every observable state change."""
        ...

    def register_module(self, name: str, descriptor: ModuleDescriptor) -> None:
        """Install a module subtree with its getters and mutations."""
        ...

    def has_module(self, name: str) -> bool:
        """Check whether a module is registered under name."""
        ...

    def commit(self, path: str, payload: Any = None) -> None:
        """Synchronously apply the named mutation."""
        ...

    def set_key(self, mapping: MutableMapping[str, Any], key: str, value: Any) -> None:
        """Introduce or overwrite a dynamically named key, observably."""
        ...

    def delete_key(self, mapping: MutableMapping[str, Any], key: str) -> None:
        """Remove a dynamically named key, observably."""
        ...

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register a commit subscriber. Returns an unsubscribe function."""
        ...
