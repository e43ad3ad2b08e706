"""Bridge configuration and component option models."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from storebridge.core.errors import ErrorMode
from storebridge.core.key import DEFAULT_KEY
from storebridge.core.key import default_key as key_from_default
from storebridge.core.types import KeyGenerator

if TYPE_CHECKING:
    from storebridge.store.protocol import Store

type Hook = Callable[[Any], None]
"""Lifecycle hook receiving the instance."""


@dataclass(frozen=True, slots=True)
class BridgeOptions:
    """Immutable configuration created once per bridge() call.

    Attributes:
        namespace: Store module holding the slices.
        prop_name: Instance attribute exposing the instance key.
        initial_state: Declared field -> initial value; fixes the slice field set.
        key: Generator producing the instance key from the instance.
        remove_on_destroy: Delete the slice when the instance is destroyed.
        error_mode: Severity for recoverable errors.
        cache: Memoize field reads between store changes.
        default_key: Key substituted after a lenient key generation failure.
    """

    namespace: str = "bridge"
    prop_name: str = "bridge_key"
    initial_state: Mapping[str, Any] = field(default_factory=dict)
    key: KeyGenerator = key_from_default
    remove_on_destroy: bool = False
    error_mode: ErrorMode = ErrorMode.STRICT
    cache: bool = True
    default_key: str = DEFAULT_KEY

    def __post_init__(self) -> None:
        # Freeze the declaration so the field set cannot drift after binding
        object.__setattr__(self, "initial_state", MappingProxyType(dict(self.initial_state)))

    @property
    def fields(self) -> tuple[str, ...]:
        """Declared field names, in declaration order."""
        return tuple(self.initial_state)


@dataclass(slots=True)
class ComponentOptions:
    """Descriptor of a component kind, as handed to the host framework.

    Attributes:
        name: Component kind name. Required by bridges.
        computed: Class-level attributes (properties, descriptors) of instances.
        before_create: Hook run while the instance is constructed.
        destroyed: Hook run when the instance is torn down.
        store: Store used when the instance is not given one explicitly.
        extra: Any other host-specific options, passed through untouched.
    """

    name: str | None = None
    computed: dict[str, Any] = field(default_factory=dict)
    before_create: Hook | None = None
    destroyed: Hook | None = None
    store: Store | None = None
    extra: dict[str, Any] = field(default_factory=dict)
