"""Per-instance binding lifecycle.

States:
    UNBOUND -> ACTIVATING -> ACTIVE -> DESTROYED

Activation order is fixed: key generation, namespace registration, slice
initialization, then the binding is attached. A failure while ACTIVATING
leaves no binding behind, so field proxies never see a half-built one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from storebridge.bridge.models import BridgeOptions
from storebridge.bridge.registry import ensure_namespace
from storebridge.bridge.slices import ensure_slice
from storebridge.core.errors import IntegrationError, LifecycleError
from storebridge.core.key import generate_key
from storebridge.core.mutation import RemovePayload
from storebridge.store.protocol import Store

_logger = logging.getLogger(__name__)

LIFECYCLES_ATTR = "__storebridge_lifecycles__"


class BindingState(Enum):
    """Attach/detach state of one instance's binding."""

    UNBOUND = auto()
    ACTIVATING = auto()
    ACTIVE = auto()
    DESTROYED = auto()


_TRANSITIONS: dict[BindingState, frozenset[BindingState]] = {
    BindingState.UNBOUND: frozenset({BindingState.ACTIVATING}),
    BindingState.ACTIVATING: frozenset({BindingState.ACTIVE}),
    BindingState.ACTIVE: frozenset({BindingState.DESTROYED}),
    BindingState.DESTROYED: frozenset(),
}


@dataclass(frozen=True, slots=True)
class Binding:
    """Coordinates linking one instance to its slice. Never stored in the store."""

    component_kind: str
    namespace: str
    prop_name: str
    instance_key: str


class BindingLifecycle:
    """Drives one instance through activation and teardown.

    Args:
        options: Bridge configuration.
        component_kind: Kind the instance belongs to.
    """

    def __init__(self, options: BridgeOptions, component_kind: str):
        self._options = options
        self._component_kind = component_kind
        self._state = BindingState.UNBOUND
        self._binding: Binding | None = None
        self._store: Store | None = None

    @property
    def state(self) -> BindingState:
        return self._state

    @property
    def binding(self) -> Binding | None:
        """The attached binding, None until activation completed with a store."""
        return self._binding

    @property
    def store(self) -> Store | None:
        return self._store

    @property
    def options(self) -> BridgeOptions:
        return self._options

    def _transition(self, target: BindingState) -> None:
        if target not in _TRANSITIONS[self._state]:
            raise LifecycleError(
                f"Cannot move {self._component_kind} binding from "
                f"{self._state.name} to {target.name}"
            )
        self._state = target

    def activate(self, instance: Any) -> Binding | None:
        """Bind the instance to its slice.

        Args:
            instance: Instance under construction; must expose `store`.

        Returns:
            The attached binding, or None when a lenient integration error
            left the instance unbound.

        Raises:
            IntegrationError: If the instance has no store (STRICT mode).
            KeyGenerationError: If the key is invalid (STRICT mode).
            LifecycleError: If the lifecycle was already activated.
        """
        self._transition(BindingState.ACTIVATING)
        options = self._options

        store = getattr(instance, "store", None)
        if store is None:
            options.error_mode.get_handler()(
                IntegrationError(
                    f"No store is reachable from {self._component_kind} instance; "
                    f"bridged fields stay unbound"
                )
            )
            self._transition(BindingState.ACTIVE)
            return None

        key = generate_key(
            instance,
            options.key,
            error_mode=options.error_mode,
            default=options.default_key,
        )
        ensure_namespace(store, options.namespace)
        ensure_slice(store, options.namespace, self._component_kind, key, options.initial_state)

        self._store = store
        self._binding = Binding(
            component_kind=self._component_kind,
            namespace=options.namespace,
            prop_name=options.prop_name,
            instance_key=key,
        )
        _define_readonly(instance, options.prop_name, key)
        self._transition(BindingState.ACTIVE)
        return self._binding

    def destroy(self, instance: Any) -> None:
        """Tear the binding down, removing the slice if configured to.

        Args:
            instance: Instance being destroyed.

        Raises:
            LifecycleError: If the lifecycle is not ACTIVE.
        """
        self._transition(BindingState.DESTROYED)
        binding = self._binding
        if not self._options.remove_on_destroy or binding is None or self._store is None:
            return
        self._store.commit(
            f"{binding.namespace}/remove",
            RemovePayload(component_kind=binding.component_kind, key=binding.instance_key),
        )
        _logger.debug(
            "Removed slice %s/%s[%r]",
            binding.namespace,
            binding.component_kind,
            binding.instance_key,
        )


def _define_readonly(instance: Any, name: str, value: Any) -> None:
    define = getattr(instance, "define_readonly", None)
    if define is not None:
        define(name, value)
    else:
        setattr(instance, name, value)


def attach_lifecycle(instance: Any, lifecycle: BindingLifecycle) -> None:
    """Register a lifecycle on the instance under its namespace.

    Raises:
        LifecycleError: If the instance already has a lifecycle for that namespace.
    """
    lifecycles = vars(instance).setdefault(LIFECYCLES_ATTR, {})
    namespace = lifecycle.options.namespace
    if namespace in lifecycles:
        raise LifecycleError(f"Instance is already bound in namespace {namespace!r}")
    lifecycles[namespace] = lifecycle


def lifecycle_of(instance: Any, namespace: str) -> BindingLifecycle | None:
    """Get the instance's lifecycle for a namespace, if any."""
    return vars(instance).get(LIFECYCLES_ATTR, {}).get(namespace)


def binding_of(instance: Any, namespace: str) -> Binding | None:
    """Get the instance's attached binding for a namespace, if any."""
    lifecycle = lifecycle_of(instance, namespace)
    return lifecycle.binding if lifecycle is not None else None
