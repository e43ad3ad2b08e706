"""Bridge factory: binds a component kind's fields to store slices.

Usage:
    counter_bridge = bridge(initial_state={"count": 0}, key=lambda vm: vm.props["id"])
    Counter = define_component(counter_bridge(ComponentOptions(name="Counter")))

    a = Counter(store=store, id="a")
    b = Counter(store=store, id="b")
    a.count = 5            # store.state["bridge"]["Counter"]["a"]["count"] == 5
    b.count                # 0, isolated slice

    # Outside any instance lifecycle (e.g. pre-populating state)
    handle = counter_bridge.get_store(store)
    handle.replace({"count": 10})
"""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from typing import Any

from storebridge.bridge.lifecycle import BindingLifecycle, attach_lifecycle, lifecycle_of
from storebridge.bridge.models import BridgeOptions, ComponentOptions
from storebridge.bridge.proxy import FieldProxy
from storebridge.bridge.registry import ensure_namespace
from storebridge.bridge.slices import ensure_slice
from storebridge.config.settings import BridgeSettings
from storebridge.core.errors import ConfigurationError, ErrorMode
from storebridge.core.key import constant_key, generate_key, is_valid_key
from storebridge.core.mutation import AssignPayload, ReplacePayload
from storebridge.core.types import Copy, KeyGenerator, SliceState
from storebridge.store.protocol import Store


class SliceHandle:
    """Direct access to one slice, outside any instance lifecycle.

    Args:
        store: Store holding the slice.
        namespace: Namespace name.
        component_kind: Component kind name.
        key: Instance key.
    """

    def __init__(self, store: Store, namespace: str, component_kind: str, key: str):
        self._store = store
        self._namespace = namespace
        self._component_kind = component_kind
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @property
    def component_kind(self) -> str:
        return self._component_kind

    @property
    def state(self) -> SliceState:
        """Live slice. Read it, but change it via replace() or assign()."""
        return self._store.state[self._namespace][self._component_kind][self._key]

    def snapshot(self) -> Copy[SliceState]:
        """Deep copy of the current slice."""
        return copy.deepcopy(self.state)

    def replace(self, values: Mapping[str, Any]) -> None:
        """Make the slice hold exactly `values`."""
        self._store.commit(
            f"{self._namespace}/replace",
            ReplacePayload(component_kind=self._component_kind, key=self._key, value=values),
        )

    def assign(self, values: Mapping[str, Any]) -> None:
        """Update the slice's existing fields from `values`, ignoring unknown keys."""
        self._store.commit(
            f"{self._namespace}/assign",
            AssignPayload(component_kind=self._component_kind, key=self._key, values=values),
        )


class Bridge:
    """A configured bridge. Serves exactly one component kind.

    Calling the bridge with a component's options returns transformed options
    whose instances read and write their fields through the store.

    Args:
        options: Immutable bridge configuration.
    """

    def __init__(self, options: BridgeOptions):
        self._options = options
        self._component_kind: str | None = None

    def __repr__(self) -> str:
        return (
            f"Bridge(namespace={self.namespace!r}, component_kind={self._component_kind!r}, "
            f"fields={self._options.fields!r})"
        )

    @property
    def options(self) -> BridgeOptions:
        return self._options

    @property
    def namespace(self) -> str:
        return self._options.namespace

    @property
    def prop_name(self) -> str:
        return self._options.prop_name

    @property
    def key(self) -> KeyGenerator:
        """The key generator, callable without an instance for constant keys."""
        return self._options.key

    @property
    def component_kind(self) -> str | None:
        """Bound component kind, None until the bridge transformed a component."""
        return self._component_kind

    def _bind_kind(self, name: str | None) -> str:
        if not is_valid_key(name):
            raise ConfigurationError("Component name must be set to a non-empty string")
        assert name is not None
        if self._component_kind is not None and self._component_kind != name:
            raise ConfigurationError(
                f"Bridge is bound to {self._component_kind!r}; create another bridge for {name!r}"
            )
        self._component_kind = name
        return name

    def __call__(self, component_options: ComponentOptions) -> ComponentOptions:
        """Transform a component's options.

        Adds one FieldProxy per declared field to `computed` and wraps the
        `before_create` and `destroyed` hooks. User hooks run after the
        bridge's own work.

        Args:
            component_options: Options of the component kind to bridge.

        Returns:
            New options; the given ones are left untouched.

        Raises:
            ConfigurationError: If the name is missing or the bridge already
                serves another kind.
        """
        options = self._options
        component_kind = self._bind_kind(component_options.name)

        proxies = {
            name: FieldProxy(
                name,
                options.namespace,
                cache=options.cache,
                error_mode=options.error_mode,
            )
            for name in options.fields
        }
        user_before_create = component_options.before_create
        user_destroyed = component_options.destroyed

        def before_create(instance: Any) -> None:
            lifecycle = BindingLifecycle(options, component_kind)
            attach_lifecycle(instance, lifecycle)
            lifecycle.activate(instance)
            if user_before_create is not None:
                user_before_create(instance)

        def destroyed(instance: Any) -> None:
            lifecycle = lifecycle_of(instance, options.namespace)
            if lifecycle is not None:
                lifecycle.destroy(instance)
            if user_destroyed is not None:
                user_destroyed(instance)

        return dataclasses.replace(
            component_options,
            computed={**component_options.computed, **proxies},
            before_create=before_create,
            destroyed=destroyed,
        )

    def get_store(self, store: Store, instance: Any = None) -> SliceHandle:
        """Open the slice for `instance` without going through a lifecycle.

        Uses the same key generation and initialization path as instance
        construction, so the slice exists once this returns.

        Args:
            store: Target store.
            instance: Passed to the key generator; None for constant keys.

        Returns:
            Handle over the slice.

        Raises:
            ConfigurationError: If the bridge has not been bound to a component kind.
        """
        if self._component_kind is None:
            raise ConfigurationError("Bridge is not bound to a component kind yet")
        options = self._options
        key = generate_key(
            instance,
            options.key,
            error_mode=options.error_mode,
            default=options.default_key,
        )
        ensure_namespace(store, options.namespace)
        ensure_slice(store, options.namespace, self._component_kind, key, options.initial_state)
        return SliceHandle(store, options.namespace, self._component_kind, key)


def bridge(
    *,
    namespace: str | None = None,
    prop_name: str | None = None,
    initial_state: Mapping[str, Any] | None = None,
    key: KeyGenerator | None = None,
    remove_on_destroy: bool = False,
    error_mode: ErrorMode | str | None = None,
    cache: bool | None = None,
    settings: BridgeSettings | None = None,
) -> Bridge:
    """Create a bridge.

    Unset arguments fall back to `settings` (by default loaded from the
    STOREBRIDGE_* environment).

    Args:
        namespace: Store module holding the slices.
        prop_name: Instance attribute exposing the instance key.
        initial_state: Declared field -> initial value.
        key: Instance key generator; defaults to the constant default key.
        remove_on_destroy: Delete the slice on instance teardown.
        error_mode: STRICT or LENIENT (enum or name).
        cache: Memoize field reads.
        settings: Deployment settings.

    Returns:
        Configured Bridge.
    """
    settings = settings or BridgeSettings()
    options = BridgeOptions(
        namespace=namespace or settings.namespace,
        prop_name=prop_name or settings.prop_name,
        initial_state=initial_state or {},
        key=key or constant_key(settings.default_key),
        remove_on_destroy=remove_on_destroy,
        error_mode=ErrorMode.parse(error_mode or settings.error_mode),
        cache=settings.read_cache_enabled() if cache is None else cache,
        default_key=settings.default_key,
    )
    return Bridge(options)
