"""Namespace registration.

The namespace module is registered at most once per store; whether that
already happened is read from its `installed` getter.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial

from storebridge.core.mutation import assign, initialize, mutate, remove, replace
from storebridge.store.models import ModuleDescriptor
from storebridge.store.protocol import Store

_logger = logging.getLogger(__name__)


def installed_path(namespace: str) -> str:
    """Getter path answering whether the namespace is registered."""
    return f"{namespace}/installed"


def is_installed(store: Store, namespace: str) -> bool:
    """Check whether the namespace module is registered in the store.

    Args:
        store: Store to inspect.
        namespace: Namespace name.

    Returns:
        True if the `installed` getter exists and is truthy.
    """
    return bool(store.getters.get(installed_path(namespace), False))


def namespace_module(store: Store, namespace: str) -> ModuleDescriptor:
    """Build the namespace module descriptor.

    The state is seeded from whatever subtree the store already holds under
    the namespace name, so rehydrated state survives registration.

    Args:
        store: Store the module will be registered in.
        namespace: Namespace name.

    Returns:
        Namespaced descriptor with the `installed` getter and the mutations
        initialize, mutate, replace, assign and remove.
    """
    existing = store.state.get(namespace)
    state = dict(existing) if isinstance(existing, Mapping) else {}
    return ModuleDescriptor(
        state=state,
        getters={"installed": lambda state: True},
        mutations={
            "initialize": partial(initialize, set_key=store.set_key),
            "mutate": mutate,
            "replace": partial(replace, set_key=store.set_key, delete_key=store.delete_key),
            "assign": partial(assign, set_key=store.set_key, delete_key=store.delete_key),
            "remove": partial(remove, delete_key=store.delete_key),
        },
        namespaced=True,
    )


def ensure_namespace(store: Store, namespace: str) -> bool:
    """Register the namespace module unless it is already installed.

    Safe to call on every instance construction.

    Args:
        store: Target store.
        namespace: Namespace name.

    Returns:
        True if this call registered the module, False if it was present.
    """
    if is_installed(store, namespace):
        return False
    store.register_module(namespace, namespace_module(store, namespace))
    _logger.debug("Registered bridge namespace %s", namespace)
    return True
