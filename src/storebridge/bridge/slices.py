"""Lazy slice initialization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from storebridge.core.mutation import InitializePayload
from storebridge.store.protocol import Store

_logger = logging.getLogger(__name__)


def has_slice(state: Mapping[str, Any], namespace: str, component_kind: str, key: str) -> bool:
    """Check whether state[namespace][component_kind][key] exists."""
    slices = state.get(namespace, {}).get(component_kind)
    return slices is not None and key in slices


def ensure_slice(
    store: Store,
    namespace: str,
    component_kind: str,
    key: str,
    initial_state: Mapping[str, Any],
) -> bool:
    """Create the slice for (component_kind, key) if it does not exist yet.

    The slice starts as a fresh shallow copy of `initial_state` and is created
    through the store's commit channel. Existing slices are never overwritten.

    Args:
        store: Store holding the registered namespace.
        namespace: Namespace name.
        component_kind: Component kind name.
        key: Instance key.
        initial_state: Declared fields and their initial values.

    Returns:
        True if the slice was created, False if it already existed.
    """
    if has_slice(store.state, namespace, component_kind, key):
        return False
    store.commit(
        f"{namespace}/initialize",
        InitializePayload(component_kind=component_kind, key=key, value=dict(initial_state)),
    )
    _logger.debug("Created slice %s/%s[%r]", namespace, component_kind, key)
    return True
