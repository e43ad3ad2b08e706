"""Bridge orchestration: binds component instances to store slices.

Architecture Note:
    bridge/ is the stateful layer. It talks to a store through the Store
    protocol, using the pure mutations and key helpers from core/.
"""

from storebridge.bridge.bridge import Bridge, SliceHandle, bridge
from storebridge.bridge.lifecycle import (
    Binding,
    BindingLifecycle,
    BindingState,
    attach_lifecycle,
    binding_of,
    lifecycle_of,
)
from storebridge.bridge.models import BridgeOptions, ComponentOptions, Hook
from storebridge.bridge.proxy import FieldProxy
from storebridge.bridge.registry import ensure_namespace, installed_path, is_installed, namespace_module
from storebridge.bridge.slices import ensure_slice, has_slice

__all__ = [
    "bridge",
    "Bridge",
    "BridgeOptions",
    "ComponentOptions",
    "Hook",
    "SliceHandle",
    "Binding",
    "BindingLifecycle",
    "BindingState",
    "attach_lifecycle",
    "binding_of",
    "lifecycle_of",
    "FieldProxy",
    "ensure_namespace",
    "installed_path",
    "is_installed",
    "namespace_module",
    "ensure_slice",
    "has_slice",
]
