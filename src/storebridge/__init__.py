"""storebridge: keyed per-instance component state inside one shared store.

Usage:
    from storebridge import ComponentOptions, LocalStore, bridge, define_component

    tabs = bridge(initial_state={"scroll": 0}, key=lambda vm: vm.props["tab"])
    Tab = define_component(tabs(ComponentOptions(name="Tab")))

    store = LocalStore()
    inbox = Tab(store=store, tab="inbox")
    inbox.scroll = 120
    store.state["bridge"]["Tab"]["inbox"]["scroll"]  # 120
"""

__version__ = "0.1.0"

# Core primitives
from storebridge.core import (
    DEFAULT_KEY,
    BridgeError,
    ConfigurationError,
    Copy,
    ErrorMode,
    IntegrationError,
    KeyGenerationError,
    LifecycleError,
    SliceState,
    default_key,
    generate_key,
)

# Bridge
from storebridge.bridge import (
    Binding,
    BindingState,
    Bridge,
    BridgeOptions,
    ComponentOptions,
    FieldProxy,
    SliceHandle,
    binding_of,
    bridge,
)

# Configuration
from storebridge.config import BridgeSettings

# Host
from storebridge.host import Component, define_component

# Store
from storebridge.store import LocalStore, ModuleDescriptor, Store, StoreError

# Tracing
from storebridge.tracing import MutationHistory, MutationRecord

__all__ = [
    # Version
    "__version__",
    # Core
    "DEFAULT_KEY",
    "Copy",
    "SliceState",
    "ErrorMode",
    "BridgeError",
    "ConfigurationError",
    "IntegrationError",
    "KeyGenerationError",
    "LifecycleError",
    "default_key",
    "generate_key",
    # Bridge
    "bridge",
    "Bridge",
    "BridgeOptions",
    "ComponentOptions",
    "FieldProxy",
    "SliceHandle",
    "Binding",
    "BindingState",
    "binding_of",
    # Config
    "BridgeSettings",
    # Host
    "Component",
    "define_component",
    # Store
    "Store",
    "LocalStore",
    "ModuleDescriptor",
    "StoreError",
    # Tracing
    "MutationHistory",
    "MutationRecord",
]
