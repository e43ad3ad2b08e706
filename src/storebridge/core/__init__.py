"""Core functionalities: stateless primitives.

Architecture Note:
    core/ contains pure, stateless functionalities: key generation, mutation
    operations and error types. They never hold a store reference.
    For stateful orchestration, see store/ and bridge/.
"""

from storebridge.core.errors import (
    BridgeError,
    ConfigurationError,
    ErrorMode,
    IntegrationError,
    KeyGenerationError,
    LifecycleError,
)
from storebridge.core.key import DEFAULT_KEY, default_key, generate_key, is_valid_key
from storebridge.core.mutation import (
    AssignPayload,
    InitializePayload,
    MutatePayload,
    RemovePayload,
    ReplacePayload,
    assign,
    initialize,
    mutate,
    remove,
    replace,
)
from storebridge.core.types import Copy, KeyGenerator, SliceState

__all__ = [
    # Types
    "Copy",
    "KeyGenerator",
    "SliceState",
    # Errors
    "BridgeError",
    "ConfigurationError",
    "IntegrationError",
    "KeyGenerationError",
    "LifecycleError",
    "ErrorMode",
    # Keys
    "DEFAULT_KEY",
    "default_key",
    "generate_key",
    "is_valid_key",
    # Mutations
    "InitializePayload",
    "MutatePayload",
    "ReplacePayload",
    "AssignPayload",
    "RemovePayload",
    "initialize",
    "mutate",
    "replace",
    "assign",
    "remove",
]
