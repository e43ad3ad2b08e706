"""Store backends."""

from storebridge.store.local import LocalStore
from storebridge.store.models import (
    Getters,
    ModuleDescriptor,
    ModuleRegisteredError,
    StoreError,
    UnknownMutationError,
)
from storebridge.store.protocol import Store, Subscriber

__all__ = [
    "Store",
    "Subscriber",
    "LocalStore",
    "ModuleDescriptor",
    "Getters",
    "StoreError",
    "UnknownMutationError",
    "ModuleRegisteredError",
]
