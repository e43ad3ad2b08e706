"""Store-side mutation payloads and operations."""

from storebridge.core.mutation.models import (
    AssignPayload,
    InitializePayload,
    KeyDeleter,
    KeySetter,
    MutatePayload,
    RemovePayload,
    ReplacePayload,
)
from storebridge.core.mutation.operations import (
    assign,
    initialize,
    mutate,
    plain_delete,
    plain_set,
    remove,
    replace,
)

__all__ = [
    # Payloads
    "InitializePayload",
    "MutatePayload",
    "ReplacePayload",
    "AssignPayload",
    "RemovePayload",
    "KeySetter",
    "KeyDeleter",
    # Operations
    "initialize",
    "mutate",
    "replace",
    "assign",
    "remove",
    "plain_set",
    "plain_delete",
]
