"""Core type definitions for storebridge."""

from collections.abc import Callable
from typing import Any

type Copy[T] = T
"""Type alias indicating a value is a copy that won't write back to the store.

When you see `Copy[T]` in a return type, the returned value is a deep copy.
Mutations to this copy do NOT affect store state. To persist changes,
commit a mutation or assign through a bridged field.
"""

type SliceState = dict[str, Any]
"""Field name -> current value for one (component kind, instance key) pair."""

type KeyGenerator = Callable[[Any], Any]
"""Receives the instance under construction, returns its instance key."""
