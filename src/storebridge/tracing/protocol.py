"""Protocols for tracing infrastructure.

These protocols define the interface for mutation history backends,
allowing different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from storebridge.tracing.models import MutationRecord


@runtime_checkable
class HistoryStore(Protocol):
    """Protocol for storing and retrieving committed mutations.

    Implementations double as store subscribers:

        history = MutationHistory(max_records=500)
        unsubscribe = store.subscribe(history)

    Thread Safety:
        Not required; stores are single-threaded.
    """

    def __call__(self, record: MutationRecord, state: dict[str, Any]) -> None:
        """Subscriber entry point: record a completed commit."""
        ...

    def record(self, record: MutationRecord) -> None:
        """Store one mutation record.

        Note:
            Implementations may be bounded; older records may be evicted.
        """
        ...

    def records(self, path: str | None = None) -> list[MutationRecord]:
        """Get stored records, oldest first, optionally filtered by mutation path."""
        ...

    def clear(self) -> None:
        """Clear all stored history."""
        ...

    @property
    def record_count(self) -> int:
        """Number of records currently stored."""
        ...
