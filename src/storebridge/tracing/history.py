"""Bounded in-memory mutation history."""

from __future__ import annotations

from collections import deque
from typing import Any

from storebridge.tracing.models import MutationRecord


class MutationHistory:
    """Keeps the last `max_records` commits of a store.

    Args:
        max_records: Capacity; the oldest records are evicted first.
    """

    def __init__(self, max_records: int = 1000):
        if max_records < 1:
            raise ValueError(f"max_records must be positive, got {max_records}")
        self._records: deque[MutationRecord] = deque(maxlen=max_records)

    def __call__(self, record: MutationRecord, state: dict[str, Any]) -> None:
        self.record(record)

    def record(self, record: MutationRecord) -> None:
        self._records.append(record)

    def records(self, path: str | None = None) -> list[MutationRecord]:
        if path is None:
            return list(self._records)
        return [r for r in self._records if r.path == path]

    def clear(self) -> None:
        self._records.clear()

    @property
    def record_count(self) -> int:
        return len(self._records)
