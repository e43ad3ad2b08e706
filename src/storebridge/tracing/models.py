"""Data models for mutation tracing.

Records are storage-agnostic; `to_dict` yields plain data that any snapshot
format able to hold JSON can store.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class MutationRecord:
    """Record of one committed mutation.

    Attributes:
        sequence: Monotonic commit counter of the store (1 for the first commit).
        path: Mutation path, e.g. "bridge/mutate".
        payload: Payload passed to commit.
        timestamp: Unix timestamp when the commit completed.

    Example:
        record = MutationRecord(
            sequence=3,
            path="bridge/mutate",
            payload=MutatePayload("UserCard", "default", "name", "Ada"),
            timestamp=1704067200.0,
        )
    """

    sequence: int
    path: str
    payload: Any
    timestamp: float

    @property
    def namespace(self) -> str | None:
        """Namespace part of the path, None for root mutations."""
        namespace, sep, _ = self.path.rpartition("/")
        return namespace if sep else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary. Dataclass payloads become dicts."""
        payload = self.payload
        if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
            payload = dataclasses.asdict(payload)
        return {
            "sequence": self.sequence,
            "path": self.path,
            "payload": payload,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MutationRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            sequence=data["sequence"],
            path=data["path"],
            payload=data.get("payload"),
            timestamp=data["timestamp"],
        )
