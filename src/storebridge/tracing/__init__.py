"""Tracing infrastructure for inspecting store mutations.

Usage:
    from storebridge.tracing import MutationHistory

    history = MutationHistory(max_records=100)
    store.subscribe(history)
    ...
    for record in history.records("bridge/mutate"):
        print(record.to_dict())
"""

from storebridge.tracing.history import MutationHistory
from storebridge.tracing.models import MutationRecord
from storebridge.tracing.protocol import HistoryStore

__all__ = [
    "HistoryStore",
    "MutationHistory",
    "MutationRecord",
]
