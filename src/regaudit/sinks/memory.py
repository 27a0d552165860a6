"""
In-process audit sink.
"""

import threading

from regaudit.audit.model import AuditRecord
from regaudit.ports.sink import AuditSink


class InMemoryAuditSink(AuditSink):
    """
    Keeps records in a list.

    Useful for tests and for embedding the emitter where records are
    collected and shipped elsewhere in bulk.
    """

    def __init__(self) -> None:
        self._records: list[AuditRecord] = []
        self._lock = threading.Lock()

    def write(self, record: AuditRecord) -> None:
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> tuple[AuditRecord, ...]:
        """Snapshot of the records written so far, oldest first."""
        with self._lock:
            return tuple(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
