"""
Audit sink port.

A sink takes ownership of a finished AuditRecord and persists it. The
emitter calls write() exactly once per recorded event and lets any
exception raised here reach its caller untouched.
"""

from abc import ABC, abstractmethod

from regaudit.audit.model import AuditRecord


class AuditSink(ABC):
    """Abstract base for audit record persistence."""

    @abstractmethod
    def write(self, record: AuditRecord) -> None:
        """
        Persist a single audit record.

        Args:
            record: The completed, immutable audit record.

        Raises:
            SinkWriteError: If the bundled adapters fail to persist.
                Third-party sinks may raise their own exceptions.
        """
        ...
