"""
Logging sink.

Forwards records to the standard logging system, leaving durability to
whatever handlers the host application has configured.
"""

import logging

from regaudit.audit.model import AuditRecord
from regaudit.ports.sink import AuditSink


class LoggingAuditSink(AuditSink):
    """Emits one log line per audit record."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        self.logger = logger or logging.getLogger("regaudit.audit")
        self.level = level

    def write(self, record: AuditRecord) -> None:
        self.logger.log(
            self.level,
            f"AUDIT {record.event_id} {record.event_name} by {record.created_by} "
            f"on {record.id_type}={record.id}: {record.description}",
            extra={"audit": record.to_dict()},
        )
