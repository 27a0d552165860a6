"""
JSON Lines file sink.

Appends one JSON object per record. The file is opened per write so
rotation by external tools is safe.
"""

import json
import logging
import threading
from pathlib import Path

from regaudit.audit.model import AuditRecord
from regaudit.ports.errors import SinkWriteError
from regaudit.ports.sink import AuditSink

logger = logging.getLogger(__name__)


class JSONLAuditSink(AuditSink):
    """Append-only JSON Lines audit sink."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def write(self, record: AuditRecord) -> None:
        """
        Append a record to the file.

        Raises:
            SinkWriteError: If the file cannot be written.
        """
        line = json.dumps(record.to_dict(), separators=(",", ":"))
        try:
            with self._lock:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, "a", encoding="utf-8") as f:
                    f.write(line + "\n")
        except OSError as e:
            logger.error(f"Failed to write audit record to {self.path}: {e}")
            raise SinkWriteError(
                f"Cannot write audit record to {self.path}: {e}", code="io_error"
            ) from e
