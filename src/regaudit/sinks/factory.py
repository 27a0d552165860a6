"""
Sink factory.
"""

from pathlib import Path

from regaudit.core.config import AuditConfig
from regaudit.ports.errors import ConfigError
from regaudit.ports.sink import AuditSink
from regaudit.sinks.jsonl import JSONLAuditSink
from regaudit.sinks.log import LoggingAuditSink
from regaudit.sinks.memory import InMemoryAuditSink


def create_sink(config: AuditConfig, base_path: Path | None = None) -> AuditSink:
    """
    Create the sink selected by config.sink_backend.

    Args:
        config: Audit configuration.
        base_path: Directory that relative sink paths resolve against
            (default: current directory).

    Raises:
        ConfigError: If the backend is unknown.
    """
    backend = config.sink_backend

    if backend == "jsonl":
        path = Path(config.sink_path)
        if not path.is_absolute():
            path = (base_path or Path.cwd()) / path
        return JSONLAuditSink(path)
    if backend == "log":
        return LoggingAuditSink()
    if backend == "memory":
        return InMemoryAuditSink()

    raise ConfigError(f"Unknown sink backend: {backend}", code="unknown_backend")
