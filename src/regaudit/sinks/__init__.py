"""
Audit sink adapters.

Provides:
- InMemoryAuditSink: list-backed sink
- JSONLAuditSink: append-only JSON Lines file
- LoggingAuditSink: standard logging
- create_sink: factory driven by AuditConfig
"""

from regaudit.sinks.factory import create_sink
from regaudit.sinks.jsonl import JSONLAuditSink
from regaudit.sinks.log import LoggingAuditSink
from regaudit.sinks.memory import InMemoryAuditSink

__all__ = [
    "InMemoryAuditSink",
    "JSONLAuditSink",
    "LoggingAuditSink",
    "create_sink",
]
