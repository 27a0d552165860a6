"""
Audit ports - Interface definitions for adapters.

Usage:
    from regaudit.ports import SessionProvider, ConfigSource, AuditSink

Architecture:
    - Ports are abstract interfaces (ABCs or Protocols)
    - Adapters (regaudit.session, regaudit.core.config, regaudit.sinks)
      provide concrete implementations
    - The emitter depends only on ports, never on adapters
"""

from regaudit.ports.config import ConfigKey, ConfigSource
from regaudit.ports.errors import AuditError, ConfigError, SinkWriteError
from regaudit.ports.session import SessionProvider, SessionUser
from regaudit.ports.sink import AuditSink

__all__ = [
    # Session
    "SessionUser",
    "SessionProvider",
    # Config
    "ConfigKey",
    "ConfigSource",
    # Sink
    "AuditSink",
    # Errors
    "AuditError",
    "SinkWriteError",
    "ConfigError",
]
