"""
Registration audit - audit event recording for the registration client.

Modules:
- audit: Immutable audit domain models
- ports: Interfaces for session, configuration and sinks
- emitter: AuditEmitter, which assembles and emits records
- session: Context-local session identity
- core: YAML / environment configuration
- sinks: Sink adapters
- cli: Command line interface
"""

__version__ = "0.1.0"

from regaudit.audit import (
    NOT_AVAILABLE,
    AuditRecord,
    EventDescriptor,
    ModuleDescriptor,
)
from regaudit.core import AuditConfig, MappingConfigSource, load_config
from regaudit.emitter import AuditEmitter, HostIdentity, resolve_local_host
from regaudit.ports import (
    AuditError,
    AuditSink,
    ConfigError,
    ConfigKey,
    ConfigSource,
    SessionProvider,
    SessionUser,
    SinkWriteError,
)
from regaudit.session import SessionContext, StaticSession
from regaudit.sinks import (
    InMemoryAuditSink,
    JSONLAuditSink,
    LoggingAuditSink,
    create_sink,
)

__all__ = [
    # Models
    "AuditRecord",
    "EventDescriptor",
    "ModuleDescriptor",
    "NOT_AVAILABLE",
    # Emitter
    "AuditEmitter",
    "HostIdentity",
    "resolve_local_host",
    # Ports
    "SessionUser",
    "SessionProvider",
    "ConfigKey",
    "ConfigSource",
    "AuditSink",
    # Errors
    "AuditError",
    "SinkWriteError",
    "ConfigError",
    # Adapters
    "SessionContext",
    "StaticSession",
    "AuditConfig",
    "MappingConfigSource",
    "load_config",
    "InMemoryAuditSink",
    "JSONLAuditSink",
    "LoggingAuditSink",
    "create_sink",
]
