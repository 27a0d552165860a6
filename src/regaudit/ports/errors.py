"""
Audit error types.

Host lookup failures never surface as exceptions; they are recovered
inside the emitter. These classes cover the remaining failure modes of
the bundled adapters.
"""


class AuditError(Exception):
    """Base exception for audit errors."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


class SinkWriteError(AuditError):
    """Raised by a sink when a record could not be persisted."""

    pass


class ConfigError(AuditError):
    """Raised when audit configuration cannot be loaded."""

    pass
