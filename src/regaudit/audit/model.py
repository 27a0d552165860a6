"""
Audit domain models.

Pure domain types for the registration audit trail.

Architecture Rules:
- Only stdlib + typing allowed
- No I/O, no logging initialization
- All models are immutable (frozen dataclasses)

Design Principles:
- Immutable: a record cannot change after the emitter builds it
- Complete: every field is a string (or the timestamp), never None
- Opaque descriptors: event and module codes are supplied by callers
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any

# Sentinel for session identity that could not be resolved
NOT_AVAILABLE = "NA"


def _local_now() -> datetime:
    """Get current local time with its UTC offset."""
    return datetime.now().astimezone()


@dataclass(frozen=True, slots=True)
class EventDescriptor:
    """What happened: the category of the audited occurrence."""

    id: str
    name: str
    type: str


@dataclass(frozen=True, slots=True)
class ModuleDescriptor:
    """Where it happened: the subsystem the event originated from."""

    id: str
    name: str


# Field name -> serialized key
_WIRE_NAMES: dict[str, str] = {
    "timestamp": "actionTimeStamp",
    "application_id": "applicationId",
    "application_name": "applicationName",
    "created_by": "createdBy",
    "session_user_id": "sessionUserId",
    "session_user_name": "sessionUserName",
    "description": "description",
    "event_id": "eventId",
    "event_name": "eventName",
    "event_type": "eventType",
    "module_id": "moduleId",
    "module_name": "moduleName",
    "host_ip": "hostIp",
    "host_name": "hostName",
    "id": "id",
    "id_type": "idType",
}


@dataclass(frozen=True, slots=True)
class AuditRecord:
    """
    Immutable audit record handed to an AuditSink.

    Answers who (created_by, session_user_*), what (event_*), when
    (timestamp), where (module_*, host_*, application_*) and on what
    (id, id_type).

    Example:
        record = AuditRecord(
            event_id="EVT01",
            event_name="LOGIN",
            event_type="USER",
            module_id="MOD01",
            module_name="LOGIN_MODULE",
            created_by="John",
            session_user_id="U123",
            session_user_name="John",
        )
    """

    timestamp: datetime = field(default_factory=_local_now)

    # Application (from configuration)
    application_id: str = ""
    application_name: str = ""

    # Session identity
    created_by: str = NOT_AVAILABLE
    session_user_id: str = NOT_AVAILABLE
    session_user_name: str = NOT_AVAILABLE

    description: str = ""

    # Event classification
    event_id: str = ""
    event_name: str = ""
    event_type: str = ""

    # Origin
    module_id: str = ""
    module_name: str = ""
    host_ip: str = ""
    host_name: str = ""

    # Reference entity the event concerns
    id: str = ""
    id_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Keys follow the camelCase names used by the registration audit
        store. The output is JSON-safe.
        """
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            result[_WIRE_NAMES[f.name]] = value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuditRecord":
        """
        Create from a dictionary produced by to_dict().

        Missing or null values take the field defaults.
        """
        kwargs: dict[str, Any] = {}
        for name, key in _WIRE_NAMES.items():
            if data.get(key) is not None:
                kwargs[name] = data[key]

        timestamp = kwargs.get("timestamp")
        if isinstance(timestamp, str):
            kwargs["timestamp"] = datetime.fromisoformat(timestamp)

        return cls(**kwargs)
