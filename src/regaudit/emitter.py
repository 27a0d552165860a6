"""
Audit event emission.

AuditEmitter turns a semantic event (event descriptor, module descriptor,
description and reference id) into a complete AuditRecord and hands it
to an AuditSink. Session identity, host identity and application
identity are resolved on every call.

The emitter holds no mutable state: its only attributes are the
injected collaborators, so a single instance can be shared between
threads and asyncio tasks.

Usage:
    emitter = AuditEmitter(
        session=SessionContext(),
        config=load_config(),
        sink=JSONLAuditSink(Path(".regaudit/audit.jsonl")),
    )
    emitter.record(LOGIN, LOGIN_MODULE, "user login", "U123", "USER_ID")
"""

import logging
import socket
from datetime import datetime
from typing import TYPE_CHECKING, Callable, NamedTuple

from regaudit.audit.model import (
    NOT_AVAILABLE,
    AuditRecord,
    EventDescriptor,
    ModuleDescriptor,
)
from regaudit.ports.config import ConfigKey, ConfigSource
from regaudit.ports.session import SessionProvider

if TYPE_CHECKING:
    from regaudit.ports.sink import AuditSink

logger = logging.getLogger(__name__)


class HostIdentity(NamedTuple):
    """Network identity of the machine recording the event."""

    ip: str
    name: str


def resolve_local_host() -> HostIdentity:
    """
    Resolve the local host's address and name.

    Raises:
        OSError: If the host name cannot be resolved to an address
            (socket.gaierror / socket.herror).
    """
    name = socket.gethostname()
    ip = socket.gethostbyname(name)
    return HostIdentity(ip=ip, name=name)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class AuditEmitter:
    """
    Builds audit records and forwards them to a sink.

    Args:
        session: Provides the active user's id and name.
        config: Provides application identity and fallback host values.
        sink: Receives each finished record.
        host_resolver: Returns the local HostIdentity or raises OSError.
        clock: Returns the record timestamp (timezone-aware).
    """

    def __init__(
        self,
        session: SessionProvider,
        config: ConfigSource,
        sink: "AuditSink",
        host_resolver: Callable[[], HostIdentity] = resolve_local_host,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        self._session = session
        self._config = config
        self._sink = sink
        self._host_resolver = host_resolver
        self._clock = clock

    @property
    def sink(self) -> "AuditSink":
        return self._sink

    def record(
        self,
        event: EventDescriptor,
        module: ModuleDescriptor,
        description: str,
        ref_id: str,
        ref_id_type: str,
    ) -> None:
        """
        Record one audit event.

        Missing session identity is recorded as "NA". A failed host
        lookup falls back to the configured host values. Exceptions from
        the sink propagate unchanged.

        Args:
            event: What happened.
            module: Where in the system it happened.
            description: Free-text description of the event.
            ref_id: Identifier of the entity the event concerns.
            ref_id_type: Type of ref_id (e.g. "USER_ID").
        """
        user = self._session.current_user()
        user_id = NOT_AVAILABLE if user.user_id is None else user.user_id
        user_name = NOT_AVAILABLE if user.name is None else user.name

        host = self.resolve_host()

        record = AuditRecord(
            timestamp=self._clock(),
            application_id=self._config_value(ConfigKey.APPLICATION_ID),
            application_name=self._config_value(ConfigKey.APPLICATION_NAME),
            created_by=user_name,
            session_user_id=user_id,
            session_user_name=user_name,
            description=description,
            event_id=event.id,
            event_name=event.name,
            event_type=event.type,
            module_id=module.id,
            module_name=module.name,
            host_ip=host.ip,
            host_name=host.name,
            id=ref_id,
            id_type=ref_id_type,
        )

        logger.debug(f"Writing audit event {record.event_id} for {record.id_type}={record.id}")
        self._sink.write(record)

    def resolve_host(self) -> HostIdentity:
        """
        Resolve host identity, falling back to configuration.

        Absent fallback values are returned as empty strings; they are
        not replaced with the "NA" sentinel.
        """
        try:
            return self._host_resolver()
        except OSError as e:
            logger.warning(f"Host lookup failed, using configured host identity: {e}")
            return HostIdentity(
                ip=self._config_value(ConfigKey.FALLBACK_HOST_IP),
                name=self._config_value(ConfigKey.FALLBACK_HOST_NAME),
            )

    def _config_value(self, key: ConfigKey) -> str:
        value = self._config.get(key)
        return "" if value is None else value
