"""Shared fixtures for registration audit tests."""

import socket
from datetime import datetime, timedelta, timezone

import pytest

from regaudit.audit.model import EventDescriptor, ModuleDescriptor
from regaudit.core.config import MappingConfigSource
from regaudit.emitter import HostIdentity
from regaudit.sinks.memory import InMemoryAuditSink

FIXED_TIME = datetime(2026, 10, 18, 9, 30, tzinfo=timezone(timedelta(hours=5, minutes=30)))


@pytest.fixture
def login_event():
    return EventDescriptor(id="EVT01", name="LOGIN", type="USER")


@pytest.fixture
def login_module():
    return ModuleDescriptor(id="MOD01", name="LOGIN_MODULE")


@pytest.fixture
def config():
    return MappingConfigSource({
        "application-id": "REG",
        "application-name": "REGISTRATION",
        "fallback-host-ip": "192.168.1.1",
        "fallback-host-name": "fallback-host",
    })


@pytest.fixture
def sink():
    return InMemoryAuditSink()


@pytest.fixture
def resolving_host():
    return lambda: HostIdentity(ip="10.0.0.5", name="host1")


@pytest.fixture
def failing_host():
    def resolver():
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    return resolver


@pytest.fixture
def clock():
    return lambda: FIXED_TIME
