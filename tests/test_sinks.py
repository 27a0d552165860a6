"""Tests for audit sink adapters."""

import json
import logging
import threading
from pathlib import Path
from unittest.mock import patch

import pytest

from regaudit.audit.model import AuditRecord
from regaudit.core.config import AuditConfig
from regaudit.ports.errors import ConfigError, SinkWriteError
from regaudit.ports.sink import AuditSink
from regaudit.sinks import (
    InMemoryAuditSink,
    JSONLAuditSink,
    LoggingAuditSink,
    create_sink,
)


def sample_record(n: int = 1) -> AuditRecord:
    return AuditRecord(
        application_id="REG",
        created_by="John",
        session_user_id="U123",
        session_user_name="John",
        description=f"event {n}",
        event_id="EVT01",
        event_name="LOGIN",
        event_type="USER",
        module_id="MOD01",
        module_name="LOGIN_MODULE",
        host_ip="10.0.0.5",
        host_name="host1",
        id=f"U{n}",
        id_type="USER_ID",
    )


class TestAuditSinkBase:
    """Tests for the AuditSink port."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            AuditSink()  # type: ignore[abstract]


class TestInMemoryAuditSink:
    """Tests for InMemoryAuditSink."""

    def test_write_and_snapshot(self):
        sink = InMemoryAuditSink()
        record = sample_record()

        sink.write(record)
        snapshot = sink.records
        sink.write(sample_record(2))

        assert snapshot == (record,)
        assert len(sink) == 2

    def test_clear(self):
        sink = InMemoryAuditSink()
        sink.write(sample_record())

        sink.clear()

        assert sink.records == ()

    def test_concurrent_writes(self):
        sink = InMemoryAuditSink()

        def worker():
            for i in range(50):
                sink.write(sample_record(i))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(sink) == 200


class TestJSONLAuditSink:
    """Tests for JSONLAuditSink."""

    def test_appends_lines(self, tmp_path):
        path = tmp_path / "audit" / "events.jsonl"
        sink = JSONLAuditSink(path)

        sink.write(sample_record(1))
        sink.write(sample_record(2))

        lines = path.read_text().strip().split("\n")
        assert len(lines) == 2
        first = json.loads(lines[0])
        assert first["eventId"] == "EVT01"
        assert first["id"] == "U1"
        assert first["createdBy"] == "John"
        restored = AuditRecord.from_dict(json.loads(lines[1]))
        assert restored.id == "U2"
        assert restored.timestamp.tzinfo is not None

    def test_preserves_existing_content(self, tmp_path):
        path = tmp_path / "events.jsonl"
        path.write_text('{"existing": true}\n')

        JSONLAuditSink(path).write(sample_record())

        lines = path.read_text().strip().split("\n")
        assert json.loads(lines[0]) == {"existing": True}
        assert json.loads(lines[1])["description"] == "event 1"

    def test_write_failure_raises_sink_error(self, tmp_path):
        sink = JSONLAuditSink(tmp_path / "events.jsonl")

        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(SinkWriteError) as exc_info:
                sink.write(sample_record())

        assert exc_info.value.code == "io_error"
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_path_is_directory(self, tmp_path):
        sink = JSONLAuditSink(tmp_path)

        with pytest.raises(SinkWriteError):
            sink.write(sample_record())


class TestLoggingAuditSink:
    """Tests for LoggingAuditSink."""

    def test_logs_record(self, caplog):
        sink = LoggingAuditSink()

        with caplog.at_level(logging.INFO, logger="regaudit.audit"):
            sink.write(sample_record())

        assert len(caplog.records) == 1
        log_record = caplog.records[0]
        assert "EVT01" in log_record.getMessage()
        assert "John" in log_record.getMessage()
        assert log_record.audit["sessionUserId"] == "U123"

    def test_custom_logger_and_level(self, caplog):
        logger = logging.getLogger("tests.audit")
        sink = LoggingAuditSink(logger=logger, level=logging.WARNING)

        with caplog.at_level(logging.WARNING, logger="tests.audit"):
            sink.write(sample_record())

        assert caplog.records[0].levelno == logging.WARNING
        assert caplog.records[0].name == "tests.audit"


class TestCreateSink:
    """Tests for the sink factory."""

    def test_jsonl_relative_to_base(self, tmp_path):
        sink = create_sink(AuditConfig(sink_path="out/audit.jsonl"), base_path=tmp_path)

        assert isinstance(sink, JSONLAuditSink)
        assert sink.path == tmp_path / "out" / "audit.jsonl"

    def test_jsonl_absolute_path(self, tmp_path):
        target = tmp_path / "abs.jsonl"

        sink = create_sink(AuditConfig(sink_path=str(target)), base_path=Path("/elsewhere"))

        assert sink.path == target

    def test_log_backend(self):
        assert isinstance(create_sink(AuditConfig(sink_backend="log")), LoggingAuditSink)

    def test_memory_backend(self):
        assert isinstance(create_sink(AuditConfig(sink_backend="memory")), InMemoryAuditSink)

    def test_unknown_backend(self):
        with pytest.raises(ConfigError) as exc_info:
            create_sink(AuditConfig(sink_backend="postgres"))
        assert exc_info.value.code == "unknown_backend"
