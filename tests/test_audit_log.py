"""Tests for AuditLog."""

import json

import pytest

from mailwright.models import Field, Header, Message, NoValuesError, RenderError
from mailwright.storage.audit_log import AuditLog


@pytest.fixture
def audit_log(tmp_path):
    """AuditLog writing below tmp_path."""
    return AuditLog(tmp_path / "logs" / "audit.log")


class TestAuditLog:
    """Test render history logging."""

    def test_creates_parent_directory(self, tmp_path):
        """Test the log directory is created."""
        AuditLog(tmp_path / "nested" / "dir" / "audit.log")
        assert (tmp_path / "nested" / "dir").is_dir()

    def test_log_render_success(self, audit_log, tmp_path):
        """Test success events carry size and output path."""
        audit_log.log_render_success("welcome.json", 120, tmp_path / "out.eml")

        events = audit_log.read_events()
        assert len(events) == 1
        assert events[0]["event_type"] == "render_succeeded"
        assert events[0]["message_label"] == "welcome.json"
        assert events[0]["byte_count"] == 120
        assert events[0]["output_path"] == str(tmp_path / "out.eml")

    def test_log_render_failure(self, audit_log):
        """Test failure events carry kind, contexts and root cause."""
        message = Message(header=Header([Field("To")]))
        with pytest.raises(RenderError) as excinfo:
            message.render()

        audit_log.log_render_failure("broken.json", excinfo.value)

        event = audit_log.read_events()[0]
        assert event["event_type"] == "render_failed"
        assert event["error_kind"] == "no_values"
        assert event["contexts"] == ["failed to render message header"]
        assert event["root_cause"] == str(NoValuesError())

    def test_export_render_history(self, audit_log, tmp_path):
        """Test export writes a JSON array of all events."""
        audit_log.log_render_success("a", 1)
        audit_log.log_event("document_loaded", "b", {"parts": 2})

        output_path = tmp_path / "export" / "history.json"
        count = audit_log.export_render_history(output_path)

        assert count == 2
        exported = json.loads(output_path.read_text(encoding="utf-8"))
        assert [e["message_label"] for e in exported] == ["a", "b"]
        assert exported[1]["parts"] == 2

    def test_invalid_lines_are_skipped(self, audit_log):
        """Test corrupted lines are ignored when reading."""
        audit_log.log_render_success("a", 1)
        with open(audit_log.log_path, "a", encoding="utf-8") as f:
            f.write("{broken\n\n")
        audit_log.log_render_success("b", 2)

        assert [e["message_label"] for e in audit_log.read_events()] == ["a", "b"]

    def test_export_empty_log(self, audit_log, tmp_path):
        """Test exporting before any event writes an empty array."""
        output_path = tmp_path / "history.json"

        assert audit_log.export_render_history(output_path) == 0
        assert json.loads(output_path.read_text(encoding="utf-8")) == []
