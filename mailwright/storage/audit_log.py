"""Audit logging for render events."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from mailwright.models.errors import RenderError


class AuditLog:
    """Audit logger for message render history."""

    def __init__(self, log_path: Optional[Path] = None):
        """
        Initialize audit logger.

        Args:
            log_path: Path to audit log file (default: ~/.mailwright/logs/audit.log)
        """
        if log_path is None:
            log_path = Path("~/.mailwright/logs/audit.log").expanduser()

        self.log_path = log_path
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

    def log_render_success(
        self,
        message_label: str,
        byte_count: int,
        output_path: Optional[Path] = None,
    ) -> None:
        """
        Log a successful render.

        Args:
            message_label: Name identifying the rendered message
            byte_count: Size of the rendered message
            output_path: File the message was written to (if any)
        """
        self.log_event(
            "render_succeeded",
            message_label,
            {
                "byte_count": byte_count,
                "output_path": str(output_path) if output_path else None,
            },
        )

    def log_render_failure(self, message_label: str, error: RenderError) -> None:
        """
        Log a failed render.

        Args:
            message_label: Name identifying the message
            error: Render error raised by the message tree
        """
        self.log_event(
            "render_failed",
            message_label,
            {
                "error_kind": error.kind.value if error.kind else None,
                "contexts": error.contexts(),
                "root_cause": str(error.root_cause()),
            },
        )

    def log_event(self, event_type: str, message_label: str, metadata: dict) -> None:
        """
        Log a general render event.

        Args:
            event_type: Type of event (e.g., "document_loaded")
            message_label: Name identifying the message
            metadata: Additional event metadata
        """
        event = {
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            "message_label": message_label,
            **metadata,
        }

        self._write_event(event)

    def read_events(self) -> list[dict]:
        """Return every valid event of the log, oldest first."""
        events = []

        if self.log_path.exists():
            with open(self.log_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line:
                        try:
                            events.append(json.loads(line))
                        except json.JSONDecodeError:
                            # Skip invalid lines
                            continue

        return events

    def export_render_history(self, output_path: Path) -> int:
        """
        Export all render events to a JSON file.

        Args:
            output_path: Path to output JSON file

        Returns:
            Number of exported events
        """
        events = self.read_events()

        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(events, f, indent=2, ensure_ascii=False)

        return len(events)

    def _write_event(self, event: dict) -> None:
        """
        Write event to log file.

        Args:
            event: Event dictionary
        """
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(event, ensure_ascii=False) + "\n")
