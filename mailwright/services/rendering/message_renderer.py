"""Render messages, record the outcome and write the result."""

import logging
from pathlib import Path
from typing import Optional

from mailwright.models import Message, RenderError
from mailwright.storage.audit_log import AuditLog

logger = logging.getLogger(__name__)


class MessageRenderer:
    """Render Message trees and keep a history of the results."""

    def __init__(self, audit_log: Optional[AuditLog] = None):
        """
        Initialize renderer.

        Args:
            audit_log: Optional audit log receiving one event per render
        """
        self.audit_log = audit_log

    def render(self, message: Message, label: str = "message") -> bytes:
        """
        Render a message.

        Args:
            message: Message to render
            label: Name identifying the message in logs

        Returns:
            Rendered message bytes

        Raises:
            RenderError: If the message fails to render
        """
        data = self._render(message, label)

        if self.audit_log:
            self.audit_log.log_render_success(label, len(data))

        return data

    def render_to_file(self, message: Message, output_path: Path, label: Optional[str] = None) -> int:
        """
        Render a message and write it to ``output_path``.

        The file is only written once rendering succeeded.

        Args:
            message: Message to render
            output_path: Destination file
            label: Name identifying the message (default: file name)

        Returns:
            Number of bytes written

        Raises:
            RenderError: If the message fails to render
        """
        label = label or output_path.name
        data = self._render(message, label)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
        logger.info("Wrote %s to %s", label, output_path)

        if self.audit_log:
            self.audit_log.log_render_success(label, len(data), output_path)

        return len(data)

    def _render(self, message: Message, label: str) -> bytes:
        try:
            data = message.render()
        except RenderError as e:
            logger.warning("Rendering %s failed (%s): %s", label, e.kind.value if e.kind else "unknown", e)
            if self.audit_log:
                self.audit_log.log_render_failure(label, e)
            raise

        logger.debug("Rendered %s: %d bytes", label, len(data))
        return data
