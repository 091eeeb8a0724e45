"""Render history persistence"""

from .audit_log import AuditLog

__all__ = ["AuditLog"]
