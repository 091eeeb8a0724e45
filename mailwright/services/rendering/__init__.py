"""Message rendering service."""

from .message_renderer import MessageRenderer

__all__ = ["MessageRenderer"]
