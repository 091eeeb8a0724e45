"""Message composition from declarative documents."""

from .document import DocumentError, FieldDocument, MessageDocument, PartDocument, load_document
from .message_builder import MessageBuilder

__all__ = [
    "DocumentError",
    "FieldDocument",
    "PartDocument",
    "MessageDocument",
    "load_document",
    "MessageBuilder",
]
