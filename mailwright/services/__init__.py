"""Business logic services"""

from .composer import DocumentError, MessageBuilder, MessageDocument, load_document
from .rendering import MessageRenderer

__all__ = [
    "DocumentError",
    "MessageBuilder",
    "MessageDocument",
    "load_document",
    "MessageRenderer",
]
