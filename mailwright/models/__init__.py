"""Message tree models and their renderers"""

from .errors import (
    ContentReadError,
    ErrorKind,
    NoBoundaryError,
    NoValuesError,
    PartRenderError,
    RenderContextError,
    RenderError,
)
from .field import Field
from .header import Header
from .message import Message
from .part import ContentReader, Part

__all__ = [
    "Field",
    "Header",
    "Part",
    "ContentReader",
    "Message",
    "ErrorKind",
    "RenderError",
    "RenderContextError",
    "NoValuesError",
    "NoBoundaryError",
    "ContentReadError",
    "PartRenderError",
]
