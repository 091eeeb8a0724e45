"""Build message trees from declarative documents."""

import logging
from io import BytesIO
from pathlib import Path
from typing import Optional

from mailwright.config.app_config import RenderingConfig
from mailwright.models import Field, Header, Message, Part
from mailwright.models.header import CONTENT_TYPE
from mailwright.utils.boundary_utils import generate_boundary
from mailwright.utils.param_utils import has_param, quote_param
from .document import DocumentError, FieldDocument, MessageDocument, PartDocument

logger = logging.getLogger(__name__)

MIME_VERSION = "MIME-Version"
DEFAULT_MULTIPART_TYPE = "multipart/mixed"


class MessageBuilder:
    """
    Turn a MessageDocument into a Message tree ready to render.

    Header fields are copied in document order. The builder only fills in
    what the configuration asks for (MIME-Version, missing boundaries);
    anything else that is wrong is left for the renderer to report.
    """

    def __init__(self, rendering: Optional[RenderingConfig] = None, base_dir: Path = Path(".")):
        """
        Initialize builder.

        Args:
            rendering: Rendering settings (defaults apply if omitted)
            base_dir: Directory that relative content_file paths resolve against
        """
        self.rendering = rendering or RenderingConfig()
        self.base_dir = base_dir

    def build(self, document: MessageDocument) -> Message:
        """
        Build a Message from a document.

        Args:
            document: Parsed message document

        Returns:
            Message with the whole part tree attached

        Raises:
            DocumentError: If a content file cannot be read or inline content
                cannot be encoded with the configured charset
        """
        header = self._build_header(document.headers)

        mime_version = self.rendering.mime_version
        if mime_version and not self._has_field(header, MIME_VERSION):
            header.fields.insert(0, Field(MIME_VERSION, [mime_version]))

        return Message(header=header, root=self._build_part(document.root))

    @staticmethod
    def _has_field(header: Header, name: str) -> bool:
        """True if ``header`` has a field named ``name``, ignoring case."""
        name = name.lower()
        return any(f.name.lower() == name for f in header.fields)

    def _build_header(self, fields: list[FieldDocument]) -> Header:
        return Header([Field(f.name, list(f.values)) for f in fields])

    def _build_part(self, document: PartDocument) -> Part:
        part = Part(header=self._build_header(document.headers))

        if document.content is not None:
            part.content = BytesIO(self._encode_content(document.content))
        elif document.content_file is not None:
            part.content = BytesIO(self._read_content_file(document.content_file))

        if document.parts is not None:
            part.parts = [self._build_part(p) for p in document.parts]
            if part.parts and self.rendering.auto_boundary:
                self._ensure_boundary(part.header)

        return part

    def _encode_content(self, content: str) -> bytes:
        charset = self.rendering.default_charset
        try:
            return content.encode(charset)
        except UnicodeEncodeError as e:
            raise DocumentError(f"Cannot encode content as {charset}: {e}") from e

    def _read_content_file(self, path: Path) -> bytes:
        full_path = path if path.is_absolute() else self.base_dir / path
        try:
            return full_path.read_bytes()
        except OSError as e:
            raise DocumentError(f"Cannot read content file {full_path}: {e}") from e

    def _ensure_boundary(self, header: Header) -> None:
        """Give a multipart header a boundary parameter if it has none."""
        content_type = header.get_field(CONTENT_TYPE)

        if content_type is not None and has_param(content_type.values, "boundary"):
            return

        boundary = generate_boundary(self.rendering.boundary_prefix, self.rendering.boundary_length)

        if content_type is None:
            header.fields.insert(0, Field(CONTENT_TYPE, [DEFAULT_MULTIPART_TYPE, quote_param("boundary", boundary)]))
            logger.debug("Added %s container header with boundary %s", DEFAULT_MULTIPART_TYPE, boundary)
        else:
            content_type.add_value(quote_param("boundary", boundary))
            logger.debug("Added boundary %s to %s", boundary, content_type.values[0] if content_type.values else CONTENT_TYPE)
