"""Content part data model and the recursive renderer."""

import io
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .errors import ContentReadError, PartRenderError, RenderContextError, RenderError
from .header import Header

BLANK_LINE = b"\n\n"
READ_CHUNK_SIZE = 64 * 1024


class ContentReader(Protocol):
    """
    Sequential, single-pass byte source used as Part content.

    ``read`` returns ``b""`` at end of stream. The reader is drained by a
    render call and is not rewound afterwards.
    """

    def read(self, size: int = -1) -> bytes:
        ...


@dataclass
class Part:
    """
    A node of the content tree: a header plus raw content or sub-parts.

    A Part with sub-parts must carry a Content-Type field with a boundary
    parameter in its header. This is checked when rendering, never when
    building the tree.

    Attributes:
        header: Part header
        content: Optional one-shot content stream
        parts: Optional ordered sub-parts, owned by this part
    """

    header: Header = field(default_factory=Header)
    content: Optional[ContentReader] = None
    parts: Optional[list["Part"]] = None

    def render(self) -> bytes:
        """
        Render the part and, recursively, all of its sub-parts.

        Layout:
            <header>[\\n\\n<content>][\\n\\n--B\\n<part>]...[\\n\\n--B--]

        Returns:
            Rendered part without a trailing newline

        Raises:
            RenderError: On the first failure; nothing is returned
        """
        buf = io.BytesIO()

        try:
            buf.write(self.header.render())
        except RenderError as e:
            raise RenderContextError("failed to render header", e) from e

        if self.content is not None:
            buf.write(BLANK_LINE)
            self._drain_content(buf)

        if self.parts:
            try:
                boundary = self.header.boundary()
            except RenderError as e:
                raise RenderContextError("failed to retrieve boundary", e) from e

            opening = b"--" + boundary
            closing = opening + b"--"

            for part in self.parts:
                buf.write(BLANK_LINE)
                buf.write(opening)
                buf.write(b"\n")

                try:
                    buf.write(part.render())
                except RenderError as e:
                    raise PartRenderError(f"failed to render a part: {e}", context="failed to render a part") from e

            buf.write(BLANK_LINE)
            buf.write(closing)

        return buf.getvalue()

    def _drain_content(self, buf: io.BytesIO) -> None:
        """Copy the content stream into ``buf`` until end of stream."""
        while True:
            try:
                chunk = self.content.read(READ_CHUNK_SIZE)
            except Exception as e:
                raise ContentReadError(f"failed to read content: {e}", context="failed to read content") from e

            # None means a non-blocking stream had no data ready
            if chunk is None:
                raise ContentReadError("failed to read content: stream returned no data", context="failed to read content")
            if not chunk:
                break
            buf.write(chunk)
