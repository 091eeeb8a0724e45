"""Message data model."""

from dataclasses import dataclass, field

from .errors import RenderContextError, RenderError
from .header import Header
from .part import Part


@dataclass
class Message:
    """
    Root of a message: the message header and the root content part.

    Attributes:
        header: Message-level fields (From, To, Date, MIME-Version, ...)
        root: Root part, usually a multipart container
    """

    header: Header = field(default_factory=Header)
    root: Part = field(default_factory=Part)

    def render(self) -> bytes:
        """
        Render the message header followed directly by the root part.

        The two blocks are concatenated without a separator.

        Raises:
            RenderError: If the header or any part fails to render
        """
        try:
            head = self.header.render()
        except RenderError as e:
            raise RenderContextError("failed to render message header", e) from e

        try:
            root = self.root.render()
        except RenderError as e:
            raise RenderContextError("failed to render message root part", e) from e

        return head + root
