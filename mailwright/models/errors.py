"""Render error hierarchy."""

from enum import Enum
from typing import Iterator, Optional, Type, Union


class ErrorKind(Enum):
    """Kind of render failure."""

    NO_VALUES = "no_values"
    NO_BOUNDARY = "no_boundary"
    CONTENT_READ_FAILURE = "content_read_failure"
    CHILD_RENDER_FAILURE = "child_render_failure"


class RenderError(Exception):
    """
    Base exception for failures while rendering a message tree.

    Wrapping errors are raised with ``raise ... from cause`` so the original
    failure stays reachable through ``__cause__``.

    Attributes:
        context: Short label of the render step that failed
    """

    kind: Optional[ErrorKind] = None
    default_message = "failed to render"

    def __init__(self, message: Optional[str] = None, context: Optional[str] = None):
        self.context = context
        super().__init__(message or self.default_message)

    def chain(self) -> Iterator[BaseException]:
        """Yield this error followed by every cause it wraps."""
        error: Optional[BaseException] = self
        while error is not None:
            yield error
            error = error.__cause__

    def root_cause(self) -> BaseException:
        """Return the innermost error of the chain."""
        *_, last = self.chain()
        return last

    def matches(self, target: Union[ErrorKind, Type[BaseException]]) -> bool:
        """
        Check whether this error or any error it wraps matches ``target``.

        Args:
            target: An ErrorKind member or an exception class

        Returns:
            True if a match is found anywhere in the cause chain
        """
        for error in self.chain():
            if isinstance(target, ErrorKind):
                if getattr(error, "kind", None) is target:
                    return True
            elif isinstance(error, target):
                return True
        return False

    def contexts(self) -> list[str]:
        """Context labels from the outermost to the innermost error."""
        return [e.context for e in self.chain() if isinstance(e, RenderError) and e.context]


class NoValuesError(RenderError):
    """Raised when a Field has no values at render time."""

    kind = ErrorKind.NO_VALUES
    default_message = "the values of the field are empty"


class NoBoundaryError(RenderError):
    """Raised when a Header has no Content-Type field with a boundary parameter."""

    kind = ErrorKind.NO_BOUNDARY
    default_message = "the header has no Content-Type field with boundary parameter"


class ContentReadError(RenderError):
    """Raised when the content stream of a Part fails while being drained."""

    kind = ErrorKind.CONTENT_READ_FAILURE
    default_message = "failed to read content"


class PartRenderError(RenderError):
    """Raised when a nested Part fails to render."""

    kind = ErrorKind.CHILD_RENDER_FAILURE
    default_message = "failed to render a part"


class RenderContextError(RenderError):
    """Adds a context label to a wrapped RenderError, keeping its kind."""

    def __init__(self, context: str, cause: RenderError):
        self._cause_kind = cause.kind
        super().__init__(f"{context}: {cause}", context=context)

    @property
    def kind(self) -> Optional[ErrorKind]:  # type: ignore[override]
        return self._cause_kind