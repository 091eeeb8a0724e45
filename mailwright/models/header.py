"""Header data model."""

from dataclasses import dataclass, field
from typing import Optional

from .errors import NoBoundaryError
from .field import Field

CONTENT_TYPE = "Content-Type"


@dataclass
class Header:
    """
    Ordered list of header fields attached to a Message or a Part.

    Field names need not be unique, lookups return the first match.
    Mutators never validate; problems surface when rendering.

    Attributes:
        fields: Fields in render order
    """

    fields: list[Field] = field(default_factory=list)

    def reset(self) -> None:
        """Drop every field, keeping the instance."""
        self.fields = []

    def add_field(self, field: Field) -> None:
        """Append a field to the end of the header."""
        self.fields.append(field)

    def remove_field(self, name: str) -> None:
        """Remove the first field named ``name``, if any."""
        for i, f in enumerate(self.fields):
            if f.name == name:
                del self.fields[i]
                break

    def get_field(self, name: str) -> Optional[Field]:
        """Return the first field named ``name``, or None."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def render(self) -> bytes:
        """
        Render every field on its own line.

        Returns:
            Fields joined by a single newline, without a trailing newline

        Raises:
            NoValuesError: From the first field that fails to render
        """
        return b"\n".join(f.render() for f in self.fields)

    def boundary(self) -> bytes:
        """
        Return the boundary parameter of the first Content-Type field.

        Raises:
            NoBoundaryError: If there is no Content-Type field, or the first
                one has no boundary parameter
        """
        content_type = self.get_field(CONTENT_TYPE)
        if content_type is not None:
            value = content_type.param("boundary")
            if value is not None:
                return value

        raise NoBoundaryError()
