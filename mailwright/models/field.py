"""Header field data model."""

from dataclasses import dataclass, field
from typing import Optional

from .errors import NoValuesError


@dataclass
class Field:
    """
    A single header field: a name and its ordered values.

    The first value is the primary value, the following ones are
    ``key=value`` parameters. A Field without values can be built freely
    but fails to render.

    Attributes:
        name: Field name (e.g. "Content-Type")
        values: Ordered field values
    """

    name: str = ""
    values: list[str] = field(default_factory=list)

    def reset(self) -> None:
        """Clear the name and values, keeping the instance."""
        self.name = ""
        self.values = []

    def set_name(self, name: str) -> None:
        self.name = name

    def set_values(self, values: list[str]) -> None:
        self.values = list(values)

    def add_value(self, value: str) -> None:
        """Append a value to the end of the values."""
        self.values.append(value)

    def param(self, key: str) -> Optional[bytes]:
        """
        Look up a parameter of the field.

        Args:
            key: Parameter name (e.g. "boundary")

        Returns:
            The parameter value without its surrounding double quotes,
            or None if no value contains "<key>="

        Examples:
            >>> Field("Content-Type", ["text/plain", 'charset="UTF-8"']).param("charset")
            b'UTF-8'
        """
        token = key + "="
        for value in self.values:
            if token in value:
                value = value.removeprefix(token)
                if value.startswith('"'):
                    value = value[1:]
                if value.endswith('"'):
                    value = value[:-1]
                return value.encode("utf-8")

        return None

    def render(self) -> bytes:
        """
        Render the field as "<name>: <v1>; <v2>; ...".

        Returns:
            Rendered field without a line terminator

        Raises:
            NoValuesError: If the field has no values
        """
        if not self.values:
            raise NoValuesError()

        return f"{self.name}: {'; '.join(self.values)}".encode("utf-8")
