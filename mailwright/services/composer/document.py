"""Declarative message documents consumed by the composer."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, model_validator


class DocumentError(Exception):
    """Raised when a message document is invalid or references missing content."""

    pass


class FieldDocument(BaseModel):
    """One header field of a document."""

    name: str = Field(min_length=1)
    values: list[str] = Field(default_factory=list)


class PartDocument(BaseModel):
    """
    One content part of a document.

    Attributes:
        headers: Part header fields, in render order
        content: Inline text content, encoded with the configured charset
        content_file: Path of a file holding already-encoded content
        parts: Sub-parts of a multipart container
    """

    headers: list[FieldDocument] = Field(default_factory=list)
    content: Optional[str] = None
    content_file: Optional[Path] = None
    parts: Optional[list["PartDocument"]] = None

    @model_validator(mode="after")
    def check_single_content_source(self) -> "PartDocument":
        if self.content is not None and self.content_file is not None:
            raise ValueError("content and content_file are mutually exclusive")
        return self


class MessageDocument(BaseModel):
    """A whole message: message headers plus the root part."""

    headers: list[FieldDocument] = Field(default_factory=list)
    root: PartDocument


PartDocument.model_rebuild()


def load_document(path: Path) -> MessageDocument:
    """
    Load a message document from a JSON file.

    Args:
        path: Path to the JSON document

    Returns:
        Parsed MessageDocument

    Raises:
        FileNotFoundError: If the file doesn't exist
        DocumentError: If the document is not valid
    """
    if not path.exists():
        raise FileNotFoundError(f"Message document not found: {path}")

    try:
        return MessageDocument.model_validate_json(path.read_bytes())
    except ValidationError as e:
        raise DocumentError(f"Invalid message document {path}: {e}") from e
