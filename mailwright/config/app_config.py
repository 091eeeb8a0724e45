"""Configuration models for message rendering."""

import codecs
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from mailwright.utils.boundary_utils import DEFAULT_BOUNDARY_PREFIX, MAX_BOUNDARY_LENGTH


class RenderingConfig(BaseModel):
    """Rendering and composition settings."""

    mime_version: str = "1.0"
    auto_boundary: bool = True
    boundary_prefix: str = DEFAULT_BOUNDARY_PREFIX
    boundary_length: int = 24
    default_charset: str = "UTF-8"

    @field_validator("boundary_length")
    def validate_boundary_length(cls, v: int) -> int:
        if not 1 <= v <= 60:
            raise ValueError("boundary_length must be between 1 and 60")
        return v

    @field_validator("boundary_prefix")
    def validate_boundary_prefix(cls, v: str) -> str:
        if '"' in v:
            raise ValueError("boundary_prefix cannot contain a double quote")
        if len(v) >= MAX_BOUNDARY_LENGTH:
            raise ValueError(f"boundary_prefix must be shorter than {MAX_BOUNDARY_LENGTH} characters")
        return v

    @field_validator("default_charset")
    def validate_charset(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown charset: {v}")
        return v

    @model_validator(mode="after")
    def validate_boundary_fits(self) -> "RenderingConfig":
        if len(self.boundary_prefix) + self.boundary_length > MAX_BOUNDARY_LENGTH:
            raise ValueError(
                f"boundary_prefix plus boundary_length must not exceed {MAX_BOUNDARY_LENGTH} characters"
            )
        return self


class StorageConfig(BaseModel):
    """Storage configuration."""

    audit_log_path: str = "~/.mailwright/logs/audit.log"

    def get_audit_log_path(self) -> Path:
        """Get expanded audit log path."""
        return Path(self.audit_log_path).expanduser()


class AppConfig(BaseModel):
    """Main application configuration."""

    schema_version: str = "1.0"
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    @field_validator("schema_version")
    def validate_schema_version(cls, v: str) -> str:
        if not v:
            raise ValueError("schema_version is required")
        return v
