"""Pydantic schemas for runtime validation of build settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SOURCE_ROOT = "src"
DEFAULT_OUTPUT_ROOT = Path("target")
DEFAULT_TEMPLATE = Path("tmpl/main.tmpl")


class BuildConfig(BaseModel):
    """Validated settings for one site build."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_root: str = DEFAULT_SOURCE_ROOT
    output_root: Path = DEFAULT_OUTPUT_ROOT
    document_suffix: str = ".md"
    output_suffix: str = ".html"
    template: Path = DEFAULT_TEMPLATE
    pandoc: str = "pandoc"
    input_format: str = "markdown"
    output_format: str = "html"
    timeout: float | None = Field(default=None, gt=0)
    keep_going: bool = False
    skip_non_documents: bool = False

    @field_validator("source_root")
    @classmethod
    def _normalize_source_root(cls, value: str) -> str:
        normalized = value.strip().replace("\\", "/").rstrip("/")
        if not normalized:
            raise ValueError("source_root cannot be empty.")
        return normalized

    @field_validator("output_root")
    @classmethod
    def _validate_output_root(cls, value: Path) -> Path:
        if not str(value).strip():
            raise ValueError("output_root cannot be empty.")
        return value

    @field_validator("document_suffix", "output_suffix")
    @classmethod
    def _validate_suffix(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError("suffixes must start with '.' and name an extension.")
        if "/" in value:
            raise ValueError("suffixes cannot contain path separators.")
        return value

    @field_validator("pandoc", "input_format", "output_format")
    @classmethod
    def _validate_non_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("converter settings cannot be blank.")
        return value.strip()

    @property
    def source_prefix(self) -> str:
        """Literal prefix every document path starts with."""
        return f"{self.source_root}/"
