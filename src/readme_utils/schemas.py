"""Pydantic schemas for runtime validation of project settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SOURCE_DIR = "src"
DEFAULT_CONVERTER = "pandoc"


class ProjectSettings(BaseModel):
    """Validated content of ``readme-settings.json``.

    Optional paths are kept exactly as written; they are resolved (or passed
    through to the converter) by the build use-case.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    project: str
    output: str
    source_dir: str | None = Field(default=None, alias="sourceDir")
    metadata: str | None = None
    bib: str | None = None
    header: str | None = None
    pandoc: str | None = None

    @field_validator("project", "output")
    @classmethod
    def _validate_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must be a non-empty string.")
        return value

    @field_validator("source_dir", "metadata", "bib", "header", "pandoc")
    @classmethod
    def _blank_as_unset(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @property
    def source_dir_or_default(self) -> str:
        """Source directory as configured, ``src`` when unset."""
        return self.source_dir or DEFAULT_SOURCE_DIR

    @property
    def executable(self) -> str:
        """Converter executable as configured, ``pandoc`` when unset."""
        return self.pandoc or DEFAULT_CONVERTER
