"""Pydantic configuration models for the portfolio content layer."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from portfolio_content.config.defaults import (
    DEFAULT_CONTENT_ROOT,
    FALLBACK_EXTENSION,
    PRIMARY_EXTENSION,
)
from portfolio_content.models.enums import ContentKind


class OutputConfig(BaseModel):
    """Output configuration."""

    index_filename: str = "content-index.json"
    verbosity: int = Field(default=1, ge=0, le=3)


class ContentConfig(BaseModel):
    """Root configuration model for the content layer."""

    content_root: Path = DEFAULT_CONTENT_ROOT
    projects_dir: str = "projects"
    updates_dir: str = "updates"

    primary_extension: str = PRIMARY_EXTENSION
    fallback_extension: str = FALLBACK_EXTENSION
    encoding: str = "utf-8"

    # Leave out files with malformed front-matter instead of failing the listing
    skip_invalid: bool = False

    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = ConfigDict(extra="ignore")  # Ignore unknown fields in config file

    @field_validator("primary_extension", "fallback_extension")
    @classmethod
    def _dotted(cls, value: str) -> str:
        value = value.lower()
        return value if value.startswith(".") else f".{value}"

    @property
    def extensions(self) -> tuple[str, ...]:
        """Recognized extensions, primary first."""
        return (self.primary_extension, self.fallback_extension)

    def directory_for(self, kind: ContentKind) -> Path:
        """Directory holding the files of a document kind.

        A relative content root is resolved against the current working
        directory at call time.
        """
        name = {
            ContentKind.PROJECTS: self.projects_dir,
            ContentKind.UPDATES: self.updates_dir,
        }[ContentKind(kind)]
        root = self.content_root
        if not root.is_absolute():
            root = Path.cwd() / root
        return root / name
