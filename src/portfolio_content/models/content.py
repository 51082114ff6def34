"""Project and update record models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Project(BaseModel):
    """Front-matter fields of a project, without its body."""

    slug: str
    title: str = ""
    date: str = ""
    description: str = ""
    tech: list[str] = Field(default_factory=list)
    image: Optional[str] = None
    github: Optional[str] = None  # Source repository URL
    demo: Optional[str] = None  # Live demo URL

    model_config = ConfigDict(frozen=True)


class ProjectWithContent(Project):
    """A project with its raw markdown body."""

    content: str = ""


class Update(BaseModel):
    """Front-matter fields of an update (blog post), without its body."""

    slug: str
    title: str = ""
    date: str = ""
    summary: str = ""
    tags: Optional[list[str]] = None

    model_config = ConfigDict(frozen=True)


class UpdateWithContent(Update):
    """An update with its raw markdown body."""

    content: str = ""


class ContentIndex(BaseModel):
    """Summaries of every document kind, as written by the index writer."""

    generated_at: datetime
    projects: list[Project] = Field(default_factory=list)
    updates: list[Update] = Field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of records across all kinds."""
        return len(self.projects) + len(self.updates)
