"""Domain models for the portfolio content layer."""

from portfolio_content.models.content import (
    ContentIndex,
    Project,
    ProjectWithContent,
    Update,
    UpdateWithContent,
)
from portfolio_content.models.enums import ContentKind

__all__ = [
    "ContentIndex",
    "ContentKind",
    "Project",
    "ProjectWithContent",
    "Update",
    "UpdateWithContent",
]
