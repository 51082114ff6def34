"""Enumerations for the portfolio content layer."""

from enum import Enum


class ContentKind(str, Enum):
    """Document kinds, one content directory each."""

    PROJECTS = "projects"
    UPDATES = "updates"

    @property
    def label(self) -> str:
        """Singular, human-readable name of the kind."""
        return {
            ContentKind.PROJECTS: "project",
            ContentKind.UPDATES: "update",
        }[self]
