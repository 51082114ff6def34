"""Content layer for loading and parsing portfolio documents."""

from portfolio_content.content.parser import FrontmatterParser
from portfolio_content.content.repository import ContentNotFoundError, ContentRepository

__all__ = [
    "ContentNotFoundError",
    "ContentRepository",
    "FrontmatterParser",
]
