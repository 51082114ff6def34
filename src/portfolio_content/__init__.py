"""Portfolio Content.

Content-loading layer for a personal portfolio site. Reads projects and
updates from markdown/MDX files with YAML front-matter and returns typed
records, newest first, for the page templates to render.
"""

__version__ = "0.1.0"

from portfolio_content.content.repository import ContentNotFoundError, ContentRepository
from portfolio_content.models.enums import ContentKind

__all__ = [
    "__version__",
    "ContentKind",
    "ContentNotFoundError",
    "ContentRepository",
]
