"""JSON content index writer.

Writes the summaries of every document kind to a single file that a static
build step can read without touching the markdown sources.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from portfolio_content.content.repository import ContentRepository
from portfolio_content.models.content import ContentIndex
from portfolio_content.utils.logging import get_logger

logger = get_logger(__name__)


def build_index(
    repository: ContentRepository,
    generated_at: Optional[datetime] = None,
) -> ContentIndex:
    """Collect the summaries of every kind into a content index.

    Args:
        repository: Repository to read from.
        generated_at: Timestamp to record (defaults to now, UTC).

    Returns:
        ContentIndex with projects and updates in listing order.
    """
    return ContentIndex(
        generated_at=generated_at or datetime.now(timezone.utc),
        projects=repository.get_all_projects(),
        updates=repository.get_all_updates(),
    )


class ContentIndexWriter:
    """Writes a content index to JSON."""

    def __init__(self, output_path: Path, filename: str = "content-index.json"):
        """Initialize the writer.

        Args:
            output_path: Directory to write the index file.
            filename: Name of the index file.
        """
        self._output_path = output_path
        self._filename = filename

    @property
    def filepath(self) -> Path:
        """Full path to the index file."""
        return self._output_path / self._filename

    def write(self, index: ContentIndex) -> Path:
        """Write the index.

        Args:
            index: Content index to write.

        Returns:
            Path to the written file.
        """
        self._output_path.mkdir(parents=True, exist_ok=True)

        with open(self.filepath, "w", encoding="utf-8") as f:
            json.dump(index.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
            f.write("\n")

        logger.info(f"Wrote {index.total} records to {self.filepath}")
        return self.filepath
