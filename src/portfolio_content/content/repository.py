"""Read project and update records from a content directory."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from portfolio_content.config.models import ContentConfig
from portfolio_content.content.parser import (
    FrontmatterParser,
    FullRecord,
    Summary,
    parse_date,
)
from portfolio_content.models.content import (
    Project,
    ProjectWithContent,
    Update,
    UpdateWithContent,
)
from portfolio_content.models.enums import ContentKind
from portfolio_content.utils.file_utils import (
    find_content_files,
    is_safe_slug,
    read_file,
    slug_from_path,
)
from portfolio_content.utils.logging import get_logger

logger = get_logger(__name__)


class ContentNotFoundError(FileNotFoundError):
    """No file backs the requested slug."""

    def __init__(self, kind: ContentKind, slug: str, directory: Optional[Path] = None):
        self.kind = ContentKind(kind)
        self.slug = slug
        message = f"No {self.kind.label} found for slug '{slug}'"
        if directory is not None:
            message += f" in {directory}"
        super().__init__(message)


class ContentRepository:
    """Stateless accessor over the per-kind content directories.

    Every call reads the files again; nothing is cached between calls.
    """

    def __init__(
        self,
        config: Optional[ContentConfig] = None,
        content_root: Optional[Path] = None,
    ):
        """Initialize the repository.

        Args:
            config: Content configuration (defaults are used if not provided).
            content_root: Overrides the configured content root.
        """
        config = config or ContentConfig()
        if content_root is not None:
            config = config.model_copy(update={"content_root": Path(content_root)})
        self.config = config
        self._parser = FrontmatterParser()

    def directory_for(self, kind: ContentKind) -> Path:
        """Directory holding the files of a document kind."""
        return self.config.directory_for(kind)

    def list_summaries(self, kind: ContentKind) -> list[Summary]:
        """List the summaries of every document of a kind, newest first.

        Args:
            kind: Document kind.

        Returns:
            Summary records sorted by date, descending. Undated records come
            last. Empty if the kind's directory does not exist.

        Raises:
            yaml.YAMLError: If a file has malformed front-matter and
                ``skip_invalid`` is off.
            OSError: If a file cannot be read.
        """
        kind = ContentKind(kind)
        directory = self.directory_for(kind)

        if not directory.is_dir():
            logger.debug(f"No {kind.value} directory at {directory}")
            return []

        summaries = []
        for path in self._unique_files(directory):
            try:
                metadata, _ = self._parser.parse(
                    read_file(path, encoding=self.config.encoding)
                )
                summaries.append(
                    self._parser.build_summary(kind, slug_from_path(path), metadata)
                )
            except (yaml.YAMLError, ValidationError) as e:
                if not self.config.skip_invalid:
                    raise
                logger.warning(f"Skipping {path.name}: {e}")

        logger.debug(f"Loaded {len(summaries)} {kind.value} from {directory}")
        return sort_by_date(summaries)

    def get_full_record(self, kind: ContentKind, slug: str) -> FullRecord:
        """Load one document with its body.

        The primary extension is tried first, then the fallback.

        Args:
            kind: Document kind.
            slug: Document slug (file name without extension).

        Returns:
            Full record: summary fields plus the raw markdown body.

        Raises:
            ContentNotFoundError: If no file exists for the slug.
            yaml.YAMLError: If the front-matter is malformed.
        """
        kind = ContentKind(kind)
        path = self.resolve_path(kind, slug)

        metadata, body = self._parser.parse(read_file(path, encoding=self.config.encoding))
        return self._parser.build_full(kind, slug, metadata, body)

    def resolve_path(self, kind: ContentKind, slug: str) -> Path:
        """Find the file backing a slug.

        Raises:
            ContentNotFoundError: If the slug is unsafe or no file exists.
        """
        kind = ContentKind(kind)
        directory = self.directory_for(kind)

        if not is_safe_slug(slug):
            raise ContentNotFoundError(kind, slug)

        for extension in self.config.extensions:
            candidate = directory / f"{slug}{extension}"
            if candidate.is_file():
                return candidate

        raise ContentNotFoundError(kind, slug, directory)

    def list_slugs(self, kind: ContentKind) -> list[str]:
        """Slugs of every document of a kind, in listing order."""
        return [summary.slug for summary in self.list_summaries(kind)]

    def get_all_projects(self) -> list[Project]:
        """All projects, newest first."""
        return self.list_summaries(ContentKind.PROJECTS)

    def get_project_by_slug(self, slug: str) -> ProjectWithContent:
        """One project with its body."""
        return self.get_full_record(ContentKind.PROJECTS, slug)

    def get_all_updates(self) -> list[Update]:
        """All updates, newest first."""
        return self.list_summaries(ContentKind.UPDATES)

    def get_update_by_slug(self, slug: str) -> UpdateWithContent:
        """One update with its body."""
        return self.get_full_record(ContentKind.UPDATES, slug)

    def _unique_files(self, directory: Path) -> list[Path]:
        """Content files with one file per slug, the primary extension winning."""
        by_slug: dict[str, Path] = {}
        rank = {ext: i for i, ext in enumerate(self.config.extensions)}

        for path in find_content_files(directory, self.config.extensions):
            slug = slug_from_path(path)
            if not is_safe_slug(slug):
                logger.debug(f"Ignoring {path.name}: no lookup can reach it")
                continue
            current = by_slug.get(slug)
            if current is None or rank[path.suffix] < rank[current.suffix]:
                if current is not None:
                    logger.debug(f"Ignoring {current.name}: shadowed by {path.name}")
                by_slug[slug] = path
            else:
                logger.debug(f"Ignoring {path.name}: shadowed by {current.name}")

        return sorted(by_slug.values(), key=lambda p: p.name)


def sort_by_date(summaries: list[Summary]) -> list[Summary]:
    """Sort records newest first; undated records go last.

    The sort is stable, so records with equal dates keep their input order.
    """

    def key(summary: Summary) -> tuple[bool, datetime]:
        parsed = parse_date(summary.date)
        return (parsed is not None, parsed or datetime.min)

    return sorted(summaries, key=key, reverse=True)
