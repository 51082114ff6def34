"""Parse front-matter and map it onto content records."""

from datetime import date, datetime, timezone
from typing import Any, Optional, Union

import frontmatter

from portfolio_content.models.content import (
    Project,
    ProjectWithContent,
    Update,
    UpdateWithContent,
)
from portfolio_content.models.enums import ContentKind

Summary = Union[Project, Update]
FullRecord = Union[ProjectWithContent, UpdateWithContent]

# Date formats accepted when the value is not ISO 8601
DATE_FORMATS = [
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
]


class FrontmatterParser:
    """Splits documents into metadata and body and builds records from them."""

    # Recognized front-matter keys per kind, mapped by their value type
    TEXT_FIELDS = {
        ContentKind.PROJECTS: ("title", "description"),
        ContentKind.UPDATES: ("title", "summary"),
    }
    OPTIONAL_TEXT_FIELDS = {
        ContentKind.PROJECTS: ("image", "github", "demo"),
        ContentKind.UPDATES: (),
    }
    LIST_FIELDS = {
        ContentKind.PROJECTS: ("tech",),
        ContentKind.UPDATES: (),
    }
    OPTIONAL_LIST_FIELDS = {
        ContentKind.PROJECTS: (),
        ContentKind.UPDATES: ("tags",),
    }

    SUMMARY_MODELS = {
        ContentKind.PROJECTS: Project,
        ContentKind.UPDATES: Update,
    }
    FULL_MODELS = {
        ContentKind.PROJECTS: ProjectWithContent,
        ContentKind.UPDATES: UpdateWithContent,
    }

    def parse(self, text: str) -> tuple[dict[str, Any], str]:
        """Split a document into its front-matter and body.

        A leading byte-order mark is dropped so the opening fence is found.

        Args:
            text: Raw document text.

        Returns:
            Tuple of (metadata, body). Metadata is empty when the document has
            no front-matter block.

        Raises:
            yaml.YAMLError: If the front-matter block is not valid YAML.
        """
        post = frontmatter.loads(text.lstrip("\ufeff"))
        return dict(post.metadata), post.content

    def build_summary(
        self,
        kind: ContentKind,
        slug: str,
        metadata: dict[str, Any],
    ) -> Summary:
        """Build the summary record of a document.

        Args:
            kind: Document kind.
            slug: Document slug.
            metadata: Parsed front-matter.

        Returns:
            Project or Update record.
        """
        kind = ContentKind(kind)
        return self.SUMMARY_MODELS[kind](**self._fields(kind, slug, metadata))

    def build_full(
        self,
        kind: ContentKind,
        slug: str,
        metadata: dict[str, Any],
        body: str,
    ) -> FullRecord:
        """Build the full record of a document (summary fields plus body)."""
        kind = ContentKind(kind)
        return self.FULL_MODELS[kind](
            **self._fields(kind, slug, metadata),
            content=body,
        )

    def _fields(
        self,
        kind: ContentKind,
        slug: str,
        metadata: dict[str, Any],
    ) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "slug": slug,
            "date": normalize_date(metadata.get("date")),
        }
        for key in self.TEXT_FIELDS[kind]:
            fields[key] = _text(metadata.get(key))
        for key in self.OPTIONAL_TEXT_FIELDS[kind]:
            fields[key] = _optional_text(metadata.get(key))
        for key in self.LIST_FIELDS[kind]:
            fields[key] = _ensure_list(metadata.get(key)) or []
        for key in self.OPTIONAL_LIST_FIELDS[kind]:
            fields[key] = _ensure_list(metadata.get(key))
        return fields


def normalize_date(value: Any) -> str:
    """Render a front-matter date as text.

    YAML loads unquoted ``2024-01-01`` as a date object; it is turned back
    into ISO text so records always carry the date as a string.
    """
    if not value:
        return ""
    if isinstance(value, date):  # Includes datetime
        return value.isoformat()
    return str(value)


def parse_date(value: str) -> Optional[datetime]:
    """Parse a record date for ordering.

    Args:
        value: Date string from a record.

    Returns:
        Naive UTC datetime, or None if the value is empty or unparseable.
    """
    if not value:
        return None

    parsed = None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        for fmt in DATE_FORMATS:
            try:
                parsed = datetime.strptime(value.strip(), fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _text(value: Any) -> Any:
    if not value:
        return ""
    if isinstance(value, (str, int, float, date)):
        return str(value)
    return value  # Left for model validation to reject


def _optional_text(value: Any) -> Any:
    if value is None or value == "":
        return None
    return _text(value)


def _ensure_list(value: Any) -> Optional[list]:
    """Wrap a scalar in a list; None and empty strings become None."""
    if value is None:
        return None
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item is not None]
    if isinstance(value, str):
        return [value] if value else None
    return value  # Left for model validation to reject
