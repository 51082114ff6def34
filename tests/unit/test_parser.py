"""Tests for the front-matter parser."""

from datetime import datetime

import pytest
import yaml
from pydantic import ValidationError

from portfolio_content.content.parser import (
    FrontmatterParser,
    normalize_date,
    parse_date,
)
from portfolio_content.models.content import Project, ProjectWithContent, Update
from portfolio_content.models.enums import ContentKind


@pytest.fixture
def parser() -> FrontmatterParser:
    return FrontmatterParser()


class TestParse:
    """Tests for splitting documents."""

    def test_splits_metadata_and_body(self, parser: FrontmatterParser):
        metadata, body = parser.parse("---\ntitle: X\n---\n\nHello body.\n")

        assert metadata == {"title": "X"}
        assert body.strip() == "Hello body."

    def test_document_without_frontmatter(self, parser: FrontmatterParser):
        metadata, body = parser.parse("# Just markdown\n")

        assert metadata == {}
        assert "Just markdown" in body

    def test_byte_order_mark_is_ignored(self, parser: FrontmatterParser):
        metadata, body = parser.parse("\ufeff---\ntitle: X\ndate: 2024-01-01\n---\nBody\n")

        assert metadata["title"] == "X"
        assert "title:" not in body
        assert body.strip() == "Body"

    def test_malformed_yaml_raises(self, parser: FrontmatterParser):
        with pytest.raises(yaml.YAMLError):
            parser.parse("---\ntitle: [unclosed\n---\nbody\n")


class TestBuildSummary:
    """Tests for mapping front-matter onto records."""

    def test_project_with_omitted_optionals(self, parser: FrontmatterParser):
        """Omitted optional keys default instead of failing."""
        metadata, _ = parser.parse("---\ntitle: X\ndate: 2024-01-01\ntech: [A, B]\n---\n")
        project = parser.build_summary(ContentKind.PROJECTS, "x", metadata)

        assert isinstance(project, Project)
        assert project.slug == "x"
        assert project.title == "X"
        assert project.date == "2024-01-01"
        assert project.tech == ["A", "B"]
        assert project.description == ""
        assert project.image is None
        assert project.github is None
        assert project.demo is None

    def test_empty_metadata_defaults(self, parser: FrontmatterParser):
        project = parser.build_summary(ContentKind.PROJECTS, "empty", {})

        assert project.title == ""
        assert project.date == ""
        assert project.tech == []

        update = parser.build_summary(ContentKind.UPDATES, "empty", {})

        assert isinstance(update, Update)
        assert update.summary == ""
        assert update.tags is None

    def test_scalar_lists_are_wrapped(self, parser: FrontmatterParser):
        project = parser.build_summary(ContentKind.PROJECTS, "p", {"tech": "Rust"})
        update = parser.build_summary(ContentKind.UPDATES, "u", {"tags": "news"})

        assert project.tech == ["Rust"]
        assert update.tags == ["news"]

    def test_empty_list_values(self, parser: FrontmatterParser):
        """An empty string reads as an omitted key."""
        project = parser.build_summary(ContentKind.PROJECTS, "p", {"tech": ""})
        update = parser.build_summary(ContentKind.UPDATES, "u", {"tags": ""})

        assert project.tech == []
        assert update.tags is None

    def test_unrecognized_keys_ignored(self, parser: FrontmatterParser):
        update = parser.build_summary(
            ContentKind.UPDATES, "u", {"title": "T", "draft": True, "tech": ["A"]}
        )

        assert update.title == "T"
        assert not hasattr(update, "draft")
        assert not hasattr(update, "tech")

    def test_kind_accepts_plain_string(self, parser: FrontmatterParser):
        update = parser.build_summary("updates", "u", {"summary": "S"})

        assert update.summary == "S"

    def test_mapping_for_text_field_is_rejected(self, parser: FrontmatterParser):
        with pytest.raises(ValidationError):
            parser.build_summary(ContentKind.PROJECTS, "p", {"title": {"nested": 1}})

    def test_build_full_carries_body(self, parser: FrontmatterParser):
        record = parser.build_full(ContentKind.PROJECTS, "p", {"title": "P"}, "Body")

        assert isinstance(record, ProjectWithContent)
        assert record.title == "P"
        assert record.content == "Body"


class TestDates:
    """Tests for date normalization and ordering keys."""

    def test_yaml_date_becomes_iso_text(self, parser: FrontmatterParser):
        metadata, _ = parser.parse("---\ndate: 2024-01-01\n---\n")

        assert normalize_date(metadata["date"]) == "2024-01-01"

    def test_quoted_date_kept_verbatim(self):
        assert normalize_date("March 3, 2024") == "March 3, 2024"
        assert normalize_date(None) == ""

    def test_parse_iso(self):
        assert parse_date("2024-01-01") == datetime(2024, 1, 1)
        assert parse_date("2024-01-01T10:30:00") == datetime(2024, 1, 1, 10, 30)

    def test_parse_aware_converts_to_utc(self):
        assert parse_date("2024-01-01T10:00:00+02:00") == datetime(2024, 1, 1, 8, 0)

    def test_parse_long_form(self):
        assert parse_date("March 3, 2024") == datetime(2024, 3, 3)

    def test_unparseable(self):
        assert parse_date("") is None
        assert parse_date("someday") is None
