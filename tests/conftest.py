"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from portfolio_content.config import ContentConfig
from portfolio_content.content.repository import ContentRepository


@pytest.fixture
def fixtures_dir() -> Path:
    """Get the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def content_root(fixtures_dir: Path) -> Path:
    """Get the path to the sample content tree."""
    return fixtures_dir / "content"


@pytest.fixture
def repository(content_root: Path) -> ContentRepository:
    """Repository over the sample content tree."""
    return ContentRepository(config=ContentConfig(content_root=content_root))


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[[str, str, str], Path]:
    """Write a document into a temporary content tree rooted at tmp_path."""

    def _write(kind_dir: str, filename: str, text: str) -> Path:
        directory = tmp_path / kind_dir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(text, encoding="utf-8")
        return path

    return _write
