"""Tests for the content index writer."""

import json
from datetime import datetime, timezone
from pathlib import Path

from portfolio_content.content.repository import ContentRepository
from portfolio_content.output.index_writer import ContentIndexWriter, build_index


def test_build_index(repository: ContentRepository):
    generated_at = datetime(2024, 6, 1, tzinfo=timezone.utc)
    index = build_index(repository, generated_at=generated_at)

    assert index.generated_at == generated_at
    assert [p.slug for p in index.projects] == ["flux-lite", "minimal", "grade-tracker"]
    assert [u.slug for u in index.updates] == ["hello-world", "winter-recap"]
    assert index.total == 5


def test_write_index(repository: ContentRepository, tmp_path: Path):
    output = tmp_path / "build" / "nested"
    writer = ContentIndexWriter(output)

    path = writer.write(build_index(repository))

    assert path == output / "content-index.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert set(data) == {"generated_at", "projects", "updates"}
    assert data["projects"][0]["slug"] == "flux-lite"
    assert data["projects"][0]["tech"] == ["Python", "Qt", "NumPy"]
    assert "content" not in data["updates"][0]
    assert data["updates"][1]["tags"] is None


def test_write_empty_index(tmp_path: Path):
    repo = ContentRepository(content_root=tmp_path / "empty")
    writer = ContentIndexWriter(tmp_path, filename="index.json")

    data = json.loads(writer.write(build_index(repo)).read_text(encoding="utf-8"))

    assert data["projects"] == []
    assert data["updates"] == []
