"""File system utilities for the portfolio content layer."""

from pathlib import Path
from typing import Iterable


def find_content_files(directory: Path, extensions: Iterable[str]) -> list[Path]:
    """Find content files directly inside a directory.

    Subdirectories are not searched. Files are returned in filename order so
    that listings built from them are reproducible.

    Args:
        directory: Directory to search.
        extensions: Recognized file extensions (e.g., ".md").

    Returns:
        Matching file paths, sorted by name. Empty if the directory is missing.
    """
    if not directory.is_dir():
        return []

    suffixes = set(extensions)
    return sorted(
        (
            path
            for path in directory.iterdir()
            if path.is_file() and path.suffix in suffixes
        ),
        key=lambda p: p.name,
    )


def read_file(path: Path, encoding: str = "utf-8") -> str:
    """Read a file synchronously.

    Args:
        path: Path to the file.
        encoding: File encoding.

    Returns:
        File contents as string.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        IOError: If the file can't be read.
    """
    return path.read_text(encoding=encoding)


def slug_from_path(path: Path) -> str:
    """Derive a document slug from its file name (extension stripped)."""
    return path.stem


def is_safe_slug(slug: str) -> bool:
    """Check that a slug names a file directly inside its content directory.

    Any name the listing can produce is accepted, dot-files included.

    Args:
        slug: Candidate slug.

    Returns:
        False for empty slugs, "." and "..", and anything with a path separator.
    """
    if slug in ("", ".", ".."):
        return False
    return "/" not in slug and "\\" not in slug and "\x00" not in slug
