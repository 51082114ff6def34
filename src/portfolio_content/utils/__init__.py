"""Shared utilities for the portfolio content layer."""

from portfolio_content.utils.file_utils import (
    find_content_files,
    read_file,
    slug_from_path,
)
from portfolio_content.utils.logging import get_logger, setup_logging

__all__ = [
    "find_content_files",
    "get_logger",
    "read_file",
    "setup_logging",
    "slug_from_path",
]
