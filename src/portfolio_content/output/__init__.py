"""Output writers for the portfolio content layer."""

from portfolio_content.output.index_writer import ContentIndexWriter, build_index

__all__ = ["ContentIndexWriter", "build_index"]
