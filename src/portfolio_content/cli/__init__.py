"""Command-line interface for portfolio-content."""
