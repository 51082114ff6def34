"""Entry point for running portfolio-content as a module.

Usage:
    python -m portfolio_content [command] [options]
"""

from portfolio_content.cli.main import app

if __name__ == "__main__":
    app()
