"""Default configuration values for the portfolio content layer."""

from pathlib import Path

# Default configuration file name
DEFAULT_CONFIG_FILENAME = "portfolio-content.config.json"

# Environment variable that overrides the content root
CONTENT_ROOT_ENV_VAR = "PORTFOLIO_CONTENT_ROOT"

# Default content root, relative to the working directory
DEFAULT_CONTENT_ROOT = Path("content")

# Default output directory for the content index
DEFAULT_OUTPUT_DIR = Path("build")

# Extension tried first for a slug, then the fallback
PRIMARY_EXTENSION = ".md"
FALLBACK_EXTENSION = ".mdx"


def config_search_paths() -> list[Path]:
    """Search paths for the configuration file, in order of priority."""
    return [
        Path.cwd() / DEFAULT_CONFIG_FILENAME,
        Path.home() / ".config" / "portfolio-content" / "config.json",
    ]
