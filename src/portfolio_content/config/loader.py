"""Configuration loading and merging logic."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from portfolio_content.config.defaults import CONTENT_ROOT_ENV_VAR, config_search_paths
from portfolio_content.config.models import ContentConfig
from portfolio_content.utils.logging import get_logger

logger = get_logger(__name__)


def find_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file.

    Args:
        explicit_path: Explicitly specified config file path (from CLI).

    Returns:
        Path to config file if found, None otherwise.

    Raises:
        FileNotFoundError: If an explicit path was given and does not exist.
    """
    if explicit_path is not None:
        if explicit_path.exists():
            return explicit_path
        raise FileNotFoundError(f"Config file not found: {explicit_path}")

    for search_path in config_search_paths():
        if search_path.exists():
            return search_path

    return None


def load_config_file(path: Path) -> dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed configuration dictionary.
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def merge_cli_overrides(
    config: ContentConfig,
    content_root: Optional[Path] = None,
    skip_invalid: Optional[bool] = None,
    verbose: Optional[int] = None,
) -> ContentConfig:
    """Merge CLI overrides into the configuration.

    CLI arguments take precedence over config file values.

    Args:
        config: Base configuration.
        content_root: Content root directory override.
        skip_invalid: Per-file isolation override.
        verbose: Verbosity level override.

    Returns:
        Configuration with CLI overrides applied.
    """
    data = config.model_dump()

    if content_root is not None:
        data["content_root"] = content_root
    if skip_invalid is not None:
        data["skip_invalid"] = skip_invalid
    if verbose is not None:
        data["output"]["verbosity"] = verbose

    return ContentConfig.model_validate(data)


def load_config(
    config_path: Optional[Path] = None,
    **cli_overrides: Any,
) -> ContentConfig:
    """Load configuration with CLI overrides.

    Configuration is loaded from the following sources (in order of priority):
    1. CLI arguments (highest priority)
    2. Config file (if found)
    3. Environment variables
    4. Default values (lowest priority)

    Args:
        config_path: Explicit config file path (from --config CLI option).
        **cli_overrides: CLI argument overrides.

    Returns:
        Merged configuration object.
    """
    data: dict[str, Any] = {}

    if env_root := os.environ.get(CONTENT_ROOT_ENV_VAR):
        data["content_root"] = env_root

    found_config = find_config_file(config_path)
    if found_config is not None:
        logger.debug(f"Loading config from {found_config}")
        data.update(load_config_file(found_config))

    config = ContentConfig.model_validate(data)

    return merge_cli_overrides(config, **cli_overrides)
