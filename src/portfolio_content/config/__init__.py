"""Configuration management for the portfolio content layer."""

from portfolio_content.config.loader import load_config
from portfolio_content.config.models import ContentConfig, OutputConfig

__all__ = [
    "ContentConfig",
    "OutputConfig",
    "load_config",
]
