"""Configuration package."""

from aerostop.config.logging import configure_logging, get_logger
from aerostop.config.settings import Settings, settings

__all__ = ["settings", "Settings", "configure_logging", "get_logger"]
