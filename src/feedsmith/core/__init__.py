"""Core configuration, logging and exceptions."""

from feedsmith.core.config import Settings, get_settings
from feedsmith.core.exceptions import (
    ConfigurationError,
    FeedSmithError,
    UnsupportedFormatError,
)
from feedsmith.core.logging import JsonFormatter, setup_logging

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Logging
    "JsonFormatter",
    "setup_logging",
    # Exceptions
    "ConfigurationError",
    "FeedSmithError",
    "UnsupportedFormatError",
]
