"""feedsmith configuration.

Settings loaded from environment variables with the FEEDSMITH_ prefix.

Example:
    >>> from feedsmith.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.default_format
    'atom'
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library and CLI settings.

    Loads from environment variables with FEEDSMITH_ prefix.

    Example:
        >>> from feedsmith.core.config import Settings
        >>> s = Settings(xml_indent=4)
        >>> s.xml_indent
        4
        >>> s.json_indent
        2
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDSMITH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["console", "json"] = Field(
        default="console", description="Log format: json or console"
    )

    # Rendering
    default_format: str = Field(default="atom", description="Format used when none is given")
    xml_indent: int = Field(default=2, ge=0, le=8, description="Spaces per XML nesting level")
    json_indent: int = Field(default=2, ge=0, le=8, description="Spaces per JSON nesting level")


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from feedsmith.core.config import get_settings
        >>> s = get_settings(json_indent=0)
        >>> s.json_indent
        0
    """
    return Settings(**overrides)
