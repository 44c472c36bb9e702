"""Logging setup for the feedsmith CLI.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed by the application, here by the CLI.
"""

from __future__ import annotations

import json
import logging
import sys

from feedsmith.core.config import Settings
from feedsmith.core.exceptions import ConfigurationError


class JsonFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base)


def setup_logging(settings: Settings) -> None:
    """Configure the ``feedsmith`` logger from settings.

    Args:
        settings: Loaded settings; ``log_level`` and ``log_format`` are used.

    Raises:
        ConfigurationError: If ``log_level`` is not a known level name.
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        msg = f"Unknown log level: {settings.log_level}"
        raise ConfigurationError(msg)

    handler = logging.StreamHandler(sys.stderr)
    if settings.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logger = logging.getLogger("feedsmith")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
