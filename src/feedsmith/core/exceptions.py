"""Custom exceptions.

Projection itself never raises; these cover the surfaces around it
(format lookup, configuration).

Example:
    >>> from feedsmith.core.exceptions import FeedSmithError, UnsupportedFormatError
    >>> isinstance(UnsupportedFormatError("yaml"), FeedSmithError)
    True
    >>> try:
    ...     raise UnsupportedFormatError("yaml")
    ... except FeedSmithError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: UnsupportedFormatError
"""

from __future__ import annotations


class FeedSmithError(Exception):
    """Base exception for feedsmith.

    Example:
        >>> from feedsmith.core.exceptions import FeedSmithError
        >>> e = FeedSmithError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class UnsupportedFormatError(FeedSmithError):
    """No projector is registered under the requested format name.

    Example:
        >>> from feedsmith.core.exceptions import UnsupportedFormatError
        >>> err = UnsupportedFormatError("yaml", available=["atom", "rss"])
        >>> err.format_name
        'yaml'
        >>> str(err)
        "Unsupported feed format 'yaml' (available: atom, rss)"
    """

    def __init__(self, format_name: str, available: list[str] | None = None) -> None:
        self.format_name = format_name
        self.available = list(available or [])
        message = f"Unsupported feed format {format_name!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ConfigurationError(FeedSmithError):
    """Configuration is invalid.

    Example:
        >>> from feedsmith.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("unknown log level")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: unknown log level
    """
