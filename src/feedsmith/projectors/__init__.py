"""Format projectors.

Each projector is a pure function from the generic ``Feed`` to one format's
document tree. They share no state and never modify the feed, so any number
of them may run over the same feed, concurrently or not.

Usage:
    from feedsmith.projectors import get_projector, project_atom

    atom = project_atom(feed)
    rss = get_projector("rss")(feed)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from feedsmith.core.exceptions import UnsupportedFormatError
from feedsmith.models.base import SchemaModel
from feedsmith.models.feed import Feed
from feedsmith.projectors.atom import project_atom, synthesize_entry_id
from feedsmith.projectors.json import project_json
from feedsmith.projectors.rss import managing_editor, project_rss, project_rss_channel

logger = logging.getLogger(__name__)

Projector = Callable[[Feed], SchemaModel]

_projectors: dict[str, Projector] = {
    "atom": project_atom,
    "rss": project_rss,
    "json": project_json,
}


def list_formats() -> list[str]:
    """Names of all registered formats, sorted.

    Example:
        >>> from feedsmith.projectors import list_formats
        >>> list_formats()
        ['atom', 'json', 'rss']
    """
    return sorted(_projectors)


def get_projector(name: str) -> Projector:
    """Look up a projector by format name (case-insensitive).

    Raises:
        UnsupportedFormatError: If no projector has that name.

    Example:
        >>> from feedsmith.projectors import get_projector, project_rss
        >>> get_projector("RSS") is project_rss
        True
    """
    try:
        return _projectors[name.strip().lower()]
    except KeyError:
        raise UnsupportedFormatError(name, available=list_formats()) from None


def register_projector(name: str, projector: Projector) -> None:
    """Register (or replace) a projector under a format name."""
    _projectors[name.strip().lower()] = projector
    logger.info(f"Registered projector: {name}")


def project(feed: Feed, fmt: str) -> SchemaModel:
    """Project a feed into the named format's document tree."""
    return get_projector(fmt)(feed)


__all__ = [
    "Projector",
    "get_projector",
    "list_formats",
    "managing_editor",
    "project",
    "project_atom",
    "project_json",
    "project_rss",
    "project_rss_channel",
    "register_projector",
    "synthesize_entry_id",
]
