"""
feedsmith - One generic feed, three syndication formats.

Build a format-neutral ``Feed`` once and export it as Atom, RSS 2.0 or
JSON Feed. Each format has its own projector: a pure function from the
generic model to that format's document tree, which the writer then
serializes.

Quick Start:
    >>> from datetime import UTC, datetime
    >>> from feedsmith import Author, Feed, Item, Link
    >>> feed = Feed(
    ...     title="jmoiron.net blog",
    ...     link=Link(href="http://jmoiron.net/blog"),
    ...     description="discussion about tech, footie, photos",
    ...     author=Author(name="Jason Moiron", email="jmoiron@jmoiron.net"),
    ...     created=datetime(2013, 1, 16, 21, 52, 35, tzinfo=UTC),
    ... )
    >>> feed.add(Item(
    ...     title="Limiting Concurrency in Go",
    ...     link=Link(href="http://jmoiron.net/blog/limiting-concurrency-in-go/"),
    ...     description="A discussion on controlled parallelism in golang",
    ...     created=datetime(2013, 1, 16, 21, 52, 35, tzinfo=UTC),
    ... ))
    >>> atom_xml = feed.to_atom()
    >>> rss_xml = feed.to_rss()
    >>> json_feed = feed.to_json()

Architecture:
    Generic model: Feed, Item, Link, Author, Image, Enclosure
    Projectors: project_atom, project_rss, project_json
    Writer: to_xml, to_json, render
"""

from feedsmith.core.config import Settings, get_settings
from feedsmith.core.exceptions import (
    ConfigurationError,
    FeedSmithError,
    UnsupportedFormatError,
)
from feedsmith.models.feed import Author, Enclosure, Feed, Image, Item, Link
from feedsmith.projectors import (
    get_projector,
    list_formats,
    project,
    project_atom,
    project_json,
    project_rss,
    project_rss_channel,
    register_projector,
)
from feedsmith.schemas.atom import AtomFeed
from feedsmith.schemas.jsonfeed import JSONFeed
from feedsmith.schemas.rss import RSSFeed, RSSFeedXML
from feedsmith.utils.timefmt import any_time_format
from feedsmith.writer import render, serialize, to_json, to_xml, write_json, write_xml

__version__ = "0.1.0"

__all__ = [
    # Generic model
    "Author",
    "Enclosure",
    "Feed",
    "Image",
    "Item",
    "Link",
    # Document trees
    "AtomFeed",
    "JSONFeed",
    "RSSFeed",
    "RSSFeedXML",
    # Projectors
    "get_projector",
    "list_formats",
    "project",
    "project_atom",
    "project_json",
    "project_rss",
    "project_rss_channel",
    "register_projector",
    # Writer
    "render",
    "serialize",
    "to_json",
    "to_xml",
    "write_json",
    "write_xml",
    # Helpers
    "any_time_format",
    # Configuration
    "Settings",
    "get_settings",
    # Exceptions
    "ConfigurationError",
    "FeedSmithError",
    "UnsupportedFormatError",
    # Version
    "__version__",
]
