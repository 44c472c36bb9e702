"""Generic, format-neutral feed model.

Callers build a ``Feed`` once and export it as Atom, RSS 2.0 or JSON Feed.
Optional parts (link, author, image, enclosure, source) are ``None`` when
absent; timestamps are ``None`` when unset.

Example:
    >>> from datetime import UTC, datetime
    >>> from feedsmith.models.feed import Author, Feed, Item, Link
    >>> feed = Feed(
    ...     title="jmoiron.net blog",
    ...     link=Link(href="http://jmoiron.net/blog"),
    ...     author=Author(name="Jason Moiron", email="jmoiron@jmoiron.net"),
    ...     created=datetime(2013, 1, 16, 21, 52, 35, tzinfo=UTC),
    ... )
    >>> feed.add(Item(title="Limiting Concurrency", link=Link(href="http://jmoiron.net/blog/limiting-concurrency-in-go/")))
    >>> len(feed.items)
    1
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from functools import cmp_to_key
from typing import IO, Any

from pydantic import Field

from feedsmith.models.base import FeedSmithModel


class Link(FeedSmithModel):
    """A hyperlink with optional relation, MIME type and byte length."""

    href: str = ""
    rel: str = ""
    type: str = ""
    length: str = ""


class Author(FeedSmithModel):
    """Display name and email; either may be empty."""

    name: str = ""
    email: str = ""


class Image(FeedSmithModel):
    """Feed-level image. Width and height of 0 mean unset."""

    url: str = ""
    title: str = ""
    link: str = ""
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)


class Enclosure(FeedSmithModel):
    """A media attachment."""

    url: str = ""
    length: str = ""
    type: str = ""


class Item(FeedSmithModel):
    """A single feed entry.

    ``description`` is the HTML-safe summary; ``content`` is the full HTML
    body, kept separate.

    Example:
        >>> from feedsmith.models.feed import Enclosure, Item
        >>> item = Item(title="Episode 1", enclosure=Enclosure(url="http://x/e1.mp3", length=1024))
        >>> item.enclosure.length
        '1024'
        >>> item.author is None
        True
    """

    id: str = ""
    title: str = ""
    description: str = ""
    link: Link | None = None
    source: Link | None = None
    author: Author | None = None
    created: datetime | None = None
    updated: datetime | None = None
    enclosure: Enclosure | None = None
    content: str = ""


class Feed(FeedSmithModel):
    """The generic feed: channel metadata plus an ordered list of items."""

    title: str = ""
    link: Link | None = None
    description: str = ""
    author: Author | None = None
    updated: datetime | None = None
    created: datetime | None = None
    id: str = ""
    subtitle: str = ""
    items: list[Item] = Field(default_factory=list)
    copyright: str = ""
    image: Image | None = None

    def add(self, item: Item) -> None:
        """Append an item."""
        self.items.append(item)

    def sort(
        self,
        key: Callable[[Item], Any] | None = None,
        *,
        less: Callable[[Item, Item], bool] | None = None,
        reverse: bool = False,
    ) -> None:
        """Stable-sort items in place by a key function or a ``less`` comparator.

        Args:
            key: Sort key, as for ``list.sort``.
            less: ``less(a, b)`` returns True when ``a`` sorts before ``b``.
            reverse: Reverse the resulting order.

        Raises:
            TypeError: Unless exactly one of ``key`` and ``less`` is given.

        Example:
            >>> from feedsmith.models.feed import Feed, Item
            >>> feed = Feed(items=[Item(title="b"), Item(title="a"), Item(title="c")])
            >>> feed.sort(less=lambda a, b: a.title < b.title)
            >>> [i.title for i in feed.items]
            ['a', 'b', 'c']
        """
        if (key is None) == (less is None):
            msg = "sort() takes exactly one of key or less"
            raise TypeError(msg)
        if less is not None:

            def compare(a: Item, b: Item) -> int:
                if less(a, b):
                    return -1
                if less(b, a):
                    return 1
                return 0

            key = cmp_to_key(compare)
        self.items.sort(key=key, reverse=reverse)

    # ------------------------------------------------------------------
    # Export shortcuts
    # ------------------------------------------------------------------

    def to_atom(self, indent: int = 2) -> str:
        """Render as an Atom XML document."""
        from feedsmith.writer import render

        return render(self, "atom", indent=indent)

    def to_rss(self, indent: int = 2) -> str:
        """Render as an RSS 2.0 XML document."""
        from feedsmith.writer import render

        return render(self, "rss", indent=indent)

    def to_json(self, indent: int = 2) -> str:
        """Render as a JSON Feed document."""
        from feedsmith.writer import render

        return render(self, "json", indent=indent)

    def write_atom(self, fp: IO[Any], indent: int = 2) -> None:
        """Write the Atom document to a text or binary stream."""
        from feedsmith.projectors.atom import project_atom
        from feedsmith.writer import write_xml

        write_xml(project_atom(self), fp, indent=indent)

    def write_rss(self, fp: IO[Any], indent: int = 2) -> None:
        """Write the RSS document to a text or binary stream."""
        from feedsmith.projectors.rss import project_rss
        from feedsmith.writer import write_xml

        write_xml(project_rss(self), fp, indent=indent)

    def write_json(self, fp: IO[Any], indent: int = 2) -> None:
        """Write the JSON Feed document to a text or binary stream."""
        from feedsmith.projectors.json import project_json
        from feedsmith.writer import write_json

        write_json(project_json(self), fp, indent=indent)
