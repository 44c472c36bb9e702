"""Atom projection.

Maps the generic ``Feed`` onto an ``AtomFeed`` tree. Two rules carry most
of the weight here:

- ``updated`` is required by Atom, so it falls back from ``updated`` to
  ``created`` (and is empty when neither is set).
- ``id`` is required on every entry. When an item has none, a tag URI
  (RFC 4151) is built from the item link and date:
  ``tag:{host},{YYYY-MM-DD}:{path}``. Without a link or a timestamp the id
  stays empty; no random id is generated, so such entries can collide.

Example:
    >>> from datetime import UTC, datetime
    >>> from feedsmith.models.feed import Feed, Item, Link
    >>> from feedsmith.projectors.atom import project_atom
    >>> feed = Feed(title="Blog", link=Link(href="http://example.com/"))
    >>> feed.add(Item(
    ...     title="A",
    ...     link=Link(href="http://example.com/a"),
    ...     created=datetime(2020, 1, 2, tzinfo=UTC),
    ... ))
    >>> atom = project_atom(feed)
    >>> atom.entries[0].id
    'tag:example.com,2020-01-02:/a'
    >>> atom.entries[0].links[0].rel
    'alternate'
"""

from __future__ import annotations

import logging
import re
from urllib.parse import unquote, urlsplit

from feedsmith.models.feed import Author, Feed, Item
from feedsmith.schemas.atom import (
    AtomAuthor,
    AtomContent,
    AtomEntry,
    AtomFeed,
    AtomLink,
    AtomSummary,
)
from feedsmith.utils.timefmt import any_time_format, date_only, is_zero, rfc3339

logger = logging.getLogger(__name__)

DEFAULT_LINK_REL = "alternate"
ENCLOSURE_REL = "enclosure"
INVALID_PATH = "/invalid.html"

_CONTROL_CHAR = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def project_atom(feed: Feed) -> AtomFeed:
    """Build an Atom document tree from a generic feed."""
    link = None
    if feed.link is not None:
        link = AtomLink(href=feed.link.href, rel=feed.link.rel)

    author = None
    if feed.author is not None:
        author = _person(feed.author)

    entries = tuple(_entry(item) for item in feed.items)
    logger.debug(f"Projected {len(entries)} items to Atom")

    return AtomFeed(
        title=feed.title,
        id=feed.link.href if feed.link is not None else "",
        updated=any_time_format(rfc3339, feed.updated, feed.created),
        logo=feed.image.url if feed.image is not None else "",
        rights=feed.copyright,
        subtitle=feed.subtitle or feed.description,
        link=link,
        author=author,
        entries=entries,
    )


def synthesize_entry_id(item: Item) -> str:
    """Build a tag URI for an item without an id, or return ``""``.

    Needs a non-empty link href and at least one non-zero timestamp.
    An unparseable href keeps the raw href as host and ``/invalid.html``
    as path.

    Example:
        >>> from datetime import UTC, datetime
        >>> from feedsmith.models.feed import Item, Link
        >>> synthesize_entry_id(Item(link=Link(href="http://example.com/a")))
        ''
        >>> synthesize_entry_id(Item(
        ...     link=Link(href="http://[::1/post"),
        ...     updated=datetime(2021, 3, 4, tzinfo=UTC),
        ... ))
        'tag:http://[::1/post,2021-03-04:/invalid.html'
    """
    href = item.link.href if item.link is not None else ""
    if not href or (is_zero(item.updated) and is_zero(item.created)):
        return ""

    date = any_time_format(date_only, item.updated, item.created)
    try:
        host, path = split_link(href)
    except ValueError:
        logger.warning(f"Cannot parse item link {href!r}, using fallback path in entry id")
        host, path = href, INVALID_PATH
    return f"tag:{host},{date}:{path}"


def split_link(href: str) -> tuple[str, str]:
    """Split a link href into host and unescaped path for a tag URI.

    The host is the netloc without userinfo; the port stays.

    Raises:
        ValueError: If the href contains a control character, a malformed
            percent escape, unbalanced IPv6 brackets or a bad port.

    Example:
        >>> split_link("http://user@example.com:8080/a%20b")
        ('example.com:8080', '/a b')
    """
    if _CONTROL_CHAR.search(href):
        msg = f"Control character in URL {href!r}"
        raise ValueError(msg)
    if _BAD_ESCAPE.search(href):
        msg = f"Invalid URL escape in {href!r}"
        raise ValueError(msg)
    parts = urlsplit(href)
    parts.port  # raises ValueError for a non-numeric or out-of-range port
    return parts.netloc.rpartition("@")[2], unquote(parts.path)


def _person(author: Author) -> AtomAuthor:
    return AtomAuthor(name=author.name, email=author.email)


def _entry(item: Item) -> AtomEntry:
    entry_id = item.id or synthesize_entry_id(item)

    rel = (item.link.rel if item.link is not None else "") or DEFAULT_LINK_REL
    links: list[AtomLink] = []
    if item.link is not None:
        links.append(AtomLink(href=item.link.href, rel=rel, type=item.link.type))
    if item.enclosure is not None and rel != ENCLOSURE_REL:
        links.append(
            AtomLink(
                href=item.enclosure.url,
                rel=ENCLOSURE_REL,
                type=item.enclosure.type,
                length=item.enclosure.length,
            )
        )

    # description and content are both assumed to be HTML
    content = AtomContent(content=item.content) if item.content else None

    author = None
    if item.author is not None and (item.author.name or item.author.email):
        author = _person(item.author)

    return AtomEntry(
        title=item.title,
        updated=any_time_format(rfc3339, item.updated, item.created),
        id=entry_id,
        content=content,
        published=any_time_format(rfc3339, item.created),
        links=tuple(links),
        summary=AtomSummary(content=item.description),
        author=author,
    )
