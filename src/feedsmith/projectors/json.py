"""JSON Feed projection.

Absent generic values stay absent: every optional member is ``None`` in the
tree and omitted when encoded, never written as ``null`` or ``""``. The
author keeps only its name, since JSON Feed authors have no email.
Item ids are copied as they are, including empty ones.

Example:
    >>> from feedsmith.models.feed import Feed, Item
    >>> from feedsmith.projectors.json import project_json
    >>> doc = project_json(Feed(title="Blog", items=[Item(id="1")]))
    >>> doc.version
    'https://jsonfeed.org/version/1'
    >>> doc.items[0].date_published is None
    True
"""

from __future__ import annotations

import logging

from feedsmith.models.feed import Author, Enclosure, Feed, Item, Link
from feedsmith.schemas.jsonfeed import JSONAttachment, JSONAuthor, JSONFeed, JSONItem
from feedsmith.utils.timefmt import is_zero

logger = logging.getLogger(__name__)


def project_json(feed: Feed) -> JSONFeed:
    """Build a JSON Feed document tree from a generic feed."""
    items = tuple(_item(item) for item in feed.items)
    logger.debug(f"Projected {len(items)} items to JSON Feed")

    return JSONFeed(
        title=feed.title,
        home_page_url=_href(feed.link),
        description=feed.description or None,
        icon=(feed.image.url or None) if feed.image is not None else None,
        author=_author(feed.author),
        items=items,
    )


def _href(link: Link | None) -> str | None:
    if link is None:
        return None
    return link.href or None


def _author(author: Author | None) -> JSONAuthor | None:
    if author is None:
        return None
    return JSONAuthor(name=author.name or None)


def _attachments(enclosure: Enclosure) -> tuple[JSONAttachment, ...] | None:
    if not enclosure.url or not enclosure.type:
        return None
    length = enclosure.length
    size = int(length) if length.isascii() and length.isdigit() else None
    return (JSONAttachment(url=enclosure.url, mime_type=enclosure.type, size_in_bytes=size),)


def _item(item: Item) -> JSONItem:
    image = None
    attachments = None
    if item.enclosure is not None:
        if item.enclosure.type.startswith("image/"):
            image = item.enclosure.url or None
        else:
            attachments = _attachments(item.enclosure)

    return JSONItem(
        id=item.id,
        url=_href(item.link),
        external_url=_href(item.source),
        title=item.title or None,
        summary=item.description or None,
        content_html=item.content or None,
        image=image,
        date_published=None if is_zero(item.created) else item.created,
        date_modified=None if is_zero(item.updated) else item.updated,
        author=_author(item.author),
        attachments=attachments,
    )
