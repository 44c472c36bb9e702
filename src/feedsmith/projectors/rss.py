"""RSS 2.0 projection.

RSS has no structured author, no required identifier and no rich content
element of its own, so the mapping collapses and drops more than Atom:

- the feed author becomes a single ``managingEditor`` string;
- ``guid`` is the item id verbatim, empty or not;
- rich content goes to ``content:encoded`` next to the plain
  ``description``;
- an enclosure without both ``type`` and ``length`` is left out.

Example:
    >>> from feedsmith.models.feed import Author, Feed
    >>> from feedsmith.projectors.rss import project_rss
    >>> rss = project_rss(Feed(title="Blog", author=Author(name="Jane", email="j@x.com")))
    >>> rss.version
    '2.0'
    >>> rss.channel.managing_editor
    'j@x.com (Jane)'
"""

from __future__ import annotations

import logging

from feedsmith.models.feed import Author, Enclosure, Feed, Item
from feedsmith.schemas.rss import (
    RSSContent,
    RSSEnclosure,
    RSSFeed,
    RSSFeedXML,
    RSSImage,
    RSSItem,
)
from feedsmith.utils.timefmt import any_time_format, rfc1123z

logger = logging.getLogger(__name__)


def project_rss(feed: Feed) -> RSSFeedXML:
    """Build the ``<rss>`` envelope around the projected channel."""
    return RSSFeedXML(channel=project_rss_channel(feed))


def project_rss_channel(feed: Feed) -> RSSFeed:
    """Build the RSS ``<channel>`` tree from a generic feed."""
    image = None
    if feed.image is not None:
        image = RSSImage(
            url=feed.image.url,
            title=feed.image.title,
            link=feed.image.link,
            width=feed.image.width,
            height=feed.image.height,
        )

    items = tuple(_item(item) for item in feed.items)
    logger.debug(f"Projected {len(items)} items to RSS")

    return RSSFeed(
        title=feed.title,
        link=feed.link.href if feed.link is not None else "",
        description=feed.description,
        copyright=feed.copyright,
        managing_editor=managing_editor(feed.author),
        pub_date=any_time_format(rfc1123z, feed.created, feed.updated),
        last_build_date=any_time_format(rfc1123z, feed.updated),
        image=image,
        items=items,
    )


def managing_editor(author: Author | None) -> str:
    """Collapse an author into RSS's single-string form.

    Example:
        >>> from feedsmith.models.feed import Author
        >>> managing_editor(Author(email="j@x.com"))
        'j@x.com'
        >>> managing_editor(Author(name="Jane"))
        ''
        >>> managing_editor(None)
        ''
    """
    if author is None or not author.email:
        return ""
    if author.name:
        return f"{author.email} ({author.name})"
    return author.email


def _enclosure(enclosure: Enclosure | None) -> RSSEnclosure | None:
    if enclosure is None:
        return None
    if not enclosure.type or not enclosure.length:
        logger.debug(f"Dropping enclosure {enclosure.url!r}: RSS requires type and length")
        return None
    return RSSEnclosure(url=enclosure.url, length=enclosure.length, type=enclosure.type)


def _item(item: Item) -> RSSItem:
    return RSSItem(
        title=item.title,
        link=item.link.href if item.link is not None else "",
        description=item.description,
        content=RSSContent(content=item.content) if item.content else None,
        author=item.author.name if item.author is not None else "",
        enclosure=_enclosure(item.enclosure),
        guid=item.id,
        pub_date=any_time_format(rfc1123z, item.created, item.updated),
        source=item.source.href if item.source is not None else "",
    )
