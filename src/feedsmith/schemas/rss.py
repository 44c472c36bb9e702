"""RSS 2.0 document tree with the ``content:encoded`` extension.

See http://cyber.law.harvard.edu/rss/rss.html. ``RSSFeed`` is the
``<channel>``; ``RSSFeedXML`` is the ``<rss>`` envelope around it.

The projector never fills ``text_input`` or the other optional channel
fields with no generic counterpart (``language``, ``ttl`` and so on); they
are kept for hand-built documents.
"""

from __future__ import annotations

from feedsmith.models.base import SchemaModel

RSS_VERSION = "2.0"
CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"


class RSSImage(SchemaModel):
    url: str = ""
    title: str = ""
    link: str = ""
    width: int = 0
    height: int = 0


class RSSTextInput(SchemaModel):
    title: str = ""
    description: str = ""
    name: str = ""
    link: str = ""


class RSSEnclosure(SchemaModel):
    """Attribute-only ``<enclosure>``; all three attributes are required."""

    url: str
    length: str
    type: str


class RSSContent(SchemaModel):
    """``<content:encoded>``, written as CDATA."""

    content: str = ""


class RSSItem(SchemaModel):
    title: str = ""  # required
    link: str = ""  # required
    description: str = ""  # required
    content: RSSContent | None = None
    author: str = ""
    category: str = ""
    comments: str = ""
    enclosure: RSSEnclosure | None = None
    guid: str = ""  # Item.id
    pub_date: str = ""  # created or updated
    source: str = ""


class RSSFeed(SchemaModel):
    title: str = ""  # required
    link: str = ""  # required
    description: str = ""  # required
    language: str = ""
    copyright: str = ""
    managing_editor: str = ""  # author
    web_master: str = ""
    pub_date: str = ""  # created or updated
    last_build_date: str = ""  # updated
    category: str = ""
    generator: str = ""
    docs: str = ""
    cloud: str = ""
    ttl: int = 0
    rating: str = ""
    skip_hours: str = ""
    skip_days: str = ""
    image: RSSImage | None = None
    text_input: RSSTextInput | None = None
    items: tuple[RSSItem, ...] = ()


class RSSFeedXML(SchemaModel):
    """The ``<rss>`` root carrying the version and content namespace."""

    version: str = RSS_VERSION
    content_namespace: str = CONTENT_NS
    channel: RSSFeed
