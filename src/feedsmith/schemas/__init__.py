"""Format-specific document trees produced by the projectors."""

from feedsmith.schemas.atom import (
    ATOM_NS,
    AtomAuthor,
    AtomContent,
    AtomContributor,
    AtomEntry,
    AtomFeed,
    AtomLink,
    AtomPerson,
    AtomSummary,
)
from feedsmith.schemas.jsonfeed import (
    JSON_FEED_VERSION,
    JSONAttachment,
    JSONAuthor,
    JSONFeed,
    JSONHub,
    JSONItem,
)
from feedsmith.schemas.rss import (
    CONTENT_NS,
    RSS_VERSION,
    RSSContent,
    RSSEnclosure,
    RSSFeed,
    RSSFeedXML,
    RSSImage,
    RSSItem,
    RSSTextInput,
)

__all__ = [
    # Atom
    "ATOM_NS",
    "AtomAuthor",
    "AtomContent",
    "AtomContributor",
    "AtomEntry",
    "AtomFeed",
    "AtomLink",
    "AtomPerson",
    "AtomSummary",
    # RSS
    "CONTENT_NS",
    "RSS_VERSION",
    "RSSContent",
    "RSSEnclosure",
    "RSSFeed",
    "RSSFeedXML",
    "RSSImage",
    "RSSItem",
    "RSSTextInput",
    # JSON Feed
    "JSON_FEED_VERSION",
    "JSONAttachment",
    "JSONAuthor",
    "JSONFeed",
    "JSONHub",
    "JSONItem",
]
