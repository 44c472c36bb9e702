"""Serialization of projected document trees.

XML documents get the ``<?xml version="1.0" encoding="UTF-8"?>`` header and
are indented with ``indent`` spaces per level (``0`` writes them on one
line). JSON Feed documents are encoded with optional members omitted.

Encoding errors (e.g. control characters lxml refuses) propagate unchanged.

Example:
    >>> from feedsmith.models.feed import Feed, Link
    >>> from feedsmith.writer import render
    >>> print(render(Feed(title="Blog", link=Link(href="http://example.com/")), "rss"))
    <?xml version="1.0" encoding="UTF-8"?>
    <rss xmlns:content="http://purl.org/rss/1.0/modules/content/" version="2.0">
      <channel>
        <title>Blog</title>
        <link>http://example.com/</link>
        <description></description>
      </channel>
    </rss>
"""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from typing import IO, Any

from lxml import etree

from feedsmith.models.base import SchemaModel
from feedsmith.models.feed import Feed
from feedsmith.projectors import project
from feedsmith.schemas.atom import AtomEntry, AtomFeed, AtomLink, AtomPerson
from feedsmith.schemas.jsonfeed import JSONFeed
from feedsmith.schemas.rss import RSSFeed, RSSFeedXML, RSSImage, RSSItem, RSSTextInput

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'

XMLTree = AtomFeed | RSSFeedXML | RSSFeed

# (element tag, field name, always written)
_RSS_CHANNEL_FIELDS = (
    ("title", "title", True),
    ("link", "link", True),
    ("description", "description", True),
    ("language", "language", False),
    ("copyright", "copyright", False),
    ("managingEditor", "managing_editor", False),
    ("webMaster", "web_master", False),
    ("pubDate", "pub_date", False),
    ("lastBuildDate", "last_build_date", False),
    ("category", "category", False),
    ("generator", "generator", False),
    ("docs", "docs", False),
    ("cloud", "cloud", False),
    ("ttl", "ttl", False),
    ("rating", "rating", False),
    ("skipHours", "skip_hours", False),
    ("skipDays", "skip_days", False),
)

_RSS_ITEM_TRAILING_FIELDS = (
    ("guid", "guid"),
    ("pubDate", "pub_date"),
    ("source", "source"),
)


# =============================================================================
# Element helpers
# =============================================================================


def _text(parent: etree._Element, tag: str, value: Any, *, required: bool = False) -> None:
    """Append ``<tag>value</tag>``; empty/zero values only when required."""
    if value or required:
        etree.SubElement(parent, tag).text = str(value) if value else ""


def _attrs(element: etree._Element, **attrs: str) -> None:
    for name, value in attrs.items():
        if value:
            element.set(name, value)


def _cdata(text: str) -> etree.CDATA | str:
    # a CDATA section cannot contain its own terminator
    if "]]>" in text:
        return text
    return etree.CDATA(text)


# =============================================================================
# Atom
# =============================================================================


def _atom_link(parent: etree._Element, link: AtomLink, ns: str) -> None:
    element = etree.SubElement(parent, f"{{{ns}}}link")
    element.set("href", link.href)
    _attrs(element, rel=link.rel, type=link.type, hreflang=link.hreflang, length=link.length)


def _atom_person(parent: etree._Element, tag: str, person: AtomPerson, ns: str) -> None:
    element = etree.SubElement(parent, f"{{{ns}}}{tag}")
    _text(element, f"{{{ns}}}name", person.name)
    _text(element, f"{{{ns}}}uri", person.uri)
    _text(element, f"{{{ns}}}email", person.email)


def _atom_entry(parent: etree._Element, entry: AtomEntry, ns: str) -> None:
    element = etree.SubElement(parent, f"{{{ns}}}entry")
    _text(element, f"{{{ns}}}title", entry.title, required=True)
    _text(element, f"{{{ns}}}updated", entry.updated, required=True)
    _text(element, f"{{{ns}}}id", entry.id, required=True)
    if entry.content is not None:
        content = etree.SubElement(element, f"{{{ns}}}content", type=entry.content.type)
        content.text = entry.content.content
    _text(element, f"{{{ns}}}rights", entry.rights)
    _text(element, f"{{{ns}}}published", entry.published)
    if entry.contributor is not None:
        _atom_person(element, "contributor", entry.contributor, ns)
    for link in entry.links:
        _atom_link(element, link, ns)
    if entry.summary is not None:
        summary = etree.SubElement(element, f"{{{ns}}}summary", type=entry.summary.type)
        summary.text = entry.summary.content
    if entry.author is not None:
        _atom_person(element, "author", entry.author, ns)


def atom_element(feed: AtomFeed) -> etree._Element:
    """Build the ``<feed>`` element tree for an Atom document."""
    ns = feed.xmlns
    root = etree.Element(f"{{{ns}}}feed", nsmap={None: ns})
    _text(root, f"{{{ns}}}title", feed.title, required=True)
    _text(root, f"{{{ns}}}id", feed.id, required=True)
    _text(root, f"{{{ns}}}updated", feed.updated, required=True)
    for tag in ("icon", "logo", "rights", "subtitle"):
        _text(root, f"{{{ns}}}{tag}", getattr(feed, tag))
    if feed.link is not None:
        _atom_link(root, feed.link, ns)
    if feed.author is not None:
        _atom_person(root, "author", feed.author, ns)
    if feed.contributor is not None:
        _atom_person(root, "contributor", feed.contributor, ns)
    for entry in feed.entries:
        _atom_entry(root, entry, ns)
    return root


# =============================================================================
# RSS
# =============================================================================


def _rss_image(parent: etree._Element, image: RSSImage) -> None:
    element = etree.SubElement(parent, "image")
    _text(element, "url", image.url, required=True)
    _text(element, "title", image.title, required=True)
    _text(element, "link", image.link, required=True)
    _text(element, "width", image.width)
    _text(element, "height", image.height)


def _rss_text_input(parent: etree._Element, text_input: RSSTextInput) -> None:
    element = etree.SubElement(parent, "textInput")
    for tag in ("title", "description", "name", "link"):
        _text(element, tag, getattr(text_input, tag), required=True)


def _rss_item(parent: etree._Element, item: RSSItem, content_ns: str) -> None:
    element = etree.SubElement(parent, "item")
    _text(element, "title", item.title, required=True)
    _text(element, "link", item.link, required=True)
    _text(element, "description", item.description, required=True)
    if item.content is not None:
        etree.SubElement(element, f"{{{content_ns}}}encoded").text = _cdata(item.content.content)
    _text(element, "author", item.author)
    _text(element, "category", item.category)
    _text(element, "comments", item.comments)
    if item.enclosure is not None:
        etree.SubElement(
            element,
            "enclosure",
            url=item.enclosure.url,
            length=item.enclosure.length,
            type=item.enclosure.type,
        )
    for tag, field in _RSS_ITEM_TRAILING_FIELDS:
        _text(element, tag, getattr(item, field))


def rss_element(envelope: RSSFeedXML) -> etree._Element:
    """Build the ``<rss>`` element tree for an RSS document."""
    content_ns = envelope.content_namespace
    root = etree.Element("rss", nsmap={"content": content_ns})
    root.set("version", envelope.version)

    channel = etree.SubElement(root, "channel")
    feed = envelope.channel
    for tag, field, required in _RSS_CHANNEL_FIELDS:
        _text(channel, tag, getattr(feed, field), required=required)
    if feed.image is not None:
        _rss_image(channel, feed.image)
    if feed.text_input is not None:
        _rss_text_input(channel, feed.text_input)
    for item in feed.items:
        _rss_item(channel, item, content_ns)
    return root


# =============================================================================
# Public API
# =============================================================================


def _write(fp: IO[Any], text: str) -> None:
    if isinstance(fp, io.TextIOBase):
        fp.write(text)
    else:
        fp.write(text.encode("utf-8"))


def to_xml(tree: XMLTree, indent: int = 2) -> str:
    """Serialize an Atom or RSS tree to an XML string with header.

    A bare ``RSSFeed`` channel is wrapped in the ``<rss>`` envelope first.

    Raises:
        TypeError: If ``tree`` is not an XML document tree.
    """
    if isinstance(tree, RSSFeed):
        tree = RSSFeedXML(channel=tree)
    if isinstance(tree, AtomFeed):
        root = atom_element(tree)
    elif isinstance(tree, RSSFeedXML):
        root = rss_element(tree)
    else:
        msg = f"Cannot serialize {type(tree).__name__} as XML"
        raise TypeError(msg)

    if indent > 0:
        etree.indent(root, space=" " * indent)
    body = etree.tostring(root, encoding="unicode")
    return f"{XML_HEADER}\n{body}"


def write_xml(tree: XMLTree, fp: IO[Any], indent: int = 2) -> None:
    """Write an Atom or RSS tree to a text or binary stream."""
    _write(fp, to_xml(tree, indent=indent))


def to_json(tree: JSONFeed, indent: int = 2) -> str:
    """Serialize a JSON Feed tree, leaving out absent members."""
    data = tree.model_dump(mode="json", exclude_none=True)
    return json.dumps(data, indent=indent or None, ensure_ascii=False)


def write_json(tree: JSONFeed, fp: IO[Any], indent: int = 2) -> None:
    """Write a JSON Feed tree to a text or binary stream, newline-terminated."""
    _write(fp, to_json(tree, indent=indent) + "\n")


_SERIALIZERS: dict[type, Callable[..., str]] = {
    AtomFeed: to_xml,
    RSSFeedXML: to_xml,
    RSSFeed: to_xml,
    JSONFeed: to_json,
}


def serialize(tree: SchemaModel, indent: int = 2) -> str:
    """Serialize any projected tree with the matching writer.

    Raises:
        TypeError: If no writer handles the tree's type.
    """
    serializer = _SERIALIZERS.get(type(tree))
    if serializer is None:
        msg = f"No writer for {type(tree).__name__}"
        raise TypeError(msg)
    return serializer(tree, indent=indent)


def render(feed: Feed, fmt: str, indent: int = 2) -> str:
    """Project a feed into ``fmt`` and serialize it.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a registered format.
    """
    return serialize(project(feed, fmt), indent=indent)
