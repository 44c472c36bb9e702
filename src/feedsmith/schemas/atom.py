"""Atom document tree (RFC 4287).

Field order mirrors element order on the wire. Empty strings are omitted
by the writer except for the elements Atom requires (``title``, ``id``,
``updated``).

The projector never fills ``contributor``; it is part of the tree so that
hand-built documents can carry one.
"""

from __future__ import annotations

from feedsmith.models.base import SchemaModel

ATOM_NS = "http://www.w3.org/2005/Atom"


class AtomPerson(SchemaModel):
    name: str = ""
    uri: str = ""
    email: str = ""


class AtomAuthor(AtomPerson):
    """``<author>`` element."""


class AtomContributor(AtomPerson):
    """``<contributor>`` element."""


class AtomLink(SchemaModel):
    """``<link>``; all data lives in attributes. Several may coexist with different ``rel``."""

    href: str = ""
    rel: str = ""
    type: str = ""
    hreflang: str = ""
    length: str = ""


class AtomSummary(SchemaModel):
    content: str = ""
    type: str = "html"


class AtomContent(SchemaModel):
    content: str = ""
    type: str = "html"


class AtomEntry(SchemaModel):
    title: str = ""  # required
    updated: str = ""  # required
    id: str = ""  # required
    content: AtomContent | None = None
    rights: str = ""
    published: str = ""
    contributor: AtomContributor | None = None
    links: tuple[AtomLink, ...] = ()  # required if no content
    summary: AtomSummary | None = None
    author: AtomAuthor | None = None  # required if the feed has no author


class AtomFeed(SchemaModel):
    xmlns: str = ATOM_NS
    title: str = ""  # required
    id: str = ""  # required
    updated: str = ""  # required
    icon: str = ""
    logo: str = ""
    rights: str = ""
    subtitle: str = ""
    link: AtomLink | None = None
    author: AtomAuthor | None = None
    contributor: AtomContributor | None = None
    entries: tuple[AtomEntry, ...] = ()
