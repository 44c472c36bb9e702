"""JSON Feed version 1 document tree.

See https://jsonfeed.org/version/1. Optional members are ``None`` when
absent and are left out of the encoded document; ``version``, ``title``,
``items`` and each item's ``id`` are always written.

Members with no generic counterpart (``hubs``, ``feed_url``, ``tags`` and
others) are never filled by the projector; they are kept for hand-built
documents.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import field_serializer

from feedsmith.models.base import SchemaModel
from feedsmith.utils.timefmt import rfc3339_nano

JSON_FEED_VERSION = "https://jsonfeed.org/version/1"


class JSONAuthor(SchemaModel):
    name: str | None = None
    url: str | None = None
    avatar: str | None = None


class JSONHub(SchemaModel):
    """Real-time subscription endpoint."""

    type: str
    url: str


class JSONAttachment(SchemaModel):
    """A related resource, e.g. a podcast's audio file."""

    url: str
    mime_type: str
    title: str | None = None
    size_in_bytes: int | None = None
    duration_in_seconds: int | None = None


class JSONItem(SchemaModel):
    id: str  # required
    url: str | None = None
    external_url: str | None = None
    title: str | None = None
    content_html: str | None = None
    content_text: str | None = None
    summary: str | None = None
    image: str | None = None
    banner_image: str | None = None
    date_published: datetime | None = None
    date_modified: datetime | None = None
    author: JSONAuthor | None = None
    tags: tuple[str, ...] | None = None
    attachments: tuple[JSONAttachment, ...] | None = None

    @field_serializer("date_published", "date_modified", when_used="json-unless-none")
    def _serialize_date(self, value: datetime) -> str:
        return rfc3339_nano(value)


class JSONFeed(SchemaModel):
    version: str = JSON_FEED_VERSION
    title: str = ""  # required
    home_page_url: str | None = None
    feed_url: str | None = None
    description: str | None = None
    user_comment: str | None = None
    next_url: str | None = None
    icon: str | None = None
    favicon: str | None = None
    author: JSONAuthor | None = None
    expired: bool | None = None
    hubs: tuple[JSONHub, ...] | None = None
    items: tuple[JSONItem, ...] = ()
