"""Tests for feedsmith.projectors.rss - RSS 2.0 projection."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from feedsmith.models.feed import Author, Enclosure, Feed, Image, Item, Link
from feedsmith.projectors.rss import managing_editor, project_rss, project_rss_channel
from feedsmith.schemas.rss import CONTENT_NS, RSSContent, RSSEnclosure, RSSImage

CREATED = datetime(2013, 1, 16, 21, 52, 35, tzinfo=timezone(timedelta(hours=-5)))
UPDATED = datetime(2013, 1, 18, 9, 30, 0, tzinfo=UTC)

# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def feed() -> Feed:
    """Feed with one rich item and one podcast item."""
    return Feed(
        title="jmoiron.net blog",
        link=Link(href="http://jmoiron.net/blog"),
        description="discussion about tech, footie, photos",
        author=Author(name="Jason Moiron", email="jmoiron@jmoiron.net"),
        created=CREATED,
        copyright="This work is copyright © Benjamin Button",
        image=Image(url="http://jmoiron.net/logo.png", title="logo", link="http://jmoiron.net", width=88, height=31),
        items=[
            Item(
                id="post-1",
                title="Limiting Concurrency in Go",
                link=Link(href="http://jmoiron.net/blog/limiting-concurrency-in-go/"),
                source=Link(href="http://planet.golang.org/"),
                description="A discussion on controlled parallelism in golang",
                content="<p>Full <b>HTML</b> body</p>",
                author=Author(name="Jason Moiron", email="jmoiron@jmoiron.net"),
                created=CREATED,
            ),
            Item(
                title="Episode 1",
                link=Link(href="http://jmoiron.net/podcast/1"),
                description="Pilot",
                enclosure=Enclosure(url="http://jmoiron.net/podcast/1.mp3", length="5650889", type="audio/mpeg"),
                updated=UPDATED,
            ),
        ],
    )


# =============================================================================
# Envelope Tests
# =============================================================================


class TestRSSEnvelope:
    """Tests for the <rss> wrapper."""

    def test_version_and_namespace(self, feed: Feed) -> None:
        rss = project_rss(feed)
        assert rss.version == "2.0"
        assert rss.content_namespace == CONTENT_NS == "http://purl.org/rss/1.0/modules/content/"

    def test_channel_matches_direct_projection(self, feed: Feed) -> None:
        assert project_rss(feed).channel == project_rss_channel(feed)


# =============================================================================
# Channel Tests
# =============================================================================


class TestRSSChannel:
    """Tests for channel-level fields."""

    def test_required_fields(self, feed: Feed) -> None:
        channel = project_rss_channel(feed)
        assert channel.title == "jmoiron.net blog"
        assert channel.link == "http://jmoiron.net/blog"
        assert channel.description == "discussion about tech, footie, photos"

    def test_missing_link_gives_empty_string(self) -> None:
        assert project_rss_channel(Feed(title="x")).link == ""

    def test_pub_date_prefers_created(self, feed: Feed) -> None:
        feed.updated = UPDATED
        channel = project_rss_channel(feed)
        assert channel.pub_date == "Wed, 16 Jan 2013 21:52:35 -0500"
        assert channel.last_build_date == "Fri, 18 Jan 2013 09:30:00 +0000"

    def test_pub_date_falls_back_to_updated(self) -> None:
        channel = project_rss_channel(Feed(updated=UPDATED))
        assert channel.pub_date == "Fri, 18 Jan 2013 09:30:00 +0000"

    def test_last_build_date_has_no_fallback(self, feed: Feed) -> None:
        assert project_rss_channel(feed).last_build_date == ""

    def test_copyright(self, feed: Feed) -> None:
        assert project_rss_channel(feed).copyright == "This work is copyright © Benjamin Button"

    def test_image_copied(self, feed: Feed) -> None:
        assert project_rss_channel(feed).image == RSSImage(
            url="http://jmoiron.net/logo.png", title="logo", link="http://jmoiron.net", width=88, height=31
        )

    def test_no_image(self) -> None:
        assert project_rss_channel(Feed()).image is None


class TestManagingEditor:
    """Tests for author collapsing."""

    def test_name_and_email(self) -> None:
        assert managing_editor(Author(name="Jane", email="j@x.com")) == "j@x.com (Jane)"

    def test_email_only(self) -> None:
        assert managing_editor(Author(email="j@x.com")) == "j@x.com"

    def test_name_only_is_empty(self) -> None:
        assert managing_editor(Author(name="Jane")) == ""

    def test_absent(self) -> None:
        assert managing_editor(None) == ""

    def test_feed_uses_it(self, feed: Feed) -> None:
        assert project_rss_channel(feed).managing_editor == "jmoiron@jmoiron.net (Jason Moiron)"


# =============================================================================
# Item Tests
# =============================================================================


class TestRSSItem:
    """Tests for per-item mapping."""

    def test_item_order(self, feed: Feed) -> None:
        assert [i.title for i in project_rss_channel(feed).items] == [
            "Limiting Concurrency in Go",
            "Episode 1",
        ]

    def test_guid_verbatim(self, feed: Feed) -> None:
        items = project_rss_channel(feed).items
        assert items[0].guid == "post-1"
        assert items[1].guid == ""

    def test_pub_date_fallback(self, feed: Feed) -> None:
        items = project_rss_channel(feed).items
        assert items[0].pub_date == "Wed, 16 Jan 2013 21:52:35 -0500"
        assert items[1].pub_date == "Fri, 18 Jan 2013 09:30:00 +0000"

    def test_content_and_description_both_kept(self, feed: Feed) -> None:
        item = project_rss_channel(feed).items[0]
        assert item.description == "A discussion on controlled parallelism in golang"
        assert item.content == RSSContent(content="<p>Full <b>HTML</b> body</p>")

    def test_no_content_when_empty(self, feed: Feed) -> None:
        assert project_rss_channel(feed).items[1].content is None

    def test_source_href(self, feed: Feed) -> None:
        items = project_rss_channel(feed).items
        assert items[0].source == "http://planet.golang.org/"
        assert items[1].source == ""

    def test_author_is_name(self, feed: Feed) -> None:
        items = project_rss_channel(feed).items
        assert items[0].author == "Jason Moiron"
        assert items[1].author == ""

    def test_item_without_link(self) -> None:
        assert project_rss_channel(Feed(items=[Item(title="x")])).items[0].link == ""


class TestRSSEnclosure:
    """Tests for the enclosure completeness rule."""

    def test_complete_enclosure_emitted(self, feed: Feed) -> None:
        assert project_rss_channel(feed).items[1].enclosure == RSSEnclosure(
            url="http://jmoiron.net/podcast/1.mp3", length="5650889", type="audio/mpeg"
        )

    def test_url_only_enclosure_dropped(self) -> None:
        item = Item(enclosure=Enclosure(url="http://example.com/a.mp3"))
        assert project_rss_channel(Feed(items=[item])).items[0].enclosure is None

    @pytest.mark.parametrize(
        ("length", "mime"),
        [("", "audio/mpeg"), ("100", "")],
    )
    def test_partial_enclosure_dropped(self, length: str, mime: str) -> None:
        item = Item(enclosure=Enclosure(url="http://example.com/a.mp3", length=length, type=mime))
        assert project_rss_channel(Feed(items=[item])).items[0].enclosure is None
