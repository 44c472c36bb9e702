"""Tests for feedsmith.writer - JSON Feed serialization and dispatch."""

from __future__ import annotations

import io
import json
from datetime import UTC, datetime

import pytest

from feedsmith.core.exceptions import UnsupportedFormatError
from feedsmith.models.feed import Author, Feed, Item, Link
from feedsmith.projectors import project_atom, project_json, project_rss
from feedsmith.schemas.jsonfeed import JSONFeed, JSONHub
from feedsmith.writer import XML_HEADER, render, serialize, to_json, to_xml, write_json


@pytest.fixture
def feed() -> Feed:
    return Feed(
        title="My Example Feed",
        link=Link(href="https://example.org/"),
        author=Author(name="Jane", email="j@x.com"),
        items=[
            Item(
                id="2",
                title="Résumé",
                content="<p>This is a second item.</p>",
                created=datetime(2020, 1, 2, 3, 4, 5, tzinfo=UTC),
            ),
            Item(id=""),
        ],
    )


class TestToJSON:
    """Tests for JSON Feed encoding."""

    def test_absent_members_omitted(self, feed: Feed) -> None:
        data = json.loads(to_json(project_json(feed)))
        assert data == {
            "version": "https://jsonfeed.org/version/1",
            "title": "My Example Feed",
            "home_page_url": "https://example.org/",
            "author": {"name": "Jane"},
            "items": [
                {
                    "id": "2",
                    "title": "Résumé",
                    "content_html": "<p>This is a second item.</p>",
                    "date_published": "2020-01-02T03:04:05Z",
                },
                {"id": ""},
            ],
        }

    def test_no_nulls_written(self, feed: Feed) -> None:
        assert "null" not in to_json(project_json(feed))

    def test_dates_keep_fractional_seconds(self) -> None:
        item = Item(id="1", created=datetime(2020, 1, 2, 3, 4, 5, 500000, tzinfo=UTC))
        data = json.loads(to_json(project_json(Feed(items=[item]))))
        assert data["items"][0]["date_published"] == "2020-01-02T03:04:05.5Z"

    def test_hand_built_hubs(self) -> None:
        tree = JSONFeed(title="t", hubs=(JSONHub(type="WebSub", url="https://hub.example/"),))
        assert json.loads(to_json(tree))["hubs"] == [{"type": "WebSub", "url": "https://hub.example/"}]

    def test_empty_feed_keeps_items(self) -> None:
        data = json.loads(to_json(project_json(Feed())))
        assert data == {"version": "https://jsonfeed.org/version/1", "title": "", "items": []}

    def test_non_ascii_unescaped(self, feed: Feed) -> None:
        assert "Résumé" in to_json(project_json(feed))

    def test_indent_zero_is_compact(self, feed: Feed) -> None:
        assert "\n" not in to_json(project_json(feed), indent=0)

    def test_write_json_binary(self, feed: Feed) -> None:
        buffer = io.BytesIO()
        write_json(project_json(feed), buffer)
        assert buffer.getvalue().decode("utf-8") == to_json(project_json(feed)) + "\n"


class TestSerialize:
    """Tests for type-based dispatch."""

    def test_dispatches_by_tree_type(self, feed: Feed) -> None:
        assert serialize(project_atom(feed)) == to_xml(project_atom(feed))
        assert serialize(project_rss(feed)) == to_xml(project_rss(feed))
        assert serialize(project_json(feed)) == to_json(project_json(feed))

    def test_unknown_tree_type(self) -> None:
        with pytest.raises(TypeError):
            serialize(Author())  # type: ignore[arg-type]


class TestRender:
    """Tests for project-and-serialize in one call."""

    @pytest.mark.parametrize("fmt", ["atom", "rss"])
    def test_xml_formats(self, feed: Feed, fmt: str) -> None:
        assert render(feed, fmt).startswith(XML_HEADER)

    def test_json_format(self, feed: Feed) -> None:
        assert json.loads(render(feed, "json"))["title"] == "My Example Feed"

    def test_format_name_case_insensitive(self, feed: Feed) -> None:
        assert render(feed, "RSS") == render(feed, "rss")

    def test_unknown_format(self, feed: Feed) -> None:
        with pytest.raises(UnsupportedFormatError) as exc_info:
            render(feed, "yaml")
        assert exc_info.value.format_name == "yaml"
        assert exc_info.value.available == ["atom", "json", "rss"]
