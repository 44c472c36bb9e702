#!/usr/bin/env python3
"""
feedsmith Quickstart Example

Shows the basic flow: build one feed, export it as Atom, RSS and JSON Feed.

Usage:
    python examples/01_quickstart.py
"""

from datetime import UTC, datetime

from feedsmith import Author, Enclosure, Feed, Item, Link


def main() -> None:
    """Build a small blog feed and print it in every format."""

    now = datetime(2013, 1, 16, 21, 52, 35, tzinfo=UTC)
    feed = Feed(
        title="jmoiron.net blog",
        link=Link(href="http://jmoiron.net/blog"),
        description="discussion about tech, footie, photos",
        author=Author(name="Jason Moiron", email="jmoiron@jmoiron.net"),
        created=now,
    )

    feed.add(Item(
        title="Limiting Concurrency in Go",
        link=Link(href="http://jmoiron.net/blog/limiting-concurrency-in-go/"),
        description="A discussion on controlled parallelism in golang",
        author=Author(name="Jason Moiron", email="jmoiron@jmoiron.net"),
        created=now,
    ))
    feed.add(Item(
        title="Episode 1",
        link=Link(href="http://jmoiron.net/podcast/1"),
        description="Pilot episode",
        enclosure=Enclosure(url="http://jmoiron.net/podcast/1.mp3", length="5650889", type="audio/mpeg"),
        created=now,
    ))

    # Newest first
    feed.sort(key=lambda item: item.created, reverse=True)

    print("Atom:")
    print(feed.to_atom())

    print("\nRSS 2.0:")
    print(feed.to_rss())

    print("\nJSON Feed:")
    print(feed.to_json())


if __name__ == "__main__":
    main()
