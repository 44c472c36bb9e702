"""Pydantic models for the generic feed."""

from feedsmith.models.base import FeedSmithModel, SchemaModel
from feedsmith.models.feed import Author, Enclosure, Feed, Image, Item, Link

__all__ = [
    # Base
    "FeedSmithModel",
    "SchemaModel",
    # Generic feed
    "Author",
    "Enclosure",
    "Feed",
    "Image",
    "Item",
    "Link",
]
