"""Base models shared by the generic feed model and the output schemas.

Example:
    >>> from feedsmith.models.base import FeedSmithModel, SchemaModel
    >>> FeedSmithModel.model_config["extra"]
    'forbid'
    >>> SchemaModel.model_config["frozen"]
    True
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FeedSmithModel(BaseModel):
    """Base model for caller-owned, mutable values."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        validate_assignment=True,
        coerce_numbers_to_str=True,
        extra="forbid",
    )


class SchemaModel(BaseModel):
    """Base model for projected output trees.

    Projected documents are frozen and compare field by field.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
    )
