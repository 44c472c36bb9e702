"""Tests for feedsmith.models.base."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from feedsmith.models.base import FeedSmithModel, SchemaModel


class Sample(FeedSmithModel):
    name: str = ""
    size: str = ""


class FrozenSample(SchemaModel):
    name: str = ""
    tags: tuple[str, ...] = ()


class TestFeedSmithModel:
    """Tests for the mutable input base."""

    def test_numbers_coerced_to_str(self) -> None:
        """Numeric input for string fields is accepted."""
        assert Sample(size=42).size == "42"

    def test_extra_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            Sample(colour="red")  # type: ignore[call-arg]

    def test_assignment_validated(self) -> None:
        sample = Sample()
        sample.size = 7  # type: ignore[assignment]
        assert sample.size == "7"

    def test_from_attributes(self) -> None:
        class Row:
            name = "row"
            size = "1"

        assert Sample.model_validate(Row()) == Sample(name="row", size="1")


class TestSchemaModel:
    """Tests for the frozen output base."""

    def test_frozen(self) -> None:
        sample = FrozenSample(name="a")
        with pytest.raises(ValidationError):
            sample.name = "b"

    def test_equality_by_value(self) -> None:
        assert FrozenSample(name="a", tags=("x",)) == FrozenSample(name="a", tags=("x",))

    def test_extra_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            FrozenSample(colour="red")  # type: ignore[call-arg]
