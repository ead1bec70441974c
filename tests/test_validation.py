"""Tests for the per-entity error accumulator."""

import pytest
from pydantic import BaseModel, ValidationError, field_validator

from library_flatstore.errors import EntityValidationError
from library_flatstore.models.validation import ErrorAccumulator


class _Sample(BaseModel):
    name: str
    pages: int

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("Name cannot be empty.")
        return v


class TestErrorAccumulator:
    def test_starts_empty(self):
        accumulator = ErrorAccumulator()
        assert accumulator.has_errors is False
        assert dict(accumulator.errors) == {}

    def test_add_error_keeps_order_and_skips_duplicates(self):
        accumulator = ErrorAccumulator()
        accumulator.add_error("name", "first")
        accumulator.add_error("name", "second")
        accumulator.add_error("name", "first")

        assert accumulator.has_errors is True
        assert accumulator.errors["name"] == ("first", "second")

    def test_remove_error_clears_one_field(self):
        accumulator = ErrorAccumulator()
        accumulator.add_error("name", "bad name")
        accumulator.add_error("pages", "bad pages")

        accumulator.remove_error("name")

        assert list(accumulator.errors) == ["pages"]
        accumulator.remove_error("missing")  # no-op

    def test_errors_view_is_read_only(self):
        accumulator = ErrorAccumulator()
        accumulator.add_error("name", "bad")

        with pytest.raises(TypeError):
            accumulator.errors["name"] = ("other",)  # type: ignore[index]

    def test_from_pydantic_collects_every_field(self):
        with pytest.raises(ValidationError) as exc_info:
            _Sample(name="", pages="many")

        accumulator = ErrorAccumulator.from_pydantic(exc_info.value)

        assert accumulator.errors["name"] == ("Name cannot be empty.",)
        assert "pages" in accumulator.errors

    def test_raise_if_errors(self):
        accumulator = ErrorAccumulator()
        accumulator.raise_if_errors("Sample")  # nothing recorded, nothing raised

        accumulator.add_error("name", "Name cannot be empty.")
        accumulator.add_error("pages", "Pages must be greater than zero.")

        with pytest.raises(EntityValidationError) as exc_info:
            accumulator.raise_if_errors("Sample")

        error = exc_info.value
        assert error.entity == "Sample"
        assert error.fields == ["name", "pages"]
        assert "Name cannot be empty." in str(error)
