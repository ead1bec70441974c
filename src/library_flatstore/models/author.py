"""
Author model for the library flat-file store.

Authors are keyed by name. Books reference their author by that name,
and the book store resolves it back into an ``Author`` when reading.
"""

from datetime import date
from typing import ClassVar

from pydantic import Field, ValidationInfo, field_validator

from .. import codec
from .base import Entity, not_blank, not_in_future


class Author(Entity):
    """An author with optional biographical details."""

    arity: ClassVar[int] = 4

    name: str = Field(
        ...,
        description="Full name of the author; the natural key",
        serialization_alias="Name",
        examples=["Jane Austen", "Mark Twain"],
    )

    biography: str | None = Field(
        None,
        description="Brief biography of the author",
        serialization_alias="Biography",
    )

    birth_date: date | None = Field(
        None,
        description="Author's date of birth",
        serialization_alias="BirthDate",
        examples=["1775-12-16"],
    )

    death_date: date | None = Field(
        None,
        description="Author's date of death (if applicable)",
        serialization_alias="DeathDate",
        examples=["1817-07-18"],
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return not_blank(v, "Name cannot be empty.")

    @field_validator("biography")
    @classmethod
    def normalize_biography(cls, v: str | None) -> str | None:
        """An empty biography is the same as no biography."""
        return v or None

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: date | None) -> date | None:
        return not_in_future(v, "Birth date cannot be in the future.")

    @field_validator("death_date")
    @classmethod
    def validate_death_date(cls, v: date | None, info: ValidationInfo) -> date | None:
        """Death date cannot precede a known birth date."""
        birth_date = info.data.get("birth_date")
        if v is not None and birth_date is not None and v < birth_date:
            raise ValueError("Death date cannot be earlier than birth date.")
        return v

    @property
    def natural_key(self) -> str:
        return self.name

    @property
    def is_living(self) -> bool:
        """Check if the author is still living."""
        return self.death_date is None

    @property
    def age(self) -> int | None:
        """Calculate the author's age (current or at death)."""
        if self.birth_date is None:
            return None

        end_date = self.death_date or date.today()
        age = end_date.year - self.birth_date.year

        # Adjust for birthday not yet reached in the year
        if (end_date.month, end_date.day) < (self.birth_date.month, self.birth_date.day):
            age -= 1

        return age

    def to_fields(self) -> list[str | None]:
        return [
            self.name,
            self.biography,
            codec.format_date(self.birth_date),
            codec.format_date(self.death_date),
        ]

    @classmethod
    def decode(cls, line: str) -> "Author":
        name, biography, birth_date, death_date = cls.split(line)
        return cls.from_row(
            name=name,
            biography=codec.optional_text(biography),
            birth_date=codec.parse_date(birth_date, "BirthDate"),
            death_date=codec.parse_date(death_date, "DeathDate"),
        )
