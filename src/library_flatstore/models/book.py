"""
Book model for the library flat-file store.

Books are keyed by ISBN in the ``###-#-##-######-#`` layout. The author
is held as a full ``Author`` value but stored as the author's name, so
reading a book back requires a way to look authors up.
"""

from datetime import date
from typing import Any, ClassVar

from pydantic import Field, field_validator

from .. import codec
from .author import Author
from .base import Entity, KeyLookup, not_blank, not_in_future, resolve_reference
from .patterns import ISBN_TEMPLATE, matches


class Book(Entity):
    """A catalogue entry written by one author."""

    arity: ClassVar[int] = 6

    isbn: str = Field(
        ...,
        description="ISBN in ###-#-##-######-# form; the natural key",
        serialization_alias="ISBN",
        examples=["978-3-16-148410-0"],
    )

    title: str = Field(
        ...,
        description="The title of the book",
        serialization_alias="Title",
        examples=["Pride and Prejudice"],
    )

    author: Author = Field(
        ...,
        description="Author of the book, stored by name",
        serialization_alias="Author",
    )

    description: str | None = Field(
        None,
        description="Brief description or summary of the book",
        serialization_alias="Description",
    )

    pages: int | None = Field(
        None,
        description="Number of pages",
        serialization_alias="Pages",
    )

    publication_date: date | None = Field(
        None,
        description="Date the book was published",
        serialization_alias="PublicationDate",
    )

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, v: str) -> str:
        if not v.strip() or not matches(v, ISBN_TEMPLATE):
            raise ValueError(f"ISBN must follow the format {ISBN_TEMPLATE}.")
        return v

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return not_blank(v, "Title cannot be empty.")

    @field_validator("author", mode="before")
    @classmethod
    def require_author(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Author cannot be empty.")
        return v

    @field_validator("description")
    @classmethod
    def normalize_description(cls, v: str | None) -> str | None:
        return v or None

    @field_validator("pages")
    @classmethod
    def validate_pages(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError("Pages must be greater than zero.")
        return v

    @field_validator("publication_date")
    @classmethod
    def validate_publication_date(cls, v: date | None) -> date | None:
        return not_in_future(v, "Publication date cannot be in the future.")

    @property
    def natural_key(self) -> str:
        return self.isbn

    def to_fields(self) -> list[str | None]:
        return [
            self.isbn,
            self.title,
            self.author.name,
            self.description,
            str(self.pages) if self.pages is not None else "",
            codec.format_date(self.publication_date),
        ]

    @classmethod
    def decode(cls, line: str, authors: KeyLookup[Author]) -> "Book":
        """Decode a row, resolving the author name through ``authors``."""
        isbn, title, author_name, description, pages, publication_date = cls.split(line)
        return cls.from_row(
            isbn=isbn,
            title=title,
            author=resolve_reference(authors, "Author", author_name),
            description=codec.optional_text(description),
            pages=codec.parse_int(pages, "Pages"),
            publication_date=codec.parse_date(publication_date, "PublicationDate"),
        )
