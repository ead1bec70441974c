"""
Book store.

Books reference their author by name; the store resolves that name
through the author store it is given, so a book whose author has been
deleted is no longer readable.
"""

from pathlib import Path

from ..models.book import Book
from .author_repository import AuthorStore
from .repository import RecordStore, normalize_key


class BookStore(RecordStore[Book]):
    """Store for books, resolving authors through an ``AuthorStore``."""

    def __init__(self, file_path: Path, authors: AuthorStore, encoding: str = "utf-8"):
        super().__init__(file_path, encoding)
        self.authors = authors

    @property
    def entity_class(self) -> type[Book]:
        return Book

    def decode(self, line: str) -> Book:
        return Book.decode(line, authors=self.authors)

    def get_by_author(self, author_name: str) -> list[Book]:
        """All books written by the named author."""
        wanted = normalize_key(author_name)
        return [book for book in self.get_all() if normalize_key(book.author.name) == wanted]
