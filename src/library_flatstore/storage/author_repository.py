"""Author store: authors keyed case-insensitively by name."""

from ..models.author import Author
from .repository import RecordStore


class AuthorStore(RecordStore[Author]):
    """Store for authors."""

    @property
    def entity_class(self) -> type[Author]:
        return Author

    def decode(self, line: str) -> Author:
        return Author.decode(line)

    def get_living(self) -> list[Author]:
        """Authors without a recorded death date."""
        return [author for author in self.get_all() if author.is_living]
