"""
Exception hierarchy for the library flat-file store.

Every failure raised by the models and the record stores derives from
``RecordStoreError`` so callers can catch the whole family at once, while
still telling apart the individual situations:

- ``EntityValidationError``: one or more field invariants were violated
- ``MalformedRecordError``: a stored row could not be turned back into an entity
- ``CorruptStoreError``: a backing file does not start with the expected header
- ``DuplicateKeyError``: an add collided with an existing natural key
- ``NotFoundError``: a lookup, update or delete referenced a missing key
- ``ReferenceNotFoundError``: a foreign key did not resolve in its own store
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any


class RecordStoreError(Exception):
    """Base exception for entity and store operations."""


class EntityValidationError(RecordStoreError, ValueError):
    """Raised when an entity is built with one or more invalid fields.

    The ``errors`` mapping holds every failing field, not just the first
    one encountered, so a single exception describes the whole problem.
    """

    def __init__(self, entity: str, errors: Mapping[str, tuple[str, ...]]):
        self.entity = entity
        self.errors = dict(errors)
        details = "; ".join(
            f"{field}: {', '.join(messages)}" for field, messages in self.errors.items()
        )
        super().__init__(f"Validation failed for {entity}: {details}")

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed validation."""
        return list(self.errors)


class MalformedRecordError(RecordStoreError, ValueError):
    """Raised when a stored row has the wrong arity or an unparseable value."""


class CorruptStoreError(RecordStoreError):
    """Raised when a backing file's first line is not the entity header."""

    def __init__(self, path: Path, expected: str, found: str):
        self.path = path
        self.expected = expected
        self.found = found
        super().__init__(f"{path} has header {found!r}, expected {expected!r}")


class DuplicateKeyError(RecordStoreError):
    """Raised when adding an entity whose natural key already exists."""

    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} with key {key!r} already exists")


class NotFoundError(RecordStoreError, LookupError):
    """Raised when no stored entity matches the requested key."""

    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} with key {key!r} not found")


class ReferenceNotFoundError(RecordStoreError, LookupError):
    """Raised when a foreign key in a row does not resolve."""

    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"Referenced {entity} {key!r} does not exist")
