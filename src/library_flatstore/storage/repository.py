"""
Generic flat-file record store.

Each store owns one delimited text file holding a single entity kind:
the first line is the entity's column header and every following line
is one encoded entity. Stores give callers a small CRUD surface keyed by
the entity's natural key:

1. **Whole-file reads**: every operation reloads the file, so the file
   is always the source of truth
2. **Lossy recovery**: a row that cannot be decoded is logged and
   skipped instead of blocking the rest of the file
3. **Whole-file rewrites**: updates and deletes write the complete list
   back through a temporary file that replaces the original
4. **Explicit dependencies**: stores for entities with foreign keys are
   handed the stores they resolve those keys through
"""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Generic, TypeVar

from .. import codec
from ..errors import (
    CorruptStoreError,
    DuplicateKeyError,
    MalformedRecordError,
    NotFoundError,
    ReferenceNotFoundError,
)
from ..models.base import Entity

logger = logging.getLogger(__name__)

EntityType = TypeVar("EntityType", bound=Entity)


def normalize_key(key: Any) -> Any:
    """Keys compare case-insensitively; composite keys element by element."""
    if isinstance(key, str):
        return key.casefold()
    if isinstance(key, tuple):
        return tuple(normalize_key(part) for part in key)
    return key


class RecordStore(ABC, Generic[EntityType]):
    """
    Abstract base store providing CRUD over one delimited file.

    Subclasses name the entity class they persist and how a row is
    decoded; headers, encoding and keys come from the entity itself.
    """

    def __init__(self, file_path: Path, encoding: str = "utf-8"):
        """Initialize the store with its backing file."""
        self.file_path = Path(file_path)
        self.encoding = encoding

    @property
    @abstractmethod
    def entity_class(self) -> type[EntityType]:
        """Return the entity class stored in this file."""

    @abstractmethod
    def decode(self, line: str) -> EntityType:
        """Turn one stored row back into an entity."""

    @property
    def entity_name(self) -> str:
        return self.entity_class.__name__

    @property
    def header(self) -> str:
        return self.entity_class.header()

    def encode(self, entity: EntityType) -> str:
        return entity.encode()

    def key_of(self, entity: EntityType) -> Any:
        return entity.natural_key

    def _matches(self, entity: EntityType, key: Any) -> bool:
        return normalize_key(self.key_of(entity)) == normalize_key(key)

    # === Reads ===

    def _read_records(self) -> list[str]:
        """Logical records of the file, header included; empty when missing."""
        if not self.file_path.exists():
            return []
        with self.file_path.open(encoding=self.encoding, newline="") as handle:
            text = handle.read()
        return list(codec.split_records(text, is_complete=self._has_full_arity))

    def _has_full_arity(self, record: str) -> bool:
        return len(codec.decode(record)) == self.entity_class.arity

    def get_all(self) -> list[EntityType]:
        """
        Load every decodable entity, in file order.

        Returns:
            All entities whose rows decode; an empty list if the file is
            missing or empty

        Raises:
            CorruptStoreError: If the first line is not the entity header
        """
        records = self._read_records()
        if not records:
            return []

        if records[0] != self.header:
            raise CorruptStoreError(self.file_path, self.header, records[0])

        entities: list[EntityType] = []
        for row_number, line in enumerate(records[1:], start=2):
            try:
                entities.append(self.decode(line))
            except (MalformedRecordError, ReferenceNotFoundError) as e:
                logger.warning(
                    "Skipping row %d of %s: %s", row_number, self.file_path, e
                )

        logger.debug("Loaded %d %s records from %s", len(entities), self.entity_name, self.file_path)
        return entities

    def get(self, key: Any) -> EntityType:
        """
        Get an entity by natural key.

        Raises:
            NotFoundError: If no stored entity has that key
        """
        for entity in self.get_all():
            if self._matches(entity, key):
                return entity
        raise NotFoundError(self.entity_name, key)

    def exists(self, key: Any) -> bool:
        return any(self._matches(entity, key) for entity in self.get_all())

    # === Writes ===

    def add(self, entity: EntityType) -> None:
        """
        Append a new entity to the file.

        Raises:
            DuplicateKeyError: If an entity with the same key is stored
        """
        key = self.key_of(entity)
        if self.exists(key):
            raise DuplicateKeyError(self.entity_name, key)

        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        is_empty = not self.file_path.exists() or self.file_path.stat().st_size == 0
        lines = [self.encode(entity)]
        if is_empty:
            lines.insert(0, self.header)
        prefix = "" if is_empty or self._ends_with_newline() else "\n"

        with self.file_path.open("a", encoding=self.encoding, newline="") as handle:
            handle.write(prefix + "".join(f"{line}\n" for line in lines))
        logger.info("Added %s %r to %s", self.entity_name, key, self.file_path)

    def update(self, entity: EntityType) -> None:
        """
        Replace the stored entity that shares ``entity``'s key.

        Raises:
            NotFoundError: If no stored entity has that key
        """
        key = self.key_of(entity)
        entities = self.get_all()
        for index, existing in enumerate(entities):
            if self._matches(existing, key):
                entities[index] = entity
                break
        else:
            raise NotFoundError(self.entity_name, key)

        self.save_all(entities)
        logger.info("Updated %s %r in %s", self.entity_name, key, self.file_path)

    def delete(self, key: Any) -> None:
        """
        Remove the entity with ``key``.

        Raises:
            NotFoundError: If no stored entity has that key
        """
        entities = self.get_all()
        for index, existing in enumerate(entities):
            if self._matches(existing, key):
                del entities[index]
                break
        else:
            raise NotFoundError(self.entity_name, key)

        self.save_all(entities)
        logger.info("Deleted %s %r from %s", self.entity_name, key, self.file_path)

    def save(self, entity: EntityType) -> None:
        """Update the entity if its key is stored, otherwise add it."""
        if self.exists(self.key_of(entity)):
            self.update(entity)
        else:
            self.add(entity)

    def save_all(self, entities: Iterable[EntityType]) -> None:
        """Rewrite the whole file with the header followed by ``entities``."""
        lines = [self.header, *(self.encode(entity) for entity in entities)]
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        # Write next to the target and swap it in, so readers never see a partial file.
        fd, temp_name = tempfile.mkstemp(
            dir=self.file_path.parent, prefix=f".{self.file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="") as handle:
                handle.write("".join(f"{line}\n" for line in lines))
            os.replace(temp_name, self.file_path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise

    def _ends_with_newline(self) -> bool:
        with self.file_path.open("rb") as handle:
            handle.seek(-1, os.SEEK_END)
            return handle.read(1) == b"\n"
