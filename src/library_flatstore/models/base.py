"""
Shared behaviour for the self-validating library entities.

Every entity is a pydantic model whose field validators encode the
domain rules. Construction runs all of them and fails once with an
``EntityValidationError`` listing every violated field. Assigning to a
field rebuilds the whole value, so an entity is never left holding a
value that breaks its invariants.
"""

from abc import abstractmethod
from collections.abc import Mapping
from datetime import date
from typing import Any, ClassVar, Protocol, Self, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from .. import codec
from ..errors import (
    EntityValidationError,
    MalformedRecordError,
    NotFoundError,
    ReferenceNotFoundError,
)
from .validation import ErrorAccumulator

T_co = TypeVar("T_co", covariant=True)


class KeyLookup(Protocol[T_co]):
    """Anything that can fetch an entity by natural key, such as a record store."""

    def get(self, key: Any) -> T_co: ...


def not_blank(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValueError(message)
    return value


def not_in_future(value: date | None, message: str) -> date | None:
    if value is not None and value > date.today():
        raise ValueError(message)
    return value


def resolve_reference(lookup: KeyLookup[T_co], entity: str, key: str) -> T_co:
    """Fetch a referenced entity, turning a miss into ``ReferenceNotFoundError``."""
    try:
        return lookup.get(key)
    except NotFoundError as e:
        raise ReferenceNotFoundError(entity, key) from e


class Entity(BaseModel):
    """Base class for records persisted one per line in a delimited file."""

    model_config = ConfigDict(extra="forbid")

    # Number of columns a stored row must have; set by subclasses.
    arity: ClassVar[int]

    def __init__(self, /, **data: Any) -> None:
        self._validate_into(data, context=None)

    @classmethod
    def with_context(cls, context: Mapping[str, Any] | None, **data: Any) -> Self:
        """Build an entity whose validators can read ``context``.

        Rules that depend on deployment settings look for a ``config`` entry
        here before falling back to the process-wide configuration.
        """
        entity = cls.__new__(cls)
        entity._validate_into(data, context=context)
        return entity

    def _validate_into(self, data: dict[str, Any], context: Mapping[str, Any] | None) -> None:
        try:
            self.__pydantic_validator__.validate_python(data, self_instance=self, context=context)
        except ValidationError as e:
            ErrorAccumulator.from_pydantic(e).raise_if_errors(type(self).__name__)
            raise

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in type(self).model_fields:
            super().__setattr__(name, value)
            return
        # Rebuild and re-validate the whole value so cross-field rules run too.
        rebuilt = self.replace(**{name: value})
        super().__setattr__(name, getattr(rebuilt, name))

    def field_values(self) -> dict[str, Any]:
        """Current field values keyed by field name, nested entities kept as-is."""
        return {name: getattr(self, name) for name in type(self).model_fields}

    def replace(self, context: Mapping[str, Any] | None = None, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied, validated against ``context``."""
        return type(self).with_context(context, **{**self.field_values(), **changes})

    @classmethod
    def columns(cls) -> tuple[str, ...]:
        """Column names in declaration order, as written in the file header."""
        return tuple(
            field.serialization_alias or name for name, field in cls.model_fields.items()
        )

    @classmethod
    def header(cls) -> str:
        return codec.SEPARATOR.join(cls.columns())

    @property
    @abstractmethod
    def natural_key(self) -> Any:
        """Value that identifies this entity within its store."""

    @abstractmethod
    def to_fields(self) -> list[str | None]:
        """Textual value of every column, in header order."""

    def encode(self) -> str:
        return codec.encode(self.to_fields())

    @classmethod
    def split(cls, line: str) -> list[str]:
        """Decode ``line`` and check it has one field per column."""
        fields = codec.decode(line)
        codec.expect_arity(fields, cls.arity, cls.__name__)
        return fields

    @classmethod
    def from_row(cls, context: Mapping[str, Any] | None = None, **values: Any) -> Self:
        """Build an entity from decoded values.

        Stored rows that break an invariant count as malformed.
        """
        try:
            return cls.with_context(context, **values)
        except EntityValidationError as e:
            raise MalformedRecordError(f"Stored {cls.__name__} is invalid: {e}") from e
