"""
Per-entity error accumulation.

Entities validate every field before deciding whether construction
succeeded. The accumulator collects the messages for each failing field
so one ``EntityValidationError`` reports all of them together.
"""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import ValidationError

from ..errors import EntityValidationError

# Errors raised by model-level validators have no field location.
MODEL_FIELD = "__root__"


class ErrorAccumulator:
    """Field name -> ordered, duplicate-free list of error messages."""

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def add_error(self, field: str, message: str) -> None:
        """Record ``message`` for ``field`` unless it is already there."""
        messages = self._errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)

    def remove_error(self, field: str) -> None:
        """Forget every error recorded for ``field``."""
        self._errors.pop(field, None)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def errors(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only snapshot of the recorded errors."""
        return MappingProxyType(
            {field: tuple(messages) for field, messages in self._errors.items()}
        )

    def merge_pydantic(self, exc: ValidationError) -> None:
        """Fold every error of a pydantic ``ValidationError`` into this accumulator."""
        for error in exc.errors():
            location = error.get("loc") or ()
            field = str(location[0]) if location else MODEL_FIELD
            context = error.get("ctx") or {}
            cause = context.get("error")
            # Rules raise ValueError with the message we want to surface.
            message = str(cause) if isinstance(cause, Exception) else error["msg"]
            self.add_error(field, message)

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "ErrorAccumulator":
        accumulator = cls()
        accumulator.merge_pydantic(exc)
        return accumulator

    def raise_if_errors(self, entity: str) -> None:
        """Raise one ``EntityValidationError`` carrying every recorded error."""
        if self.has_errors:
            raise EntityValidationError(entity, self.errors)
