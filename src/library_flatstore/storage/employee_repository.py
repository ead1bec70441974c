"""
Employee store: library staff keyed by phone number.

Age bounds are deployment settings, so the store checks stored rows
against the ``StoreConfig`` it was given rather than the process-wide one.
"""

from pathlib import Path
from typing import Any

from ..config import StoreConfig
from ..models.employee import Employee, Position
from .repository import RecordStore


class EmployeeStore(RecordStore[Employee]):
    """Store for employees."""

    def __init__(
        self, file_path: Path, encoding: str = "utf-8", config: StoreConfig | None = None
    ):
        super().__init__(file_path, encoding)
        self.config = config

    @property
    def entity_class(self) -> type[Employee]:
        return Employee

    @property
    def validation_context(self) -> dict[str, Any] | None:
        return {"config": self.config} if self.config is not None else None

    def decode(self, line: str) -> Employee:
        return Employee.decode(line, config=self.config)

    def build(self, **data: Any) -> Employee:
        """Construct an employee validated against this store's configuration."""
        return Employee.with_context(self.validation_context, **data)

    def get_all_by_position(self, position: Position | str) -> list[Employee]:
        """Employees holding ``position``, in file order."""
        wanted = Position(position)
        return [employee for employee in self.get_all() if employee.position is wanted]
