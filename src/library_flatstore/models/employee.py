"""
Employee model for the library flat-file store.

Employees are staff members identified by a ten-digit phone number.
Their position is stored by its symbolic name.
"""

from enum import Enum
from typing import ClassVar

from pydantic import Field, ValidationInfo, field_validator

from .. import codec
from ..config import StoreConfig, get_config
from ..errors import MalformedRecordError
from .base import Entity, not_blank
from .patterns import PHONE_TEMPLATE, matches

MIN_PASSWORD_LENGTH = 6


class Position(str, Enum):
    """Positions held by library staff."""

    LIBRARIAN = "Librarian"
    ARCHIVIST = "Archivist"
    ADMINISTRATOR = "Administrator"
    CATALOGUER = "Cataloguer"
    RESEARCH_ASSISTANT = "ResearchAssistant"

    @classmethod
    def parse(cls, value: str) -> "Position":
        """Look a position up by its stored name."""
        try:
            return cls(value)
        except ValueError as e:
            raise MalformedRecordError(f"Position: {value!r} is not a known position") from e


class Employee(Entity):
    """A member of library staff who issues loans."""

    arity: ClassVar[int] = 6

    phone: str = Field(
        ...,
        description="Ten-digit phone number; the natural key",
        serialization_alias="Phone",
        examples=["0981234001"],
    )

    name: str = Field(..., description="Given name", serialization_alias="Name")

    surname: str = Field(..., description="Family name", serialization_alias="Surname")

    position: Position = Field(
        ...,
        description="Position held in the library",
        serialization_alias="Position",
    )

    password: str = Field(
        ...,
        description="Account password",
        serialization_alias="Password",
        repr=False,
    )

    age: int | None = Field(
        None,
        description="Age in years, within the configured employment bounds",
        serialization_alias="Age",
    )

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if not matches(v, PHONE_TEMPLATE):
            raise ValueError("Phone must be a 10-digit number.")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return not_blank(v, "Name cannot be empty.")

    @field_validator("surname")
    @classmethod
    def validate_surname(cls, v: str) -> str:
        return not_blank(v, "Surname cannot be empty.")

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v.strip() or len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")
        return v

    @field_validator("age")
    @classmethod
    def validate_age(cls, v: int | None, info: ValidationInfo) -> int | None:
        """Bounds come from the ``config`` in the validation context, if any."""
        if v is None:
            return v
        config = (info.context or {}).get("config") or get_config()
        if not config.employee_min_age <= v <= config.employee_max_age:
            raise ValueError(
                f"Age must be between {config.employee_min_age} and {config.employee_max_age}."
            )
        return v

    @property
    def natural_key(self) -> str:
        return self.phone

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"

    def to_fields(self) -> list[str | None]:
        return [
            self.phone,
            self.name,
            self.surname,
            self.position.value,
            self.password,
            str(self.age) if self.age is not None else "",
        ]

    @classmethod
    def decode(cls, line: str, config: StoreConfig | None = None) -> "Employee":
        """Decode a row, checking the age against ``config`` when given."""
        phone, name, surname, position, password, age = cls.split(line)
        return cls.from_row(
            context={"config": config} if config is not None else None,
            phone=phone,
            name=name,
            surname=surname,
            position=Position.parse(position),
            password=password,
            age=codec.parse_int(age, "Age"),
        )
