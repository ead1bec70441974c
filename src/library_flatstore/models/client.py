"""
Client model for the library flat-file store.

Clients are library members identified by a ten-digit phone number.
"""

from datetime import date
from typing import ClassVar

from pydantic import Field, field_validator

from .. import codec
from .base import Entity, not_in_future
from .patterns import PHONE_TEMPLATE, matches

MIN_PASSWORD_LENGTH = 8
MIN_NAME_LENGTH = 2
MIN_ADDRESS_LENGTH = 5


class Client(Entity):
    """A library member who can borrow books."""

    arity: ClassVar[int] = 5

    phone: str = Field(
        ...,
        description="Ten-digit phone number; the natural key",
        serialization_alias="Phone",
        examples=["0501234567"],
    )

    password: str = Field(
        ...,
        description="Account password",
        serialization_alias="Password",
        repr=False,
    )

    name: str | None = Field(
        None,
        description="Full name of the client",
        serialization_alias="Name",
    )

    address: str | None = Field(
        None,
        description="Postal address",
        serialization_alias="Address",
    )

    registration_date: date | None = Field(
        None,
        description="Date the client registered",
        serialization_alias="RegistrationDate",
    )

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if not matches(v, PHONE_TEMPLATE):
            raise ValueError("Phone must be a 10-digit number.")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v.strip() or len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None and len(v) < MIN_NAME_LENGTH:
            raise ValueError(
                f"Name must be at least {MIN_NAME_LENGTH} characters long if provided."
            )
        return v

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str | None) -> str | None:
        if v is not None and len(v) < MIN_ADDRESS_LENGTH:
            raise ValueError(
                f"Address must be at least {MIN_ADDRESS_LENGTH} characters long if provided."
            )
        return v

    @field_validator("registration_date")
    @classmethod
    def validate_registration_date(cls, v: date | None) -> date | None:
        return not_in_future(v, "Registration date cannot be in the future.")

    @property
    def natural_key(self) -> str:
        return self.phone

    def to_fields(self) -> list[str | None]:
        return [
            self.phone,
            self.password,
            self.name,
            self.address,
            codec.format_date(self.registration_date),
        ]

    @classmethod
    def decode(cls, line: str) -> "Client":
        phone, password, name, address, registration_date = cls.split(line)
        return cls.from_row(
            phone=phone,
            password=password,
            name=codec.optional_text(name),
            address=codec.optional_text(address),
            registration_date=codec.parse_date(registration_date, "RegistrationDate"),
        )
