"""
Loan records for the library flat-file store.

A loan ties a book to the client who borrowed it and the employee who
issued it. All three are stored by natural key and resolved through
their own stores when the loan is read back.
"""

from datetime import date
from typing import Any, ClassVar
from uuid import UUID, uuid4

from pydantic import Field, ValidationInfo, field_validator

from .. import codec
from .base import Entity, KeyLookup, not_in_future, resolve_reference
from .book import Book
from .client import Client
from .employee import Employee


class LoanRecord(Entity):
    """A book issued to a client by an employee."""

    arity: ClassVar[int] = 6

    book: Book = Field(..., description="Issued book", serialization_alias="Book")

    client: Client = Field(..., description="Borrowing client", serialization_alias="Client")

    employee: Employee = Field(
        ...,
        description="Employee who issued the book",
        serialization_alias="Employee",
    )

    issue_date: date = Field(
        ...,
        description="Date the book was issued",
        serialization_alias="IssueDate",
    )

    return_date: date | None = Field(
        None,
        description="Date the book came back, absent while on loan",
        serialization_alias="ReturnDate",
    )

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique identifier for the loan",
        serialization_alias="Id",
    )

    @field_validator("book", "client", "employee", mode="before")
    @classmethod
    def require_reference(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            raise ValueError(f"{info.field_name.capitalize()} cannot be empty.")
        return v

    @field_validator("issue_date")
    @classmethod
    def validate_issue_date(cls, v: date) -> date:
        return not_in_future(v, "Issue date cannot be in the future.")

    @field_validator("return_date")
    @classmethod
    def validate_return_date(cls, v: date | None, info: ValidationInfo) -> date | None:
        """A book cannot come back before it went out."""
        issue_date = info.data.get("issue_date")
        if v is not None and issue_date is not None and v < issue_date:
            raise ValueError("Return date cannot be earlier than issue date.")
        return v

    @property
    def natural_key(self) -> tuple[str, str, str]:
        return (self.book.isbn, self.client.phone, self.employee.phone)

    @property
    def is_returned(self) -> bool:
        return self.return_date is not None

    def to_fields(self) -> list[str | None]:
        return [
            self.book.isbn,
            self.client.phone,
            self.employee.phone,
            codec.format_date(self.issue_date),
            codec.format_date(self.return_date),
            str(self.id),
        ]

    @classmethod
    def decode(
        cls,
        line: str,
        books: KeyLookup[Book],
        clients: KeyLookup[Client],
        employees: KeyLookup[Employee],
    ) -> "LoanRecord":
        """Decode a row, resolving the book, client and employee keys."""
        isbn, client_phone, employee_phone, issue_date, return_date, loan_id = cls.split(line)
        return cls.from_row(
            book=resolve_reference(books, "Book", isbn),
            client=resolve_reference(clients, "Client", client_phone),
            employee=resolve_reference(employees, "Employee", employee_phone),
            issue_date=codec.parse_date(issue_date, "IssueDate"),
            return_date=codec.parse_date(return_date, "ReturnDate"),
            id=codec.parse_uuid(loan_id, "Id"),
        )
