"""
Loan store.

Loans are keyed by the (ISBN, client phone, employee phone) triple. Each
row names its book, client and employee by natural key, and the store
resolves them through the stores it was built with.
"""

from pathlib import Path
from uuid import UUID

from ..errors import NotFoundError
from ..models.loan import LoanRecord
from .book_repository import BookStore
from .client_repository import ClientStore
from .employee_repository import EmployeeStore
from .repository import RecordStore, normalize_key


class LoanStore(RecordStore[LoanRecord]):
    """Store for loan records."""

    def __init__(
        self,
        file_path: Path,
        books: BookStore,
        clients: ClientStore,
        employees: EmployeeStore,
        encoding: str = "utf-8",
    ):
        super().__init__(file_path, encoding)
        self.books = books
        self.clients = clients
        self.employees = employees

    @property
    def entity_class(self) -> type[LoanRecord]:
        return LoanRecord

    def decode(self, line: str) -> LoanRecord:
        return LoanRecord.decode(
            line, books=self.books, clients=self.clients, employees=self.employees
        )

    def get_by_id(self, loan_id: UUID | str) -> LoanRecord:
        """
        Get a loan by its generated identifier.

        Raises:
            NotFoundError: If no loan has that id
        """
        wanted = UUID(str(loan_id))
        for loan in self.get_all():
            if loan.id == wanted:
                return loan
        raise NotFoundError(self.entity_name, str(wanted))

    def get_outstanding(self) -> list[LoanRecord]:
        """Loans whose book has not come back yet."""
        return [loan for loan in self.get_all() if not loan.is_returned]

    def get_by_client(self, phone: str) -> list[LoanRecord]:
        """Every loan made to the client with ``phone``."""
        wanted = normalize_key(phone)
        return [loan for loan in self.get_all() if normalize_key(loan.client.phone) == wanted]
