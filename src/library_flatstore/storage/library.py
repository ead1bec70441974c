"""
Wiring for the full set of record stores.

The stores depend on each other for foreign-key resolution: books need
authors, loans need books, clients and employees. ``Library`` builds
them in dependency order from a ``StoreConfig``.
"""

import logging

from ..config import StoreConfig, get_config
from .author_repository import AuthorStore
from .book_repository import BookStore
from .client_repository import ClientStore
from .employee_repository import EmployeeStore
from .loan_repository import LoanStore

logger = logging.getLogger(__name__)


class Library:
    """All five stores sharing one data directory."""

    def __init__(self, config: StoreConfig):
        self.config = config
        encoding = config.file_encoding

        self.authors = AuthorStore(config.file_path("authors"), encoding)
        self.books = BookStore(config.file_path("books"), self.authors, encoding)
        self.clients = ClientStore(config.file_path("clients"), encoding)
        self.employees = EmployeeStore(config.file_path("employees"), encoding, config)
        self.loans = LoanStore(
            config.file_path("loans"), self.books, self.clients, self.employees, encoding
        )
        logger.info("Library stores rooted at %s", config.data_dir)


def open_library(config: StoreConfig | None = None) -> Library:
    """Build the stores from ``config``, or from the process-wide configuration."""
    return Library(config or get_config())
