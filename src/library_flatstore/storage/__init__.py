"""
Storage package for the library flat-file store.

This package provides:
- The generic whole-file record store (repository.py)
- One store per entity kind, wired with the stores it resolves keys through
- ``Library``, which builds all of them from configuration
"""

from .author_repository import AuthorStore
from .book_repository import BookStore
from .client_repository import ClientStore
from .employee_repository import EmployeeStore
from .library import Library, open_library
from .loan_repository import LoanStore
from .repository import RecordStore, normalize_key

__all__ = [
    "AuthorStore",
    "BookStore",
    "ClientStore",
    "EmployeeStore",
    "Library",
    "LoanStore",
    "RecordStore",
    "normalize_key",
    "open_library",
]
