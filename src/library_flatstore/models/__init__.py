"""
Library Flat-File Store Models.

This package contains the pydantic models for every entity kind the
store persists. Each model validates all of its fields on construction
and on assignment, and knows how to encode itself as one delimited row.

The models represent:
- Author: Book authors, keyed by name
- Book: Catalogue entries, keyed by ISBN
- Client: Library members, keyed by phone
- Employee: Library staff, keyed by phone
- LoanRecord: A book issued to a client by an employee
"""

from .author import Author
from .base import Entity, KeyLookup
from .book import Book
from .client import Client
from .employee import Employee, Position
from .loan import LoanRecord
from .patterns import ISBN_TEMPLATE, PHONE_TEMPLATE, matches
from .validation import ErrorAccumulator

__all__ = [
    "ISBN_TEMPLATE",
    "PHONE_TEMPLATE",
    "Author",
    "Book",
    "Client",
    "Employee",
    "Entity",
    "ErrorAccumulator",
    "KeyLookup",
    "LoanRecord",
    "Position",
    "matches",
]
