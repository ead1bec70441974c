"""Test configuration and fixtures for the library flat-file store.

Every test gets:
1. A fresh configuration - the process-wide instance is reset around each test
2. An isolated data directory under pytest's ``tmp_path``
3. Ready-made valid entities to build scenarios from
"""

from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest

from library_flatstore.config import StoreConfig, reset_config
from library_flatstore.models import Author, Book, Client, Employee, LoanRecord, Position
from library_flatstore.storage import Library


@pytest.fixture(autouse=True)
def fresh_config() -> Generator[None, None, None]:
    """Drop any cached configuration so environment changes take effect."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory the stores write to; not created until the first write."""
    return tmp_path / "data"


@pytest.fixture
def store_config(data_dir: Path) -> StoreConfig:
    return StoreConfig(data_dir=data_dir)


@pytest.fixture
def library(store_config: StoreConfig) -> Library:
    return Library(store_config)


# === Sample Entities ===


@pytest.fixture
def jane_austen() -> Author:
    return Author(
        name="Jane Austen",
        biography="English novelist known for her six major novels.",
        birth_date=date(1775, 12, 16),
        death_date=date(1817, 7, 18),
    )


@pytest.fixture
def mark_twain() -> Author:
    return Author(
        name="Mark Twain",
        biography="American writer and humorist.",
        birth_date=date(1835, 11, 30),
        death_date=date(1910, 4, 21),
    )


@pytest.fixture
def pride_and_prejudice(jane_austen: Author) -> Book:
    return Book(
        isbn="978-0-14-143951-8",
        title="Pride and Prejudice",
        author=jane_austen,
        description="A romantic novel of manners.",
        pages=432,
        publication_date=date(1813, 1, 28),
    )


@pytest.fixture
def tom_sawyer(mark_twain: Author) -> Book:
    return Book(
        isbn="978-3-16-148410-0",
        title="The Adventures of Tom Sawyer",
        author=mark_twain,
        pages=274,
        publication_date=date(1876, 6, 1),
    )


@pytest.fixture
def client() -> Client:
    return Client(
        phone="0501234567",
        password="securePass1",
        name="Olena Kovalenko",
        address="12 Khreshchatyk St, Kyiv",
        registration_date=date(2023, 3, 14),
    )


@pytest.fixture
def employee() -> Employee:
    return Employee(
        phone="0981234001",
        name="Ivan",
        surname="Petrenko",
        position=Position.LIBRARIAN,
        password="libpass",
        age=34,
    )


@pytest.fixture
def loan(pride_and_prejudice: Book, client: Client, employee: Employee) -> LoanRecord:
    return LoanRecord(
        book=pride_and_prejudice,
        client=client,
        employee=employee,
        issue_date=date(2024, 2, 1),
    )


@pytest.fixture
def populated_library(
    library: Library,
    jane_austen: Author,
    mark_twain: Author,
    pride_and_prejudice: Book,
    tom_sawyer: Book,
    client: Client,
    employee: Employee,
) -> Library:
    """A library holding every referenced entity a loan needs."""
    library.authors.save(jane_austen)
    library.authors.save(mark_twain)
    library.books.save(pride_and_prejudice)
    library.books.save(tom_sawyer)
    library.clients.save(client)
    library.employees.save(employee)
    return library
