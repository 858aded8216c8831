"""Pytest configuration and shared fixtures.

Provides a temporary SQLite database opened through ``Database`` and a few
sample books.
"""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from biblioteca.config import reset_config
from biblioteca.crud import insert_book
from biblioteca.db.database import Database
from biblioteca.db.models import Book


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture(scope="function")
def temp_db_path() -> Generator[Path, None, None]:
    """Create a temporary database file path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)
    yield db_path
    # Cleanup
    if db_path.exists():
        db_path.unlink()


@pytest.fixture(scope="function")
def db(temp_db_path: Path) -> Generator[Database, None, None]:
    """Create an open test database."""
    reset_config()

    database = Database(f"sqlite:///{temp_db_path}")
    database.open()
    yield database

    database.close()
    reset_config()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_books() -> list[Book]:
    """Three transient books, not yet stored."""
    return [
        Book("Star Wars: Heir to the Empire", "Timothy Zahn", True),
        Book("The Fall of Númenor", "J. R. R. Tolkien", True),
        Book("Frankenstein: or, The Modern Prometheus", "Mary Shelley", True),
    ]


@pytest.fixture
def created_books(db: Database, sample_books: list[Book]) -> list[Book]:
    """Insert the sample books and return them with their ids."""
    return [insert_book(db, book) for book in sample_books]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove biblioteca settings from the environment."""
    for name in list(os.environ):
        if name.startswith("BIBLIOTECA_"):
            monkeypatch.delenv(name)
    reset_config()
