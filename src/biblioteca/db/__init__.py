"""Database module: ORM model, input schema and session management."""

from .database import Database
from .models import Base, Book
from .schemas import BookCreate

__all__ = [
    "Base",
    "Book",
    "BookCreate",
    "Database",
]
