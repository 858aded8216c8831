"""SQLAlchemy ORM models for the book catalog.

Tables:
- libros: Book records (id, titulo, autor, disponible)
"""

from typing import Optional

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class Book(Base):
    """A book in the catalog.

    The id is generated by the database on insert, so a freshly built
    Book has ``id is None`` until it has been committed.
    """

    __tablename__ = "libros"

    id: Mapped[Optional[int]] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column("titulo", String(255), nullable=False)
    author: Mapped[str] = mapped_column("autor", String(255), nullable=False, index=True)
    # True = can be lent out, False = currently lent
    available: Mapped[bool] = mapped_column("disponible", Boolean, nullable=False, default=True)

    def __init__(self, title: str, author: str, available: bool = True, **kwargs):
        super().__init__(title=title, author=author, available=available, **kwargs)

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}', author='{self.author}')>"

    def __str__(self) -> str:
        return (
            f"\nBook ID: {self.id}"
            f"\nTitle: {self.title}"
            f"\nAuthor: {self.author}"
            f"\nAvailable: {self.available}"
        )
