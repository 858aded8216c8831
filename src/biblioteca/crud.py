"""Book CRUD operations.

Each operation opens its own session from the given ``Database``, runs in at
most one transaction, and closes the session before returning. Results are
printed to the console and also returned so callers can inspect them.
Failures are rolled back and re-raised as ``OperationError``.
"""

from loguru import logger
from rich.markup import escape
from sqlalchemy import select

from .db.database import Database
from .db.models import Book
from .errors import OperationError
from .output import print_books, print_info, print_success, print_warning


def insert_book(db: Database, book: Book) -> Book:
    """Insert a new book.

    The instance passed in gets its database-generated ``id`` on commit and
    is returned as-is.
    """
    with db.get_session() as session:
        try:
            tx = session.begin()
            session.add(book)
            tx.commit()
        except Exception as e:
            logger.error("Insert of {!r} failed: {}", book, e)
            raise OperationError(f"Could not insert the book: {e}") from e

    logger.debug("Inserted book id={}", book.id)
    return book


def list_books(db: Database) -> list[Book]:
    """Print and return every book, in insertion order."""
    with db.get_session() as session:
        try:
            stmt = select(Book).order_by(Book.id)
            books = list(session.execute(stmt).scalars().all())
        except Exception as e:
            logger.error("Listing books failed: {}", e)
            raise OperationError(f"Could not list the books: {e}") from e

    if not books:
        print_info("No books registered in the database")
    else:
        print_books(books)
    return books


def find_books_by_author(db: Database, author: str) -> list[Book]:
    """Print and return the books whose author matches exactly."""
    with db.get_session() as session:
        try:
            # Bound parameter, never interpolated into the SQL
            stmt = select(Book).where(Book.author == author).order_by(Book.id)
            books = list(session.execute(stmt).scalars().all())
        except Exception as e:
            logger.error("Searching books by author {!r} failed: {}", author, e)
            raise OperationError(f"Could not search the books: {e}") from e

    if not books:
        print_info(f"No book found by author: {escape(author)}")
    else:
        print_books(books)
    return books


def update_availability(db: Database, book_id: int, available: bool) -> bool:
    """Set the availability flag of a book.

    The whole row is read, changed in memory and merged back. Returns False
    when no book has that id; that is reported, not raised.
    """
    with db.get_session() as session:
        try:
            tx = session.begin()
            book = session.get(Book, book_id)

            if book is None:
                print_warning(f"No book found with ID: {book_id}")
                tx.rollback()
                return False

            book.available = available
            session.merge(book)
            tx.commit()
        except Exception as e:
            logger.error("Updating availability of book id={} failed: {}", book_id, e)
            raise OperationError(f"Could not update the availability: {e}") from e

    print_success(f"Availability of book with ID: {book_id} updated to {available}")
    return True


def delete_book(db: Database, book_id: int) -> bool:
    """Delete a book by id. Returns False when no book has that id."""
    with db.get_session() as session:
        try:
            tx = session.begin()
            book = session.get(Book, book_id)

            if book is None:
                print_warning(f"No book found with ID: {book_id}")
                tx.rollback()
                return False

            session.delete(book)
            tx.commit()
        except Exception as e:
            logger.error("Deleting book id={} failed: {}", book_id, e)
            raise OperationError(f"Could not delete the book: {e}") from e

    print_success(f"Deleted the book with ID: {book_id}")
    return True
