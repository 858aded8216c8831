"""The fixed CRUD walkthrough run by ``biblioteca demo``."""

from .crud import (
    delete_book,
    find_books_by_author,
    insert_book,
    list_books,
    update_availability,
)
from .db.database import Database
from .db.models import Book
from .output import print_header

DEMO_BOOKS = [
    ("Star Wars: Heir to the Empire", "Timothy Zahn"),
    ("The Fall of Númenor", "J. R. R. Tolkien"),
    ("Frankenstein: or, The Modern Prometheus", "Mary Shelley"),
]

DEMO_AUTHOR = "Timothy Zahn"
DEMO_UPDATE_ID = 1
DEMO_DELETE_ID = 2


def run_demo(db: Database) -> list[Book]:
    """Insert the sample books, query, update, delete, and list again.

    The ids used for the update and delete steps assume an empty ``libros``
    table, as on a fresh database. ``db`` is left open.

    Returns:
        The books remaining at the end.
    """
    books = [Book(title, author, True) for title, author in DEMO_BOOKS]
    for book in books:
        insert_book(db, book)

    print_header("Book list:")
    list_books(db)

    print_header(f"Search by author: '{DEMO_AUTHOR}'")
    find_books_by_author(db, DEMO_AUTHOR)

    print_header(f"Updating availability of book with ID: {DEMO_UPDATE_ID}")
    update_availability(db, DEMO_UPDATE_ID, False)

    print_header(f"Deleting book with ID: {DEMO_DELETE_ID}")
    delete_book(db, DEMO_DELETE_ID)

    print_header("Book list:")
    return list_books(db)
