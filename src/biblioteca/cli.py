"""Command-line interface for biblioteca.

Built with Typer for commands and Rich for output.
"""

from contextlib import contextmanager
from typing import Generator, Optional

import typer
from pydantic import ValidationError
from rich.markup import escape

from .config import LOG_LEVELS, get_config
from .crud import delete_book, find_books_by_author, insert_book, list_books, update_availability
from .db import BookCreate, Database
from .demo import run_demo
from .errors import OperationError, PersistenceError
from .log import setup_logging
from .output import console, print_error, print_info, print_success

# Create the main app
app = typer.Typer(
    name="biblioteca",
    help="Manage a small book catalog stored in a relational database.",
    no_args_is_help=True,
)


# ============================================================================
# Helper Functions
# ============================================================================


@contextmanager
def open_database() -> Generator[Database, None, None]:
    """Open the configured database for one command and always close it.

    Startup and operation failures are printed and turned into exit code 1.
    """
    config = get_config()
    errors = config.validate()
    if errors:
        for error in errors:
            print_error(escape(error))
        raise typer.Exit(1)

    db = Database(config.database_url, echo=config.sql_echo)
    try:
        db.open()
    except PersistenceError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    try:
        yield db
    except OperationError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)
    finally:
        db.close()


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    ),
) -> None:
    """Manage a small book catalog stored in a relational database."""
    level = (log_level or get_config().log_level).upper()
    if level not in LOG_LEVELS:
        print_error(f"Unknown log level: {level}")
        raise typer.Exit(1)
    setup_logging(level)


# ============================================================================
# Commands
# ============================================================================


@app.command()
def demo() -> None:
    """Insert three books, list, search, update, delete and list again."""
    with open_database() as db:
        run_demo(db)


@app.command()
def init() -> None:
    """Create the books table if it does not exist."""
    with open_database() as db:
        db.create_tables()
        print_success(f"Database ready: {db.engine.url.render_as_string(hide_password=True)}")


@app.command()
def add(
    title: str = typer.Option(..., "--title", "-t", help="Book title"),
    author: str = typer.Option(..., "--author", "-a", help="Book author"),
    unavailable: bool = typer.Option(False, "--unavailable", help="Register the book as lent out"),
) -> None:
    """Add a book to the catalog."""
    try:
        data = BookCreate(title=title, author=author, available=not unavailable)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print_error(escape(f"{field}: {error['msg']}"))
        raise typer.Exit(1)

    with open_database() as db:
        book = insert_book(db, data.to_model())

    print_success(f"Added: {escape(book.title)} (ID: {book.id})")


@app.command("list")
def list_command() -> None:
    """List every book."""
    with open_database() as db:
        books = list_books(db)

    if books:
        print_info(f"{len(books)} book(s)")


@app.command()
def search(
    author: str = typer.Argument(..., help="Exact author name"),
) -> None:
    """Find books by author (exact match)."""
    with open_database() as db:
        find_books_by_author(db, author)


@app.command("set-available")
def set_available(
    book_id: int = typer.Argument(..., help="Book ID"),
    available: bool = typer.Option(True, "--available/--unavailable", help="New availability"),
) -> None:
    """Change whether a book is available."""
    with open_database() as db:
        found = update_availability(db, book_id, available)

    if not found:
        raise typer.Exit(1)


@app.command()
def delete(
    book_id: int = typer.Argument(..., help="Book ID"),
) -> None:
    """Delete a book by ID."""
    with open_database() as db:
        found = delete_book(db, book_id)

    if not found:
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"biblioteca version {__version__}")


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
