"""Console output helpers.

Everything the operations report goes through the shared rich ``console``
on standard output. Logs go to standard error via loguru instead.

Lines are never wrapped and ``:name:`` emoji codes are never expanded, so
stored text is printed exactly as it is.
"""

from typing import Iterable

from rich.console import Console

from .db.models import Book

console = Console()


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(
        f"[bold red]Error:[/bold red] {message}", emoji=False, highlight=False, soft_wrap=True
    )


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(
        f"[bold green]Success:[/bold green] {message}", emoji=False, highlight=False, soft_wrap=True
    )


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(
        f"[bold yellow]Warning:[/bold yellow] {message}", emoji=False, highlight=False, soft_wrap=True
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]", emoji=False, highlight=False, soft_wrap=True)


def print_header(message: str) -> None:
    """Print a section header preceded by a blank line."""
    console.print()
    console.print(
        message, style="bold", markup=False, emoji=False, highlight=False, soft_wrap=True
    )


def print_books(books: Iterable[Book]) -> None:
    """Print each book's plain-text rendering."""
    for book in books:
        # Titles may contain brackets, so no markup
        console.print(str(book), markup=False, emoji=False, highlight=False, soft_wrap=True)
