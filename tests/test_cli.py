"""Tests for the CLI interface."""

import os
import tempfile
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from biblioteca import __version__
from biblioteca.cli import app
from biblioteca.config import reset_config


@pytest.fixture(autouse=True)
def setup_test_db():
    """Set up a test database for each test."""
    reset_config()

    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = f.name

    os.environ["BIBLIOTECA_DATABASE_URL"] = f"sqlite:///{db_path}"

    yield

    # Cleanup
    logger.remove()
    reset_config()
    if "BIBLIOTECA_DATABASE_URL" in os.environ:
        del os.environ["BIBLIOTECA_DATABASE_URL"]
    if Path(db_path).exists():
        Path(db_path).unlink()


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


def add_book(runner: CliRunner, title: str, author: str, *extra: str):
    return runner.invoke(app, ["add", "--title", title, "--author", author, *extra])


class TestCLIBasics:
    """Tests for basic CLI functionality."""

    def test_help(self, runner: CliRunner):
        """Test that help command works."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "book catalog" in result.stdout

    def test_version(self, runner: CliRunner):
        """Test version command."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_init(self, runner: CliRunner):
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert "Database ready" in result.stdout

    def test_unknown_log_level(self, runner: CliRunner):
        result = runner.invoke(app, ["--log-level", "loud", "list"])
        assert result.exit_code == 1
        assert "Unknown log level" in result.stdout


class TestDemoCommand:
    """Tests for the demo command."""

    def test_demo(self, runner: CliRunner):
        """Test the full walkthrough on a fresh database."""
        result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0
        assert "Deleted the book with ID: 2" in result.stdout
        assert "Availability of book with ID: 1 updated to False" in result.stdout

    def test_list_after_demo(self, runner: CliRunner):
        runner.invoke(app, ["demo"])
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "Book ID: 1" in result.stdout
        assert "Book ID: 2" not in result.stdout
        assert "Book ID: 3" in result.stdout
        assert "2 book(s)" in result.stdout


class TestAddCommand:
    """Tests for the add command."""

    def test_add_book(self, runner: CliRunner):
        result = add_book(runner, "Dune", "Frank Herbert")

        assert result.exit_code == 0
        assert "Added: Dune (ID: 1)" in result.stdout

    def test_add_unavailable(self, runner: CliRunner):
        add_book(runner, "Dune", "Frank Herbert", "--unavailable")
        result = runner.invoke(app, ["list"])

        assert "Available: False" in result.stdout

    def test_add_emoji_code_title(self, runner: CliRunner):
        result = add_book(runner, ":smile:", "Frank Herbert")

        assert result.exit_code == 0
        assert "Added: :smile: (ID: 1)" in result.stdout

    def test_add_blank_title(self, runner: CliRunner):
        """Test that validation errors exit with an error."""
        result = add_book(runner, "   ", "Frank Herbert")

        assert result.exit_code == 1
        assert "Error:" in result.stdout
        assert "title" in result.stdout


class TestListAndSearchCommands:
    """Tests for list and search commands."""

    def test_list_empty(self, runner: CliRunner):
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "No books registered in the database" in result.stdout

    def test_search_with_results(self, runner: CliRunner):
        add_book(runner, "Dune", "Frank Herbert")
        add_book(runner, "Emma", "Jane Austen")

        result = runner.invoke(app, ["search", "Frank Herbert"])

        assert result.exit_code == 0
        assert "Title: Dune" in result.stdout
        assert "Emma" not in result.stdout

    def test_search_no_results(self, runner: CliRunner):
        result = runner.invoke(app, ["search", "Nobody"])

        assert result.exit_code == 0
        assert "No book found by author: Nobody" in result.stdout


class TestUpdateAndDeleteCommands:
    """Tests for set-available and delete."""

    def test_set_unavailable(self, runner: CliRunner):
        add_book(runner, "Dune", "Frank Herbert")

        result = runner.invoke(app, ["set-available", "1", "--unavailable"])

        assert result.exit_code == 0
        assert "updated to False" in result.stdout

    def test_set_available_missing(self, runner: CliRunner):
        result = runner.invoke(app, ["set-available", "999", "--unavailable"])

        assert result.exit_code == 1
        assert "No book found with ID: 999" in result.stdout

    def test_delete(self, runner: CliRunner):
        add_book(runner, "Dune", "Frank Herbert")

        result = runner.invoke(app, ["delete", "1"])

        assert result.exit_code == 0
        assert "Deleted the book with ID: 1" in result.stdout

    def test_delete_missing(self, runner: CliRunner):
        result = runner.invoke(app, ["delete", "999"])

        assert result.exit_code == 1
        assert "No book found with ID: 999" in result.stdout


class TestStartupFailure:
    """Tests for an unusable database configuration."""

    def test_unknown_driver(self, runner: CliRunner):
        os.environ["BIBLIOTECA_DATABASE_URL"] = "nosuchdriver://localhost/books"
        reset_config()

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 1
        assert "Could not build the session factory" in result.stdout
