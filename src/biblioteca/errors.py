"""Exceptions raised by biblioteca."""


class BibliotecaError(Exception):
    """Base class for all biblioteca errors."""


class PersistenceError(BibliotecaError):
    """The database could not be opened or is not open.

    Startup failures are fatal; nothing retries them.
    """


class OperationError(BibliotecaError):
    """A CRUD operation failed and its transaction was rolled back."""
