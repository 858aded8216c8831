"""Main entry point for ``python -m biblioteca``."""

from biblioteca.cli import main

if __name__ == "__main__":
    main()
