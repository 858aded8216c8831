"""Configuration management for biblioteca.

Loads configuration from environment variables and provides defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

# Load .env file if present
load_dotenv()

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

_TRUTHY = ("1", "true", "yes", "on")


def default_database_url() -> str:
    """SQLite file under the user's home directory."""
    return f"sqlite:///{Path.home() / '.biblioteca' / 'biblioteca.db'}"


@dataclass
class Config:
    """Application configuration."""

    # Database
    database_url: str
    sql_echo: bool

    # Logging
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            database_url=os.environ.get("BIBLIOTECA_DATABASE_URL", default_database_url()),
            sql_echo=os.environ.get("BIBLIOTECA_SQL_ECHO", "").strip().lower() in _TRUTHY,
            log_level=os.environ.get("BIBLIOTECA_LOG_LEVEL", "WARNING").strip().upper(),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if not self.database_url:
            errors.append("Database URL is empty")
        else:
            try:
                url = make_url(self.database_url)
            except ArgumentError:
                errors.append(f"Invalid database URL: {self.database_url}")
            else:
                # Check SQLite database directory is writable
                if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
                    db_dir = Path(url.database).expanduser().parent
                    if not db_dir.exists():
                        try:
                            db_dir.mkdir(parents=True, exist_ok=True)
                        except OSError:
                            errors.append(f"Cannot create database directory: {db_dir}")

        if self.log_level not in LOG_LEVELS:
            errors.append(f"Unknown log level: {self.log_level}")

        return errors


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
