"""Logging setup.

Everything is logged through loguru to standard error. SQLAlchemy logs via
the standard ``logging`` module, so its records are forwarded into loguru
instead of letting ``echo`` print them on stdout.
"""

import logging
import sys

from loguru import logger

SQL_LOGGER = "sqlalchemy.engine"


class InterceptHandler(logging.Handler):
    """Redirect standard 'logging' records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Make Loguru show the original caller (not this handler)
        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def setup_logging(level: str) -> None:
    """Send loguru output to stderr at the given level."""
    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
               "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - "
               "<level>{message}</level>",
        colorize=True,
    )


def route_sql_logging(echo: bool) -> None:
    """Forward SQLAlchemy engine logs to loguru; INFO shows every statement."""
    sql_logger = logging.getLogger(SQL_LOGGER)
    if not any(isinstance(h, InterceptHandler) for h in sql_logger.handlers):
        sql_logger.addHandler(InterceptHandler())
    sql_logger.propagate = False
    sql_logger.setLevel(logging.INFO if echo else logging.WARNING)
