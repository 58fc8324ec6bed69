"""Standard library logging setup.

Application code logs through logfire directly. This module routes the
stdlib loggers of the libraries underneath (uvicorn, alembic, SQLAlchemy)
into the same logfire pipeline so one sink shows everything.
"""

import logging

import logfire

from ballot.config import Settings

# Library loggers that are noisy at INFO outside debug mode
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "sqlalchemy.pool")


def setup_logging(settings: Settings) -> None:
    """Send stdlib log records to logfire.

    Args:
        settings: Application settings; ``debug`` lowers the level to DEBUG
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.debug else logging.WARNING)

    logging.getLogger("ballot").setLevel(level)
    logging.getLogger(__name__).info(
        "Logging routed to logfire (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )
