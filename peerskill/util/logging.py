"""Standard library logging for the process.

Application events go through logfire; this only shapes what uvicorn,
alembic and the database drivers print.
"""

import logging
import sys

from peerskill.config import Settings

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access", "multipart")


def log_level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger.

    Args:
        settings: Application settings
    """
    level = log_level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger("peerskill").setLevel(level)
    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
