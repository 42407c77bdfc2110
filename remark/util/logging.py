"""Stdlib logging setup.

Remark logs through logfire. Libraries underneath (uvicorn, SQLAlchemy,
alembic, httpx) use stdlib logging, which is routed into logfire here so all
output shares one stream.
"""

import logging

import logfire

from remark.config import Settings

# Chatty at INFO, only their warnings are kept
QUIET_LOGGERS = ("httpx", "httpcore", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into logfire.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # Statements are echoed by the engine in debug mode only
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    logging.getLogger(__name__).info(
        "Stdlib logging routed to logfire at %s", logging.getLevelName(level)
    )
