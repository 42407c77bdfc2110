#!/usr/bin/env python3
"""Serve the Remark API with uvicorn."""

import sys

import logfire
import uvicorn

from remark.config import Settings
from remark.util.logging import setup_logging
from remark.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then serve until interrupted."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting Remark API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
        comments_enabled=settings.comments.enabled,
    )

    try:
        uvicorn.run(
            "remark.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            proxy_headers=True,
            log_config=None,  # Keep the logfire handler installed above
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Remark API failed to start")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
