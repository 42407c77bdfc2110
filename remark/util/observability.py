"""Logfire setup and instrumentation.

Application code logs through logfire directly:

    with logfire.span("comment_service.create_comment", entity_type=entity_type):
        logfire.info("Comment created", comment_id=str(comment.id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from remark.config import ObservabilitySettings, Settings

# Probed constantly by the load balancer
UNTRACED_URLS = "/health"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Explicit setting first, otherwise send only when a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the running environment.

    Without a token, output goes to the console only.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = should_send_to_logfire(observability)

    logfire.configure(
        service_name="remark-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            verbose=settings.debug,
            min_log_level="debug" if settings.debug else "info",
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health probes.

    Headers are not captured: the auth cookie travels in them.
    """
    logfire.instrument_fastapi(app, capture_headers=False, excluded_urls=UNTRACED_URLS)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement run on the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound webhook deliveries."""
    logfire.instrument_httpx()
