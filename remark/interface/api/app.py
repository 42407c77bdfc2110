"""FastAPI application factory."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from remark.config import Settings
from remark.domain.error import DataIntegrityError
from remark.interface.api.routes import comments, health
from remark.util.di.container import create_container, setup_di
from remark.util.observability import instrument_fastapi, instrument_httpx


async def handle_data_integrity_error(
    request: Request, exc: DataIntegrityError
) -> JSONResponse:
    """Report corrupted stored data as a server fault, never as a client error."""
    logfire.error(
        "Stored comment data is corrupted",
        method=request.method,
        path=request.url.path,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the Remark API.

    Logfire should be configured before calling this; ``scripts/start_app.py``
    does so. Without it, instrumentation records nothing.

    Args:
        settings: Settings to build the app from (read from the environment
            when omitted)
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Remark API",
        description="Threaded comments for any entity, with moderation and link safety",
        version="0.1.0",
        debug=settings.debug,
    )

    instrument_fastapi(app_instance)
    instrument_httpx()

    # Browsers send the auth cookie cross-origin only with credentials allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Accept"],
    )
    app_instance.add_exception_handler(DataIntegrityError, handle_data_integrity_error)

    setup_di(app_instance, create_container())

    app_instance.include_router(health.router)
    if settings.comments.enabled:
        app_instance.include_router(comments.router)
    else:
        logfire.info("Comments disabled, comment routes not mounted")

    return app_instance


# Module-level app for uvicorn
app = create_app()
