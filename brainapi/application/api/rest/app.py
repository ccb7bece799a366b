import logging
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from brainapi.application.api.v1.errors import ERROR_STATUS_CODE, map_brain_error
from brainapi.application.api.v1.routes import dataset, health, refresh, status
from brainapi.application.di import create_container
from brainapi.config import Config, configure_logging
from brainapi.domain.dataset.service.refresh import RefreshFailed, RefreshService
from brainapi.domain.shared.error import BrainError

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: AsyncContainer = app.state.dishka_container

    # Load once before serving; a failure leaves the store empty but the API up
    refresh_service = await container.get(RefreshService)
    outcome = await refresh_service.refresh()
    if isinstance(outcome, RefreshFailed):
        logger.warning("Initial load failed, serving without data: %s", outcome.error)
    else:
        logger.info("Initial load complete: %d records", outcome.total)

    yield

    await container.close()


def create_app(config: Config | None = None, container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Spans are only exported when LOGFIRE_TOKEN is set
    logfire.configure(send_to_logfire="if-token-present", console=False)
    logfire.instrument_httpx()
    logfire.instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_dishka(container or create_container(config), app_instance)

    app_instance.include_router(health.router, prefix=API_PREFIX)
    app_instance.include_router(status.router, prefix=API_PREFIX)
    app_instance.include_router(dataset.router, prefix=API_PREFIX)
    app_instance.include_router(refresh.router, prefix=API_PREFIX)

    @app_instance.exception_handler(BrainError)
    async def brain_error_handler(request: Request, exc: BrainError):
        logger.info("%s %s -> %s", request.method, request.url.path, exc.code)
        return JSONResponse(status_code=ERROR_STATUS_CODE, content=map_brain_error(exc))

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app_instance
