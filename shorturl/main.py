"""Main application module.

This module initializes the FastAPI application, includes routes,
and configures middleware, exception handlers and the database lifecycle.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from shorturl.api import build_api_router
from shorturl.core.config import Settings, settings
from shorturl.core.logging import setup_logging
from shorturl.db.base import get_engine, get_session_factory, init_models
from shorturl.middleware.logging import LoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared store connection on startup and dispose it on shutdown."""
    app_settings: Settings = app.state.settings
    logger.info(f"Starting {app_settings.APP_NAME} v{app_settings.APP_VERSION}")
    logger.info(f"Environment: {app_settings.ENVIRONMENT.value}")

    engine = get_engine(app_settings)
    app.state.engine = engine
    app.state.session_factory = get_session_factory(engine)

    # A store that is down at startup is logged, the server keeps running
    if not await init_models(engine):
        logger.error("Database unavailable at startup, requests needing it will fail")

    yield

    logger.info(f"Shutting down {app_settings.APP_NAME}")
    await engine.dispose()


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application."""
    app_settings = app_settings or settings

    setup_logging(app_settings)

    app = FastAPI(
        title=app_settings.APP_NAME,
        description=app_settings.APP_DESCRIPTION,
        version=app_settings.APP_VERSION,
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url="/redoc" if app_settings.DEBUG else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if app_settings.REQUEST_LOGGING_ENABLED:
        app.add_middleware(LoggingMiddleware)

    app.include_router(build_api_router(app_settings.API_PREFIX))

    if app_settings.PUBLIC_DIR.is_dir():
        app.mount("/public", StaticFiles(directory=app_settings.PUBLIC_DIR), name="public")
    else:
        logger.warning(f"Static directory {app_settings.PUBLIC_DIR} not found, /public disabled")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors with detailed information."""
        logger.error(f"Request validation error: {exc}")
        return JSONResponse(
            status_code=422,
            content={"detail": "Validation error", "errors": exc.errors()}
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Log any unhandled exception and answer with a JSON 500."""
        error_id = f"error-{time.time()}"

        logger.bind(
            error_id=error_id,
            path_params=request.path_params,
            client_host=request.client.host if request.client else None,
        ).opt(exception=exc).error(
            f"Unhandled exception in {request.method} {request.url.path}"
        )

        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error occurred",
                "error_id": error_id,
                "message": str(exc) if app_settings.DEBUG else "Internal server error"
            }
        )

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    logger.info(f"Listening on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
