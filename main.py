"""
inPEP FastAPI Application
Main entry point wiring routers, middleware, and configuration management
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio

from api.routes import (
    system,
    auth,
    appointments,
    providers,
    heredibles,
    caregiver_engagement,
    insurer,
    health,
)
from domain.models import init_database
from app.config import settings
from app.exceptions import AppError
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    app_error_handler,
    general_exception_handler,
)

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("inpep.main")

ROUTERS = (
    system,
    auth,
    appointments,
    providers,
    heredibles,
    caregiver_engagement,
    insurer,
    health,
)


async def _init_database_with_retries() -> None:
    """Create the schema, retrying while the database is still coming up."""
    attempts = settings.db_init_attempts
    for attempt in range(1, attempts + 1):
        try:
            await anyio.to_thread.run_sync(init_database)
        except Exception as exc:
            if attempt == attempts:
                _logger.error(
                    "Database initialization failed after %d attempts: %s", attempt, exc
                )
                raise
            _logger.warning(
                "Database init attempt %d/%d failed: %s", attempt, attempts, exc
            )
            await anyio.sleep(settings.db_init_delay_sec)
        else:
            _logger.info("Database initialization succeeded")
            return


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    if settings.uses_default_jwt_secret():
        _logger.warning(
            "JWT_SECRET is not set; tokens are signed with the fallback secret"
        )

    await _init_database_with_retries()

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    docs_enabled = not settings.is_production()
    application = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=f"{settings.api_prefix}/openapi.json" if docs_enabled else None,
        docs_url=f"{settings.api_prefix}/docs" if docs_enabled else None,
        redoc_url=f"{settings.api_prefix}/redoc" if docs_enabled else None,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    application.add_middleware(RequestLoggingMiddleware)

    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(AppError, app_error_handler)
    application.add_exception_handler(Exception, general_exception_handler)

    for module in ROUTERS:
        application.include_router(module.router, prefix=settings.api_prefix)

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
