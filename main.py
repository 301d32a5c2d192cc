"""
ChefKit FastAPI Application
Main entry point: configuration, middleware, exception handlers and routers
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio

from api.routes import health, users, meal_kits

from adapters import MongoAdapter
from repositories import MealKitRepository, UserRepository

from app.config import settings

from api.middleware import (
    RequestLoggingMiddleware,
    chefkit_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler,
)
from app.exceptions import ChefKitError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("chefkit.main")


def _ensure_indexes(mongo: MongoAdapter) -> None:
    """Create collection indexes; the adapter calls this on its first successful ping."""
    UserRepository(mongo).ensure_indexes()
    MealKitRepository(mongo).ensure_indexes()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Connects to MongoDB once; the service keeps serving when it cannot,
    reads degrade to empty results and writes answer 503. Indexes are created
    on whichever connect succeeds first, at startup or on a later request.
    """
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    mongo = MongoAdapter(settings, on_first_connect=_ensure_indexes)
    app.state.mongo = mongo

    # The ping (and index creation on success) blocks; run it in a thread
    if not await anyio.to_thread.run_sync(mongo.connect):
        _logger.warning("MongoDB unavailable at startup; will retry on first request")

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        mongo.close()


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url="/openapi.json" if not settings.is_production() else None,
    docs_url="/docs" if not settings.is_production() else None,
    redoc_url="/redoc" if not settings.is_production() else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(ChefKitError, chefkit_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(meal_kits.router)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
