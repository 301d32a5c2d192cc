"""
Consolidated middleware for the ChefKit API
"""

import time
import logging
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import ChefKitError

logger = logging.getLogger("chefkit.middleware")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with its method, path, status and duration.

    Every response carries ``X-Request-ID`` and ``X-Process-Time`` headers; the
    request id is also attached to the log records as ``extra``.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id
        context = {"request_id": request_id}

        logger.debug(
            "%s %s from %s",
            request.method,
            request.url.path,
            request.client.host if request.client else "-",
            extra=context,
        )
        start = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed after %.4fs",
                request.method,
                request.url.path,
                time.perf_counter() - start,
                extra=context,
            )
            raise

        elapsed = time.perf_counter() - start
        logger.info(
            "%s %s -> %d (%.4fs)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
            extra=context,
        )
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def chefkit_exception_handler(request: Request, exc: ChefKitError):
    """Handle application errors (database unavailable, not found, failed writes)"""
    if exc.http_status >= 500:
        logger.error(f"HTTP {exc.http_status} on {request.url}: {exc.message} ({exc.details})")
    else:
        logger.warning(f"HTTP {exc.http_status} on {request.url}: {exc.message}")

    payload = exc.to_dict()
    payload["timestamp"] = _now()
    return JSONResponse(status_code=exc.http_status, content=payload)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors (malformed JSON bodies, bad query params)"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={
            "success": False,
            "message": "Request validation failed",
            "error": jsonable_encoder(exc.errors()),
            "timestamp": _now(),
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.detail,
            "error": f"HTTP_{exc.status_code}",
            "timestamp": _now(),
        },
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "An unexpected error occurred",
            "error": "INTERNAL_SERVER_ERROR",
            "timestamp": _now(),
        },
    )
