"""Error Handlers — global exception handlers for the Course Catalog API.

Invariants:
    - RequestRejectedError -> its own envelope ({message} or {errors}) and status
    - RequestValidationError (unparseable body) -> 400 {errors: [...]}
    - Starlette HTTPException (unknown route, wrong method) -> {message}
    - Nothing here handles bare Exception: that is ErrorIsolationMiddleware's job

Design Decisions:
    - Extracted from main.py to keep the entry point small
    - 401 responses carry WWW-Authenticate so clients know to send Basic credentials
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from courses_api.core.errors import RequestRejectedError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all client-facing error handlers on the FastAPI app."""
    _register_rejection_handler(app)
    _register_validation_error_handler(app)
    _register_http_exception_handler(app)


def _register_rejection_handler(app: FastAPI) -> None:
    """Register handler for deliberate 4xx rejections."""

    @app.exception_handler(RequestRejectedError)
    async def rejection_handler(request: Request, exc: RequestRejectedError):
        logger.warning(
            f"Request rejected: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        headers = None
        if exc.http_status == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Basic"}
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(),
            headers=headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register handler for bodies FastAPI could not parse."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Unparseable request on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_exception_handler(app: FastAPI) -> None:
    """Register handler for framework-level HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Flatten pydantic errors into the same {errors: [...]} envelope."""
    return {
        "errors": [
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
            for e in exc.errors()
        ],
    }
