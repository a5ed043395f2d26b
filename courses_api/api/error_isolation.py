"""Error Isolation — outermost safety net for request handling.

Invariants:
    - Any exception escaping a route becomes HTTP 500
      {message, name, description}; never a stack trace
    - Never re-raises: the transport layer only ever sees a response
    - 4xx rejections are already responses by the time they get here

Design Decisions:
    - Middleware instead of @app.exception_handler(Exception): Starlette's
      ServerErrorMiddleware re-raises after calling that handler, this does not
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from courses_api.core.errors import internal_error_response

logger = logging.getLogger(__name__)


class ErrorIsolationMiddleware(BaseHTTPMiddleware):
    """Convert unhandled exceptions into the uniform internal-error response."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error_code": "INTERNAL_ERROR",
                },
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=internal_error_response(exc),
            )
