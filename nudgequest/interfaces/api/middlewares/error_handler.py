"""
Error Handling Middleware.

Catches unhandled exceptions from route handlers and logs them.
The client gets a generic 500 instead of a stack trace.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Something went wrong"


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for unhandled errors.

    Usage:
        app.add_middleware(ErrorHandlingMiddleware)
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            # Full error with traceback
            logger.exception(f"Error handling {request.method} {request.url.path}: {e}")
            return JSONResponse(status_code=500, content={"detail": ERROR_MESSAGE})
