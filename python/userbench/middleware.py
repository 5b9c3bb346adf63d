"""
Middleware system for userbench.
Middlewares hook into the request cycle before the handler, after it, and on error.
"""

import logging
import time
import traceback
from typing import Any, Optional

from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from userbench.exceptions import HTTPException


class Middleware:
    """
    Base middleware class. Subclass this and override
    before_request, after_request, or on_error.

    Usage:
        class ServerHeaderMiddleware(Middleware):
            def after_request(self, request, response):
                response.headers["server"] = "userbench"
                return response

        app.add_middleware(ServerHeaderMiddleware())
    """

    def before_request(self, request: Request) -> Request:
        """Called before the route handler. Return the (possibly modified) request."""
        return request

    def after_request(self, request: Request, response: Response) -> Response:
        """Called after the route handler. Return the (possibly modified) response."""
        return response

    def on_error(self, request: Request, error: Exception) -> Optional[Response]:
        """Called when an error occurs. Return a response to override default error handling."""
        return None


class ErrorHandlerMiddleware(Middleware):
    """
    Turns exceptions into JSON error bodies.
    In debug mode unhandled errors carry the exception type and traceback.
    """

    def __init__(self, debug: bool = False, logger_name: str = "userbench.errors"):
        self.debug = debug
        self.logger = logging.getLogger(logger_name)

    def on_error(self, request, error):
        if isinstance(error, HTTPException):
            return JSONResponse({"detail": error.detail}, status_code=error.status_code, headers=error.headers)

        self.logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=error)
        if self.debug:
            return JSONResponse(
                {
                    "error": type(error).__name__,
                    "detail": str(error),
                    "traceback": traceback.format_exception(type(error), error, error.__traceback__),
                },
                status_code=500,
            )
        return JSONResponse({"detail": "An unexpected error occurred"}, status_code=500)


class AccessLogMiddleware(Middleware):
    def __init__(self, logger_name: str = "userbench.access"):
        self.logger = logging.getLogger(logger_name)

    def before_request(self, request):
        request.state.userbench_start = time.monotonic()
        return request

    def after_request(self, request, response):
        start = getattr(request.state, "userbench_start", time.monotonic())
        duration = (time.monotonic() - start) * 1000
        self.logger.info("%s %s %d %.1fms", request.method, request.url.path, response.status_code, duration)
        return response

