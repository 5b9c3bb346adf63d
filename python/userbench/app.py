"""
userbench application class, the entry point for building the demo API.
Provides decorator syntax for defining routes on top of a Starlette ASGI app.
Integrates middleware, exception handlers, pluggable serialization and OpenAPI docs.
"""

import inspect
from typing import Any, Callable, Dict, List, Optional

import uvicorn
from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response
from starlette.routing import Route

from userbench import __version__
from userbench.middleware import ErrorHandlerMiddleware, Middleware
from userbench.openapi import REDOC_HTML, SWAGGER_UI_HTML, generate_openapi_schema
from userbench.router import Router
from userbench.serialization import ReflectionSerializer, Serializer

JSON_MEDIA_TYPE = "application/json"


class UserBench:
    """
    The main userbench application.

    Usage:
        from userbench import UserBench

        app = UserBench()

        @app.get("/")
        def hello():
            return {"message": "userbench is live"}

        app.run(host="0.0.0.0", port=8000)
    """

    def __init__(
        self,
        title: str = "userbench",
        version: str = __version__,
        debug: bool = False,
        description: str = "",
        serializer: Optional[Serializer] = None,
        docs_url: Optional[str] = "/docs",
        redoc_url: Optional[str] = "/redoc",
        openapi_url: Optional[str] = "/openapi.json",
    ):
        self._routes: List[Dict[str, Any]] = []
        self._middlewares: List[Middleware] = []
        self._exception_handlers: Dict[Any, Callable] = {}
        self._asgi: Optional[Starlette] = None
        self.title = title
        self.version = version
        self.debug = debug
        self.description = description
        self.serializer = serializer or ReflectionSerializer()
        self.docs_url = docs_url
        self.redoc_url = redoc_url
        self.openapi_url = openapi_url
        self._openapi_schema: Optional[dict] = None

        # Add default error handler
        self._middlewares.append(ErrorHandlerMiddleware(debug=debug))

    def exception_handler(self, status_code_or_exc):
        def decorator(func):
            self._exception_handlers[status_code_or_exc] = func
            return func
        return decorator

    def _handle_exception(self, request: Request, exc: Optional[Exception], status_code: int) -> Optional[Response]:
        # Check exception type
        for exc_type, handler in self._exception_handlers.items():
            if isinstance(exc_type, type) and exc is not None and isinstance(exc, exc_type):
                return self._error_response(handler(request, exc))
        # Check status code
        if status_code in self._exception_handlers:
            return self._error_response(self._exception_handlers[status_code](request, exc))
        return None

    @staticmethod
    def _error_response(result: Any) -> Response:
        if isinstance(result, Response):
            return result
        status_code = 200
        if isinstance(result, tuple):
            result, status_code = result
        return JSONResponse(result, status_code=status_code)

    def _coerce(self, result: Any, response_model: Any = None) -> Response:
        """Turn a handler result into a response using the configured serializer."""
        if isinstance(result, Response):
            return result
        status_code = 200
        if isinstance(result, tuple):
            result, status_code = result
        body = self.serializer.dumps(result, response_model)
        return Response(body, status_code=status_code, media_type=JSON_MEDIA_TYPE)

    def _call_handler(self, handler: Callable, response_model: Any, kwargs: Dict[str, Any]) -> Response:
        return self._coerce(handler(**kwargs), response_model)

    def _create_dispatch(self, handler: Callable, response_model: Any = None) -> Callable:
        params = inspect.signature(handler).parameters
        wants_request = "request" in params

        async def dispatch(request: Request) -> Response:
            try:
                for middleware in self._middlewares:
                    request = middleware.before_request(request)
                kwargs = {name: value for name, value in request.path_params.items() if name in params}
                if wants_request:
                    kwargs["request"] = request
                # Handlers run in the worker thread pool.
                response = await run_in_threadpool(self._call_handler, handler, response_model, kwargs)
                if response.status_code >= 400:
                    response = self._handle_exception(request, None, response.status_code) or response
            except Exception as exc:
                status_code = getattr(exc, "status_code", 500)
                response = self._handle_exception(request, exc, status_code)
                if response is None:
                    for middleware in self._middlewares:
                        response = middleware.on_error(request, exc)
                        if response is not None:
                            break
                if response is None:
                    raise
            for middleware in reversed(self._middlewares):
                response = middleware.after_request(request, response)
            return response

        dispatch.__name__ = getattr(handler, "__name__", "dispatch")
        return dispatch

    def add_middleware(self, middleware: Middleware):
        """Add a middleware to the application."""
        self._middlewares.insert(0, middleware)  # Prepend so user middleware runs first

    def _add_route(self, method: str, path: str, handler: Callable, **kwargs) -> Callable:
        """Register a route handler."""
        self._routes.append({
            "method": method,
            "path": path,
            "handler": handler,
            "name": handler.__name__,
            **kwargs,
        })
        self._asgi = None
        self._openapi_schema = None
        return handler

    def include_router(self, router: Router):
        for route in router.routes:
            self._add_route(
                route.method,
                route.path,
                route.handler,
                tags=route.tags,
                response_model=route.response_model,
            )

    def get(self, path: str, **kwargs) -> Callable:
        """Register a GET route."""
        def decorator(func: Callable) -> Callable:
            return self._add_route("GET", path, func, **kwargs)
        return decorator

    @property
    def routes(self) -> List[Dict[str, Any]]:
        return list(self._routes)

    def openapi(self) -> dict:
        """Get the OpenAPI schema, generating it if needed."""
        if self._openapi_schema is None:
            self._openapi_schema = generate_openapi_schema(
                title=self.title,
                version=self.version,
                routes=self._routes,
                description=self.description,
            )
        return self._openapi_schema

    def _docs_routes(self) -> List[Route]:
        """Build the OpenAPI, Swagger UI, and ReDoc routes."""
        if not self.openapi_url:
            return []

        async def openapi_json(request: Request) -> Response:
            return JSONResponse(self.openapi())

        routes = [Route(self.openapi_url, openapi_json, methods=["GET"])]

        if self.docs_url:
            swagger_html = SWAGGER_UI_HTML.format(title=self.title, openapi_url=self.openapi_url)

            async def swagger_ui(request: Request) -> Response:
                return HTMLResponse(swagger_html)

            routes.append(Route(self.docs_url, swagger_ui, methods=["GET"]))

        if self.redoc_url:
            redoc_html = REDOC_HTML.format(title=self.title, openapi_url=self.openapi_url)

            async def redoc(request: Request) -> Response:
                return HTMLResponse(redoc_html)

            routes.append(Route(self.redoc_url, redoc, methods=["GET"]))

        return routes

    async def _not_found(self, request: Request, exc: Exception) -> Response:
        res = self._handle_exception(request, None, 404)
        if res:
            return res
        return JSONResponse({"error": "Not Found", "detail": "No route found"}, status_code=404)

    async def _method_not_allowed(self, request: Request, exc: Exception) -> Response:
        return JSONResponse({"error": "Method Not Allowed", "detail": "Method not allowed for this route"}, status_code=405)

    def build(self) -> Starlette:
        """Assemble the Starlette application from the registered routes."""
        routes = [
            Route(
                route["path"],
                self._create_dispatch(route["handler"], route.get("response_model")),
                methods=[route["method"]],
                name=route["name"],
            )
            for route in self._routes
        ]
        routes.extend(self._docs_routes())
        return Starlette(
            debug=False,
            routes=routes,
            exception_handlers={404: self._not_found, 405: self._method_not_allowed},
        )

    async def __call__(self, scope, receive, send) -> None:
        if self._asgi is None:
            self._asgi = self.build()
        await self._asgi(scope, receive, send)

    def run(self, host: str = "0.0.0.0", port: int = 8000, log_level: str = "info"):
        """Start the userbench server."""
        print(f"userbench v{self.version} - {self.title} ({self.serializer.name} serializer)", flush=True)
        for route in self._routes:
            print(f"   {route['method']:<6} http://{host}:{port}{route['path']}", flush=True)
        if self.openapi_url:
            print(f"   Docs:    http://{host}:{port}{self.docs_url}", flush=True)
            print(f"   OpenAPI: http://{host}:{port}{self.openapi_url}", flush=True)

        uvicorn.run(self, host=host, port=port, log_level=log_level.lower())
