from typing import Any, Callable, List, NamedTuple, Optional


class RouteSpec(NamedTuple):
    method: str
    path: str
    handler: Callable[..., Any]
    tags: Optional[List[str]]
    response_model: Any


class Router:
    """
    A router for organizing and grouping userbench API endpoints.

    Usage:
        router = Router(prefix="/api")

        @router.get("/users", response_model=List[User])
        def get_users():
            ...

        app.include_router(router)
    """

    def __init__(self, prefix: str = "") -> None:
        "Initialize the router with an optional path prefix."
        self.prefix: str = prefix.rstrip("/")
        self.routes: List[RouteSpec] = []

    def _add_route(
        self,
        method: str,
        path: str,
        handler: Callable[..., Any],
        tags: Optional[List[str]] = None,
        response_model: Any = None,
    ) -> None:
        "Internal method to add a route to the router's list."
        full_path = self.prefix + path
        self.routes.append(RouteSpec(method, full_path, handler, tags, response_model))

    def get(
        self, path: str, tags: Optional[List[str]] = None, response_model: Any = None
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a GET route on this router."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self._add_route("GET", path, func, tags=tags, response_model=response_model)
            return func

        return decorator
