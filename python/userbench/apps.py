"""
The two application variants.

- standard: reflection serializer, OpenAPI document, Swagger UI and ReDoc.
- minimal: precompiled serializer for a closed set of types, no docs routes.
"""

from typing import Optional

from userbench.app import UserBench
from userbench.config import Settings
from userbench.middleware import AccessLogMiddleware
from userbench.routes import router
from userbench.serialization import ReflectionSerializer, default_precompiled


def create_standard_app(settings: Optional[Settings] = None) -> UserBench:
    settings = settings or Settings()
    app = UserBench(
        title="userbench",
        description="Synthetic users and a prime counting benchmark.",
        debug=settings.debug,
        serializer=ReflectionSerializer(),
    )
    app.add_middleware(AccessLogMiddleware())
    app.include_router(router)
    return app


def create_minimal_app(settings: Optional[Settings] = None) -> UserBench:
    settings = settings or Settings()
    app = UserBench(
        title="userbench-minimal",
        debug=settings.debug,
        serializer=default_precompiled(),
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_middleware(AccessLogMiddleware())
    app.include_router(router)
    return app


def create_app(variant: str = "standard", settings: Optional[Settings] = None) -> UserBench:
    """Build the application for ``variant`` ("standard" or "minimal")."""
    if variant == "standard":
        return create_standard_app(settings)
    if variant == "minimal":
        return create_minimal_app(settings)
    raise ValueError(f"Unknown variant {variant!r}")
