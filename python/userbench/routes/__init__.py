from userbench.routes.api import router

__all__ = ["router"]
