from typing import Any, Dict, Optional


class HTTPException(Exception):
    def __init__(self, status_code: int, detail: Optional[str] = None, headers: Optional[Dict[str, Any]] = None):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail
        self.headers = headers

    def __repr__(self):
        return f"HTTPException(status_code={self.status_code}, detail={self.detail!r})"


class SerializationError(TypeError):
    """Raised when a serializer is asked to encode a type it does not know."""
