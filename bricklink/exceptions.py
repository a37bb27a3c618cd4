from __future__ import annotations

from typing import Any, Dict, Optional


class BricklinkError(RuntimeError):
    """Base class for every error raised by the client."""


class ConfigurationError(BricklinkError):
    """Raised when client settings cannot be loaded."""


class ValidationError(BricklinkError):
    """Raised when a caller argument is missing or invalid. Nothing is sent."""

    MISSING = "missing"
    INVALID = "invalid"

    def __init__(self, message: str, *, param: str, kind: str = MISSING) -> None:
        super().__init__(message)
        self.param = param
        self.kind = kind


class TransportError(BricklinkError):
    """Raised when the HTTP request could not be completed (DNS, connection, timeout)."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        super().__init__(f"{method} {url} failed: {reason}")
        self.method = method
        self.url = url


class APIError(BricklinkError):
    """Raised when the BrickLink API responds with a non-success status code."""

    def __init__(self, status_code: int, body: str, *, payload: Optional[Dict[str, Any]] = None):
        detail = f"HTTP {status_code}: {body}"
        super().__init__(detail)
        self.status_code = status_code
        self.body = body
        self.payload = payload or {}
