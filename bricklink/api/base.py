from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests

from ..exceptions import APIError, TransportError

DEFAULT_BASE_URL = "https://api.bricklink.com/api/store/v1"
DEFAULT_TIMEOUT = 10.0

logger = logging.getLogger(__name__)


def _normalize_path(path: str) -> str:
    if not path.startswith("/"):
        return f"/{path}"
    return path


def build_query_string(params: Optional[Mapping[str, object]]) -> str:
    """Join params as ``k=v`` pairs with ``&``. Keys and values are sent as given, unencoded."""
    if not params:
        return ""
    return "&".join(f"{key}={value}" for key, value in params.items())


@dataclass(slots=True)
class RequestContext:
    method: str
    path: str
    params: Dict[str, str] | None = None

    @classmethod
    def build(cls, method: str, path: str, params: Optional[Mapping[str, object]] = None) -> "RequestContext":
        normalized = {str(key): str(value) for key, value in params.items()} if params else None
        return cls(method=method.upper(), path=_normalize_path(path), params=normalized)


class BaseAPIClient:
    """Shared HTTP plumbing for BrickLink API clients."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def resource_url(self, ctx: RequestContext) -> str:
        """Base URL plus path, without any query string."""
        return f"{self.base_url}{ctx.path}"

    def request_url(self, ctx: RequestContext) -> str:
        url = self.resource_url(ctx)
        query = build_query_string(ctx.params)
        if query:
            url = f"{url}?{query}"
        return url

    def _request(
        self,
        ctx: RequestContext,
        *,
        headers: Optional[Dict[str, str]] = None,
    ) -> str:
        url = self.request_url(ctx)
        logger.debug("request %s %s", ctx.method, ctx.path)
        try:
            response = self.session.request(
                ctx.method,
                url,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("request_failed %s %s: %r", ctx.method, ctx.path, exc)
            raise TransportError(ctx.method, url, str(exc) or type(exc).__name__) from exc

        logger.debug("response %s %s status=%s", ctx.method, ctx.path, response.status_code)
        if not 200 <= response.status_code < 300:
            logger.warning("api_error %s %s status=%s", ctx.method, ctx.path, response.status_code)
            raise APIError(response.status_code, response.text, payload=_safe_json(response))
        return response.text

    def close(self) -> None:
        if self._owns_session:
            self.session.close()


def _safe_json(response: requests.Response) -> Dict[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
