from __future__ import annotations

from typing import Mapping, Optional, Protocol

import requests

from .base import BaseAPIClient, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, RequestContext
from .oauth import generate_nonce, generate_timestamp, sign_request
from ..models import Credentials


class RequestHandler(Protocol):
    """What :class:`~bricklink.catalog.CatalogClient` needs from a dispatcher."""

    def request(self, method: str, path: str, params: Optional[Mapping[str, object]] = None) -> str:
        ...


class SignedRequestDispatcher(BaseAPIClient):
    """Issues OAuth 1.0 (HMAC-SHA1) signed requests and returns the raw body.

    Query parameters take part in the signature and are appended to the URL
    exactly as given.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(base_url=base_url, session=session, timeout=timeout)
        self._credentials = credentials

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def request(self, method: str, path: str, params: Optional[Mapping[str, object]] = None) -> str:
        ctx = RequestContext.build(method, path, params)
        return self._signed_request(ctx)

    def _signed_request(self, ctx: RequestContext) -> str:
        signed = sign_request(
            ctx.method,
            self.resource_url(ctx),
            ctx.params,
            self._credentials,
            nonce=generate_nonce(),
            timestamp=generate_timestamp(),
        )
        headers = {
            "Authorization": signed.authorization,
            "Accept": "application/json",
        }
        return self._request(ctx, headers=headers)
