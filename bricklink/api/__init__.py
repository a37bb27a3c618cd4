"""HTTP plumbing and OAuth request signing for the BrickLink API."""

from .base import BaseAPIClient, DEFAULT_BASE_URL, RequestContext, build_query_string
from .oauth import SignedRequest, sign_request
from .signed import RequestHandler, SignedRequestDispatcher

__all__ = [
    "BaseAPIClient",
    "DEFAULT_BASE_URL",
    "RequestContext",
    "RequestHandler",
    "SignedRequest",
    "SignedRequestDispatcher",
    "build_query_string",
    "sign_request",
]
