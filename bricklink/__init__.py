"""
Client helpers for the BrickLink store API catalog endpoints.

The package exposes one main entry point, :class:`bricklink.catalog.CatalogClient`,
which validates arguments, signs each request with the caller's OAuth
credentials and returns the raw response body.

Typical usage::

    from bricklink import CatalogClient

    client = CatalogClient(
        consumer_key="...",
        consumer_secret="...",
        token="...",
        token_secret="...",
    )
    body = client.get_item_price("PART", "3001", {"color_id": "5"})

Failures raise :class:`~bricklink.exceptions.ValidationError`,
:class:`~bricklink.exceptions.TransportError` or
:class:`~bricklink.exceptions.APIError`, all subclasses of
:class:`~bricklink.exceptions.BricklinkError`.
"""

from .exceptions import APIError, BricklinkError, ConfigurationError, TransportError, ValidationError
from .models import Credentials, ItemType
from .config import ClientConfig
from .api.signed import RequestHandler, SignedRequestDispatcher
from .catalog import CatalogClient

__version__ = "0.1.0"

__all__ = [
    "CatalogClient",
    "ClientConfig",
    "Credentials",
    "ItemType",
    "RequestHandler",
    "SignedRequestDispatcher",
    "BricklinkError",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "APIError",
]
