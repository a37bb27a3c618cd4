"""
Client for the BrickLink store API catalog endpoints (items, colors, categories,
inventories).

Every method returns the raw response body; decoding is left to the caller.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .api.base import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .api.signed import RequestHandler, SignedRequestDispatcher
from .config import ClientConfig
from .models import Credentials, ItemType
from .validators import validate_item


class CatalogClient:
    """
    High-level wrapper around the BrickLink catalog endpoints.

    Intended usage::

        client = CatalogClient(consumer_key, consumer_secret, token, token_secret)
        body = client.get_item("SET", "10179-1")

    Invalid arguments raise :class:`~bricklink.exceptions.ValidationError`
    before anything is sent. ``request_handler`` replaces the default
    :class:`~bricklink.api.signed.SignedRequestDispatcher`, e.g. with a test double.
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        token: str,
        token_secret: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        request_handler: Optional[RequestHandler] = None,
    ) -> None:
        self._credentials = Credentials(
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
            token=token,
            token_secret=token_secret,
        )
        self._request_handler = request_handler or SignedRequestDispatcher(
            self._credentials,
            base_url=base_url,
            session=session,
            timeout=timeout,
        )

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs) -> "CatalogClient":
        creds = config.credentials
        return cls(
            creds.consumer_key,
            creds.consumer_secret,
            creds.token,
            creds.token_secret,
            base_url=config.base_url,
            timeout=config.timeout,
            **kwargs,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "CatalogClient":
        """Build a client from ``BRICKLINK_*`` environment variables."""
        return cls.from_config(ClientConfig.from_env(), **kwargs)

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def consumer_key(self) -> str:
        return self._credentials.consumer_key

    @property
    def token(self) -> str:
        return self._credentials.token

    @property
    def request_handler(self) -> RequestHandler:
        return self._request_handler

    def close(self) -> None:
        close = getattr(self._request_handler, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def get_item(self, item_type: str | ItemType, item_number: str) -> str:
        """Catalog entry for a single item."""
        item_type, item_number = validate_item(item_type, item_number)
        return self._get(f"/items/{item_type}/{item_number}")

    def get_item_image(self, item_type: str | ItemType, item_number: str, color_id: int) -> str:
        """Image URL of an item in the given color."""
        item_type, item_number = validate_item(item_type, item_number)
        return self._get(f"/items/{item_type}/{item_number}/images/{color_id}")

    def get_item_price(
        self,
        item_type: str | ItemType,
        item_number: str,
        params: Optional[Mapping[str, object]] = None,
    ) -> str:
        """
        Price guide for an item.

        ``params`` (e.g. ``{"color_id": "5", "guide_type": "sold"}``) is appended
        as a query string. Order is irrelevant to the API and is not guaranteed.
        """
        item_type, item_number = validate_item(item_type, item_number)
        return self._get(f"/items/{item_type}/{item_number}/price", params=params)

    # ------------------------------------------------------------------
    # Colors and categories
    # ------------------------------------------------------------------

    def get_color_list(self) -> str:
        return self._get("/colors")

    def get_color(self, color_id: int) -> str:
        return self._get(f"/colors/{color_id}")

    def get_category_list(self) -> str:
        return self._get("/categories")

    def get_category(self, category_id: int) -> str:
        return self._get(f"/categories/{category_id}")

    # ------------------------------------------------------------------
    # Inventories
    # ------------------------------------------------------------------

    def get_inventories(self, category_id: int) -> str:
        """Store inventories filed under ``category_id``."""
        return self._get(f"/inventories/{category_id}")

    def _get(self, path: str, *, params: Optional[Mapping[str, object]] = None) -> str:
        return self._request_handler.request("GET", path, params or None)
