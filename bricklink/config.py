from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .api.base import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .exceptions import ConfigurationError
from .models import Credentials


@dataclass(slots=True)
class ClientConfig:
    """Settings needed to build a :class:`~bricklink.catalog.CatalogClient`."""

    credentials: Credentials
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Read ``BRICKLINK_*`` variables. Missing credentials come back empty and are
        only rejected by the API itself.
        """
        env = os.environ if environ is None else environ
        raw_timeout = env.get("BRICKLINK_TIMEOUT", "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ConfigurationError(f"BRICKLINK_TIMEOUT must be a number, got {raw_timeout!r}") from exc
        if timeout <= 0:
            raise ConfigurationError("BRICKLINK_TIMEOUT must be positive")

        return cls(
            credentials=Credentials(
                consumer_key=env.get("BRICKLINK_CONSUMER_KEY", ""),
                consumer_secret=env.get("BRICKLINK_CONSUMER_SECRET", ""),
                token=env.get("BRICKLINK_TOKEN", ""),
                token_secret=env.get("BRICKLINK_TOKEN_SECRET", ""),
            ),
            base_url=env.get("BRICKLINK_BASE_URL", "").strip() or DEFAULT_BASE_URL,
            timeout=timeout,
        )
