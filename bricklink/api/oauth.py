"""
OAuth 1.0 one-legged request signing (HMAC-SHA1) as required by the BrickLink API.

Every request carries an ``Authorization: OAuth ...`` header built from the
consumer key, the access token, a fresh nonce and timestamp, and a signature
over the request method, URL and parameters::

    signed = sign_request("GET", "https://api.bricklink.com/api/store/v1/colors", {}, credentials)
    headers = {"Authorization": signed.authorization}

See https://oauth.net/core/1.0/#signing_process for the canonicalisation rules.
"""

from __future__ import annotations

import base64
import hashlib
import hmac as _hmac
import secrets
import time
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote

from ..models import Credentials

OAUTH_VERSION = "1.0"
OAUTH_SIGNATURE_METHOD = "HMAC-SHA1"


def percent_encode(value: object) -> str:
    """RFC 3986 encoding: everything except ``A-Za-z0-9-._~`` is escaped."""
    return quote(str(value), safe="~")


def generate_nonce() -> str:
    return secrets.token_hex(16)


def generate_timestamp() -> str:
    return str(int(time.time()))


def normalize_parameters(params: Mapping[str, object]) -> str:
    """Encode, sort and join parameters into the ``k=v&k=v`` form used in the base string."""
    pairs: List[Tuple[str, str]] = sorted(
        (percent_encode(key), percent_encode(value)) for key, value in params.items()
    )
    return "&".join(f"{key}={value}" for key, value in pairs)


def signature_base_string(method: str, url: str, params: Mapping[str, object]) -> str:
    return "&".join(
        [
            method.upper(),
            percent_encode(url),
            percent_encode(normalize_parameters(params)),
        ]
    )


def signing_key(consumer_secret: str, token_secret: str) -> str:
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"


def hmac_sha1_signature(key: str, base_string: str) -> str:
    digest = _hmac.new(key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("utf-8")


def authorization_header(oauth_params: Mapping[str, str]) -> str:
    fields = ", ".join(
        f'{percent_encode(key)}="{percent_encode(value)}"' for key, value in sorted(oauth_params.items())
    )
    return f"OAuth {fields}"


@dataclass(frozen=True, slots=True)
class SignedRequest:
    """Outcome of signing one request. Built per call and then discarded."""

    method: str
    url: str
    oauth_params: Dict[str, str]
    base_string: str

    @property
    def signature(self) -> str:
        return self.oauth_params["oauth_signature"]

    @property
    def authorization(self) -> str:
        return authorization_header(self.oauth_params)


def sign_request(
    method: str,
    url: str,
    params: Optional[Mapping[str, object]],
    credentials: Credentials,
    *,
    nonce: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> SignedRequest:
    """
    Sign ``method url`` with ``credentials``.

    ``url`` is the base URL plus resource path, without a query string; query
    parameters go in ``params`` so they take part in the signature. Passing
    ``nonce`` and ``timestamp`` makes the result fully deterministic.
    """
    oauth_params: Dict[str, str] = {
        "oauth_consumer_key": credentials.consumer_key,
        "oauth_nonce": nonce if nonce is not None else generate_nonce(),
        "oauth_timestamp": timestamp if timestamp is not None else generate_timestamp(),
        "oauth_signature_method": OAUTH_SIGNATURE_METHOD,
        "oauth_version": OAUTH_VERSION,
        "oauth_token": credentials.token,
    }
    all_params: Dict[str, object] = dict(params or {})
    all_params.update(oauth_params)

    base_string = signature_base_string(method, url, all_params)
    key = signing_key(credentials.consumer_secret, credentials.token_secret)
    oauth_params["oauth_signature"] = hmac_sha1_signature(key, base_string)
    return SignedRequest(
        method=method.upper(),
        url=url,
        oauth_params=oauth_params,
        base_string=base_string,
    )
