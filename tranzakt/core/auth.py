"""
core/auth.py
-------------

Builds the HTTP headers required by every Tranzakt call.

The API accepts the secret key either as a static ``x-api-key`` header
or as a bearer token; which one is used is decided once, when the
client is constructed (see :class:`tranzakt.core.config.AuthMode`).
"""

from __future__ import annotations

from typing import Dict

from tranzakt.core.config import AuthMode
from tranzakt.core.errors import ConfigurationError

JSON_MEDIA_TYPE = "application/json"


def build_auth_headers(secret_key: str, auth_mode: AuthMode = AuthMode.BEARER) -> Dict[str, str]:
    """Create the headers for an authenticated call.

    :param secret_key: the secret API key issued by Tranzakt
    :param auth_mode: header scheme used to present the key
    :raises ConfigurationError: if the key is empty
    :return: a dictionary of headers suitable for use with httpx
    """
    if not secret_key or not secret_key.strip():
        raise ConfigurationError("A Tranzakt secret key is required")
    if auth_mode == AuthMode.API_KEY:
        auth = {"x-api-key": secret_key}
    else:
        auth = {"Authorization": f"Bearer {secret_key}"}
    return {
        **auth,
        "Accept": JSON_MEDIA_TYPE,
        "Content-Type": JSON_MEDIA_TYPE,
    }
