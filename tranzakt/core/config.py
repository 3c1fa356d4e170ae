"""
core/config.py
----------------

SDK configuration.

Two layers live here.  :class:`Settings` is loaded from the environment
using ``pydantic-settings`` and is only consulted by
:meth:`tranzakt.client.Tranzakt.from_env` and the pagination guards.
:class:`ClientConfig` is the immutable origin/credential pair owned by a
single client instance; nothing in the SDK keeps a mutable process-wide
base URL.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.tranzakt.finance"


class AuthMode(str, Enum):
    """How the secret key is presented to the API."""

    API_KEY = "api_key"
    BEARER = "bearer"


class Settings(BaseSettings):
    """SDK settings loaded from environment variables.

    Variables are prefixed with ``TRANZAKT_``.  For example, to point the
    client at a sandbox you can set ``TRANZAKT_BASE_URL``.
    """

    secret_key: Optional[str] = Field(None, description="Secret API key issued by Tranzakt.")
    base_url: str = Field(DEFAULT_BASE_URL, description="API origin every request is resolved against.")
    auth_mode: AuthMode = Field(AuthMode.BEARER, description="api_key | bearer")
    http_timeout: Optional[float] = Field(None, description="Request timeout in seconds; unset keeps the httpx default.")

    # Pagination guards
    max_pages: int = Field(50, ge=1, description="Maximum number of pages to request when paginating.")
    max_items: int = Field(1000, ge=1, description="Maximum number of items to retrieve during pagination.")

    model_config = SettingsConfigDict(env_prefix="TRANZAKT_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the SDK settings."""
    return Settings()


class ClientConfig(BaseModel):
    """Per-client configuration, fixed at construction time."""

    secret_key: str
    base_url: str = DEFAULT_BASE_URL
    auth_mode: AuthMode = AuthMode.BEARER
    timeout: Optional[float] = None

    model_config = ConfigDict(frozen=True)
