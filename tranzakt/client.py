"""
client.py
----------

Top-level entry point of the SDK.

Usage example::

    from tranzakt import Tranzakt

    async with Tranzakt("sk_live_...") as tranzakt:
        collection = await tranzakt.get_collection("col-001")
        invoices = await tranzakt.get_collection_invoices(
            "col-001", {"invoiceStatus": "Unpaid", "page": 2}
        )

Each instance owns its origin, credential and HTTP connection pool.
Constructing a client performs no network I/O.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from tranzakt.core.auth import build_auth_headers
from tranzakt.core.config import DEFAULT_BASE_URL, AuthMode, ClientConfig, Settings, get_settings
from tranzakt.core.errors import ConfigurationError
from tranzakt.core.request_processor import RequestProcessor
from tranzakt.services.collection_service import CollectionService, InvoicesParams


class Tranzakt:
    """Client for the Tranzakt collections API."""

    def __init__(
        self,
        secret_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        auth_mode: AuthMode = AuthMode.BEARER,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = ClientConfig(
            secret_key=secret_key,
            base_url=base_url,
            auth_mode=auth_mode,
            timeout=timeout,
        )
        self.headers = build_auth_headers(secret_key, auth_mode)
        self.processor = RequestProcessor(self.config, transport=transport)
        self.collections = CollectionService(self.processor, self.headers)

    @classmethod
    def from_env(
        cls,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "Tranzakt":
        """Build a client from ``TRANZAKT_*`` environment variables."""
        settings = settings or get_settings()
        if not settings.secret_key:
            raise ConfigurationError("Missing required environment variable: TRANZAKT_SECRET_KEY")
        return cls(
            settings.secret_key,
            base_url=settings.base_url,
            auth_mode=settings.auth_mode,
            timeout=settings.http_timeout,
            transport=transport,
        )

    async def get_collection(self, collection_id: str) -> Dict[str, Any]:
        return await self.collections.get_collection_details(collection_id)

    async def get_collection_invoices(
        self, collection_id: str, params: InvoicesParams = None
    ) -> Dict[str, Any]:
        return await self.collections.get_collection_invoices(collection_id, params)

    async def aclose(self) -> None:
        await self.processor.aclose()

    async def __aenter__(self) -> "Tranzakt":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
