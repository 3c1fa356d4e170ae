"""
services/collection_service.py
-------------------------------

Collection endpoints.  Each method builds the path under
``/collections``, serializes the declared query parameters and hands
the request to the shared :class:`RequestProcessor`.  Results and
errors are returned or raised unchanged.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Dict, Mapping, Optional, Union

from tranzakt.core.config import Settings
from tranzakt.core.request_processor import RequestIntent, RequestProcessor
from tranzakt.schemas.collection import GetCollectionInvoicesParams
from tranzakt.utils.pagination import paginate
from tranzakt.utils.query import as_params, with_query

COLLECTION_PATH = "/collections"

InvoicesParams = Union[GetCollectionInvoicesParams, Mapping[str, Any], None]


class CollectionService:
    def __init__(self, processor: RequestProcessor, headers: Dict[str, str]) -> None:
        self.processor = processor
        self.headers = headers

    async def get_collection_details(self, collection_id: str) -> Dict[str, Any]:
        """
        GET /collections/{collectionId}
        """
        return await self.processor.process(RequestIntent(
            url=f"{COLLECTION_PATH}/{collection_id}",
            method="GET",
            headers=self.headers,
        ))

    async def get_collection_invoices(
        self,
        collection_id: str,
        params: InvoicesParams = None,
    ) -> Dict[str, Any]:
        """
        GET /collections/{collectionId}/Invoices

        ``params`` may be a :class:`GetCollectionInvoicesParams` or a
        mapping using either the wire or the attribute names.  Parameters
        left as ``None`` are not sent.
        """
        query_model = as_params(GetCollectionInvoicesParams, params)
        return await self.processor.process(RequestIntent(
            url=with_query(f"{COLLECTION_PATH}/{collection_id}/Invoices", query_model),
            method="GET",
            headers=self.headers,
        ))

    async def iter_collection_invoices(
        self,
        collection_id: str,
        params: InvoicesParams = None,
        *,
        settings: Optional[Settings] = None,
    ) -> AsyncIterator[Dict[str, Any]]:
        """Yield every invoice of a collection, following ``hasNextPage``.

        Starts at ``params.page`` (or 1) and stops at the page/item guards
        configured in :class:`Settings`.
        """
        base = as_params(GetCollectionInvoicesParams, params) or GetCollectionInvoicesParams()

        async def fetch_page(page: int) -> dict:
            return await self.get_collection_invoices(
                collection_id, base.model_copy(update={"page": page})
            )

        async for invoice in paginate(fetch_page, initial_token=base.page or 1, settings=settings):
            yield invoice
