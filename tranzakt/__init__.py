"""
tranzakt
--------

Python SDK for the Tranzakt collections API.  Importing ``tranzakt``
exposes the client, the error types and the collection models.
"""

from tranzakt.client import Tranzakt
from tranzakt.core.config import AuthMode, ClientConfig, Settings
from tranzakt.core.errors import (
    ApiError,
    ConfigurationError,
    MalformedResponseError,
    TransportError,
    TranzaktError,
)
from tranzakt.core.request_processor import RequestIntent, RequestProcessor
from tranzakt.schemas.collection import (
    ClientRequestStatus,
    Collection,
    CollectionInvoicesPage,
    CollectionStatus,
    GetCollectionInvoicesParams,
    Invoice,
    InvoiceExpirationPeriod,
    InvoiceStatus,
    InvoiceType,
    PaymentChannelType,
    ServiceFeeBilling,
    SettlementFrequency,
)

__version__ = "0.1.0"

__all__ = [
    "Tranzakt",
    "AuthMode",
    "ClientConfig",
    "Settings",
    "ApiError",
    "ConfigurationError",
    "MalformedResponseError",
    "TransportError",
    "TranzaktError",
    "RequestIntent",
    "RequestProcessor",
    "ClientRequestStatus",
    "Collection",
    "CollectionInvoicesPage",
    "CollectionStatus",
    "GetCollectionInvoicesParams",
    "Invoice",
    "InvoiceExpirationPeriod",
    "InvoiceStatus",
    "InvoiceType",
    "PaymentChannelType",
    "ServiceFeeBilling",
    "SettlementFrequency",
]
