"""
schemas/collection.py
----------------------

Models for the collection endpoints.

Response models mirror the JSON returned by the API field for field
(camelCase names included) and accept unknown extra fields.  Services
return the raw payload; use these models when typed access is wanted::

    payload = await client.get_collection("col-001")
    collection = Collection.model_validate(payload)

:class:`GetCollectionInvoicesParams` is the declared query schema of
``GET /collections/{id}/Invoices``.  Field order is the order in which
parameters are serialized.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from tranzakt.schemas.common import PaginatedResponse


class InvoiceExpirationPeriod(str, Enum):
    One_Hour = "One_Hour"
    Six_Hours = "Six_Hours"
    Twelve_Hours = "Twelve_Hours"
    TwentyFour_Hours = "TwentyFour_Hours"
    FortyEight_Hours = "FortyEight_Hours"
    Never = "Never"


class PaymentChannelType(str, Enum):
    Card = "Card"
    BankTransfer = "BankTransfer"
    USSD = "USSD"


class SettlementFrequency(str, Enum):
    Instant = "Instant"
    Daily = "Daily"
    Weekly = "Weekly"


class ServiceFeeBilling(str, Enum):
    Payer = "Payer"
    Merchant = "Merchant"


class CollectionStatus(str, Enum):
    Active = "Active"
    Inactive = "Inactive"


class ClientRequestStatus(str, Enum):
    Pending = "Pending"
    Approved = "Approved"
    Rejected = "Rejected"


class InvoiceStatus(str, Enum):
    Unpaid = "Unpaid"
    Paid = "Paid"
    Expired = "Expired"


class InvoiceType(str, Enum):
    Live = "Live"
    Test = "Test"


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class Bank(_ApiModel):
    id: str
    name: str
    code: str
    logo: Optional[str] = None


class Merchant(_ApiModel):
    merchantId: str
    businessName: str


class LinkedAccount(_ApiModel):
    id: str
    accountName: str
    accountNumber: str
    bank: Bank
    merchant: Merchant


class CollectionAccount(_ApiModel):
    percentage: float
    linkedAccount: LinkedAccount


class CollectionClient(_ApiModel):
    clientId: str
    clientName: str
    status: ClientRequestStatus


class Collection(_ApiModel):
    id: str
    collectionName: str
    description: Optional[str] = None
    invoiceExpirationPeriod: InvoiceExpirationPeriod
    paymentChannels: List[PaymentChannelType]
    settlementFrequency: SettlementFrequency
    serviceFeeBilling: ServiceFeeBilling
    amount: Optional[float] = None
    dateCreated: str
    status: CollectionStatus
    collectionAccounts: List[CollectionAccount] = Field(default_factory=list)
    collectionClient: Optional[CollectionClient] = None


class Invoice(_ApiModel):
    id: str
    title: str
    amount: float
    status: InvoiceStatus
    payerName: Optional[str] = None
    payerEmail: Optional[str] = None
    dateCreated: str
    datePaid: Optional[str] = None


CollectionInvoicesPage = PaginatedResponse[Invoice]


class GetCollectionInvoicesParams(BaseModel):
    """Filters and paging for the invoices of a collection.

    Attributes are snake_case; the wire names (aliases) are the ones the
    API expects, including its capitalised ``InvoiceType`` and
    ``IsDownloading``.  Either form is accepted on input.
    """

    invoice_status: Optional[Union[InvoiceStatus, str]] = Field(None, alias="invoiceStatus")
    search: Optional[str] = Field(None, alias="search")
    start_date: Optional[str] = Field(None, alias="startDate", description="YYYY-MM-DD")
    end_date: Optional[str] = Field(None, alias="endDate", description="YYYY-MM-DD")
    invoice_type: Optional[Union[InvoiceType, str]] = Field(None, alias="InvoiceType")
    linked_account_id: Optional[str] = Field(None, alias="linkedAccountId")
    is_downloading: Optional[bool] = Field(None, alias="IsDownloading")
    page: Optional[int] = Field(None, alias="page")
    page_size: Optional[int] = Field(None, alias="pageSize")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")
