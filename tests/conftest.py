from typing import Any, Callable, List

import httpx
import pytest

from tranzakt import Tranzakt

BASE_URL = "https://api.example.com"
SECRET_KEY = "test-secret-key"


class Recorder:
    """MockTransport handler that records requests and replays a response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200, json={})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    def reply(self, status: int, **kwargs: Any) -> None:
        self.respond = lambda request: httpx.Response(status, **kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def transport(recorder) -> httpx.MockTransport:
    return httpx.MockTransport(recorder)


@pytest.fixture
def tranzakt(transport) -> Tranzakt:
    return Tranzakt(SECRET_KEY, base_url=BASE_URL, transport=transport)


@pytest.fixture
def collection_payload() -> dict:
    return {
        "id": "col-001",
        "collectionName": "Test Collection",
        "description": "Test Collection Description",
        "invoiceExpirationPeriod": "TwentyFour_Hours",
        "paymentChannels": ["Card", "BankTransfer"],
        "settlementFrequency": "Instant",
        "serviceFeeBilling": "Payer",
        "amount": 1000,
        "dateCreated": "2024-01-01T00:00:00Z",
        "status": "Active",
        "collectionAccounts": [
            {
                "percentage": 100,
                "linkedAccount": {
                    "id": "acc-001",
                    "accountName": "Test Account",
                    "accountNumber": "1234567890",
                    "bank": {
                        "id": "bank-001",
                        "name": "Test Bank",
                        "code": "001",
                        "logo": "https://example.com/logo.png",
                    },
                    "merchant": {
                        "merchantId": "merch-001",
                        "businessName": "Test Business",
                    },
                },
            }
        ],
        "collectionClient": {
            "clientId": "client-001",
            "clientName": "Test Client",
            "status": "Approved",
        },
    }


@pytest.fixture
def invoices_payload() -> dict:
    return {
        "items": [
            {
                "id": "inv-001",
                "title": "Test Invoice",
                "amount": 1000,
                "status": "Unpaid",
                "payerName": "John Doe",
                "payerEmail": "john@example.com",
                "dateCreated": "2024-01-01T00:00:00Z",
            }
        ],
        "page": 1,
        "pageSize": 10,
        "totalCount": 1,
        "hasNextPage": False,
        "hasPreviousPage": False,
    }
