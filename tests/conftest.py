"""Pytest configuration - loads .env for live tests and fakes the API for the rest."""

from pathlib import Path
from typing import Any

import httpx
import pytest
import pytest_asyncio
from dotenv import load_dotenv

from rain_sdk import AsyncRainClient, Config, RainClient

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

BASE_URL = "https://api.test/v1/issuing"
BASE_PATH = "/v1/issuing"
API_KEY = "test-key"


# =============================================================================
# Fake API
# =============================================================================


class FakeAPI:
    """
    Canned responses keyed by (method, path), served through httpx.MockTransport.

    Paths are given relative to the base URL. Unrouted requests get a JSON 404.
    Every request that reaches the transport is recorded.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        if json is not None:
            kwargs: dict[str, Any] = {"json": json}
        else:
            kwargs = {"content": content or b""}
        self.routes[(method, BASE_PATH + path)] = {"status_code": status, "headers": headers, **kwargs}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "not mocked"})
        return httpx.Response(**route)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def client(api):
    c = RainClient(api_key=API_KEY, config=Config.custom(BASE_URL), transport=api.transport())
    yield c
    c.close()


@pytest_asyncio.fixture
async def async_client(api):
    c = AsyncRainClient(api_key=API_KEY, config=Config.custom(BASE_URL), transport=api.transport())
    yield c
    await c.aclose()


# =============================================================================
# Sample payloads
# =============================================================================


ADDRESS = {
    "line1": "1 Main St",
    "city": "New York",
    "region": "NY",
    "postalCode": "10001",
    "countryCode": "US",
}


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return {
        "id": "usr_1",
        "companyId": "co_1",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "isActive": True,
        "isTermsOfServiceAccepted": True,
        "address": ADDRESS,
        "applicationStatus": "approved",
    }


@pytest.fixture
def company_payload() -> dict[str, Any]:
    return {
        "id": "co_1",
        "name": "Analytical Engines Ltd",
        "address": ADDRESS,
        "applicationStatus": "inreview",
    }


@pytest.fixture
def card_payload() -> dict[str, Any]:
    return {
        "id": "card_1",
        "companyId": "co_1",
        "userId": "usr_1",
        "type": "virtual",
        "status": "active",
        "last4": "4242",
        "expirationMonth": "12",
        "expirationYear": "2030",
        "limit": {"amount": 50000, "frequency": "per30DayPeriod"},
    }


@pytest.fixture
def spend_payload() -> dict[str, Any]:
    return {
        "id": "tx_spend",
        "type": "spend",
        "amount": 1250,
        "currency": "USD",
        "receipt": False,
        "merchantName": "Coffee Shop",
        "merchantCategory": "Restaurants",
        "merchantCategoryCode": "5814",
        "cardId": "card_1",
        "cardType": "virtual",
        "userId": "usr_1",
        "userFirstName": "Ada",
        "userEmail": "ada@example.com",
        "status": "completed",
        "authorizedAt": "2024-01-15T10:00:00Z",
    }


@pytest.fixture
def fee_payload() -> dict[str, Any]:
    return {"id": "tx_fee", "type": "fee", "amount": 300, "description": "Card issuance"}


@pytest.fixture
def balance_payload() -> dict[str, Any]:
    return {
        "creditLimit": 1000000,
        "pendingCharges": 2500,
        "postedCharges": 10000,
        "balanceDue": 12500,
        "spendingPower": 987500,
    }
