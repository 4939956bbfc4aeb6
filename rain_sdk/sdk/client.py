"""
Rain SDK - High-level clients with nice ergonomics.

RainClient blocks; AsyncRainClient returns awaitables. Both expose the same
operation groups (client.users, client.cards, ...), built once over either
core client.
"""

from dataclasses import replace

import httpx

from rain_sdk.core.client import APIClient, AsyncAPIClient, BaseAPIClient
from rain_sdk.core.config import Config, Environment
from rain_sdk.sdk.applications import ApplicationOperations
from rain_sdk.sdk.balances import BalanceOperations
from rain_sdk.sdk.cards import CardOperations
from rain_sdk.sdk.companies import CompanyOperations
from rain_sdk.sdk.contracts import ContractOperations
from rain_sdk.sdk.disputes import DisputeOperations
from rain_sdk.sdk.keys import KeyOperations
from rain_sdk.sdk.payments import PaymentOperations
from rain_sdk.sdk.reports import ReportOperations
from rain_sdk.sdk.shipping_groups import ShippingGroupOperations
from rain_sdk.sdk.signatures import SignatureOperations
from rain_sdk.sdk.subtenants import SubtenantOperations
from rain_sdk.sdk.transactions import TransactionOperations
from rain_sdk.sdk.users import UserOperations
from rain_sdk.sdk.webhooks import WebhookOperations


def _resolve_config(config: Config | None, environment: Environment | str | None) -> Config | None:
    # An explicit environment only picks the base URL; RAIN_* settings still apply
    if config is None and environment is not None:
        return replace(Config.from_env(), base_url=Config.for_environment(environment).base_url)
    return config


class _OperationGroups:
    """Sub-clients for the API areas."""

    def _attach(self, client: BaseAPIClient) -> None:
        self.applications = ApplicationOperations(client)
        self.users = UserOperations(client)
        self.companies = CompanyOperations(client)
        self.cards = CardOperations(client)
        self.transactions = TransactionOperations(client)
        self.disputes = DisputeOperations(client)
        self.balances = BalanceOperations(client)
        self.contracts = ContractOperations(client)
        self.keys = KeyOperations(client)
        self.payments = PaymentOperations(client)
        self.reports = ReportOperations(client)
        self.shipping_groups = ShippingGroupOperations(client)
        self.signatures = SignatureOperations(client)
        self.subtenants = SubtenantOperations(client)
        self.webhooks = WebhookOperations(client)


class RainClient(_OperationGroups):
    """
    Blocking Rain API client with typed methods.

    Example:
        client = RainClient(environment="dev")

        users = client.users.list(limit=20)
        card = client.users.create_card(users[0].id, CreateCardRequest(type=CardType.VIRTUAL))
        balance = client.balances.get_user(users[0].id)

    """

    def __init__(
        self,
        api_key: str | None = None,
        config: Config | None = None,
        environment: Environment | str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the Rain client.

        Args:
            api_key: Rain API key (or RAIN_API_KEY env var)
            config: Full configuration (defaults to RAIN_* env vars)
            environment: "dev" or "production", used when config is not given
            base_url: Base URL override
            timeout: Request timeout in seconds
            transport: httpx transport to send through (e.g. httpx.MockTransport)

        """
        self._client = APIClient(
            api_key=api_key,
            config=_resolve_config(config, environment),
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )
        self._attach(self._client)

    @property
    def config(self) -> Config:
        return self._client.config

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "RainClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class AsyncRainClient(_OperationGroups):
    """
    Async Rain API client. Every operation returns an awaitable.

    Example:
        async with AsyncRainClient() as client:
            user = await client.users.get(user_id)

    """

    def __init__(
        self,
        api_key: str | None = None,
        config: Config | None = None,
        environment: Environment | str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = AsyncAPIClient(
            api_key=api_key,
            config=_resolve_config(config, environment),
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )
        self._attach(self._client)

    @property
    def config(self) -> Config:
        return self._client.config

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncRainClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
