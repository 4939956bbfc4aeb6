"""Webhook delivery log operations."""

import builtins
from typing import Any

from rain_sdk.core.client import Result
from rain_sdk.core.types import ListWebhooksParams, Webhook
from rain_sdk.core.types.base import list_of
from rain_sdk.sdk.base import Operations, query


class WebhookOperations(Operations):
    def list(self, params: ListWebhooksParams | None = None, **filters: Any) -> Result[builtins.list[Webhook]]:
        """
        List webhook deliveries.

        Args:
            params: Filters on resource and send/receive times, or pass them as keywords

        """
        return self._client.get(
            "/webhooks", query(ListWebhooksParams, params, filters), parser=list_of(Webhook.from_dict)
        )

    def get(self, webhook_id: str) -> Result[Webhook]:
        return self._client.get(f"/webhooks/{webhook_id}", parser=Webhook.from_dict)
