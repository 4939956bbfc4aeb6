"""Webhook delivery log types."""

from dataclasses import dataclass
from typing import Any

from rain_sdk.core.types.base import QueryParams


@dataclass
class Webhook:
    """One webhook delivery: the payload sent and when."""

    id: str
    request_body: Any
    request_sent_at: str
    response_received_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Webhook":
        return cls(
            id=data["id"],
            request_body=data["requestBody"],
            request_sent_at=data["requestSentAt"],
            response_received_at=data.get("responseReceivedAt"),
        )


@dataclass
class ListWebhooksParams(QueryParams):
    resource_id: str | None = None
    resource_type: str | None = None
    resource_action: str | None = None
    request_sent_at_before: str | None = None
    request_sent_at_after: str | None = None
    response_received_at_before: str | None = None
    response_received_at_after: str | None = None
    cursor: str | None = None
    limit: int | None = None
