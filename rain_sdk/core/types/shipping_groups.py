"""Bulk shipping group types."""

from dataclasses import dataclass
from typing import Any

from rain_sdk.core.types.base import QueryParams, RequestModel
from rain_sdk.core.types.common import Address


@dataclass
class ShippingGroup:
    id: str
    recipient_first_name: str
    address: Address
    recipient_last_name: str | None = None
    recipient_phone_country_code: str | None = None
    recipient_phone_number: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShippingGroup":
        return cls(
            id=data["id"],
            recipient_first_name=data["recipientFirstName"],
            address=Address.from_dict(data["address"]),
            recipient_last_name=data.get("recipientLastName"),
            recipient_phone_country_code=data.get("recipientPhoneCountryCode"),
            recipient_phone_number=data.get("recipientPhoneNumber"),
        )


@dataclass
class CreateShippingGroupRequest(RequestModel):
    recipient_first_name: str
    address: Address
    recipient_last_name: str | None = None
    recipient_phone_country_code: str | None = None
    recipient_phone_number: str | None = None


@dataclass
class ListShippingGroupsParams(QueryParams):
    cursor: str | None = None
    limit: int | None = None
