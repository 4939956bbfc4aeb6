"""Payment types."""

from dataclasses import dataclass
from typing import Any

from rain_sdk.core.types.base import RequestModel


@dataclass
class InitiatePaymentRequest(RequestModel):
    """Amount is in cents."""

    amount: int
    wallet_address: str
    chain_id: int | None = None


@dataclass
class InitiatePaymentResponse:
    """Deposit address to send the payment to."""

    address: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InitiatePaymentResponse":
        return cls(address=data["address"])
