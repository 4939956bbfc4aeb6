"""Custom fee charges against a user or company."""

from dataclasses import dataclass
from typing import Any

from rain_sdk.core.types.base import RequestModel


@dataclass
class CreateChargeRequest(RequestModel):
    """Amount is in cents and must be at least 1."""

    amount: int
    description: str


@dataclass
class Charge:
    id: str
    created_at: str
    amount: int | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Charge":
        return cls(
            id=data["id"],
            created_at=data["createdAt"],
            amount=data.get("amount"),
            description=data.get("description"),
        )
