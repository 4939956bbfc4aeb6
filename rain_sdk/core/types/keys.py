"""API key types."""

from dataclasses import dataclass
from typing import Any

from rain_sdk.core.types.base import RequestModel


@dataclass
class CreateKeyRequest(RequestModel):
    name: str
    expires_at: str


@dataclass
class Key:
    """A newly created API key. ``key`` is only returned once."""

    id: str
    key: str
    name: str
    expires_at: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Key":
        return cls(id=data["id"], key=data["key"], name=data["name"], expires_at=data["expiresAt"])
