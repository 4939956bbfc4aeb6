"""
Withdrawal and payment signature types.

Signature responses carry no tag. parse_signature_response() tries
PendingSignature, then ReadySignature, and returns the first that fits.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from rain_sdk.core.types.base import QueryParams, require_dict


class SignatureStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"


@dataclass
class SignatureData:
    data: str
    salt: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SignatureData":
        return cls(data=data["data"], salt=data["salt"])


@dataclass
class PendingSignature:
    """Signature not ready yet; poll again after ``retry_after`` seconds."""

    status: SignatureStatus
    retry_after: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PendingSignature":
        retry_after = data["retryAfter"]
        if isinstance(retry_after, bool) or not isinstance(retry_after, int):
            raise TypeError(f"retryAfter must be an integer, got {retry_after!r}")
        return cls(status=SignatureStatus(data["status"]), retry_after=retry_after)


@dataclass
class ReadySignature:
    status: SignatureStatus
    signature: SignatureData
    expires_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReadySignature":
        return cls(
            status=SignatureStatus(data["status"]),
            signature=SignatureData.from_dict(data["signature"]),
            expires_at=data.get("expiresAt"),
        )


SignatureResponse = PendingSignature | ReadySignature

_SIGNATURE_VARIANTS = (PendingSignature, ReadySignature)


def parse_signature_response(data: Any) -> SignatureResponse:
    """
    Decode an untagged signature response.

    Raises:
        ValueError: If the body fits neither variant

    """
    data = require_dict(data, "signature response")
    for variant in _SIGNATURE_VARIANTS:
        try:
            return variant.from_dict(data)
        except (KeyError, TypeError, ValueError):
            continue
    raise ValueError(f"signature response matches no known variant: keys {sorted(data)}")


@dataclass
class PaymentSignatureParams(QueryParams):
    token: str
    amount: str
    admin_address: str
    chain_id: int | None = None
    is_amount_native: bool | None = None
    rain_collateral_contract_id: str | None = None


@dataclass
class WithdrawalSignatureParams(QueryParams):
    token: str
    amount: str
    admin_address: str
    recipient_address: str
    chain_id: int | None = None
    is_amount_native: bool | None = None
    rain_collateral_contract_id: str | None = None
