"""
Transaction types.

Transactions are a tagged union on the ``type`` field. Transaction.from_dict
reads the tag and builds the matching subclass; an unknown or missing tag is
a decoding error.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

from rain_sdk.core.transport import FilePart, LocalFile
from rain_sdk.core.types.base import QueryParams, RequestModel
from rain_sdk.core.types.cards import CardType


class TransactionType(str, Enum):
    SPEND = "spend"
    COLLATERAL = "collateral"
    PAYMENT = "payment"
    FEE = "fee"


class SpendTransactionStatus(str, Enum):
    PENDING = "pending"
    REVERSED = "reversed"
    DECLINED = "declined"
    COMPLETED = "completed"


class PaymentTransactionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


# =============================================================================
# Transaction Union
# =============================================================================


_TRANSACTION_TYPES: dict[TransactionType, type["Transaction"]] = {}


@dataclass
class Transaction:
    """Base class of the transaction variants."""

    id: str

    type: ClassVar[TransactionType]

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        _TRANSACTION_TYPES[cls.type] = cls

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transaction":
        """Create the variant named by data["type"]."""
        kind = TransactionType(data["type"])
        return _TRANSACTION_TYPES[kind].parse(data)

    @classmethod
    def parse(cls, data: dict[str, Any]) -> "Transaction":
        raise NotImplementedError


@dataclass
class SpendTransaction(Transaction):
    """Card spend. Amounts are in cents."""

    type = TransactionType.SPEND

    amount: int
    currency: str
    receipt: bool
    merchant_name: str
    merchant_category: str
    merchant_category_code: str
    card_id: str
    card_type: CardType
    user_id: str
    user_first_name: str
    user_email: str
    status: SpendTransactionStatus
    authorized_at: str
    local_amount: int | None = None
    local_currency: str | None = None
    authorized_amount: int | None = None
    authorization_method: str | None = None
    memo: str | None = None
    merchant_id: str | None = None
    enriched_merchant_icon: str | None = None
    enriched_merchant_name: str | None = None
    enriched_merchant_category: str | None = None
    company_id: str | None = None
    user_last_name: str | None = None
    declined_reason: str | None = None
    posted_at: str | None = None

    @classmethod
    def parse(cls, data: dict[str, Any]) -> "SpendTransaction":
        return cls(
            id=data["id"],
            amount=data["amount"],
            currency=data["currency"],
            receipt=data["receipt"],
            merchant_name=data["merchantName"],
            merchant_category=data["merchantCategory"],
            merchant_category_code=data["merchantCategoryCode"],
            card_id=data["cardId"],
            card_type=CardType(data["cardType"]),
            user_id=data["userId"],
            user_first_name=data["userFirstName"],
            user_email=data["userEmail"],
            status=SpendTransactionStatus(data["status"]),
            authorized_at=data["authorizedAt"],
            local_amount=data.get("localAmount"),
            local_currency=data.get("localCurrency"),
            authorized_amount=data.get("authorizedAmount"),
            authorization_method=data.get("authorizationMethod"),
            memo=data.get("memo"),
            merchant_id=data.get("merchantId"),
            enriched_merchant_icon=data.get("enrichedMerchantIcon"),
            enriched_merchant_name=data.get("enrichedMerchantName"),
            enriched_merchant_category=data.get("enrichedMerchantCategory"),
            company_id=data.get("companyId"),
            user_last_name=data.get("userLastName"),
            declined_reason=data.get("declinedReason"),
            posted_at=data.get("postedAt"),
        )


@dataclass
class CollateralTransaction(Transaction):
    """On-chain collateral deposit; amount is in token units."""

    type = TransactionType.COLLATERAL

    amount: float
    currency: str
    chain_id: int
    wallet_address: str
    transaction_hash: str
    memo: str | None = None
    company_id: str | None = None
    user_id: str | None = None
    posted_at: str | None = None

    @classmethod
    def parse(cls, data: dict[str, Any]) -> "CollateralTransaction":
        return cls(
            id=data["id"],
            amount=data["amount"],
            currency=data["currency"],
            chain_id=data["chainId"],
            wallet_address=data["walletAddress"],
            transaction_hash=data["transactionHash"],
            memo=data.get("memo"),
            company_id=data.get("companyId"),
            user_id=data.get("userId"),
            posted_at=data.get("postedAt"),
        )


@dataclass
class PaymentTransaction(Transaction):
    type = TransactionType.PAYMENT

    amount: int
    currency: str
    status: PaymentTransactionStatus
    memo: str | None = None
    chain_id: int | None = None
    wallet_address: str | None = None
    transaction_hash: str | None = None
    company_id: str | None = None
    user_id: str | None = None
    posted_at: str | None = None

    @classmethod
    def parse(cls, data: dict[str, Any]) -> "PaymentTransaction":
        return cls(
            id=data["id"],
            amount=data["amount"],
            currency=data["currency"],
            status=PaymentTransactionStatus(data["status"]),
            memo=data.get("memo"),
            chain_id=data.get("chainId"),
            wallet_address=data.get("walletAddress"),
            transaction_hash=data.get("transactionHash"),
            company_id=data.get("companyId"),
            user_id=data.get("userId"),
            posted_at=data.get("postedAt"),
        )


@dataclass
class FeeTransaction(Transaction):
    type = TransactionType.FEE

    amount: int
    description: str | None = None
    company_id: str | None = None
    user_id: str | None = None
    posted_at: str | None = None

    @classmethod
    def parse(cls, data: dict[str, Any]) -> "FeeTransaction":
        return cls(
            id=data["id"],
            amount=data["amount"],
            description=data.get("description"),
            company_id=data.get("companyId"),
            user_id=data.get("userId"),
            posted_at=data.get("postedAt"),
        )


# =============================================================================
# Requests
# =============================================================================


@dataclass
class ListTransactionsParams(QueryParams):
    """Filters for listing transactions. Several types repeat the ``type`` key."""

    company_id: str | None = None
    user_id: str | None = None
    card_id: str | None = None
    transaction_type: list[TransactionType] | None = field(default=None, metadata={"json": "type"})
    transaction_hash: str | None = None
    authorized_before: str | None = None
    authorized_after: str | None = None
    posted_before: str | None = None
    posted_after: str | None = None
    cursor: str | None = None
    limit: int | None = None


@dataclass
class UpdateTransactionRequest(RequestModel):
    memo: str | None = None


@dataclass
class UploadReceiptRequest:
    """Receipt image or PDF, given as bytes or a local path."""

    receipt: bytes | str | Path
    file_name: str | None = None

    def part(self) -> FilePart | LocalFile:
        if isinstance(self.receipt, bytes):
            return FilePart(field_name="receipt", filename=self.file_name or "receipt", content=self.receipt)
        return LocalFile(field_name="receipt", path=self.receipt, filename=self.file_name)
