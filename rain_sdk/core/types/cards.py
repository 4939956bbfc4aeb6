"""Card types."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from rain_sdk.core.types.base import QueryParams, RequestModel, optional

# =============================================================================
# Enums
# =============================================================================


class CardStatus(str, Enum):
    NOT_ACTIVATED = "notActivated"
    ACTIVE = "active"
    LOCKED = "locked"
    CANCELED = "canceled"


class CardType(str, Enum):
    PHYSICAL = "physical"
    VIRTUAL = "virtual"


class LimitFrequency(str, Enum):
    PER_24_HOUR_PERIOD = "per24HourPeriod"
    PER_7_DAY_PERIOD = "per7DayPeriod"
    PER_30_DAY_PERIOD = "per30DayPeriod"
    PER_YEAR_PERIOD = "perYearPeriod"
    ALL_TIME = "allTime"
    PER_AUTHORIZATION = "perAuthorization"


class ShippingMethod(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    INTERNATIONAL = "international"
    APC = "apc"
    USPS_INTERNATIONAL = "uspsInternational"


# =============================================================================
# Card Types
# =============================================================================


@dataclass
class CardLimit(RequestModel):
    """Spending limit; amount is in cents."""

    amount: int
    frequency: LimitFrequency

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CardLimit":
        return cls(amount=data["amount"], frequency=LimitFrequency(data["frequency"]))


@dataclass
class CardConfiguration(RequestModel):
    display_name: str | None = None
    product_id: str | None = None
    product_ref: str | None = None
    virtual_card_art: str | None = None


@dataclass
class ShippingAddress(RequestModel):
    line1: str
    city: str
    postal_code: str
    country_code: str
    phone_number: str
    line2: str | None = None
    region: str | None = None
    method: ShippingMethod | None = None
    first_name: str | None = None
    last_name: str | None = None


@dataclass
class BillingAddress(RequestModel):
    line1: str
    city: str
    region: str
    postal_code: str
    country_code: str
    line2: str | None = None
    country: str | None = None


@dataclass
class EncryptedData(RequestModel):
    """Payload encrypted with the session key (base64 iv + data)."""

    iv: str
    data: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EncryptedData":
        return cls(iv=data["iv"], data=data["data"])


@dataclass
class Card:
    """A physical or virtual card."""

    id: str
    company_id: str
    user_id: str
    type: CardType
    status: CardStatus
    last4: str
    expiration_month: str
    expiration_year: str
    limit: CardLimit | None = None
    token_wallets: list[str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Card":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            company_id=data["companyId"],
            user_id=data["userId"],
            type=CardType(data["type"]),
            status=CardStatus(data["status"]),
            last4=data["last4"],
            expiration_month=data["expirationMonth"],
            expiration_year=data["expirationYear"],
            limit=optional(CardLimit.from_dict, data.get("limit")),
            token_wallets=data.get("tokenWallets"),
        )


@dataclass
class CreateCardRequest(RequestModel):
    type: CardType
    status: CardStatus | None = None
    limit: CardLimit | None = None
    configuration: CardConfiguration | None = None
    shipping: ShippingAddress | None = None
    bulk_shipping_group_id: str | None = None
    billing: BillingAddress | None = None


@dataclass
class UpdateCardRequest(RequestModel):
    status: CardStatus | None = None
    limit: CardLimit | None = None
    billing: BillingAddress | None = None
    configuration: CardConfiguration | None = None


@dataclass
class UpdateCardPinRequest(RequestModel):
    encrypted_pin: EncryptedData


@dataclass
class CardSecrets:
    """Encrypted PAN and CVC, readable only with the session's secret key."""

    encrypted_pan: EncryptedData
    encrypted_cvc: EncryptedData

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CardSecrets":
        return cls(
            encrypted_pan=EncryptedData.from_dict(data["encryptedPan"]),
            encrypted_cvc=EncryptedData.from_dict(data["encryptedCvc"]),
        )


@dataclass
class CardPin:
    encrypted_pin: EncryptedData

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CardPin":
        return cls(encrypted_pin=EncryptedData.from_dict(data["encryptedPin"]))


@dataclass
class ProcessorDetails:
    processor_card_id: str
    time_based_secret: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProcessorDetails":
        return cls(
            processor_card_id=data["processorCardId"],
            time_based_secret=data.get("timeBasedSecret"),
        )


@dataclass
class ListCardsParams(QueryParams):
    company_id: str | None = None
    user_id: str | None = None
    status: CardStatus | None = None
    cursor: str | None = None
    limit: int | None = None
