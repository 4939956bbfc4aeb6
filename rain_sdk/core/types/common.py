"""Types shared across API areas."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from rain_sdk.core.types.base import RequestModel

# =============================================================================
# Empty results
# =============================================================================


class Accepted:
    """A 202 response with no body; the API queued the request."""

    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ACCEPTED"


class NoContent:
    """A 2xx response with no body."""

    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_CONTENT"


ACCEPTED = Accepted()
NO_CONTENT = NoContent()


# =============================================================================
# Enums
# =============================================================================


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    IN_REVIEW = "inreview"


class CompanyDocumentType(str, Enum):
    DIRECTORS_REGISTRY = "directorsRegistry"
    STATE_REGISTRY = "stateRegistry"
    INCUMBENCY_CERT = "incumbencyCert"
    PROOF_OF_ADDRESS = "proofOfAddress"
    TRUST_AGREEMENT = "trustAgreement"
    INFORMATION_STATEMENT = "informationStatement"
    INCORPORATION_CERT = "incorporationCert"
    INCORPORATION_ARTICLES = "incorporationArticles"
    SHAREHOLDER_REGISTRY = "shareholderRegistry"
    GOOD_STANDING_CERT = "goodStandingCert"
    POWER_OF_ATTORNEY = "powerOfAttorney"
    OTHER = "other"


class UserDocumentType(str, Enum):
    ID_CARD = "idCard"
    PASSPORT = "passport"
    DRIVERS = "drivers"
    RESIDENCE_PERMIT = "residencePermit"
    UTILITY_BILL = "utilityBill"
    SELFIE = "selfie"
    VIDEO_SELFIE = "videoSelfie"
    PROFILE_IMAGE = "profileImage"
    ID_DOC_PHOTO = "idDocPhoto"
    AGREEMENT = "agreement"
    CONTRACT = "contract"
    DRIVERS_TRANSLATION = "driversTranslation"
    INVESTOR_DOC = "investorDoc"
    VEHICLE_REGISTRATION_CERTIFICATE = "vehicleRegistrationCertificate"
    INCOME_SOURCE = "incomeSource"
    PAYMENT_METHOD = "paymentMethod"
    BANK_CARD = "bankCard"
    COVID_VACCINATION_FORM = "covidVaccinationForm"
    OTHER = "other"


class DocumentSide(str, Enum):
    FRONT = "front"
    BACK = "back"


# =============================================================================
# Address / links
# =============================================================================


@dataclass
class Address(RequestModel):
    """Postal address used by applications, users and companies."""

    line1: str
    city: str
    region: str
    postal_code: str
    country_code: str
    line2: str | None = None
    country: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Address":
        # Older payloads use snake_case keys
        return cls(
            line1=data["line1"],
            line2=data.get("line2"),
            city=data["city"],
            region=data["region"],
            postal_code=data["postalCode"] if "postalCode" in data else data["postal_code"],
            country_code=data["countryCode"] if "countryCode" in data else data["country_code"],
            country=data.get("country"),
        )


@dataclass
class ApplicationLink:
    """Hosted application (KYC/KYB) link."""

    url: str
    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApplicationLink":
        return cls(url=data["url"], params=data.get("params") or {})
