"""User types."""

from dataclasses import dataclass
from typing import Any

from rain_sdk.core.types.base import QueryParams, RequestModel, optional
from rain_sdk.core.types.common import Address, ApplicationLink, ApplicationStatus


@dataclass
class User:
    """A cardholder, either standalone or belonging to a company."""

    id: str
    first_name: str
    last_name: str
    email: str
    is_active: bool
    is_terms_of_service_accepted: bool
    company_id: str | None = None
    address: Address | None = None
    phone_country_code: str | None = None
    phone_number: str | None = None
    wallet_address: str | None = None
    solana_address: str | None = None
    tron_address: str | None = None
    stellar_address: str | None = None
    application_status: ApplicationStatus | None = None
    application_external_verification_link: ApplicationLink | None = None
    application_completion_link: ApplicationLink | None = None
    application_reason: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            first_name=data["firstName"],
            last_name=data["lastName"],
            email=data["email"],
            is_active=data["isActive"],
            is_terms_of_service_accepted=data["isTermsOfServiceAccepted"],
            company_id=data.get("companyId"),
            address=optional(Address.from_dict, data.get("address")),
            phone_country_code=data.get("phoneCountryCode"),
            phone_number=data.get("phoneNumber"),
            wallet_address=data.get("walletAddress"),
            solana_address=data.get("solanaAddress"),
            tron_address=data.get("tronAddress"),
            stellar_address=data.get("stellarAddress"),
            application_status=optional(ApplicationStatus, data.get("applicationStatus")),
            application_external_verification_link=optional(
                ApplicationLink.from_dict, data.get("applicationExternalVerificationLink")
            ),
            application_completion_link=optional(ApplicationLink.from_dict, data.get("applicationCompletionLink")),
            application_reason=data.get("applicationReason"),
        )


@dataclass
class CreateUserRequest(RequestModel):
    first_name: str
    last_name: str
    email: str
    wallet_address: str | None = None
    solana_address: str | None = None
    address: Address | None = None
    phone_country_code: str | None = None
    phone_number: str | None = None


@dataclass
class CreateCompanyUserRequest(RequestModel):
    """Request to add a user to an existing company."""

    first_name: str
    last_name: str
    email: str
    is_terms_of_service_accepted: bool
    birth_date: str | None = None
    wallet_address: str | None = None
    solana_address: str | None = None
    address: Address | None = None
    phone_country_code: str | None = None
    phone_number: str | None = None


@dataclass
class UpdateUserRequest(RequestModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    is_active: bool | None = None
    is_terms_of_service_accepted: bool | None = None
    address: Address | None = None
    phone_country_code: str | None = None
    phone_number: str | None = None
    wallet_address: str | None = None
    solana_address: str | None = None
    tron_address: str | None = None
    stellar_address: str | None = None


@dataclass
class ListUsersParams(QueryParams):
    company_id: str | None = None
    cursor: str | None = None
    limit: int | None = None
