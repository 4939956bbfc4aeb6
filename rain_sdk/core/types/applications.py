"""
Company (KYB) and user (KYC) application types.

Request dataclasses serialize through RequestModel.to_dict(); responses are
built with from_dict().
"""

from dataclasses import dataclass, field
from typing import Any

from rain_sdk.core.transport import LocalFile
from rain_sdk.core.types.base import RequestModel, list_of, optional
from rain_sdk.core.types.common import (
    Address,
    ApplicationLink,
    ApplicationStatus,
    CompanyDocumentType,
    DocumentSide,
    UserDocumentType,
)

# =============================================================================
# Company Application Types
# =============================================================================


@dataclass
class InitialUser(RequestModel):
    """First user of a company, submitted with the company application."""

    first_name: str
    last_name: str
    birth_date: str
    national_id: str
    country_of_issue: str
    email: str
    address: Address
    ip_address: str
    is_terms_of_service_accepted: bool
    id: str | None = None
    phone_country_code: str | None = None
    phone_number: str | None = None
    role: str | None = None
    wallet_address: str | None = None
    solana_address: str | None = None
    tron_address: str | None = None
    stellar_address: str | None = None


@dataclass
class EntityInfo(RequestModel):
    name: str
    description: str
    industry: str
    registration_number: str
    tax_id: str
    website: str
    type: str | None = None
    expected_spend: str | None = None


@dataclass
class EntityUpdateInfo(RequestModel):
    type: str | None = None
    description: str | None = None
    industry: str | None = None
    registration_number: str | None = None
    tax_id: str | None = None
    website: str | None = None
    expected_spend: str | None = None


@dataclass
class Representative(RequestModel):
    first_name: str
    last_name: str
    birth_date: str
    national_id: str
    country_of_issue: str
    email: str
    address: Address
    id: str | None = None
    phone_country_code: str | None = None
    phone_number: str | None = None


@dataclass
class UltimateBeneficialOwner(RequestModel):
    first_name: str
    last_name: str
    birth_date: str
    national_id: str
    country_of_issue: str
    email: str
    address: Address
    id: str | None = None
    phone_country_code: str | None = None
    phone_number: str | None = None


@dataclass
class CreateCompanyApplicationRequest(RequestModel):
    initial_user: InitialUser
    name: str
    address: Address
    entity: EntityInfo
    representatives: list[Representative] = field(default_factory=list)
    ultimate_beneficial_owners: list[UltimateBeneficialOwner] = field(default_factory=list)
    chain_id: str | None = None
    contract_address: str | None = None
    source_key: str | None = None


@dataclass
class UltimateBeneficialOwnerResponse:
    id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    application_status: ApplicationStatus | None = None
    application_external_verification_link: ApplicationLink | None = None
    application_completion_link: ApplicationLink | None = None
    application_reason: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UltimateBeneficialOwnerResponse":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            first_name=data.get("firstName"),
            last_name=data.get("lastName"),
            email=data.get("email"),
            application_status=optional(ApplicationStatus, data.get("applicationStatus")),
            application_external_verification_link=optional(
                ApplicationLink.from_dict, data.get("applicationExternalVerificationLink")
            ),
            application_completion_link=optional(ApplicationLink.from_dict, data.get("applicationCompletionLink")),
            application_reason=data.get("applicationReason"),
        )


@dataclass
class CompanyApplicationResponse:
    """State of a company application."""

    id: str
    name: str
    address: Address
    ultimate_beneficial_owners: list[UltimateBeneficialOwnerResponse] | None = None
    application_status: ApplicationStatus | None = None
    application_external_verification_link: ApplicationLink | None = None
    application_completion_link: ApplicationLink | None = None
    application_reason: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CompanyApplicationResponse":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            name=data["name"],
            address=Address.from_dict(data["address"]),
            ultimate_beneficial_owners=optional(
                list_of(UltimateBeneficialOwnerResponse.from_dict), data.get("ultimateBeneficialOwners")
            ),
            application_status=optional(ApplicationStatus, data.get("applicationStatus")),
            application_external_verification_link=optional(
                ApplicationLink.from_dict, data.get("applicationExternalVerificationLink")
            ),
            application_completion_link=optional(ApplicationLink.from_dict, data.get("applicationCompletionLink")),
            application_reason=data.get("applicationReason"),
        )


@dataclass
class UpdateCompanyApplicationRequest(RequestModel):
    name: str | None = None
    address: Address | None = None
    entity: EntityUpdateInfo | None = None


@dataclass
class UpdateUltimateBeneficialOwnerRequest(RequestModel):
    first_name: str | None = None
    last_name: str | None = None
    birth_date: str | None = None
    national_id: str | None = None
    country_of_issue: str | None = None
    email: str | None = None
    address: Address | None = None


# =============================================================================
# User Application Types
# =============================================================================


@dataclass
class ApplicationPerson(RequestModel):
    """Identity data for a user application verified through the API."""

    first_name: str
    last_name: str
    birth_date: str
    national_id: str
    country_of_issue: str
    email: str
    address: Address
    id: str | None = None
    phone_country_code: str | None = None
    phone_number: str | None = None


@dataclass
class SumsubVerification(RequestModel):
    sumsub_share_token: str


@dataclass
class PersonaVerification(RequestModel):
    persona_share_token: str


@dataclass
class ApiVerification:
    person: ApplicationPerson

    def to_dict(self) -> dict[str, Any]:
        return self.person.to_dict()


Verification = SumsubVerification | PersonaVerification | ApiVerification


@dataclass
class CreateUserApplicationRequest(RequestModel):
    """
    Request to create a user application.

    Exactly one verification method is carried in ``verification``: a Sumsub
    share token, a Persona share token, or the full person data. The chosen
    method's fields are merged into the top level of the JSON body.

    Example:
        CreateUserApplicationRequest(
            verification=SumsubVerification("share-token"),
            ip_address="127.0.0.1",
            occupation="Engineer",
            annual_salary="100000",
            account_purpose="Business",
            expected_monthly_volume="5000",
            is_terms_of_service_accepted=True,
        )

    """

    verification: Verification
    ip_address: str
    occupation: str
    annual_salary: str
    account_purpose: str
    expected_monthly_volume: str
    is_terms_of_service_accepted: bool
    wallet_address: str | None = None
    solana_address: str | None = None
    tron_address: str | None = None
    stellar_address: str | None = None
    chain_id: str | None = None
    contract_address: str | None = None
    source_key: str | None = None
    has_existing_documents: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        result = self.verification.to_dict()
        rest = super().to_dict()
        rest.pop("verification", None)
        result.update(rest)
        return result


@dataclass
class InitiateUserApplicationRequest(RequestModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    wallet_address: str | None = None


@dataclass
class UserApplicationResponse:
    """State of a user application."""

    id: str
    company_id: str | None = None
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
    application_status: ApplicationStatus | None = None
    application_external_verification_link: ApplicationLink | None = None
    application_completion_link: ApplicationLink | None = None
    application_reason: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserApplicationResponse":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            company_id=data.get("companyId"),
            first_name=data.get("firstName"),
            last_name=data.get("lastName"),
            email=data.get("email"),
            is_active=data.get("isActive"),
            is_terms_of_service_accepted=data.get("isTermsOfServiceAccepted"),
            address=optional(Address.from_dict, data.get("address")),
            phone_country_code=data.get("phoneCountryCode"),
            phone_number=data.get("phoneNumber"),
            wallet_address=data.get("walletAddress"),
            solana_address=data.get("solanaAddress"),
            application_status=optional(ApplicationStatus, data.get("applicationStatus")),
            application_external_verification_link=optional(
                ApplicationLink.from_dict, data.get("applicationExternalVerificationLink")
            ),
            application_completion_link=optional(ApplicationLink.from_dict, data.get("applicationCompletionLink")),
            application_reason=data.get("applicationReason"),
        )


@dataclass
class UpdateUserApplicationRequest(RequestModel):
    first_name: str | None = None
    last_name: str | None = None
    birth_date: str | None = None
    national_id: str | None = None
    country_of_issue: str | None = None
    address: Address | None = None
    ip_address: str | None = None
    occupation: str | None = None
    annual_salary: str | None = None
    account_purpose: str | None = None
    expected_monthly_volume: str | None = None
    is_terms_of_service_accepted: bool | None = None
    has_existing_documents: bool | None = None


# =============================================================================
# Document Uploads
# =============================================================================


@dataclass
class DocumentUploadParams:
    """
    A document to attach to an application.

    The file is read from ``file_path`` when the request is prepared and sent
    as the ``document`` part. ``name`` is only used for company documents.
    """

    document_type: CompanyDocumentType | UserDocumentType | str
    side: DocumentSide | str
    file_path: str
    country: str | None = None
    country_code: str | None = None
    name: str | None = None

    def file(self) -> LocalFile:
        return LocalFile(field_name="document", path=self.file_path)

    def form_fields(self) -> dict[str, str]:
        """Text fields of the multipart form."""
        fields = {
            "type": _wire(self.document_type),
            "side": _wire(self.side),
        }
        if self.name is not None:
            fields["name"] = self.name
        if self.country is not None:
            fields["country"] = self.country
        if self.country_code is not None:
            fields["countryCode"] = self.country_code
        return fields


def _wire(value: Any) -> str:
    return value.value if hasattr(value, "value") else str(value)
