"""Company types."""

from dataclasses import dataclass
from typing import Any

from rain_sdk.core.types.applications import UltimateBeneficialOwnerResponse
from rain_sdk.core.types.base import QueryParams, RequestModel, list_of, optional
from rain_sdk.core.types.common import Address, ApplicationLink, ApplicationStatus


@dataclass
class Company:
    """A corporate customer."""

    id: str
    name: str
    address: Address
    ultimate_beneficial_owners: list[UltimateBeneficialOwnerResponse] | None = None
    application_status: ApplicationStatus | None = None
    application_external_verification_link: ApplicationLink | None = None
    application_completion_link: ApplicationLink | None = None
    application_reason: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Company":
        """Create from API response dict (camelCase, with snake_case fallback)."""

        def get(key: str, camel_key: str) -> Any:
            value = data.get(camel_key)
            return value if value is not None else data.get(key)

        return cls(
            id=data["id"],
            name=data["name"],
            address=Address.from_dict(data["address"]),
            ultimate_beneficial_owners=optional(
                list_of(UltimateBeneficialOwnerResponse.from_dict),
                get("ultimate_beneficial_owners", "ultimateBeneficialOwners"),
            ),
            application_status=optional(ApplicationStatus, get("application_status", "applicationStatus")),
            application_external_verification_link=optional(
                ApplicationLink.from_dict,
                get("application_external_verification_link", "applicationExternalVerificationLink"),
            ),
            application_completion_link=optional(
                ApplicationLink.from_dict, get("application_completion_link", "applicationCompletionLink")
            ),
            application_reason=get("application_reason", "applicationReason"),
        )


@dataclass
class UpdateCompanyRequest(RequestModel):
    name: str | None = None
    address: Address | None = None


@dataclass
class ListCompaniesParams(QueryParams):
    cursor: str | None = None
    limit: int | None = None
