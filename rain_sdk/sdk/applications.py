"""Company and user application (onboarding) operations."""

from rain_sdk.core.client import Result
from rain_sdk.core.types import (
    CompanyApplicationResponse,
    CreateCompanyApplicationRequest,
    CreateUserApplicationRequest,
    DocumentUploadParams,
    InitiateUserApplicationRequest,
    UpdateCompanyApplicationRequest,
    UpdateUltimateBeneficialOwnerRequest,
    UpdateUserApplicationRequest,
    UserApplicationResponse,
)
from rain_sdk.sdk.base import Operations


class ApplicationOperations(Operations):
    """KYB for companies and KYC for users."""

    # =========================================================================
    # Company applications
    # =========================================================================

    def create_company_application(
        self, request: CreateCompanyApplicationRequest
    ) -> Result[CompanyApplicationResponse]:
        """
        Submit a company application.

        Args:
            request: Company, entity, representatives and beneficial owners

        Returns:
            CompanyApplicationResponse with the application status

        """
        return self._client.post("/applications/company", request, parser=CompanyApplicationResponse.from_dict)

    def get_company_application(self, company_id: str) -> Result[CompanyApplicationResponse]:
        return self._client.get(f"/applications/company/{company_id}", parser=CompanyApplicationResponse.from_dict)

    def update_company_application(
        self, company_id: str, request: UpdateCompanyApplicationRequest
    ) -> Result[CompanyApplicationResponse]:
        return self._client.patch(
            f"/applications/company/{company_id}", request, parser=CompanyApplicationResponse.from_dict
        )

    def update_ultimate_beneficial_owner(
        self, company_id: str, ubo_id: str, request: UpdateUltimateBeneficialOwnerRequest
    ) -> Result[CompanyApplicationResponse]:
        return self._client.patch(
            f"/applications/company/{company_id}/ubo/{ubo_id}",
            request,
            parser=CompanyApplicationResponse.from_dict,
        )

    def upload_company_document(self, company_id: str, params: DocumentUploadParams) -> Result[object]:
        """
        Upload a company document.

        Args:
            company_id: Company ID
            params: Document type, side and the local file to send

        Returns:
            The decoded JSON reply, or ACCEPTED / NO_CONTENT when there is none

        Raises:
            ValidationError: If the file cannot be read (no request is sent)

        """
        return self._client.put_multipart(
            f"/applications/company/{company_id}/document", [params.file()], params.form_fields()
        )

    def upload_ubo_document(self, company_id: str, ubo_id: str, params: DocumentUploadParams) -> Result[object]:
        """Upload an identity document for an ultimate beneficial owner."""
        return self._client.put_multipart(
            f"/applications/company/{company_id}/ubo/{ubo_id}/document", [params.file()], params.form_fields()
        )

    # =========================================================================
    # User applications
    # =========================================================================

    def create_user_application(self, request: CreateUserApplicationRequest) -> Result[UserApplicationResponse]:
        """
        Submit a user application.

        The request carries one verification method: SumsubVerification,
        PersonaVerification or ApiVerification with the full person data.

        Returns:
            UserApplicationResponse with the application status

        """
        return self._client.post("/applications/user", request, parser=UserApplicationResponse.from_dict)

    def initiate_user_application(
        self, request: InitiateUserApplicationRequest
    ) -> Result[UserApplicationResponse]:
        """Start a user application and get a hosted completion link."""
        return self._client.post("/applications/user/initiate", request, parser=UserApplicationResponse.from_dict)

    def get_user_application(self, user_id: str) -> Result[UserApplicationResponse]:
        return self._client.get(f"/applications/user/{user_id}", parser=UserApplicationResponse.from_dict)

    def update_user_application(
        self, user_id: str, request: UpdateUserApplicationRequest
    ) -> Result[UserApplicationResponse]:
        return self._client.patch(f"/applications/user/{user_id}", request, parser=UserApplicationResponse.from_dict)

    def upload_user_document(self, user_id: str, params: DocumentUploadParams) -> Result[object]:
        """Upload an identity document for a user application."""
        return self._client.put_multipart(
            f"/applications/user/{user_id}/document", [params.file()], params.form_fields()
        )
