"""Company operations."""

import builtins
from typing import Any

from rain_sdk.core.client import Result
from rain_sdk.core.types import (
    Charge,
    Company,
    CreateChargeRequest,
    CreateCompanyUserRequest,
    ListCompaniesParams,
    UpdateCompanyRequest,
    User,
)
from rain_sdk.core.types.base import list_of
from rain_sdk.sdk.base import Operations, query


class CompanyOperations(Operations):
    """Operations for corporate customers."""

    def list(self, params: ListCompaniesParams | None = None, **filters: Any) -> Result[builtins.list[Company]]:
        """
        List companies.

        Args:
            params: Pagination (cursor, limit), or pass them as keywords

        Returns:
            List of Company objects

        """
        return self._client.get(
            "/companies", query(ListCompaniesParams, params, filters), parser=list_of(Company.from_dict)
        )

    def get(self, company_id: str) -> Result[Company]:
        return self._client.get(f"/companies/{company_id}", parser=Company.from_dict)

    def update(self, company_id: str, request: UpdateCompanyRequest) -> Result[Company]:
        return self._client.patch(f"/companies/{company_id}", request, parser=Company.from_dict)

    def charge(self, company_id: str, request: CreateChargeRequest) -> Result[Charge]:
        """Charge a company a custom fee."""
        return self._client.post(f"/companies/{company_id}/charges", request, parser=Charge.from_dict)

    def create_user(self, company_id: str, request: CreateCompanyUserRequest) -> Result[User]:
        """Add a user to a company."""
        return self._client.post(f"/companies/{company_id}/users", request, parser=User.from_dict)
