"""Collateral contract operations."""

import builtins

from rain_sdk.core.client import Result
from rain_sdk.core.types import (
    Contract,
    CreateCompanyContractRequest,
    CreateUserContractRequest,
    UpdateContractRequest,
)
from rain_sdk.core.types.base import list_of
from rain_sdk.sdk.base import Operations


class ContractOperations(Operations):
    """
    Operations for collateral smart contracts.

    Contract creation is asynchronous on the API side: create calls usually
    return ACCEPTED, and the contract shows up in the list later.
    """

    def list(self) -> Result[builtins.list[Contract]]:
        """Contracts of the authorized tenant."""
        return self._client.get("/contracts", parser=list_of(Contract.from_dict))

    def update(self, contract_id: str, request: UpdateContractRequest) -> Result[object]:
        """Toggle the fiat on-ramp. The reply body is returned undecoded."""
        return self._client.put(f"/contracts/{contract_id}", request)

    def list_company(self, company_id: str) -> Result[builtins.list[Contract]]:
        return self._client.get(f"/companies/{company_id}/contracts", parser=list_of(Contract.from_dict))

    def create_company(self, company_id: str, request: CreateCompanyContractRequest) -> Result[object]:
        return self._client.post(f"/companies/{company_id}/contracts", request)

    def list_user(self, user_id: str) -> Result[builtins.list[Contract]]:
        return self._client.get(f"/users/{user_id}/contracts", parser=list_of(Contract.from_dict))

    def create_user(self, user_id: str, request: CreateUserContractRequest) -> Result[object]:
        return self._client.post(f"/users/{user_id}/contracts", request)
