"""Subtenant operations."""

import builtins

from rain_sdk.core.client import Result
from rain_sdk.core.types import CreateSubtenantRequest, Subtenant, UpdateSubtenantRequest
from rain_sdk.core.types.base import list_of
from rain_sdk.sdk.base import Operations


class SubtenantOperations(Operations):
    def list(self) -> Result[builtins.list[Subtenant]]:
        return self._client.get("/subtenants", parser=list_of(Subtenant.from_dict))

    def create(self, request: CreateSubtenantRequest) -> Result[Subtenant]:
        return self._client.post("/subtenants", request, parser=Subtenant.from_dict)

    def get(self, subtenant_id: str) -> Result[Subtenant]:
        return self._client.get(f"/subtenants/{subtenant_id}", parser=Subtenant.from_dict)

    def update(self, subtenant_id: str, request: UpdateSubtenantRequest) -> Result[object]:
        """Rename a subtenant. The reply body is returned undecoded."""
        return self._client.patch(f"/subtenants/{subtenant_id}", request)
