"""Dispute operations."""

import builtins
from typing import Any

from rain_sdk.core.client import Result
from rain_sdk.core.types import Dispute, ListDisputesParams, UpdateDisputeRequest, UploadDisputeEvidenceRequest
from rain_sdk.core.types.base import list_of
from rain_sdk.sdk.base import Operations, query


class DisputeOperations(Operations):
    """Operations for transaction disputes."""

    def list(self, params: ListDisputesParams | None = None, **filters: Any) -> Result[builtins.list[Dispute]]:
        return self._client.get(
            "/disputes", query(ListDisputesParams, params, filters), parser=list_of(Dispute.from_dict)
        )

    def get(self, dispute_id: str) -> Result[Dispute]:
        return self._client.get(f"/disputes/{dispute_id}", parser=Dispute.from_dict)

    def update(self, dispute_id: str, request: UpdateDisputeRequest) -> Result[object]:
        """Update a dispute's status or text evidence. The reply body is returned undecoded."""
        return self._client.patch(f"/disputes/{dispute_id}", request)

    def get_evidence(self, dispute_id: str) -> Result[bytes]:
        """Download the evidence file as raw bytes."""
        return self._client.get_bytes(f"/disputes/{dispute_id}/evidence")

    def upload_evidence(self, dispute_id: str, request: UploadDisputeEvidenceRequest) -> Result[object]:
        return self._client.put_multipart_no_content(
            f"/disputes/{dispute_id}/evidence", [request.part()], request.form_fields()
        )
