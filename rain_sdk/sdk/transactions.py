"""Transaction operations."""

import builtins
from typing import Any

from rain_sdk.core.client import Result
from rain_sdk.core.types import (
    CreateDisputeRequest,
    Dispute,
    ListTransactionsParams,
    Transaction,
    UpdateTransactionRequest,
    UploadReceiptRequest,
)
from rain_sdk.core.types.base import list_of
from rain_sdk.sdk.base import Operations, query


class TransactionOperations(Operations):
    """Operations for spend, collateral, payment and fee transactions."""

    def list(
        self, params: ListTransactionsParams | None = None, **filters: Any
    ) -> Result[builtins.list[Transaction]]:
        """
        List transactions.

        Args:
            params: Filters, or pass them as keywords. ``transaction_type``
                takes a list and is sent as repeated ``type`` keys.

        Returns:
            List of Transaction subclasses, one per ``type``

        """
        return self._client.get(
            "/transactions",
            query(ListTransactionsParams, params, filters),
            parser=list_of(Transaction.from_dict),
        )

    def get(self, transaction_id: str) -> Result[Transaction]:
        return self._client.get(f"/transactions/{transaction_id}", parser=Transaction.from_dict)

    def update(self, transaction_id: str, request: UpdateTransactionRequest) -> Result[object]:
        """Update a transaction's memo. The reply body is returned undecoded."""
        return self._client.patch(f"/transactions/{transaction_id}", request)

    def get_receipt(self, transaction_id: str) -> Result[bytes]:
        """Download the receipt as raw bytes."""
        return self._client.get_bytes(f"/transactions/{transaction_id}/receipt")

    def upload_receipt(self, transaction_id: str, request: UploadReceiptRequest) -> Result[object]:
        """
        Attach a receipt to a transaction.

        Raises:
            ValidationError: If a receipt path cannot be read (no request is sent)

        """
        return self._client.put_multipart_no_content(f"/transactions/{transaction_id}/receipt", [request.part()])

    def create_dispute(self, transaction_id: str, request: CreateDisputeRequest | None = None) -> Result[Dispute]:
        """Open a dispute on a transaction."""
        return self._client.post(
            f"/transactions/{transaction_id}/disputes",
            request or CreateDisputeRequest(),
            parser=Dispute.from_dict,
        )
