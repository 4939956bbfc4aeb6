"""
Signature operations.

Withdrawals and payments from collateral contracts need an admin signature.
Each call returns PendingSignature (poll again after retry_after seconds) or
ReadySignature.
"""

from rain_sdk.core.client import Result
from rain_sdk.core.types import (
    PaymentSignatureParams,
    SignatureResponse,
    WithdrawalSignatureParams,
    parse_signature_response,
)
from rain_sdk.sdk.base import Operations


class SignatureOperations(Operations):
    def payment(self, params: PaymentSignatureParams) -> Result[SignatureResponse]:
        """Payment signature for the authorized tenant."""
        return self._client.get("/signatures/payments", params.to_params(), parser=parse_signature_response)

    def withdrawal(self, params: WithdrawalSignatureParams) -> Result[SignatureResponse]:
        """Withdrawal signature for the authorized tenant."""
        return self._client.get("/signatures/withdrawals", params.to_params(), parser=parse_signature_response)

    def company_payment(self, company_id: str, params: PaymentSignatureParams) -> Result[SignatureResponse]:
        return self._client.get(
            f"/companies/{company_id}/signatures/payments", params.to_params(), parser=parse_signature_response
        )

    def company_withdrawal(self, company_id: str, params: WithdrawalSignatureParams) -> Result[SignatureResponse]:
        return self._client.get(
            f"/companies/{company_id}/signatures/withdrawals", params.to_params(), parser=parse_signature_response
        )

    def user_payment(self, user_id: str, params: PaymentSignatureParams) -> Result[SignatureResponse]:
        return self._client.get(
            f"/users/{user_id}/signatures/payments", params.to_params(), parser=parse_signature_response
        )

    def user_withdrawal(self, user_id: str, params: WithdrawalSignatureParams) -> Result[SignatureResponse]:
        return self._client.get(
            f"/users/{user_id}/signatures/withdrawals", params.to_params(), parser=parse_signature_response
        )
