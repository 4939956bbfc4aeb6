"""Payment operations."""

from rain_sdk.core.client import Result
from rain_sdk.core.types import InitiatePaymentRequest, InitiatePaymentResponse
from rain_sdk.sdk.base import Operations


class PaymentOperations(Operations):
    """Start a payment and get the address to send funds to."""

    def initiate(self, request: InitiatePaymentRequest) -> Result[InitiatePaymentResponse]:
        return self._client.post("/payments", request, parser=InitiatePaymentResponse.from_dict)

    def initiate_company(
        self, company_id: str, request: InitiatePaymentRequest
    ) -> Result[InitiatePaymentResponse]:
        return self._client.post(
            f"/companies/{company_id}/payments", request, parser=InitiatePaymentResponse.from_dict
        )

    def initiate_user(self, user_id: str, request: InitiatePaymentRequest) -> Result[InitiatePaymentResponse]:
        return self._client.post(f"/users/{user_id}/payments", request, parser=InitiatePaymentResponse.from_dict)
