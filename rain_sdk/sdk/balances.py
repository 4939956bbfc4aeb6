"""Balance operations."""

from rain_sdk.core.client import Result
from rain_sdk.core.types import Balance
from rain_sdk.sdk.base import Operations


class BalanceOperations(Operations):
    """Credit limit, charges and spending power, in cents."""

    def get(self) -> Result[Balance]:
        """Balances for the whole tenant."""
        return self._client.get("/balances", parser=Balance.from_dict)

    def get_company(self, company_id: str) -> Result[Balance]:
        return self._client.get(f"/companies/{company_id}/balances", parser=Balance.from_dict)

    def get_user(self, user_id: str) -> Result[Balance]:
        return self._client.get(f"/users/{user_id}/balances", parser=Balance.from_dict)
