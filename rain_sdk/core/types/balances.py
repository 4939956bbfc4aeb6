"""Balance types. All amounts are in cents."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Balance:
    credit_limit: int
    pending_charges: int
    posted_charges: int
    balance_due: int
    spending_power: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Balance":
        return cls(
            credit_limit=data["creditLimit"],
            pending_charges=data["pendingCharges"],
            posted_charges=data["postedCharges"],
            balance_due=data["balanceDue"],
            spending_power=data["spendingPower"],
        )
