"""Collateral contract types."""

from dataclasses import dataclass, field
from typing import Any

from rain_sdk.core.types.base import RequestModel, list_of, optional


@dataclass
class ContractToken:
    address: str
    balance: str
    exchange_rate: float | None = None
    advance_rate: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContractToken":
        return cls(
            address=data["address"],
            balance=data["balance"],
            exchange_rate=data.get("exchangeRate"),
            advance_rate=data.get("advanceRate"),
        )


@dataclass
class AccountDetails:
    """Bank details for one fiat on-ramp rail (ACH, RTP or wire)."""

    beneficiary_name: str
    beneficiary_address: str
    account_number: str
    routing_number: str
    beneficiary_bank_name: str | None = None
    beneficiary_bank_address: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AccountDetails":
        return cls(
            beneficiary_name=data["beneficiaryName"],
            beneficiary_address=data["beneficiaryAddress"],
            account_number=data["accountNumber"],
            routing_number=data["routingNumber"],
            beneficiary_bank_name=data.get("beneficiaryBankName"),
            beneficiary_bank_address=data.get("beneficiaryBankAddress"),
        )


@dataclass
class Onramp:
    ach: AccountDetails | None = None
    rtp: AccountDetails | None = None
    wire: AccountDetails | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Onramp":
        return cls(
            ach=optional(AccountDetails.from_dict, data.get("ach")),
            rtp=optional(AccountDetails.from_dict, data.get("rtp")),
            wire=optional(AccountDetails.from_dict, data.get("wire")),
        )


@dataclass
class Contract:
    """A collateral smart contract for a company or user."""

    id: str
    chain_id: int
    controller_address: str
    proxy_address: str
    deposit_address: str
    contract_version: int
    tokens: list[ContractToken] = field(default_factory=list)
    program_address: str | None = None
    onramp: Onramp | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contract":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            chain_id=data["chainId"],
            controller_address=data["controllerAddress"],
            proxy_address=data["proxyAddress"],
            deposit_address=data["depositAddress"],
            contract_version=data["contractVersion"],
            tokens=list_of(ContractToken.from_dict)(data["tokens"]),
            program_address=data.get("programAddress"),
            onramp=optional(Onramp.from_dict, data.get("onramp")),
        )


@dataclass
class CreateCompanyContractRequest(RequestModel):
    chain_id: int
    owner_address: str


@dataclass
class CreateUserContractRequest(RequestModel):
    chain_id: int


@dataclass
class UpdateContractRequest(RequestModel):
    """Enable or disable the fiat on-ramp."""

    onramp: bool
