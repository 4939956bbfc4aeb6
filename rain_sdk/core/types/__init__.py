"""
Typed models for the Rain API.

These dataclasses mirror the API's JSON schema. Response models build
themselves with from_dict(); request models serialize with to_dict().
"""

from rain_sdk.core.types.applications import (
    ApiVerification,
    ApplicationPerson,
    CompanyApplicationResponse,
    CreateCompanyApplicationRequest,
    CreateUserApplicationRequest,
    DocumentUploadParams,
    EntityInfo,
    EntityUpdateInfo,
    InitialUser,
    InitiateUserApplicationRequest,
    PersonaVerification,
    Representative,
    SumsubVerification,
    UltimateBeneficialOwner,
    UltimateBeneficialOwnerResponse,
    UpdateCompanyApplicationRequest,
    UpdateUltimateBeneficialOwnerRequest,
    UpdateUserApplicationRequest,
    UserApplicationResponse,
)
from rain_sdk.core.types.balances import Balance
from rain_sdk.core.types.cards import (
    BillingAddress,
    Card,
    CardConfiguration,
    CardLimit,
    CardPin,
    CardSecrets,
    CardStatus,
    CardType,
    CreateCardRequest,
    EncryptedData,
    LimitFrequency,
    ListCardsParams,
    ProcessorDetails,
    ShippingAddress,
    ShippingMethod,
    UpdateCardPinRequest,
    UpdateCardRequest,
)
from rain_sdk.core.types.charges import Charge, CreateChargeRequest
from rain_sdk.core.types.common import (
    ACCEPTED,
    NO_CONTENT,
    Accepted,
    Address,
    ApplicationLink,
    ApplicationStatus,
    CompanyDocumentType,
    DocumentSide,
    NoContent,
    UserDocumentType,
)
from rain_sdk.core.types.companies import Company, ListCompaniesParams, UpdateCompanyRequest
from rain_sdk.core.types.contracts import (
    AccountDetails,
    Contract,
    ContractToken,
    CreateCompanyContractRequest,
    CreateUserContractRequest,
    Onramp,
    UpdateContractRequest,
)
from rain_sdk.core.types.disputes import (
    CreateDisputeRequest,
    Dispute,
    DisputeStatus,
    ListDisputesParams,
    UpdateDisputeRequest,
    UploadDisputeEvidenceRequest,
)
from rain_sdk.core.types.keys import CreateKeyRequest, Key
from rain_sdk.core.types.payments import InitiatePaymentRequest, InitiatePaymentResponse
from rain_sdk.core.types.reports import GetReportParams, ReportFormat
from rain_sdk.core.types.shipping_groups import (
    CreateShippingGroupRequest,
    ListShippingGroupsParams,
    ShippingGroup,
)
from rain_sdk.core.types.signatures import (
    PaymentSignatureParams,
    PendingSignature,
    ReadySignature,
    SignatureData,
    SignatureResponse,
    SignatureStatus,
    WithdrawalSignatureParams,
    parse_signature_response,
)
from rain_sdk.core.types.subtenants import (
    ApplicationCompletionLink,
    CreateSubtenantRequest,
    Subtenant,
    UpdateSubtenantRequest,
)
from rain_sdk.core.types.transactions import (
    CollateralTransaction,
    FeeTransaction,
    ListTransactionsParams,
    PaymentTransaction,
    PaymentTransactionStatus,
    SpendTransaction,
    SpendTransactionStatus,
    Transaction,
    TransactionType,
    UpdateTransactionRequest,
    UploadReceiptRequest,
)
from rain_sdk.core.types.users import (
    CreateCompanyUserRequest,
    CreateUserRequest,
    ListUsersParams,
    UpdateUserRequest,
    User,
)
from rain_sdk.core.types.webhooks import ListWebhooksParams, Webhook

__all__ = [
    "ACCEPTED",
    "NO_CONTENT",
    "Accepted",
    "AccountDetails",
    "Address",
    "ApiVerification",
    "ApplicationCompletionLink",
    "ApplicationLink",
    "ApplicationPerson",
    "ApplicationStatus",
    "Balance",
    "BillingAddress",
    "Card",
    "CardConfiguration",
    "CardLimit",
    "CardPin",
    "CardSecrets",
    "CardStatus",
    "CardType",
    "Charge",
    "CollateralTransaction",
    "Company",
    "CompanyApplicationResponse",
    "CompanyDocumentType",
    "Contract",
    "ContractToken",
    "CreateCardRequest",
    "CreateChargeRequest",
    "CreateCompanyApplicationRequest",
    "CreateCompanyContractRequest",
    "CreateCompanyUserRequest",
    "CreateDisputeRequest",
    "CreateKeyRequest",
    "CreateShippingGroupRequest",
    "CreateSubtenantRequest",
    "CreateUserApplicationRequest",
    "CreateUserContractRequest",
    "CreateUserRequest",
    "Dispute",
    "DisputeStatus",
    "DocumentSide",
    "DocumentUploadParams",
    "EncryptedData",
    "EntityInfo",
    "EntityUpdateInfo",
    "FeeTransaction",
    "GetReportParams",
    "InitialUser",
    "InitiatePaymentRequest",
    "InitiatePaymentResponse",
    "InitiateUserApplicationRequest",
    "Key",
    "LimitFrequency",
    "ListCardsParams",
    "ListCompaniesParams",
    "ListDisputesParams",
    "ListShippingGroupsParams",
    "ListTransactionsParams",
    "ListUsersParams",
    "ListWebhooksParams",
    "NoContent",
    "Onramp",
    "PaymentSignatureParams",
    "PaymentTransaction",
    "PaymentTransactionStatus",
    "PendingSignature",
    "PersonaVerification",
    "ProcessorDetails",
    "ReadySignature",
    "ReportFormat",
    "Representative",
    "ShippingAddress",
    "ShippingGroup",
    "ShippingMethod",
    "SignatureData",
    "SignatureResponse",
    "SignatureStatus",
    "SpendTransaction",
    "SpendTransactionStatus",
    "Subtenant",
    "SumsubVerification",
    "Transaction",
    "TransactionType",
    "UltimateBeneficialOwner",
    "UltimateBeneficialOwnerResponse",
    "UpdateCardPinRequest",
    "UpdateCardRequest",
    "UpdateCompanyApplicationRequest",
    "UpdateCompanyRequest",
    "UpdateContractRequest",
    "UpdateDisputeRequest",
    "UpdateSubtenantRequest",
    "UpdateTransactionRequest",
    "UpdateUltimateBeneficialOwnerRequest",
    "UpdateUserApplicationRequest",
    "UpdateUserRequest",
    "UploadDisputeEvidenceRequest",
    "UploadReceiptRequest",
    "User",
    "UserApplicationResponse",
    "UserDocumentType",
    "Webhook",
    "WithdrawalSignatureParams",
    "parse_signature_response",
]
