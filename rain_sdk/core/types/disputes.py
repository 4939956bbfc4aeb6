"""Dispute types."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from rain_sdk.core.transport import FilePart, LocalFile
from rain_sdk.core.types.base import QueryParams, RequestModel


class DisputeStatus(str, Enum):
    PENDING = "pending"
    IN_REVIEW = "inReview"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CANCELED = "canceled"


@dataclass
class Dispute:
    id: str
    transaction_id: str
    status: DisputeStatus
    created_at: str
    text_evidence: str | None = None
    resolved_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Dispute":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            transaction_id=data["transactionId"],
            status=DisputeStatus(data["status"]),
            created_at=data["createdAt"],
            text_evidence=data.get("textEvidence"),
            resolved_at=data.get("resolvedAt"),
        )


@dataclass
class CreateDisputeRequest(RequestModel):
    text_evidence: str | None = None


@dataclass
class UpdateDisputeRequest(RequestModel):
    status: DisputeStatus | None = None
    text_evidence: str | None = None


@dataclass
class ListDisputesParams(QueryParams):
    company_id: str | None = None
    user_id: str | None = None
    transaction_id: str | None = None
    cursor: str | None = None
    limit: int | None = None


@dataclass
class UploadDisputeEvidenceRequest:
    """
    Evidence file for a dispute.

    ``name`` is both the form's name field and the uploaded filename.
    """

    name: str
    evidence_type: str
    file: bytes | str | Path

    def part(self) -> FilePart | LocalFile:
        if isinstance(self.file, bytes):
            return FilePart(field_name="evidence", filename=self.name, content=self.file)
        return LocalFile(field_name="evidence", path=self.file, filename=self.name)

    def form_fields(self) -> dict[str, str]:
        return {"name": self.name, "type": self.evidence_type}
