"""Subtenant types."""

from dataclasses import dataclass, field
from typing import Any

from rain_sdk.core.types.base import RequestModel, optional


@dataclass
class ApplicationCompletionLink:
    url: str
    params: Any = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApplicationCompletionLink":
        return cls(url=data["url"], params=data.get("params"))


@dataclass
class Subtenant:
    id: str
    name: str
    application_completion_link: ApplicationCompletionLink | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subtenant":
        return cls(
            id=data["id"],
            name=data["name"],
            application_completion_link=optional(
                ApplicationCompletionLink.from_dict, data.get("applicationCompletionLink")
            ),
        )


@dataclass
class CreateSubtenantRequest(RequestModel):
    name: str | None = None


@dataclass
class UpdateSubtenantRequest(RequestModel):
    name: str | None = None
