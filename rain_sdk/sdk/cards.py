"""Card operations."""

import builtins
from typing import Any

from rain_sdk.core.client import Result
from rain_sdk.core.types import (
    Card,
    CardPin,
    CardSecrets,
    ListCardsParams,
    ProcessorDetails,
    UpdateCardPinRequest,
    UpdateCardRequest,
)
from rain_sdk.core.types.base import list_of
from rain_sdk.sdk.base import Operations, query

SESSION_ID_HEADER = "SessionId"


class CardOperations(Operations):
    """
    Operations for cards.

    Secrets and PIN calls need a SessionId header; the returned values are
    encrypted with the session's secret key.
    """

    def list(self, params: ListCardsParams | None = None, **filters: Any) -> Result[builtins.list[Card]]:
        """
        List cards.

        Args:
            params: Filters (company_id, user_id, status, cursor, limit), or keywords

        Returns:
            List of Card objects

        """
        return self._client.get("/cards", query(ListCardsParams, params, filters), parser=list_of(Card.from_dict))

    def get(self, card_id: str) -> Result[Card]:
        return self._client.get(f"/cards/{card_id}", parser=Card.from_dict)

    def update(self, card_id: str, request: UpdateCardRequest) -> Result[Card]:
        """Change a card's status, limit, billing address or configuration."""
        return self._client.patch(f"/cards/{card_id}", request, parser=Card.from_dict)

    def get_secrets(self, card_id: str, session_id: str) -> Result[CardSecrets]:
        """
        Get the encrypted PAN and CVC.

        Args:
            card_id: Card ID
            session_id: Encrypted session ID sent as the SessionId header

        Raises:
            ValidationError: If session_id is not a valid header value

        """
        return self._client.get(
            f"/cards/{card_id}/secrets",
            parser=CardSecrets.from_dict,
            headers={SESSION_ID_HEADER: session_id},
        )

    def get_processor_details(self, card_id: str) -> Result[ProcessorDetails]:
        return self._client.get(f"/cards/{card_id}/processorDetails", parser=ProcessorDetails.from_dict)

    def get_pin(self, card_id: str, session_id: str) -> Result[CardPin]:
        return self._client.get(
            f"/cards/{card_id}/pin",
            parser=CardPin.from_dict,
            headers={SESSION_ID_HEADER: session_id},
        )

    def update_pin(self, card_id: str, request: UpdateCardPinRequest, session_id: str) -> Result[object]:
        """Set a new PIN. Returns whatever the API sends back, usually NO_CONTENT."""
        return self._client.put(f"/cards/{card_id}/pin", request, headers={SESSION_ID_HEADER: session_id})
