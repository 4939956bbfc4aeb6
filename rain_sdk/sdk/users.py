"""User operations."""

import builtins
from typing import Any

from rain_sdk.core.client import Result
from rain_sdk.core.types import (
    Card,
    Charge,
    CreateCardRequest,
    CreateChargeRequest,
    CreateUserRequest,
    ListUsersParams,
    UpdateUserRequest,
    User,
)
from rain_sdk.core.types.base import list_of
from rain_sdk.sdk.base import Operations, query


class UserOperations(Operations):
    """Operations for users (cardholders)."""

    def list(self, params: ListUsersParams | None = None, **filters: Any) -> Result[builtins.list[User]]:
        """
        List users.

        Args:
            params: Filters (company_id, cursor, limit), or pass them as keywords

        Returns:
            List of User objects

        """
        return self._client.get("/users", query(ListUsersParams, params, filters), parser=list_of(User.from_dict))

    def create(self, request: CreateUserRequest) -> Result[User]:
        """Create a standalone user."""
        return self._client.post("/users", request, parser=User.from_dict)

    def get(self, user_id: str) -> Result[User]:
        """
        Get a user by ID.

        Raises:
            NotFoundError: If the user does not exist

        """
        return self._client.get(f"/users/{user_id}", parser=User.from_dict)

    def update(self, user_id: str, request: UpdateUserRequest) -> Result[User]:
        return self._client.patch(f"/users/{user_id}", request, parser=User.from_dict)

    def delete(self, user_id: str) -> Result[object]:
        """
        Delete a user.

        Returns:
            NO_CONTENT (or ACCEPTED) on success

        """
        return self._client.delete(f"/users/{user_id}")

    def charge(self, user_id: str, request: CreateChargeRequest) -> Result[Charge]:
        """Charge a user a custom fee."""
        return self._client.post(f"/users/{user_id}/charges", request, parser=Charge.from_dict)

    def create_card(self, user_id: str, request: CreateCardRequest) -> Result[Card]:
        """Issue a card to a user."""
        return self._client.post(f"/users/{user_id}/cards", request, parser=Card.from_dict)
