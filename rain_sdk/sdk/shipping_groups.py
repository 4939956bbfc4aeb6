"""Bulk shipping group operations."""

import builtins
from typing import Any

from rain_sdk.core.client import Result
from rain_sdk.core.types import CreateShippingGroupRequest, ListShippingGroupsParams, ShippingGroup
from rain_sdk.core.types.base import list_of
from rain_sdk.sdk.base import Operations, query


class ShippingGroupOperations(Operations):
    """Groups physical cards that ship together to one recipient."""

    def list(
        self, params: ListShippingGroupsParams | None = None, **filters: Any
    ) -> Result[builtins.list[ShippingGroup]]:
        return self._client.get(
            "/shipping-groups",
            query(ListShippingGroupsParams, params, filters),
            parser=list_of(ShippingGroup.from_dict),
        )

    def create(self, request: CreateShippingGroupRequest) -> Result[ShippingGroup]:
        """
        Create a shipping group.

        Returns:
            ShippingGroup, or ACCEPTED when the API queues the request without a body

        """
        return self._client.post("/shipping-groups", request, parser=ShippingGroup.from_dict, allow_empty=True)

    def get(self, shipping_group_id: str) -> Result[ShippingGroup]:
        return self._client.get(f"/shipping-groups/{shipping_group_id}", parser=ShippingGroup.from_dict)
