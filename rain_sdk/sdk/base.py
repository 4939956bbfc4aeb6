"""Shared plumbing for the per-area operation classes."""

from typing import Any, TypeVar

from rain_sdk.core.client import BaseAPIClient
from rain_sdk.core.types.base import QueryParams

P = TypeVar("P", bound=QueryParams)


class Operations:
    """
    Base for an API area.

    Operations only build paths and bodies; the client does the rest. With an
    APIClient every method returns its value, with an AsyncAPIClient it
    returns an awaitable.
    """

    def __init__(self, client: BaseAPIClient):
        self._client = client


def query(params_cls: type[P], params: P | None, filters: dict[str, Any]) -> dict[str, Any]:
    """Query dict from a params object or keyword filters (not both)."""
    if params is None:
        params = params_cls(**filters)
    elif filters:
        raise TypeError("Pass either a params object or keyword filters, not both")
    return params.to_params()
