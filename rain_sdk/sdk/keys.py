"""API key operations."""

from rain_sdk.core.client import Result
from rain_sdk.core.types import CreateKeyRequest, Key
from rain_sdk.sdk.base import Operations


class KeyOperations(Operations):
    def create(self, request: CreateKeyRequest) -> Result[Key]:
        """
        Create an API key.

        Returns:
            Key, including the secret, which the API shows only once

        """
        return self._client.post("/keys", request, parser=Key.from_dict)

    def delete(self, key_id: str) -> Result[object]:
        return self._client.delete(f"/keys/{key_id}")
