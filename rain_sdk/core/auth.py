"""API key authentication via the Api-Key header."""

import os
from dataclasses import dataclass, field

from rain_sdk.core.errors import ConfigurationError

API_KEY_HEADER = "Api-Key"


@dataclass(frozen=True)
class AuthConfig:
    """Static API key sent verbatim on every request."""

    api_key: str = field(repr=False)

    @classmethod
    def with_api_key(cls, api_key: str | None = None) -> "AuthConfig":
        """
        Build auth from an explicit key or the RAIN_API_KEY env var.

        Raises:
            ConfigurationError: If no key is available

        """
        key = api_key or os.environ.get("RAIN_API_KEY")
        if not key:
            raise ConfigurationError("RAIN_API_KEY environment variable not set")
        return cls(api_key=key)

    def headers(self) -> dict[str, str]:
        return {API_KEY_HEADER: self.api_key}
