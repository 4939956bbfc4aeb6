"""
Client configuration for the Rain API.

Holds the base URL, timeout, user agent and logging switch. Values can be
given explicitly or read from RAIN_* environment variables.
"""

import os
from dataclasses import dataclass, replace
from enum import Enum

from rain_sdk.core.errors import ConfigurationError

# Configuration
DEFAULT_TIMEOUT = 30
SDK_VERSION = "0.1.0"
DEFAULT_USER_AGENT = f"rain-sdk-python/{SDK_VERSION}"

_TRUTHY = {"1", "true", "yes", "on"}


class Environment(str, Enum):
    """Hosted Rain environments."""

    DEV = "dev"
    PRODUCTION = "production"

    @property
    def base_url(self) -> str:
        return _ENVIRONMENT_URLS[self]


_ENVIRONMENT_URLS = {
    Environment.DEV: "https://api-dev.raincards.xyz/v1/issuing",
    Environment.PRODUCTION: "https://api.raincards.xyz/v1/issuing",
}


@dataclass(frozen=True)
class Config:
    """
    Immutable client configuration.

    Example:
        config = Config.for_environment(Environment.PRODUCTION).with_timeout(60)

    """

    base_url: str = _ENVIRONMENT_URLS[Environment.DEV]
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    enable_logging: bool = False

    @classmethod
    def for_environment(cls, environment: Environment | str) -> "Config":
        """Build a config pointing at a hosted environment."""
        return cls(base_url=_parse_environment(environment).base_url)

    @classmethod
    def custom(cls, base_url: str) -> "Config":
        """Build a config pointing at an arbitrary base URL."""
        return cls(base_url=base_url)

    @classmethod
    def from_env(cls) -> "Config":
        """
        Build a config from environment variables.

        RAIN_BASE_URL wins over RAIN_ENVIRONMENT. Unset variables keep their
        defaults.

        Raises:
            ConfigurationError: On an unknown environment or a bad timeout

        """
        base_url = os.environ.get("RAIN_BASE_URL")
        if not base_url:
            base_url = _parse_environment(os.environ.get("RAIN_ENVIRONMENT", Environment.DEV.value)).base_url

        timeout_value = os.environ.get("RAIN_TIMEOUT")
        timeout: float = DEFAULT_TIMEOUT
        if timeout_value:
            try:
                timeout = float(timeout_value)
            except ValueError:
                raise ConfigurationError(f"RAIN_TIMEOUT must be a number, got {timeout_value!r}")

        return cls(
            base_url=base_url,
            timeout=timeout,
            user_agent=os.environ.get("RAIN_USER_AGENT") or DEFAULT_USER_AGENT,
            enable_logging=os.environ.get("RAIN_ENABLE_LOGGING", "").strip().lower() in _TRUTHY,
        )

    def with_timeout(self, timeout: float) -> "Config":
        return replace(self, timeout=timeout)

    def with_user_agent(self, user_agent: str) -> "Config":
        return replace(self, user_agent=user_agent)

    def with_logging(self, enable: bool = True) -> "Config":
        return replace(self, enable_logging=enable)


def _parse_environment(value: Environment | str) -> Environment:
    if isinstance(value, Environment):
        return value
    try:
        return Environment(value.strip().lower())
    except ValueError:
        choices = ", ".join(e.value for e in Environment)
        raise ConfigurationError(f"Unknown environment {value!r} (expected one of: {choices})")
