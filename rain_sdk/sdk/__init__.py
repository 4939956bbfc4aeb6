"""
SDK layer - High-level clients and per-area operations.

Built on top of the core APIClient / AsyncAPIClient.
"""

from rain_sdk.sdk.client import AsyncRainClient, RainClient

__all__ = ["AsyncRainClient", "RainClient"]
