"""
Client builder.
"""
from __future__ import annotations
from typing import Any, Optional

from kraken_rest.auth.credentials import Credentials
from kraken_rest.auth.nonce import NonceProvider
from kraken_rest.client.async_client import AsyncClient
from kraken_rest.client.base import validate_user_agent
from kraken_rest.client.blocking import BlockingClient
from kraken_rest.config.settings import KrakenConfig


class ClientBuilder:
    """Collects the client settings, then builds a blocking or async client."""

    def __init__(self, user_agent: Any):
        """
        Args:
            user_agent: User-Agent header sent with every request
        """
        self.user_agent = str(user_agent)
        self.credentials: Optional[Credentials] = None
        self.nonce_provider: Optional[NonceProvider] = None
        self.timeout: Optional[float] = KrakenConfig.timeout()

    def with_credentials(self, credentials: Credentials) -> ClientBuilder:
        """Set the client credentials."""
        self.credentials = credentials
        return self

    def with_timeout(self, timeout: Optional[float]) -> ClientBuilder:
        """Set the request timeout in seconds (None for the transport default)."""
        self.timeout = timeout
        return self

    def with_nonce_provider(self, nonce_provider: NonceProvider) -> ClientBuilder:
        """Replace the wall-clock nonce source."""
        self.nonce_provider = nonce_provider
        return self

    def build_blocking(self) -> BlockingClient:
        """
        Build a blocking client.

        Raises:
            InvalidUserAgentError: If the user agent is not a valid header value
        """
        return BlockingClient(
            validate_user_agent(self.user_agent),
            credentials=self.credentials,
            nonce_provider=self.nonce_provider,
            timeout=self.timeout,
        )

    def build_async(self) -> AsyncClient:
        """
        Build an asynchronous client.

        Raises:
            InvalidUserAgentError: If the user agent is not a valid header value
        """
        return AsyncClient(
            validate_user_agent(self.user_agent),
            credentials=self.credentials,
            nonce_provider=self.nonce_provider,
            timeout=self.timeout,
        )


def with_user_agent(user_agent: Any) -> ClientBuilder:
    """Create a new client builder with the given user agent."""
    return ClientBuilder(user_agent)
