"""
Asynchronous Kraken client built on httpx.
"""
import logging
from typing import Any, Optional, Type, Union

import httpx

from kraken_rest.api.builder import Api, ApiBuilder
from kraken_rest.api.response import Response
from kraken_rest.auth.credentials import Credentials
from kraken_rest.auth.nonce import NonceProvider
from kraken_rest.client.base import HttpClientBase
from kraken_rest.client.interfaces import IAsyncKrakenClient
from kraken_rest.exceptions import RequestError

logger = logging.getLogger(__name__)


class AsyncClient(HttpClientBase, IAsyncKrakenClient):
    """
    Asynchronous HTTP client used to query the Kraken servers.

    Usage:
        async with AsyncClient.new("my-app/1.0") as client:
            response = await client.send(public.time())
    """

    def __init__(
        self,
        user_agent: Any,
        credentials: Optional[Credentials] = None,
        nonce_provider: Optional[NonceProvider] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(user_agent, credentials, nonce_provider, timeout)
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=timeout) if timeout is not None else httpx.AsyncClient()
        self._http = http_client

    # --- Factory Methods ---

    @classmethod
    def new(cls, user_agent: Any) -> "AsyncClient":
        """Client that can only be used for public APIs."""
        from kraken_rest.client.builder import ClientBuilder
        return ClientBuilder(user_agent).build_async()

    @classmethod
    def with_credentials(cls, user_agent: Any, credentials: Credentials) -> "AsyncClient":
        """Client for both public and private APIs."""
        from kraken_rest.client.builder import ClientBuilder
        return ClientBuilder(user_agent).with_credentials(credentials).build_async()

    # --- Requests ---

    async def send(self, api: Union[Api, ApiBuilder], result_type: Optional[Type[Any]] = None) -> Response:
        """
        Send the request to the Kraken servers.

        Same contract as BlockingClient.send.
        """
        api = Api.of(api)
        logger.debug(f"Sending request {api}")

        try:
            if api.is_public():
                url, headers = self._public_request(api)
                resp = await self._http.get(url, headers=headers)
            else:
                url, headers, body = self._private_request(api)
                resp = await self._http.post(url, headers=headers, content=body)
        except httpx.HTTPError as e:
            status_code = e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None
            logger.error(f"{api.method} request failed: {e}")
            raise RequestError(str(e), status_code) from e

        return self._parse(api, resp.status_code, resp.json, result_type)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AsyncClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
