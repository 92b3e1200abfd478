"""
Blocking Kraken client built on requests.
"""
import logging
from typing import Any, Optional, Type, Union

import requests

from kraken_rest.api.builder import Api, ApiBuilder
from kraken_rest.api.response import Response
from kraken_rest.auth.credentials import Credentials
from kraken_rest.auth.nonce import NonceProvider
from kraken_rest.client.base import HttpClientBase
from kraken_rest.client.interfaces import IKrakenClient
from kraken_rest.exceptions import RequestError

logger = logging.getLogger(__name__)


class BlockingClient(HttpClientBase, IKrakenClient):
    """
    Blocking HTTP client used to query the Kraken servers.

    Usage:
        with BlockingClient.new("my-app/1.0") as client:
            response = client.send(public.time())
            print(response.get("unixtime"))
    """

    def __init__(
        self,
        user_agent: Any,
        credentials: Optional[Credentials] = None,
        nonce_provider: Optional[NonceProvider] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(user_agent, credentials, nonce_provider, timeout)
        self._session = session or requests.Session()

    # --- Factory Methods ---

    @classmethod
    def new(cls, user_agent: Any) -> "BlockingClient":
        """Client that can only be used for public APIs."""
        from kraken_rest.client.builder import ClientBuilder
        return ClientBuilder(user_agent).build_blocking()

    @classmethod
    def with_credentials(cls, user_agent: Any, credentials: Credentials) -> "BlockingClient":
        """Client for both public and private APIs."""
        from kraken_rest.client.builder import ClientBuilder
        return ClientBuilder(user_agent).with_credentials(credentials).build_blocking()

    # --- Requests ---

    def send(self, api: Union[Api, ApiBuilder], result_type: Optional[Type[Any]] = None) -> Response:
        """
        Send the request to the Kraken servers.

        Args:
            api: API to send
            result_type: type the result is validated into (raw JSON if None)

        Returns:
            Response envelope with the HTTP status code filled in

        Raises:
            UnauthorizedError: private API without credentials
            InvalidKeyError: malformed private key
            RequestError: transport failure or undecodable body
        """
        api = Api.of(api)
        logger.debug(f"Sending request {api}")

        try:
            if api.is_public():
                url, headers = self._public_request(api)
                resp = self._session.get(url, headers=headers, timeout=self.timeout)
            else:
                url, headers, body = self._private_request(api)
                resp = self._session.post(url, headers=headers, data=body, timeout=self.timeout)
        except requests.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.error(f"{api.method} request failed: {e}")
            raise RequestError(str(e), status_code) from e

        return self._parse(api, resp.status_code, resp.json, result_type)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "BlockingClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
