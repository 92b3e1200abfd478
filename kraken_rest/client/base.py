"""
State and request preparation shared by the blocking and async clients.

The clients only differ in the HTTP library they drive; everything that
decides what goes on the wire lives here.
"""
import logging
from typing import Any, Callable, Dict, Optional, Tuple, Type

from kraken_rest.api.body import Body
from kraken_rest.api.builder import Api
from kraken_rest.api.response import Response, parse_response
from kraken_rest.auth.credentials import Credentials
from kraken_rest.auth.nonce import NonceProvider, SystemNonceProvider
from kraken_rest.auth.signer import sign_request
from kraken_rest.config.settings import VERSION
from kraken_rest.exceptions import InvalidUserAgentError, RequestError, UnauthorizedError
from kraken_rest.utils.helpers import header_value_error

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


def default_user_agent() -> str:
    """User agent identifying this library."""
    return f"kraken-rest/{VERSION}"


def validate_user_agent(user_agent: Any) -> str:
    """
    Return the user agent as a string.

    Raises:
        InvalidUserAgentError: If it cannot be sent as a header value
    """
    user_agent = str(user_agent)
    if not user_agent:
        raise InvalidUserAgentError(user_agent, "user agent is empty")
    reason = header_value_error(user_agent)
    if reason:
        raise InvalidUserAgentError(user_agent, reason)
    return user_agent


class HttpClientBase:
    """
    Base class of the Kraken HTTP clients.

    Note:
        A client without credentials can only query public APIs; sending a
        private API raises UnauthorizedError before any network I/O.
    """

    def __init__(
        self,
        user_agent: Any,
        credentials: Optional[Credentials] = None,
        nonce_provider: Optional[NonceProvider] = None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            user_agent: User-Agent header sent with every request
            credentials: key pair used for private APIs
            nonce_provider: nonce source (wall clock by default)
            timeout: request timeout in seconds (transport default if None)
        """
        self.user_agent = validate_user_agent(user_agent)
        self.credentials = credentials
        self.nonce_provider = nonce_provider or SystemNonceProvider()
        self.timeout = timeout

    def __str__(self) -> str:
        return f"{self.user_agent} <{default_user_agent()}>"

    def __repr__(self) -> str:
        authenticated = self.credentials is not None
        return f"{type(self).__name__}(user_agent={self.user_agent!r}, authenticated={authenticated})"

    @property
    def has_credentials(self) -> bool:
        return self.credentials is not None

    # --- Request Preparation ---

    def _headers(self, api: Api) -> Dict[str, str]:
        headers = api.headers
        headers["User-Agent"] = self.user_agent
        return headers

    def _public_request(self, api: Api) -> Tuple[str, Dict[str, str]]:
        """URL and headers of a GET request."""
        return api.url, self._headers(api)

    def _private_request(self, api: Api) -> Tuple[str, Dict[str, str], bytes]:
        """URL, signed headers and form body of a POST request."""
        if self.credentials is None:
            raise UnauthorizedError(f"{api.method} is a private API and the client has no credentials")

        nonce = self.nonce_provider.next_nonce()
        body = Body(nonce=nonce, params=api.params, otp=api.otp).urlencode()

        headers = self._headers(api)
        headers["Content-Type"] = FORM_CONTENT_TYPE
        headers.update(sign_request(self.credentials, api.uri_path, nonce, body))
        return api.url, headers, body.encode("utf-8")

    # --- Response Handling ---

    def _parse(
        self,
        api: Api,
        status_code: int,
        decode: Callable[[], Any],
        result_type: Optional[Type[Any]],
    ) -> Response:
        """Decode the body and validate it against the envelope."""
        try:
            payload = decode()
        except ValueError as e:
            logger.error(f"{api.method}: HTTP {status_code} with a non JSON body")
            raise RequestError(f"invalid JSON body: {e}", status_code) from e

        response = parse_response(payload, status_code, result_type)
        if not response.is_success():
            logger.warning(f"{api.method}: HTTP {status_code}, errors: {response.error}")
        return response
