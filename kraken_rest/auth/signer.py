"""
API-Sign computation for private requests.

API-Sign = Base64(HMAC-SHA512(uri_path + SHA256(nonce + body), private_key))
"""
import base64
import hashlib
import hmac
from typing import Optional

from kraken_rest.auth.credentials import Credentials
from kraken_rest.exceptions import InvalidKeyError, UnauthorizedError


API_KEY_HEADER = "API-Key"
API_SIGN_HEADER = "API-Sign"


def api_sign(uri_path: str, nonce: int, body: str, private_key: bytes) -> str:
    """
    Sign a private request.

    Args:
        uri_path: API path, e.g. "/0/private/Balance"
        nonce: the nonce also present in the body
        body: URL encoded request body
        private_key: decoded private key

    Returns:
        Base64 encoded signature for the API-Sign header

    Raises:
        InvalidKeyError: If the key cannot be used as a MAC key
    """
    if not private_key:
        raise InvalidKeyError("private key is empty")

    digest = hashlib.sha256(f"{nonce}{body}".encode("utf-8")).digest()
    message = uri_path.encode("utf-8") + digest
    mac = hmac.new(private_key, message, hashlib.sha512)
    return base64.b64encode(mac.digest()).decode("ascii")


def sign_request(credentials: Optional[Credentials], uri_path: str, nonce: int, body: str) -> dict:
    """
    Build the authentication headers of a private request.

    Raises:
        UnauthorizedError: If no credentials are configured
        InvalidKeyError: If the private key is malformed
    """
    if credentials is None:
        raise UnauthorizedError()

    signature = api_sign(uri_path, nonce, body, credentials.private_key_bytes())
    return {
        API_KEY_HEADER: credentials.api_key,
        API_SIGN_HEADER: signature,
    }
