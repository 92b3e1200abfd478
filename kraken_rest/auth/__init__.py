"""Authentication: credentials, nonces and request signing."""
from kraken_rest.auth.credentials import Credentials
from kraken_rest.auth.nonce import NonceProvider, SystemNonceProvider, FixedNonceProvider
from kraken_rest.auth.signer import api_sign, sign_request, API_KEY_HEADER, API_SIGN_HEADER

__all__ = [
    "Credentials",
    "NonceProvider",
    "SystemNonceProvider",
    "FixedNonceProvider",
    "api_sign",
    "sign_request",
    "API_KEY_HEADER",
    "API_SIGN_HEADER",
]
