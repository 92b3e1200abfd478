"""
Shared pytest configuration and fixtures
"""
import pytest

from kraken_rest.auth.credentials import Credentials
from kraken_rest.auth.nonce import FixedNonceProvider

# Example key pair from the Kraken REST API authentication guide
EXAMPLE_API_KEY = "example-api-key"
EXAMPLE_PRIVATE_KEY = (
    "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="
)
EXAMPLE_NONCE = 1616492376594
USER_AGENT = "kraken-rest-tests/1.0"


@pytest.fixture
def credentials():
    """Example credentials"""
    return Credentials(api_key=EXAMPLE_API_KEY, private_key=EXAMPLE_PRIVATE_KEY)


@pytest.fixture
def keys_file(tmp_path):
    """Two line keys file"""
    path = tmp_path / "kraken.key"
    path.write_text(f"{EXAMPLE_API_KEY}\n{EXAMPLE_PRIVATE_KEY}\n", encoding="utf-8")
    return path


@pytest.fixture
def fixed_nonce():
    """Nonce provider returning the example nonce"""
    return FixedNonceProvider(EXAMPLE_NONCE)


@pytest.fixture
def time_payload():
    """Sample Time API body"""
    return {
        "error": [],
        "result": {"unixtime": 1616492376, "rfc1123": "Tue, 23 Mar 21 09:39:36 +0000"},
    }


@pytest.fixture
def balance_payload():
    """Sample Balance API body"""
    return {
        "error": [],
        "result": {"ZEUR": "1000.0000", "XXBT": "0.0123456789"},
    }
