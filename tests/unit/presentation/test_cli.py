"""
Command line tool tests
"""
import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from kraken_rest.api.builder import ApiKind
from kraken_rest.api.response import ResponseValue
from kraken_rest.client.blocking import BlockingClient
from kraken_rest.config.settings import CredentialsConfig, KrakenConfig
from kraken_rest.exceptions import RequestError
from kraken_rest.presentation.cli import (
    EXIT_API_ERROR,
    EXIT_OK,
    EXIT_USAGE,
    main,
    parse_params,
    resolve_method,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """No keys or custom endpoint leak in from the environment"""
    monkeypatch.setattr(CredentialsConfig, "KEY_PATH", None)
    monkeypatch.setattr(KrakenConfig, "DOMAIN", "https://api.kraken.com")
    monkeypatch.setattr(KrakenConfig, "API_VERSION", "0")
    monkeypatch.setattr(KrakenConfig, "TIMEOUT", "")
    monkeypatch.delenv("KRAKEN_API_KEY", raising=False)
    monkeypatch.delenv("KRAKEN_PRIVATE_KEY", raising=False)


class SentRequests(list):
    """(client, api) pairs passed to BlockingClient.send"""
    response = ResponseValue(error=[], result={"unixtime": 1616492376}, status_code=200)


@pytest.fixture
def sent(monkeypatch):
    """Replace BlockingClient.send, recording what is sent"""
    calls = SentRequests()

    def fake_send(self, api, result_type=None):
        calls.append((self, api))
        return calls.response

    monkeypatch.setattr(BlockingClient, "send", fake_send)
    return calls


@pytest.mark.unit
class TestResolveMethod:
    """resolve_method tests"""

    @pytest.mark.parametrize("name", ["Ticker", "ticker", "TICKER"])
    def test_public(self, name):
        assert resolve_method(name) == (ApiKind.PUBLIC, "Ticker")

    @pytest.mark.parametrize("name", ["asset_pairs", "asset-pairs", "AssetPairs"])
    def test_separators_ignored(self, name):
        assert resolve_method(name) == (ApiKind.PUBLIC, "AssetPairs")

    def test_private(self):
        assert resolve_method("get_websockets_token") == (ApiKind.PRIVATE, "GetWebSocketsToken")

    def test_unknown(self):
        with pytest.raises(ValueError):
            resolve_method("Moon")


@pytest.mark.unit
class TestParseParams:
    """parse_params tests"""

    def test_pairs(self):
        assert parse_params(["pair=XXBTZEUR", "count=2"]) == {"pair": "XXBTZEUR", "count": "2"}

    def test_value_may_contain_equals(self):
        assert parse_params(["userref=a=b"]) == {"userref": "a=b"}

    @pytest.mark.parametrize("pair", ["pair", "=XXBTZEUR"])
    def test_invalid(self, pair):
        with pytest.raises(ValueError):
            parse_params([pair])


@pytest.mark.unit
class TestPairCommand:
    """pair command tests"""

    def test_crypto_fiat(self, capsys):
        assert main(["pair", "XBT", "EUR"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "XXBTZEUR"

    def test_same_class(self, capsys):
        assert main(["pair", "eth", "xbt"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "ETHXBT"

    def test_unknown_asset(self, capsys):
        assert main(["pair", "XBT", "DOGE"]) == EXIT_USAGE
        assert "DOGE" in capsys.readouterr().err

    def test_wrong_arity(self):
        assert main(["pair", "XBT"]) == EXIT_USAGE


@pytest.mark.unit
class TestApiCommand:
    """API call tests"""

    def test_public_call_prints_result(self, sent, capsys):
        assert main(["ticker", "pair=XXBTZEUR"]) == EXIT_OK

        client, api = sent[0]
        assert not client.has_credentials
        assert api.method == "Ticker"
        assert api.params == {"pair": "XXBTZEUR"}
        assert json.loads(capsys.readouterr().out) == {"unixtime": 1616492376}

    def test_private_call_with_keys_file(self, sent, keys_file, credentials):
        assert main(["--keys", str(keys_file), "--otp", "123456", "balance"]) == EXIT_OK

        client, api = sent[0]
        assert client.credentials == credentials
        assert api.otp == "123456"

    def test_public_call_with_otp(self, sent):
        assert main(["--otp", "123456", "time"]) == EXIT_OK

        _, api = sent[0]
        assert api.otp is None
        assert api.params == {"otp": "123456"}

    def test_private_call_with_env_keys(self, sent, monkeypatch, credentials):
        monkeypatch.setenv("KRAKEN_API_KEY", credentials.api_key)
        monkeypatch.setenv("KRAKEN_PRIVATE_KEY", credentials.private_key)

        assert main(["balance"]) == EXIT_OK
        assert sent[0][0].credentials == credentials

    def test_private_call_without_keys(self, capsys):
        assert main(["balance"]) == EXIT_USAGE
        assert "private API" in capsys.readouterr().err

    def test_missing_keys_file(self, tmp_path):
        assert main(["--keys", str(tmp_path / "missing.key"), "balance"]) == EXIT_USAGE

    def test_api_errors(self, sent, capsys):
        sent.response = ResponseValue(error=["EQuery:Unknown asset pair"], status_code=200)

        assert main(["ticker", "pair=FOO"]) == EXIT_API_ERROR
        assert "EQuery:Unknown asset pair" in capsys.readouterr().err

    def test_request_failure(self, monkeypatch, capsys):
        def failing_send(self, api, result_type=None):
            raise RequestError("connection refused")

        monkeypatch.setattr(BlockingClient, "send", failing_send)

        assert main(["time"]) == EXIT_API_ERROR
        assert "connection refused" in capsys.readouterr().err

    def test_unknown_method(self):
        assert main(["moon"]) == EXIT_USAGE

    def test_bad_param(self):
        assert main(["ticker", "XXBTZEUR"]) == EXIT_USAGE

    def test_invalid_user_agent(self):
        assert main(["--user-agent", "bad\tagent\x01", "time"]) == EXIT_USAGE

    def test_invalid_log_level(self):
        assert main(["--log-level", "chatty", "time"]) == EXIT_USAGE


@pytest.mark.unit
class TestConfigurationErrors:
    """Invalid settings exit with the usage code"""

    def test_invalid_timeout(self, monkeypatch, capsys):
        monkeypatch.setattr(KrakenConfig, "TIMEOUT", "abc")

        assert main(["pair", "XBT", "EUR"]) == EXIT_USAGE
        assert "KRAKEN_TIMEOUT" in capsys.readouterr().err

    def test_invalid_timeout_from_environment(self):
        """A bad KRAKEN_TIMEOUT neither breaks the import nor the exit code"""
        root = Path(__file__).resolve().parents[3]
        env = {**os.environ, "KRAKEN_TIMEOUT": "abc", "PYTHONPATH": str(root), "PYTHONIOENCODING": "utf-8"}

        result = subprocess.run(
            [sys.executable, "-m", "kraken_rest", "pair", "XBT", "EUR"],
            cwd=root, env=env, capture_output=True, encoding="utf-8", timeout=60,
        )

        assert result.returncode == EXIT_USAGE
        assert "Traceback" not in result.stderr
        assert "KRAKEN_TIMEOUT" in result.stderr
