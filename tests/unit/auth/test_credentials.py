"""
Tests for the Credentials key pair.
"""
import pytest

from kraken_rest.auth.credentials import Credentials
from kraken_rest.exceptions import InvalidKeyError


@pytest.mark.unit
class TestCredentialsRead:
    """Credentials.read tests"""

    def test_read_two_line_file(self, tmp_path):
        """First line is the API key, second line the private key"""
        path = tmp_path / "kraken.key"
        path.write_text("<api_key>\n<private_key>", encoding="utf-8")

        credentials = Credentials.read(path)

        assert credentials.api_key == "<api_key>"
        assert credentials.private_key == "<private_key>"

    def test_read_accepts_str_path_and_trailing_newline(self, keys_file, credentials):
        """A trailing newline does not count as a line"""
        assert Credentials.read(str(keys_file)) == credentials

    def test_read_uses_last_two_lines(self, tmp_path):
        """Extra leading lines are ignored"""
        path = tmp_path / "kraken.key"
        path.write_text("# my keys\napi\nc2VjcmV0\n", encoding="utf-8")

        credentials = Credentials.read(path)

        assert credentials.api_key == "api"
        assert credentials.private_key == "c2VjcmV0"

    @pytest.mark.parametrize("content", [
        "api\nc2VjcmV0\n\n",
        "api\nc2VjcmV0\n\n\n",
        "api\r\nc2VjcmV0\r\n\r\n",
    ])
    def test_read_ignores_trailing_blank_lines(self, tmp_path, content):
        """Blank lines after the private key do not shift the key pair"""
        path = tmp_path / "kraken.key"
        path.write_bytes(content.encode("utf-8"))

        credentials = Credentials.read(path)

        assert credentials.api_key == "api"
        assert credentials.private_key == "c2VjcmV0"

    def test_read_single_line_fails(self, tmp_path):
        """A file with one key is malformed"""
        path = tmp_path / "kraken.key"
        path.write_text("only-one-key\n", encoding="utf-8")

        with pytest.raises(InvalidKeyError) as exc_info:
            Credentials.read(path)

        assert "key not found" in str(exc_info.value)

    def test_read_empty_file_fails(self, tmp_path):
        """An empty file is malformed"""
        path = tmp_path / "kraken.key"
        path.write_text("", encoding="utf-8")

        with pytest.raises(InvalidKeyError):
            Credentials.read(path)

    def test_read_missing_file_fails(self, tmp_path):
        """A missing file is a key error, not an OSError"""
        with pytest.raises(InvalidKeyError):
            Credentials.read(tmp_path / "missing.key")

    def test_read_blank_private_key_fails(self, tmp_path):
        """Blank lines are not keys"""
        path = tmp_path / "kraken.key"
        path.write_text("api\n \n", encoding="utf-8")

        with pytest.raises(InvalidKeyError):
            Credentials.read(path)


@pytest.mark.unit
class TestCredentialsValidation:
    """Key validation tests"""

    def test_control_character_rejected(self):
        """Keys travel as header values"""
        with pytest.raises(InvalidKeyError):
            Credentials(api_key="api\rkey", private_key="c2VjcmV0")

    def test_non_ascii_rejected(self):
        with pytest.raises(InvalidKeyError):
            Credentials(api_key="clé", private_key="c2VjcmV0")

    def test_is_immutable(self, credentials):
        with pytest.raises(AttributeError):
            credentials.api_key = "other"

    def test_repr_hides_private_key(self, credentials):
        assert credentials.private_key not in repr(credentials)
        assert credentials.api_key in repr(credentials)


@pytest.mark.unit
class TestCredentialsKeys:
    """Key decoding and environment loading"""

    def test_private_key_bytes_decodes_base64(self):
        credentials = Credentials(api_key="api", private_key="c2VjcmV0")

        assert credentials.private_key_bytes() == b"secret"

    def test_private_key_bytes_rejects_bad_base64(self):
        credentials = Credentials(api_key="api", private_key="###")

        with pytest.raises(InvalidKeyError):
            credentials.private_key_bytes()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("KRAKEN_API_KEY", "env-api")
        monkeypatch.setenv("KRAKEN_PRIVATE_KEY", "c2VjcmV0")

        credentials = Credentials.from_env()

        assert credentials.api_key == "env-api"
        assert credentials.private_key_bytes() == b"secret"

    def test_from_env_requires_both_keys(self, monkeypatch):
        monkeypatch.setenv("KRAKEN_API_KEY", "env-api")
        monkeypatch.delenv("KRAKEN_PRIVATE_KEY", raising=False)

        with pytest.raises(InvalidKeyError):
            Credentials.from_env()
